from logging import NOTSET, DEBUG, INFO, getLogger

from click import group, option, pass_context, Group

from .plugin import install
from ..util.config import CONFIG
from ..util.logging import configure

_logger = getLogger(__name__)

CORE_MODULES = [".cli.query", ".cli.relations", ".cli.transform", ".cli.dump"]


def load_main() -> Group:
    @group(help="""Evaluate integer ranges given as LOWER..UPPER or LOWER..UPPER//STEP.

    Ranges with a negative lower bound must follow a -- separator, e.g. intrange info -- -5..5//2""")
    @option(
        "-v",
        count=True,
        help="""Set logging to a higher level (-vv or -vvv for even more logging)"""
    )
    @pass_context
    def main(ctx, v):
        ctx.ensure_object(dict)

        if v >= 3:
            configure(NOTSET)
        elif v == 2:
            configure(DEBUG)
        elif v == 1:
            configure(INFO)
        else:
            configure()

    installed = set()

    for mod in CORE_MODULES + CONFIG.get_list("modules.import").as_list():
        install(mod, main, installed)

    return main


def run():
    load_main()(prog_name="intrange")
