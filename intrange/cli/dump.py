from click import command, argument, option, echo, Path, IntRange

from ._helper import RANGE
from .plugin import CliModule
from ..api import Range
from ..util.config import CONFIG
from ..util.fs import write_lines


def plugin_path() -> str:
    return 'core.cli.dump'


def cli_module() -> CliModule:
    return CliModule(name='dump_cli', commands=[__dump])


@command("dump", help="Write all values of a range to a file, one per line")
@argument("rng", type=RANGE, metavar="RANGE")
@argument("target", type=Path(dir_okay=False, writable=True))
@option("--chunk-size", type=IntRange(min=1), default=None,
        help="The number of lines between progress updates (default: cli.dump.chunk_size or 4096)")
def __dump(rng: Range, target: str, chunk_size):
    if chunk_size is None:
        chunk_size = CONFIG.get_int("cli.dump.chunk_size", 4096)

    written = write_lines(rng.gen(), target, total=rng.size(), chunk_size=chunk_size)
    echo(f"Wrote {written} values to {target}")
