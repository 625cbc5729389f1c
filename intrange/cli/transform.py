from logging import getLogger
from typing import Tuple, Optional

from click import command, argument, option, echo, BadParameter

from ._helper import RANGE, bad_parameter
from .plugin import CliModule
from ..api import Range, MutableRange, InvalidArgument

_logger = getLogger(__name__)

UNARY_OPS = {
    'rev': MutableRange.rev,
    'neg': MutableRange.neg,
}

INT_OPS = {
    'shift': MutableRange.shift,
    'take': MutableRange.take,
    'skip': MutableRange.skip,
    'scale': MutableRange.scale,
}

RANGE_OPS = {
    'add': MutableRange.add,
    'sub': MutableRange.sub,
}


def plugin_path() -> str:
    return 'core.cli.transform'


def cli_module() -> CliModule:
    return CliModule(name='transform_cli', commands=[__transform])


def parse_op(op: str) -> Tuple[str, Optional[str]]:
    name, _, arg = op.partition(':')

    if name in UNARY_OPS:
        if arg:
            raise BadParameter(f"'{name}' takes no argument", param_hint="OPS")
        return name, None
    elif name in INT_OPS or name in RANGE_OPS:
        if not arg:
            raise BadParameter(f"'{name}' needs an argument, e.g. {name}:2", param_hint="OPS")
        return name, arg

    known = ', '.join(sorted(list(UNARY_OPS) + list(INT_OPS) + list(RANGE_OPS)))
    raise BadParameter(f"Unknown operation '{name}', expected one of {known}", param_hint="OPS")


def apply(cell: MutableRange, name: str, arg: Optional[str]):
    if name in UNARY_OPS:
        UNARY_OPS[name](cell)
    elif name in INT_OPS:
        try:
            n = int(arg)
        except ValueError as e:
            raise BadParameter(f"'{arg}' is not an integer", param_hint="OPS") from e

        INT_OPS[name](cell, n)
    else:
        try:
            other = Range.from_ex_fmt(arg)
        except InvalidArgument as e:
            raise bad_parameter(e, "OPS") from e

        RANGE_OPS[name](cell, other)


@command("transform", help="""Apply operations in order and print the resulting range.

OPS are rev, neg, shift:N, take:N, skip:N, scale:K, add:RANGE and sub:RANGE""")
@argument("rng", type=RANGE, metavar="RANGE")
@argument("ops", nargs=-1)
@option("--packed", is_flag=True, help="Print the result as [lower, upper, step]")
def __transform(rng: Range, ops, packed: bool):
    parsed = [parse_op(op) for op in ops]
    cell = MutableRange.of(rng)

    for name, arg in parsed:
        try:
            apply(cell, name, arg)
        except InvalidArgument as e:
            raise bad_parameter(e, "OPS") from e

        _logger.debug("%s%s -> %s", name, "" if arg is None else f":{arg}", cell)

    echo(cell.value.unpack() if packed else str(cell))
