from itertools import islice

from click import command, argument, option, echo

from ._helper import RANGE, fmt, bad_parameter
from .plugin import CliModule
from ..api import Range, InvalidArgument
from ..util.config import CONFIG


def plugin_path() -> str:
    return 'core.cli.query'


def cli_module() -> CliModule:
    return CliModule(name='query_cli', commands=[__info, __list, __contains, __nth])


@command("info", help="Show the properties of a range")
@argument("rng", type=RANGE, metavar="RANGE")
def __info(rng: Range):
    rows = [
        ("range", str(rng)),
        ("packed", rng.unpack()),
        ("empty", rng.is_empty()),
        ("single", rng.is_single()),
        ("size", rng.size()),
        ("first", rng.first()),
        ("last", rng.last()),
        ("min", rng.min()),
        ("max", rng.max()),
        ("sum", rng.sum()),
        ("any even", rng.any_even()),
        ("any odd", rng.any_odd()),
        ("all even", rng.all_even()),
        ("all odd", rng.all_odd()),
    ]

    width = max(len(key) for key, _ in rows)

    for key, value in rows:
        echo(f"{key:<{width}}  {fmt(value)}")


@command("list", help="Print the values of a range, one per line")
@argument("rng", type=RANGE, metavar="RANGE")
@option("--limit", type=int, default=None,
        help="The maximum number of values to print, 0 for no limit (default: cli.list.limit or 1000)")
def __list(rng: Range, limit):
    if limit is None:
        limit = CONFIG.get_int("cli.list.limit", 1000)

    values = rng.gen() if limit <= 0 else islice(rng.gen(), limit)

    for value in values:
        echo(value)

    if 0 < limit < rng.size():
        echo(f"... truncated to {limit} of {rng.size()} values", err=True)


@command("contains", help="Check whether values are part of a range")
@argument("rng", type=RANGE, metavar="RANGE")
@argument("values", type=int, nargs=-1, required=True)
def __contains(rng: Range, values):
    for value in values:
        echo(f"{value} {fmt(value in rng)}")


@command("nth", help="Print the n-th (0-based) value of a range")
@argument("rng", type=RANGE, metavar="RANGE")
@argument("n", type=int)
def __nth(rng: Range, n: int):
    try:
        echo(fmt(rng.nth(n)))
    except InvalidArgument as e:
        raise bad_parameter(e, "N")
