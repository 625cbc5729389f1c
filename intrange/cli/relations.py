from click import command, argument, echo

from ._helper import RANGE, fmt
from .plugin import CliModule
from ..api import Range
from ..util.number_theory import extended_gcd


def plugin_path() -> str:
    return 'core.cli.relations'


def cli_module() -> CliModule:
    return CliModule(name='relations_cli', commands=[__intersects, __includes, __egcd])


@command("intersects", help="Check whether two ranges have a value in common")
@argument("first", type=RANGE, metavar="RANGE")
@argument("second", type=RANGE, metavar="RANGE")
def __intersects(first: Range, second: Range):
    echo(fmt(first.intersects(second)))


@command("includes", help="Check whether all values of the second range are values of the first one")
@argument("first", type=RANGE, metavar="RANGE")
@argument("second", type=RANGE, metavar="RANGE")
def __includes(first: Range, second: Range):
    echo(fmt(first.includes(second)))


@command("egcd", help="Print gcd(A, B) and coefficients u, v such that A * u + B * v = gcd(A, B)")
@argument("a", type=int)
@argument("b", type=int)
def __egcd(a: int, b: int):
    gcd, u, v = extended_gcd(a, b)
    echo(f"{gcd} {u} {v}")
