from typing import Any, Iterator, Union

from .range import Range


class MutableRange:
    """
    A mutable cell holding a range.

    The in-place operations replace the held range with the result of the corresponding transformation of
    :class:`Range` and therefore follow the same rules and raise the same errors.
    """

    def __init__(self, lower: int, upper: int, step: int = 0):
        self.__value = Range(lower, upper, step)

    @staticmethod
    def of(value: Range) -> 'MutableRange':
        cell = MutableRange(0, 0)
        cell.set(value)
        return cell

    @property
    def value(self) -> Range:
        return self.__value

    def set(self, value: Range):
        if not isinstance(value, Range):
            raise TypeError(f"Expected a Range, got {type(value)}")

        self.__value = value

    def freeze(self) -> Range:
        return self.__value

    def shift(self, steps: int):
        self.__value = self.__value.shift(steps)

    def take(self, n: int):
        self.__value = self.__value.take(n)

    def skip(self, n: int):
        self.__value = self.__value.skip(n)

    def rev(self):
        self.__value = self.__value.rev()

    def scale(self, factor: int):
        self.__value = self.__value.scale(factor)

    def neg(self):
        self.__value = self.__value.neg()

    def add(self, other: Union[Range, 'MutableRange']):
        self.__value = self.__value.add(_unwrap(other))

    def sub(self, other: Union[Range, 'MutableRange']):
        self.__value = self.__value.sub(_unwrap(other))

    def __iter__(self) -> Iterator[int]:
        return iter(self.__value)

    def __len__(self) -> int:
        return len(self.__value)

    def __contains__(self, value: Any) -> bool:
        return value in self.__value

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, (Range, MutableRange)):
            return self.__value == _unwrap(other)

        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"MutableRange({self.__value.lower}, {self.__value.upper}, {self.__value.step})"

    def __str__(self) -> str:
        return str(self.__value)


def _unwrap(value: Union[Range, MutableRange]) -> Range:
    return value.value if isinstance(value, MutableRange) else value
