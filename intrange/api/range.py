from collections.abc import Sequence
from logging import getLogger
from typing import Optional, List, Callable, TypeVar, Iterator, Tuple, Any

import numpy as np

from . import notation
from .errors import InvalidArgument
from .iteration import RangeIterator
from ..util.number_theory import extended_gcd, ceil_div

T = TypeVar('T')
A = TypeVar('A')

_logger = getLogger(__name__)


def _require_range(other: Any, operation: str):
    if not isinstance(other, Range):
        raise TypeError(f"{operation} expects a Range, got {type(other)}")


class Range:
    """
    An arithmetic progression of integers with inclusive bounds.

    The range enumerates ``lower, lower + step, lower + 2 * step, ...`` for as long as the values do not pass
    ``upper`` in the direction of ``step``. A range is empty if its bounds point in the opposite direction of its
    step, while a range with equal bounds always holds exactly one value.

    Ranges are values: every transformation returns a new instance. Equality compares bounds and steps, so
    ``Range(1, 9, 2) != Range(1, 10, 2)`` although both enumerate 1, 3, 5, 7 and 9.
    """
    __slots__ = ('__lower', '__upper', '__step', '__empty')

    __empty_instance: Optional['Range'] = None

    def __init__(self, lower: int, upper: int, step: int = 0):
        """
        :param lower: the lower bound, i.e. the first value of the range
        :param upper: the upper bound. It is only enumerated if the step reaches it exactly.
        :param step: the distance between consecutive values. If 0, it defaults to 1 if lower <= upper and to -1
            otherwise.
        """
        if step == 0:
            step = 1 if lower <= upper else -1

        self.__lower = lower
        self.__upper = upper
        self.__step = step
        self.__empty = (lower > upper and step > 0) or (lower < upper and step < 0)

    @classmethod
    def empty(cls) -> 'Range':
        if Range.__empty_instance is None:
            Range.__empty_instance = Range(0, 1, -1)

        return Range.__empty_instance

    @staticmethod
    def from_packed(packed: Sequence) -> 'Range':
        """
        Constructs a range from a sequence of the form [lower, upper, step].
        """
        if isinstance(packed, (str, bytes)) or not isinstance(packed, Sequence) or len(packed) != 3:
            raise InvalidArgument(f"{packed!r} is not a valid packed range, expected [lower, upper, step]")

        if any(not isinstance(it, int) or isinstance(it, bool) for it in packed):
            raise InvalidArgument(f"{packed!r} is not a valid packed range, all elements must be integers")

        if packed[2] == 0:
            _logger.debug("Rejecting packed range %r with an explicit zero step", packed)
            raise InvalidArgument(f"{packed!r} is not a valid packed range, the step must not be 0")

        return Range(packed[0], packed[1], packed[2])

    @staticmethod
    def from_ex_fmt(text: str) -> 'Range':
        """
        Constructs a range from the notation ``LOWER..UPPER`` or ``LOWER..UPPER//STEP``.
        """
        lower, upper, step = notation.parse(text)
        return Range(lower, upper, step)

    @property
    def lower(self) -> int:
        return self.__lower

    @property
    def upper(self) -> int:
        return self.__upper

    @property
    def step(self) -> int:
        return self.__step

    def unpack(self) -> List[int]:
        return [self.__lower, self.__upper, self.__step]

    def is_empty(self) -> bool:
        return self.__empty

    def is_single(self) -> bool:
        return self.__upper == self.__lower or self.__lower == self.last()

    def size(self) -> int:
        if self.__empty:
            return 0

        # the bounds and the step share their sign here, so this truncates towards zero
        return abs(self.__upper - self.__lower) // abs(self.__step) + 1

    def first(self) -> Optional[int]:
        return None if self.__empty else self.__lower

    def last(self) -> Optional[int]:
        """
        :return: the last enumerated value, which differs from the upper bound if the step does not reach it exactly
        """
        if self.__empty:
            return None

        return self.__lower + (self.size() - 1) * self.__step

    def min(self) -> Optional[int]:
        if self.__empty:
            return None

        last = self.last()
        return self.__lower if self.__lower <= last else last

    def max(self) -> Optional[int]:
        if self.__empty:
            return None

        last = self.last()
        return self.__lower if self.__lower >= last else last

    def nth(self, n: int) -> Optional[int]:
        """
        :param n: the 0-based index
        :return: the n-th value of the range or None if the range has no more than n values
        """
        if n < 0:
            raise InvalidArgument(f"Index {n} is out of bounds, it must be >= 0")

        if self.__empty:
            return None

        value = self.__lower + self.__step * n

        if (self.__step > 0 and value > self.__upper) or (self.__step < 0 and value < self.__upper):
            return None

        return value

    def contains(self, value: int) -> bool:
        if self.__empty:
            return False

        low, high = (self.__lower, self.__upper) if self.__lower <= self.__upper else (self.__upper, self.__lower)

        if value < low or value > high:
            return False

        return abs(self.__step) == 1 or (value - self.__lower) % self.__step == 0

    def any_even(self) -> bool:
        if self.is_single():
            return self.__lower % 2 == 0

        return not self.__empty and (self.__lower % 2 == 0 or self.__step % 2 == 1)

    def any_odd(self) -> bool:
        if self.is_single():
            return self.__lower % 2 == 1

        return not self.__empty and (self.__lower % 2 == 1 or self.__step % 2 == 1)

    def all_even(self) -> bool:
        if self.is_single():
            return self.__lower % 2 == 0

        return not self.__empty and self.__lower % 2 == 0 and self.__step % 2 == 0

    def all_odd(self) -> bool:
        if self.is_single():
            return self.__lower % 2 == 1

        return not self.__empty and self.__lower % 2 == 1 and self.__step % 2 == 0

    def includes(self, other: 'Range') -> bool:
        """
        Checks whether the values of the other range are a subset of the values of this range.

        An empty range only includes other empty ranges, and every range includes an empty range.
        """
        _require_range(other, "includes")

        if self.__empty:
            return other.__empty
        elif other.__empty:
            return True
        elif other.is_single():
            return self.contains(other.__lower)
        elif abs(self.__step) == 1:
            return self.contains(other.__lower) and self.contains(other.last())
        elif other.__step % self.__step != 0:
            return False
        elif not self.contains(other.__lower):
            return False
        elif abs(self.__step) == abs(other.__step):
            return self.contains(other.last())

        return abs(self.__step) < abs(other.__step) and other.size() <= self.size()

    def intersects(self, other: 'Range') -> bool:
        """
        Checks whether both ranges have at least one value in common.

        Both ranges are restated in ascending order. A common value ``lower_1 + x * step_1 == lower_2 + y * step_2``
        is a solution of the linear diophantine equation ``-step_1 * x + step_2 * y == lower_1 - lower_2``, which has
        integer solutions only if the gcd of the steps divides the offset. The smallest solution with non-negative x
        and y is the first common value past both lower bounds, so the ranges intersect iff it does not pass either
        upper bound.
        """
        _require_range(other, "intersects")

        if self.__empty or other.__empty:
            return False

        lower_1, upper_1, step_1 = self.__normalized_bag()
        lower_2, upper_2, step_2 = other.__normalized_bag()

        if lower_1 > upper_2 or lower_2 > upper_1:
            return False
        elif step_1 == 1 and step_2 == 1:
            return True

        offset = lower_1 - lower_2
        gcd, u, v = extended_gcd(-step_1, step_2)

        if offset % gcd != 0:
            _logger.debug("%s and %s: gcd %d of the steps does not divide the offset %d", self, other, gcd, offset)
            return False

        x_0, y_0 = u * (offset // gcd), v * (offset // gcd)
        dx, dy = step_2 // gcd, step_1 // gcd

        k = max(ceil_div(-x_0, dx), ceil_div(-y_0, dy))
        x, y = x_0 + k * dx, y_0 + k * dy

        _logger.debug("%s and %s: first common candidate is %d", self, other, lower_1 + x * step_1)

        return lower_1 + x * step_1 <= upper_1 and lower_2 + y * step_2 <= upper_2

    def shift(self, steps: int) -> 'Range':
        return Range(self.__lower + self.__step * steps, self.__upper + self.__step * steps, self.__step)

    def take(self, n: int) -> 'Range':
        """
        Truncates the range after the n-th step, i.e. the upper bound becomes ``lower + n * step`` unless that passes
        the last value of this range.
        """
        if n < 0:
            raise InvalidArgument(f"Can't take {n} elements, n must be >= 0")

        if self.__empty:
            return self
        elif n == 0:
            return Range.empty()

        last = self.last()
        upper = self.__lower + n * self.__step

        if (self.__step > 0 and upper > last) or (self.__step < 0 and upper < last):
            upper = last

        return Range(self.__lower, upper, self.__step)

    def skip(self, n: int) -> 'Range':
        return Range(self.__lower + n * self.__step, self.__upper, self.__step)

    def rev(self) -> 'Range':
        return Range(self.__upper, self.__lower, -self.__step)

    def scale(self, factor: int) -> 'Range':
        return Range(self.__lower * factor, self.__upper * factor, self.__step * factor)

    def neg(self) -> 'Range':
        return Range(-self.__lower, -self.__upper, -self.__step)

    def add(self, other: 'Range') -> 'Range':
        _require_range(other, "add")

        if self.__empty:
            return other
        elif other.__empty:
            return self

        return Range(self.__lower + other.__lower, self.__upper + other.__upper, self.__step + other.__step)

    def sub(self, other: 'Range') -> 'Range':
        _require_range(other, "sub")

        if self.__empty:
            return other
        elif other.__empty:
            return self

        return Range(self.__lower - other.__lower, self.__upper - other.__upper, self.__step - other.__step)

    def map(self, f: Callable[[int], T]) -> List[T]:
        return [f(value) for value in self.gen()]

    def reduce(self, initial: A, f: Callable[[A, int], A]) -> A:
        acc = initial

        for value in self.gen():
            acc = f(acc, value)

        return acc

    def sum(self) -> int:
        if self.__empty:
            return 0

        return self.size() * (self.__lower + self.last()) // 2

    def to_list(self) -> List[int]:
        return list(self.gen())

    def to_array(self) -> np.ndarray:
        if self.__empty:
            return np.empty(0, dtype=np.int64)

        return np.arange(self.__lower, self.last() + self.__step, self.__step, dtype=np.int64)

    def gen(self) -> Iterator[int]:
        if self.__empty:
            return

        value = self.__lower

        if self.__step > 0:
            while value <= self.__upper:
                yield value
                value += self.__step
        else:
            while value >= self.__upper:
                yield value
                value += self.__step

    def equals_to(self, other: 'Range') -> bool:
        _require_range(other, "equals_to")

        return self.__lower == other.__lower and self.__upper == other.__upper and self.__step == other.__step

    def __normalized_bag(self) -> Tuple[int, int, int]:
        if self.__lower <= self.__upper:
            return self.__lower, self.__upper, abs(self.__step)

        return self.last(), self.__lower, -self.__step

    def __iter__(self) -> RangeIterator:
        return RangeIterator(self)

    def __reversed__(self) -> Iterator[int]:
        if self.__empty:
            return iter(())

        return Range(self.last(), self.__lower, -self.__step).gen()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool) and self.contains(value)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Range):
            return self.equals_to(other)

        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.__lower, self.__upper, self.__step))

    def __neg__(self) -> 'Range':
        return self.neg()

    def __add__(self, other: 'Range') -> 'Range':
        if not isinstance(other, Range):
            return NotImplemented

        return self.add(other)

    def __sub__(self, other: 'Range') -> 'Range':
        if not isinstance(other, Range):
            return NotImplemented

        return self.sub(other)

    def __mul__(self, factor: int) -> 'Range':
        if not isinstance(factor, int):
            return NotImplemented

        return self.scale(factor)

    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"Range({self.__lower}, {self.__upper}, {self.__step})"

    def __str__(self) -> str:
        return notation.format(self.__lower, self.__upper, self.__step)
