from typing import Iterator, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .range import Range


class RangeIterator(Iterator[int]):
    """
    A restartable iterator over the values of a range.

    Besides the iterator protocol, it exposes the current value, its 0-based position (the key) and allows to rewind
    to the first value of the range.
    """

    def __init__(self, _range: 'Range'):
        self.__lower = _range.lower
        self.__upper = _range.upper
        self.__step = _range.step
        self.__empty = _range.is_empty()
        self.__size = _range.size()

        self.__current = self.__lower
        self.__key = 0

    @property
    def current(self) -> Optional[int]:
        return self.__current if self.valid() else None

    @property
    def key(self) -> int:
        return self.__key

    def valid(self) -> bool:
        if self.__empty:
            return False
        elif self.__step > 0:
            return self.__current <= self.__upper
        else:
            return self.__current >= self.__upper

    def rewind(self):
        self.__current = self.__lower
        self.__key = 0

    def __iter__(self) -> 'RangeIterator':
        return self

    def __next__(self) -> int:
        if not self.valid():
            raise StopIteration()

        value = self.__current
        self.__current += self.__step
        self.__key += 1

        return value

    def __length_hint__(self) -> int:
        return max(self.__size - self.__key, 0)
