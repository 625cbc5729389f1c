from .errors import InvalidArgument
from .iteration import RangeIterator
from .mutable import MutableRange
from .range import Range
