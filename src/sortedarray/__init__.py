from .array import SortedStringArray
from .ordering import Comparator, compare_strings, compare_strings_reversed
from .sync import Mode, ReadWriteLock, NoLock

__all__ = [
    "SortedStringArray",
    "Comparator",
    "compare_strings",
    "compare_strings_reversed",
    "Mode",
    "ReadWriteLock",
    "NoLock",
]
