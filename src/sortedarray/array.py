from __future__ import annotations

import logging
import random
from contextlib import ExitStack
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Iterator, Optional

from .convert import to_int
from .ordering import Comparator, compare_strings
from .search import bin_search
from .sync import DEFAULT_MODE, Mode, new_lock

logger = logging.getLogger(__name__)


class SortedStringArray:
    """
    A list of strings kept in ascending comparator order.

    In Mode.SAFE every call is guarded by a reader-writer lock and readers
    get copies. In Mode.UNSAFE nothing is locked and slice() hands out the
    backing list itself, which is only valid until the next mutation.

    Out-of-range indices are the caller's bug and raise IndexError like a
    plain list would.
    """

    def __init__(
        self,
        capacity: int = 0,
        mode: Mode = DEFAULT_MODE,
        comparator: Optional[Comparator] = None,
        rng: Optional[random.Random] = None,
    ):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        # python lists grow on demand, the hint is only recorded
        self.capacity = capacity
        self._mode = mode
        self._mu = new_lock(mode)
        self._cmp: Comparator = comparator if comparator is not None else compare_strings
        self._key = cmp_to_key(self._cmp)
        self._rng = rng if rng is not None else random
        self._unique = False
        self._array: list[str] = []

    @classmethod
    def from_list(
        cls,
        values: Iterable[str],
        mode: Mode = DEFAULT_MODE,
        comparator: Optional[Comparator] = None,
        rng: Optional[random.Random] = None,
    ) -> "SortedStringArray":
        """Take ownership of `values` (sorted in place when it is a list)."""
        a = cls(mode=mode, comparator=comparator, rng=rng)
        a._array = values if isinstance(values, list) else list(values)
        a._sort()
        return a

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def comparator(self) -> Comparator:
        return self._cmp

    @property
    def is_unique(self) -> bool:
        return self._unique

    # helpers below expect the caller to hold the lock

    def _sort(self) -> None:
        if self._cmp is compare_strings:
            self._array.sort()
        else:
            self._array.sort(key=self._key)

    def _dedupe(self) -> int:
        a = self._array
        if len(a) < 2:
            return 0
        kept = [a[0]]
        for value in a[1:]:
            if self._cmp(kept[-1], value) != 0:
                kept.append(value)
        removed = len(a) - len(kept)
        if removed:
            a[:] = kept
        return removed

    def _normalize(self) -> None:
        self._sort()
        if self._unique:
            self._dedupe()

    # mutators

    def set_array(self, values: Iterable[str]) -> "SortedStringArray":
        """Replace the contents. Views handed out earlier no longer reflect the array."""
        with self._mu.write():
            self._array = values if isinstance(values, list) else list(values)
            self._normalize()
            logger.debug("array replaced, %d elements", len(self._array))
        return self

    def sort(self) -> "SortedStringArray":
        with self._mu.write():
            self._normalize()
        return self

    def add(self, *values: str) -> "SortedStringArray":
        if not values:
            return self
        with self._mu.write():
            for value in values:
                index, res = bin_search(self._array, value, self._cmp)
                if self._unique and res == 0:
                    continue
                if index < 0:
                    self._array.append(value)
                    continue
                if res > 0:
                    index += 1
                self._array.insert(index, value)
        return self

    def remove(self, index: int) -> str:
        with self._mu.write():
            if index == len(self._array) - 1:
                return self._array.pop()
            return self._array.pop(index)

    def pop_left(self) -> str:
        with self._mu.write():
            return self._array.pop(0)

    def pop_right(self) -> str:
        with self._mu.write():
            return self._array.pop()

    def set_unique(self, unique: bool) -> "SortedStringArray":
        with self._mu.write():
            old = self._unique
            self._unique = unique
            if unique and not old:
                removed = self._dedupe()
                logger.debug("uniqueness enabled, removed %d duplicates", removed)
        return self

    def unique(self) -> "SortedStringArray":
        """Drop adjacent elements that compare equal, keeping the first one."""
        with self._mu.write():
            self._dedupe()
        return self

    def clear(self) -> "SortedStringArray":
        with self._mu.write():
            if self._array:
                self._array = []
        return self

    def merge(self, other: "SortedStringArray") -> "SortedStringArray":
        """
        Append the elements of `other` and re-sort.

        Locks of distinct arrays are always taken in id() order, so two
        threads merging a into b and b into a cannot deadlock.
        """
        if other is self:
            with self._mu.write():
                self._array.extend(self._array[:])
                self._normalize()
            return self

        with ExitStack() as stack:
            if id(self) < id(other):
                stack.enter_context(self._mu.write())
                stack.enter_context(other._mu.read())
            else:
                stack.enter_context(other._mu.read())
                stack.enter_context(self._mu.write())
            logger.debug("merging %d elements into %d", len(other._array), len(self._array))
            self._array.extend(other._array)
            self._normalize()
        return self

    # scoped access

    def lock_func(self, f: Callable[[list[str]], Any]) -> "SortedStringArray":
        """
        Run f(backing_list) under the write lock.

        f may change the list but must leave it sorted (or call sort()
        afterwards). Calling back into this array from f deadlocks in SAFE mode.
        """
        with self._mu.write():
            f(self._array)
        return self

    def rlock_func(self, f: Callable[[list[str]], Any]) -> "SortedStringArray":
        """Run f(backing_list) under the read lock. f must not modify the list."""
        with self._mu.read():
            f(self._array)
        return self

    # accessors

    def get(self, index: int) -> str:
        with self._mu.read():
            return self._array[index]

    def __getitem__(self, index: int) -> str:
        if not isinstance(index, int):
            raise TypeError(f"indices must be integers, not {type(index).__name__}")
        return self.get(index)

    def __len__(self) -> int:
        with self._mu.read():
            return len(self._array)

    def slice(self) -> list[str]:
        if not self._mu.is_safe:
            return self._array
        with self._mu.read():
            return self._array[:]

    def search(self, value: str) -> tuple[int, int]:
        """
        Returns (index, result): result 0 is an exact match at index, (-1, -2)
        means the array is empty, anything else is the last probe.
        """
        with self._mu.read():
            return bin_search(self._array, value, self._cmp)

    def contains(self, value: str) -> bool:
        return self.search(value)[1] == 0

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, str):
            return False
        return self.contains(value)

    def sum(self) -> int:
        with self._mu.read():
            return sum(to_int(v) for v in self._array)

    def clone(self, mode: Optional[Mode] = None) -> "SortedStringArray":
        """Copy into a new array. The copy keeps this array's mode unless `mode` is given."""
        with self._mu.read():
            array = self._array[:]
            unique = self._unique
        a = SortedStringArray(
            capacity=self.capacity,
            mode=self._mode if mode is None else mode,
            comparator=self._cmp,
            rng=self._rng,
        )
        a._array = array
        a._unique = unique
        return a

    def chunk(self, size: int) -> list[list[str]]:
        if size < 1:
            raise ValueError("size: cannot be less than 1")
        with self._mu.read():
            a = self._array
            return [a[i:i + size] for i in range(0, len(a), size)]

    def sub_slice(self, offset: int, size: int) -> list[str]:
        """
        Up to `size` elements starting at `offset`.

        An offset past the end gives an empty list. The result is always a
        new list, even in UNSAFE mode.
        """
        if offset < 0 or size < 0:
            raise ValueError(f"offset and size must be non-negative, got {offset}, {size}")
        with self._mu.read():
            if offset > len(self._array):
                return []
            return self._array[offset:offset + size]

    def rand(self, size: int) -> list[str]:
        """`size` elements picked at random without replacement, at most len()."""
        with self._mu.read():
            n = len(self._array)
            size = min(size, n)
            if size <= 0:
                return []
            return [self._array[i] for i in self._rng.sample(range(n), size)]

    def join(self, glue: str) -> str:
        with self._mu.read():
            return glue.join(self._array)

    def __iter__(self) -> Iterator[str]:
        return iter(self.slice())

    def __repr__(self) -> str:
        return f"SortedStringArray({self.slice()!r})"
