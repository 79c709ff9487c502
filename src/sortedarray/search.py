from __future__ import annotations

from typing import Sequence

from .ordering import Comparator

# returned when the sequence is empty and no comparison took place
NOT_SEARCHED = (-1, -2)


def bin_search(a: Sequence[str], value: str, cmp: Comparator) -> tuple[int, int]:
    """
    Binary search for `value` in the sorted sequence `a`.

    Returns (index, result). result == 0 means a[index] equals value.
    Otherwise index is the last probed position and result is
    cmp(value, a[index]), which is enough to pick an insertion slot.
    """
    if not a:
        return NOT_SEARCHED
    lo = 0
    hi = len(a) - 1
    mid = 0
    res = -2
    while lo <= hi:
        mid = (lo + hi) // 2
        res = cmp(value, a[mid])
        if res < 0:
            hi = mid - 1
        elif res > 0:
            lo = mid + 1
        else:
            return mid, res
    return mid, res

