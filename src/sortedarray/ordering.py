from __future__ import annotations

from typing import Callable

Comparator = Callable[[str, str], int]


def compare_strings(one: str, other: str) -> int:
    # code point order, same as byte order for utf-8
    if one < other:
        return -1
    if one > other:
        return 1
    return 0


def compare_strings_reversed(one: str, other: str) -> int:
    return compare_strings(other, one)
