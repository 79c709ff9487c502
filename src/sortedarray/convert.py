from __future__ import annotations

import re

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)


def to_int(value: str) -> int:
    """Integer value of `value`, or 0 when it is not a plain integer literal."""
    if not _INT_RE.fullmatch(value):
        return 0
    return int(value)
