from __future__ import annotations

from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


def safe_get(items: Sequence[T], index: int, default: Optional[T] = None) -> Optional[T]:
    """``items[index]`` when in bounds, else ``default``. Negative indexes are out of bounds."""
    if 0 <= index < len(items):
        return items[index]
    return default
