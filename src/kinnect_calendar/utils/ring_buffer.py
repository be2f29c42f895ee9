from __future__ import annotations

from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """Fixed-size window over an unbounded sequence, centred on ``center_offset``.

    Nothing is stored: every slot is recomputed from ``calculate_item`` with
    its logical offset from the anchor, so memory stays constant however far
    the window moves.

    >>> buffer = RingBuffer(anchor=0, size=3, calculate_item=lambda offset: offset * 10)
    >>> [buffer.item(index) for index in range(3)]
    [-10, 0, 10]
    >>> buffer.move(1)
    >>> [buffer.item(index) for index in range(3)]
    [0, 10, 20]
    """

    def __init__(self, anchor: T, size: int, calculate_item: Callable[[int], T]) -> None:
        if size < 3 or size % 2 == 0:
            raise ValueError(f"Ring buffer size must be odd and >= 3, got {size}")
        self.anchor = anchor
        self._size = size
        self._calculate_item = calculate_item
        self._center_offset = 0

    @property
    def size(self) -> int:
        return self._size

    @property
    def center_offset(self) -> int:
        """Logical offset of the centre slot from the anchor."""
        return self._center_offset

    @property
    def min_index(self) -> int:
        return 0

    @property
    def max_index(self) -> int:
        return self._size - 1

    @property
    def center_index(self) -> int:
        return self._size // 2

    def __len__(self) -> int:
        return self._size

    def clamp_index(self, index: int) -> int:
        return max(self.min_index, min(self.max_index, index))

    def shift_delta_for_index_change(self, old_index: int, new_index: int) -> Optional[int]:
        """Window shift needed after the visible slot moved from ``old_index`` to ``new_index``.

        Landing on the first slot shifts back by one, landing on the last slot
        shifts forward by one; anything else needs no shift.
        """

        if old_index == new_index:
            return None
        clamped = self.clamp_index(new_index)
        if clamped == self.min_index:
            return -1
        if clamped == self.max_index:
            return 1
        return None

    def item(self, index: int) -> T:
        # Out-of-range slots are clamped to the nearest edge.
        index = self.clamp_index(index)
        return self._calculate_item(self._center_offset + index - self.center_index)

    @property
    def center_item(self) -> T:
        return self.item(self.center_index)

    def items(self) -> List[T]:
        return [self.item(index) for index in range(self._size)]

    def move(self, delta: int) -> None:
        if delta == 0:
            return
        self._center_offset += delta


__all__ = ["RingBuffer"]
