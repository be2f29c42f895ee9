from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import Callable, List, Optional, Sequence, Union

from ..domain import CalendarContext, Day, Month
from ..utils.ring_buffer import RingBuffer

logger = logging.getLogger(__name__)

Page = Union[Day, Month]


class PageUnit(str, Enum):
    DAY = "day"
    MONTH = "month"


class PagerState:
    """Page-turning state for a prev/current/next pager backed by a ring buffer.

    The anchor is pinned to midday so day arithmetic never drifts across a
    midnight boundary. After every shift the pager re-centres, so the page the
    user lands on becomes the centre slot.
    """

    def __init__(
        self,
        anchor: datetime,
        context: CalendarContext,
        unit: PageUnit = PageUnit.DAY,
        size: int = 3,
    ) -> None:
        self.context = context
        self.unit = PageUnit(unit)
        self.anchor = context.normalized(anchor, hour=12, minute=0)
        self.buffer: RingBuffer[Page] = RingBuffer(self.anchor, size, self._generator())
        self.current_page_index = self.buffer.center_index

    def _generator(self) -> Callable[[int], Page]:
        if self.unit is PageUnit.MONTH:
            month = Month.containing(self.anchor, self.context)
            return month.adding
        day = Day(self.anchor, self.context)
        return day.adding

    @property
    def center_offset(self) -> int:
        return self.buffer.center_offset

    @property
    def current(self) -> Page:
        return self.buffer.center_item

    def page(self, index: int) -> Page:
        return self.buffer.item(index)

    def pages(self) -> List[Page]:
        return self.buffer.items()

    def handle_page_change(self, new_index: int, old_index: int) -> None:
        delta = self.buffer.shift_delta_for_index_change(old_index, new_index)
        if delta is None:
            self.current_page_index = self.buffer.clamp_index(new_index)
            return
        self.buffer.move(delta)
        self.current_page_index = self.buffer.center_index
        logger.debug("Pager shifted by %+d %s(s), offset now %d", delta, self.unit.value, self.center_offset)

    def jump(self, delta: int) -> None:
        """Move the window by ``delta`` pages without a page-change event."""
        self.buffer.move(delta)
        self.current_page_index = self.buffer.center_index


def days_in_range(start: Day, end: Day) -> List[Day]:
    """Every day from the earlier to the later of ``start`` and ``end``, inclusive."""

    lower, upper = min(start, end), max(start, end)
    days = [lower]
    current = lower
    while current < upper:
        current = current.next
        days.append(current)
    return days


def clamp_day(candidate: Day, days: Sequence[Day]) -> Optional[Day]:
    if not days:
        return None
    first, last = days[0], days[-1]
    if candidate < first:
        return first
    if candidate > last:
        return last
    return candidate


__all__ = ["Page", "PageUnit", "PagerState", "clamp_day", "days_in_range"]
