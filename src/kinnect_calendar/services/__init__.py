"""Presentation-facing services built on the calendar core."""

from .paging import PagerState, PageUnit, clamp_day, days_in_range

__all__ = ["PageUnit", "PagerState", "clamp_day", "days_in_range"]
