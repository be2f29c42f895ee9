from __future__ import annotations

from datetime import datetime

from ..domain import CalendarContext


def format_month_header(instant: datetime, context: CalendarContext) -> str:
    return context.to_local(instant).strftime("%B %Y")


def format_day_full(instant: datetime, context: CalendarContext) -> str:
    local = context.to_local(instant)
    return f"{local:%A}, {local:%B} {local.day}, {local.year}"


def format_time_short(instant: datetime, context: CalendarContext) -> str:
    local = context.to_local(instant)
    hour = local.hour % 12 or 12
    return f"{hour}:{local.minute:02d} {'AM' if local.hour < 12 else 'PM'}"


__all__ = ["format_day_full", "format_month_header", "format_time_short"]
