from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from typing import Any, List, Optional

import orjson

from .bootstrap import configure_logging
from .config import get_settings, weekday_index
from .core import CalendarStore, demo_entries
from .domain import CalendarContext, CalendarError, Month
from .utils.formatters import format_day_full, format_month_header, format_time_short

logger = logging.getLogger(__name__)


def _weekday_arg(raw: str) -> int:
    try:
        return weekday_index(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Kinnect calendar core command line interface.")
    parser.add_argument("--timezone", help="IANA timezone (defaults to KINNECT_TIMEZONE).")
    parser.add_argument("--first-weekday", type=_weekday_arg, help="First day of the week, e.g. monday or sunday.")
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of text.")
    parser.add_argument("--log-level", default=None)
    subparsers = parser.add_subparsers(dest="command", required=True)

    days_parser = subparsers.add_parser("days", help="List days with their demo entries.")
    days_parser.add_argument("--from", dest="start", default=None, help="ISO date or datetime.")
    days_parser.add_argument("--count", type=int, default=7)

    months_parser = subparsers.add_parser("months", help="List consecutive months.")
    months_parser.add_argument("--from", dest="start", default=None, help="ISO date or datetime.")
    months_parser.add_argument("--count", type=int, default=3)

    grid_parser = subparsers.add_parser("grid", help="Print the month grid containing a date.")
    grid_parser.add_argument("--from", dest="start", default=None, help="ISO date or datetime.")

    return parser


def _context(args: argparse.Namespace) -> CalendarContext:
    settings = get_settings().calendar
    first_weekday = settings.first_weekday if args.first_weekday is None else args.first_weekday
    return CalendarContext(timezone=args.timezone or settings.timezone, first_weekday=first_weekday)


def _start(raw: Optional[str], context: CalendarContext) -> datetime:
    if not raw:
        return context.to_instant(datetime.now(context.tzinfo))
    return context.to_instant(datetime.fromisoformat(raw))


def _emit(payload: Any) -> None:
    sys.stdout.write(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode() + "\n")


def _render_days(store: CalendarStore, start: datetime, count: int, context: CalendarContext, as_json: bool) -> None:
    agendas = store.days(start, count, context)
    if as_json:
        _emit([agenda.to_record() for agenda in agendas])
        return
    for agenda in agendas:
        print(format_day_full(agenda.day.start, context))
        if not agenda.entries:
            print("  (no entries)")
        for entry in agenda.entries:
            print(
                f"  {format_time_short(entry.start_date, context)}"
                f" - {format_time_short(entry.end_date, context)}  {entry.title}"
            )


def _render_months(months: List[Month], context: CalendarContext, as_json: bool) -> None:
    if as_json:
        _emit(
            [
                {
                    "year": month.year,
                    "month": month.month,
                    "start": month.start.isoformat(),
                    "end": month.end.isoformat(),
                    "number_of_days": month.number_of_days,
                }
                for month in months
            ]
        )
        return
    for month in months:
        print(f"{format_month_header(month.start, context)} ({month.number_of_days} days)")


def _render_grid(month: Month, context: CalendarContext, as_json: bool) -> None:
    rows = month.grid_weeks
    if as_json:
        _emit([[day.local_date.isoformat() for day in row] for row in rows])
        return
    print(format_month_header(month.start, context))
    for row in rows:
        cells = []
        for day in row:
            local = day.local_date
            label = f"{local.day:2d}" if local.month == month.month else " ."
            cells.append(label)
        print(" ".join(cells))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    logger.info("Kinnect calendar CLI starting: %s", args.command)

    try:
        context = _context(args)
        start = _start(args.start, context)
        if args.command == "days":
            store = CalendarStore(demo_entries(start, context))
            _render_days(store, start, args.count, context, args.json)
        elif args.command == "months":
            _render_months(CalendarStore().months(start, args.count, context), context, args.json)
        elif args.command == "grid":
            _render_grid(Month.containing(start, context), context, args.json)
        else:  # pragma: no cover - argparse enforces choices
            parser.print_help()
    except (CalendarError, ValueError) as exc:
        logger.warning("Calendar command failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
