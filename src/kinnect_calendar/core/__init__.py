"""In-memory calendar store and application directories."""

from .calendar_store import CalendarStore, Subscriber, demo_entries
from .config import APP_AUTHOR, APP_NAME, LOG_DIR, ensure_log_dir

__all__ = [
    "APP_AUTHOR",
    "APP_NAME",
    "CalendarStore",
    "LOG_DIR",
    "Subscriber",
    "demo_entries",
    "ensure_log_dir",
]
