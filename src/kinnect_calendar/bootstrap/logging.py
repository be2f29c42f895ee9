from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from ..config import get_settings
from ..core import ensure_log_dir

_INITIALIZED = False


def configure_logging(
    level: Optional[str] = None,
    *,
    log_path: Optional[Path] = None,
    to_file: bool = False,
) -> None:
    """Configure application-wide logging with a console handler and optional rotating file."""

    global _INITIALIZED
    if _INITIALIZED:
        return

    settings = get_settings().logging
    resolved_level = getattr(logging, (level or settings.level).upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    log_file: Optional[Path] = None
    if to_file or log_path is not None:
        log_file = log_path or ensure_log_dir(settings.directory) / "kinnect_calendar.log"
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(str(log_file), maxBytes=1_000_000, backupCount=5, encoding="utf-8"))

    root = logging.getLogger()
    root.setLevel(resolved_level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    _INITIALIZED = True
    logging.getLogger(__name__).debug("Logging configured. Output file: %s", log_file)
