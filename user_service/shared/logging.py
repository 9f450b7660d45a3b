"""
Logging configuration for the service.

Console output always goes to stdout. When a log directory is configured
two files are added next to it: ``error.log`` with ERROR and above only,
and ``combined.log`` with everything the root logger accepts.
Never logs sensitive data (request bodies, email addresses, raw payloads).
"""

import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ERROR_LOG_NAME = "error.log"
COMBINED_LOG_NAME = "combined.log"

QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error")


def build_handlers(log_dir: Optional[str] = None) -> list[logging.Handler]:
    """Create the console handler plus, with ``log_dir``, the two file handlers.

    The directory is created if it does not exist yet.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if not log_dir:
        return handlers

    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)

    error_handler = logging.FileHandler(directory / ERROR_LOG_NAME, encoding="utf-8")
    error_handler.setLevel(logging.ERROR)
    handlers.append(error_handler)
    handlers.append(logging.FileHandler(directory / COMBINED_LOG_NAME, encoding="utf-8"))
    return handlers


def configure_logging(
    level: str = "INFO",
    log_dir: Optional[str] = None,
    quiet_loggers: Iterable[str] = QUIET_LOGGERS,
) -> None:
    """Configure process-wide logging.

    Args:
        level: Root log level name. Unknown names fall back to INFO.
        log_dir: Directory receiving ``error.log`` and ``combined.log``.
        quiet_loggers: Third-party loggers capped at WARNING.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=build_handlers(log_dir),
        force=True,
    )

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)
