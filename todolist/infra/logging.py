from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from todolist.config import SETTINGS, Settings

LOG_FILE_NAME = "todolist.log"


def resolve_log_dir(settings: Settings) -> Path:
    """Relative log dirs live under the working directory, like the task file."""
    return Path.cwd() / settings.log_dir


def setup_logging(settings: Settings = SETTINGS) -> None:
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handlers: list[logging.Handler] = []
    fallback_error: OSError | None = None

    log_file = resolve_log_dir(settings) / LOG_FILE_NAME
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=2_000_000, backupCount=3, encoding="utf-8"
        )
    except OSError as exc:
        fallback_error = exc
    else:
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # stdout belongs to the menu
    if settings.log_to_console or fallback_error is not None:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        if fallback_error is not None and not settings.log_to_console:
            console_handler.setLevel(logging.WARNING)
        handlers.append(console_handler)

    logging.basicConfig(
        level=settings.log_level.upper(),
        handlers=handlers,
        force=True,
    )
    if fallback_error is not None:
        logging.getLogger(__name__).warning(
            "Cannot write log file %s (%s), logging to stderr", log_file, fallback_error
        )
