"""
Logging setup: console handler plus an optional daily rolling log file.
"""

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from indiatrails.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_NAME = "IndiaTrailsAPI.log"

# Marks handlers installed here so a second call replaces them and leaves foreign ones alone
_OWNED_ATTR = "_indiatrails_handler"


def configure_logging(settings: Settings) -> None:
    """Configure the root logger. Safe to call more than once."""
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_dir:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            TimedRotatingFileHandler(log_dir / LOG_FILE_NAME, when="midnight", backupCount=31, encoding="utf-8")
        )

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _OWNED_ATTR, False):
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _OWNED_ATTR, True)
        root.addHandler(handler)
    root.setLevel(level)
