# src/spotikit/core/logging.py
import logging
import sys
from typing import Optional

from spotikit.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Wraps the level name in an ANSI color for interactive terminals."""

    RESET = "\x1b[0m"
    LEVEL_COLORS = {
        logging.DEBUG: "\x1b[38;21m",
        logging.INFO: "\x1b[34m",
        logging.WARNING: "\x1b[33m",
        logging.ERROR: "\x1b[31m",
        logging.CRITICAL: "\x1b[31;1m",
    }

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno, self.LEVEL_COLORS[logging.DEBUG])
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(level: Optional[str] = None) -> None:
    """Console logging for applications embedding spotikit."""
    log_level = (level or settings.log_level).upper()
    numeric_level = getattr(logging, log_level, logging.INFO)

    formatter_cls = ColoredFormatter if sys.stdout.isatty() else logging.Formatter
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter_cls(LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)
    root_logger.setLevel(numeric_level)

    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("spotikit").setLevel(numeric_level)
