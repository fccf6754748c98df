import logging
import sys
from collections.abc import Iterable
from logging import Formatter, StreamHandler

FORMAT = "%(levelname)s\t%(filename)s:%(lineno)d %(message)s"
LOGGERS = ("subgen", "__main__")

RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",  # cyan
    logging.INFO: "\033[32m",  # green
    logging.WARNING: "\033[33m",  # yellow
    logging.ERROR: "\033[31m",  # red
    logging.CRITICAL: "\033[91m",  # bright red
}


class ColorFormatter(Formatter):
    """Formatter that colors the level name of each record."""

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        levelname = record.levelname
        record.levelname = color + levelname + RESET
        try:
            return super().format(record)
        finally:
            # Records are shared between handlers.
            record.levelname = levelname


def setup_color_logging(
    format: str = FORMAT,
    level: int = logging.INFO,
    loggers: Iterable[str] = LOGGERS,
) -> StreamHandler:
    """Send records of the given loggers to stderr, colored on a terminal."""
    handler = StreamHandler()
    formatter: Formatter
    if sys.stdout.isatty():
        formatter = ColorFormatter(format)
    else:
        formatter = Formatter(format)
    handler.setFormatter(formatter)
    for name in loggers:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.addHandler(handler)
        logger.setLevel(level)
    return handler
