import logging
import sys
from collections.abc import Iterable
from logging import Formatter, StreamHandler

FORMAT = "%(levelname)s\t%(filename)s:%(lineno)d %(message)s"
LOGGER_NAMES = ("limcomb", "__main__")

RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",  # cyan
    logging.INFO: "\033[32m",  # green
    logging.WARNING: "\033[33m",  # yellow
    logging.ERROR: "\033[31m",  # red
    logging.CRITICAL: "\033[91m",  # bright red
}


class ColorFormatter(Formatter):
    """Formatter that colors the level name by severity."""

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelno)
        if not color:
            return super().format(record)
        levelname = record.levelname
        record.levelname = f"{color}{levelname}{RESET}"
        try:
            return super().format(record)
        finally:
            # Other handlers may share this record.
            record.levelname = levelname


def make_handler(format: str = FORMAT) -> StreamHandler:
    """Returns a stderr handler, colored iff stdout is a tty."""
    handler = StreamHandler()
    color = sys.stdout.isatty()
    handler.setFormatter(ColorFormatter(format) if color else Formatter(format))
    return handler


def setup_color_logging(
    format: str = FORMAT,
    level: int = logging.INFO,
    names: Iterable[str] = LOGGER_NAMES,
) -> None:
    """Routes the package and script loggers through a single handler."""
    handler = make_handler(format)
    for name in names:
        logger = logging.getLogger(name)
        logger.handlers[:] = [handler]
        logger.setLevel(level)
