"""
Console logging for the search API and the ingestion command
"""

import copy
import logging
import sys

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s %(funcName)s():%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# ANSI color per level name
LEVEL_COLORS = {
    'DEBUG': '36',
    'INFO': '32',
    'WARNING': '33',
    'ERROR': '31',
    'CRITICAL': '1;35',
}

# Loggers too chatty at the application level
QUIET_LOGGERS = ('sqlalchemy.engine', 'uvicorn.access')


class LevelColorFormatter(logging.Formatter):
    """Colors the level name of a copy of the record; other handlers see it unchanged."""

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelname)
        if color is None:
            return super().format(record)
        colored = copy.copy(record)
        colored.levelname = f"\033[{color}m{record.levelname}\033[0m"
        return super().format(colored)


def build_formatter(stream) -> logging.Formatter:
    if getattr(stream, 'isatty', None) and stream.isatty():
        return LevelColorFormatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(level=logging.INFO, stream=None) -> None:
    """
    Replace the root handlers with one console handler.

    Args:
        level: Level name ("DEBUG", "info", ...) or numeric level
        stream: Output stream, stdout by default
    """
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level: {level}")
        level = numeric

    stream = stream or sys.stdout
    handler = logging.StreamHandler(stream)
    handler.setFormatter(build_formatter(stream))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
