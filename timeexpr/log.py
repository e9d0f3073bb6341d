import logging
import sys
from typing import Union

LOG_FORMAT = "[%(asctime)s] %(levelname)s> %(message)s"
DATE_FORMAT = "%H:%M:%S"


def configure_logging(
    level: Union[int, str] = logging.WARNING, name: str = "timeexpr"
) -> logging.Logger:
    """Attach a single stderr handler to the package logger."""
    logger = logging.getLogger(name)
    if not any(getattr(h, "_timeexpr", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handler._timeexpr = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    return logger
