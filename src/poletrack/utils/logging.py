import logging
import sys
from typing import Optional, TextIO
from ..config import settings

def _resolve_level(level: str) -> int:
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value

def setup_logger(name: str, level: Optional[str] = None, stream: Optional[TextIO] = None) -> logging.Logger:
    """Return the named logger with a single console handler at ``level``.

    ``level`` defaults to ``settings.log_level``. Calling again for the same
    name re-levels the existing handler instead of adding another one.
    """
    logger = logging.getLogger(name)
    resolved = _resolve_level(level or settings.log_level)
    logger.setLevel(resolved)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(resolved)
        return logger

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(settings.log_format))
    logger.addHandler(handler)
    # records are already printed here, keep them out of the root handlers
    logger.propagate = False

    return logger
