"""
Logging Configuration
Sets up the logger for the 'surfgeom' namespace.

The library itself only creates module loggers (plus a ``NullHandler`` on
the package logger) and never attaches output handlers; applications and
scripts call :func:`setup_logging` once at start-up.  Calling it again
replaces only the handlers it installed itself.
"""
import logging
import sys
from typing import Optional

_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
_DATEFMT = '%H:%M:%S'

# Marks handlers created here so a repeated call can find and replace them
_OWNED = "_surfgeom_owned"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Send 'surfgeom' log records to stdout and, optionally, to *log_file*.

    Handlers the caller attached to the 'surfgeom' logger are left alone.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file (overwritten).

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("surfgeom")
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(_FORMAT, datefmt=_DATEFMT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        setattr(handler, _OWNED, True)
        logger.addHandler(handler)

    return logger
