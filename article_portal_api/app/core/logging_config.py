"""
Logging configuration for the Article Portal API.

``setup_logging`` configures the root logger with a console handler
and, optionally, a file handler.  When the root logger already has
handlers (for example under pytest or uvicorn's own configuration) no
handler is added, but the server and driver loggers are still aligned
with ``LOG_LEVEL``:

* ``uvicorn``, ``uvicorn.error`` and ``uvicorn.access`` follow the
  configured level, so ``LOG_LEVEL=WARNING`` also silences the access
  log;
* ``pymongo`` stays at ``WARNING`` or above unless ``LOG_LEVEL=DEBUG``.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")
DRIVER_LOGGER = "pymongo"


def _align_library_loggers(level: int) -> None:
    for name in SERVER_LOGGERS:
        logging.getLogger(name).setLevel(level)
    logging.getLogger(DRIVER_LOGGER).setLevel(level if level <= logging.DEBUG else max(level, logging.WARNING))


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger and the uvicorn/pymongo loggers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    _align_library_loggers(numeric_level)

    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
