"""
Logging setup for the mock database server.

``setup_logging`` attaches a console handler, and a file handler when
``LOG_FILE`` is set, to the root logger.  The handlers it installs
are named, so calling it again (``create_app`` followed by ``run.py``,
or one app per test) does not duplicate output.  Handlers installed
by someone else, such as pytest or uvicorn, are left alone.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "mock_database.console"
FILE_HANDLER_NAME = "mock_database.file"


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> logging.Logger:
    """Configure ``logger`` (the root logger by default) and return it.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Path of a file that also receives every record.  The file is
        appended to and created if missing.
    logger : Optional[logging.Logger]
        Logger to configure.  Tests pass their own to avoid touching
        the root logger.
    """
    logger = logger if logger is not None else logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_handler(logger, CONSOLE_HANDLER_NAME):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if logfile and not _has_handler(logger, FILE_HANDLER_NAME):
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
