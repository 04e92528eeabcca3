"""
Logging setup for the charity API.

Every module logs through ``logging.getLogger(__name__)``, so all of
the application's records pass through the ``charity_api`` logger.
``setup_logging`` attaches the handlers to that logger from
``LOG_LEVEL`` and ``LOG_FILE``, leaving the root logger (and with it
uvicorn's own configuration) alone.  Records still propagate, so a host
that configures the root logger sees them too.
"""

import logging
from pathlib import Path

from .config import Settings, resolve_path, settings as default_settings

APP_LOGGER_NAME = "charity_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed here so repeated calls replace them instead
# of stacking duplicates.
_HANDLER_FLAG = "_charity_api_handler"


def _mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_FLAG, True)
    return handler


def setup_logging(config: Settings = default_settings) -> logging.Logger:
    """Configure the ``charity_api`` logger and return it.

    A console handler is always attached; a file handler is added when
    ``config.log_file`` is set (relative paths are resolved like the
    other configured paths).  Calling this again, e.g. once per
    ``create_app`` in the test-suite, replaces the handlers it added
    before and applies the current level.
    """
    logger = logging.getLogger(APP_LOGGER_NAME)
    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_FLAG, False)]:
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = _mark(logging.StreamHandler())
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if config.log_file:
        log_path: Path = resolve_path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = _mark(logging.FileHandler(log_path, encoding="utf-8"))
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
