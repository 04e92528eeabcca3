"""Tests for the application logging setup."""

import dataclasses
import logging

import pytest

from charity_api.app.core.config import settings
from charity_api.app.core.logging_config import APP_LOGGER_NAME, setup_logging


@pytest.fixture
def app_logger():
    logger = logging.getLogger(APP_LOGGER_NAME)
    saved_handlers, saved_level = list(logger.handlers), logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_setup_uses_configured_level_and_file(app_logger, tmp_path):
    log_file = tmp_path / "logs" / "charity.log"
    config = dataclasses.replace(settings, log_level="debug", log_file=str(log_file))

    logger = setup_logging(config)
    logging.getLogger("charity_api.app.services.funding").debug("sorted %s records", 3)
    for handler in logger.handlers:
        handler.flush()

    assert logger is app_logger
    assert logger.level == logging.DEBUG
    text = log_file.read_text(encoding="utf-8")
    assert "[DEBUG] charity_api.app.services.funding: sorted 3 records" in text


def test_setup_twice_does_not_duplicate_handlers(app_logger):
    config = dataclasses.replace(settings, log_level="INFO", log_file="")

    setup_logging(config)
    count = len(app_logger.handlers)
    setup_logging(config)

    assert len(app_logger.handlers) == count


def test_root_logger_is_left_alone(app_logger):
    root_handlers = list(logging.getLogger().handlers)

    setup_logging(dataclasses.replace(settings, log_file=""))

    assert logging.getLogger().handlers == root_handlers
