"""Tests for the logging setup."""

import io
import logging

import pytest

from utils import logger as logger_module
from utils.logger import configure_logging, get_logger


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    level = root.level
    yield
    configure_logging()
    root.setLevel(level)


def test_configure_logging_replaces_handler(restore_logging):
    root = logging.getLogger()
    configure_logging("DEBUG", io.StringIO())
    first = logger_module._handler

    configure_logging("WARNING", io.StringIO())

    assert first not in root.handlers
    assert logger_module._handler in root.handlers
    assert root.level == logging.WARNING


def test_unknown_level_falls_back_to_info(restore_logging):
    configure_logging("chatty", io.StringIO())

    assert logging.getLogger().level == logging.INFO


def test_get_logger_writes_formatted_lines(restore_logging):
    stream = io.StringIO()
    configure_logging("INFO", stream)

    get_logger("dao.test").info("created UserDao")

    assert "| INFO     | dao.test | created UserDao" in stream.getvalue()
