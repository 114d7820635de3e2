"""Tests for chartstats logging utilities."""

from __future__ import annotations

import logging

import pytest

import chartstats
from chartstats.utils.logging import (
    CONSOLE_HANDLER_NAME,
    LOGGER_NAME,
    configure_logging,
    get_logger,
    resolve_level,
)


@pytest.fixture
def clean_logger():
    """Restore the chartstats logger's handlers and level after each test."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = logger.handlers[:]
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


def _console_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if h.get_name() == CONSOLE_HANDLER_NAME]


def test_package_logger_has_null_handler() -> None:
    assert chartstats.__version__
    logger = logging.getLogger(LOGGER_NAME)
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_get_logger_default_and_named() -> None:
    assert get_logger().name == "chartstats"
    assert get_logger("chartstats.stats").name == "chartstats.stats"


@pytest.mark.parametrize(
    "level, expected",
    [("debug", logging.DEBUG), (" Warning ", logging.WARNING), (logging.ERROR, logging.ERROR), ("nope", logging.INFO)],
)
def test_resolve_level(level, expected) -> None:
    assert resolve_level(level) == expected


def test_resolve_level_from_env(monkeypatch) -> None:
    monkeypatch.setenv("CHARTSTATS_LOG_LEVEL", "warning")
    assert resolve_level() == logging.WARNING
    monkeypatch.delenv("CHARTSTATS_LOG_LEVEL")
    assert resolve_level() == logging.INFO


def test_configure_logging_installs_one_console_handler(clean_logger) -> None:
    """Repeated calls keep one console handler and only update its level."""
    logger = configure_logging(level="DEBUG")
    assert logger is clean_logger
    configure_logging(level="ERROR")
    handlers = _console_handlers(clean_logger)
    assert len(handlers) == 1
    assert handlers[0].level == logging.ERROR
    assert clean_logger.level == logging.ERROR
    assert not _console_handlers(logging.getLogger())


def test_configure_logging_force_replaces_handler_keeps_null_handler(clean_logger) -> None:
    configure_logging(level="INFO")
    first = _console_handlers(clean_logger)[0]
    configure_logging(level="INFO", fmt="%(message)s", force=True)
    handlers = _console_handlers(clean_logger)
    assert len(handlers) == 1
    assert handlers[0] is not first
    assert handlers[0].formatter._fmt == "%(message)s"
    assert any(isinstance(h, logging.NullHandler) for h in clean_logger.handlers)
