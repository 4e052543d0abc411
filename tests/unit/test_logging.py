"""Unit tests for civildate.logging."""

import logging

import pytest
from rich.logging import RichHandler

from civildate.logging import (
    ThirdPartyPrefixFilter,
    config_console_handler,
    log_startup,
)


def _record(name: str) -> logging.LogRecord:
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    "name,prefix",
    [
        ("sqlalchemy.engine.Engine", "[sqlalchemy]"),
        ("urllib3", "[urllib3]"),
        ("civildate.domain.date", ""),
        ("civildate", ""),
    ],
)
def test_prefix_filter(name, prefix):
    """Third-party records get a bracketed prefix; project records none."""
    record = _record(name)
    assert ThirdPartyPrefixFilter().filter(record) is True
    assert record.prefix == prefix  # type: ignore[attr-defined]


def test_console_handler_defaults():
    """The console handler uses the given level and the prefix filter."""
    handler = config_console_handler(level=logging.INFO)
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.INFO
    assert any(isinstance(f, ThirdPartyPrefixFilter) for f in handler.filters)


def test_console_handler_debug_mode():
    """Debug mode forces DEBUG and drops the prefix filter."""
    handler = config_console_handler(level=logging.ERROR, debug_mode=True)
    assert handler.level == logging.DEBUG
    assert not handler.filters


def test_console_handler_without_color():
    """Color can be disabled."""
    handler = config_console_handler(color=False)
    assert handler.console.color_system is None


def test_log_startup(caplog):
    """Startup emits an INFO summary and DEBUG diagnostics."""
    logger = logging.getLogger("civildate.test")
    with caplog.at_level(logging.DEBUG, logger="civildate.test"):
        log_startup(
            logger,
            app_version="9.9.9",
            level=logging.INFO,
            handlers=[logging.NullHandler()],
            logger_levels={"sqlalchemy": logging.WARNING},
        )
    messages = [r.getMessage() for r in caplog.records]
    assert messages[0] == "civildate 9.9.9 (console=INFO)"
    assert "Handlers: ['NullHandler']" in messages
    assert "Per-logger overrides: {'sqlalchemy': 'WARNING'}" in messages
