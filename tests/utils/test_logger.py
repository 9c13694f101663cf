"""
Logger Tests
"""

import io
import json

import pytest

from extkit.utils.logger import (
    JsonFormatter,
    Logger,
    LogLevel,
    LogRecord,
    StreamHandler,
    TextFormatter,
    configure_logging,
    get_logger,
)


def test_level_parse():
    assert LogLevel.parse("debug") is LogLevel.DEBUG
    assert LogLevel.parse(" Warning ") is LogLevel.WARNING
    assert LogLevel.parse(40) is LogLevel.ERROR
    assert LogLevel.parse(LogLevel.INFO) is LogLevel.INFO
    with pytest.raises(ValueError):
        LogLevel.parse("verbose")


def test_text_formatter_includes_context():
    record = LogRecord(level=LogLevel.INFO, message="Gate ready", context={"interval": 300})
    output = TextFormatter().format(record)
    assert "[INFO] extkit: Gate ready interval=300" in output


def test_json_formatter():
    record = LogRecord(
        level=LogLevel.ERROR,
        message="Failed",
        exception=RuntimeError("boom"),
        logger_name="extkit.test",
    )
    data = json.loads(JsonFormatter().format(record))
    assert data["level"] == "ERROR"
    assert data["logger"] == "extkit.test"
    assert data["exception"] == {"type": "RuntimeError", "message": "boom"}


def test_logger_filters_by_level():
    stream = io.StringIO()
    logger = Logger("extkit.test", level=LogLevel.WARNING, handlers=[StreamHandler(stream)])

    logger.info("hidden")
    logger.warning("shown")

    assert "hidden" not in stream.getvalue()
    assert "shown" in stream.getvalue()


def test_with_context_merges_keys():
    stream = io.StringIO()
    logger = Logger("extkit.test", level=LogLevel.DEBUG, handlers=[StreamHandler(stream)])

    logger.with_context(binding="pay").debug("Accepted", at=5)

    assert "Accepted binding=pay at=5" in stream.getvalue()


def test_exception_logs_active_error():
    stream = io.StringIO()
    logger = Logger("extkit.test", level=LogLevel.DEBUG, handlers=[StreamHandler(stream)])

    try:
        raise ValueError("bad value")
    except ValueError:
        logger.exception("Handled")

    assert "ValueError: bad value" in stream.getvalue()


def test_get_logger_returns_same_instance():
    assert get_logger("extkit.same") is get_logger("extkit.same")


def test_configure_logging_applies_to_existing_loggers():
    """Test loggers created earlier follow later configuration."""
    logger = get_logger("extkit.early")
    stream = io.StringIO()

    configure_logging(LogLevel.DEBUG, format="json", stream=stream)
    logger.debug("after configure")

    assert json.loads(stream.getvalue())["message"] == "after configure"


def test_configure_logging_rejects_unknown_format():
    with pytest.raises(ValueError):
        configure_logging(format="xml")
