"""Tests for logging configuration."""

import json
import logging
import sys

from landledger.utils.logging import JsonFormatter, configure_logging


def _record(msg="Updated flux mapping %s", args=(4,), **extra):
    record = logging.LogRecord(
        name="landledger.domain.flux_mapping",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=args,
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_fields():
    """Test that JSON lines carry level, logger and the formatted message."""
    payload = json.loads(JsonFormatter().format(_record()))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "landledger.domain.flux_mapping"
    assert payload["message"] == "Updated flux mapping 4"


def test_json_formatter_includes_extra():
    """Test that attributes passed through extra= are kept."""
    payload = json.loads(JsonFormatter().format(_record(mapping_id=4, expected_version=1)))

    assert payload["mapping_id"] == 4
    assert payload["expected_version"] == 1
    assert "pathname" not in payload


def test_json_formatter_exception():
    """Test that exception info is rendered."""
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()

    payload = json.loads(JsonFormatter().format(record))
    assert "ValueError: boom" in payload["exc_info"]


def test_configure_logging_sets_level():
    """Test that configure_logging sets the root level and one handler."""
    configure_logging(level="debug")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(h, logging.StreamHandler) for h in root.handlers)


def test_configure_logging_json(capsys):
    """Test that JSON logs are written to stderr."""
    configure_logging(level="INFO", json_logs=True)

    logging.getLogger("landledger.test").info("hello %s", "world")

    captured = capsys.readouterr()
    assert captured.out == ""
    line = captured.err.strip().splitlines()[-1]
    assert json.loads(line)["message"] == "hello world"
