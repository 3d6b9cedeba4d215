"""
Tests for structured logging (guard_logging): rendered JSON fields, level
filtering, and LOG_LEVEL picked up from the project .env file.
"""

from __future__ import annotations

import io
import json
import os

import pytest

from contract_guard.guard_logging import configure_logging, get_logger
from contract_guard.guard_logging.logger import bind_request


@pytest.fixture
def log_stream():
    """Capture rendered log lines; restore env-driven config afterwards."""
    buf = io.StringIO()
    yield buf
    configure_logging()


def _lines(buf: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in buf.getvalue().splitlines() if line.strip()]


def test_json_line_fields(log_stream):
    configure_logging(level="INFO", fmt="json", stream=log_stream)
    get_logger("contract_guard.tests").info("contract_scan_done", risk_score=60)
    (line,) = _lines(log_stream)
    assert line["event_type"] == "contract_scan_done"
    assert "event" not in line
    assert line["risk_score"] == 60
    assert line["level"] == "info"
    assert line["logger"] == "contract_guard.tests"
    assert line["timestamp"].endswith("Z")


def test_level_filtering(log_stream):
    configure_logging(level="ERROR", fmt="json", stream=log_stream)
    logger = get_logger("contract_guard.tests")
    logger.info("filtered_out")
    logger.error("kept", path="Token.sol")
    assert [line["event_type"] for line in _lines(log_stream)] == ["kept"]


def test_unknown_level_falls_back_to_info(log_stream):
    configure_logging(level="chatty", fmt="json", stream=log_stream)
    get_logger("contract_guard.tests").debug("hidden")
    get_logger("contract_guard.tests").info("shown")
    assert [line["event_type"] for line in _lines(log_stream)] == ["shown"]


def test_bind_request_adds_request_id(log_stream):
    configure_logging(level="INFO", fmt="json", stream=log_stream)
    bind_request("abc123").warning("analyze_source_too_large", limit=10)
    (line,) = _lines(log_stream)
    assert line["request_id"] == "abc123"
    assert line["level"] == "warning"


def test_console_format_is_not_json(log_stream):
    configure_logging(level="INFO", fmt="console", stream=log_stream)
    get_logger("contract_guard.tests").info("scan_file_done", risk_level="LOW")
    text = log_stream.getvalue()
    assert "scan_file_done" in text
    with pytest.raises(json.JSONDecodeError):
        json.loads(text)


@pytest.fixture
def dotenv_file(tmp_path, monkeypatch):
    """Point config.env at a temporary .env; drop whatever it loaded afterwards."""
    keys = ("LOG_LEVEL", "LOG_FORMAT")
    saved = {k: os.environ.pop(k) for k in keys if k in os.environ}
    path = tmp_path / ".env"
    monkeypatch.setattr("contract_guard.config.env._ENV_PATH", path)
    yield path
    for k in keys:
        os.environ.pop(k, None)
    os.environ.update(saved)


def test_dotenv_log_level_reaches_logger(log_stream, dotenv_file):
    """LOG_LEVEL from .env filters log output, consistent with Settings."""
    from contract_guard.config import get_settings

    dotenv_file.write_text("LOG_LEVEL=ERROR\nLOG_FORMAT=json\n", encoding="utf-8")
    configure_logging(stream=log_stream)
    get_logger("contract_guard.tests").info("should_be_filtered")
    get_logger("contract_guard.tests").error("should_be_kept")
    assert get_settings().log_level == "ERROR"
    assert [line["event_type"] for line in _lines(log_stream)] == ["should_be_kept"]
