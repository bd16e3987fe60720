"""Tests for logging utilities."""

import json
import logging

from pipesh.logging_utils import StructuredTextFormatter, log_event, setup_logging


def _record(name: str, message: str) -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=None,
        exc_info=None,
    )


def test_structured_formatter_expands_json_payload():
    formatter = StructuredTextFormatter()
    payload = {"ts": "2026-01-01T00:00:00+00:00", "event": "pipeline_executed", "stages": ["iota", "echo"], "output_count": 0}

    result = formatter.format(_record("root", json.dumps(payload)))

    assert result.splitlines()[0] == "=== pipeline_executed ==="
    assert "ts: 2026-01-01T00:00:00+00:00" in result
    assert "level: INFO" in result
    assert 'stages: ["iota", "echo"]' in result
    assert "output_count: 0" in result


def test_structured_formatter_uses_logger_name_for_plain_messages():
    formatter = StructuredTextFormatter()

    result = formatter.format(_record("pipesh.test", "plain text\nsecond line"))

    assert result.splitlines()[0] == "=== pipesh.test ==="
    assert "message: plain text\\nsecond line" in result


def test_structured_formatter_separates_entries():
    formatter = StructuredTextFormatter()

    first = formatter.format(_record("a", "one"))
    second = formatter.format(_record("b", "two"))

    assert not first.startswith("\n")
    assert second.startswith("\n=== b ===")


def test_log_event_emits_json(caplog):
    with caplog.at_level(logging.INFO):
        log_event("command_not_found", level=logging.WARNING, command="eco", suggestions=("echo",))

    (record,) = caplog.records
    payload = json.loads(record.getMessage())
    assert record.levelno == logging.WARNING
    assert payload["event"] == "command_not_found"
    assert payload["command"] == "eco"
    assert payload["suggestions"] == ["echo"]


def test_setup_logging_without_file_disables_logging():
    setup_logging(None)

    assert not logging.getLogger("pipesh").isEnabledFor(logging.CRITICAL)


def test_setup_logging_with_file_writes_blocks(tmp_path):
    log_path = tmp_path / "nested" / "run.log"

    setup_logging(str(log_path))
    log_event("app_start", mode="batch")

    content = log_path.read_text(encoding="utf-8")
    assert "=== app_start ===" in content
    assert "mode: batch" in content
