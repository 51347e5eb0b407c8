"""Tests for structured logging."""

import json

import pytest

from moodtunes.utils.logging import LogContext, StructuredLogger, get_logger


def read_lines(capsys):
    return [json.loads(line) for line in capsys.readouterr().out.splitlines() if line]


class TestStructuredLogger:

    def test_json_line(self, capsys):
        logger = StructuredLogger("moodtunes.test.json")
        logger.info("Selected track", track_id="calm-1")
        entry = read_lines(capsys)[-1]
        assert entry["level"] == "INFO"
        assert entry["logger"] == "moodtunes.test.json"
        assert entry["message"] == "Selected track"
        assert entry["track_id"] == "calm-1"
        assert entry["timestamp"].endswith("Z")

    def test_level_filtering(self, capsys):
        logger = get_logger("moodtunes.test.level", level="WARNING")
        logger.info("hidden")
        logger.warning("shown")
        messages = [e["message"] for e in read_lines(capsys)]
        assert messages == ["shown"]

    def test_text_format(self, capsys):
        logger = StructuredLogger("moodtunes.test.text", fmt="text")
        logger.info("Catalog loaded", tracks=30)
        out = capsys.readouterr().out
        assert "INFO moodtunes.test.text: Catalog loaded tracks=30" in out

    def test_with_context(self, capsys):
        logger = StructuredLogger("moodtunes.test.context")
        contextual = logger.with_context(LogContext(component="api", operation="generate_track"))
        contextual.info("hello")
        entry = read_lines(capsys)[-1]
        assert entry["context"]["component"] == "api"
        assert entry["context"]["operation"] == "generate_track"

    def test_operation_context_success(self, capsys):
        logger = StructuredLogger("moodtunes.test.op")
        with logger.operation_context("catalog", "reload", path="data/tracks.json"):
            pass
        entries = read_lines(capsys)
        assert [e["operation_status"] for e in entries] == ["started", "completed"]
        assert entries[0]["context"]["metadata"] == {"path": "data/tracks.json"}
        assert entries[1]["duration_seconds"] >= 0

    def test_operation_context_failure_reraises(self, capsys):
        logger = StructuredLogger("moodtunes.test.fail")
        with pytest.raises(ValueError):
            with logger.operation_context("catalog", "reload"):
                raise ValueError("broken file")
        failed = read_lines(capsys)[-1]
        assert failed["level"] == "ERROR"
        assert failed["operation_status"] == "failed"
        assert failed["error_type"] == "ValueError"
        assert failed["exception"]["message"] == "broken file"

    def test_log_config_redacts_secrets(self, capsys):
        logger = StructuredLogger("moodtunes.test.config")
        logger.log_config({
            "catalog": {"path": "data/tracks.json"},
            "enhancement": {"api_key": "sk-123", "enabled": True},
            "auth_token": "abc"
        })
        config = read_lines(capsys)[-1]["config"]
        assert config["catalog"]["path"] == "data/tracks.json"
        assert config["enhancement"]["api_key"] == "***REDACTED***"
        assert config["enhancement"]["enabled"] is True
        assert config["auth_token"] == "***REDACTED***"

    def test_log_config_without_filtering(self, capsys):
        logger = StructuredLogger("moodtunes.test.raw")
        logger.log_config({"token": "abc"}, exclude_secrets=False)
        assert read_lines(capsys)[-1]["config"] == {"token": "abc"}
