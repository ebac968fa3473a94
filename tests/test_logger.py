"""Tests for the JSON logger and the environment configuration helpers."""

import json
import logging
import sys
import os

import pytest
from pydantic import ValidationError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telegram_types import ResponseParameters, passport_element_error_from_raw_data
from telegram_types.config import DEFAULT_LOG_LEVEL, _parse_log_level, _resolve_log_dir
from telegram_types.logger import TypesLogger, _JsonFormatter


# ── _JsonFormatter ───────────────────────────────────────────────────────────


class TestJsonFormatter:
    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord(
            name="telegram_types",
            level=logging.WARNING,
            pathname=__file__,
            lineno=1,
            msg="Raw data rejected for %s",
            args=("User",),
            exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_standard_fields(self) -> None:
        entry = json.loads(_JsonFormatter().format(self._record()))
        assert entry["level"] == "WARNING"
        assert entry["logger"] == "telegram_types"
        assert entry["message"] == "Raw data rejected for User"
        assert "timestamp" in entry
        assert "pathname" not in entry

    def test_extra_fields_merged(self) -> None:
        entry = json.loads(_JsonFormatter().format(self._record(type_name="User", error_count=2)))
        assert entry["type_name"] == "User"
        assert entry["error_count"] == 2


# ── TypesLogger ──────────────────────────────────────────────────────────────


class TestTypesLogger:
    def test_singleton_logger(self) -> None:
        assert TypesLogger.get_logger() is TypesLogger.get_logger()
        assert TypesLogger.get_logger().name == "telegram_types"

    def test_rejected_raw_data_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="telegram_types"):
            with pytest.raises(ValidationError):
                ResponseParameters.from_raw_data({"retry_after": "soon"})
        assert any(getattr(r, "type_name", None) == "ResponseParameters" for r in caplog.records)

    def test_unmatched_variant_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="telegram_types"):
            with pytest.raises(ValidationError):
                passport_element_error_from_raw_data({"source": "nowhere"})
        assert any(getattr(r, "type_name", None) == "PassportElementError" for r in caplog.records)


# ── config helpers ───────────────────────────────────────────────────────────


class TestConfigHelpers:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            (None, DEFAULT_LOG_LEVEL),
            ("", DEFAULT_LOG_LEVEL),
            ("debug", logging.DEBUG),
            (" INFO ", logging.INFO),
            ("15", 15),
            ("chatty", DEFAULT_LOG_LEVEL),
        ],
    )
    def test_parse_log_level(self, raw, expected) -> None:
        assert _parse_log_level(raw) == expected

    def test_resolve_log_dir(self) -> None:
        assert _resolve_log_dir(None) is None
        assert _resolve_log_dir("   ") is None
        assert _resolve_log_dir(" logs ") == "logs"
