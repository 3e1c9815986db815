"""Test cases for structured logging and sensitive-data filtering."""

import pytest

from pwlens.core.enums import Environment, LogFormat, LogLevel
from pwlens.core.errors import ConfigurationError
from pwlens.core.logging import (
    LogConfig,
    MessageLengthFilter,
    SensitiveDataFilter,
    StructuredLogger,
    get_logger,
)


class TestLogConfig:
    """Test LogConfig defaults and validation."""

    def test_testing_defaults(self):
        config = LogConfig(environment=Environment.TESTING)

        assert config.level is LogLevel.WARNING
        assert config.format is LogFormat.PLAIN
        assert config.enable_context_tracking is False

    def test_production_forces_filtering(self):
        config = LogConfig(
            environment=Environment.PRODUCTION, enable_sensitive_data_filtering=False
        )

        assert config.enable_sensitive_data_filtering is True
        assert config.format is LogFormat.JSON

    def test_message_length_minimum(self):
        with pytest.raises(ConfigurationError):
            LogConfig(max_message_length=10)

    def test_to_dict(self):
        assert LogConfig(level=LogLevel.ERROR).to_dict()["level"] == "ERROR"


class TestSensitiveDataFilter:
    """Test masking of password material."""

    def test_masks_sensitive_fields(self):
        record = SensitiveDataFilter().filter(
            {
                "message": "checked",
                "password": "hunter2",
                "hash_suffix": "1E4C9B93F3F0682250B6CF8331B7EE68FD8",
                "length": 7,
            }
        )

        assert record["password"] == "***[MASKED]"
        assert record["hash_suffix"] == "***[MASKED]"
        assert record["length"] == 7
        assert record["message"] == "checked"

    def test_nested_fields(self):
        record = SensitiveDataFilter().filter({"context": {"sha1_digest": "ABCDEF"}})

        assert record["context"]["sha1_digest"] == "***[MASKED]"

    def test_preserve_length(self):
        record = SensitiveDataFilter(preserve_length=True).filter({"secret": "abcd"})

        assert record["secret"] == "****"

    def test_none_values_kept(self):
        assert SensitiveDataFilter().filter({"token": None}) == {"token": None}


class TestMessageLengthFilter:
    """Test message truncation."""

    def test_truncates(self):
        record = MessageLengthFilter(max_length=20).filter({"message": "x" * 50})

        assert len(record["message"]) == 20
        assert record["message"].endswith("[TRUNCATED]")
        assert record["original_message_length"] == 50

    def test_short_message_untouched(self):
        record = MessageLengthFilter(max_length=20).filter({"message": "short"})

        assert record == {"message": "short"}


class TestStructuredLogger:
    """Test record preparation."""

    def test_prepare_record_masks_password(self):
        logger = StructuredLogger("pwlens.test", LogConfig())

        record = logger.prepare_record("analyzed", password="hunter2", score=1)

        assert record["password"] == "***[MASKED]"
        assert record["score"] == 1

    def test_below_level_not_counted(self):
        logger = StructuredLogger(
            "pwlens.test", LogConfig(environment=Environment.TESTING)
        )

        logger.debug("ignored")

        assert logger.get_stats()["log_count"] == 0

    def test_context_tracking(self):
        logger = StructuredLogger("pwlens.test", LogConfig())

        with logger.context.operation_context("breach_check", request_id=1):
            record = logger.prepare_record("in flight")

        assert record["operation_name"] == "breach_check"
        assert record["request_id"] == 1
        assert logger.context.get_operation_stats("breach_check")["call_count"] == 1

    def test_get_logger_cached(self):
        assert get_logger("pwlens.cached") is get_logger("pwlens.cached")
