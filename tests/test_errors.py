"""
Unit tests for the error hierarchy.
"""

import logging

import pytest

from gremlin_dsl.core.base import (
    ApplicationError,
    ConfigurationErrorDetails,
    ErrorCode,
    ErrorDetails,
    ErrorLevel,
)
from gremlin_dsl.core.errors import ConfigurationError, NoSendHandlerError


class TestErrorLevel:
    """Tests for ErrorLevel"""

    @pytest.mark.parametrize(
        "level, expected",
        [
            (ErrorLevel.DEBUG, logging.DEBUG),
            (ErrorLevel.WARNING, logging.WARNING),
            (ErrorLevel.CRITICAL, logging.CRITICAL),
        ],
    )
    def test_to_logging_level(self, level, expected):
        assert level.to_logging_level() == expected


class TestApplicationError:
    """Tests for ApplicationError construction"""

    def test_default_details(self):
        error = ApplicationError("boom", code=ErrorCode.UNKNOWN)

        assert str(error) == "boom"
        assert error.level is ErrorLevel.ERROR
        assert error.details.source == "unknown"
        assert error.details.operation == "unknown"

    def test_dict_details(self):
        details = {"source": "traversal", "operation": "render"}
        error = ApplicationError("boom", code=ErrorCode.UNKNOWN, details=details)

        assert error.details.source == "traversal"
        assert error.details.operation == "render"
        assert details == {"source": "traversal", "operation": "render"}

    def test_model_details_kept(self):
        details = ErrorDetails(source="config", operation="load")
        error = ConfigurationError("bad", details=details)

        assert error.details is details
        assert error.code is ErrorCode.CONFIG_INVALID

    def test_timestamp_serialized_as_iso(self):
        dumped = ErrorDetails(source="a", operation="b").model_dump()

        assert isinstance(dumped["timestamp"], str)


class TestConfigurationErrors:
    """Tests for ConfigurationError and NoSendHandlerError"""

    def test_configuration_error_defaults(self):
        error = ConfigurationError("bad setting")

        assert error.code is ErrorCode.CONFIG_INVALID
        assert isinstance(error.details, ConfigurationErrorDetails)
        assert error.details.source == "configuration"

    def test_no_send_handler_error(self):
        error = NoSendHandlerError()

        assert isinstance(error, ConfigurationError)
        assert error.code is ErrorCode.CONFIG_MISSING
        assert error.details.operation == "send"
        assert error.details.setting == "send_handler"
        assert error.details.hint
        assert "send handler" in error.message
