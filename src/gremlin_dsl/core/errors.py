"""Specific error types for gremlin_dsl."""

from .base import ApplicationError, ConfigurationErrorDetails, ErrorCode, ErrorLevel


class ConfigurationError(ApplicationError):
    """Missing or invalid configuration."""

    def __init__(
        self,
        message: str,
        details: ConfigurationErrorDetails | dict | None = None,
        code: ErrorCode = ErrorCode.CONFIG_INVALID,
    ):
        super().__init__(
            message=message,
            code=code,
            level=ErrorLevel.ERROR,
            details=details or ConfigurationErrorDetails(
                source="configuration",
                operation="resolve",
            )
        )


class NoSendHandlerError(ConfigurationError):
    """Raised by ``send()`` when no handler was given and none is configured."""

    def __init__(self, message: str | None = None):
        super().__init__(
            message=message or "No send handler was provided and no default send handler is configured",
            code=ErrorCode.CONFIG_MISSING,
            details=ConfigurationErrorDetails(
                source="traversal",
                operation="send",
                setting="send_handler",
                hint="Pass a handler to send() or call Configuration.set_send_handler()",
            ),
        )
