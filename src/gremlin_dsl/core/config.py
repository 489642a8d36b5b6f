"""Configuration management."""

from typing import TYPE_CHECKING

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from gremlin_dsl.traversal.interfaces import SendHandler


class Settings(BaseSettings):
    # App config
    debug: bool = False
    service_name: str = Field(default="gremlin-dsl", description="Service name reported by log records")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level (DEBUG, INFO, WARNING, ...)")
    log_json: bool = Field(default=False, description="Render log records as JSON instead of console output")
    logfire_enabled: bool = Field(default=False, description="Forward structured logs to Logfire")

    model_config = SettingsConfigDict(
        env_prefix="GREMLIN_DSL_",
        env_file=".env",
        extra="ignore",  # Ignore extra fields in .env file
    )

    @property
    def effective_log_level(self) -> str:
        """Get the log level, forced to DEBUG in debug mode."""
        return "DEBUG" if self.debug else self.log_level.upper()


class Configuration:
    """Dispatch context shared by traversals.

    Holds the default send handler used by ``GraphTraversal.send()`` when no
    handler is passed explicitly. Traversals take a Configuration as an
    optional argument and fall back to the module-level ``configuration``.
    """

    def __init__(self, send_handler: "SendHandler | None" = None) -> None:
        self._send_handler = send_handler

    def get_send_handler(self) -> "SendHandler | None":
        """Get the default send handler, if one is set."""
        return self._send_handler

    def set_send_handler(self, handler: "SendHandler") -> "Configuration":
        """Set the default send handler.

        Returns:
            Self for method chaining
        """
        self._send_handler = handler
        return self

    def clear_send_handler(self) -> None:
        """Remove the default send handler."""
        self._send_handler = None


def get_configuration() -> Configuration:
    """Get the process-wide default Configuration."""
    return configuration


settings = Settings()
configuration = Configuration()
