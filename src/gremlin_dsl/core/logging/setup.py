"""Centralized logging setup with optional Logfire integration.

structlog is configured once per process by ``setup_logging()``. Package code
only ever calls ``get_logger(__name__)``, which logs through the standard
library; until logging is configured, nothing is emitted.
"""

import logging
import sys

import logfire
import structlog
from structlog.processors import CallsiteParameter, CallsiteParameterAdder
from structlog.types import EventDict, Processor, WrappedLogger

from gremlin_dsl.core.config import Settings
from gremlin_dsl.core.config import settings as default_settings


def add_error_type(
    _logger: WrappedLogger,
    _method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add the exception class name to events that carry an ``error`` field.

    Args:
        _logger: The wrapped logger instance
        _method_name: The name of the logging method
        event_dict: The event dictionary

    Returns:
        The event dictionary with added context
    """
    if "error" in event_dict:
        event_dict["error_type"] = type(event_dict["error"]).__name__

    return event_dict


def build_processors(settings: Settings) -> list[Processor]:
    """Build the shared processor chain, without the final renderer."""
    processors: list[Processor] = [
        # Merge context from contextvars
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        CallsiteParameterAdder(
            parameters=[
                CallsiteParameter.FILENAME,
                CallsiteParameter.LINENO,
                CallsiteParameter.FUNC_NAME,
            ]
        ),
        add_error_type,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
    ]

    if settings.logfire_enabled:
        # Must come before the final renderer
        processors.append(logfire.StructlogProcessor())

    return processors


def _renderer(settings: Settings) -> Processor:
    if settings.log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def setup_logging(settings: Settings | None = None) -> None:
    """Set up process-wide logging with structlog.

    Logfire is only configured when ``settings.logfire_enabled`` is set; it
    then reads LOGFIRE_TOKEN and friends from the environment and sends data
    only if a token is present.

    Args:
        settings: Settings to configure from, defaults to the module settings
    """
    settings = settings or default_settings
    level = logging.getLevelName(settings.effective_log_level)

    if settings.logfire_enabled:
        logfire.configure(
            service_name=settings.service_name,
            send_to_logfire="if-token-present",
            console=False,
        )

    processors = build_processors(settings)

    # structlog events are handed to the standard library as-is and rendered
    # by the root handler, together with records from other libraries
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            *processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(settings),
        ],
        foreign_pre_chain=[structlog.stdlib.add_logger_name, *processors],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)
