"""Structured logging module.

This module provides utilities for structured logging using structlog.
Request-scoped fields are bound with ``structlog.contextvars.bind_contextvars``
and merged into every record by the processor chain ``setup_logging()``
installs.
"""

from .base import ROOT_LOGGER_NAME, get_logger
from .setup import setup_logging

__all__ = [
    "ROOT_LOGGER_NAME",
    "get_logger",
    "setup_logging",
]
