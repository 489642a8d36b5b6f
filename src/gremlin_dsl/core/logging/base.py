"""Base logging functionality.

Loggers handed out here wrap standard library loggers under the
``gremlin_dsl`` namespace. That namespace carries a NullHandler, so the
package stays silent unless the host application configures logging, either
through ``setup_logging()`` or its own ``logging`` setup.
"""

import logging

import structlog
from structlog.stdlib import BoundLogger

ROOT_LOGGER_NAME = "gremlin_dsl"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> BoundLogger:
    """Get a structlog logger backed by a standard library logger.

    Args:
        name: The name of the logger, usually ``__name__``

    Returns:
        BoundLogger: Processors are resolved from the structlog configuration
        each time the logger is used.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or ROOT_LOGGER_NAME),
        wrapper_class=BoundLogger,
    )
