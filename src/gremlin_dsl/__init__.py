"""Fluent builder for Gremlin graph-traversal query strings."""

from gremlin_dsl.core.config import Configuration, Settings, configuration, get_configuration, settings
from gremlin_dsl.core.errors import ConfigurationError, NoSendHandlerError
from gremlin_dsl.traversal import GraphTraversal, SendHandler, Step, StepKind, StepSequence, __, g

__version__ = "0.1.0"

__all__ = [
    "Configuration",
    "ConfigurationError",
    "GraphTraversal",
    "NoSendHandlerError",
    "SendHandler",
    "Settings",
    "Step",
    "StepKind",
    "StepSequence",
    "__",
    "configuration",
    "g",
    "get_configuration",
    "settings",
]
