"""Gremlin traversal builder.

This package provides a fluent interface for building Gremlin traversal strings.
"""

from .builder import GraphTraversal, __, g
from .interfaces import SendHandler
from .sequence import StepSequence
from .steps import Step, StepKind

__all__ = [
    "GraphTraversal",
    "SendHandler",
    "Step",
    "StepKind",
    "StepSequence",
    "__",
    "g",
]
