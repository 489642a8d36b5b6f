"""Traversal interfaces.

This module defines the protocols that decouple the step mixins and send
handlers from the concrete GraphTraversal.
"""

from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable

from gremlin_dsl.traversal.steps import Step


@runtime_checkable
class SendHandler(Protocol):
    """Callable that hands a rendered traversal to a transport.

    Plain functions and lambdas with the same signature qualify.
    """

    def __call__(self, traversal: Any, query: str) -> Any:
        """Dispatch a traversal.

        Args:
            traversal: The traversal being sent
            query: The traversal rendered at dispatch time

        Returns:
            Whatever the transport returns, passed back to the caller unchanged
        """
        ...


class TraversalInterface(ABC):
    """Interface for traversals with the methods required by the step mixins."""

    @abstractmethod
    def append_step(self, step: Step) -> None:
        """Add a step at the end of the traversal."""
        pass

    @abstractmethod
    def prepend_step(self, step: Step) -> None:
        """Add a step at the front of the traversal."""
        pass

    @abstractmethod
    def render(self) -> str:
        """Render the traversal to its query string."""
        pass
