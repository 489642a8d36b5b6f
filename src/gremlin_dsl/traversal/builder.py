"""Fluent Gremlin traversal builder.

This module provides the GraphTraversal class, which accumulates steps in a
StepSequence and renders them into a single Gremlin query string.
"""

from typing import Any, Self

from structlog.stdlib import BoundLogger

from gremlin_dsl.core.config import Configuration, get_configuration
from gremlin_dsl.core.errors import NoSendHandlerError
from gremlin_dsl.core.logging import get_logger
from gremlin_dsl.traversal.gremlin_steps import GremlinSteps
from gremlin_dsl.traversal.interfaces import SendHandler, TraversalInterface
from gremlin_dsl.traversal.sequence import StepSequence
from gremlin_dsl.traversal.steps import Step

logger: BoundLogger = get_logger(name=__name__)

STEP_SEPARATOR = "."


class GraphTraversal(TraversalInterface, GremlinSteps):
    """Fluent builder for Gremlin traversal strings.

    Start a traversal with ``g()`` (rooted at the graph) or ``__()``
    (anonymous, for nesting inside another traversal's step arguments), chain
    steps, then either render it or ``send()`` it.

    Example:
        ```python
        GraphTraversal.g().V().has("'name'", "'marko'").out("'knows'").render()
        # "g.V().has('name', 'marko').out('knows')"
        ```
    """

    def __init__(
        self,
        steps: StepSequence | None = None,
        configuration: Configuration | None = None,
    ) -> None:
        """Initialize a traversal.

        Args:
            steps: Sequence to own, a new empty one if omitted
            configuration: Dispatch context for ``send()``, the process-wide
                default if omitted
        """
        self._steps = steps if steps is not None else StepSequence()
        self._configuration = configuration

    @classmethod
    def g(cls, configuration: Configuration | None = None) -> Self:
        """Start a traversal rooted at the graph."""
        instance = cls(configuration=configuration)
        instance.append_step(Step.start())
        return instance

    @classmethod
    def __(cls, configuration: Configuration | None = None) -> Self:
        """Start an anonymous traversal."""
        instance = cls(configuration=configuration)
        instance.append_step(Step.anonymous())
        return instance

    @property
    def steps(self) -> StepSequence:
        return self._steps

    @property
    def configuration(self) -> Configuration:
        """The dispatch context, resolved when accessed."""
        return self._configuration if self._configuration is not None else get_configuration()

    def append_step(self, step: Step) -> None:
        self._steps.append(step)

    def prepend_step(self, step: Step) -> None:
        self._steps.prepend(step)

    def step(self, name: str, *args: Any) -> Self:
        """Append a method step.

        Args:
            name: Step name as rendered, e.g. ``hasLabel``
            *args: Step arguments, rendered with ``str()``

        Returns:
            Self for method chaining
        """
        self.append_step(Step.method(name, *args))
        return self

    def raw(self, text: str) -> Self:
        """Put raw text in front of the traversal.

        The text is prepended, so it lands ahead of every step added so far,
        the start marker included, and is followed directly by the next
        fragment with no separator.

        Args:
            text: Text inserted verbatim

        Returns:
            Self for method chaining
        """
        self.prepend_step(Step.raw(text))
        return self

    def assign(self, expression: str) -> Self:
        """Put an assignment in front of the traversal.

        Example:
            ```python
            g().assign("v = ").V(1).render()  # "v = g.V(1)"
            ```

        Args:
            expression: Assignment expression inserted verbatim

        Returns:
            Self for method chaining
        """
        self.prepend_step(Step.assignment(expression))
        return self

    def next(self, *args: Any) -> Self:
        return self.step("next", *args)

    def render(self) -> str:
        """Render the traversal to a query string.

        Fragments are joined with dots, except directly after a raw or
        assignment step. Only the previous step decides, so a prefix step that
        ends up mid-sequence still gets a dot in front of it.

        Returns:
            The rendered query
        """
        parts: list[str] = []
        previous: Step | None = None
        for index, step in self._steps.enumerate():
            if index != 0 and previous is not None and not previous.is_prefix:
                parts.append(STEP_SEPARATOR)
            parts.append(step.render())
            previous = step

        return "".join(parts)

    def send(self, handler: SendHandler | None = None) -> Any:
        """Render the traversal and hand it to a send handler.

        Example usage with a provided handler:
            ```python
            g().V().count().send(lambda traversal, query: client.submit(query))
            ```

        Example usage with a configured handler:
            ```python
            configuration.set_send_handler(lambda traversal, query: client.submit(query))
            g().V().count().send()
            ```

        Args:
            handler: Called as ``handler(traversal, query)``. If omitted, the
                configuration's default send handler is used.

        Returns:
            The handler's return value, unchanged

        Raises:
            NoSendHandlerError: If no handler is given and none is configured
        """
        handler = handler if handler is not None else self.configuration.get_send_handler()
        if handler is None:
            raise NoSendHandlerError()

        query = self.render()
        logger.debug("Sending traversal", query=query, steps=len(self._steps))

        return handler(self, query)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.render()!r})"


def g(configuration: Configuration | None = None) -> GraphTraversal:
    """Start a traversal rooted at the graph."""
    return GraphTraversal.g(configuration)


def __(configuration: Configuration | None = None) -> GraphTraversal:
    """Start an anonymous traversal."""
    return GraphTraversal.__(configuration)
