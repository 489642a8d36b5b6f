"""Traversal step tokens.

A step is one fragment of a rendered traversal. The set of step kinds is
closed: every kind is a ``StepKind`` member and ``Step`` carries the payload
that kind needs. Domain steps such as ``has`` or ``out`` are all METHOD steps
with a different name.
"""

from enum import Enum, auto
from typing import Any, Self

from pydantic import BaseModel, ConfigDict

ARGUMENT_SEPARATOR = ", "


class StepKind(Enum):
    """Enum for traversal step kinds."""

    # Markers
    START = auto()
    ANONYMOUS = auto()

    # Method call, e.g. has('name', 'marko')
    METHOD = auto()

    # Prefix steps, rendered verbatim ahead of the next fragment
    RAW = auto()
    ASSIGN = auto()


MARKERS: dict[StepKind, str] = {
    StepKind.START: "g",
    StepKind.ANONYMOUS: "__",
}

# Kinds whose following fragment is written without a separator
PREFIX_KINDS: frozenset[StepKind] = frozenset({StepKind.RAW, StepKind.ASSIGN})


class Step(BaseModel):
    """A single traversal step.

    Use the factory classmethods rather than the constructor so the payload
    always matches the kind.
    """

    model_config = ConfigDict(frozen=True)

    kind: StepKind
    name: str = ""
    args: tuple[str, ...] = ()
    text: str = ""

    @classmethod
    def start(cls) -> Self:
        """Marker for a traversal rooted at the graph (``g``)."""
        return cls(kind=StepKind.START)

    @classmethod
    def anonymous(cls) -> Self:
        """Marker for an anonymous, nestable traversal (``__``)."""
        return cls(kind=StepKind.ANONYMOUS)

    @classmethod
    def method(cls, name: str, *args: Any) -> Self:
        """Method call step.

        Args:
            name: Step name as it appears in the query, e.g. ``hasLabel``
            *args: Arguments, inserted as ``str(arg)`` without quoting or escaping

        Returns:
            The METHOD step
        """
        return cls(kind=StepKind.METHOD, name=name, args=tuple(str(arg) for arg in args))

    @classmethod
    def raw(cls, text: str) -> Self:
        return cls(kind=StepKind.RAW, text=text)

    @classmethod
    def assignment(cls, expression: str) -> Self:
        return cls(kind=StepKind.ASSIGN, text=expression)

    @property
    def is_prefix(self) -> bool:
        """Whether the fragment following this step is written without a separator."""
        return self.kind in PREFIX_KINDS

    def render(self) -> str:
        """Render this step to its query fragment."""
        if self.kind in MARKERS:
            return MARKERS[self.kind]
        if self.kind is StepKind.METHOD:
            return f"{self.name}({ARGUMENT_SEPARATOR.join(self.args)})"
        return self.text

    def __str__(self) -> str:
        return self.render()
