"""Ordered step container owned by a traversal."""

from collections import deque
from collections.abc import Iterable, Iterator

from gremlin_dsl.traversal.steps import Step


class StepSequence:
    """Insertion-ordered sequence of steps.

    Position in the sequence is the only thing that determines render order;
    steps do not know their own index. Both ends accept inserts in constant
    time, and iteration can be repeated any number of times.
    """

    def __init__(self, steps: Iterable[Step] = ()) -> None:
        self._steps: deque[Step] = deque(steps)

    def append(self, step: Step) -> None:
        """Add a step at the end of the sequence."""
        self._steps.append(step)

    def prepend(self, step: Step) -> None:
        """Add a step at the front of the sequence, ahead of every existing step."""
        self._steps.appendleft(step)

    def enumerate(self) -> Iterator[tuple[int, Step]]:
        """Iterate over ``(position, step)`` pairs, positions starting at 0."""
        return enumerate(self._steps)

    def copy(self) -> "StepSequence":
        return StepSequence(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __getitem__(self, index: int) -> Step:
        return self._steps[index]

    def __repr__(self) -> str:
        return f"StepSequence({list(self._steps)!r})"
