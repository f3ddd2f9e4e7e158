"""

Lazy views derived from a peekable producer.

Views keep no elements of their own. Every lookahead is answered by the
parent producer, at an offset relative to the parent's current position.

"""

from dataclasses import dataclass, field
from typing import TypeVar

from .producer import (
    MISSING,
    EmptySequenceError,
    MaybeT,
    PeekableProducer,
    Predicate,
)

T = TypeVar("T")


@dataclass(eq=False)
class PeekWhileView(PeekableProducer[T]):
    """Yields the parent's upcoming elements while ``predicate`` holds.

    Never consumes from the parent.
    """

    parent: PeekableProducer[T]
    predicate: Predicate[T]
    position: int = 0
    done: bool = field(default=False, init=False)

    def _lift(self, index: int) -> MaybeT[T]:
        if self.done:
            return MISSING
        value: MaybeT[T] = MISSING
        for offset in range(self.position, self.position + index + 1):
            value = self.parent._lift(offset)
            if value is MISSING or not self.predicate(value):
                return MISSING
        return value

    def __next__(self) -> T:
        value = self._lift(0)
        if value is MISSING:
            self.done = True
            raise EmptySequenceError("next")
        self.position += 1
        return value


@dataclass(eq=False)
class TakeWhileView(PeekableProducer[T]):
    """Consumes the parent's leading elements while ``predicate`` holds.

    The first element failing the predicate is only looked at, so it is still
    the parent's next element once this view is done.
    """

    parent: PeekableProducer[T]
    predicate: Predicate[T]
    done: bool = field(default=False, init=False)

    def _lift(self, index: int) -> MaybeT[T]:
        if self.done:
            return MISSING
        value: MaybeT[T] = MISSING
        for offset in range(index + 1):
            value = self.parent._lift(offset)
            if value is MISSING or not self.predicate(value):
                return MISSING
        return value

    def __next__(self) -> T:
        if self._lift(0) is MISSING:
            self.done = True
            raise EmptySequenceError("next")
        return next(self.parent)
