import logging
import operator
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterable, Optional, TypeVar

from .producer import (
    MISSING,
    EmptySequenceError,
    MaybeT,
    PeekableProducer,
    SequenceProducer,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(eq=False)
class PeekableBuffer(PeekableProducer[T]):
    """Wraps a single-pass iterator so that any future element can be peeked.

    Peeked elements are kept in ``queue`` until next() hands them out. The
    remaining sequence is always ``queue`` followed by whatever ``source`` has
    not produced yet. Build these through peekable(), which avoids wrapping a
    producer that can already look ahead.
    """

    source: SequenceProducer[T]
    queue: Deque[T] = field(default_factory=deque, init=False, repr=False)
    exhausted: bool = field(default=False, init=False)

    def _pull(self) -> bool:
        if self.exhausted:
            return False
        try:
            item = next(self.source)
        except StopIteration:
            self._mark_exhausted()
            return False
        self.queue.append(item)
        return True

    def _mark_exhausted(self) -> None:
        self.exhausted = True
        logger.debug(
            "Source %r exhausted (%d buffered)", self.source, len(self.queue)
        )

    def _lift(self, index: int) -> MaybeT[T]:
        while len(self.queue) <= index:
            if not self._pull():
                return MISSING
        return self.queue[index]

    def __next__(self) -> T:
        if self.queue:
            return self.queue.popleft()
        if not self.exhausted:
            try:
                return next(self.source)
            except StopIteration:
                self._mark_exhausted()
        raise EmptySequenceError("next")

    def known_size(self) -> Optional[int]:
        if self.exhausted:
            return len(self.queue)
        hint = operator.length_hint(self.source, -1)
        if hint < 0:
            return None
        return hint + len(self.queue)


def peekable(iterable: Iterable[T]) -> PeekableProducer[T]:
    """Return a producer over ``iterable`` that supports lookahead.

    Producers that can already look ahead are returned as they are.
    """
    if isinstance(iterable, PeekableProducer):
        return iterable
    return PeekableBuffer(iter(iterable))
