"""

Interfaces shared by buffers and the views derived from them.

"""

import enum
from abc import abstractmethod
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Iterator,
    List,
    Literal,
    Optional,
    Protocol,
    TypeVar,
    Union,
    runtime_checkable,
)

if TYPE_CHECKING:
    from .views import PeekWhileView, TakeWhileView

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

Predicate = Callable[[T], bool]


class Missing(enum.Enum):
    token = 0

    def __repr__(self) -> str:
        return "MISSING"


# Marks "no element at this offset"; None is a valid element.
MISSING = Missing.token

MaybeT = Union[T, Literal[Missing.token]]


@dataclass
class EmptySequenceError(StopIteration):
    """Raised when next() is called on an exhausted sequence.

    Subclasses StopIteration so that exhausted producers end ``for`` loops
    like any other iterator.
    """

    operation: str

    def __post_init__(self) -> None:
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"{self.operation} on empty sequence"


@dataclass
class EmptyHeadError(LookupError):
    """Raised by head() when nothing remains.

    Not a StopIteration, so an empty head() inside a map() callback or a
    predicate is reported instead of ending the surrounding loop.
    """

    def __post_init__(self) -> None:
        super().__init__(str(self))

    def __str__(self) -> str:
        return "head of empty sequence"


@dataclass
class LookaheadIndexError(ValueError):
    message: str

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


@runtime_checkable
class SequenceProducer(Protocol[T_co]):
    """Anything that can be drained with next()."""

    def __iter__(self) -> Iterator[T_co]:
        ...

    def __next__(self) -> T_co:
        ...


def check_index(index: int) -> None:
    if index < 0:
        raise LookaheadIndexError(
            f"lookahead index must be non-negative, got {index}"
        )


class PeekableProducer(Iterator[T]):
    """A sequence that can look ahead at any future element.

    Subclasses provide ``_lift`` and ``__next__``; everything else is
    expressed in terms of those two.
    """

    @abstractmethod
    def _lift(self, index: int) -> MaybeT[T]:
        """Return the element ``index`` positions ahead, or MISSING."""
        raise NotImplementedError

    @abstractmethod
    def __next__(self) -> T:
        raise NotImplementedError

    def __iter__(self) -> "PeekableProducer[T]":
        return self

    def buffered(self) -> "PeekableProducer[T]":
        return self

    def lift(self, index: int, default: Optional[T] = None) -> Optional[T]:
        """Look at the element ``index`` positions ahead without consuming it.

        Index 0 is the element the next call to next() returns. Returns
        ``default`` if the sequence ends before that offset.
        """
        check_index(index)
        value = self._lift(index)
        if value is MISSING:
            return default
        return value

    def lift_many(
        self, start: int, end: int, default: Optional[T] = None
    ) -> List[Optional[T]]:
        """Lift every offset from ``start`` to ``end``, both inclusive."""
        check_index(start)
        if start > end:
            raise LookaheadIndexError(
                f"start of lookahead range ({start}) is after its end ({end})"
            )
        return [self.lift(index, default) for index in range(start, end + 1)]

    def has_next(self) -> bool:
        return self._lift(0) is not MISSING

    def head(self) -> T:
        value = self._lift(0)
        if value is MISSING:
            raise EmptyHeadError()
        return value

    def head_option(self, default: Optional[T] = None) -> Optional[T]:
        return self.lift(0, default)

    def known_size(self) -> Optional[int]:
        """Number of remaining elements, or None if it is not known."""
        return None

    def __length_hint__(self) -> Any:
        size = self.known_size()
        if size is None:
            return NotImplemented
        return size

    def peek_while(self, predicate: Predicate[T]) -> "PeekWhileView[T]":
        """Iterate over the leading elements matching ``predicate`` without
        consuming any of them."""
        from .views import PeekWhileView

        return PeekWhileView(self, predicate)

    def take_while(self, predicate: Predicate[T]) -> "TakeWhileView[T]":
        """Consume the leading elements matching ``predicate``.

        Unlike itertools.takewhile, the first element that fails the predicate
        is left in place.
        """
        from .views import TakeWhileView

        return TakeWhileView(self, predicate)

    def drop_while(self, predicate: Predicate[T]) -> "PeekableProducer[T]":
        """Discard leading elements matching ``predicate`` and return self."""
        while True:
            value = self._lift(0)
            if value is MISSING or not predicate(value):
                return self
            next(self)
