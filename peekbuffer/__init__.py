from .buffer import PeekableBuffer, peekable
from .producer import (
    MISSING,
    EmptyHeadError,
    EmptySequenceError,
    LookaheadIndexError,
    PeekableProducer,
    SequenceProducer,
)
from .views import PeekWhileView, TakeWhileView

__version__ = "0.1.0"
