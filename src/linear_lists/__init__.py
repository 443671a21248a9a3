"""Linear Lists -- positional lists with generic algorithms and a bounded sequential store.

Manifesto:
    A positional list needs only five primitives: length, get, get_mut,
    insert_before and delete. Everything else (combining, cloning, sorting,
    searching) can be written once against those primitives. ``linear_lists``
    does exactly that, and ships one concrete store: a fixed-capacity,
    array-backed list that reports overflow instead of growing.

    - **Primitives return results:** Ok / Err, never exceptions, for the two
      expected failures (OutOfRange, MemoryOverflow)
    - **Generic algorithms:** Written against the PositionalList protocol
    - **Fixed capacity:** Per list type, validated when the type is created

Architecture::

    Layer 1 -- Type System & Errors
        errors.py          LinearListError hierarchy + ErrorContext
        result.py          Result[T] envelope (Ok / Err)
        protocols.py       PositionalList / MutableSlot protocols

    Layer 2 -- Lists
        linear.py          LinearList ABC: primitives + derived operations
        sequential.py      SequentialList: bounded contiguous storage

    Layer 3 -- Cross-Cutting Concerns
        logging.py         Structured logging (structlog)
        settings.py        LinearListSettings (pydantic-settings)

Quick start::

    from linear_lists import SequentialList, bounded

    items = SequentialList()
    items.insert_before(0, 3)
    items.insert_before(0, 1)
    items.sort()

    Small = bounded(4)
    Small.from_iterable(range(5))   # Err(MemoryOverflowError(...))
"""

from linear_lists.errors import (
    ConfigError,
    ErrorCategory,
    ErrorContext,
    InvariantViolation,
    LinearListError,
    MemoryOverflowError,
    OutOfRangeError,
)
from linear_lists.linear import LinearList, SlotRef
from linear_lists.logging import configure_logging, get_logger
from linear_lists.protocols import Comparator, MutableSlot, PositionalList, Predicate
from linear_lists.result import Err, Ok, Result
from linear_lists.sequential import DEFAULT_CAPACITY, SequentialList, bounded

__version__ = "0.1.0"

__all__ = [
    # Errors
    "ErrorCategory",
    "ErrorContext",
    "LinearListError",
    "OutOfRangeError",
    "MemoryOverflowError",
    "ConfigError",
    "InvariantViolation",
    # Result
    "Ok",
    "Err",
    "Result",
    # Protocols
    "Comparator",
    "Predicate",
    "MutableSlot",
    "PositionalList",
    # Lists
    "LinearList",
    "SlotRef",
    "SequentialList",
    "bounded",
    "DEFAULT_CAPACITY",
    # Logging
    "configure_logging",
    "get_logger",
]
