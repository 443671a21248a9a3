"""
Structural protocols for positional lists.

``PositionalList`` is the contract every generic list algorithm is written
against: a length and four positional primitives. Anything with that shape can
be combined into, cloned from, or compared with a ``LinearList``, whether or
not it inherits from it.

Architecture:
    ::

        protocols.py
        ├── MutableSlot      — read/write handle onto one live position
        ├── PositionalList   — length, get, get_mut, insert_before, delete
        ├── Comparator       — cmp-style ordering function
        └── Predicate        — item test used by search_by/position_by

    Implementations:
        linear.LinearList (abstract) → sequential.SequentialList

Guardrails:
    ❌ DON'T: Reach into a list's storage from a generic algorithm
    ✅ DO: Go through the PositionalList primitives only

    ❌ DON'T: Add implementation logic to protocol classes
    ✅ DO: Put derived behaviour on LinearList

Tags:
    protocol, positional-list, contracts, linear-lists
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from linear_lists.result import Result

T = TypeVar("T")

# cmp convention: negative if a < b, zero if equal, positive if a > b
Comparator = Callable[[Any, Any], int]
Predicate = Callable[[Any], bool]


@runtime_checkable
class MutableSlot(Protocol[T]):
    """Read/write access to the item at one position."""

    @property
    def value(self) -> T:
        ...

    @value.setter
    def value(self, item: T) -> None:
        ...


@runtime_checkable
class PositionalList(Protocol[T]):
    """
    Minimal positional list interface.

    Architecture:
        ::

            PositionalList Protocol:
            ┌────────────────────────────────────────────────────────┐
            │ length()                → current item count           │
            │ get(pos)                → item, or None if out of range │
            │ get_mut(pos)            → MutableSlot, or None          │
            │ insert_before(pos, x)   → Ok(None) | Err(...)           │
            │ delete(pos)             → Ok(item) | Err(...)           │
            └────────────────────────────────────────────────────────┘

    Failures are OutOfRangeError (position invalid for the operation) and
    MemoryOverflowError (no capacity left), always returned inside Err and
    never raised. A failed call leaves the list unchanged.
    """

    def length(self) -> int:
        """Current number of items. Never fails."""
        ...

    def get(self, pos: int) -> T | None:
        """Item at ``pos``, or None when ``pos`` is not in ``[0, length)``."""
        ...

    def get_mut(self, pos: int) -> MutableSlot[T] | None:
        """Writable handle onto ``pos``, or None when out of range."""
        ...

    def insert_before(self, pos: int, item: T) -> Result[None]:
        """Make ``item`` the element at ``pos``, shifting later items up."""
        ...

    def delete(self, pos: int) -> Result[T]:
        """Remove and return the element at ``pos``, shifting later items down."""
        ...


__all__ = [
    "Comparator",
    "Predicate",
    "MutableSlot",
    "PositionalList",
]
