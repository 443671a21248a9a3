"""
Abstract linear list: positional primitives plus generic algorithms.

A linear list is a sequence of items addressed by position ``0..length-1``.
Concrete lists supply five primitives (``length``, ``get``, ``get_mut``,
``insert_before``, ``delete``); everything else on this class (combining,
cloning, sorting, searching, the Python container protocol) is written once
against those primitives and works unchanged for any backing store.

Manifesto:
    - **Primitives only:** Generic code never touches concrete storage
    - **Failures are values:** Primitives return Ok/Err, never raise
    - **Guaranteed positions are asserted:** When a generic algorithm computes
      a position that is valid by construction, a primitive failure there is
      escalated to InvariantViolation via ``Result.expect``
    - **Swap, don't reinsert:** Sorting exchanges values in place, so
      positions stay put and only the values move

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                      LinearList[T]                           │
        ├─────────────────────────────────────────────────────────────┤
        │  Primitives (abstract)  │  Derived (generic)                 │
        │  ─────────────────────  │  ─────────────────                 │
        │  length()               │  insert_after()   append()         │
        │  get(pos)               │  combine()        combine_all()    │
        │  get_mut(pos)           │  clone()                           │
        │  insert_before(pos, x)  │  clone_combine()  clone_combine_all│
        │  delete(pos)            │  swap()  sort()  sort_by()         │
        │                         │  sort_by_key()                     │
        │                         │  search_by()      position_by()    │
        │                         │  __len__ __iter__ __eq__ ...       │
        └─────────────────────────────────────────────────────────────┘
                                   ▲
                                   │
                           SequentialList[T]

Examples:
    >>> from linear_lists import SequentialList
    >>> numbers = SequentialList.from_iterable([3, 1, 2]).unwrap()
    >>> numbers.sort()
    >>> numbers.to_list()
    [1, 2, 3]
    >>> numbers.search_by(lambda n: n > 1)
    2

    Moving items between lists:

    >>> other = SequentialList.from_iterable([4, 5]).unwrap()
    >>> numbers.combine(other)
    >>> numbers.to_list(), other.length()
    ([1, 2, 3, 4, 5], 0)

Performance:
    - **sort/sort_by:** O(n²) comparisons (bubble sort), O(1) extra space
    - **combine:** O(n) primitive calls; cost per call depends on the store
    - **search_by:** O(n), stops at the first match

Tags:
    linear-list, positional-list, generic-algorithms, bubble-sort,
    linear-lists
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from linear_lists.errors import InvariantViolation, OutOfRangeError
from linear_lists.logging import get_logger
from linear_lists.protocols import Comparator, MutableSlot, PositionalList, Predicate
from linear_lists.result import Err, Ok, Result

T = TypeVar("T")

logger = get_logger(__name__)


class SlotRef(Generic[T]):
    """
    Writable handle onto one live position of a list.

    Built by a concrete list's ``get_mut``. Reading ``value`` loads the slot,
    assigning to it stores into the slot. The handle stays valid until the
    next structural mutation (insert or delete) of its list; after that,
    ``is_live`` turns False and any access raises InvariantViolation.

    Examples:
        >>> from linear_lists import SequentialList
        >>> items = SequentialList.from_iterable([1, 2]).unwrap()
        >>> slot = items.get_mut(1)
        >>> slot.value += 40
        >>> items.get(1)
        42
    """

    __slots__ = ("position", "_load", "_store", "_is_live")

    def __init__(
        self,
        position: int,
        *,
        load: Callable[[], T],
        store: Callable[[T], None],
        is_live: Callable[[], bool],
    ) -> None:
        self.position = position
        self._load = load
        self._store = store
        self._is_live = is_live

    @property
    def is_live(self) -> bool:
        return self._is_live()

    def _check_live(self) -> None:
        if not self._is_live():
            raise InvariantViolation(
                f"slot handle for position {self.position} used after the list was modified"
            ).with_context(operation="get_mut", position=self.position)

    @property
    def value(self) -> T:
        self._check_live()
        return self._load()

    @value.setter
    def value(self, item: T) -> None:
        self._check_live()
        self._store(item)

    def __repr__(self) -> str:
        state = "live" if self._is_live() else "stale"
        return f"SlotRef(position={self.position}, {state})"


class LinearList(ABC, Generic[T]):
    """
    Base class for positional lists.

    Subclasses implement the primitives; the derived operations below must
    not be overridden with different semantics (``swap`` may be overridden
    for speed, keeping the same contract).

    Primitive contract:
        - ``insert_before(pos, x)``: valid for ``0 <= pos <= length``.
          ``pos > length`` → Err(OutOfRangeError) regardless of capacity;
          a full list with a valid ``pos`` → Err(MemoryOverflowError).
        - ``delete(pos)``: valid for ``0 <= pos < length``, else
          Err(OutOfRangeError).
        - ``get``/``get_mut``: None outside ``[0, length)``.
        - Negative positions are always out of range.
        - A failed call leaves the list unchanged.
    """

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    @abstractmethod
    def length(self) -> int:
        """Current number of items."""

    @abstractmethod
    def get(self, pos: int) -> T | None:
        """Item at ``pos``, or None when out of range."""

    @abstractmethod
    def get_mut(self, pos: int) -> MutableSlot[T] | None:
        """Writable handle onto ``pos``, or None when out of range."""

    @abstractmethod
    def insert_before(self, pos: int, item: T) -> Result[None]:
        """Insert ``item`` so that it becomes the element at ``pos``."""

    @abstractmethod
    def delete(self, pos: int) -> Result[T]:
        """Remove the element at ``pos`` and hand it to the caller."""

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def insert_after(self, pos: int, item: T) -> Result[None]:
        """Insert ``item`` right after position ``pos``."""
        return self.insert_before(pos + 1, item)

    def append(self, item: T) -> Result[None]:
        """Insert ``item`` at the end."""
        return self.insert_before(self.length(), item)

    # ------------------------------------------------------------------
    # Combination and cloning
    # ------------------------------------------------------------------

    def combine(self, other: PositionalList[T]) -> None:
        """
        Move every item of ``other`` onto the end of this list.

        Items are taken from position 0 of ``other`` until its ``delete``
        fails. Any delete failure counts as "other is exhausted" and ends the
        loop quietly. Appending to this list is expected to succeed; if it
        does not (e.g. this list fills up) an InvariantViolation is raised,
        and the item that could not be appended is lost from ``other``.
        """
        if other is self:
            raise ValueError("cannot combine a list with itself")
        moved = 0
        while True:
            taken = other.delete(0)
            if taken.is_err():
                break
            self.insert_before(self.length(), taken.unwrap()).expect(
                "combine: append at current length failed"
            )
            moved += 1
        logger.debug("combine_completed", moved=moved, length=self.length())

    def combine_all(self, others: Iterable[PositionalList[T]]) -> None:
        for other in others:
            self.combine(other)

    def clone(self) -> LinearList[T]:
        """
        New list of the same type holding shallow copies of every item.

        The type must be constructible without arguments.
        """
        cloned = type(self)()
        for item in self:
            cloned.insert_before(cloned.length(), copy.copy(item)).expect(
                "clone: append at current length failed"
            )
        return cloned

    def clone_combine(self, other: PositionalList[T]) -> None:
        """Append shallow copies of ``other``'s items; ``other`` is untouched."""
        for pos in range(other.length()):
            item = other.get(pos)
            self.insert_before(self.length(), copy.copy(item)).expect(
                "clone_combine: append at current length failed"
            )

    def clone_combine_all(self, others: Iterable[PositionalList[T]]) -> None:
        for other in others:
            self.clone_combine(other)

    # ------------------------------------------------------------------
    # Reordering
    # ------------------------------------------------------------------

    def swap(self, i: int, j: int) -> Result[None]:
        """
        Exchange the values at positions ``i`` and ``j``.

        Both values are read through ``get_mut`` handles before either is
        written, so the exchange never depends on a half-updated slot.
        """
        left = self.get_mut(i)
        if left is None:
            return Err(OutOfRangeError.at("swap", position=i, length=self.length()))
        right = self.get_mut(j)
        if right is None:
            return Err(OutOfRangeError.at("swap", position=j, length=self.length()))
        if i != j:
            left.value, right.value = right.value, left.value
        return Ok(None)

    def sort(self) -> None:
        """Sort ascending in place using the items' natural ordering."""
        self._bubble_sort(lambda a, b: a > b)

    def sort_by(self, compare: Comparator) -> None:
        """
        Sort in place with a cmp-style ``compare(a, b)``.

        Adjacent items are exchanged only when ``compare`` reports the left
        one greater (a positive result).
        """
        self._bubble_sort(lambda a, b: compare(a, b) > 0)

    def sort_by_key(self, key: Callable[[T], Any]) -> None:
        self._bubble_sort(lambda a, b: key(a) > key(b))

    def _bubble_sort(self, greater: Callable[[T, T], bool]) -> None:
        # Only a strict "greater" swaps, so equal items keep their order.
        passes = 0
        swaps = 0
        exchanged = True
        while exchanged:
            exchanged = False
            passes += 1
            for pos in range(self.length() - 1):
                if greater(self.get(pos), self.get(pos + 1)):
                    self.swap(pos, pos + 1).expect("sort: adjacent swap failed")
                    exchanged = True
                    swaps += 1
        logger.debug("sort_completed", passes=passes, swaps=swaps, length=self.length())

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search_by(self, predicate: Predicate) -> T | None:
        """First item (lowest position) satisfying ``predicate``, or None."""
        for item in self:
            if predicate(item):
                return item
        return None

    def position_by(self, predicate: Predicate) -> int | None:
        """Position of the first item satisfying ``predicate``, or None."""
        for pos, item in enumerate(self):
            if predicate(item):
                return pos
        return None

    def contains_position(self, pos: int) -> bool:
        return 0 <= pos < self.length()

    # ------------------------------------------------------------------
    # Python container protocol
    # ------------------------------------------------------------------

    def to_list(self) -> list[T]:
        return list(self)

    def __len__(self) -> int:
        return self.length()

    def __iter__(self) -> Iterator[T]:
        for pos in range(self.length()):
            yield self.get(pos)

    def __contains__(self, item: object) -> bool:
        return any(existing == item for existing in self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PositionalList):
            return NotImplemented
        if self.length() != other.length():
            return False
        return all(self.get(pos) == other.get(pos) for pos in range(self.length()))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"


__all__ = [
    "LinearList",
    "SlotRef",
]
