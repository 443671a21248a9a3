"""
Bounded sequential list: a linear list over fixed-capacity contiguous storage.

SequentialList keeps its items in a pre-sized backing store of ``CAPACITY``
slots plus a ``length`` counter. Slots ``[0, length)`` hold live items;
slots ``[length, CAPACITY)`` hold a private vacancy marker that no public
operation ever returns. Inserting and deleting shift the tail of the live
range by one slot. There is no growth path: a full list reports
MemoryOverflowError instead of reallocating.

Manifesto:
    - **Fixed capacity:** One constant per list type, checked when the type
      is created, identical for every instance of that type
    - **Explicit failures:** OutOfRange and MemoryOverflow come back as Err
    - **Atomic rejection:** Validation happens before any slot is touched
    - **Ownership transfer:** ``delete`` clears the vacated slot and hands the
      item to the caller

Architecture:
    ::

        CAPACITY = 10, length = 4

        ┌────┬────┬────┬────┬────┬────┬────┬────┬────┬────┐
        │ a  │ b  │ c  │ d  │ ·  │ ·  │ ·  │ ·  │ ·  │ ·  │
        └────┴────┴────┴────┴────┴────┴────┴────┴────┴────┘
          0    1    2    3    └────── vacant, never read

        insert_before(1, x):  shift [1, 4) right, back to front
        ┌────┬────┬────┬────┬────┐
        │ a  │ x  │ b  │ c  │ d  │   length = 5
        └────┴────┴────┴────┴────┘

        delete(1):  shift (1, 5) left, clear slot 4, return x

Examples:
    >>> items = SequentialList()
    >>> for n in range(10):
    ...     _ = items.insert_before(0, n)
    >>> items.to_list()
    [9, 8, 7, 6, 5, 4, 3, 2, 1, 0]
    >>> items.insert_before(3, 10)
    Err(MemoryOverflowError('insert_before: list is full (capacity 10)', category=CAPACITY))

    Other capacities:

    >>> Pair = bounded(2)
    >>> Pair.CAPACITY
    2
    >>> Pair.from_iterable("abc").is_err()
    True

Performance:
    - **get/get_mut/swap:** O(1)
    - **insert_before/delete:** O(length - pos) slot moves
    - **Memory:** CAPACITY slots allocated up front

Guardrails:
    ❌ DON'T: Expect a full list to grow
    ✅ DO: Pick a capacity with bounded(n) and handle MemoryOverflowError

    ❌ DON'T: Keep a SlotRef across insert/delete
    ✅ DO: Call get_mut again after changing the list's shape

Tags:
    sequential-allocation, bounded-list, fixed-capacity, array-backed,
    linear-lists
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from typing import Any, ClassVar, TypeVar

from linear_lists.errors import ConfigError, MemoryOverflowError, OutOfRangeError
from linear_lists.linear import LinearList, SlotRef
from linear_lists.logging import get_logger
from linear_lists.result import Err, Ok, Result

T = TypeVar("T")

DEFAULT_CAPACITY = 10

logger = get_logger(__name__)


class _Vacant:
    """Marker held by slots outside the live range."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<vacant>"


_VACANT = _Vacant()


def _validate_capacity(capacity: Any, type_name: str) -> None:
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
        raise ConfigError(
            f"{type_name}: CAPACITY must be a positive int, got {capacity!r}"
        ).with_context(capacity=capacity if isinstance(capacity, int) else None, list_type=type_name)


class SequentialList(LinearList[T]):
    """
    Positional list backed by a fixed-size contiguous store.

    ``CAPACITY`` is a class constant. Subclass and override it, or call
    ``bounded(n)`` / ``SequentialList.with_capacity(n)``, to get a list
    type with a different capacity.

    Examples:
        >>> items = SequentialList()
        >>> items.insert_before(0, "b")
        Ok(None)
        >>> items.insert_before(0, "a")
        Ok(None)
        >>> items.insert_after(1, "c")
        Ok(None)
        >>> items.to_list()
        ['a', 'b', 'c']
        >>> items.delete(1)
        Ok('b')
        >>> items.delete(5).is_err()
        True
    """

    CAPACITY: ClassVar[int] = DEFAULT_CAPACITY

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _validate_capacity(cls.CAPACITY, cls.__name__)

    def __init__(self) -> None:
        self._length = 0
        self._memory: list[Any] = [_VACANT] * self.CAPACITY
        # Bumped by every insert/delete; SlotRefs compare against it.
        self._shape_version = 0

    @classmethod
    def with_capacity(cls, capacity: int) -> type[SequentialList[Any]]:
        """List type derived from this one with a different CAPACITY."""
        return _derive(cls, capacity)

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> Result[SequentialList[T]]:
        """
        New list holding ``items`` in order.

        Returns Err(MemoryOverflowError) if there are more items than
        ``CAPACITY``.
        """
        created = cls()
        for item in items:
            appended = created.insert_before(created.length(), item)
            if appended.is_err():
                return Err(appended.error)
        return Ok(created)

    # ------------------------------------------------------------------
    # Capacity
    # ------------------------------------------------------------------

    @property
    def capacity(self) -> int:
        return self.CAPACITY

    def is_empty(self) -> bool:
        return self._length == 0

    def is_full(self) -> bool:
        return self._length == self.CAPACITY

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def length(self) -> int:
        return self._length

    def get(self, pos: int) -> T | None:
        if 0 <= pos < self._length:
            return self._memory[pos]
        return None

    def get_mut(self, pos: int) -> SlotRef[T] | None:
        if not 0 <= pos < self._length:
            return None
        version = self._shape_version

        def load() -> T:
            return self._memory[pos]

        def store(item: T) -> None:
            self._memory[pos] = item

        return SlotRef(
            pos,
            load=load,
            store=store,
            is_live=lambda: self._shape_version == version,
        )

    def insert_before(self, pos: int, item: T) -> Result[None]:
        if not 0 <= pos <= self._length:
            logger.debug(
                "insert_rejected", reason="out_of_range", position=pos, length=self._length
            )
            return Err(OutOfRangeError.at("insert_before", position=pos, length=self._length))
        if self._length == self.CAPACITY:
            logger.debug(
                "insert_rejected", reason="memory_overflow", position=pos, length=self._length
            )
            return Err(
                MemoryOverflowError.at(
                    "insert_before", position=pos, length=self._length, capacity=self.CAPACITY
                )
            )

        for i in range(self._length, pos, -1):
            self._memory[i] = self._memory[i - 1]
        self._memory[pos] = item
        self._length += 1
        self._shape_version += 1
        return Ok(None)

    def delete(self, pos: int) -> Result[T]:
        if not 0 <= pos < self._length:
            logger.debug(
                "delete_rejected", reason="out_of_range", position=pos, length=self._length
            )
            return Err(OutOfRangeError.at("delete", position=pos, length=self._length))

        item = self._memory[pos]
        for i in range(pos, self._length - 1):
            self._memory[i] = self._memory[i + 1]
        self._length -= 1
        self._memory[self._length] = _VACANT
        self._shape_version += 1
        return Ok(item)

    def swap(self, i: int, j: int) -> Result[None]:
        for pos in (i, j):
            if not 0 <= pos < self._length:
                return Err(OutOfRangeError.at("swap", position=pos, length=self._length))
        self._memory[i], self._memory[j] = self._memory[j], self._memory[i]
        return Ok(None)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r}, capacity={self.CAPACITY})"


@lru_cache(maxsize=None, typed=True)
def _derive(base: type[SequentialList[Any]], capacity: int) -> type[SequentialList[Any]]:
    # One type per (base, capacity).
    _validate_capacity(capacity, f"{base.__name__}.with_capacity({capacity!r})")
    namespace = {"CAPACITY": capacity, "__module__": base.__module__}
    return type(base)(f"{base.__name__}{capacity}", (base,), namespace)


def bounded(capacity: int) -> type[SequentialList[Any]]:
    """SequentialList type whose instances hold at most ``capacity`` items."""
    return SequentialList.with_capacity(capacity)


__all__ = [
    "DEFAULT_CAPACITY",
    "SequentialList",
    "bounded",
]
