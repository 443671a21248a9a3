"""
Shared pytest fixtures and configuration for linear-lists tests.

This module provides:
- A second LinearList implementation (unbounded, backed by a Python list)
  so the generic algorithms can be checked against more than one store
- A source list whose delete fails for reasons other than exhaustion
- Ready-made empty / full / reversed sequential lists
- structlog reset between tests
"""

import sys
from pathlib import Path
from typing import Any, Generator

import pytest
import structlog

# Ensure linear_lists package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from linear_lists import (
    DEFAULT_CAPACITY,
    Err,
    LinearList,
    LinearListError,
    Ok,
    OutOfRangeError,
    SequentialList,
    SlotRef,
)


# =============================================================================
# Alternative list implementations
# =============================================================================


class PythonBackedList(LinearList):
    """Unbounded LinearList over a Python list; never overflows."""

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._shape_version = 0

    def length(self) -> int:
        return len(self._items)

    def get(self, pos: int) -> Any:
        if 0 <= pos < len(self._items):
            return self._items[pos]
        return None

    def get_mut(self, pos: int) -> SlotRef | None:
        if not 0 <= pos < len(self._items):
            return None
        version = self._shape_version

        def store(item: Any) -> None:
            self._items[pos] = item

        return SlotRef(
            pos,
            load=lambda: self._items[pos],
            store=store,
            is_live=lambda: self._shape_version == version,
        )

    def insert_before(self, pos: int, item: Any):
        if not 0 <= pos <= len(self._items):
            return Err(OutOfRangeError.at("insert_before", position=pos, length=len(self._items)))
        self._items.insert(pos, item)
        self._shape_version += 1
        return Ok(None)

    def delete(self, pos: int):
        if not 0 <= pos < len(self._items):
            return Err(OutOfRangeError.at("delete", position=pos, length=len(self._items)))
        self._shape_version += 1
        return Ok(self._items.pop(pos))


class FlakySource:
    """
    Positional source that hands out ``items`` then fails with a non-range error.

    Matches the PositionalList protocol without inheriting from LinearList.
    """

    def __init__(self, items: list[Any]) -> None:
        self.items = list(items)
        self.delete_calls = 0

    def length(self) -> int:
        return len(self.items)

    def get(self, pos: int) -> Any:
        return self.items[pos] if 0 <= pos < len(self.items) else None

    def get_mut(self, pos: int) -> None:
        return None

    def insert_before(self, pos: int, item: Any):
        return Err(LinearListError("read-only source"))

    def delete(self, pos: int):
        self.delete_calls += 1
        if self.items:
            return Ok(self.items.pop(pos))
        return Err(LinearListError("source backend unavailable"))


def build(list_type: type, items) -> LinearList:
    created = list_type()
    for item in items:
        created.insert_before(created.length(), item).unwrap()
    return created


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Every test starts and ends with structlog's default configuration."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture(params=[SequentialList, PythonBackedList], ids=["sequential", "python_backed"])
def list_type(request) -> type:
    """Each LinearList implementation under test."""
    return request.param


@pytest.fixture
def make_list(list_type):
    """Factory building a list of the parametrized type from an iterable."""
    return lambda items=(): build(list_type, items)


@pytest.fixture
def flaky_source():
    return FlakySource


@pytest.fixture
def empty_list() -> SequentialList:
    return SequentialList()


@pytest.fixture
def full_list() -> SequentialList:
    return build(SequentialList, range(DEFAULT_CAPACITY))


@pytest.fixture
def reversed_list() -> SequentialList:
    """Capacity-10 list built by inserting 0..9 at the front: 9, 8, ..., 0."""
    items = SequentialList()
    for n in range(DEFAULT_CAPACITY):
        items.insert_before(0, n).unwrap()
    return items
