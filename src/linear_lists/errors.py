"""
Structured error types for linear lists.

Provides a small hierarchy of typed errors with metadata for categorization,
logging, and root cause analysis through error chaining.

Positional primitives never raise for expected failures. They return an
``Err`` carrying one of the errors below (see ``linear_lists.result``). Only
two such failures exist: a position outside the valid range, and an insert
into a list that has no capacity left. Everything else in this module is
raised, because it signals a bug or a misconfigured list type rather than a
condition the caller is expected to handle.

Manifesto:
    - **Typed Error Hierarchy:** One class per failure mode
    - **Values for expected failures:** OutOfRange/MemoryOverflow travel in Err
    - **Exceptions for broken invariants:** InvariantViolation is fatal
    - **Rich Context:** Errors carry operation, position, length and capacity

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                     LinearListError                          │
        │              (category, context, cause)                      │
        ├─────────────────────────────────────────────────────────────┤
        │                                                              │
        │  OutOfRangeError    MemoryOverflowError                      │
        │  (POSITION)         (CAPACITY)          ← returned in Err    │
        │                                                              │
        │  ConfigError        InvariantViolation                       │
        │  (CONFIG)           (INTERNAL)          ← raised             │
        └─────────────────────────────────────────────────────────────┘

Examples:
    >>> error = OutOfRangeError.at("delete", position=3, length=2)
    >>> error.category
    <ErrorCategory.POSITION: 'POSITION'>
    >>> error.context.position
    3

    >>> MemoryOverflowError.at("insert_before", position=0, length=10, capacity=10).to_dict()["category"]
    'CAPACITY'

Guardrails:
    ❌ DON'T: Raise OutOfRangeError from a primitive
    ✅ DO: Return Err(OutOfRangeError(...))

    ❌ DON'T: Swallow the original error when escalating to InvariantViolation
    ✅ DO: Pass it as cause= for error chaining

Tags:
    error-handling, exception-hierarchy, error-context, linear-lists
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Error categories for classification.

    Attributes:
        POSITION: A position argument outside the valid range
        CAPACITY: The backing store has no room left
        CONFIG: A list type was declared with an invalid capacity
        INTERNAL: Bugs, broken invariants
    """

    POSITION = "POSITION"
    CAPACITY = "CAPACITY"
    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """
    Structured metadata context for errors.

    Typed fields cover what every positional failure needs to be diagnosed:
    which operation ran, at which position, and how full the list was. Any
    additional metadata goes in ``metadata``. ``to_dict()`` serializes all
    non-None fields for logging.

    Examples:
        >>> ErrorContext(operation="delete", position=4, length=2).to_dict()
        {'operation': 'delete', 'position': 4, 'length': 2}

        >>> ctx = ErrorContext()
        >>> ctx.metadata["list_type"] = "SequentialList"
        >>> ctx.to_dict()
        {'list_type': 'SequentialList'}

    Attributes:
        operation: Name of the list operation that failed
        position: Position argument supplied by the caller
        length: Length of the list when the operation was attempted
        capacity: Capacity of the list, for bounded lists
        metadata: Additional key-value pairs
    """

    operation: str | None = None
    position: int | None = None
    length: int | None = None
    capacity: int | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["operation", "position", "length", "capacity"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class LinearListError(Exception):
    """
    Base exception for all linear list errors.

    Every LinearListError carries:
    - **category:** ErrorCategory for classification
    - **context:** ErrorContext with operation/position/length/capacity
    - **cause:** Optional underlying exception for chaining

    Subclasses set ``default_category`` to describe their failure mode.

    Examples:
        >>> error = LinearListError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>

        >>> error.with_context(operation="sort", list_type="SequentialList")
        LinearListError('Something went wrong', category=INTERNAL)
        >>> error.context.metadata["list_type"]
        'SequentialList'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> LinearListError:
        """
        Add context to this error (fluent API).

        Known ErrorContext fields are set directly; anything else lands in
        ``context.metadata``.
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# POSITIONAL FAILURES (returned inside Err)
# =============================================================================


class OutOfRangeError(LinearListError):
    """
    A supplied position lies outside the valid range for the operation.

    Valid ranges are ``0 <= pos <= length`` for insert and
    ``0 <= pos < length`` for delete, get and swap.
    """

    default_category = ErrorCategory.POSITION

    @classmethod
    def at(cls, operation: str, *, position: int, length: int) -> OutOfRangeError:
        error = cls(f"{operation}: position {position} out of range for length {length}")
        error.with_context(operation=operation, position=position, length=length)
        return error


class MemoryOverflowError(LinearListError):
    """An insert was attempted while the backing store is full."""

    default_category = ErrorCategory.CAPACITY

    @classmethod
    def at(
        cls, operation: str, *, position: int, length: int, capacity: int
    ) -> MemoryOverflowError:
        error = cls(f"{operation}: list is full (capacity {capacity})")
        error.with_context(
            operation=operation, position=position, length=length, capacity=capacity
        )
        return error


# =============================================================================
# RAISED ERRORS
# =============================================================================


class ConfigError(LinearListError):
    """
    A list type was declared with an invalid configuration.

    Raised when a bounded list type is created, never while using one.
    """

    default_category = ErrorCategory.CONFIG


class InvariantViolation(LinearListError):
    """
    A primitive failed where success was guaranteed by construction.

    Generic operations compute positions that are valid by construction
    (appending at the current length, reading ``0..length``). If a primitive
    still rejects them the list implementation is broken, so this is raised
    rather than returned.
    """

    default_category = ErrorCategory.INTERNAL


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "LinearListError",
    "OutOfRangeError",
    "MemoryOverflowError",
    "ConfigError",
    "InvariantViolation",
]
