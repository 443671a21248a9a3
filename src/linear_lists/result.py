"""
Result envelope for positional list primitives.

Provides a typed Result[T] pattern that makes success/failure explicit: every
primitive that can fail (``insert_before``, ``delete``, ``swap``) returns
Ok[T] on success or Err[T] carrying an OutOfRangeError / MemoryOverflowError.
Primitives never raise for these expected failures, and a rejected call
leaves the list unchanged.

Manifesto:
    - **Explicit over Implicit:** No hidden exceptions that callers might miss
    - **Two failure paths:** Err for recoverable failures, ``expect()`` to
      escalate a "cannot happen" failure to InvariantViolation
    - **Functional composition:** Chain with map/and_then without try/except

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                     Result[T]                                │
        ├─────────────────────────────┬───────────────────────────────┤
        │     Ok[T]                   │     Err[T]                     │
        │ • value: T                  │ • error: Exception             │
        │ • unwrap() → value          │ • unwrap() → raise error       │
        │ • expect() → value          │ • expect() → raise             │
        │                             │   InvariantViolation           │
        └─────────────────────────────┴───────────────────────────────┘

Examples:
    >>> from linear_lists import SequentialList
    >>> items = SequentialList()
    >>> items.insert_before(0, "a")
    Ok(None)
    >>> items.insert_before(5, "b").is_err()
    True

    Pattern matching:

    >>> match items.delete(0):
    ...     case Ok(item):
    ...         print(item)
    ...     case Err(error):
    ...         print(error.category)
    a

Tags:
    result-type, error-handling, functional, linear-lists
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from linear_lists.errors import InvariantViolation, LinearListError
from linear_lists.logging import get_logger

T = TypeVar("T")
U = TypeVar("U")

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """
    Successful result containing a value.

    Immutable (frozen dataclass). ``insert_before`` and ``swap`` return
    ``Ok(None)``; ``delete`` returns ``Ok(item)`` and hands ownership of the
    removed item to the caller.

    Examples:
        >>> Ok(10).map(lambda x: x * 2).unwrap()
        20
        >>> Ok(42).unwrap_or(0)
        42
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the value. Safe for Ok."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Get value or default (always returns value for Ok)."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Exception], T]) -> T:
        """Get value or call f with error (always returns value for Ok)."""
        return self.value

    def expect(self, message: str) -> T:
        """Get the value. Safe for Ok."""
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U]:
        """Transform the value if Ok."""
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Exception], Exception]) -> Result[T]:
        """Transform error if Err (no-op for Ok)."""
        return self

    def and_then(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """Chain to another Result-returning function."""
        return f(self.value)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"ok": True, "value": self.value}

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[T]):
    """
    Failed result containing an error.

    The error is never raised by the primitive that produced it. The caller
    decides: inspect it, fall back with ``unwrap_or``, re-raise it with
    ``unwrap()``, or declare it impossible with ``expect()``.

    Examples:
        >>> from linear_lists.errors import OutOfRangeError
        >>> result = Err(OutOfRangeError.at("delete", position=0, length=0))
        >>> result.unwrap_or("empty")
        'empty'
        >>> result.unwrap()
        Traceback (most recent call last):
        ...
        linear_lists.errors.OutOfRangeError: delete: position 0 out of range for length 0
    """

    error: Exception

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Raise the error. Use only when you're sure it's Ok."""
        raise self.error

    def unwrap_or(self, default: T) -> T:
        """Get default since this is Err."""
        return default

    def unwrap_or_else(self, f: Callable[[Exception], T]) -> T:
        """Call f with error to get value."""
        return f(self.error)

    def expect(self, message: str) -> T:
        """
        Escalate to InvariantViolation.

        For call sites that computed a position valid by construction: a
        failure there means the list implementation broke its contract.
        """
        violation = InvariantViolation(message, cause=self.error)
        if isinstance(self.error, LinearListError):
            violation.context = self.error.context
        logger.error("invariant_violation", message=message, error=repr(self.error))
        raise violation

    def map(self, f: Callable[[T], U]) -> Result[U]:
        """No-op for Err."""
        return Err(self.error)

    def map_err(self, f: Callable[[Exception], Exception]) -> Result[T]:
        """Transform the error."""
        return Err(f(self.error))

    def and_then(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """No-op for Err."""
        return Err(self.error)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        if isinstance(self.error, LinearListError):
            return {"ok": False, "error": self.error.to_dict()}
        return {
            "ok": False,
            "error": {
                "error_type": type(self.error).__name__,
                "message": str(self.error),
            },
        }

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Type alias for Result
Result = Ok[T] | Err[T]


__all__ = [
    "Ok",
    "Err",
    "Result",
]
