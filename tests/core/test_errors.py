"""Tests for linear_lists.errors module."""

import pytest

from linear_lists.errors import (
    ConfigError,
    ErrorCategory,
    ErrorContext,
    InvariantViolation,
    LinearListError,
    MemoryOverflowError,
    OutOfRangeError,
)


class TestErrorContext:
    """Test ErrorContext dataclass."""

    def test_create_empty_context(self):
        """Create context with no fields set."""
        ctx = ErrorContext()
        assert ctx.operation is None
        assert ctx.position is None
        assert ctx.metadata == {}
        assert ctx.to_dict() == {}

    def test_to_dict_includes_set_fields(self):
        """to_dict includes only non-None fields."""
        ctx = ErrorContext(operation="delete", position=0, length=0, metadata={"k": "v"})
        d = ctx.to_dict()
        assert d == {"operation": "delete", "position": 0, "length": 0, "k": "v"}
        assert "capacity" not in d


class TestLinearListError:
    """Test the base error class."""

    def test_default_category_is_internal(self):
        error = LinearListError("boom")
        assert error.category == ErrorCategory.INTERNAL
        assert error.message == "boom"
        assert str(error) == "boom"

    def test_with_context_sets_known_fields(self):
        """Known fields go on the context, the rest into metadata."""
        error = LinearListError("boom").with_context(position=3, list_type="X")
        assert error.context.position == 3
        assert error.context.metadata == {"list_type": "X"}

    def test_with_context_returns_same_error(self):
        error = LinearListError("boom")
        assert error.with_context(operation="sort") is error

    def test_cause_is_chained(self):
        root = OutOfRangeError("inner")
        error = InvariantViolation("outer", cause=root)
        assert error.cause is root
        assert error.__cause__ is root

    def test_to_dict(self):
        error = LinearListError("boom", cause=ValueError("bad"))
        d = error.to_dict()
        assert d["error_type"] == "LinearListError"
        assert d["message"] == "boom"
        assert d["category"] == "INTERNAL"
        assert d["cause"] == "bad"
        assert "context" not in d

    def test_repr(self):
        assert repr(LinearListError("boom")) == "LinearListError('boom', category=INTERNAL)"


class TestPositionalErrors:
    """OutOfRangeError and MemoryOverflowError."""

    def test_out_of_range_at(self):
        error = OutOfRangeError.at("delete", position=4, length=2)
        assert error.category == ErrorCategory.POSITION
        assert error.context.to_dict() == {"operation": "delete", "position": 4, "length": 2}
        assert "position 4" in error.message

    def test_memory_overflow_at(self):
        error = MemoryOverflowError.at("insert_before", position=0, length=10, capacity=10)
        assert error.category == ErrorCategory.CAPACITY
        assert error.context.capacity == 10
        assert error.to_dict()["context"]["length"] == 10

    @pytest.mark.parametrize(
        "error_type, category",
        [
            (OutOfRangeError, ErrorCategory.POSITION),
            (MemoryOverflowError, ErrorCategory.CAPACITY),
            (ConfigError, ErrorCategory.CONFIG),
            (InvariantViolation, ErrorCategory.INTERNAL),
        ],
    )
    def test_subclass_categories(self, error_type, category):
        error = error_type("msg")
        assert isinstance(error, LinearListError)
        assert error.category == category

    def test_explicit_category_overrides_default(self):
        error = OutOfRangeError("msg", category=ErrorCategory.INTERNAL)
        assert error.category == ErrorCategory.INTERNAL
