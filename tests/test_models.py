"""Tests for models module."""

import pytest

from pipesh.models import VARIADIC, Arity, CommandSpec


class TestArity:
    """Test Arity metadata."""

    def test_fixed(self):
        """Test fixed arity keeps its count."""
        arity = Arity.fixed(2)

        assert arity.count == 2
        assert arity.is_variadic is False
        assert str(arity) == "2"

    def test_variadic(self):
        """Test the variadic marker."""
        assert VARIADIC.is_variadic is True
        assert VARIADIC.count is None
        assert str(VARIADIC) == "*"

    def test_negative_rejected(self):
        """Test that negative counts are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            Arity.fixed(-1)

    def test_equality(self):
        """Test that arity values compare by count."""
        assert Arity.fixed(1) == Arity(1)
        assert Arity.fixed(1) != VARIADIC


class TestCommandSpec:
    """Test CommandSpec immutability."""

    def test_frozen(self):
        """Test that specs cannot be mutated after creation."""
        spec = CommandSpec("noop", Arity.fixed(0), lambda arguments: [])

        with pytest.raises(AttributeError):
            spec.name = "other"
