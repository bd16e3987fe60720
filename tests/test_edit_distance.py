"""Tests for edit_distance module."""

import pytest

from pipesh.edit_distance import edit_distance


class TestEditDistance:
    """Test Levenshtein distance."""

    @pytest.mark.parametrize(
        ("source", "target", "expected"),
        [
            ("", "", 0),
            ("", "abc", 3),
            ("abc", "", 3),
            ("echo", "echo", 0),
            ("eco", "echo", 1),
            ("kitten", "sitting", 3),
            ("flaw", "lawn", 2),
            ("add", "sub", 3),
            ("iota", "iot", 1),
            ("hex", "bin", 3),
        ],
    )
    def test_known_distances(self, source, target, expected):
        """Test distances against hand-computed values."""
        assert edit_distance(source, target) == expected

    def test_identity_is_zero_for_builtin_names(self, registry):
        """Test that every registered name is at distance 0 from itself."""
        for name in registry.names():
            assert edit_distance(name, name) == 0

    def test_symmetric(self, registry):
        """Test that distance does not depend on argument order."""
        names = registry.names() + ["eco", "ad", "apply2", "x"]
        for left in names:
            for right in names:
                assert edit_distance(left, right) == edit_distance(right, left)

    def test_distinct_tails_are_compared(self):
        """Test that deleting from one side compares against the other string."""
        assert edit_distance("ab", "b") == 1
        assert edit_distance("b", "ab") == 1
        assert edit_distance("abcd", "bcda") == 2
