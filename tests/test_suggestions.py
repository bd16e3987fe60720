"""Tests for suggestions module."""

import pytest

from pipesh import suggestions


class TestSimilarity:
    """Test similarity percent."""

    def test_equal_names(self):
        """Test that equal names are fully similar."""
        assert suggestions.similarity_percent("echo", "echo") == 100.0

    def test_one_edit_in_four(self):
        """Test that one edit over four characters is 75 percent."""
        assert suggestions.similarity_percent("eco", "echo") == pytest.approx(75.0)

    def test_empty_names(self):
        """Test that two empty names do not divide by zero."""
        assert suggestions.similarity_percent("", "") == 100.0

    def test_unrelated_names(self):
        """Test that unrelated names score zero."""
        assert suggestions.similarity_percent("add", "sub") == 0.0


class TestSimilarNames:
    """Test suggestion filtering."""

    def test_threshold_is_strict(self):
        """Test that a score equal to the threshold is not suggested."""
        assert suggestions.similar_names("eco", ["echo"], threshold=75.0) == []
        assert suggestions.similar_names("eco", ["echo"], threshold=74.9) == ["echo"]

    def test_keeps_registry_order(self):
        """Test that suggestions follow the iteration order of known names."""
        known = ["mull", "mul", "nul"]
        assert suggestions.similar_names("mul", known, threshold=60.0) == ["mull", "mul", "nul"]

    def test_default_threshold(self, registry):
        """Test that the default threshold suggests echo for eco."""
        assert suggestions.similar_names("eco", registry.names()) == ["echo"]


class TestFormatNotFound:
    """Test not-found message rendering."""

    def test_without_suggestions(self):
        """Test that only the not-found line is emitted."""
        message = suggestions.format_not_found("zzz", [])

        assert message == "the command `zzz` doesn't exist."

    def test_with_suggestions(self):
        """Test that suggestions are listed one per line."""
        message = suggestions.format_not_found("eco", ["echo"])

        assert message.splitlines() == [
            "the command `eco` doesn't exist. did you mean:",
            "    - echo",
        ]

    def test_report_returns_message_and_names(self, registry):
        """Test that report bundles message and suggestion names."""
        message, names = suggestions.report("ech", registry.names())

        assert names == ("echo",)
        assert "did you mean" in message
