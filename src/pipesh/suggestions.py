"""Did-you-mean suggestions for unknown command names."""

from typing import Iterable

from pipesh.constants import DEFAULT_SUGGESTION_THRESHOLD
from pipesh.edit_distance import edit_distance

_SUGGESTION_INDENT = "    - "


def similarity_percent(name: str, candidate: str) -> float:
    """Return how similar two names are, from 0 (unrelated) to 100 (equal)."""
    longest = max(len(name), len(candidate))
    if longest == 0:
        return 100.0
    return (longest - edit_distance(name, candidate)) / longest * 100


def similar_names(
    name: str,
    known_names: Iterable[str],
    threshold: float = DEFAULT_SUGGESTION_THRESHOLD,
) -> list[str]:
    """Return known names scoring strictly above threshold, in iteration order."""
    return [
        candidate
        for candidate in known_names
        if similarity_percent(name, candidate) > threshold
    ]


def format_not_found(name: str, suggestions: Iterable[str]) -> str:
    """Render the not-found line plus an optional suggestion list."""
    suggestions = list(suggestions)
    if not suggestions:
        return f"the command `{name}` doesn't exist."

    lines = [f"the command `{name}` doesn't exist. did you mean:"]
    lines.extend(f"{_SUGGESTION_INDENT}{suggestion}" for suggestion in suggestions)
    return "\n".join(lines)


def report(
    name: str,
    known_names: Iterable[str],
    threshold: float = DEFAULT_SUGGESTION_THRESHOLD,
) -> tuple[str, tuple[str, ...]]:
    """Return (message, suggestions) for an unknown command name."""
    suggestions = tuple(similar_names(name, known_names, threshold))
    return format_not_found(name, suggestions), suggestions
