"""Text formatters for REPL output."""

from typing import Iterable

from pipesh.registry import CommandRegistry

_ERROR_PREFIX = "ERROR:"


def format_output(values: Iterable[str]) -> str:
    """Render a pipeline's final values on one line."""
    return " ".join(values)


def render_error(message: str) -> str:
    return f"{_ERROR_PREFIX} {message}"


def render_help_text(registry: CommandRegistry) -> str:
    """Render help text directly from registry metadata."""
    specs = list(registry)
    if not specs:
        return "No commands registered."

    width = max(len(spec.usage or spec.name) for spec in specs)

    lines = ["Available commands:"]
    for spec in specs:
        usage = (spec.usage or spec.name).ljust(width)
        lines.append(f"  {usage}  [{spec.arity}] - {spec.summary}")
    lines.append("")
    lines.append("Chain commands with '|': each stage receives the previous stage's output.")
    return "\n".join(lines)
