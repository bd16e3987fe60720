"""Runtime settings for pipesh."""

import os
from dataclasses import dataclass
from typing import Mapping

from pipesh.constants import DEBUG_ENV_VAR, DEFAULT_PROMPT, DEFAULT_SUGGESTION_THRESHOLD
from pipesh.errors import ConfigError

_FALSE_VALUES = frozenset(("", "0", "false", "no", "off"))


@dataclass(frozen=True)
class Settings:
    """Resolved startup settings."""

    prompt: str = DEFAULT_PROMPT
    suggestion_threshold: float = DEFAULT_SUGGESTION_THRESHOLD
    log_file: str | None = None
    debug: bool = False


def is_debug_enabled(environ: Mapping[str, str] | None = None) -> bool:
    """Return True when the debug environment variable is set to a truthy value."""
    env = os.environ if environ is None else environ
    value = env.get(DEBUG_ENV_VAR, "")
    return value.strip().lower() not in _FALSE_VALUES


def validate_threshold(value: float) -> float:
    """Validate a similarity threshold given in percent."""
    if not 0.0 <= value <= 100.0:
        raise ConfigError(f"Suggestion threshold must be between 0 and 100, got {value:g}")
    return value


def load_settings(
    *,
    prompt: str | None = None,
    threshold: float | None = None,
    log_file: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Build settings from CLI values, falling back to defaults."""
    return Settings(
        prompt=DEFAULT_PROMPT if prompt is None else prompt,
        suggestion_threshold=validate_threshold(
            DEFAULT_SUGGESTION_THRESHOLD if threshold is None else threshold
        ),
        log_file=log_file,
        debug=is_debug_enabled(environ),
    )
