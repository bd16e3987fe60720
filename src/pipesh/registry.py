"""Command registry: name to spec mapping with suggestion fallback."""

import logging
from typing import Iterator

from pipesh import suggestions
from pipesh.command import Command
from pipesh.constants import DEFAULT_SUGGESTION_THRESHOLD
from pipesh.errors import CommandNotFoundError, DuplicateCommandError
from pipesh.logging_utils import log_event
from pipesh.models import CommandSpec


class CommandRegistry:
    """Registered command specs, keyed by name in registration order."""

    def __init__(self, suggestion_threshold: float = DEFAULT_SUGGESTION_THRESHOLD):
        self.suggestion_threshold = suggestion_threshold
        self._specs: dict[str, CommandSpec] = {}

    def register(self, spec: CommandSpec) -> None:
        """Add a spec; a second spec with the same name is a programming error."""
        if spec.name in self._specs:
            raise DuplicateCommandError(f"Command already registered: {spec.name}")
        self._specs[spec.name] = spec

    def contains(self, name: str) -> bool:
        return name in self._specs

    __contains__ = contains

    def __iter__(self) -> Iterator[CommandSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    def names(self) -> list[str]:
        return list(self._specs)

    def get(self, name: str) -> CommandSpec | None:
        return self._specs.get(name)

    def resolve(self, name: str) -> Command:
        """Return a fresh stage for ``name`` or raise CommandNotFoundError with suggestions."""
        spec = self._specs.get(name)
        if spec is None:
            message, similar = suggestions.report(name, self._specs, self.suggestion_threshold)
            log_event(
                "command_not_found",
                level=logging.WARNING,
                command=name,
                suggestions=list(similar),
            )
            raise CommandNotFoundError(name, message, similar)

        return Command(name=spec.name, arity=spec.arity, action=spec.action)
