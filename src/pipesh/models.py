"""Typed command metadata for pipesh."""

from dataclasses import dataclass
from typing import Callable

Action = Callable[[list[str]], list[str]]


@dataclass(frozen=True)
class Arity:
    """Declared argument count of a command, or the variadic marker (count None)."""

    count: int | None

    def __post_init__(self) -> None:
        if self.count is not None and self.count < 0:
            raise ValueError(f"Arity must be non-negative, got {self.count}")

    @classmethod
    def fixed(cls, count: int) -> "Arity":
        return cls(count)

    @property
    def is_variadic(self) -> bool:
        return self.count is None

    def __str__(self) -> str:
        return "*" if self.count is None else str(self.count)


VARIADIC = Arity(None)


@dataclass(frozen=True)
class CommandSpec:
    """One command registration entry."""

    name: str
    arity: Arity
    action: Action
    usage: str = ""
    summary: str = ""
