"""Pipeline stage objects."""

from dataclasses import dataclass, field
from typing import Iterable

from pipesh.models import Action, Arity


@dataclass
class Command:
    """One resolved pipeline stage.

    ``arguments`` are the words typed after the command name. The master
    command of a pipeline owns every later stage in ``subcommands``; the
    chain is linear, so each subcommand's own ``subcommands`` stays empty.
    """

    name: str
    arity: Arity
    action: Action
    arguments: list[str] = field(default_factory=list)
    subcommands: list["Command"] = field(default_factory=list)

    def push_argument(self, argument: str) -> None:
        self.arguments.append(argument)

    def push_subcommand(self, subcommand: "Command") -> None:
        self.subcommands.append(subcommand)

    def __call__(self, extra: Iterable[str] | None = None) -> list[str]:
        """Run the action with bound arguments followed by ``extra``."""
        combined = list(self.arguments)
        if extra is not None:
            combined.extend(extra)
        return list(self.action(combined))

    @property
    def stage_names(self) -> list[str]:
        """Names of this stage and every chained stage, in pipeline order."""
        return [self.name] + [subcommand.name for subcommand in self.subcommands]
