"""Pipeline parsing, queueing and execution."""

import logging
import time
from collections import deque
from enum import Enum

from pipesh.command import Command
from pipesh.constants import PIPE_TOKEN
from pipesh.errors import AppError, UsageError
from pipesh.logging_utils import log_event
from pipesh.registry import CommandRegistry


class InterpreterState(str, Enum):
    """Interpreter lifecycle states."""

    IDLE = "idle"
    PARSING = "parsing"
    QUEUED = "queued"
    EXECUTING = "executing"


def split_stages(line: str) -> list[list[str]]:
    """Split an input line into per-stage word groups.

    A word that is, or starts with, the pipe token opens a new stage; the
    leading pipe markers are stripped so ``|echo`` and ``| echo`` read the
    same. Every stage must name a command.
    """
    stages: list[list[str]] = []
    for word in line.split():
        if word.startswith(PIPE_TOKEN) or not stages:
            stages.append([])
        stripped = word.lstrip(PIPE_TOKEN)
        if stripped:
            stages[-1].append(stripped)

    for stage in stages:
        if not stage:
            raise UsageError(f"Empty pipeline stage in: {line.strip()}")
    return stages


class Interpreter:
    """Turns input lines into queued pipelines and runs them in FIFO order."""

    def __init__(self, registry: CommandRegistry):
        self.registry = registry
        self.state = InterpreterState.IDLE
        self._queue: deque[Command] = deque()

    @property
    def pending(self) -> int:
        """Number of queued pipelines."""
        return len(self._queue)

    def parse(self, line: str) -> Command | None:
        """Parse one line into a master command owning the later stages.

        Returns None for a blank line. Any unresolved stage aborts the whole
        line by raising before a master command is returned.
        """
        stages = split_stages(line)
        if not stages:
            return None

        commands = []
        for name, *arguments in stages:
            command = self.registry.resolve(name)
            for argument in arguments:
                command.push_argument(argument)
            commands.append(command)

        master, *subcommands = commands
        for subcommand in subcommands:
            master.push_subcommand(subcommand)
        return master

    def enqueue(self, line: str) -> bool:
        """Parse ``line`` and queue it; return False when the line was blank."""
        previous_state = self.state
        self.state = InterpreterState.PARSING
        try:
            master = self.parse(line)
        except AppError as e:
            log_event(
                "pipeline_rejected",
                level=logging.WARNING,
                line=line,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise
        finally:
            self.state = previous_state

        if master is None:
            return False

        self._queue.append(master)
        self.state = InterpreterState.QUEUED
        log_event("pipeline_queued", stages=master.stage_names, pending=len(self._queue))
        return True

    def execute_next(self) -> list[str]:
        """Run the oldest queued pipeline and return its final output.

        The pipeline leaves the queue even when one of its stages raises.
        """
        if not self._queue:
            raise IndexError("No queued pipeline")
        master = self._queue[0]
        self.state = InterpreterState.EXECUTING
        try:
            return self._run_pipeline(master)
        finally:
            self._queue.popleft()
            self.state = InterpreterState.QUEUED if self._queue else InterpreterState.IDLE

    def execute(self) -> list[list[str]]:
        """Run every queued pipeline and return each one's final output."""
        outputs: list[list[str]] = []
        while self._queue:
            outputs.append(self.execute_next())
        return outputs

    def run_line(self, line: str) -> list[list[str]]:
        """Queue one line and execute everything queued."""
        self.enqueue(line)
        return self.execute()

    @staticmethod
    def _run_pipeline(master: Command) -> list[str]:
        started = time.perf_counter()
        result = master()
        for subcommand in master.subcommands:
            result = subcommand(result)

        log_event(
            "pipeline_executed",
            stages=master.stage_names,
            output_count=len(result),
            elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        return result
