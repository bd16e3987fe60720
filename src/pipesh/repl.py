"""REPL and batch loops for pipesh."""

import logging
import traceback
from typing import Callable, Iterable

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory

from pipesh.config import Settings
from pipesh.constants import APP_BANNER, BATCH_COMMENT_PREFIX
from pipesh.errors import AppError
from pipesh.formatters import format_output, render_error
from pipesh.interpreter import Interpreter
from pipesh.logging_utils import log_event

ReadLine = Callable[[], str]


def create_prompt_session(command_names: Iterable[str]) -> PromptSession:
    """Create prompt-toolkit session with command-name completion."""
    return PromptSession(
        history=InMemoryHistory(),
        completer=WordCompleter(sorted(command_names)),
    )


def _report_app_error(line: str, error: AppError) -> None:
    print(render_error(str(error)))
    log_event(
        "command_error",
        level=logging.WARNING,
        line=line,
        error_type=type(error).__name__,
        error=str(error),
    )


def _report_unexpected_error(line: str, error: Exception, debug: bool) -> None:
    """Print an unexpected exception with optional debug traceback."""
    print(render_error(str(error)))
    if debug:
        print("Debug traceback:")
        traceback.print_exc()
    log_event(
        "command_error",
        level=logging.ERROR,
        line=line,
        error_type=type(error).__name__,
        error=str(error),
    )


def _print_outputs(outputs: list[list[str]]) -> None:
    for output in outputs:
        if output:
            print(format_output(output))


def run_line(interpreter: Interpreter, line: str, debug: bool = False) -> bool:
    """Parse and run one line behind the error boundary; return False on error."""
    try:
        _print_outputs(interpreter.run_line(line))
    except AppError as e:
        _report_app_error(line, e)
        return False
    except Exception as e:
        _report_unexpected_error(line, e, debug)
        return False
    return True


def repl(
    interpreter: Interpreter,
    settings: Settings,
    read_line: ReadLine | None = None,
) -> int:
    """Run the interactive loop until end of input."""
    if read_line is None:
        session = create_prompt_session(interpreter.registry.names())

        def _prompt_line() -> str:
            return session.prompt(settings.prompt)

        read_line = _prompt_line

    print(APP_BANNER)

    while True:
        try:
            line = read_line()
        except EOFError:
            print()
            return 0
        except KeyboardInterrupt:
            print()
            continue

        if not line.strip():
            continue

        try:
            run_line(interpreter, line, settings.debug)
        except KeyboardInterrupt:
            print()
            continue


def run_batch(interpreter: Interpreter, lines: Iterable[str], settings: Settings) -> int:
    """Queue every line, then execute the whole queue; return an exit status."""
    status = 0
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith(BATCH_COMMENT_PREFIX):
            continue
        try:
            interpreter.enqueue(line)
        except AppError as e:
            _report_app_error(line, e)
            status = 1

    while interpreter.pending:
        try:
            _print_outputs([interpreter.execute_next()])
        except AppError as e:
            _report_app_error("<batch>", e)
            status = 1
        except Exception as e:
            _report_unexpected_error("<batch>", e, settings.debug)
            status = 1

    return status
