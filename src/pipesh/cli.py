"""CLI entry and startup wiring."""

import argparse
import logging
import sys
import time
from pathlib import Path

from pipesh.config import Settings, load_settings
from pipesh.constants import APP_NAME, APP_VERSION
from pipesh.errors import AppError, DuplicateCommandError
from pipesh.formatters import render_error
from pipesh.interpreter import Interpreter
from pipesh.logging_utils import log_event, setup_logging
from pipesh.primitives import register_builtin_commands
from pipesh.registry import CommandRegistry
from pipesh.repl import repl, run_batch


def build_interpreter(settings: Settings) -> Interpreter:
    """Create the registry with every built-in command and wrap it in an interpreter."""
    registry = CommandRegistry(suggestion_threshold=settings.suggestion_threshold)
    register_builtin_commands(registry)
    return Interpreter(registry)


def _batch_lines(args: argparse.Namespace) -> list[str] | None:
    """Collect batch input lines, or None for interactive mode."""
    lines: list[str] = list(args.command or [])
    if args.file:
        try:
            lines.extend(Path(args.file).read_text(encoding="utf-8").splitlines())
        except OSError as e:
            raise AppError(f"Cannot read input file {args.file}: {e.strerror or e}") from e
    if args.command is not None or args.file:
        return lines
    if not sys.stdin.isatty():
        return sys.stdin.read().splitlines()
    return None


def main(argv: list[str] | None = None) -> int:
    """Main entry point for pipesh CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    app_started = time.perf_counter()

    try:
        settings = load_settings(
            prompt=args.prompt,
            threshold=args.threshold,
            log_file=args.log,
        )
        setup_logging(settings.log_file)
        interpreter = build_interpreter(settings)
        lines = _batch_lines(args)
    except (AppError, DuplicateCommandError) as e:
        print(render_error(str(e)))
        return 1

    log_event(
        "app_start",
        level=logging.INFO,
        mode="interactive" if lines is None else "batch",
        commands=len(interpreter.registry),
        suggestion_threshold=settings.suggestion_threshold,
        log_file=settings.log_file,
    )

    status = 1
    try:
        if lines is None:
            status = repl(interpreter, settings)
        else:
            status = run_batch(interpreter, lines, settings)
    except SystemExit as e:
        status = e.code if isinstance(e.code, int) else 0
        raise
    finally:
        log_event(
            "app_stop",
            level=logging.INFO,
            status=status,
            uptime_ms=round((time.perf_counter() - app_started) * 1000, 1),
        )

    return status


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Line-oriented command interpreter with Unix-style pipes.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive session
  pipesh

  # Run pipelines without prompting
  pipesh -c "iota 1 3 | echo" -c "calc ( 3 + 4 ) * 2"
  pipesh -f script.txt
        """,
    )
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        metavar="LINE",
        help="Pipeline to run in batch mode (repeatable).",
    )
    parser.add_argument(
        "-f",
        "--file",
        help="File of pipelines to run in batch mode, one per line.",
    )
    parser.add_argument(
        "--prompt",
        help="Interactive prompt string (default: '>> ').",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        help="Similarity percent a name must exceed to be suggested (default: 70).",
    )
    parser.add_argument(
        "-l",
        "--log",
        help="Path to log file (optional; logging is off without it).",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )
    return parser
