"""Built-in commands available to every pipeline."""

import logging
import sys
from typing import Callable

from pipesh import formatters
from pipesh.errors import CommandNotFoundError
from pipesh.expression import evaluate
from pipesh.logging_utils import log_event
from pipesh.models import VARIADIC, Action, Arity, CommandSpec
from pipesh.numeric import divide, format_number, parse_float, parse_unsigned
from pipesh.registry import CommandRegistry

_BIN_WIDTHS = (8, 16, 32, 64)


def _has_arguments(command: str, arguments: list[str], count: int) -> bool:
    """Return True when at least ``count`` arguments were supplied."""
    if len(arguments) >= count:
        return True
    log_event(
        "primitive_arguments_missing",
        level=logging.WARNING,
        command=command,
        expected=count,
        received=len(arguments),
    )
    return False


def _exec_quit(arguments: list[str]) -> list[str]:
    sys.exit(0)


def _exec_echo(arguments: list[str]) -> list[str]:
    print(" ".join(arguments))
    return []


def _binary_float(command: str, operation: Callable[[float, float], float]) -> Action:
    def _exec(arguments: list[str]) -> list[str]:
        if not _has_arguments(command, arguments, 2):
            return []
        lhs = parse_float(arguments[0])
        rhs = parse_float(arguments[1])
        return [format_number(operation(lhs, rhs))]

    return _exec


def _exec_hex(arguments: list[str]) -> list[str]:
    if not _has_arguments("hex", arguments, 1):
        return []
    return [f"0x{parse_unsigned(arguments[0]):x}"]


def _exec_bin(arguments: list[str]) -> list[str]:
    if not _has_arguments("bin", arguments, 1):
        return []
    value = parse_unsigned(arguments[0])
    width = next(
        (bits for bits in _BIN_WIDTHS if value < (1 << bits)),
        value.bit_length(),
    )
    return [f"0b{value:0{width}b}"]


def _exec_iota(arguments: list[str]) -> list[str]:
    if not _has_arguments("iota", arguments, 2):
        return []
    minimum = parse_unsigned(arguments[0])
    maximum = parse_unsigned(arguments[1])
    return [str(index) for index in range(minimum, maximum + 1)]


def _exec_calc(arguments: list[str]) -> list[str]:
    if not _has_arguments("calc", arguments, 1):
        return []
    return [format_number(evaluate(" ".join(arguments)))]


def make_apply(registry: CommandRegistry) -> Action:
    """Build the ``apply`` action bound to ``registry``.

    ``apply <target> <fixed...> <stream...>`` keeps the first
    ``arity - 1`` words after the target as a prefix and invokes the
    target once per remaining word, collecting each first output value.
    """

    def _exec_apply(arguments: list[str]) -> list[str]:
        if not _has_arguments("apply", arguments, 1):
            return []

        target_name, *rest = arguments
        try:
            target = registry.resolve(target_name)
        except CommandNotFoundError as e:
            log_event("apply_target_missing", level=logging.WARNING, command=target_name)
            print(e)
            return []

        fixed_count = 0 if target.arity.is_variadic else max(target.arity.count - 1, 0)
        fixed, streamed = rest[:fixed_count], rest[fixed_count:]

        result: list[str] = []
        for word in streamed:
            output = target([*fixed, word])
            if output:
                result.append(output[0])
        return result

    return _exec_apply


def make_help(registry: CommandRegistry) -> Action:
    """Build the ``help`` action that lists ``registry``."""

    def _exec_help(arguments: list[str]) -> list[str]:
        print(formatters.render_help_text(registry))
        return []

    return _exec_help


def builtin_specs(registry: CommandRegistry) -> tuple[CommandSpec, ...]:
    """Return specs for every built-in command, in help order."""
    return (
        CommandSpec("quit", Arity.fixed(0), _exec_quit, "quit", "Exit the interpreter"),
        CommandSpec("echo", Arity.fixed(1), _exec_echo, "echo <words...>", "Print arguments joined by spaces"),
        CommandSpec("add", Arity.fixed(2), _binary_float("add", lambda lhs, rhs: lhs + rhs), "add <lhs> <rhs>", "Add two numbers"),
        CommandSpec("sub", Arity.fixed(2), _binary_float("sub", lambda lhs, rhs: lhs - rhs), "sub <lhs> <rhs>", "Subtract rhs from lhs"),
        CommandSpec("mul", Arity.fixed(2), _binary_float("mul", lambda lhs, rhs: lhs * rhs), "mul <lhs> <rhs>", "Multiply two numbers"),
        CommandSpec("div", Arity.fixed(2), _binary_float("div", divide), "div <lhs> <rhs>", "Divide lhs by rhs"),
        CommandSpec("hex", Arity.fixed(1), _exec_hex, "hex <n>", "Show an unsigned integer in hexadecimal"),
        CommandSpec("bin", Arity.fixed(1), _exec_bin, "bin <n>", "Show an unsigned integer in binary"),
        CommandSpec("iota", Arity.fixed(2), _exec_iota, "iota <min> <max>", "Emit the integers min..max"),
        CommandSpec("apply", VARIADIC, make_apply(registry), "apply <cmd> <fixed...> <values...>", "Run cmd once per trailing value"),
        CommandSpec("calc", VARIADIC, _exec_calc, "calc <expression>", "Evaluate a spaced arithmetic expression"),
        CommandSpec("help", Arity.fixed(0), make_help(registry), "help", "Show available commands"),
    )


def register_builtin_commands(registry: CommandRegistry) -> CommandRegistry:
    """Register every built-in command into ``registry`` and return it."""
    for spec in builtin_specs(registry):
        registry.register(spec)
    return registry
