"""Pytest configuration and fixtures for pipesh tests."""

import logging

import pytest

from pipesh.config import Settings
from pipesh.interpreter import Interpreter
from pipesh.models import Arity, CommandSpec
from pipesh.primitives import register_builtin_commands
from pipesh.registry import CommandRegistry


@pytest.fixture(autouse=True)
def _reset_logging():
    """Keep logging state from leaking between tests."""
    yield
    logging.disable(logging.NOTSET)
    root = logging.getLogger()
    root.setLevel(logging.WARNING)
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def registry():
    """Registry with every built-in command."""
    return register_builtin_commands(CommandRegistry())


@pytest.fixture
def interpreter(registry):
    """Interpreter over the built-in registry."""
    return Interpreter(registry)


@pytest.fixture
def settings():
    """Default settings with debug off."""
    return Settings()


@pytest.fixture
def recording_registry():
    """Registry whose commands record the arguments they receive."""
    calls = []

    def _record(name):
        def _action(arguments):
            calls.append((name, list(arguments)))
            return [f"{name}:{len(arguments)}"]

        return _action

    registry = CommandRegistry()
    registry.register(CommandSpec("first", Arity.fixed(1), _record("first")))
    registry.register(CommandSpec("second", Arity.fixed(1), _record("second")))
    registry.calls = calls
    return registry
