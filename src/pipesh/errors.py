"""Custom exception hierarchy for pipesh."""


class AppError(Exception):
    """Base exception for app-specific failures."""


class UsageError(ValueError, AppError):
    """Malformed input line."""


class ConfigError(ValueError, AppError):
    """Startup configuration errors."""


class CommandNotFoundError(AppError):
    """Raised when a command name is not in the registry."""

    def __init__(self, name: str, message: str, suggestions: tuple[str, ...] = ()):
        super().__init__(message)
        self.name = name
        self.suggestions = suggestions


class ExpressionError(ValueError, AppError):
    """Base exception for arithmetic expression failures."""


class UnrecognizedSymbolError(ExpressionError):
    """Raised when the tokenizer meets a word it cannot classify."""

    def __init__(self, symbol: str):
        super().__init__(f"Unrecognized symbol: {symbol}")
        self.symbol = symbol


class MismatchedParenthesisError(ExpressionError):
    """Raised when a closing parenthesis has no opening partner."""


class MalformedExpressionError(ExpressionError):
    """Raised when a postfix sequence has too few operands."""


class DuplicateCommandError(RuntimeError):
    """Raised when two commands are registered under one name."""
