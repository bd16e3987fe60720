"""Tokenizer for whitespace-separated arithmetic expressions."""

from dataclasses import dataclass
from enum import Enum, IntEnum

from pipesh.errors import UnrecognizedSymbolError


class TokenKind(str, Enum):
    """Category of a classified expression word."""

    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


class Precedence(IntEnum):
    """Binding strength; a larger value binds tighter."""

    NONE = 0
    ADDITIVE = 1
    MULTIPLICATIVE = 2
    GROUPING = 3


class Fixity(str, Enum):
    """Associativity used to break precedence ties."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Token:
    """One expression word with its kind and operator metadata."""

    kind: TokenKind
    text: str
    precedence: Precedence = Precedence.NONE
    fixity: Fixity = Fixity.LEFT

    @property
    def symbol(self) -> str:
        """Operator character, taken from the first character of the word."""
        return self.text[0]


_SYMBOL_TOKENS = {
    "+": (TokenKind.OPERATOR, Precedence.ADDITIVE),
    "-": (TokenKind.OPERATOR, Precedence.ADDITIVE),
    "*": (TokenKind.OPERATOR, Precedence.MULTIPLICATIVE),
    "/": (TokenKind.OPERATOR, Precedence.MULTIPLICATIVE),
    "(": (TokenKind.LEFT_PAREN, Precedence.GROUPING),
    ")": (TokenKind.RIGHT_PAREN, Precedence.GROUPING),
}


def is_number_word(word: str) -> bool:
    """True for digits with at most one decimal point, e.g. ``12``, ``1.5``, ``.5``."""
    return (
        word.count(".") <= 1
        and any(char.isdigit() for char in word)
        and all(char.isdigit() or char == "." for char in word)
    )


def classify(word: str) -> Token:
    """Build the token for one whitespace-free word."""
    if is_number_word(word):
        return Token(TokenKind.NUMBER, word)

    entry = _SYMBOL_TOKENS.get(word[0])
    if entry is None:
        raise UnrecognizedSymbolError(word)

    kind, precedence = entry
    return Token(kind, word, precedence, Fixity.LEFT)


def tokenize(expression: str) -> list[Token]:
    """Split an expression on whitespace into typed tokens.

    Operators glued to operands (``3+4``) are not separated; expressions
    must be written with spaces between every token.
    """
    return [classify(word) for word in expression.split()]
