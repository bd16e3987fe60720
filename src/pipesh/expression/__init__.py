"""Arithmetic expression engine: tokenize, compile to postfix, evaluate."""

from .compiler import to_postfix
from .evaluator import evaluate, evaluate_postfix
from .lexer import Fixity, Precedence, Token, TokenKind, tokenize

__all__ = [
    "Fixity",
    "Precedence",
    "Token",
    "TokenKind",
    "evaluate",
    "evaluate_postfix",
    "to_postfix",
    "tokenize",
]
