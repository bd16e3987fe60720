"""Stack evaluation of postfix token sequences."""

from typing import Callable

from pipesh.errors import MalformedExpressionError
from pipesh.expression.compiler import to_postfix
from pipesh.expression.lexer import Token, TokenKind, tokenize
from pipesh.numeric import divide

_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": lambda lhs, rhs: lhs + rhs,
    "-": lambda lhs, rhs: lhs - rhs,
    "*": lambda lhs, rhs: lhs * rhs,
    "/": divide,
}


def evaluate_postfix(tokens: list[Token]) -> float:
    """Evaluate Reverse-Polish tokens; parentheses are skipped."""
    stack: list[float] = []

    for token in tokens:
        if token.kind is TokenKind.NUMBER:
            stack.append(float(token.text))

        elif token.kind is TokenKind.OPERATOR:
            if len(stack) < 2:
                raise MalformedExpressionError(f"Missing operand for '{token.text}'")
            rhs = stack.pop()
            lhs = stack.pop()
            stack.append(_OPERATIONS[token.symbol](lhs, rhs))

    if not stack:
        raise MalformedExpressionError("Empty expression")
    if len(stack) > 1:
        raise MalformedExpressionError("Missing operator")
    return stack[0]


def evaluate(expression: str) -> float:
    """Tokenize, compile and evaluate an infix expression."""
    return evaluate_postfix(to_postfix(tokenize(expression)))
