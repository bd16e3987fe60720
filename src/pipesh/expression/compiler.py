"""Infix to postfix conversion (shunting-yard)."""

from pipesh.errors import MismatchedParenthesisError
from pipesh.expression.lexer import Fixity, Token, TokenKind


def _should_pop(top: Token, incoming: Token) -> bool:
    if top.kind is TokenKind.LEFT_PAREN:
        return False
    if top.precedence > incoming.precedence:
        return True
    return top.precedence == incoming.precedence and incoming.fixity is Fixity.LEFT


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Reorder infix tokens into Reverse-Polish order.

    Operators left on the side stack at the end are flushed top first; an
    unclosed ``(`` is flushed too and ignored later by the evaluator.
    """
    output: list[Token] = []
    operators: list[Token] = []

    for token in tokens:
        if token.kind is TokenKind.NUMBER:
            output.append(token)

        elif token.kind is TokenKind.OPERATOR:
            while operators and _should_pop(operators[-1], token):
                output.append(operators.pop())
            operators.append(token)

        elif token.kind is TokenKind.LEFT_PAREN:
            operators.append(token)

        elif token.kind is TokenKind.RIGHT_PAREN:
            while operators and operators[-1].kind is not TokenKind.LEFT_PAREN:
                output.append(operators.pop())
            if not operators:
                raise MismatchedParenthesisError("Mismatched parenthesis: unexpected ')'")
            operators.pop()

    while operators:
        output.append(operators.pop())

    return output
