"""
Tokenizer and shunting-yard converter.

Turns an infix expression such as ``3/4 + (1.5 * 2)`` into a postfix token
sequence. Inline fractions (``3/4``) and decimals (``2.5``) are scanned as a
single number token: a number is a maximal run of digits, ``.`` and ``/``
that starts with a digit. A ``/`` surrounded by spaces is the division
operator.

Characters that are neither part of a number, an operator, a parenthesis nor
whitespace are dropped unless ``strict`` is set.
"""

import structlog

from fraccalc.errors import ParseError, StackUnderflowError
from fraccalc.models import Token, TokenKind
from fraccalc.operators import OPERATORS

logger = structlog.get_logger()

_DIGITS = frozenset("0123456789")
_NUMBER_CHARS = _DIGITS | {".", "/"}


def tokenize(expression: str, strict: bool = False) -> list[Token]:
    """Split an expression into number, operator and parenthesis tokens."""
    tokens: list[Token] = []
    i = 0
    length = len(expression)

    while i < length:
        c = expression[i]

        if c.isspace():
            i += 1
            continue

        if c in _DIGITS:
            start = i
            while i < length and expression[i] in _NUMBER_CHARS:
                i += 1
            tokens.append(Token(TokenKind.NUMBER, expression[start:i], start))
            continue

        if c in OPERATORS:
            tokens.append(Token(TokenKind.OPERATOR, c, i))
        elif c == "(":
            tokens.append(Token(TokenKind.LEFT_PAREN, c, i))
        elif c == ")":
            tokens.append(Token(TokenKind.RIGHT_PAREN, c, i))
        elif strict:
            raise ParseError(f"Unexpected character {c!r} at column {i + 1}")
        else:
            logger.debug("Ignoring character", char=c, column=i + 1)

        i += 1

    return tokens


def shunting_yard(tokens: list[Token]) -> list[Token]:
    """
    Reorder infix tokens into postfix (Reverse Polish) order.

    Operators of equal precedence are emitted left to right. Parentheses are
    not emitted. A ')' without a matching '(' raises StackUnderflowError;
    an unmatched '(' is flushed to the output and rejected by the evaluator.
    """
    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        if token.kind is TokenKind.NUMBER:
            output.append(token)

        elif token.kind is TokenKind.OPERATOR:
            current = OPERATORS[token.text]
            while stack and stack[-1].is_operator:
                top = OPERATORS[stack[-1].text]
                if current.left_associative and current.precedence <= top.precedence:
                    output.append(stack.pop())
                else:
                    break
            stack.append(token)

        elif token.kind is TokenKind.LEFT_PAREN:
            stack.append(token)

        elif token.kind is TokenKind.RIGHT_PAREN:
            while stack and stack[-1].kind is not TokenKind.LEFT_PAREN:
                output.append(stack.pop())
            if not stack:
                raise StackUnderflowError(
                    f"Unmatched ')' at column {token.position + 1}"
                )
            stack.pop()

    while stack:
        output.append(stack.pop())

    return output


def to_postfix(expression: str, strict: bool = False) -> list[Token]:
    """Convert an infix expression string to a postfix token sequence."""
    postfix = shunting_yard(tokenize(expression, strict=strict))
    logger.debug(
        "Converted to postfix",
        expression=expression,
        postfix=" ".join(t.text for t in postfix),
    )
    return postfix
