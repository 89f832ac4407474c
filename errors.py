"""Error taxonomy for the lexer and parser.

Front-end failures are reported as `SyntaxError` subclasses so callers can
catch them the same way they catch any other syntax problem. Every error
keeps the structured fields it was raised with (`position`, and per variant
the offending character, the expected/found tokens or the parse context) in
addition to a readable message.
"""

from __future__ import annotations
from typing import Optional
from tokens import Position, Token


def _where(position: Optional[Position]) -> str:
    if position is None:
        return "at start of input"
    return f"at {position}"


class FrontendError(SyntaxError):
    def __init__(self, message: str, position: Optional[Position] = None):
        super().__init__(message)
        self.message = message
        self.position = position


# Lexical errors
class LexError(FrontendError):
    pass


class UnexpectedCharacter(LexError):
    def __init__(self, char: str, position: Position):
        super().__init__(
            f"Lexical error {_where(position)}: Unexpected character {char!r}",
            position,
        )
        self.char = char


class UnterminatedString(LexError):
    def __init__(self, position: Position):
        super().__init__(
            f"Lexical error {_where(position)}: Unterminated string literal",
            position,
        )


# Parse errors
class ParseError(FrontendError):
    pass


class UnexpectedToken(ParseError):
    def __init__(self, expected: str, found: Token):
        position = found.span.start
        super().__init__(
            f"Parse error {_where(position)}: Expected {expected}, got {found.kind} {found.text!r}",
            position,
        )
        self.expected = expected
        self.found = found


class UnexpectedEndOfInput(ParseError):
    def __init__(self, context: str, position: Optional[Position] = None):
        super().__init__(
            f"Parse error {_where(position)}: Unexpected end of input while parsing {context}",
            position,
        )
        self.context = context


class MissingOperand(ParseError):
    def __init__(
        self,
        operator: Token,
        found: Optional[Token] = None,
        position: Optional[Position] = None,
    ):
        # Callers pass the last consumed token's position at end of input.
        if position is None:
            position = operator.span.start
        detail = "end of input" if found is None else f"{found.kind} {found.text!r}"
        super().__init__(
            f"Parse error {_where(position)}: Operator {operator.text!r} "
            f"requires two operands, got {detail}",
            position,
        )
        self.operator = operator.text
        self.found = found


class NestingTooDeep(ParseError):
    def __init__(self, position: Optional[Position] = None):
        super().__init__(
            f"Parse error {_where(position)}: Program is nested too deeply to parse",
            position,
        )
