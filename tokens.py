"""Token definitions for the lexer.

This module defines the `TokenKind` enum for the token classes recognized by
the lexer, the `Position`/`Span` records used to tag tokens and AST nodes
with their source location, and a small frozen `Token` dataclass. Tokens are
the atomic units produced by the lexer and consumed by the parser.

The fixed lexical tables (keywords, operators, punctuation) also live here
so that the lexer and parser share a single immutable copy.

Positions use 1-based lines and 0-based columns; span ends are exclusive.
"""

from __future__ import annotations
import string
from enum import Enum
from dataclasses import dataclass


class TokenKind(Enum):
    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    NUMERIC = "Numeric"
    STRING = "String"
    OPERATOR = "Operator"
    PUNCTUATION = "Punctuation"
    WHITESPACE = "Whitespace"
    NEWLINE = "Newline"
    COMMENT = "Comment"

    def __str__(self) -> str:
        return self.value


# Tokens the parser skips before every grammar decision.
TRIVIA = frozenset({TokenKind.WHITESPACE, TokenKind.NEWLINE, TokenKind.COMMENT})

KEYWORDS = frozenset(
    {
        "let",
        "const",
        "var",
        "if",
        "else",
        "while",
        "for",
        "function",
        "return",
        "switch",
        "async",
        "await",
    }
)

DECLARATION_KEYWORDS = frozenset({"const", "let", "var"})

OPERATORS = frozenset(
    {
        "+",
        "-",
        "*",
        "/",
        "=",
        "==",
        "!=",
        "<",
        ">",
        ">=",
        "<=",
        "&&",
        "||",
        "!",
        "+=",
        "-=",
        "?",
        "...",
    }
)

# Longest operator first so the lexer can try the widest match.
OPERATOR_LENGTHS = tuple(sorted({len(op) for op in OPERATORS}, reverse=True))

PUNCTUATION = frozenset({"(", ")", "{", "}", ";", ",", ".", "[", "]"})

QUOTES = frozenset({"'", '"'})

DIGITS = frozenset("0123456789")

IDENTIFIER_START = frozenset(string.ascii_letters + "_")

IDENTIFIER_CHARS = IDENTIFIER_START | DIGITS


@dataclass(frozen=True)
class Position:
    offset: int = 0
    line: int = 1
    column: int = 0

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


@dataclass(frozen=True)
class Span:
    start: Position = Position()
    end: Position = Position()

    @property
    def start_offset(self) -> int:
        return self.start.offset

    @property
    def end_offset(self) -> int:
        return self.end.offset

    @property
    def start_line(self) -> int:
        return self.start.line

    @property
    def start_column(self) -> int:
        return self.start.column

    @property
    def end_line(self) -> int:
        return self.end.line

    @property
    def end_column(self) -> int:
        return self.end.column

    def to(self, other: Span) -> Span:
        """Return the span running from the start of `self` to the end of `other`."""
        return Span(self.start, other.end)

    def encloses(self, other: Span) -> bool:
        return (
            self.start.offset <= other.start.offset
            and other.end.offset <= self.end.offset
        )


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    span: Span

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.text!r})"

    @property
    def is_trivia(self) -> bool:
        return self.kind in TRIVIA

    def is_a(self, kind: TokenKind, text: str | None = None) -> bool:
        """Check the token kind, and the exact text when `text` is given."""
        return self.kind == kind and (text is None or self.text == text)
