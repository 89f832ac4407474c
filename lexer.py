"""
Lexer for the toy JavaScript-like language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a list of `Token` objects defined
    in `tokens.py`.
- It recognizes keywords (e.g. `const`, `function`, `return`), identifiers,
    integer literals, quoted strings, one- to three-character operators (e.g.
    `==`, `&&`, `+=`, `...`), punctuation and `//` line comments.
- Unlike a compiler scanner, nothing is skipped: whitespace, newlines and
    comments are emitted as tokens too, so the token stream is a lossless
    partition of the source. Joining every token's text gives back the input.

Examples:
    Input:  "const x = 42;"
    Tokens: [Keyword('const'), Whitespace(' '), Identifier('x'), Whitespace(' '),
             Operator('='), Whitespace(' '), Numeric('42'), Punctuation(';')]

Implementation notes:
- The lexer is a simple stateful scanner. Its state record is `self.text`,
    `self.pos`, `self.line` and `self.column`; `advance()` is the only place
    that moves the cursor and keeps the line/column counters in step.
- Each call to `get_next_token()` consumes exactly one token. The start
    position is captured before scanning and the end position after, so every
    span is computed from what that step actually consumed.
- Operators use longest match first against the table in `tokens.py`.
- Malformed input (an unknown character or a string with no closing quote)
    raises a `LexError`; the scanner never emits an opaque token.
"""

from __future__ import annotations
import logging
from typing import Optional, List
from tokens import (
    DIGITS,
    IDENTIFIER_CHARS,
    IDENTIFIER_START,
    KEYWORDS,
    OPERATOR_LENGTHS,
    OPERATORS,
    PUNCTUATION,
    QUOTES,
    Position,
    Span,
    Token,
    TokenKind,
)
from errors import UnexpectedCharacter, UnterminatedString

logger = logging.getLogger(__name__)


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 0
        self.current_char = self.text[self.pos] if self.text else None

    def position(self) -> Position:
        return Position(self.pos, self.line, self.column)

    def advance(self) -> None:
        """Advance to next character."""
        # Newlines move to the next line and reset the column. This also
        # applies to newlines inside string literals.
        if self.current_char == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def peek_char(self, distance: int = 1) -> Optional[str]:
        """Look ahead without consuming."""
        next_pos = self.pos + distance
        if next_pos < len(self.text):
            return self.text[next_pos]
        return None

    def make_token(self, kind: TokenKind, start: Position) -> Token:
        return Token(kind, self.text[start.offset : self.pos], Span(start, self.position()))

    def newline(self) -> Token:
        start = self.position()
        # The newline itself sits at the end of its line; only the tokens
        # after it start on the next one.
        end = Position(start.offset + 1, start.line, start.column + 1)
        self.advance()
        return Token(TokenKind.NEWLINE, "\n", Span(start, end))

    def whitespace(self) -> Token:
        start = self.position()
        self.advance()
        return self.make_token(TokenKind.WHITESPACE, start)

    def comment(self) -> Token:
        """Scan a `//` comment up to, but not including, the newline."""
        start = self.position()
        while self.current_char is not None and self.current_char != "\n":
            self.advance()
        return self.make_token(TokenKind.COMMENT, start)

    def number(self) -> Token:
        """Scan a run of decimal digits."""
        start = self.position()
        while self.current_char is not None and self.current_char in DIGITS:
            self.advance()
        return self.make_token(TokenKind.NUMERIC, start)

    def string(self) -> Token:
        """Scan a quoted string, keeping both quotes in the token text."""
        start = self.position()
        quote = self.current_char
        self.advance()

        # No escape sequences: the first matching quote closes the literal.
        while self.current_char is not None and self.current_char != quote:
            self.advance()

        if self.current_char is None:
            raise UnterminatedString(start)

        self.advance()
        return self.make_token(TokenKind.STRING, start)

    def identifier(self) -> Token:
        """Scan an identifier and classify it as a keyword if reserved."""
        start = self.position()
        self.advance()
        while self.current_char is not None and self.current_char in IDENTIFIER_CHARS:
            self.advance()

        token = self.make_token(TokenKind.IDENTIFIER, start)
        if token.text in KEYWORDS:
            return Token(TokenKind.KEYWORD, token.text, token.span)
        return token

    def match_operator(self) -> Optional[str]:
        """Return the longest operator starting at the cursor, if any."""
        for length in OPERATOR_LENGTHS:
            candidate = self.text[self.pos : self.pos + length]
            if len(candidate) == length and candidate in OPERATORS:
                return candidate
        return None

    def operator(self, op: str) -> Token:
        start = self.position()
        for _ in op:
            self.advance()
        return self.make_token(TokenKind.OPERATOR, start)

    def punctuation(self) -> Token:
        start = self.position()
        self.advance()
        return self.make_token(TokenKind.PUNCTUATION, start)

    def get_next_token(self) -> Optional[Token]:
        """Return the next token, or None at end of input."""
        char = self.current_char
        if char is None:
            return None

        if char == "\n":
            return self.newline()

        if char.isspace():
            return self.whitespace()

        # Comments are checked before operators so `//` is not lexed as `/` `/`.
        if char == "/" and self.peek_char() == "/":
            return self.comment()

        if char in DIGITS:
            return self.number()

        if char in QUOTES:
            return self.string()

        if char in IDENTIFIER_START:
            return self.identifier()

        # Operators are checked before punctuation so `...` wins over `.`.
        op = self.match_operator()
        if op is not None:
            return self.operator(op)

        if char in PUNCTUATION:
            return self.punctuation()

        raise UnexpectedCharacter(char, self.position())

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string."""
        tokens = []
        while True:
            token = self.get_next_token()
            if token is None:
                break
            tokens.append(token)
        logger.debug("tokenized %d characters into %d tokens", len(self.text), len(tokens))
        return tokens


def tokenize(source: str) -> List[Token]:
    """Split `source` into a lossless, position-annotated token list."""
    return Lexer(source).tokenize()
