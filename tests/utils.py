from lexer import Lexer, tokenize
from parser import Parser


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(text).tokenize()


def significant(text: str):
    """Tokens of `text` with whitespace, newlines and comments removed."""
    return [t for t in tokenize(text) if not t.is_trivia]


def parse_text(text: str):
    """Convenience: lex+parse a source text into an AST."""
    return Parser(Lexer(text).tokenize()).parse()
