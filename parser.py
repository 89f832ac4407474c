"""
Parser for the toy JavaScript-like language.

Overview and approach:
- This parser is a small, hand-written recursive-descent parser. Each grammar
    rule is a `parse_*` method that consumes tokens through a single cursor
    (`self.pos`) and returns a fully built node. There is no backtracking: the
    rule to apply is always chosen from the next significant token.
- Statements and blocks recurse. Expressions use an explicit operator stack
    instead, so long prefix chains do not hit the interpreter's recursion
    limit. Blocks nested past that limit raise `NestingTooDeep`.
- A `;` where a statement would start is an empty statement: it is consumed
    and produces no node.
- Whitespace, newline and comment tokens are trivia. `peek()` and `advance()`
    look past them, so rules never see trivia. The one exception is
    `line_break_ahead()`, which lets an expression statement end at a newline.

Grammar:
    Program             := (Statement | ';')*
    Statement           := VariableDeclaration | FunctionDeclaration
                         | BlockStatement | ReturnStatement | ExpressionStatement
    VariableDeclaration := ('const'|'let'|'var') Declarator (',' Declarator)* ';'?
    Declarator          := Identifier ('=' Expression)?
    FunctionDeclaration := 'function' Identifier '(' ParamList? ')' BlockStatement
    ParamList           := Identifier (',' Identifier)*
    BlockStatement      := '{' (Statement | ';')* '}'
    ReturnStatement     := 'return' Expression? ';'?
    ExpressionStatement := Expression (';'|Newline)?
    Expression          := Literal | Identifier | BinaryExpression
    BinaryExpression    := Operator Expression Expression

Binary expressions are written in prefix form: the operator comes first and
is followed by exactly two operand expressions, so `+ a * b 2` is `a + (b * 2)`.
No precedence table is needed because the operand count fixes the grouping.

Spans:
- Every node's span runs from the start of the first token it consumed to
    the end of the last one, so parent spans always enclose child spans.
- The Program span runs from the first to the last significant token.
    Leading and trailing trivia are outside it.

Errors:
- Running out of tokens inside a construct raises `UnexpectedEndOfInput`
    carrying the position of the last consumed token. A wrong token raises
    `UnexpectedToken`. An operator without two operands raises
    `MissingOperand`, positioned like `UnexpectedEndOfInput` when input
    runs out. The parser never returns a partial node.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Sequence
from tokens import DECLARATION_KEYWORDS, Position, Span, Token, TokenKind
from ast_nodes import *
from errors import (
    MissingOperand,
    NestingTooDeep,
    UnexpectedEndOfInput,
    UnexpectedToken,
)

logger = logging.getLogger(__name__)

EXPRESSION_START = frozenset(
    {TokenKind.NUMERIC, TokenKind.STRING, TokenKind.IDENTIFIER, TokenKind.OPERATOR}
)


def starts_expression(token: Optional[Token]) -> bool:
    return token is not None and token.kind in EXPRESSION_START


class Parser:
    def __init__(self, tokens: Sequence[Token]):
        self.tokens = list(tokens)
        self.pos = 0
        self.last: Optional[Token] = None

    def next_index(self) -> int:
        """Index of the next significant token (len(tokens) at the end)."""
        i = self.pos
        while i < len(self.tokens) and self.tokens[i].is_trivia:
            i += 1
        return i

    def peek(self) -> Optional[Token]:
        """Return next significant token without consuming it."""
        i = self.next_index()
        return self.tokens[i] if i < len(self.tokens) else None

    def advance(self) -> Token:
        """Consume the next significant token."""
        i = self.next_index()
        token = self.tokens[i]
        self.pos = i + 1
        self.last = token
        return token

    def line_break_ahead(self) -> bool:
        """True if a newline comes before the next significant token."""
        for token in self.tokens[self.pos : self.next_index()]:
            if token.kind == TokenKind.NEWLINE:
                return True
        return False

    def last_position(self) -> Optional[Position]:
        return self.last.span.start if self.last is not None else None

    def check(self, kind: TokenKind, text: Optional[str] = None) -> bool:
        token = self.peek()
        return token is not None and token.is_a(kind, text)

    def match(self, kind: TokenKind, text: Optional[str] = None) -> Optional[Token]:
        """Consume and return the next token if it matches, else None."""
        if self.check(kind, text):
            return self.advance()
        return None

    def expect(
        self, kind: TokenKind, text: Optional[str], expected: str, context: str
    ) -> Token:
        """Expect and consume a token of the given kind (and text)."""
        token = self.peek()
        if token is None:
            raise UnexpectedEndOfInput(context, self.last_position())
        if not token.is_a(kind, text):
            raise UnexpectedToken(expected, token)
        return self.advance()

    def punctuation(self, char: str, context: str) -> Token:
        return self.expect(TokenKind.PUNCTUATION, char, f"'{char}'", context)

    def parse_identifier(self, context: str) -> IdentifierNode:
        token = self.expect(TokenKind.IDENTIFIER, None, "identifier", context)
        return IdentifierNode(name=token.text, span=token.span)

    def parse_leaf(self, token: Token) -> ASTNode:
        """Build a literal or identifier node from an already consumed token."""
        match token.kind:
            case TokenKind.NUMERIC:
                return LiteralNode(value=token.text, raw=token.text, span=token.span)
            case TokenKind.STRING:
                return LiteralNode(
                    value=token.text[1:-1], raw=token.text, span=token.span
                )
            case _:
                return IdentifierNode(name=token.text, span=token.span)

    def parse_expression(self, context: str = "expression") -> ASTNode:
        """Parse a literal, an identifier or a prefix binary expression.

        Prefix expressions are parsed with an explicit stack of pending
        operators, so nesting depth is not limited by the Python call stack.
        Each stack entry is `[operator token, left operand or None]`.
        """
        token = self.peek()
        if token is None:
            raise UnexpectedEndOfInput(context, self.last_position())
        if not starts_expression(token):
            raise UnexpectedToken(context, token)

        pending: List[list] = []
        while True:
            token = self.peek()
            if pending and not starts_expression(token):
                operator = pending[-1][0]
                if token is None:
                    raise MissingOperand(operator, None, self.last_position())
                raise MissingOperand(operator, token)

            token = self.advance()
            if token.kind == TokenKind.OPERATOR:
                pending.append([token, None])
                continue

            node = self.parse_leaf(token)
            # Fold every operator whose right operand is now complete.
            while pending:
                if pending[-1][1] is None:
                    pending[-1][1] = node
                    break
                operator, left = pending.pop()
                node = BinaryExpressionNode(
                    operator=operator.text,
                    left=left,
                    right=node,
                    span=operator.span.to(node.span),
                )
            else:
                return node

    def parse_block(self) -> BlockStatementNode:
        """Parse a block of statements: { statement* }"""
        lbrace = self.punctuation("{", "block")
        body: List[ASTNode] = []

        while True:
            self.skip_empty_statements()
            token = self.peek()
            if token is None:
                raise UnexpectedEndOfInput("block", self.last_position())
            if token.is_a(TokenKind.PUNCTUATION, "}"):
                break
            body.append(self.parse_statement())

        rbrace = self.advance()
        return BlockStatementNode(body=body, span=lbrace.span.to(rbrace.span))

    def parse_declarator(self, kind: str) -> VariableDeclaratorNode:
        """Parse `identifier (= expression)?`"""
        ident = self.parse_identifier(f"{kind} declaration")
        init = None
        if self.match(TokenKind.OPERATOR, "="):
            init = self.parse_expression("initializer")

        end = init.span if init is not None else ident.span
        return VariableDeclaratorNode(id=ident, init=init, span=ident.span.to(end))

    def parse_variable_declaration(self) -> VariableDeclarationNode:
        """Parse variable declaration: kind declarator (, declarator)* ;?"""
        keyword = self.advance()
        declarations = [self.parse_declarator(keyword.text)]
        while self.match(TokenKind.PUNCTUATION, ","):
            declarations.append(self.parse_declarator(keyword.text))

        end = declarations[-1].span
        semicolon = self.match(TokenKind.PUNCTUATION, ";")
        if semicolon is not None:
            end = semicolon.span

        return VariableDeclarationNode(
            kind=keyword.text,
            declarations=declarations,
            span=keyword.span.to(end),
        )

    def parse_function_declaration(self) -> FunctionDeclarationNode:
        """Parse function declaration: function ident '(' params ')' '{' body '}'"""
        keyword = self.advance()
        ident = self.parse_identifier("function declaration")

        self.punctuation("(", "parameter list")
        params: List[IdentifierNode] = []
        if not self.check(TokenKind.PUNCTUATION, ")"):
            params.append(self.parse_identifier("parameter list"))
            while self.match(TokenKind.PUNCTUATION, ","):
                params.append(self.parse_identifier("parameter list"))
        self.punctuation(")", "parameter list")

        body = self.parse_block()
        return FunctionDeclarationNode(
            id=ident, params=params, body=body, span=keyword.span.to(body.span)
        )

    def parse_return_statement(self) -> ReturnStatementNode:
        """Parse return statement: return expr? ;?"""
        keyword = self.advance()
        argument = None
        if starts_expression(self.peek()):
            argument = self.parse_expression()

        end = argument.span if argument is not None else keyword.span
        semicolon = self.match(TokenKind.PUNCTUATION, ";")
        if semicolon is not None:
            end = semicolon.span
        return ReturnStatementNode(argument=argument, span=keyword.span.to(end))

    def parse_expression_statement(self) -> ExpressionStatementNode:
        """Parse `expression (; | newline)?`"""
        expression = self.parse_expression("statement")
        end = expression.span
        # A newline closes the statement; a `;` on the next line is not ours.
        if not self.line_break_ahead():
            semicolon = self.match(TokenKind.PUNCTUATION, ";")
            if semicolon is not None:
                end = semicolon.span
        return ExpressionStatementNode(
            expression=expression, span=expression.span.to(end)
        )

    def parse_statement(self) -> ASTNode:
        """Parse a statement."""
        token = self.peek()
        if token is None:
            raise UnexpectedEndOfInput("statement", self.last_position())

        match token.kind:
            case TokenKind.KEYWORD if token.text in DECLARATION_KEYWORDS:
                return self.parse_variable_declaration()

            case TokenKind.KEYWORD if token.text == "function":
                return self.parse_function_declaration()

            case TokenKind.KEYWORD if token.text == "return":
                return self.parse_return_statement()

            case TokenKind.PUNCTUATION if token.text == "{":
                return self.parse_block()

            case _ if starts_expression(token):
                return self.parse_expression_statement()

            case _:
                raise UnexpectedToken("statement", token)

    def skip_empty_statements(self) -> None:
        """Consume stray `;` tokens; they terminate nothing and build no node."""
        while self.match(TokenKind.PUNCTUATION, ";"):
            pass

    def parse_program(self) -> ProgramNode:
        """Parse a complete program (sequence of statements)."""
        body: List[ASTNode] = []

        while True:
            self.skip_empty_statements()
            if self.peek() is None:
                break
            body.append(self.parse_statement())

        # Leading and trailing trivia are not part of the program's span.
        significant = [t for t in self.tokens if not t.is_trivia]
        span = Span()
        if significant:
            span = significant[0].span.to(significant[-1].span)

        logger.debug("parsed %d top-level statements", len(body))
        return ProgramNode(body=body, span=span)

    def parse(self) -> ProgramNode:
        # Statements and blocks recurse; expressions use an explicit stack.
        try:
            return self.parse_program()
        except RecursionError:
            raise NestingTooDeep(self.last_position()) from None


def parse(tokens: Sequence[Token]) -> ProgramNode:
    """Parse a token list into a `ProgramNode`."""
    return Parser(tokens).parse()
