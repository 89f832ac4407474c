"""AST node definitions for the toy JavaScript-like language.

This module defines the concrete AST node dataclasses produced by the
parser. Each node is a dataclass carrying the relevant information (an
operator, child nodes, names, literal text). The `NodeType` enum identifies
node kinds; its values follow the ESTree naming used by JavaScript tooling
(`Program`, `VariableDeclaration`, ...).

Conventions:
- All AST node dataclasses inherit from `ASTNode` which records the node
    kind (`NodeType`) and the source `span` covered by the tokens the node
    was built from.
- Each node owns its children; nothing is shared between parents.
- `iter_labelled_children()`, `iter_children()` and `walk()` give ordered
    traversal for consumers that do not want to pattern-match on every node
    class.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple
from tokens import Span


class NodeType(Enum):
    PROGRAM = "Program"
    VAR_DECL = "VariableDeclaration"
    VAR_DECLARATOR = "VariableDeclarator"
    FUNC_DECL = "FunctionDeclaration"
    BLOCK = "BlockStatement"
    RETURN_STMT = "ReturnStatement"
    EXPR_STMT = "ExpressionStatement"
    BINARY_EXPR = "BinaryExpression"
    IDENTIFIER = "Identifier"
    LITERAL = "Literal"

    def __str__(self) -> str:
        return self.value


# Base AST Node
@dataclass
class ASTNode:
    type: NodeType
    span: Span = field(default_factory=Span)


# Expression Nodes
@dataclass
class IdentifierNode(ASTNode):
    type: NodeType = NodeType.IDENTIFIER
    name: str = ""


@dataclass
class LiteralNode(ASTNode):
    type: NodeType = NodeType.LITERAL
    # Numeric text, or string contents without the quotes.
    value: str = ""
    raw: str = ""


@dataclass
class BinaryExpressionNode(ASTNode):
    type: NodeType = NodeType.BINARY_EXPR
    operator: str = ""
    left: ASTNode = field(default_factory=lambda: LiteralNode())
    right: ASTNode = field(default_factory=lambda: LiteralNode())


# Statement Nodes
@dataclass
class ExpressionStatementNode(ASTNode):
    type: NodeType = NodeType.EXPR_STMT
    expression: ASTNode = field(default_factory=lambda: LiteralNode())


@dataclass
class BlockStatementNode(ASTNode):
    type: NodeType = NodeType.BLOCK
    body: List[ASTNode] = field(default_factory=list)


@dataclass
class ReturnStatementNode(ASTNode):
    type: NodeType = NodeType.RETURN_STMT
    argument: Optional[ASTNode] = None


# Declaration Nodes
@dataclass
class VariableDeclaratorNode(ASTNode):
    type: NodeType = NodeType.VAR_DECLARATOR
    id: IdentifierNode = field(default_factory=lambda: IdentifierNode())
    init: Optional[ASTNode] = None


@dataclass
class VariableDeclarationNode(ASTNode):
    type: NodeType = NodeType.VAR_DECL
    kind: str = "let"
    declarations: List[VariableDeclaratorNode] = field(default_factory=list)


@dataclass
class FunctionDeclarationNode(ASTNode):
    type: NodeType = NodeType.FUNC_DECL
    id: IdentifierNode = field(default_factory=lambda: IdentifierNode())
    params: List[IdentifierNode] = field(default_factory=list)
    body: BlockStatementNode = field(default_factory=lambda: BlockStatementNode())


# Program Node
@dataclass
class ProgramNode(ASTNode):
    type: NodeType = NodeType.PROGRAM
    body: List[ASTNode] = field(default_factory=list)


def iter_labelled_children(node: ASTNode) -> Iterator[Tuple[str, ASTNode]]:
    """Yield (field label, child) pairs for the direct children of `node`.

    Labels name the field a child occupies, with an index for list fields
    (`body[0]`, `params[1]`). Children come in source order.
    """
    match node:
        case ProgramNode(body=body) | BlockStatementNode(body=body):
            for i, stmt in enumerate(body):
                yield f"body[{i}]", stmt
        case VariableDeclarationNode(declarations=decls):
            for i, decl in enumerate(decls):
                yield f"declarations[{i}]", decl
        case VariableDeclaratorNode(id=ident, init=init):
            yield "id", ident
            if init is not None:
                yield "init", init
        case FunctionDeclarationNode(id=ident, params=params, body=body):
            yield "id", ident
            for i, param in enumerate(params):
                yield f"params[{i}]", param
            yield "body", body
        case ReturnStatementNode(argument=arg):
            if arg is not None:
                yield "argument", arg
        case ExpressionStatementNode(expression=expr):
            yield "expression", expr
        case BinaryExpressionNode(left=left, right=right):
            yield "left", left
            yield "right", right


def iter_children(node: ASTNode) -> Iterator[ASTNode]:
    """Yield the direct children of `node` in source order."""
    for _, child in iter_labelled_children(node):
        yield child


def walk(node: ASTNode) -> Iterator[ASTNode]:
    """Yield `node` and all of its descendants, pre-order."""
    yield node
    for child in iter_children(node):
        yield from walk(child)
