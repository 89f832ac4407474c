"""Convert tokens and AST nodes into JSON-serializable structures.

This module provides `tokens_to_json(tokens)` and `ast_to_json(node)` which
return nested dicts/lists/primitives. Locations follow the ESTree layout
used by JavaScript tooling: `range` holds the `[start, end)` offsets and
`loc` the start/end line and column.
"""

from typing import Any, Dict, List, Optional, Sequence
from ast_nodes import *
from tokens import Span, Token


def span_to_json(span: Span) -> Dict[str, Any]:
    return {
        "range": [span.start.offset, span.end.offset],
        "loc": {
            "start": {"line": span.start.line, "column": span.start.column},
            "end": {"line": span.end.line, "column": span.end.column},
        },
    }


def token_to_json(token: Token) -> Dict[str, Any]:
    return {"type": str(token.kind), "value": token.text, **span_to_json(token.span)}


def tokens_to_json(tokens: Sequence[Token]) -> List[Dict[str, Any]]:
    return [token_to_json(t) for t in tokens]


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    data: Dict[str, Any] = {"type": str(node.type)}
    match node:
        case IdentifierNode(name=name):
            data["name"] = name
        case LiteralNode(value=value, raw=raw):
            data["value"] = value
            data["raw"] = raw
        case BinaryExpressionNode(operator=op, left=left, right=right):
            data["operator"] = op
            data["left"] = ast_to_json(left)
            data["right"] = ast_to_json(right)
        case ExpressionStatementNode(expression=expr):
            data["expression"] = ast_to_json(expr)
        case ReturnStatementNode(argument=arg):
            data["argument"] = ast_to_json(arg)
        case VariableDeclaratorNode(id=ident, init=init):
            data["id"] = ast_to_json(ident)
            data["init"] = ast_to_json(init)
        case VariableDeclarationNode(kind=kind, declarations=decls):
            data["kind"] = kind
            data["declarations"] = [ast_to_json(d) for d in decls]
        case FunctionDeclarationNode(id=ident, params=params, body=body):
            data["id"] = ast_to_json(ident)
            data["params"] = [ast_to_json(p) for p in params]
            data["body"] = ast_to_json(body)
        case ProgramNode(body=body) | BlockStatementNode(body=body):
            data["body"] = [ast_to_json(s) for s in body]
        case _:
            raise TypeError(f"Cannot serialize AST node {node!r}")

    data.update(span_to_json(node.span))
    return data
