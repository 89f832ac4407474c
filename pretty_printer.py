"""Pretty-printer for tokens and the AST.

Provides `PrettyPrinter.print_tokens(tokens)` and
`PrettyPrinter.print_ast(node, indent, prefix)` which render a token list or
an AST into a readable multi-line string, plus `print_surface(node)` for a
compact one-line source-like rendering. The printer is intentionally simple
and intended for debugging, tests and development rather than for producing
final source code.

Examples:
    PrettyPrinter.print_ast(program_node)
"""

from __future__ import annotations
from typing import Optional, Sequence
from ast_nodes import *
from tokens import Span, Token


def _span_str(span: Span) -> str:
    return (
        f"[{span.start.offset}:{span.end.offset}] "
        f"{span.start.line}:{span.start.column}-{span.end.line}:{span.end.column}"
    )


class PrettyPrinter:
    @staticmethod
    def print_tokens(tokens: Sequence[Token], limit: Optional[int] = None) -> str:
        """One line per token: index, kind, text and span."""
        lines = []
        shown = tokens if limit is None else tokens[:limit]
        for i, token in enumerate(shown):
            lines.append(
                f"{i:4}: {str(token.kind):<11} {token.text!r:<12} {_span_str(token.span)}"
            )
        if limit is not None and len(tokens) > limit:
            lines.append(f"  ... and {len(tokens) - limit} more")
        return "\n".join(lines)

    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        if not isinstance(node, ASTNode):
            lines.append(f"{indent_str}{prefix}{node}")
            return "\n".join(lines)

        match node:
            case LiteralNode(raw=raw):
                lines.append(f"{indent_str}{prefix}Literal({raw})")

            case IdentifierNode(name=n):
                lines.append(f"{indent_str}{prefix}Identifier({n})")

            case BinaryExpressionNode(left=left, operator=op, right=right):
                lines.append(f"{indent_str}{prefix}BinaryExpression({op})")
                lines.append(PrettyPrinter.print_ast(left, indent + 2, "left: "))
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case ExpressionStatementNode(expression=expr):
                lines.append(f"{indent_str}{prefix}ExpressionStatement")
                lines.append(PrettyPrinter.print_ast(expr, indent + 2))

            case ReturnStatementNode(argument=arg):
                lines.append(f"{indent_str}{prefix}ReturnStatement")
                if arg:
                    lines.append(PrettyPrinter.print_ast(arg, indent + 2, "argument: "))

            case BlockStatementNode(body=stmts):
                lines.append(f"{indent_str}{prefix}BlockStatement")
                for i, stmt in enumerate(stmts):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))

            case VariableDeclaratorNode(id=ident, init=init):
                init_str = " = ..." if init else ""
                lines.append(f"{indent_str}{prefix}VariableDeclarator({ident.name}{init_str})")
                if init:
                    lines.append(PrettyPrinter.print_ast(init, indent + 2, "init: "))

            case VariableDeclarationNode(kind=kind, declarations=decls):
                lines.append(f"{indent_str}{prefix}VariableDeclaration({kind})")
                for decl in decls:
                    lines.append(PrettyPrinter.print_ast(decl, indent + 2))

            case FunctionDeclarationNode(id=ident, params=params, body=body):
                names = ", ".join(p.name for p in params)
                lines.append(f"{indent_str}{prefix}FunctionDeclaration({ident.name}, params=[{names}])")
                lines.append(PrettyPrinter.print_ast(body, indent + 4, "body: "))

            case ProgramNode(body=stmts):
                lines.append(f"{indent_str}{prefix}Program")
                for i, stmt in enumerate(stmts):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))

            case _:
                lines.append(f"{indent_str}{prefix}Unknown node type: {type(node)}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_surface(node: Optional[ASTNode]) -> str:
        """Return a compact, source-like one-line representation of an AST node.

        Binary expressions keep their prefix form (`+ a b`) so the output parses
        back to the same tree. Blocks and programs are abbreviated.
        """
        if node is None:
            return ""

        def _p(n: ASTNode) -> str:
            return PrettyPrinter.print_surface(n)

        match node:
            case LiteralNode(raw=raw):
                return raw
            case IdentifierNode(name=n):
                return n
            case BinaryExpressionNode(operator=op, left=l, right=r):
                return f"{op} {_p(l)} {_p(r)}"
            case ExpressionStatementNode(expression=expr):
                return f"{_p(expr)};"
            case ReturnStatementNode(argument=arg):
                if arg:
                    return f"return {_p(arg)};"
                return "return;"
            case VariableDeclaratorNode(id=ident, init=init):
                if init:
                    return f"{ident.name} = {_p(init)}"
                return ident.name
            case VariableDeclarationNode(kind=kind, declarations=decls):
                return f"{kind} {', '.join(_p(d) for d in decls)};"
            case FunctionDeclarationNode(id=ident, params=params):
                return f"function {ident.name}({', '.join(p.name for p in params)})"
            case BlockStatementNode():
                return "{...}"
            case ProgramNode():
                return "<program>"
            case _:
                s = PrettyPrinter.print_ast(node)
                return " ".join(line.strip() for line in s.splitlines())
