"""Graphviz visualization helpers for the AST.

Provides `render_ast_dot(node, include_spans=False)` which returns a
`graphviz.Digraph` object (not rendered). Optionally `write_and_render` can
write the file to disk.

Layout: each AST node becomes a box labelled with its node type and its key
field (name, literal text, operator or declaration kind). Edges point from a
parent to its children in source order and are labelled with the field the
child occupies.
"""

from typing import Optional
import html
from graphviz import Digraph
from ast_nodes import *


def _node_label(node: ASTNode, include_spans: bool) -> str:
    detail = ""
    match node:
        case IdentifierNode(name=n):
            detail = n
        case LiteralNode(raw=raw):
            detail = raw
        case BinaryExpressionNode(operator=op):
            detail = op
        case VariableDeclarationNode(kind=kind):
            detail = kind

    rows = [f"<B>{html.escape(str(node.type))}</B>"]
    if detail:
        rows.append(html.escape(detail))
    if include_spans:
        span = node.span
        rows.append(
            f'<FONT POINT-SIZE="8">[{span.start.offset}, {span.end.offset}) '
            f"{span.start.line}:{span.start.column}</FONT>"
        )
    return "<" + "<BR/>".join(rows) + ">"


def render_ast_dot(node: ASTNode, include_spans: bool = False) -> Digraph:
    """Return a graphviz.Digraph for the tree rooted at `node`.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    dot.attr("node", shape="box", style="rounded")

    counter = 0

    def emit(n: ASTNode) -> str:
        nonlocal counter
        name = f"n{counter}"
        counter += 1
        dot.node(name, label=_node_label(n, include_spans))
        for edge_label, child in iter_labelled_children(n):
            child_name = emit(child)
            dot.edge(name, child_name, label=edge_label)
        return name

    emit(node)
    return dot


def write_and_render(
    node: ASTNode,
    out_path: str,
    fmt: str = "svg",
    include_spans: bool = False,
) -> Optional[str]:
    """Write and render the AST to the given path (without extension).

    Example: write_and_render(ast, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz). Returns the path of the rendered file."""
    dot = render_ast_dot(node, include_spans=include_spans)
    dot.format = fmt
    # Note: render will append extension automatically
    return dot.render(out_path, cleanup=True)
