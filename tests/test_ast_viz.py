"""Tests for ast_viz: ensure a Digraph is produced and contains node labels."""

from ast_viz import render_ast_dot
from tests.utils import parse_text


def test_ast_viz_dot_source():
    ast = parse_text("function add(a, b) { return + a b; }")
    dot = render_ast_dot(ast)
    src = dot.source
    assert "FunctionDeclaration" in src
    assert "BinaryExpression" in src
    assert "params[1]" in src
    # one graph node per AST node: Program, Function, id, 2 params, block,
    # return, binary, 2 identifiers
    assert src.count("->") == 9


def test_ast_viz_spans_optional():
    ast = parse_text("const x = 42;")
    assert "[10, 12)" not in render_ast_dot(ast).source
    assert "[10, 12)" in render_ast_dot(ast, include_spans=True).source


def test_ast_viz_covers_every_node(sample_source):
    from ast_nodes import walk

    ast = parse_text(sample_source)
    src = render_ast_dot(ast).source
    assert src.count("->") == len(list(walk(ast))) - 1


def test_ast_viz_edge_labels_come_from_labelled_children():
    from ast_nodes import iter_labelled_children, walk

    ast = parse_text("let a = 1, b\nfunction f(x) { return + x a }")
    src = render_ast_dot(ast).source
    for node in walk(ast):
        for label, _ in iter_labelled_children(node):
            assert f"label={label}" in src or f'label="{label}"' in src
