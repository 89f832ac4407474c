import pytest

from ast_nodes import *
from lexer import tokenize
from parser import parse

SOURCES = [
    "const x = 42;",
    "function add(a, b) { return a; }",
    "let a = 1, b = + a 2\nvar s = 'str'\n",
    "// comment\n{ x; { + y * 2 z } }\n",
    "function f() {\n  const t = - 3 n;\n  return + t 1\n}\nf\n",
    "// leading comment\n\n  let z = 0;\n\n\n",
    "x; // trailing comment\n   \n",
    ";\n{ ; a }\n;\n",
]


@pytest.mark.parametrize("src", SOURCES)
def test_node_spans_start_and_end_on_token_boundaries(src):
    tokens = tokenize(src)
    significant = [t for t in tokens if not t.is_trivia]
    starts = {t.span.start_offset for t in significant}
    ends = {t.span.end_offset for t in significant}

    ast = parse(tokens)
    for node in walk(ast):
        assert node.span.start_offset in starts, node
        assert node.span.end_offset in ends, node


@pytest.mark.parametrize("src", SOURCES)
def test_parent_span_encloses_children_in_source_order(src):
    ast = parse(tokenize(src))
    for node in walk(ast):
        children = list(iter_children(node))
        for child in children:
            assert node.span.encloses(child.span), (node.type, child.type)
        for prev, nxt in zip(children, children[1:]):
            assert prev.span.end_offset <= nxt.span.start_offset


@pytest.mark.parametrize("src", SOURCES)
def test_no_node_is_shared(src):
    ast = parse(tokenize(src))
    ids = [id(node) for node in walk(ast)]
    assert len(ids) == len(set(ids))


def test_span_text_matches_source():
    src = "function add(a, b) {\n  return + a b;\n}"
    ast = parse(tokenize(src))
    func = ast.body[0]
    assert src[func.span.start_offset : func.span.end_offset] == src

    ret = func.body.body[0]
    assert src[ret.span.start_offset : ret.span.end_offset] == "return + a b;"
    assert ret.span.start_line == 2
    assert ret.span.start_column == 2
    assert src[ret.argument.span.start_offset : ret.argument.span.end_offset] == "+ a b"


def test_walk_is_preorder():
    ast = parse(tokenize("const x = + 1 2;"))
    types = [n.type for n in walk(ast)]
    assert types == [
        NodeType.PROGRAM,
        NodeType.VAR_DECL,
        NodeType.VAR_DECLARATOR,
        NodeType.IDENTIFIER,
        NodeType.BINARY_EXPR,
        NodeType.LITERAL,
        NodeType.LITERAL,
    ]


def test_iter_children_of_function_declaration():
    ast = parse(tokenize("function f(a, b) {}"))
    func = ast.body[0]
    children = list(iter_children(func))
    assert [c.type for c in children] == [
        NodeType.IDENTIFIER,
        NodeType.IDENTIFIER,
        NodeType.IDENTIFIER,
        NodeType.BLOCK,
    ]
    assert list(iter_children(children[0])) == []


def test_sample_program_statement_types(sample_source):
    ast = parse(tokenize(sample_source))
    assert [n.type for n in ast.body] == [
        NodeType.VAR_DECL,
        NodeType.VAR_DECL,
        NodeType.FUNC_DECL,
        NodeType.BLOCK,
        NodeType.EXPR_STMT,
    ]
    assert "".join(t.text for t in tokenize(sample_source)) == sample_source


@pytest.mark.parametrize("src", SOURCES)
def test_labelled_children_agree_with_iter_children(src):
    ast = parse(tokenize(src))
    for node in walk(ast):
        labelled = list(iter_labelled_children(node))
        assert [child for _, child in labelled] == list(iter_children(node))
        labels = [label for label, _ in labelled]
        assert len(labels) == len(set(labels))


def test_labelled_children_of_function_declaration():
    func = parse(tokenize("function f(a, b) { return a; }")).body[0]
    assert [label for label, _ in iter_labelled_children(func)] == [
        "id",
        "params[0]",
        "params[1]",
        "body",
    ]
