import json

from ast_json import ast_to_json, token_to_json, tokens_to_json
from lexer import tokenize
from tests.utils import parse_text


def test_token_json_shape():
    tokens = tokenize("x\ny")
    data = tokens_to_json(tokens)
    assert data[0] == {
        "type": "Identifier",
        "value": "x",
        "range": [0, 1],
        "loc": {"start": {"line": 1, "column": 0}, "end": {"line": 1, "column": 1}},
    }
    assert data[1]["type"] == "Newline"
    assert data[2]["loc"]["start"] == {"line": 2, "column": 0}
    assert token_to_json(tokens[0]) == data[0]


def test_ast_json_declaration():
    data = ast_to_json(parse_text("const x = 42;"))
    assert data["type"] == "Program"
    assert data["range"] == [0, 13]

    decl = data["body"][0]
    assert decl["type"] == "VariableDeclaration"
    assert decl["kind"] == "const"
    declarator = decl["declarations"][0]
    assert declarator["type"] == "VariableDeclarator"
    assert declarator["id"]["name"] == "x"
    assert declarator["init"] == {
        "type": "Literal",
        "value": "42",
        "raw": "42",
        "range": [10, 12],
        "loc": {"start": {"line": 1, "column": 10}, "end": {"line": 1, "column": 12}},
    }


def test_ast_json_function_and_binary():
    data = ast_to_json(parse_text("function add(a, b) { return + a b; }"))
    func = data["body"][0]
    assert func["type"] == "FunctionDeclaration"
    assert func["id"]["name"] == "add"
    assert [p["name"] for p in func["params"]] == ["a", "b"]
    ret = func["body"]["body"][0]
    assert ret["type"] == "ReturnStatement"
    assert ret["argument"]["type"] == "BinaryExpression"
    assert ret["argument"]["operator"] == "+"


def test_optional_children_serialize_as_null():
    data = ast_to_json(parse_text("let y; function f() { return; }"))
    assert data["body"][0]["declarations"][0]["init"] is None
    assert data["body"][1]["body"]["body"][0]["argument"] is None


def test_output_is_json_serializable():
    src = "// c\nconst s = 'hi';\n+ s s\n"
    tokens = tokenize(src)
    json.dumps(tokens_to_json(tokens))
    text = json.dumps(ast_to_json(parse_text(src)))
    assert '"ExpressionStatement"' in text
