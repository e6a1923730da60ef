import pytest

from ..errors import LexError
from ..tokenization import Token, TokenKind, tokenize, strip_comments


def kinds(source: str):
    return [(t.kind, t.text) for t in tokenize(source)]


def test_keywords_and_identifiers():
    assert kinds("fn main() { let x = 5; }") == [
        (TokenKind.Keyword, "fn"),
        (TokenKind.Identifier, "main"),
        (TokenKind.Operator, "("),
        (TokenKind.Operator, ")"),
        (TokenKind.Operator, "{"),
        (TokenKind.Keyword, "let"),
        (TokenKind.Identifier, "x"),
        (TokenKind.Operator, "="),
        (TokenKind.Number, "5"),
        (TokenKind.Operator, ";"),
        (TokenKind.Operator, "}"),
    ]


def test_number_formats():
    source = "123 4.56 0.789 0x1A 0. 1. 0xFFu 1.0f 0xFFFFFFFFFFFFFFFFu"
    tokens = tokenize(source)
    assert all(t.kind is TokenKind.Number for t in tokens)
    assert [t.text for t in tokens] == source.split()


def test_strings():
    assert kinds('"hello" "world" "123"') == [
        (TokenKind.String, '"hello"'),
        (TokenKind.String, '"world"'),
        (TokenKind.String, '"123"'),
    ]


def test_operators_longest_match():
    source = (
        "+ - * / % == != < > <= >= && || ! ~ & | ^ << >> <<= >>= "
        "+= -= *= /= %= &= |= ^= ->"
    )
    tokens = tokenize(source)
    assert all(t.kind is TokenKind.Operator for t in tokens)
    assert [t.text for t in tokens] == source.split()

    assert [t.text for t in tokenize("<<=>>=")] == ["<<=", ">>="]
    assert [t.text for t in tokenize("a+b-c*d/e")] == list("a+b-c*d/e")


def test_attributes():
    assert kinds("@vertex @compute(workgroup_size(1,1,1))") == [
        (TokenKind.Attribute, "@vertex"),
        (TokenKind.Attribute, "@compute(workgroup_size(1,1,1))"),
    ]
    # A lone `@` is an operator.
    assert kinds("@=") == [(TokenKind.Operator, "@"), (TokenKind.Operator, "=")]


def test_directives():
    assert kinds('#binding "data" #entrypoint "main"') == [
        (TokenKind.Directive, '#binding "data"'),
        (TokenKind.Directive, '#entrypoint "main"'),
    ]


def test_comments():
    tokens = tokenize("// Single-line comment\n/* Multi-line\ncomment */ x")
    assert [(t.kind, t.text) for t in tokens] == [
        (TokenKind.Comment, "// Single-line comment"),
        (TokenKind.Comment, "/* Multi-line\ncomment */"),
        (TokenKind.Identifier, "x"),
    ]
    assert strip_comments(tokens) == [Token(TokenKind.Identifier, "x")]


def test_builtins():
    source = "@vertex\nfn vertexMain() -> @builtin(position) vec4<f32> {\n    return vec4<f32>(0.0);\n}"
    assert kinds(source)[:10] == [
        (TokenKind.Attribute, "@vertex"),
        (TokenKind.Keyword, "fn"),
        (TokenKind.Identifier, "vertexMain"),
        (TokenKind.Operator, "("),
        (TokenKind.Operator, ")"),
        (TokenKind.Operator, "->"),
        (TokenKind.Attribute, "@builtin(position)"),
        (TokenKind.Builtin, "vec4"),
        (TokenKind.Operator, "<"),
        (TokenKind.Builtin, "f32"),
    ]


@pytest.mark.parametrize(
    "source, character, position",
    [
        ("let x = 5; $", "$", 11),
        ("let 你好", "你", 4),
        ('#binding "unclosed', "#", 0),
    ],
)
def test_unexpected_character(source, character, position):
    with pytest.raises(LexError) as e:
        tokenize(source)
    assert e.value.character == character
    assert e.value.position == position
    assert str(e.value) == f"Unexpected character: {character}"


def test_tokens_are_immutable():
    token = Token(TokenKind.Identifier, "a")
    renamed = token.with_text("_0")
    assert token.text == "a"
    assert renamed == Token(TokenKind.Identifier, "_0")
    with pytest.raises(AttributeError):
        token.text = "b"
