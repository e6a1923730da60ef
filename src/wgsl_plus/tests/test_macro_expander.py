import pytest

from ..errors import MacroArityError
from ..preprocessing import Macro, expand_macros


def test_object_like_macros():
    macros = {"WIDTH": Macro("800"), "HEIGHT": Macro("600")}
    assert (
        expand_macros("var<private> r = vec2<f32>(WIDTH, HEIGHT);", macros)
        == "var<private> r = vec2<f32>(800, 600);"
    )


def test_whole_identifiers_only():
    macros = {"VAR": Macro("5"), "VALUE": Macro("123")}
    assert expand_macros("const myVARiable: u32 = VAR;", macros) == "const myVARiable: u32 = 5;"
    assert expand_macros("const x = VALUE; const y = value;", macros) == "const x = 123; const y = value;"


def test_empty_value():
    assert expand_macros("const value = EMPTY;", {"EMPTY": Macro("")}) == "const value = ;"


def test_unchanged_without_macros():
    line = "let a = b + c; // comment"
    assert expand_macros(line, {}) == line
    assert expand_macros(line, {"WIDTH": Macro("800")}) == line


@pytest.mark.parametrize(
    "line",
    [
        'const message = "Screen size: WIDTH x HEIGHT";',
        'const str = "This has \\"WIDTH\\" inside quotes";',
        "const c = 'WIDTH';",
        'const unterminated = "WIDTH',
    ],
)
def test_string_literals_are_not_expanded(line):
    macros = {"WIDTH": Macro("800"), "HEIGHT": Macro("600")}
    assert expand_macros(line, macros) == line


def test_strings_and_code_on_one_line():
    macros = {"WIDTH": Macro("800")}
    assert (
        expand_macros('const msg = "Width: " + WIDTH + "px";', macros)
        == 'const msg = "Width: " + 800 + "px";'
    )


def test_function_like_macros():
    macros = {
        "MIN": Macro("((a) < (b) ? (a) : (b))", ["a", "b"]),
        "DOT": Macro("((a).x * (b).x + (a).y * (b).y)", ["a", "b"]),
        "APPLY": Macro("f((x))", ["x"]),
    }
    assert expand_macros("let m = MIN(x, y);", macros) == "let m = ((x) < (y) ? (x) : (y));"
    assert (
        expand_macros("let d = DOT(v1, v2 + offset);", macros)
        == "let d = ((v1).x * (v2 + offset).x + (v1).y * (v2 + offset).y);"
    )
    assert (
        expand_macros("let r = APPLY(calculate(a, (b + c)));", macros)
        == "let r = f((calculate(a, (b + c))));"
    )


def test_nested_function_like_macros():
    macros = {
        "SQR": Macro("((x) * (x))", ["x"]),
        "ABS": Macro("((x) < 0 ? -(x) : (x))", ["x"]),
    }
    assert (
        expand_macros("const value = SQR(ABS(x));", macros)
        == "const value = ((((x) < 0 ? -(x) : (x))) * (((x) < 0 ? -(x) : (x))));"
    )


def test_macros_inside_bodies_and_arguments():
    macros = {
        "PI": Macro("3.14159"),
        "WIDTH": Macro("800"),
        "SQUARE": Macro("((x) * (x))", ["x"]),
        "CIRCLE_AREA": Macro("PI * SQUARE(r)", ["r"]),
        "HALF": Macro("((x) / 2)", ["x"]),
    }
    assert (
        expand_macros("const area = CIRCLE_AREA(radius);", macros)
        == "const area = 3.14159 * ((radius) * (radius));"
    )
    assert expand_macros("const half = HALF(WIDTH);", macros) == "const half = ((800) / 2);"


@pytest.mark.parametrize("line, expected, actual", [("F(1);", 2, 1), ("F(1, 2, 3);", 2, 3)])
def test_arity_mismatch(line, expected, actual):
    macros = {"F": Macro("a + b", ["a", "b"])}
    with pytest.raises(MacroArityError) as e:
        expand_macros(line, macros)
    assert e.value.expected == expected
    assert e.value.actual == actual
    assert str(e.value) == f"Macro F expects {expected} arguments, got {actual}"


def test_empty_call_of_single_parameter_macro():
    assert expand_macros("ID()", {"ID": Macro("[x]", ["x"])}) == "[]"


def test_single_letter_names():
    macros = {"A": Macro("1"), "B": Macro("2")}
    assert expand_macros("const Apples and Bananas = A + B;", macros) == "const Apples and Bananas = 1 + 2;"
    assert expand_macros("A is defined and A + A = 2A", {"A": Macro("1")}) == "1 is defined and 1 + 1 = 21"


def test_is_defined_note():
    macros = {"A": Macro("100"), "DEBUG": Macro("1")}
    assert expand_macros("A is defined", macros) == "A is defined"
    assert expand_macros("DEBUG  is  defined // note", macros) == "DEBUG  is  defined // note"


def test_sequential_expansion():
    macros = {"A": Macro("B"), "B": Macro("C"), "AB": Macro("combined")}
    assert expand_macros("var<private> result = A;", macros) == "var<private> result = C;"


def test_longest_name_first():
    macros = {"SIZE": Macro("1"), "SIZE_X": Macro("2")}
    assert expand_macros("SIZE_X + SIZE", macros) == "2 + 1"


def test_recursive_definitions_terminate(capsys):
    macros = {"A": Macro("B"), "B": Macro("A"), "LOOP": Macro("LOOP + 1")}
    expand_macros("const value = A;", macros)
    result = expand_macros("const value = LOOP;", macros)
    assert result.startswith("const value = LOOP + 1 + 1")
    assert "Maximum macro expansion iterations reached" in capsys.readouterr().err


def test_expansion_is_idempotent():
    macros = {"WIDTH": Macro("800"), "MIN": Macro("((a) < (b) ? (a) : (b))", ["a", "b"])}
    once = expand_macros("let m = MIN(WIDTH, 2);", macros)
    assert expand_macros(once, macros) == once
