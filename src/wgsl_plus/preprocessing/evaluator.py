import re, sys

from sympy.parsing.sympy_parser import parse_expr

from .macro import MacroTable

_DEFINED = re.compile(r"\bdefined\s*\(\s*([a-zA-Z_]\w*)\s*\)")
_EQUALITY = re.compile(r"\b([a-zA-Z_]\w*)\s*==\s*([a-zA-Z_]\w*)\b")
_IDENTIFIER = re.compile(r"\b[a-zA-Z_]\w*\b")
_HEX_SUFFIX = re.compile(r"\b(0[xX][0-9a-fA-F]+)[ui]\b")
_DECIMAL_SUFFIX = re.compile(r"\b(\d+(?:\.\d*)?|\.\d+)[uif]\b")
_NEGATION = re.compile(r"!\s*(\w+|\([^()]*\))")
_BOOLEAN = re.compile(r"\b(true|false)\b")


def _object_value(macros: MacroTable, name: str) -> str | None:
    macro = macros.get(name)
    if macro is None or macro.is_function_like:
        return None
    return macro.value


def _substitute_equalities(expr: str, macros: MacroTable) -> str:
    """
    `A == B` is true when `A` expands to the bare name `B` (or the other way round) and that name
    is not itself a macro, or when both sides are macros with the same value.
    """

    def replace(match: re.Match) -> str:
        left, right = match.group(1), match.group(2)
        left_value = _object_value(macros, left)
        right_value = _object_value(macros, right)

        if left_value is not None and right not in macros and left_value == right:
            return "1"
        if right_value is not None and left not in macros and right_value == left:
            return "1"
        if left_value is not None and right_value is not None and left_value == right_value:
            return "1"
        return match.group()

    return _EQUALITY.sub(replace, expr)


def _substitute_identifiers(expr: str, macros: MacroTable) -> str:
    def replace(match: re.Match) -> str:
        value = _object_value(macros, match.group())
        if not value:
            return "0"
        return value

    return _IDENTIFIER.sub(replace, expr)


def _to_python_operators(expr: str) -> str:
    expr = _HEX_SUFFIX.sub(r"\1", expr)
    expr = _DECIMAL_SUFFIX.sub(r"\1", expr)
    expr = expr.replace("!=", "\x00")
    # `!` binds tighter than comparisons in C but `not` does not in Python.
    expr = _NEGATION.sub(r"(not \1)", expr)
    expr = expr.replace("!", " not ")
    expr = expr.replace("&&", " and ").replace("||", " or ")
    return expr.replace("\x00", "!=")


def evaluate_expression(expr: str, macros: MacroTable) -> bool:
    """
    Evaluates the condition of an `#if` or `#elif` directive.\n
    Anything that cannot be evaluated (unbalanced parentheses, unknown words left after
    substitution, dangling operators) is treated as false instead of raising.
    """
    expr = _DEFINED.sub(lambda m: "1" if m.group(1) in macros else "0", expr)
    expr = _substitute_equalities(expr, macros)
    expr = _substitute_identifiers(expr, macros)
    # Macro values may be WGSL boolean literals.
    expr = _BOOLEAN.sub(lambda m: "1" if m.group(1) == "true" else "0", expr)

    if not expr.strip():
        return False
    if re.fullmatch(r"\s*\d+\s*", expr):
        return int(expr) != 0
    # A macro value naming another, undefined, word cannot be compared numerically.
    if _IDENTIFIER.search(expr):
        return False

    try:
        result = parse_expr(_to_python_operators(expr))
        return bool(result)
    except Exception as e:
        print(f"Warning: could not evaluate #if expression {expr.strip()!r}: {e}", file=sys.stderr)
        return False
