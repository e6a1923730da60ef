from .conditional_processor import process_conditionals
from .macro import MacroTable


def _collapse_blank_lines(lines: list[str]) -> list[str]:
    result: list[str] = []
    for line in lines:
        if not line.strip() and result and not result[-1].strip():
            continue
        result.append(line)

    while result and not result[-1].strip():
        result.pop()
    return result


def preprocess(code: str, macros: MacroTable | None = None) -> str:
    """
    Expands macros and resolves conditional directives in `code`.\n
    `macros` seeds the macro table and is left untouched.
    """
    table = dict(macros) if macros else {}
    lines = process_conditionals(code.split("\n"), table)
    return "\n".join(_collapse_blank_lines(lines))
