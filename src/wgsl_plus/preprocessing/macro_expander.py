import re, sys

from wgsl_plus.errors import MacroArityError

from .macro import Macro, MacroTable

MAX_ITERATIONS = 100
"Upper bound on substitution passes over a single line"

_SINGLE_LETTER = re.compile(r"[A-Za-z]")


def _protect_strings(line: str) -> tuple[str, list[str]]:
    """
    Replaces every quoted literal in `line` with a `\\0<n>\\0` placeholder.
    Placeholders only contain digits between NUL characters, so no macro name can match them.
    """
    literals: list[str] = []
    result: list[str] = []
    index = 0
    length = len(line)

    while index < length:
        char = line[index]
        if char not in "\"'":
            result.append(char)
            index += 1
            continue

        end = index + 1
        while end < length and line[end] != char:
            end += 2 if line[end] == "\\" else 1
        # Unterminated literals run to the end of the line.
        end = min(end + 1, length)

        result.append(f"\x00{len(literals)}\x00")
        literals.append(line[index:end])
        index = end

    return "".join(result), literals


def _restore_strings(line: str, literals: list[str]) -> str:
    return re.sub(r"\x00(\d+)\x00", lambda m: literals[int(m.group(1))], line)


def _split_arguments(text: str, start: int) -> tuple[list[str], int] | None:
    """
    Collects the arguments of a macro call whose opening parenthesis ends right before `start`.\n
    Returns the stripped arguments and the index after the closing parenthesis,
    or None when the call is never closed.
    """
    arguments: list[str] = []
    current: list[str] = []
    depth = 1
    index = start

    while index < len(text):
        char = text[index]
        index += 1
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                last = "".join(current).strip()
                if last or arguments:
                    arguments.append(last)
                return arguments, index
        elif char == "," and depth == 1:
            arguments.append("".join(current).strip())
            current = []
            continue
        current.append(char)

    return None


def _expand_function_macro(text: str, name: str, macro: Macro) -> str:
    params = macro.params
    pattern = re.compile(rf"\b{re.escape(name)}\s*\(")
    search_from = 0

    while True:
        call = pattern.search(text, search_from)
        if call is None:
            return text

        collected = _split_arguments(text, call.end())
        if collected is None:
            return text
        arguments, end = collected

        # `F()` is a call with one empty argument for a single parameter macro.
        if not arguments and len(params) == 1:
            arguments = [""]
        if len(arguments) != len(params):
            raise MacroArityError(name, len(params), len(arguments))

        body = macro.value
        for param, argument in zip(params, arguments):
            body = re.sub(rf"\b{re.escape(param)}\b", lambda _: argument, body)

        text = text[: call.start()] + body + text[end:]
        search_from = call.start() + len(body)


def _is_defined_note(text: str, name: str) -> bool:
    return re.match(rf"^\s*{re.escape(name)}\s+is\s+defined\s*(//.*)?$", text) is not None


def expand_macros(line: str, macros: MacroTable) -> str:
    """
    Expands every macro in `line` until the text stops changing.\n
    Quoted literals are never touched. Recursive definitions stop after `MAX_ITERATIONS`
    passes with a warning, returning whatever has been expanded so far.
    """
    if not macros:
        return line

    result, literals = _protect_strings(line)
    ordered = sorted(macros.items(), key=lambda item: len(item[0]), reverse=True)

    changed = True
    iterations = 0
    while changed and iterations < MAX_ITERATIONS:
        changed = False
        iterations += 1

        for name, macro in ordered:
            if macro.is_function_like:
                expanded = _expand_function_macro(result, name, macro)
                if expanded != result:
                    result = expanded
                    changed = True
                    break
                continue

            if _is_defined_note(result, name):
                continue

            value = macro.value
            if _SINGLE_LETTER.fullmatch(name):
                # Single letters also match after a digit, so `2A` is expanded.
                pattern = rf"(^|[^A-Za-z0-9_]|[0-9])({re.escape(name)})(?![A-Za-z0-9_])"
                expanded = re.sub(pattern, lambda m: m.group(1) + value, result)
                if expanded != result:
                    result = expanded
                    changed = True
                continue

            expanded = re.sub(rf"\b{re.escape(name)}\b", lambda _: value, result)
            if expanded != result:
                result = expanded
                changed = True
                break

    if changed and iterations >= MAX_ITERATIONS:
        print(
            "Warning: Maximum macro expansion iterations reached. "
            "Possible recursive macro definition.",
            file=sys.stderr,
        )

    return _restore_strings(result, literals)
