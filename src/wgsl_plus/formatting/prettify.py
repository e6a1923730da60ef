from wgsl_plus.tokenization import Token, TokenKind, tokenize

INDENT = "    "
PUNCTUATION = frozenset("()[]{},;:.")


def _is_punctuation(token: Token) -> bool:
    return token.kind is TokenKind.Operator and token.text in PUNCTUATION


def _is_operator(token: Token) -> bool:
    return token.kind is TokenKind.Operator and not _is_punctuation(token)


def _is_type_name(token: Token) -> bool:
    return token.kind in (TokenKind.Identifier, TokenKind.Builtin)


TYPE_ARGUMENT_KINDS = (TokenKind.Identifier, TokenKind.Builtin, TokenKind.Keyword, TokenKind.Number)


def _type_arguments_only(tokens: list[Token], start: int, end: int) -> bool:
    return all(
        tokens[i].kind in TYPE_ARGUMENT_KINDS or tokens[i].text in ("<", ">", ",")
        for i in range(start, end)
    )


def _is_type_angle_bracket(tokens: list[Token], index: int) -> bool:
    """
    Whether the `<` or `>` at `index` encloses type parameters, as in `vec2<f32>`.
    The brackets must follow a type name and hold nothing but names, numbers and commas.
    """
    text = tokens[index].text
    if text == "<":
        if index == 0:
            return False
        previous = tokens[index - 1]
        if not (_is_type_name(previous) or previous.text == "var"):
            return False
        depth = 0
        for i in range(index, len(tokens)):
            if tokens[i].text == "<":
                depth += 1
            elif tokens[i].text == ">":
                depth -= 1
            if depth == 0:
                return _type_arguments_only(tokens, index + 1, i)
        return False
    if text != ">":
        return False

    depth = 0
    for i in range(index, -1, -1):
        if tokens[i].text == ">":
            depth += 1
        elif tokens[i].text == "<":
            depth -= 1
        if depth == 0:
            return _is_type_angle_bracket(tokens, i)
    return False


def _space_after(tokens: list[Token], index: int, in_for: bool) -> bool:
    token = tokens[index]
    following = tokens[index + 1]
    text, next_text = token.text, following.text

    if text == "," or (text == ";" and in_for):
        return True
    if text == "<" and _is_type_angle_bracket(tokens, index):
        return False
    if next_text in ("<", ">") and _is_type_angle_bracket(tokens, index + 1):
        return False
    if text == ">" and _is_type_angle_bracket(tokens, index):
        # `vec2<f32>(...)` but `var<private> x` and `-> vec4<f32> {`
        return next_text == "{" or next_text not in PUNCTUATION
    if next_text in (")", "]", "}", ",", ";"):
        return False
    if text == ":" or next_text == ":":
        return text == ":"
    if text in ("if", "for", "while") and next_text == "(":
        return False

    word = token.kind in (TokenKind.Keyword, TokenKind.Attribute) or _is_type_name(token)
    if word and next_text not in ("(", "["):
        return True
    if next_text == "{":
        return True
    return _is_operator(token) != _is_operator(following)


def _format_comment(text: str, indent: str) -> list[str]:
    lines = text.split("\n")
    if len(lines) == 1:
        return [indent + text]
    # Continuation lines of block comments line up after `/* `.
    return [indent + lines[0].strip()] + [indent + "   " + part.strip() for part in lines[1:]]


def prettify(code: str) -> str:
    """
    Reformats WGSL with one statement per line and four space indentation.
    Comments are kept, each on its own line.
    """
    tokens = tokenize(code)
    lines: list[str] = []
    line = ""
    level = 0
    in_struct = False
    in_for = False
    for_depth = 0

    def flush():
        nonlocal line
        lines.append(INDENT * level + line.strip())
        line = ""

    i = 0
    while i < len(tokens):
        token = tokens[i]
        following = tokens[i + 1] if i + 1 < len(tokens) else None

        if token.kind is TokenKind.Keyword and token.text == "for":
            in_for = True
            for_depth = 0
        elif in_for and token.text == "(":
            for_depth += 1
        elif in_for and token.text == ")":
            for_depth -= 1
            in_for = for_depth > 0

        if token.kind is TokenKind.Comment:
            if line.strip():
                flush()
            lines.extend(_format_comment(token.text, INDENT * level))
            i += 1
            continue

        if token.text == "}" and line.strip():
            # Last struct member without a trailing separator.
            flush()

        line += token.text
        if following is not None and _space_after(tokens, i, in_for):
            line += " "

        if (token.text == ";" and not in_for) or (in_struct and token.text == ","):
            flush()
        elif token.text == "{":
            flush()
            level += 1
            if any(tokens[j].text == "struct" for j in range(max(i - 2, 0), i)):
                in_struct = True
        elif token.text == "}":
            level = max(level - 1, 0)
            in_struct = False
            if following is not None and following.text == ";":
                line += ";"
                i += 1
                flush()
            elif following is not None and following.text == "else":
                line = "} "
            else:
                flush()

        i += 1

    if line.strip():
        flush()

    return "\n".join(lines)
