from wgsl_plus.tokenization import Token, TokenKind, tokenize, strip_comments


def _needs_space(previous: Token, current: Token) -> bool:
    if previous.is_identifier_like():
        return current.is_identifier_like() or current.kind is TokenKind.Number
    if previous.kind is TokenKind.Attribute and current.is_identifier_like():
        # `@location(0)vec4<f32>` is unambiguous, `@fragment fn` is not.
        return "(" not in previous.text
    return False


def _struct_terminators(tokens: list[Token]) -> set[int]:
    "Indices of the `;` following each struct body"
    skipped: set[int] = set()
    for i, token in enumerate(tokens):
        if token.kind is not TokenKind.Keyword or token.text != "struct":
            continue
        for j in range(i + 3, len(tokens) - 1):
            if (
                tokens[j].kind is TokenKind.Operator
                and tokens[j].text == "}"
                and tokens[j + 1].kind is TokenKind.Operator
                and tokens[j + 1].text == ";"
            ):
                skipped.add(j + 1)
                break
    return skipped


def minify(code: str) -> str:
    tokens = strip_comments(tokenize(code))
    skipped = _struct_terminators(tokens)

    output: list[str] = []
    previous = None
    for i, token in enumerate(tokens):
        if i in skipped:
            continue
        if previous is not None and _needs_space(previous, token):
            output.append(" ")
        output.append(token.text)
        previous = token

    return "".join(output)
