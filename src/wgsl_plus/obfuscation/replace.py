from wgsl_plus.tokenization import Token, TokenKind

from .swizzles import is_potential_swizzle


def replace_identifiers(
    tokens: list[Token], identifiers: dict[str, str], struct_members: dict[str, str]
) -> list[Token]:
    """
    Returns a new token list with declared names and struct members renamed.
    Directive tokens are dropped.
    """
    result: list[Token] = []
    in_struct = False

    for i, token in enumerate(tokens):
        if token.kind is TokenKind.Keyword and token.text == "struct":
            in_struct = True
            result.append(token)
            continue
        if in_struct and token.text == "}":
            in_struct = False
            result.append(token)
            continue

        if token.kind is TokenKind.Identifier:
            name = token.text
            next_text = tokens[i + 1].text if i + 1 < len(tokens) else None
            previous_text = tokens[i - 1].text if i > 0 else None

            if in_struct and next_text == ":":
                replacement = struct_members.get(name)
            elif previous_text == ".":
                # Swizzles and members of unknown structs stay as written.
                replacement = None
                if not is_potential_swizzle(name):
                    replacement = struct_members.get(name)
            else:
                replacement = identifiers.get(name)

            result.append(token.with_text(replacement) if replacement else token)
        elif token.kind is not TokenKind.Directive:
            result.append(token)

    return result


def reconstruct_code(tokens: list[Token]) -> str:
    parts: list[str] = []
    for i, token in enumerate(tokens):
        parts.append(token.text)
        if (
            i + 1 < len(tokens)
            and token.kind
            in (TokenKind.Keyword, TokenKind.Identifier, TokenKind.Attribute)
            and tokens[i + 1].kind is not TokenKind.Operator
        ):
            parts.append(" ")
    return "".join(parts)
