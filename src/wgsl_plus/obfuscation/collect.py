import re

from wgsl_plus.tokenization import Token, TokenKind

from .names import NameGenerator
from .swizzles import is_potential_swizzle

DIRECTIVE = re.compile(r'^#(\w+)\s+"([^"]+)"')


def _is_keyword(token: Token, text: str) -> bool:
    return token.kind is TokenKind.Keyword and token.text == text


def _is_annotated(tokens: list[Token], index: int) -> bool:
    "Identifier followed by a type annotation colon"
    return (
        tokens[index].kind is TokenKind.Identifier
        and index + 1 < len(tokens)
        and tokens[index + 1].text == ":"
    )


def _next_is_identifier(tokens: list[Token], index: int) -> bool:
    return index + 1 < len(tokens) and tokens[index + 1].kind is TokenKind.Identifier


def collect_struct_names(tokens: list[Token], names: NameGenerator) -> dict[str, str]:
    """
    Maps every struct member name to a generated name.
    Members shaped like swizzles (`xy`, `rgba`, ...) are left out.
    """
    struct_members: dict[str, str] = {}

    i = 0
    while i < len(tokens):
        if _is_keyword(tokens[i], "struct"):
            # Skip the struct name and opening brace.
            i += 2
            while i < len(tokens) and tokens[i].text != "}":
                if _is_annotated(tokens, i):
                    member = tokens[i].text
                    if not is_potential_swizzle(member) and member not in struct_members:
                        struct_members[member] = names.next()
                i += 1
        i += 1

    return struct_members


class DeclaredIdentifiers:
    identifiers: dict[str, str]
    bindings: dict[str, str]
    entry_points: set[str]

    def __init__(self) -> None:
        self.identifiers = {}
        self.bindings = {}
        self.entry_points = set()

    def is_entry_point(self, name: str) -> bool:
        if not self.entry_points:
            return name == "main"
        return name in self.entry_points


def collect_declared_identifiers(
    tokens: list[Token], names: NameGenerator
) -> DeclaredIdentifiers:
    """
    Collects the names declared by `fn`, function parameters, `let`, `var`, `const` and `struct`,
    along with `#binding` and `#entrypoint` directives.\n
    Entry point functions keep their names, their parameters are still renamed.
    """
    declared = DeclaredIdentifiers()
    identifiers = declared.identifiers

    def register(name: str):
        if name not in identifiers:
            identifiers[name] = names.next()

    i = 0
    while i < len(tokens):
        token = tokens[i]

        if token.kind is TokenKind.Directive:
            match = DIRECTIVE.match(token.text)
            if match:
                directive, name = match.groups()
                if directive == "binding":
                    register(name)
                    declared.bindings[name] = identifiers[name]
                elif directive == "entrypoint":
                    declared.entry_points.add(name)

        elif token.kind is TokenKind.Keyword:
            if token.text == "fn" and _next_is_identifier(tokens, i):
                function = tokens[i + 1].text
                if not declared.is_entry_point(function):
                    register(function)
                i += 1

                if i + 1 < len(tokens) and tokens[i + 1].text == "(":
                    i += 2
                    while i < len(tokens) and tokens[i].text != ")":
                        if _is_annotated(tokens, i):
                            register(tokens[i].text)
                            i += 1
                        i += 1

            elif token.text in ("let", "var", "const", "struct") and _next_is_identifier(
                tokens, i
            ):
                register(tokens[i + 1].text)
                i += 1

        i += 1

    return declared
