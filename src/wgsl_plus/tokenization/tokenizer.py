import re
from collections.abc import Callable

from wgsl_plus.errors import LexError

from .keywords import WGSL_BUILTINS, WGSL_KEYWORDS
from .token import Token, TokenKind

Matcher = Callable[[str, int], tuple[int, TokenKind] | None]
"Returns the length consumed and the token kind, or None when the rule does not apply"

WHITESPACE = re.compile(r"\s+")
COMMENT = re.compile(r"//[^\r\n]*|/\*.*?\*/", re.DOTALL)
DIRECTIVE = re.compile(r'#(\w+)\s+"([^"]+)"')
STRING = re.compile(r'"[^"]*"')
NUMBER = re.compile(
    r"0[xX][0-9a-fA-F]+[uif]?|[0-9]+(?:\.[0-9]*)?[uif]?|[0-9]*\.[0-9]+f?"
)
ATTRIBUTE = re.compile(r"@[a-zA-Z_][a-zA-Z0-9_]*(?:\((?:[^()]+|\([^()]*\))*\))?")
IDENTIFIER = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")
OPERATOR = re.compile(
    r"<<=|>>=|\+=|-=|\*=|/=|%=|&=|\|=|\^=|<<|>>|<=|>=|==|!=|&&|\|\||->"
    r"|[-+*/%&|^~!<>=(){}\[\],;:.@]"
)


def _regex_matcher(pattern: re.Pattern, kind: TokenKind) -> Matcher:
    def match(source: str, index: int):
        found = pattern.match(source, index)
        if found is None:
            return None
        return found.end() - index, kind

    return match


def _match_word(source: str, index: int):
    found = IDENTIFIER.match(source, index)
    if found is None:
        return None
    word = found.group()
    if word in WGSL_KEYWORDS:
        kind = TokenKind.Keyword
    elif word in WGSL_BUILTINS:
        kind = TokenKind.Builtin
    else:
        kind = TokenKind.Identifier
    return len(word), kind


# First matching rule wins; every rule is greedy within itself.
MATCHERS: list[Matcher] = [
    _regex_matcher(COMMENT, TokenKind.Comment),
    _regex_matcher(DIRECTIVE, TokenKind.Directive),
    _regex_matcher(STRING, TokenKind.String),
    _regex_matcher(NUMBER, TokenKind.Number),
    _regex_matcher(ATTRIBUTE, TokenKind.Attribute),
    _match_word,
    _regex_matcher(OPERATOR, TokenKind.Operator),
]


def tokenize(source: str) -> list[Token]:
    """
    Splits WGSL source into tokens. Whitespace is discarded, comments are kept.\n
    Raises `LexError` on the first character no rule accepts.
    """
    tokens: list[Token] = []
    index = 0
    length = len(source)

    while index < length:
        whitespace = WHITESPACE.match(source, index)
        if whitespace:
            index = whitespace.end()
            continue

        for matcher in MATCHERS:
            result = matcher(source, index)
            if result is not None:
                break
        else:
            raise LexError(source[index], index)

        size, kind = result
        tokens.append(Token(kind, source[index : index + size]))
        index += size

    return tokens


def strip_comments(tokens: list[Token]) -> list[Token]:
    return [token for token in tokens if token.kind is not TokenKind.Comment]
