from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    Keyword = 0
    Identifier = 1
    Builtin = 2
    Number = 3
    String = 4
    Operator = 5
    Attribute = 6
    Comment = 7
    Directive = 8
    Unknown = 9


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    def is_identifier_like(self) -> bool:
        return self.kind in (TokenKind.Identifier, TokenKind.Keyword, TokenKind.Builtin)

    def with_text(self, text: str) -> "Token":
        return Token(self.kind, text)
