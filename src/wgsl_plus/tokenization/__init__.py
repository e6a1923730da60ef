from .token import Token, TokenKind
from .tokenizer import tokenize, strip_comments
