from .errors import (
    WgslPlusError,
    LexError,
    MacroArityError,
    ConditionalSyntaxError,
    LinkError,
    CircularDependencyError,
    OutputFormatError,
    ConfigError,
)
from .tokenization import Token, TokenKind, tokenize
from .preprocessing import Macro, preprocess, expand_macros, evaluate_expression
from .obfuscation import NameGenerator, obfuscate
from .formatting import minify, prettify, generate_output
from .project import link
