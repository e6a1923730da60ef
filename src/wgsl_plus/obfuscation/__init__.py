from .names import NameGenerator
from .swizzles import SWIZZLES, is_potential_swizzle
from .collect import (
    DeclaredIdentifiers,
    collect_struct_names,
    collect_declared_identifiers,
)
from .replace import replace_identifiers, reconstruct_code
from .obfuscator import obfuscate
