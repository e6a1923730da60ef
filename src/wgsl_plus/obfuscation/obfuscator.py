from wgsl_plus.tokenization import tokenize, strip_comments

from .collect import collect_struct_names, collect_declared_identifiers
from .names import NameGenerator
from .replace import replace_identifiers, reconstruct_code


def format_binding_comments(bindings: dict[str, str]) -> str:
    return "\n".join(
        f"//#!binding {original} {generated}" for original, generated in bindings.items()
    )


def obfuscate(code: str, names: NameGenerator | None = None) -> str:
    """
    Renames declared functions, variables, parameters, structs and struct members.\n
    Entry points, builtins and swizzle accessors keep their names. Each `#binding` directive
    becomes a `//#!binding <original> <generated>` line at the top of the result.
    """
    if names is None:
        names = NameGenerator()
    names.reset()

    tokens = strip_comments(tokenize(code))

    struct_members = collect_struct_names(tokens, names)
    declared = collect_declared_identifiers(tokens, names)

    renamed = replace_identifiers(tokens, declared.identifiers, struct_members)
    obfuscated = reconstruct_code(renamed)

    binding_comments = format_binding_comments(declared.bindings)
    if binding_comments:
        return f"{binding_comments}\n{obfuscated}"
    return obfuscated
