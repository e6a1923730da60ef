import os, re
from enum import Enum

from wgsl_plus.errors import OutputFormatError

CUSTOM_DIRECTIVE = re.compile(r'^\s*#(?:binding|entrypoint)\s+"[^"]*"\s*(?://.*)?$')


class ExportType(Enum):
    esm = "esm"
    commonjs = "commonjs"


OUTPUT_EXTENSIONS = (".wgsl", ".js", ".ts")


def _escape_template(content: str) -> str:
    return content.replace("`", "\\`").replace("${", "\\${")


def generate_output(output_path: str, content: str, export_type: str | None = None) -> str:
    """
    Wraps `content` for the output file type.
    `.wgsl` is written as is, `.ts` and `.js` export the code as a template string.
    """
    extension = os.path.splitext(output_path)[1]

    if extension == ".wgsl":
        return content
    if extension == ".ts":
        return f"export default `{_escape_template(content)}`;"
    if extension == ".js":
        try:
            export_type = ExportType(export_type or "esm")
        except ValueError:
            raise OutputFormatError(
                f"Invalid export type: {export_type}. Must be 'esm' or 'commonjs'"
            )
        if export_type is ExportType.commonjs:
            return f"module.exports = `{_escape_template(content)}`;"
        return f"export default `{_escape_template(content)}`;"

    raise OutputFormatError(
        f"Unsupported output extension: {extension}. Must be .wgsl, .js, or .ts"
    )


def remove_custom_directives(code: str) -> str:
    "Drops `#binding` and `#entrypoint` lines, which only mean something to the obfuscator"
    return "\n".join(line for line in code.split("\n") if not CUSTOM_DIRECTIVE.match(line))
