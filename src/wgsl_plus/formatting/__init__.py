from .minify import minify
from .prettify import prettify
from .output import (
    ExportType,
    OUTPUT_EXTENSIONS,
    generate_output,
    remove_custom_directives,
)
