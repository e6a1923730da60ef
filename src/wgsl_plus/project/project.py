import os, sys

from wgsl_plus.errors import OutputFormatError
from wgsl_plus.formatting import (
    ExportType,
    OUTPUT_EXTENSIONS,
    generate_output,
    minify,
    prettify,
    remove_custom_directives,
)
from wgsl_plus.obfuscation import obfuscate
from wgsl_plus.preprocessing import MacroDefine, preprocess
from wgsl_plus.tempfile import write_atomic

from .linker import link
from .project_config import ProjectConfig, CONFIG_FILE_NAME
from .transform_mode import TransformMode


def transform(code: str, mode: TransformMode) -> str:
    if mode is TransformMode.PRETTIFY:
        return prettify(code)
    if mode is TransformMode.MINIFY:
        return minify(code)
    if mode is TransformMode.OBFUSCATE:
        return obfuscate(code)
    return code


def validate_paths(inputs: list[str], output: str, export_type: ExportType | None):
    if not inputs:
        raise OutputFormatError("At least one input file is required")
    for path in inputs:
        if not os.path.isfile(path):
            raise OutputFormatError(f"Import file not found: {path}")
        if not path.endswith(".wgsl"):
            raise OutputFormatError(f"Import file must be .wgsl: {path}")

    output_path = os.path.abspath(output)
    if output_path in (os.path.abspath(p) for p in inputs):
        raise OutputFormatError(f"Output file cannot be one of the import files: {output}")

    extension = os.path.splitext(output_path)[1]
    if extension not in OUTPUT_EXTENSIONS:
        raise OutputFormatError(f"Output file must be .wgsl, .js, or .ts: {output}")
    if export_type is not None and extension != ".js":
        raise OutputFormatError("Export type should not be specified for non-js outputs")


def load_config(
    inputs: list[str], config_path: str | None, profiles: list[str] | None
) -> ProjectConfig:
    config = ProjectConfig()
    if config_path is None and inputs:
        config_path = os.path.join(
            os.path.dirname(os.path.abspath(inputs[0])), CONFIG_FILE_NAME
        )
    elif config_path is not None and not os.path.isfile(config_path):
        print(f'Warning: project file "{config_path}" was not found', file=sys.stderr)
    if config_path is not None:
        config.read_json_file(config_path, profiles or [])
    return config


def compile(
    inputs: list[str],
    output: str,
    mode: TransformMode = None,
    export_type: ExportType = None,
    defines: list[MacroDefine] = None,
    search_paths: list[str] = None,
    config_path: str = None,
    profiles: list[str] = None,
):
    """
    Links, preprocesses and transforms `inputs` into `output`.\n
    Command line values take priority over the project file. Nothing is written when any
    stage fails.
    """
    if defines is None:
        defines = []
    if search_paths is None:
        search_paths = []

    config = load_config(inputs, config_path, profiles)
    mode = mode or config.mode or TransformMode.NONE
    if export_type is None and output.endswith(".js"):
        export_type = config.export_type

    validate_paths(inputs, output, export_type)

    macros = {d.name: d.to_macro() for d in config.macros + defines if d.name}

    code = link(inputs, search_paths + config.search_paths)
    code = preprocess(code, macros)
    if mode is not TransformMode.OBFUSCATE:
        code = remove_custom_directives(code)
    code = transform(code, mode)

    content = generate_output(output, code, export_type.value if export_type else None)
    write_atomic(output, content)
