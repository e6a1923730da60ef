import argparse
import sys
import time

import wgsl_plus.project
from wgsl_plus.errors import WgslPlusError
from wgsl_plus.formatting import ExportType
from wgsl_plus.preprocessing import MacroDefine
from wgsl_plus.project import TransformMode


def build(args):
    if args.obfuscate:
        mode = TransformMode.OBFUSCATE
    elif args.minify:
        mode = TransformMode.MINIFY
    elif args.prettify:
        mode = TransformMode.PRETTIFY
    else:
        mode = None

    defines = [MacroDefine.from_string(d) for d in args.defines]
    print(f'Building "{args.output}" from {len(args.inputs)} file(s)')
    wgsl_plus.project.compile(
        args.inputs,
        args.output,
        mode,
        ExportType(args.export_type) if args.export_type else None,
        defines,
        args.include,
        args.config,
        args.profile,
    )


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        prog="wgsl-plus",
        description="A WGSL compiler with linking, preprocessing and multi-format output",
        epilog=(
            "Examples:\n"
            "  wgsl-plus input.wgsl -o output.wgsl\n"
            "  wgsl-plus a.wgsl b.wgsl -o output.js --export-type esm\n"
            "  wgsl-plus input.wgsl -o output.wgsl --obfuscate"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Common arguments.
    group = parser.add_argument_group("common arguments")
    group.add_argument("inputs", nargs="+", help="WGSL files to link, in order")
    group.add_argument(
        "-o", "--output", type=str, required=True, help="Output path (.wgsl, .js or .ts)"
    )
    group.add_argument(
        "-t",
        "--export-type",
        type=str,
        choices=[e.value for e in ExportType],
        default=None,
        help="Module format for .js outputs, defaults to esm",
    )

    # Transform arguments.
    group = parser.add_argument_group("transform arguments")
    transforms = group.add_mutually_exclusive_group()
    transforms.add_argument(
        "-b",
        "--obfuscate",
        action="store_true",
        help="Rename declared identifiers and struct members",
    )
    transforms.add_argument("-m", "--minify", action="store_true", help="Minify the output")
    transforms.add_argument(
        "-p", "--prettify", action="store_true", help="Prettify the output"
    )

    # Preprocessor arguments.
    group = parser.add_argument_group("preprocessor arguments")
    group.add_argument(
        "-d",
        "--defines",
        type=str,
        nargs="*",
        default=[],
        help='Additional macros in "NAME value" form',
    )
    group.add_argument(
        "-I",
        "--include",
        type=str,
        nargs="*",
        default=[],
        help="Extra folders searched by #include and #import",
    )

    # Project arguments.
    group = parser.add_argument_group("project arguments")
    group.add_argument(
        "--config",
        type=str,
        default=None,
        help="Project file, defaults to wgsl-plus.json next to the first input",
    )
    group.add_argument(
        "--profile",
        type=str,
        nargs="*",
        default=[],
        help="Project file profiles to use",
    )

    args = parser.parse_args(argv)
    current_time = time.perf_counter()

    try:
        build(args)
    except (WgslPlusError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Completed in {round(time.perf_counter() - current_time, 2)} seconds")
