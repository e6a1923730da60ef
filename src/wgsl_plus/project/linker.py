import os, re

from wgsl_plus.errors import CircularDependencyError, LinkError

INCLUDE = re.compile(r'^#(?:include|import)\s+"(.+)"\s*$')


def _resolve_include(include: str, current_folder: str, search_paths: list[str]):
    for folder in (current_folder, *search_paths):
        path = os.path.abspath(os.path.join(folder, include))
        if os.path.isfile(path):
            return path
    return None


def _read_lines(path: str, search_paths: list[str], processing: set[str], lines: list[str]):
    path = os.path.abspath(path)

    if path in processing:
        raise CircularDependencyError(f"Circular dependency detected: {path}")
    if not os.path.isfile(path):
        raise LinkError(f"File not found: {path}")

    processing.add(path)
    with open(path, encoding="utf-8") as f:
        content = f.read()

    for line in content.split("\n"):
        match = INCLUDE.match(line)
        if match is None:
            lines.append(line)
            continue

        include = match.group(1)
        include_path = _resolve_include(include, os.path.dirname(path), search_paths)
        if include_path is None:
            raise LinkError(f"Linked file not found: {include} in {path}")
        _read_lines(include_path, search_paths, processing, lines)

    processing.remove(path)


def link(paths: list[str], search_paths: list[str] | None = None) -> str:
    """
    Concatenates `paths`, replacing every `#include "file"` or `#import "file"` line with the
    linked file's contents. Includes are looked up next to the including file first,
    then in `search_paths`.
    """
    if search_paths is None:
        search_paths = []

    lines: list[str] = []
    processing: set[str] = set()
    for path in paths:
        _read_lines(path, search_paths, processing, lines)
    return "\n".join(lines)
