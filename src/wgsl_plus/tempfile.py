import contextlib, tempfile, os


@contextlib.contextmanager
def CustomTempFile(*args, **kwargs):
    """
    Context manager for tempfile.NamedTemporaryFile which implements automatic file deletion on exit.
    """
    kwargs["delete"] = False
    file = tempfile.NamedTemporaryFile(*args, **kwargs)
    try:
        yield file
    finally:
        file.close()
        with contextlib.suppress(FileNotFoundError):
            os.remove(file.name)


def write_atomic(path: str, content: str):
    """
    Writes `content` to a temporary file next to `path` and moves it into place,
    so `path` is either left untouched or fully written.
    """
    folder = os.path.dirname(os.path.abspath(path))
    os.makedirs(folder, exist_ok=True)
    with CustomTempFile("w", dir=folder, suffix=".tmp", encoding="utf-8") as f:
        f.write(content)
        f.close()
        os.replace(f.name, path)
