from __future__ import annotations

import os

from .errors import IoFailure


def resolve_path(file_obj) -> str:
    """Accept a path string, a ``PathLike`` or an uploaded-file object with ``.name``."""
    if file_obj is None:
        raise IoFailure("No file uploaded.")
    if hasattr(file_obj, 'name') and not isinstance(file_obj, (str, os.PathLike)):
        return file_obj.name
    return os.fspath(file_obj)


def file_name_from_path(path) -> str:
    name = os.path.basename(os.path.normpath(os.fspath(path))) if path else ''
    if name in ('', '.', '..', os.sep):
        return 'unknown'
    return name


def read_text(path) -> str:
    """Read a whole file as UTF-8 text (a leading BOM is dropped)."""
    try:
        with open(path, 'r', encoding='utf-8-sig', newline='') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise IoFailure(f"Failed to read file: {e}") from e
