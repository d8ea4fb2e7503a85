"""Filesystem helpers for writing rendered documents."""

from pathlib import Path
from typing import Union

from .dom_model import Document

PathLike = Union[str, Path]


def write_html(path: PathLike, document: Document) -> Path:
    """Write ``document.get_html()`` as UTF-8, creating parent directories.

    Newlines are written as ``\\n`` on every platform so the file matches the
    serialized string byte for byte.
    """

    file_path = Path(path)
    if file_path.is_dir():
        raise IsADirectoryError(f"Output path is a directory: {file_path}")
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(document.get_html(), encoding="utf-8", newline="")
    return file_path


__all__ = ["write_html"]
