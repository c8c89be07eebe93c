"""Loading of shader source files."""

from __future__ import annotations

import os

__all__ = ["load_shader"]


def load_shader(path: str | os.PathLike[str]) -> str:
    """Return the whole contents of a shader source file, unchanged.

    Raises ``OSError`` (such as ``FileNotFoundError``) when the file cannot be read.
    """
    with open(path, "rb") as file:
        return file.read().decode("utf-8")