"""Loading and generation of raw texture data."""

from __future__ import annotations

import os
import random
from typing import Sequence

from glescommon.etc_header import HEADER_SIZE, EtcHeader, parse_etc_header

__all__ = [
    "load_data",
    "load_pkm",
    "random_texture",
    "filled_texture",
    "reverse_pixel_line",
    "mipmap_count",
    "mipmap_filenames",
]

_RGB_COMPONENTS = 3


def load_data(path: str | os.PathLike[str]) -> bytes:
    """Return the whole contents of a texture file.

    Raises ``OSError`` (such as ``FileNotFoundError``) when the file cannot be read.
    """
    with open(path, "rb") as file:
        return file.read()


def load_pkm(path: str | os.PathLike[str]) -> tuple[EtcHeader, bytes]:
    """Read a PKM file and return its header and the compressed data after it."""
    data = load_data(path)
    header = parse_etc_header(data)
    return header, data[HEADER_SIZE:]


def random_texture(
    width: int, height: int, rng: random.Random | None = None
) -> bytes:
    """Return RGBA texels with random colour channels and fully opaque alpha."""
    generator = rng if rng is not None else random.Random()
    texels = bytearray()
    for _ in range(width * height):
        texels += bytes(int(255 * generator.random()) for _ in range(3))
        texels.append(255)
    return bytes(texels)


def filled_texture(width: int, height: int, value: int) -> list[int]:
    """Return a single-channel texture with every texel set to ``value``."""
    return [value] * (width * height)


def reverse_pixel_line(source: Sequence[float], line_width: int) -> list[float]:
    """Return a line of RGB pixels in reverse order; components keep their order."""
    needed = line_width * _RGB_COMPONENTS
    if line_width < 0 or len(source) < needed:
        raise ValueError(
            f"a line of {line_width} RGB pixels needs {needed} values, got {len(source)}"
        )
    pixels = [
        source[start : start + _RGB_COMPONENTS]
        for start in range(0, needed, _RGB_COMPONENTS)
    ]
    return [component for pixel in reversed(pixels) for component in pixel]


def mipmap_count(width: int, height: int) -> int:
    """Number of mipmap levels, halving each side until both reach one texel."""
    levels = 1
    while width > 1 or height > 1:
        levels += 1
        if width > 1:
            width >>= 1
        if height > 1:
            height >>= 1
    return levels


def mipmap_filenames(base: str, suffix: str, count: int) -> list[str]:
    """File names of ``count`` mipmap levels: base, level number, suffix."""
    return [f"{base}{level}{suffix}" for level in range(count)]