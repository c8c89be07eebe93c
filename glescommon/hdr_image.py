"""Decoding of run-length encoded Radiance HDR (RGBE) images."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field

__all__ = ["HdrFormatError", "HdrImage", "decode_hdr", "load_hdr"]

_MAGIC = b"#?"
_HEADER_LENGTH = 10
_MIN_LINE_LENGTH = 8
_MAX_LINE_LENGTH = 0x7FFF
_MAX_CHAR = 0x7F
_START_OF_TEXT = 0x02
_RESOLUTION = re.compile(rb"-Y\s*([+-]?\d+)\s*\+X\s*([+-]?\d+)\s*")


class HdrFormatError(ValueError):
    """Raised when HDR data cannot be decoded."""


@dataclass
class HdrImage:
    """Decoded image: ``rgb_data`` holds width * height RGB floats, row by row."""

    width: int = 0
    height: int = 0
    rgb_data: list[float] = field(default_factory=list)


class _Reader:
    def __init__(self, data: bytes, position: int) -> None:
        self._data = data
        self._position = position

    def byte(self) -> int:
        if self._position >= len(self._data):
            raise HdrFormatError("unexpected end of HDR data")
        value = self._data[self._position]
        self._position += 1
        return value


def _convert_component(value: int, exponent: int) -> float:
    return value / _MAX_CHAR * 2.0**exponent


def _decode_line(reader: _Reader, width: int) -> list[list[int]]:
    """Return the RGBE components of one scan line, one list per component."""
    first, second, third = reader.byte(), reader.byte(), reader.byte()
    if first != _START_OF_TEXT or second != _START_OF_TEXT or third & 0x80:
        raise HdrFormatError("unknown scan line beginning")
    reader.byte()

    components: list[list[int]] = []
    for _ in range(4):
        values: list[int] = []
        while len(values) < width:
            code = reader.byte()
            if code > _MAX_CHAR + 1:
                count = code & _MAX_CHAR
                run = [reader.byte()] * count
            else:
                run = [reader.byte() for _ in range(code)]
            if len(values) + len(run) > width:
                raise HdrFormatError("scan line run exceeds the image width")
            values += run
        components.append(values)
    return components


def decode_hdr(data: bytes) -> HdrImage:
    """Decode the contents of a Radiance HDR file into floating-point RGB."""
    if len(data) < _HEADER_LENGTH + 1 or not data.startswith(_MAGIC):
        raise HdrFormatError("file header has not been recognized")

    blank_line = data.find(b"\n\n", _HEADER_LENGTH + 1)
    if blank_line < 0:
        raise HdrFormatError("end of the header not found")

    match = _RESOLUTION.match(data, blank_line + 2)
    if match is None:
        raise HdrFormatError("resolution line not found")
    height, width = int(match.group(1)), int(match.group(2))
    if not _MIN_LINE_LENGTH <= width <= _MAX_LINE_LENGTH:
        raise HdrFormatError(
            f"cannot decode image with width lower than {_MIN_LINE_LENGTH} "
            f"or higher than {_MAX_LINE_LENGTH}"
        )
    if height < 0:
        raise HdrFormatError("image height cannot be negative")

    reader = _Reader(data, match.end())
    rgb: list[float] = []
    for _ in range(height):
        reds, greens, blues, exponents = _decode_line(reader, width)
        for r, g, b, e in zip(reds, greens, blues, exponents):
            exponent = e - 128
            rgb += [
                _convert_component(r, exponent),
                _convert_component(g, exponent),
                _convert_component(b, exponent),
            ]
    return HdrImage(width, height, rgb)


def load_hdr(path: str | os.PathLike[str]) -> HdrImage:
    """Read and decode a Radiance HDR file."""
    with open(path, "rb") as file:
        return decode_hdr(file.read())