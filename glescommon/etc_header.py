"""The 16-byte header of a PKM (ETC compressed) image file."""

from __future__ import annotations

import struct
from dataclasses import dataclass

__all__ = [
    "EtcHeader",
    "parse_etc_header",
    "HEADER_SIZE",
    "GL_ETC1_RGB8_OES",
    "GL_COMPRESSED_RGB8_ETC2",
    "GL_COMPRESSED_RG11_EAC",
    "GL_COMPRESSED_SIGNED_RG11_EAC",
    "GL_COMPRESSED_RGBA8_ETC2_EAC",
    "GL_COMPRESSED_SRGB8_ALPHA8_ETC2_EAC",
]

HEADER_SIZE = 16

GL_ETC1_RGB8_OES = 0x8D64
GL_COMPRESSED_RG11_EAC = 0x9272
GL_COMPRESSED_SIGNED_RG11_EAC = 0x9273
GL_COMPRESSED_RGB8_ETC2 = 0x9274
GL_COMPRESSED_RGBA8_ETC2_EAC = 0x9278
GL_COMPRESSED_SRGB8_ALPHA8_ETC2_EAC = 0x9279

# Formats that use a full byte per pixel rather than half a byte.
_BYTE_PER_PIXEL_FORMATS = frozenset(
    {
        GL_COMPRESSED_RG11_EAC,
        GL_COMPRESSED_SIGNED_RG11_EAC,
        GL_COMPRESSED_RGBA8_ETC2_EAC,
        GL_COMPRESSED_SRGB8_ALPHA8_ETC2_EAC,
    }
)

_DIMENSIONS = struct.Struct(">4H")


@dataclass(frozen=True)
class EtcHeader:
    """Image dimensions from a PKM header; padded sizes are multiples of the 4x4 block."""

    padded_width: int
    padded_height: int
    width: int
    height: int

    def size(self, internal_format: int) -> int:
        """Size in bytes of the compressed image data for ``internal_format``."""
        pixels = self.padded_width * self.padded_height
        if internal_format in _BYTE_PER_PIXEL_FORMATS:
            return pixels
        return pixels >> 1


def parse_etc_header(data: bytes) -> EtcHeader:
    """Read the header at the start of PKM file contents.

    Bytes 0-7 hold the format name, version and packing type; bytes 8-15
    hold padded width, padded height, width and height as big-endian
    16-bit values.
    """
    if len(data) < HEADER_SIZE:
        raise ValueError(f"PKM header needs {HEADER_SIZE} bytes, got {len(data)}")
    padded_width, padded_height, width, height = _DIMENSIONS.unpack_from(data, 8)
    return EtcHeader(padded_width, padded_height, width, height)