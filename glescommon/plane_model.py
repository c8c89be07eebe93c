"""Vertex data for a flat square in the XZ plane, drawn as two triangles."""

from __future__ import annotations

from typing import Sequence

from glescommon.matrix import Matrix, Vec4

__all__ = ["uv_coordinates", "triangle_coordinates", "normals", "transform"]

#  z   D __________ C
#  .    |        / |
# / \   |     /    |
#  |    |  /       |
#  |    |/_________|
#  |   A            B
#  |----------> x
_UV_A = (0.0, 0.0)
_UV_B = (1.0, 0.0)
_UV_C = (1.0, 1.0)
_UV_D = (0.0, 1.0)

_A = (-1.0, 0.0, -1.0, 1.0)
_B = (1.0, 0.0, -1.0, 1.0)
_C = (1.0, 0.0, 1.0, 1.0)
_D = (-1.0, 0.0, 1.0, 1.0)

_NORMAL = (0.0, 1.0, 0.0)
_VERTICES_PER_PLANE = 6
_COMPONENTS = 4


def uv_coordinates() -> list[float]:
    """Return u, v texture coordinates for the triangles A-B-C and A-C-D."""
    return [c for uv in (_UV_A, _UV_B, _UV_C, _UV_A, _UV_C, _UV_D) for c in uv]


def triangle_coordinates() -> list[float]:
    """Return x, y, z, w for the triangles A-B-C and A-C-D, spanning -1 to 1 on X and Z."""
    return [c for vertex in (_A, _B, _C, _A, _C, _D) for c in vertex]


def normals() -> list[float]:
    """Return one upward x, y, z normal for each of the six vertices."""
    return list(_NORMAL) * _VERTICES_PER_PLANE


def transform(matrix: Matrix, coordinates: Sequence[float]) -> list[float]:
    """Return homogeneous x, y, z, w coordinates multiplied by ``matrix``."""
    if len(coordinates) % _COMPONENTS:
        raise ValueError(
            f"coordinates must come in groups of {_COMPONENTS}, got {len(coordinates)} values"
        )
    result: list[float] = []
    for start in range(0, len(coordinates), _COMPONENTS):
        vertex = matrix.transform(Vec4(*coordinates[start : start + _COMPONENTS]))
        result += [vertex.x, vertex.y, vertex.z, vertex.w]
    return result