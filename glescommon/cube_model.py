"""Vertex data for an axis-aligned cube centred on the origin."""

from __future__ import annotations

__all__ = ["triangle_coordinates", "normals"]

Point = tuple[float, float, float]

#       B ________ C
#      / |      / |
#  A ......... D  |
#    .   |   .    |
#    .  F|_ _.___ |G
#    . /     .  /
#  E ......... H
_A: Point = (-1.0, 1.0, 1.0)
_B: Point = (-1.0, 1.0, -1.0)
_C: Point = (1.0, 1.0, -1.0)
_D: Point = (1.0, 1.0, 1.0)
_E: Point = (-1.0, -1.0, 1.0)
_F: Point = (-1.0, -1.0, -1.0)
_G: Point = (1.0, -1.0, -1.0)
_H: Point = (1.0, -1.0, 1.0)

# Two triangles per face, vertices in clockwise order, paired with the face normal.
_FACES: tuple[tuple[tuple[Point, ...], Point], ...] = (
    ((_A, _B, _C, _A, _C, _D), (0.0, 1.0, 0.0)),  # top
    ((_E, _F, _G, _E, _G, _H), (0.0, -1.0, 0.0)),  # bottom
    ((_G, _C, _B, _G, _B, _F), (0.0, 0.0, -1.0)),  # back
    ((_E, _A, _D, _E, _D, _H), (0.0, 0.0, 1.0)),  # front
    ((_H, _D, _C, _H, _C, _G), (1.0, 0.0, 0.0)),  # right
    ((_F, _B, _A, _F, _A, _E), (-1.0, 0.0, 0.0)),  # left
)


def triangle_coordinates(scaling_factor: float) -> list[float]:
    """Return the 12 triangles of the cube as 108 flat x, y, z floats.

    The unit cube spans -1 to 1 on each axis before scaling by ``scaling_factor``.
    Faces come in the order top, bottom, back, front, right, left.
    """
    return [
        scaling_factor * component
        for vertices, _ in _FACES
        for vertex in vertices
        for component in vertex
    ]


def normals() -> list[float]:
    """Return one x, y, z normal for each vertex of :func:`triangle_coordinates`."""
    return [
        component
        for vertices, normal in _FACES
        for _ in vertices
        for component in normal
    ]