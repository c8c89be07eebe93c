"""4x4 column-major matrices and the small vector types they transform."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Union, overload

__all__ = [
    "Vec3",
    "Vec4",
    "Matrix",
    "degrees_to_radians",
    "signum",
    "identity",
    "scaling",
    "translation",
    "perspective",
    "look_at",
    "orthographic",
    "rotation_x",
    "rotation_y",
    "rotation_z",
]


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * math.pi / 180.0


def signum(value: float) -> float:
    """Return -1.0, 0.0 or 1.0 according to the sign of ``value``."""
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


@dataclass(frozen=True)
class Vec3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> "Vec3":
        """Return a unit vector pointing the same way."""
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vec3(self.x / length, self.y / length, self.z / length)

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


@dataclass(frozen=True)
class Vec4:
    """A four-component (homogeneous) vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def _det3(m: list[float]) -> float:
    return (
        m[0] * (m[4] * m[8] - m[7] * m[5])
        - m[3] * (m[1] * m[8] - m[7] * m[2])
        + m[6] * (m[1] * m[5] - m[4] * m[2])
    )


def _minor(elements: list[float], column: int, row: int) -> list[float]:
    """The 3x3 column-major matrix left after removing one column and one row."""
    return [
        elements[c * 4 + r]
        for c in range(4)
        if c != column
        for r in range(4)
        if r != row
    ]


class Matrix:
    """A 4x4 matrix stored as 16 floats in column-major order."""

    __slots__ = ("_elements",)

    def __init__(self, elements: Iterable[float] = _IDENTITY) -> None:
        values = [float(value) for value in elements]
        if len(values) != 16:
            raise ValueError(f"a matrix needs 16 elements, got {len(values)}")
        self._elements = values

    def _check_index(self, index: int) -> None:
        if not 0 <= index <= 15:
            raise IndexError(f"matrix only has 16 elements, tried to access element {index}")

    def __getitem__(self, index: int) -> float:
        self._check_index(index)
        return self._elements[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._check_index(index)
        self._elements[index] = float(value)

    def __mul__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        left, right = self._elements, other._elements
        result = [0.0] * 16
        for row in range(4):
            for column in range(4):
                result[column * 4 + row] = sum(
                    left[k * 4 + row] * right[column * 4 + k] for k in range(4)
                )
        return Matrix(result)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elements == other._elements

    def __repr__(self) -> str:
        return f"Matrix({self._elements!r})"

    def as_list(self) -> list[float]:
        """Return a copy of the 16 elements in column-major order."""
        return list(self._elements)

    def determinant(self) -> float:
        e = self._elements
        return sum(
            (-1.0) ** column * e[column * 4] * _det3(_minor(e, column, 0))
            for column in range(4)
        )

    def inverse(self) -> "Matrix":
        """Return the inverse, computed as the adjugate over the determinant."""
        determinant = self.determinant()
        if determinant == 0.0:
            raise ValueError("matrix is singular and cannot be inverted")
        e = self._elements
        cofactors = [0.0] * 16
        for column in range(4):
            for row in range(4):
                sign = -1.0 if (column + row) % 2 else 1.0
                cofactors[column * 4 + row] = sign * _det3(_minor(e, column, row))
        return Matrix(cofactors).transposed().scaled(1.0 / determinant)

    def scaled(self, factor: float) -> "Matrix":
        return Matrix(value * factor for value in self._elements)

    def transposed(self) -> "Matrix":
        e = self._elements
        return Matrix(e[row * 4 + column] for column in range(4) for row in range(4))

    @overload
    def transform(self, vertex: Vec4) -> Vec4: ...

    @overload
    def transform(self, vertex: Vec3) -> Vec3: ...

    def transform(self, vertex: Union[Vec3, Vec4]) -> Union[Vec3, Vec4]:
        """Multiply a vertex by this matrix; a Vec3 is treated as a point (w = 1)."""
        e = self._elements
        w = vertex.w if isinstance(vertex, Vec4) else 1.0
        components = [
            vertex.x * e[i] + vertex.y * e[4 + i] + vertex.z * e[8 + i] + w * e[12 + i]
            for i in range(4)
        ]
        if isinstance(vertex, Vec4):
            return Vec4(*components)
        return Vec3(*components[:3])

    def format(self) -> str:
        """Render the matrix row by row, one decimal place, tab separated."""
        e = self._elements
        rows = "".join(
            "".join(f"{e[column * 4 + row]:.1f}\t" for column in range(4)) + "\n"
            for row in range(4)
        )
        return "\n" + rows + "\n"


def identity() -> Matrix:
    return Matrix(_IDENTITY)


def scaling(x: float, y: float, z: float) -> Matrix:
    result = identity()
    result[0] = x
    result[5] = y
    result[10] = z
    return result


def translation(x: float, y: float, z: float) -> Matrix:
    result = identity()
    result[12] = x
    result[13] = y
    result[14] = z
    return result


def perspective(fov: float, ratio: float, z_near: float, z_far: float) -> Matrix:
    """Perspective projection; ``fov`` is the vertical field of view in radians."""
    focal = 1.0 / math.tan(fov * 0.5)
    result = identity()
    result[0] = focal / ratio
    result[5] = focal
    result[10] = -(z_far + z_near) / (z_far - z_near)
    result[11] = -1.0
    result[14] = (-2.0 * z_far * z_near) / (z_far - z_near)
    result[15] = 0.0
    return result


def look_at(eye: Vec3, center: Vec3, up: Vec3) -> Matrix:
    """Camera matrix looking from ``eye`` towards ``center``."""
    camera_z = Vec3(center.x - eye.x, center.y - eye.y, center.z - eye.z).normalized()
    camera_x = camera_z.cross(up).normalized()
    camera_y = camera_x.cross(camera_z)

    result = identity()
    result[0], result[1], result[2] = camera_x.x, camera_y.x, -camera_z.x
    result[4], result[5], result[6] = camera_x.y, camera_y.y, -camera_z.y
    result[8], result[9], result[10] = camera_x.z, camera_y.z, -camera_z.z
    result[12], result[13], result[14] = -eye.x, -eye.y, -eye.z
    return result


def orthographic(
    left: float, right: float, bottom: float, top: float, z_near: float, z_far: float
) -> Matrix:
    result = identity()
    result[0] = 2.0 / (right - left)
    result[12] = -(right + left) / (right - left)
    result[5] = 2.0 / (top - bottom)
    result[13] = -(top + bottom) / (top - bottom)
    result[10] = -2.0 / (z_far - z_near)
    result[14] = -(z_far + z_near) / (z_far - z_near)
    return result


def rotation_x(angle: float) -> Matrix:
    """Rotation about the X axis; ``angle`` in degrees."""
    radians = degrees_to_radians(angle)
    result = identity()
    result[5] = math.cos(radians)
    result[9] = -math.sin(radians)
    result[6] = math.sin(radians)
    result[10] = math.cos(radians)
    return result


def rotation_y(angle: float) -> Matrix:
    """Rotation about the Y axis; ``angle`` in degrees."""
    radians = degrees_to_radians(angle)
    result = identity()
    result[0] = math.cos(radians)
    result[8] = math.sin(radians)
    result[2] = -math.sin(radians)
    result[10] = math.cos(radians)
    return result


def rotation_z(angle: float) -> Matrix:
    """Rotation about the Z axis; ``angle`` in degrees."""
    radians = degrees_to_radians(angle)
    result = identity()
    result[0] = math.cos(radians)
    result[4] = -math.sin(radians)
    result[1] = math.sin(radians)
    result[5] = math.cos(radians)
    return result