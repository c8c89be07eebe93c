"""Vertex and normal data for a super ellipsoid (a rounded cube for suitable exponents)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from glescommon.matrix import Vec3, signum

__all__ = ["SuperEllipsoidMesh", "sample", "calculate_normal", "create"]


@dataclass
class SuperEllipsoidMesh:
    """Triangle list: x, y, z, w per vertex in ``coordinates``, x, y, z per vertex in ``normals``."""

    coordinates: list[float] = field(default_factory=list)
    normals: list[float] = field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        return len(self.coordinates) // 4


def _signed_power(value: float, exponent: float) -> float:
    if value == 0.0:
        return 0.0
    return signum(value) * abs(value) ** exponent


def sample(xy_angle: float, xz_angle: float, n1: float, n2: float, scale: float) -> Vec3:
    """Return the surface point at the given latitude (``xy_angle``) and longitude (``xz_angle``)."""
    xy_cos = _signed_power(math.cos(xy_angle), n1)
    return Vec3(
        scale * xy_cos * _signed_power(math.cos(xz_angle), n2),
        scale * _signed_power(math.sin(xy_angle), n1),
        scale * xy_cos * _signed_power(math.sin(xz_angle), n2),
    )


def calculate_normal(
    xy_angle: float, xz_angle: float, n1: float, n2: float, scale: float
) -> Vec3:
    """Return the unit surface normal at the given latitude and longitude."""
    phi_cos = _signed_power(math.cos(xy_angle), 2.0 - n1)
    normal = Vec3(
        phi_cos * _signed_power(math.cos(xz_angle), 2.0 - n2) / scale,
        _signed_power(math.sin(xy_angle), 2.0 - n1) / scale,
        phi_cos * _signed_power(math.sin(xz_angle), 2.0 - n2) / scale,
    )
    return normal.normalized()


def create(samples: int, n1: float, n2: float, scale: float) -> SuperEllipsoidMesh:
    """Build the super ellipsoid as ``samples // 2 * samples`` quads of two triangles each."""
    if samples <= 0:
        raise ValueError("number of samples has to be greater than zero")

    delta = 2.0 * math.pi / samples
    mesh = SuperEllipsoidMesh()

    def store(xy: float, xz: float) -> None:
        vertex = sample(xy, xz, n1, n2, scale)
        normal = calculate_normal(xy, xz, n1, n2, scale)
        mesh.coordinates += [vertex.x, vertex.y, vertex.z, 1.0]
        mesh.normals += [normal.x, normal.y, normal.z]

    xy_angle = -math.pi / 2.0
    for _ in range(samples // 2):
        xz_angle = -math.pi
        for _ in range(samples):
            corners = (
                (xy_angle, xz_angle),
                (xy_angle + delta, xz_angle),
                (xy_angle + delta, xz_angle + delta),
                (xy_angle, xz_angle),
                (xy_angle + delta, xz_angle + delta),
                (xy_angle, xz_angle + delta),
            )
            for xy, xz in corners:
                store(xy, xz)
            xz_angle += delta
        xy_angle += delta
    return mesh