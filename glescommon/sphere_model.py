"""Vertex data for a sphere built from stacked circles of sample points."""

from __future__ import annotations

import math

__all__ = ["point_coordinates", "triangle_coordinates"]

Point = tuple[float, float, float]


def _validate(radius: float, samples: int) -> None:
    if radius <= 0.0:
        raise ValueError("radius value has to be greater than zero")
    if samples <= 0:
        raise ValueError("samples value has to be greater than zero")


def _points(radius: float, samples: int) -> list[Point]:
    """Sample points circle by circle, from z = -radius up to z = radius."""
    if samples == 1:
        heights = [-radius]
    else:
        step = 2.0 * radius / (samples - 1)
        # Clamp against rounding so the last circle sits exactly on the pole.
        heights = [min(-radius + index * step, radius) for index in range(samples)]

    theta_step = 2.0 * math.pi / samples
    points: list[Point] = []
    for z in heights:
        circle_radius = math.sqrt(max(radius * radius - z * z, 0.0))
        for index in range(samples):
            theta = index * theta_step
            points.append((circle_radius * math.cos(theta), circle_radius * math.sin(theta), z))
    return points


def point_coordinates(radius: float, samples: int) -> list[float]:
    """Return ``samples * samples`` points on the sphere as flat x, y, z floats.

    Each of the ``samples`` circles runs from longitude 0 around the full
    turn; the circles run from the south pole (z = -radius) to the north.
    """
    _validate(radius, samples)
    return [component for point in _points(radius, samples) for component in point]


def triangle_coordinates(radius: float, samples: int) -> list[float]:
    """Return the sphere as a flat list of triangle vertices (x, y, z each).

    Two triangles start at every point of every circle except the last one,
    giving ``(samples - 1) * samples * 18`` floats in total.
    """
    _validate(radius, samples)
    points = _points(radius, samples)

    triangles: list[Point] = []
    for index in range((samples - 1) * samples):
        current = points[index]
        above = points[index + samples]
        if (index + 1) % samples == 0:
            # Last point of a circle: wrap round to the first point of the circles.
            first_of_circle = points[index - samples + 1]
            first_of_next = points[index + 1]
            triangles += [current, first_of_circle, first_of_next]
            triangles += [current, first_of_next, above]
        else:
            following = points[index + 1]
            above_following = points[index + samples + 1]
            triangles += [current, following, above_following]
            triangles += [current, above_following, above]

    return [component for point in triangles for component in point]