"""Vertex, normal and index data for a torus and its Bezier patch control mesh."""

from __future__ import annotations

import math

__all__ = [
    "generate_normals",
    "control_point_indices",
    "patch_data",
    "wireframe_indices",
    "generate_vertices",
    "triangle_strip_indices",
    "bezier_vertices",
    "CONTROL_MESH_CIRCLES",
    "CONTROL_MESH_POINTS_PER_CIRCLE",
]

# The Bezier control mesh is fixed at 12 circles of 12 points; torus continuity
# cannot be guaranteed with other values.
CONTROL_MESH_CIRCLES = 12
CONTROL_MESH_POINTS_PER_CIRCLE = 12


def generate_normals(circles_count: int, points_per_circle: int) -> list[float]:
    """Return one x, y, z normal per torus vertex, circle by circle."""
    normals: list[float] = []
    for horizontal in range(circles_count):
        phi = horizontal * 2.0 * math.pi / circles_count
        hx, hy, hz = -math.sin(phi), 0.0, math.cos(phi)
        for vertical in range(points_per_circle):
            theta = vertical * 2.0 * math.pi / points_per_circle
            vx = -math.cos(phi) * math.sin(theta)
            vy = math.cos(theta)
            vz = -math.sin(phi) * math.sin(theta)
            normals += [
                hz * vy - hy * vz,
                hx * vz - hz * vx,
                hy * vx - hx * vy,
            ]
    return normals


def control_point_indices(patch_dimension: int, patch_instances_count: int) -> list[int]:
    """Return control point indices for successive patches around the control mesh.

    Each patch takes ``patch_dimension`` points from ``patch_dimension``
    neighbouring circles; neighbouring patches share an edge, and once a
    row of patches has wrapped round the torus the next row starts higher up.
    """
    points = CONTROL_MESH_POINTS_PER_CIRCLE
    vertex_count = points * CONTROL_MESH_CIRCLES

    indices: list[int] = []
    start = 0
    current_circle = 0
    for _ in range(patch_instances_count):
        for _ in range(patch_dimension):
            current_circle = start // points
            for y in range(patch_dimension):
                index = start + y
                # Closing patches end up at the first vertex of the circle.
                if index >= points * (current_circle + 1):
                    index -= points
                indices.append(index)
            start = (start + points) % vertex_count

        # The next patch starts from the last column of this one.
        start = (start - points) % vertex_count
        if current_circle == 0:
            start += patch_dimension - 1
    return indices


def patch_data(patch_density: int) -> tuple[list[float], list[int]]:
    """Return the (u, v) grid of a patch and the triangle indices covering it.

    The grid has ``patch_density`` points on each side; every quad is drawn as
    two separate triangles.
    """
    if patch_density < 2:
        raise ValueError("patch density has to be at least 2")

    step = patch_density - 1
    vertices: list[float] = []
    for x in range(patch_density):
        u = x / step
        for y in range(patch_density):
            vertices += [u, y / step]

    indices: list[int] = []
    for x in range(step):
        for y in range(step):
            here = patch_density * x + y
            right = patch_density * (x + 1) + y
            indices += [here, here + 1, right, right, here + 1, right + 1]
    return vertices, indices


def wireframe_indices(circles_count: int, points_per_circle: int) -> list[int]:
    """Return line indices: for every vertex, a line to the next circle and one along its own."""
    vertex_count = circles_count * points_per_circle
    indices: list[int] = []
    for i in range(circles_count):
        for j in range(points_per_circle):
            start = i * points_per_circle + j
            horizontal_end = (i + 1) * points_per_circle + j
            vertical_end = start + 1
            if horizontal_end >= vertex_count:
                horizontal_end -= vertex_count
            if vertical_end >= (i + 1) * points_per_circle:
                vertical_end -= points_per_circle
            indices += [start, horizontal_end, start, vertical_end]
    return indices


def generate_vertices(
    torus_radius: float, circle_radius: float, circles_count: int, points_per_circle: int
) -> list[float]:
    """Return x, y, z, w for each torus vertex, circle by circle."""
    vertices: list[float] = []
    for horizontal in range(circles_count):
        angle = horizontal * 2.0 * math.pi / circles_count
        for vertical in range(points_per_circle):
            theta = vertical * 2.0 * math.pi / points_per_circle
            ring = torus_radius + circle_radius * math.cos(theta)
            vertices += [
                ring * math.cos(angle),
                circle_radius * math.sin(theta),
                ring * math.sin(angle),
                1.0,
            ]
    return vertices


def triangle_strip_indices(circles_count: int, points_per_circle: int) -> list[int]:
    """Return indices drawing the whole torus as one triangle strip.

    The result holds ``(2 * circles_count + 1) * points_per_circle + 1`` indices.
    """
    vertex_count = circles_count * points_per_circle
    current = 0
    indices = [current]

    for _ in range(points_per_circle):
        current += 1
        is_last_strip = current >= points_per_circle
        indices.append(current - points_per_circle if is_last_strip else current)

        for _ in range(circles_count):
            current += points_per_circle - 1
            if current >= vertex_count:
                current -= vertex_count
            indices.append(current)
            current += 1
            indices.append(current - points_per_circle if is_last_strip else current)
    return indices


def bezier_vertices(torus_radius: float, circle_radius: float) -> list[float]:
    """Return x, y, z, w for the 12 x 12 Bezier control points approximating the torus.

    Every third point (in both directions) lies on the torus; the two points
    between are pushed out so that cubic patches approximate circular arcs.
    """
    kappa = 4.0 * (math.sqrt(2.0) - 1.0) / 3.0
    alpha = math.atan(kappa)
    distortion = math.sqrt(1.0 + kappa * kappa)
    distorted_circle_radius = circle_radius * distortion
    distorted_torus_radius = torus_radius * distortion
    per_quadrant = 3

    phi = 0.0
    theta = 0.0
    vertices: list[float] = []

    for horizontal in range(CONTROL_MESH_CIRCLES):
        position = horizontal % per_quadrant
        if position == 0:
            current_torus_radius = torus_radius
            current_phi = phi
        elif position == 1:
            current_torus_radius = distorted_torus_radius
            current_phi = phi + alpha
        else:
            phi = (horizontal + 1) * math.pi / (2 * per_quadrant)
            current_torus_radius = distorted_torus_radius
            current_phi = phi - alpha

        for vertical in range(CONTROL_MESH_POINTS_PER_CIRCLE):
            point_position = vertical % per_quadrant
            if point_position == 0:
                current_circle_radius = circle_radius
                current_theta = theta
            elif point_position == 1:
                current_circle_radius = distorted_circle_radius
                current_theta = theta + alpha
            else:
                theta = (vertical + 1) * math.pi / (2 * per_quadrant)
                current_circle_radius = distorted_circle_radius
                current_theta = theta - alpha

            ring = current_torus_radius + current_circle_radius * math.cos(current_theta)
            vertices += [
                ring * math.cos(current_phi),
                current_circle_radius * math.sin(current_theta),
                ring * math.sin(current_phi),
                1.0,
            ]
    return vertices