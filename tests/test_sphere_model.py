import math

import pytest

from glescommon.sphere_model import point_coordinates, triangle_coordinates


def _triples(values):
    return [tuple(values[i:i + 3]) for i in range(0, len(values), 3)]


@pytest.mark.parametrize("samples", [2, 3, 8, 17])
def test_point_count(samples):
    assert len(point_coordinates(1.5, samples)) == samples * samples * 3


@pytest.mark.parametrize("radius", [0.5, 1.0, 4.0])
def test_points_lie_on_sphere(radius):
    for x, y, z in _triples(point_coordinates(radius, 10)):
        assert math.sqrt(x * x + y * y + z * z) == pytest.approx(radius)


def test_circles_run_from_south_to_north_pole():
    radius = 2.0
    samples = 6
    points = _triples(point_coordinates(radius, samples))
    assert all(z == pytest.approx(-radius) for _, _, z in points[:samples])
    assert all(z == pytest.approx(radius) for _, _, z in points[-samples:])
    heights = [points[i * samples][2] for i in range(samples)]
    assert heights == sorted(heights)


def test_points_on_a_circle_share_height():
    samples = 5
    points = _triples(point_coordinates(1.0, samples))
    for circle in range(samples):
        ring = points[circle * samples:(circle + 1) * samples]
        assert len({round(z, 9) for _, _, z in ring}) == 1


def test_single_sample_is_south_pole():
    assert point_coordinates(3.0, 1) == [0.0, 0.0, -3.0]


@pytest.mark.parametrize("samples", [2, 4, 9])
def test_triangle_count(samples):
    assert len(triangle_coordinates(1.0, samples)) == (samples - 1) * samples * 18


def test_single_sample_has_no_triangles():
    assert triangle_coordinates(1.0, 1) == []


def test_triangle_vertices_are_sphere_points():
    samples = 6
    points = {tuple(round(c, 9) for c in p) for p in _triples(point_coordinates(1.0, samples))}
    vertices = _triples(triangle_coordinates(1.0, samples))
    assert all(tuple(round(c, 9) for c in v) in points for v in vertices)


def test_first_triangles_start_at_first_point():
    samples = 4
    points = _triples(point_coordinates(1.0, samples))
    vertices = _triples(triangle_coordinates(1.0, samples))
    assert vertices[0] == points[0]
    assert vertices[1] == points[1]
    assert vertices[2] == points[samples + 1]
    assert vertices[3] == points[0]
    assert vertices[4] == points[samples + 1]
    assert vertices[5] == points[samples]


def test_last_point_of_circle_wraps_round():
    samples = 4
    points = _triples(point_coordinates(1.0, samples))
    vertices = _triples(triangle_coordinates(1.0, samples))
    last = samples - 1
    first_triangle = vertices[last * 6:last * 6 + 3]
    second_triangle = vertices[last * 6 + 3:last * 6 + 6]
    assert first_triangle == [points[last], points[0], points[samples]]
    assert second_triangle == [points[last], points[samples], points[last + samples]]


@pytest.mark.parametrize("function", [point_coordinates, triangle_coordinates])
@pytest.mark.parametrize("radius", [0.0, -1.0])
def test_rejects_non_positive_radius(function, radius):
    with pytest.raises(ValueError):
        function(radius, 4)


@pytest.mark.parametrize("function", [point_coordinates, triangle_coordinates])
@pytest.mark.parametrize("samples", [0, -3])
def test_rejects_non_positive_samples(function, samples):
    with pytest.raises(ValueError):
        function(1.0, samples)