import math

import pytest

from glescommon import torus_model


def _chunks(values, size):
    return [values[i:i + size] for i in range(0, len(values), size)]


def _distance_from_ring(x, y, z, torus_radius):
    return math.hypot(math.hypot(x, z) - torus_radius, y)


def test_generate_normals_length_and_unit():
    normals = torus_model.generate_normals(6, 8)
    assert len(normals) == 6 * 8 * 3
    for nx, ny, nz in _chunks(normals, 3):
        assert math.sqrt(nx * nx + ny * ny + nz * nz) == pytest.approx(1.0)


def test_first_normal_points_outward_along_x():
    normals = torus_model.generate_normals(4, 4)
    assert normals[:3] == pytest.approx([1.0, 0.0, 0.0])


def test_normals_point_from_tube_centre_to_vertex():
    torus_radius, circle_radius = 3.0, 0.5
    vertices = _chunks(torus_model.generate_vertices(torus_radius, circle_radius, 8, 6), 4)
    normals = _chunks(torus_model.generate_normals(8, 6), 3)
    for (x, y, z, _), (nx, ny, nz) in zip(vertices, normals):
        cx, cy, cz = x - circle_radius * nx, y - circle_radius * ny, z - circle_radius * nz
        assert cy == pytest.approx(0.0, abs=1e-9)
        assert math.hypot(cx, cz) == pytest.approx(torus_radius)


def test_generate_vertices_lie_on_torus():
    vertices = torus_model.generate_vertices(2.0, 0.5, 10, 7)
    assert len(vertices) == 10 * 7 * 4
    for x, y, z, w in _chunks(vertices, 4):
        assert w == 1.0
        assert _distance_from_ring(x, y, z, 2.0) == pytest.approx(0.5)


def test_generate_vertices_first_point():
    assert torus_model.generate_vertices(2.0, 0.5, 4, 4)[:4] == pytest.approx([2.5, 0.0, 0.0, 1.0])


def test_wireframe_indices_structure():
    circles, points = 5, 4
    indices = torus_model.wireframe_indices(circles, points)
    assert len(indices) == circles * points * 4
    assert all(0 <= index < circles * points for index in indices)
    for vertex, (start, h_end, start_again, v_end) in enumerate(_chunks(indices, 4)):
        assert start == vertex == start_again
        assert h_end == (vertex + points) % (circles * points)
        assert v_end // points == vertex // points


def test_triangle_strip_indices_count_and_coverage():
    circles, points = 6, 5
    indices = torus_model.triangle_strip_indices(circles, points)
    assert len(indices) == (2 * circles + 1) * points + 1
    assert indices[0] == 0
    assert set(indices) == set(range(circles * points))


def test_control_point_indices_single_patch():
    indices = torus_model.control_point_indices(4, 1)
    expected = []
    for column in range(4):
        expected += [column * 12 + y for y in range(4)]
    assert indices == expected


def test_control_point_neighbouring_patches_share_an_edge():
    dimension = 4
    patches = _chunks(torus_model.control_point_indices(dimension, 16), dimension * dimension)
    assert len(patches) == 16
    for first, second in zip(patches, patches[1:]):
        first_columns = _chunks(first, dimension)
        second_columns = _chunks(second, dimension)
        if first_columns[-1][0] // 12 != 0:
            assert first_columns[-1] == second_columns[0]


def test_control_point_columns_stay_on_one_circle():
    dimension = 4
    indices = torus_model.control_point_indices(dimension, 16)
    assert len(indices) == 16 * dimension * dimension
    assert all(0 <= index < 144 for index in indices)
    for column in _chunks(indices, dimension):
        assert len({index // 12 for index in column}) == 1


def test_patch_data_grid():
    vertices, indices = torus_model.patch_data(4)
    assert len(vertices) == 4 * 4 * 2
    assert vertices[:2] == [0.0, 0.0]
    assert vertices[-2:] == [1.0, 1.0]
    assert len(indices) == 3 * 3 * 6
    assert max(indices) == 15


def test_patch_data_index_pattern_from_documented_example():
    _, indices = torus_model.patch_data(16)
    assert indices[:6] == [0, 1, 16, 16, 1, 17]


def test_patch_data_rejects_too_small_density():
    with pytest.raises(ValueError):
        torus_model.patch_data(1)


def test_bezier_vertices_count_and_first_point():
    vertices = torus_model.bezier_vertices(2.0, 0.5)
    assert len(vertices) == 12 * 12 * 4
    assert vertices[:4] == pytest.approx([2.5, 0.0, 0.0, 1.0])


def test_bezier_edge_points_lie_on_torus():
    vertices = _chunks(torus_model.bezier_vertices(2.0, 0.5), 4)
    for index, (x, y, z, w) in enumerate(vertices):
        circle, point = divmod(index, 12)
        assert w == 1.0
        if circle % 3 == 0 and point % 3 == 0:
            assert _distance_from_ring(x, y, z, 2.0) == pytest.approx(0.5)


def test_bezier_middle_points_lie_outside_tube():
    vertices = _chunks(torus_model.bezier_vertices(2.0, 0.5), 4)
    for index, (x, y, z, _) in enumerate(vertices):
        circle, point = divmod(index, 12)
        if circle % 3 == 0 and point % 3 != 0:
            assert _distance_from_ring(x, y, z, 2.0) > 0.5