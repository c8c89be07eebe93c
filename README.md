# glescommon

Pure-Python helpers for OpenGL ES style rendering code: column-major 4x4
matrices, procedural meshes, PKM/ETC texture headers, Radiance HDR image
decoding and a frame timer. It needs nothing beyond the standard library.

## Installation

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Modules

- `glescommon.matrix` – `Vec3` (with `length()`, `normalized()`, `cross()`),
  `Vec4` and `Matrix` (16 floats, column-major). Builders: `identity()`,
  `scaling()`, `translation()`, `rotation_x()`, `rotation_y()`, `rotation_z()`
  (angles in degrees), `perspective()` (field of view in radians),
  `orthographic()` and `look_at()`. A matrix supports indexing 0–15, `*`,
  `as_list()`, `determinant()`, `inverse()` (raises `ValueError` when
  singular), `transposed()`, `scaled()`, `transform()` of a `Vec3` (as a point,
  w = 1) or a `Vec4`, and `format()` for a printable row-by-row view. Also
  `degrees_to_radians()` and `signum()`.
- `glescommon.sphere_model` – `point_coordinates(radius, samples)` and
  `triangle_coordinates(radius, samples)` as flat x, y, z lists, circles running
  from z = -radius to z = radius.
- `glescommon.torus_model` – `generate_vertices()`, `generate_normals()`,
  `wireframe_indices()`, `triangle_strip_indices()`, `bezier_vertices()` for the
  fixed 12 x 12 control mesh, `control_point_indices()` and `patch_data()`.
- `glescommon.cube_model` – `triangle_coordinates(scaling_factor)` (108 floats)
  and `normals()`.
- `glescommon.plane_model` – `triangle_coordinates()`, `uv_coordinates()`,
  `normals()` and `transform(matrix, coordinates)`.
- `glescommon.super_ellipsoid_model` – `sample()`, `calculate_normal()` and
  `create()`, which builds a `SuperEllipsoidMesh` of coordinates and normals.
- `glescommon.etc_header` – `parse_etc_header()` reads the 16-byte PKM header
  into an `EtcHeader`, whose `size(internal_format)` gives the compressed data
  size; format constants such as `GL_ETC1_RGB8_OES` are provided.
- `glescommon.texture` – `load_data()`, `load_pkm()`, `random_texture()`,
  `filled_texture()`, `reverse_pixel_line()`, `mipmap_count()` and
  `mipmap_filenames()`.
- `glescommon.hdr_image` – `decode_hdr()` and `load_hdr()` decode
  run-length-encoded Radiance images into an `HdrImage` of RGB floats, raising
  `HdrFormatError` on malformed input.
- `glescommon.shader` – `load_shader()` reads a shader source file as text.
- `glescommon.timer` – `Timer` with `reset()`, `time()`, `interval()`, `fps()`
  and `is_time_passed()`; the clock can be injected for testing.

## Example

    from glescommon.matrix import perspective, translation, rotation_y, Vec4

    model = translation(0.0, 0.0, -5.0) * rotation_y(45.0)
    mvp = perspective(1.0, 16 / 9, 0.1, 100.0) * model
    clip = mvp.transform(Vec4(1.0, 1.0, 1.0, 1.0))

    from glescommon.torus_model import generate_vertices, triangle_strip_indices

    vertices = generate_vertices(1.0, 0.3, 12, 12)
    strip = triangle_strip_indices(12, 12)

## What it does not do

The package produces data only. It makes no graphics calls: it does not
create a display, window, surface or rendering context, compile or link
shaders, upload textures, or draw text on screen. Pass the lists and bytes it
returns to whatever OpenGL binding you use.