"""Matrix maths, procedural meshes, texture, HDR image and shader loading, and a frame timer."""

__version__ = "0.1.0"