[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glescommon"
version = "0.1.0"
description = "Matrix maths, procedural meshes, texture and HDR image loading helpers for OpenGL ES style rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["opengl", "gles", "matrix", "mesh", "torus", "sphere", "etc", "pkm", "hdr", "radiance"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["glescommon"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
