[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tritonengine"
version = "0.1.0"
description = "A small game engine with a window, a frame loop, GLSL shader programs and a coloured logger."
requires-python = ">=3.10"
keywords = ["game", "engine", "opengl", "pyglet", "shader", "glsl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tritonengine = "tritonengine.game:main"

[tool.hatch.build.targets.wheel]
packages = ["tritonengine"]

[tool.pytest.ini_options]
addopts = "-ra"
