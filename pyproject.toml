[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "glsketches"
version = "0.1.0"
description = "Small geometry, physics and toy-game sketches: coordinate conversion, body integration, shape tessellation, a lights-out puzzle and a block-collision simulation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "geometry",
    "polar coordinates",
    "physics",
    "simulation",
    "tessellation",
    "lights out",
    "elastic collision",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tap-to-on = "glsketches.lightsout:main"
collision-pi = "glsketches.collision:main"

[tool.setuptools.packages.find]
include = ["glsketches*"]

[tool.pytest.ini_options]
addopts = "-ra"
