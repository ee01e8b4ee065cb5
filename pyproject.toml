[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fbkpick"
version = "0.1.0"
description = "Seismic first-break pick files, control points, static-correction files and synthetic first breaks"
requires-python = ">=3.10"
dependencies = []
keywords = ["seismic", "first break", "static correction", "geophysics", "picking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fbkpick = "fbkpick.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fbkpick"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
