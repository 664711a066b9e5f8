[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nbodysim"
version = "0.0.1"
description = "Interactive two-dimensional gravitational N-body simulation with a frame-rate benchmark"
requires-python = ">=3.10"
keywords = ["n-body", "gravity", "simulation", "physics", "benchmark", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
nbodysim = "nbodysim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["nbodysim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
