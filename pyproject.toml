[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "elite2d"
version = "0.1.0"
description = "2D math for game-AI experiments: vectors, matrices, a camera, physics data types and shape tessellation"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "matrix", "2d", "camera", "game-ai", "tessellation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["elite2d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
