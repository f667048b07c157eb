[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hyperreal"
version = "0.1.0"
description = "Core building blocks of a small 2D game engine: events, layers, cameras, buffer layouts, shader files and profiling"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["game engine", "events", "layers", "orthographic camera", "shader", "profiling"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hyperreal"]

[tool.pytest.ini_options]
addopts = "-ra"
