[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "angel"
version = "0.1.0"
description = "A small 2D game toolkit on pygame: camera, colliders, sprites, tilemaps, parallax backgrounds, input, text and sound"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "engine", "2d", "sprites", "tilemap", "camera", "parallax", "pygame"]
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
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["angel"]

[tool.pytest.ini_options]
addopts = "-ra"
