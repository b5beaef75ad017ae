"""A small 2D game toolkit on pygame: camera, colliders, sprites, tilemaps, backgrounds, input, text and sound."""

__version__ = "0.1.0"