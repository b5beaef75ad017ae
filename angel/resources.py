"""Loading sprites and fonts from files into an asset manager."""

from __future__ import annotations

import os
from typing import Optional, Union

import pygame

from angel.assets import AssetManager
from angel.font import Font
from angel.log import print_error
from angel.sprite import Sprite

PathLike = Union[str, "os.PathLike[str]"]


class ResourceError(OSError):
    """Raised when a resource file cannot be loaded."""


def make_sprite(assets: AssetManager, path: PathLike, key: str, width: int, height: int) -> Sprite:
    """Load an image as a sprite of width x height images and register it under key."""
    try:
        texture = pygame.image.load(os.fspath(path))
    except (pygame.error, OSError) as exc:
        print_error("Sprite could not be loaded: ", exc)
        raise ResourceError(f"sprite could not be loaded: {path}") from exc
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        texture = texture.convert_alpha()
    sprite = Sprite(texture, width, height)
    assets.sprite.add(key, sprite)
    return sprite


def make_font(assets: AssetManager, path: Optional[PathLike], key: str, ptsize: float) -> Font:
    """Open a font at ptsize and register it under key; ``path=None`` uses the default font."""
    try:
        font = Font(path, ptsize)
    except (pygame.error, OSError) as exc:
        print_error("Failed to open font: ", exc)
        raise ResourceError(f"failed to open font: {path}") from exc
    assets.font.add(key, font)
    return font