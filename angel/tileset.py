"""Tile definitions taken from a sprite sheet."""

from __future__ import annotations

import dataclasses
import enum
import random
from dataclasses import dataclass
from typing import Optional

from angel.sprite import Sprite

TILE_COUNT = 32 * 32


class TileCollider(enum.IntEnum):
    """Collision shapes a tile can have."""

    FULL = 0

    HALF_TOP = enum.auto()
    HALF_BOTTOM = enum.auto()
    HALF_LEFT = enum.auto()
    HALF_RIGHT = enum.auto()

    CORNER_UL = enum.auto()
    CORNER_UR = enum.auto()
    CORNER_BL = enum.auto()
    CORNER_BR = enum.auto()

    VU_CORN_UL = enum.auto()
    VU_CORN_UR = enum.auto()
    VU_CORN_BL = enum.auto()
    VU_CORN_BR = enum.auto()
    VL_CORN_UL = enum.auto()
    VL_CORN_UR = enum.auto()
    VL_CORN_BL = enum.auto()
    VL_CORN_BR = enum.auto()

    HU_CORN_UL = enum.auto()
    HU_CORN_UR = enum.auto()
    HU_CORN_BL = enum.auto()
    HU_CORN_BR = enum.auto()
    HL_CORN_UL = enum.auto()
    HL_CORN_UR = enum.auto()
    HL_CORN_BL = enum.auto()
    HL_CORN_BR = enum.auto()


@dataclass
class Tile:
    """A tile's grid position in the sheet and its collision data."""

    x: int = 0
    y: int = 0
    flags: int = 0
    collision: bool = False
    collider_type: int = 0


class Tileset:
    """A sheet of 32x32 tiles, each 16x16 pixels by default."""

    def __init__(self) -> None:
        self.tile_width = 16
        self.tile_height = 16
        self.sprite: Optional[Sprite] = None
        self.animated = False
        self._tiles = [Tile() for _ in range(TILE_COUNT)]

    def set_sprite(self, sprite: Optional[Sprite]) -> bool:
        """Use sprite as the sheet; return whether one was given."""
        self.sprite = sprite
        return sprite is not None

    def load_from_data(self, data_path: str) -> bool:
        """Fill the tile index; for now every tile gets a random sheet position."""
        for tile in self._tiles:
            tile.x = random.randrange(32)
            tile.y = random.randrange(32)
        return True

    def index(self, tile_id: int) -> Tile:
        """Return a copy of the tile with the given id."""
        if not 0 <= tile_id < len(self._tiles):
            raise IndexError(f"tile id out of range: {tile_id}")
        return dataclasses.replace(self._tiles[tile_id])