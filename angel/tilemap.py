"""A grid of tile ids drawn through a tileset."""

from __future__ import annotations

import random
from typing import Optional

import pygame

from angel.batch import FlipMode, FRect, SpriteBatch
from angel.camera import Camera
from angel.tileset import Tileset


def _div_trunc(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class Tilemap:
    """A width x height grid of tile ids."""

    def __init__(self, width: int, height: int, renderer: pygame.Surface) -> None:
        self.width = width
        self.height = height
        self.renderer = renderer
        self.batch = SpriteBatch(renderer)
        self.tileset: Optional[Tileset] = None
        self._map: list[int] = []
        self.chunk_size = 32
        self.time = 0.0

    @property
    def tile_ids(self) -> tuple[int, ...]:
        """The tile ids, row by row."""
        return tuple(self._map)

    def load_from_data(self, data_path: str) -> bool:
        """Fill the map; for now every cell gets a random tile id."""
        self._map.extend(random.randrange(1024) for _ in range(self.width * self.height))
        return True

    def step(self, delta_time: float) -> None:
        """Advance the map's animation clock."""
        self.time += delta_time

    def set_tileset(self, tileset: Tileset) -> None:
        """Use tileset to look up and draw tiles."""
        self.tileset = tileset

    def draw(self, cam: Camera) -> None:
        """Draw the tiles visible to the camera."""
        if self.tileset is None:
            raise RuntimeError("tilemap has no tileset")
        tileset = self.tileset
        tw, th = tileset.tile_width, tileset.tile_height
        texture = tileset.sprite.texture if tileset.sprite is not None else None

        cam_x, cam_y = cam.view_x(), cam.view_y()
        start_x = max(0, _div_trunc(cam_x, tw))
        start_y = max(0, _div_trunc(cam_y, th))
        end_x = min(self.width, _div_trunc(cam_x + cam.view_w, tw) + 1)
        end_y = min(self.height, _div_trunc(cam_y + cam.view_h, th) + 1)

        self.batch.begin()
        for row in range(start_y, end_y):
            for column in range(start_x, end_x):
                tile = tileset.index(self._map[row * self.width + column])
                dst = FRect(float(column * tw - cam_x), float(row * th - cam_y), float(tw), float(th))
                src = FRect(float(tile.x * tw), float(tile.y * th), float(tw), float(th))
                self.batch.draw(texture, src, dst, 0.0, (0.0, 0.0), FlipMode.NONE)
        self.batch.flush()