import random

import pygame
import pytest

from angel.sprite import Sprite
from angel.tileset import TILE_COUNT, Tile, TileCollider, Tileset


def test_default_tile_size():
    tileset = Tileset()
    assert (tileset.tile_width, tileset.tile_height) == (16, 16)


def test_collider_lookup_by_value_follows_declaration_order():
    assert TileCollider(0) is TileCollider.FULL
    assert TileCollider(1) is TileCollider.HALF_TOP
    assert TileCollider(24) is TileCollider.HL_CORN_BR
    assert len(list(TileCollider)) == 25
    with pytest.raises(ValueError):
        TileCollider(25)


def test_set_sprite_reports_presence():
    tileset = Tileset()
    sprite = Sprite(pygame.Surface((16, 16)), 16, 16)
    assert tileset.set_sprite(sprite) is True
    assert tileset.sprite is sprite
    assert tileset.set_sprite(None) is False


def test_unloaded_tiles_are_blank():
    assert Tileset().index(0) == Tile()


def test_load_puts_tiles_inside_sheet():
    random.seed(3)
    tileset = Tileset()
    assert tileset.load_from_data("level.ena") is True
    tiles = [tileset.index(i) for i in range(TILE_COUNT)]
    assert all(0 <= t.x < 32 and 0 <= t.y < 32 for t in tiles)
    assert len({(t.x, t.y) for t in tiles}) > 1


def test_index_returns_copy():
    tileset = Tileset()
    tile = tileset.index(5)
    tile.x = 9
    assert tileset.index(5).x == 0


@pytest.mark.parametrize("tile_id", [-1, TILE_COUNT])
def test_index_out_of_range(tile_id):
    with pytest.raises(IndexError):
        Tileset().index(tile_id)