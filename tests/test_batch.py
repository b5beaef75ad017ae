import pygame
import pytest

from angel.batch import FlipMode, FRect, SpriteBatch

RED = pygame.Color(255, 0, 0, 255)
BLUE = pygame.Color(0, 0, 255, 255)
BLACK = pygame.Color(0, 0, 0, 255)


@pytest.fixture
def target():
    surf = pygame.Surface((6, 6))
    surf.fill(BLACK)
    return surf


def _two_tone(w, h):
    tex = pygame.Surface((w, h))
    tex.fill(RED, pygame.Rect(0, 0, w // 2, h))
    tex.fill(BLUE, pygame.Rect(w // 2, 0, w - w // 2, h))
    return tex


def test_draw_queues_and_begin_clears(target):
    batch = SpriteBatch(target)
    tex = pygame.Surface((2, 2))
    batch.draw(tex, FRect(0, 0, 2, 2), FRect(0, 0, 2, 2))
    batch.draw(tex, FRect(0, 0, 2, 2), FRect(2, 2, 2, 2))
    assert len(batch.commands) == 2
    assert batch.commands[0].flip == FlipMode.NONE
    assert batch.commands[0].origin == (0.0, 0.0)
    batch.begin()
    assert batch.commands == ()


def test_flush_blits_texture(target):
    tex = pygame.Surface((2, 2))
    tex.fill(RED)
    batch = SpriteBatch(target)
    batch.draw(tex, FRect(0, 0, 2, 2), FRect(1, 1, 2, 2))
    batch.flush()
    assert target.get_at((1, 1)) == RED
    assert target.get_at((2, 2)) == RED
    assert target.get_at((0, 0)) == BLACK
    assert target.get_at((3, 3)) == BLACK


def test_flush_uses_source_region(target):
    tex = _two_tone(2, 1)
    batch = SpriteBatch(target)
    batch.draw(tex, FRect(1, 0, 1, 1), FRect(0, 0, 1, 1))
    batch.flush()
    assert target.get_at((0, 0)) == BLUE


def test_horizontal_flip(target):
    tex = _two_tone(2, 1)
    batch = SpriteBatch(target)
    batch.draw(tex, FRect(0, 0, 2, 1), FRect(0, 0, 2, 1), flip=FlipMode.HORIZONTAL)
    batch.flush()
    assert target.get_at((0, 0)) == BLUE
    assert target.get_at((1, 0)) == RED


def test_scaling_to_destination(target):
    tex = _two_tone(2, 1)
    batch = SpriteBatch(target)
    batch.draw(tex, FRect(0, 0, 2, 1), FRect(0, 0, 4, 2))
    batch.flush()
    assert target.get_at((0, 1)) == RED
    assert target.get_at((3, 1)) == BLUE
    assert target.get_at((4, 0)) == BLACK


def test_half_turn_about_centre(target):
    tex = _two_tone(2, 2)
    batch = SpriteBatch(target)
    batch.draw(tex, FRect(0, 0, 2, 2), FRect(0, 0, 2, 2), rotation=180.0, origin=(1.0, 1.0))
    batch.flush()
    assert target.get_at((0, 0)) == BLUE
    assert target.get_at((1, 1)) == RED


def test_flush_sorts_by_layer_then_texture(target):
    textures = [pygame.Surface((1, 1)) for _ in range(4)]
    batch = SpriteBatch(target)
    for tex in reversed(textures):
        batch.draw(tex, FRect(0, 0, 1, 1), FRect(0, 0, 1, 1))
    batch.flush()
    keys = [(c.layer, id(c.texture)) for c in batch.commands]
    assert keys == sorted(keys)
    assert len(keys) == 4


def test_flush_keeps_commands(target):
    batch = SpriteBatch(target)
    tex = pygame.Surface((1, 1))
    batch.draw(tex, FRect(0, 0, 1, 1), FRect(0, 0, 1, 1))
    batch.flush()
    assert len(batch.commands) == 1
    assert batch.commands[0].texture is tex