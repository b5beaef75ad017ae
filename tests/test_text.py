import pygame

from angel.font import Font
from angel.text import TextRenderer


def _renderer():
    surface = pygame.Surface((200, 60))
    surface.fill((0, 0, 0))
    return surface


def test_submit_marks_dirty_and_draw_builds_texture():
    text = TextRenderer(_renderer(), Font(None, 20))
    text.submit_text("Hello")
    assert text.dirty is True
    text.draw()
    assert text.dirty is False
    assert text.texture is not None
    assert (text.rect.w, text.rect.h) == text.texture.get_size()
    assert text.text == "Hello"


def test_empty_text_has_no_texture():
    text = TextRenderer(_renderer(), Font(None, 20))
    text.rebuild_texture()
    assert text.texture is None


def test_draw_uses_colour_and_position():
    renderer = _renderer()
    text = TextRenderer(renderer, Font(None, 24))
    text.set_colour((255, 0, 0))
    text.set_position(10, 5)
    text.submit_text("HI")
    text.draw()
    assert (text.rect.x, text.rect.y) == (10, 5)
    width, height = text.texture.get_size()
    pixels = {
        tuple(renderer.get_at((x, y)))[:3]
        for x in range(10, 10 + width)
        for y in range(5, 5 + height)
    }
    assert (255, 0, 0) in pixels
    assert tuple(renderer.get_at((0, 0)))[:3] == (0, 0, 0)


def test_set_position_moves_existing_rect():
    text = TextRenderer(_renderer(), Font(None, 20))
    text.submit_text("x")
    text.draw()
    text.set_position(30, 12)
    assert (text.rect.x, text.rect.y) == (30, 12)
    assert text.dirty is False


def test_set_font_marks_dirty():
    text = TextRenderer(_renderer(), Font(None, 20))
    text.rebuild_texture()
    other = Font(None, 30)
    text.set_font(other)
    assert text.font is other
    assert text.dirty is True