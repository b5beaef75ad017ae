"""Text drawn to a render target through a cached texture."""

from __future__ import annotations

from typing import Optional

import pygame

from angel.batch import FRect
from angel.font import Font


class TextRenderer:
    """Renders a string in a font and colour, rebuilding only when it changes."""

    def __init__(self, renderer: pygame.Surface, font: Font) -> None:
        self.renderer = renderer
        self.font = font
        self.colour: tuple[int, ...] = (255, 255, 255, 255)
        self.x = 0.0
        self.y = 0.0
        self.text = ""
        self.texture: Optional[pygame.Surface] = None
        self.rect = FRect()
        self.dirty = True

    def draw(self) -> None:
        """Rebuild the texture if needed and draw it at the text position."""
        if self.dirty:
            self.rebuild_texture()
        if self.texture is not None:
            self.renderer.blit(self.texture, (round(self.rect.x), round(self.rect.y)))

    def rebuild_texture(self) -> None:
        """Render the current text into a fresh texture."""
        self.dirty = False
        self.texture = None
        if not self.text:
            return
        surface = self.font.font.render(self.text, False, self.colour)
        self.texture = surface
        width, height = surface.get_size()
        self.rect = FRect(self.x, self.y, float(width), float(height))

    def submit_text(self, text: str) -> None:
        """Replace the text to draw."""
        self.text = text
        self.dirty = True

    def set_position(self, x: float, y: float) -> None:
        """Move the text's top-left corner."""
        self.x = x
        self.y = y
        self.rect.x = x
        self.rect.y = y

    def set_colour(self, colour: tuple[int, ...]) -> None:
        """Change the text colour."""
        self.colour = tuple(colour)
        self.dirty = True

    def set_font(self, font: Font) -> None:
        """Change the font."""
        self.font = font
        self.dirty = True