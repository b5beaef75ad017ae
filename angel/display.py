"""The game window and the surface drawn to each frame."""

from __future__ import annotations

from typing import Optional

import pygame

from angel.log import print_error


class DisplayError(RuntimeError):
    """Raised when the window cannot be created or used."""


class Display:
    """A window with a render target, optionally at a fixed logical size."""

    def __init__(self, title: str, width: int, height: int, flags: int = 0) -> None:
        try:
            if not pygame.display.get_init():
                pygame.display.init()
            window = pygame.display.set_mode((width, height), flags)
        except pygame.error as exc:
            print_error("Couldn't make window: ", exc)
            raise DisplayError(f"couldn't make window: {exc}") from exc
        pygame.display.set_caption(title)
        self.title = title
        self.window: pygame.Surface = window
        self.logical_size: Optional[tuple[int, int]] = None
        self.renderer: pygame.Surface = window
        self.draw_colour: tuple[int, int, int, int] = (0, 0, 0, 255)

    def set_fixed_size(self, width: int, height: int) -> None:
        """Render at a fixed logical size, scaled by whole numbers onto the window."""
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid logical size: {width}x{height}")
        self.logical_size = (width, height)
        self.renderer = pygame.Surface((width, height))

    def clear(self) -> None:
        """Fill the render target with the draw colour."""
        self.renderer.fill(self.draw_colour)

    def present(self) -> None:
        """Show the render target in the window."""
        if self.logical_size is not None:
            lw, lh = self.logical_size
            ww, wh = self.window.get_size()
            scale = max(1, min(ww // lw, wh // lh))
            size = (lw * scale, lh * scale)
            scaled = pygame.transform.scale(self.renderer, size)
            self.window.fill((0, 0, 0))
            self.window.blit(scaled, ((ww - size[0]) // 2, (wh - size[1]) // 2))
        try:
            pygame.display.flip()
        except pygame.error as exc:
            print_error("Couldn't copy window surface to screen: ", exc)
            raise DisplayError(f"couldn't update window: {exc}") from exc

    def handle_resize(self, width: int, height: int) -> None:
        """Pick up the window's surface after it changed size."""
        window = pygame.display.get_surface()
        if window is None:
            print_error("Couldn't get the window's surface: ", pygame.get_error())
            raise DisplayError("couldn't get the window's surface")
        self.window = window
        if self.logical_size is None:
            self.renderer = window

    def close(self) -> None:
        """Destroy the window."""
        pygame.display.quit()

    def __enter__(self) -> "Display":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()