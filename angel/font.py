"""TrueType fonts loaded at a point size."""

from __future__ import annotations

import os
from typing import Optional, Union

import pygame

FontSource = Union[str, "os.PathLike[str]", None]


class Font:
    """A font opened from a file at a given size; ``path=None`` uses the default font."""

    def __init__(self, path: FontSource, size: float) -> None:
        self.path = path
        self.size = size
        self._font: Optional[pygame.font.Font] = self._open(size)

    def _open(self, size: float) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        source = None if self.path is None else os.fspath(self.path)
        return pygame.font.Font(source, max(1, int(round(size))))

    @property
    def font(self) -> pygame.font.Font:
        """The underlying pygame font."""
        if self._font is None:
            raise RuntimeError("font has been destroyed")
        return self._font

    @property
    def destroyed(self) -> bool:
        """Whether destroy() has been called."""
        return self._font is None

    def set_size(self, size: float) -> None:
        """Reopen the font at a new point size."""
        if self._font is None:
            raise RuntimeError("font has been destroyed")
        self._font = self._open(size)
        self.size = size

    def destroy(self) -> None:
        """Release the font."""
        self._font = None