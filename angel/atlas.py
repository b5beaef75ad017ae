"""Named regions of a shared texture."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import pygame

from angel.batch import FRect


@dataclass
class AtlasRegion:
    """A named rectangle within an atlas texture."""

    texture: Optional[pygame.Surface] = None
    region: FRect = field(default_factory=FRect)
    width: int = 0
    height: int = 0


@dataclass
class TextureAtlas:
    """A texture with regions looked up by name."""

    texture: Optional[pygame.Surface] = None
    regions: dict[str, AtlasRegion] = field(default_factory=dict)

    def get(self, name: str) -> AtlasRegion:
        """Return the region under name, creating an empty one if absent."""
        return self.regions.setdefault(name, AtlasRegion())