"""Collects sprite draw commands and renders them in a sorted batch."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

import pygame


@dataclass
class FRect:
    """A rectangle with float coordinates."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0


class FlipMode(enum.IntFlag):
    """How a texture is mirrored when drawn."""

    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2


@dataclass
class SpriteCommand:
    """One queued textured-quad draw."""

    texture: pygame.Surface
    src: FRect
    dst: FRect
    rotation: float = 0.0
    origin: tuple[float, float] = (0.0, 0.0)
    flip: FlipMode = FlipMode.NONE
    layer: int = 0


@dataclass
class BatchGroup:
    """Commands sharing one texture."""

    texture: Optional[pygame.Surface] = None
    sprites: list[SpriteCommand] = field(default_factory=list)


def _render(target: pygame.Surface, cmd: SpriteCommand) -> None:
    tex = cmd.texture
    src = pygame.Rect(int(cmd.src.x), int(cmd.src.y), int(cmd.src.w), int(cmd.src.h))
    src = src.clip(tex.get_rect())
    if src.w <= 0 or src.h <= 0:
        return
    image = tex.subsurface(src)

    size = (max(0, round(cmd.dst.w)), max(0, round(cmd.dst.h)))
    if size[0] == 0 or size[1] == 0:
        return
    if size != image.get_size():
        image = pygame.transform.scale(image, size)

    if cmd.flip:
        image = pygame.transform.flip(
            image,
            bool(cmd.flip & FlipMode.HORIZONTAL),
            bool(cmd.flip & FlipMode.VERTICAL),
        )

    if cmd.rotation:
        pivot = pygame.math.Vector2(cmd.dst.x + cmd.origin[0], cmd.dst.y + cmd.origin[1])
        centre = pygame.math.Vector2(cmd.dst.x + cmd.dst.w / 2, cmd.dst.y + cmd.dst.h / 2)
        new_centre = pivot + (centre - pivot).rotate(cmd.rotation)
        image = pygame.transform.rotate(image, -cmd.rotation)
        rect = image.get_rect(center=(round(new_centre.x), round(new_centre.y)))
        target.blit(image, rect)
    else:
        target.blit(image, (round(cmd.dst.x), round(cmd.dst.y)))


class SpriteBatch:
    """Queues draws and renders them ordered by layer, then by texture."""

    def __init__(self, renderer: pygame.Surface) -> None:
        self.renderer = renderer
        self._commands: list[SpriteCommand] = []

    @property
    def commands(self) -> tuple[SpriteCommand, ...]:
        """The queued commands, in their current order."""
        return tuple(self._commands)

    def begin(self) -> None:
        """Discard all queued commands."""
        self._commands.clear()

    def draw(
        self,
        texture: pygame.Surface,
        src: FRect,
        dst: FRect,
        rotation: float = 0.0,
        origin: tuple[float, float] = (0.0, 0.0),
        flip: FlipMode = FlipMode.NONE,
    ) -> None:
        """Queue a draw of the src region of texture into dst."""
        self._commands.append(
            SpriteCommand(texture, src, dst, rotation, tuple(origin), FlipMode(flip))
        )

    def flush(self) -> None:
        """Sort the queued commands and render them onto the renderer."""
        self._commands.sort(key=lambda c: (c.layer, id(c.texture)))
        for cmd in self._commands:
            _render(self.renderer, cmd)