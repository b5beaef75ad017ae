"""Scrolling, tiled background layers with parallax."""

from __future__ import annotations

import math
from typing import Optional

import pygame

from angel.camera import Camera
from angel.sprite import Sprite


def _draw_tiled(target: pygame.Surface, texture: pygame.Surface, x: float, y: float, w: float, h: float) -> None:
    tex_w, tex_h = texture.get_size()
    left, top = math.floor(x), math.floor(y)
    area = pygame.Rect(left, top, math.ceil(x + w) - left, math.ceil(y + h) - top)

    previous = target.get_clip()
    target.set_clip(area.clip(previous))
    try:
        for ty in range(top, area.bottom, tex_h):
            for tx in range(left, area.right, tex_w):
                target.blit(texture, (tx, ty))
    finally:
        target.set_clip(previous)


class BackgroundLayer:
    """One image layer of a background, at a parallax depth."""

    def __init__(self, sprite: Sprite, handle: str) -> None:
        self.sprite = sprite
        self.handle = handle
        self.x = 0.0
        self.y = 0.0
        self.horizontal_tile = True
        self.vertical_tile = True
        self.depth = 0
        self.scroll_speed_x = 0.0
        self.scroll_speed_y = 0.0

    def step(self) -> None:
        """Scroll the layer by its speed."""
        self.x += self.scroll_speed_x
        self.y += self.scroll_speed_y

    def position(self, x: float, y: float) -> None:
        """Place the layer."""
        self.x = x
        self.y = y

    def set_speed(self, speed_x: float, speed_y: float) -> None:
        """Set the scroll speed per step."""
        self.scroll_speed_x = speed_x
        self.scroll_speed_y = speed_y


def _parallax_factor(layer: BackgroundLayer) -> float:
    return 1.0 / max(1.0, float(layer.depth))


class Background:
    """A stack of layers drawn behind the scene."""

    def __init__(self, renderer: pygame.Surface) -> None:
        self.renderer = renderer
        self.parallax_enabled = True
        self._layers: list[BackgroundLayer] = []

    @property
    def layers(self) -> tuple[BackgroundLayer, ...]:
        """The layers in draw order."""
        return tuple(self._layers)

    def step(self, cam: Camera) -> None:
        """Scroll every layer, then place it according to the camera."""
        for layer in self._layers:
            layer.step()
            factor = _parallax_factor(layer)
            layer.position(cam.view_x() * factor, cam.view_y() * factor)

    def draw(self, cam: Camera) -> None:
        """Fill the renderer with each layer's texture, tiled and offset by parallax."""
        screen_w, screen_h = self.renderer.get_size()
        for layer in self._layers:
            texture: Optional[pygame.Surface] = layer.sprite.texture
            if texture is None:
                continue
            tex_w, tex_h = texture.get_size()
            if tex_w == 0 or tex_h == 0:
                continue

            factor = _parallax_factor(layer)
            offset_x = math.fmod(cam.view_x() * factor, tex_w)
            offset_y = math.fmod(cam.view_y() * factor, tex_h)
            if offset_x < 0:
                offset_x += tex_w
            if offset_y < 0:
                offset_y += tex_h

            _draw_tiled(
                self.renderer,
                texture,
                -offset_x,
                -offset_y,
                screen_w + tex_w,
                screen_h + tex_h,
            )

    def add_layer(self, layer: BackgroundLayer) -> None:
        """Append a layer."""
        self._layers.append(layer)

    def remove_layer(self, handle: str) -> None:
        """Remove every layer with the given handle."""
        self._layers = [layer for layer in self._layers if layer.handle != handle]

    def sort_layers_depth(self) -> None:
        """Order layers deepest first."""
        self._layers.sort(key=lambda layer: layer.depth, reverse=True)