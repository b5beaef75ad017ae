"""Animated sprites cut from a grid of equally sized images."""

from __future__ import annotations

import dataclasses
import random
from dataclasses import dataclass, field
from typing import Optional

import pygame

from angel.batch import FlipMode, FRect, SpriteBatch
from angel.camera import Camera


@dataclass
class SpriteFrame:
    """A set of image positions, one of which is picked at random when shown.

    ``chance`` holds one weight per image; when it does not match ``images``
    the first image is always used.
    """

    images: list[int] = field(default_factory=list)
    chance: list[float] = field(default_factory=list)

    def random_image(self) -> int:
        """Pick an image position, weighted by ``chance``."""
        if not self.images:
            return 0
        if len(self.chance) != len(self.images):
            return self.images[0]

        roll = random.random() * sum(self.chance)
        accum = 0.0
        for image, weight in zip(self.images, self.chance):
            accum += weight
            if roll <= accum:
                return image
        return self.images[-1]


class SpriteBlock:
    """A named animation: a looping sequence of frames."""

    def __init__(self, handle: str) -> None:
        self._handle = handle
        self.frames: list[SpriteFrame] = []
        self.frame = 0
        self.timer = 0.0
        self._current_image = 0
        self.animation_speed = 0.1

    @property
    def handle(self) -> str:
        """The name the block is selected by."""
        return self._handle

    def set_speed(self, speed: float) -> None:
        """Set the animation speed in frames per unit of time."""
        self.animation_speed = speed

    def set_frame(self, frame: int) -> None:
        """Jump to a frame (wrapping around) and restart its timer."""
        if not self.frames:
            return
        self.frame = frame % len(self.frames)
        self.timer = 0.0
        self._current_image = self.frames[self.frame].random_image()

    def step(self, dt: float) -> None:
        """Advance the animation by dt."""
        if not self.frames or self.animation_speed <= 0.0:
            return
        frame_time = 1.0 / self.animation_speed
        self.timer += dt
        while self.timer >= frame_time:
            self.timer -= frame_time
            self.frame = (self.frame + 1) % len(self.frames)
            self._current_image = self.frames[self.frame].random_image()

    def current_image(self) -> int:
        """The image position currently shown."""
        if not self.frames or not 0 <= self.frame < len(self.frames):
            return 0
        return self._current_image

    def add_frame(self, frame: SpriteFrame) -> None:
        """Append a frame to the animation."""
        self.frames.append(frame)


class Sprite:
    """A texture laid out as a grid of images, with animation blocks."""

    def __init__(self, texture: Optional[pygame.Surface], image_width: int, image_height: int) -> None:
        self.texture = texture
        self.image_width = image_width
        self.image_height = image_height

        self.src = FRect(0.0, 0.0, float(image_width), float(image_height))

        self.blocks: list[SpriteBlock] = []
        self.current_block = -1
        self.image = 0

        self.origin_x = 0.0
        self.origin_y = 0.0
        self.scale = 1.0
        self.rotation = 0.0
        self.flip = FlipMode.NONE

    def set_image(self, index: int) -> None:
        """Select the image at a grid position, counted row by row."""
        if self.texture is None:
            return
        self.image = index
        columns = self.texture.get_width() // self.image_width
        if columns <= 0:
            return
        row, column = divmod(index, columns)
        self.src.x = float(column * self.image_width)
        self.src.y = float(row * self.image_height)

    def set_origin(self, x: float, y: float) -> None:
        """Set the rotation pivot relative to the image's top-left corner."""
        self.origin_x = x
        self.origin_y = y

    def centre_origin(self) -> None:
        """Put the pivot in the middle of the image."""
        self.origin_x = self.image_width * 0.5
        self.origin_y = self.image_height * 0.5

    def step(self, dt: float) -> None:
        """Advance the selected block and show its current image."""
        if not 0 <= self.current_block < len(self.blocks):
            return
        block = self.blocks[self.current_block]
        block.step(dt)
        self.set_image(block.current_image())

    def draw(self, batch: SpriteBatch, cam: Camera, x: int, y: int) -> None:
        """Queue the current image at world position (x, y)."""
        dst = FRect(
            float(x - cam.view_x()),
            float(y - cam.view_y()),
            self.image_width * self.scale,
            self.image_height * self.scale,
        )
        origin = (self.origin_x * self.scale, self.origin_y * self.scale)
        batch.draw(self.texture, dataclasses.replace(self.src), dst, self.rotation, origin, self.flip)

    def create_block(self, handle: str) -> SpriteBlock:
        """Add a new empty animation block and return it."""
        block = SpriteBlock(handle)
        self.blocks.append(block)
        return block

    def reset_frame(self) -> None:
        """Restart the selected block from its first frame."""
        if not 0 <= self.current_block < len(self.blocks):
            raise LookupError("no sprite block selected")
        self.blocks[self.current_block].set_frame(0)

    def set_block(self, handle: str) -> None:
        """Select the block with the given handle; unknown handles are ignored."""
        for position, block in enumerate(self.blocks):
            if block.handle == handle:
                self.current_block = position
                return