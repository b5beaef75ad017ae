"""A following camera with a dead zone and look-ahead."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if high < value:
        return high
    return value


@dataclass
class CameraEffect:
    """Parameters of a timed camera effect such as a shake."""

    time: float = 0.0
    dur: float = 0.0
    freq: float = 0.0
    mag: float = 0.0
    seed: float = 0.0


@dataclass
class Camera:
    """A camera centred on (x, y) that follows a target inside a world."""

    x: float = 0.0
    y: float = 0.0

    view_w: int = 320
    view_h: int = 180

    world_w: int = 2000
    world_h: int = 1000

    look_ahead_x: float = 40.0
    look_ahead_y: float = 20.0

    look_ahead_dist_x: float = 40.0
    look_ahead_dist_y: float = 20.0

    deadzone_w: float = 80.0
    deadzone_h: float = 60.0

    lerp_speed: float = 0.12

    def update(self, target_x: float, target_y: float, vel_x: float, vel_y: float, dt: float) -> None:
        """Move the camera towards the target, keeping it inside the world."""
        desired_x = 0.0
        desired_y = 0.0
        if abs(vel_x) > 1:
            desired_x = math.copysign(self.look_ahead_dist_x, 1 if vel_x > 0 else -1)
            desired_x = (1 if vel_x > 0 else -1) * self.look_ahead_dist_x
        if abs(vel_y) > 1:
            desired_y = (1 if vel_y > 0 else -1) * self.look_ahead_dist_y

        self.look_ahead_x = _lerp(self.look_ahead_x, desired_x, 0.08)
        self.look_ahead_y = _lerp(self.look_ahead_y, desired_y, 0.08)

        half_w = self.deadzone_w / 2
        if target_x < self.x - half_w:
            self.x = target_x + half_w
        if target_x > self.x + half_w:
            self.x = target_x - half_w

        half_h = self.deadzone_h / 2
        if target_y < self.y - half_h:
            self.y = target_y + half_h
        if target_y > self.y + half_h:
            self.y = target_y - half_h

        self.x += self.look_ahead_x * 0.02
        self.y += self.look_ahead_y * 0.02

        self.x = _clamp(self.x, self.view_w / 2.0, float(self.world_w) - self.view_w / 2.0)
        self.y = _clamp(self.y, self.view_h / 2.0, float(self.world_h) - self.view_h / 2.0)

    def view_x(self) -> int:
        """Left edge of the view in world pixels."""
        return math.floor(self.x - int(self.view_w / 2))

    def view_y(self) -> int:
        """Top edge of the view in world pixels."""
        return math.floor(self.y - int(self.view_h / 2))