"""Keyboard and mouse state tracked across frames."""

from __future__ import annotations

from typing import Iterable, Optional

import pygame


class Input:
    """Tracks held, just-pressed and just-released keys and mouse buttons."""

    def __init__(self) -> None:
        self._key_down: set[int] = set()
        self._key_pressed: set[int] = set()
        self._key_released: set[int] = set()
        self._mouse_down: set[int] = set()
        self._mouse_pressed: set[int] = set()
        self._mouse_released: set[int] = set()
        self._mouse_x = 0
        self._mouse_y = 0
        self._mouse_wheel = 0
        self.bindings: dict[str, int] = {}
        self._quit_requested = False
        self.last_event: Optional[pygame.event.Event] = None

    def begin_frame(self) -> None:
        """Forget the previous frame's presses, releases and wheel motion."""
        self._key_pressed.clear()
        self._key_released.clear()
        self._mouse_pressed.clear()
        self._mouse_released.clear()
        self._mouse_wheel = 0

    def handle_event(self, event: pygame.event.Event) -> None:
        """Update the state from one event."""
        self.last_event = event
        kind = event.type
        if kind == pygame.QUIT:
            self._quit_requested = True
        elif kind == pygame.KEYDOWN:
            if event.key not in self._key_down:
                self._key_pressed.add(event.key)
            self._key_down.add(event.key)
        elif kind == pygame.KEYUP:
            self._key_down.discard(event.key)
            self._key_released.add(event.key)
        elif kind == pygame.MOUSEBUTTONDOWN:
            if event.button not in self._mouse_down:
                self._mouse_pressed.add(event.button)
            self._mouse_down.add(event.button)
        elif kind == pygame.MOUSEBUTTONUP:
            self._mouse_down.discard(event.button)
            self._mouse_released.add(event.button)
        elif kind == pygame.MOUSEMOTION:
            self._mouse_x, self._mouse_y = (int(v) for v in event.pos)
        elif kind == pygame.MOUSEWHEEL:
            self._mouse_wheel = int(event.y)

    def poll(self, events: Optional[Iterable[pygame.event.Event]] = None) -> None:
        """Handle the given events, or drain pygame's event queue."""
        for event in pygame.event.get() if events is None else events:
            self.handle_event(event)

    def check(self, key: int) -> bool:
        """Whether the key is held."""
        return key in self._key_down

    def pressed(self, key: int) -> bool:
        """Whether the key went down this frame."""
        return key in self._key_pressed

    def released(self, key: int) -> bool:
        """Whether the key went up this frame."""
        return key in self._key_released

    def mouse_check(self, button: int) -> bool:
        """Whether the mouse button is held."""
        return button in self._mouse_down

    def mouse_pressed(self, button: int) -> bool:
        """Whether the mouse button went down this frame."""
        return button in self._mouse_pressed

    def mouse_released(self, button: int) -> bool:
        """Whether the mouse button went up this frame."""
        return button in self._mouse_released

    @property
    def mouse_x(self) -> int:
        return self._mouse_x

    @property
    def mouse_y(self) -> int:
        return self._mouse_y

    @property
    def mouse_wheel(self) -> int:
        return self._mouse_wheel

    @property
    def quit_requested(self) -> bool:
        return self._quit_requested

    def bind(self, action: str, key: int) -> None:
        """Map an action name to a key."""
        self.bindings[action] = key

    def action(self, action: str) -> bool:
        """Whether the action's key is held; unbound actions are False."""
        key = self.bindings.get(action)
        return key is not None and self.check(key)

    def action_pressed(self, action: str) -> bool:
        """Whether the action's key went down this frame."""
        key = self.bindings.get(action)
        return key is not None and self.pressed(key)

    def action_released(self, action: str) -> bool:
        """Whether the action's key went up this frame."""
        key = self.bindings.get(action)
        return key is not None and self.released(key)