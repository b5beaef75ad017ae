"""Playback of a single sound file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

import pygame

from angel.log import print_error


class AudioError(RuntimeError):
    """Raised when a sound cannot be loaded or played."""


class AudioPlayer:
    """Plays one sound: put_sound, then init, then start; end releases everything."""

    def __init__(self) -> None:
        self.sound_path: Optional[Path] = None
        self._sound: Optional[pygame.mixer.Sound] = None
        self._channel: Optional[pygame.mixer.Channel] = None
        self.initialized = False

    def put_sound(self, path: Union[str, "os.PathLike[str]"]) -> None:
        """Choose the file to play."""
        candidate = Path(path)
        if not candidate.is_file():
            print_error("could not load file: ", candidate)
            raise AudioError(f"could not load file: {candidate}")
        self.sound_path = candidate

    def init(self) -> None:
        """Open the playback device and decode the chosen sound."""
        if self.sound_path is None:
            raise AudioError("no sound has been put")
        try:
            pygame.mixer.init()
            self.initialized = True
            self._sound = pygame.mixer.Sound(str(self.sound_path))
        except pygame.error as exc:
            print_error("Failed to open playback device: ", exc)
            self.end()
            raise AudioError(f"failed to open playback device: {exc}") from exc

    def start(self) -> None:
        """Start playing the sound."""
        if not self.initialized or self._sound is None:
            raise AudioError("playback device is not open")
        try:
            channel = self._sound.play()
        except pygame.error as exc:
            channel = None
            print_error("Failed to start playback device: ", exc)
        if channel is None:
            self.end()
            raise AudioError("failed to start playback device")
        self._channel = channel

    @property
    def playing(self) -> bool:
        """Whether the sound is currently playing."""
        return self._channel is not None and self._channel.get_busy()

    def end(self) -> None:
        """Stop playback, close the device and forget the sound."""
        if self._sound is not None:
            self._sound.stop()
        if self.initialized:
            pygame.mixer.quit()
        self._sound = None
        self._channel = None
        self.sound_path = None
        self.initialized = False