"""Keyed registries of loaded assets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class AssetNotFoundError(LookupError):
    """Raised when an asset key is not registered."""

    def __init__(self, key: str) -> None:
        super().__init__(f"asset not found: {key}")
        self.key = key


class AssetRegistry(Generic[T]):
    """A mapping from string keys to shared assets."""

    def __init__(self) -> None:
        self._assets: dict[str, T] = {}

    def add(self, key: str, asset: T) -> None:
        """Register an asset, replacing any previous one under the key."""
        self._assets[key] = asset

    def get(self, key: str) -> T:
        """Return the asset under key or raise AssetNotFoundError."""
        try:
            return self._assets[key]
        except KeyError:
            raise AssetNotFoundError(key) from None

    def __contains__(self, key: object) -> bool:
        return key in self._assets

    def __len__(self) -> int:
        return len(self._assets)


@dataclass
class AssetManager:
    """Holds the sprite and font registries."""

    sprite: AssetRegistry[Any] = field(default_factory=AssetRegistry)
    font: AssetRegistry[Any] = field(default_factory=AssetRegistry)