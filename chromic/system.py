"""Interfaces of systems run by the game at startup, each update and each draw."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class StartupSystem(ABC):
    """Runs once after the game has been set up."""

    @abstractmethod
    def startup(self, game: Any) -> None:
        """Prepare the game's world."""


class UpdateSystem(ABC):
    """Runs once per frame before drawing."""

    @abstractmethod
    def update(self, game: Any) -> None:
        """Advance the game's world by one frame."""


class DrawSystem(ABC):
    """Runs once per frame to render."""

    @abstractmethod
    def draw(self, game: Any) -> None:
        """Render part of the game's world."""