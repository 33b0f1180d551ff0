"""View onto the world with zoom and optional entity tracking."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from chromic.vec2 import Vec2


@dataclass
class Camera:
    """Viewport of a given size, offset by ``position`` and scaled by ``zoom``.

    A camera may follow one entity; ``attached_entity`` holds its id.
    """

    size: Vec2
    position: Vec2 = field(default_factory=Vec2)
    zoom: float = 1.0
    attached_entity: Optional[int] = None

    def attach_entity(self, entity_id: int) -> None:
        """Follow the entity ``entity_id``."""
        self.attached_entity = entity_id

    def detach_entity(self) -> None:
        """Stop following any entity."""
        self.attached_entity = None