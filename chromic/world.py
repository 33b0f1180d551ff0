"""Entity registry with per-component storage."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional

from chromic.components import (
    DynamicRigidBody,
    Ground,
    Jumper,
    KinematicRigidBody,
    Runner,
    Sprite,
    SpriteSheetAnimation,
    StaticRigidBody,
    Transform,
    Velocity,
)

MAX_ENTITY_ID = 0xFFFFFFFF


@dataclass
class World:
    """All entities of the game and the components attached to them.

    Ids of destroyed entities are reused, smallest first, before new ids
    are handed out.
    """

    transforms: dict[int, Transform] = field(default_factory=dict)
    velocities: dict[int, Velocity] = field(default_factory=dict)
    sprites: dict[int, Sprite] = field(default_factory=dict)
    sprite_sheet_animations: dict[int, SpriteSheetAnimation] = field(default_factory=dict)
    dynamic_rigid_bodies: dict[int, DynamicRigidBody] = field(default_factory=dict)
    static_rigid_bodies: dict[int, StaticRigidBody] = field(default_factory=dict)
    kinematic_rigid_bodies: dict[int, KinematicRigidBody] = field(default_factory=dict)
    grounds: dict[int, Ground] = field(default_factory=dict)
    jumps: dict[int, Jumper] = field(default_factory=dict)
    runners: dict[int, Runner] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self._player: Optional[int] = None
        self._entities: list[int] = []
        self._free_ids: set[int] = set()
        self._next_id = 1

    def _component_maps(self) -> list[dict[int, Any]]:
        return [getattr(self, f.name) for f in fields(self)]

    def clear(self) -> None:
        """Remove every entity and component and restart id numbering."""
        for components in self._component_maps():
            components.clear()
        self._player = None
        self._entities.clear()
        self._free_ids.clear()
        self._next_id = 1

    def create_entity(self) -> int:
        """Create an entity with no components and return its id."""
        if self._free_ids:
            entity_id = min(self._free_ids)
            self._free_ids.remove(entity_id)
        else:
            if self._next_id == MAX_ENTITY_ID:
                raise RuntimeError("entity ids exhausted")
            entity_id = self._next_id
            self._next_id += 1
        if self.has_entity(entity_id):
            raise RuntimeError(f"entity {entity_id} already exists")
        self._entities.append(entity_id)
        return entity_id

    def destroy_entity(self, entity_id: int) -> None:
        """Remove an entity with all its components and free its id."""
        self.clean_entity(entity_id)
        if entity_id in self._entities:
            self._entities.remove(entity_id)
        self._free_ids.add(entity_id)
        if self._player == entity_id:
            self._player = None

    def clean_entity(self, entity_id: int) -> None:
        """Remove all components of an entity, keeping the entity."""
        for components in self._component_maps():
            components.pop(entity_id, None)

    def has_entity(self, entity_id: int) -> bool:
        """Return whether ``entity_id`` names a live entity."""
        return entity_id in self._entities

    @property
    def entities(self) -> list[int]:
        """Ids of live entities in order of creation."""
        return list(self._entities)

    def entities_with(self, *component_maps: Mapping[int, Any]) -> list[int]:
        """Return ids of live entities present in every given component map."""
        return [
            entity_id
            for entity_id in self._entities
            if all(entity_id in components for components in component_maps)
        ]

    def create_player(self) -> int:
        """Create the player entity if there is none and return its id."""
        if self._player is None:
            self._player = self.create_entity()
        return self._player

    def destroy_player(self) -> None:
        """Destroy the player entity, if any."""
        if self._player is not None:
            self.destroy_entity(self._player)

    def clean_player(self) -> None:
        """Remove all components of the player entity, if any."""
        if self._player is not None:
            self.clean_entity(self._player)

    def has_player(self) -> bool:
        """Return whether a player entity exists."""
        return self._player is not None

    @property
    def player(self) -> Optional[int]:
        """Id of the player entity, or None."""
        return self._player