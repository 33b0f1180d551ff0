"""Component records stored per entity in the world."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from chromic.constants import TILE_SIZE, TOTAL_TILES
from chromic.vec2 import Vec2


@dataclass
class Rect:
    """Integer rectangle in pixels."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


def tile_source_rect(tile_id: int) -> Rect:
    """Return the rectangle of tile ``tile_id`` inside the tile map texture."""
    if tile_id < 0:
        raise ValueError(f"tile id must not be negative: {tile_id}")
    row, column = divmod(tile_id, TOTAL_TILES)
    return Rect(x=column * TILE_SIZE, y=row * TILE_SIZE, w=TILE_SIZE, h=TILE_SIZE)


@dataclass
class Transform:
    """Position and size of an entity in world units."""

    position: Vec2 = field(default_factory=Vec2)
    size: Vec2 = field(default_factory=Vec2)


@dataclass
class Velocity:
    """Displacement applied to an entity on the next position update."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Sprite:
    """Region of the tile map to draw for an entity."""

    source_rect: Rect = field(default_factory=Rect)
    is_flip: bool = False


@dataclass
class SpriteSheetAnimation:
    """Named tracks of tile ids and the playback state of the current one."""

    tracks: dict[str, list[int]] = field(default_factory=dict)
    current_track_name: str = ""
    current_track_frame_idx: int = 0
    last_update: int = 0


@dataclass
class DynamicRigidBody:
    """Body moved by forces and stopped by static bodies."""

    bounding_box: Rect = field(default_factory=Rect)
    speed: float = 0.0


@dataclass
class KinematicRigidBody:
    """Body moved directly by the game."""

    bounding_box: Rect = field(default_factory=Rect)
    speed: float = 0.0


@dataclass
class StaticRigidBody:
    """Immovable body."""

    bounding_box: Rect = field(default_factory=Rect)


class GroundType(IntEnum):
    """Position of a ground tile within a block of ground."""

    NONE = 0
    TOP_LEFT = 1
    TOP_MIDDLE = 2
    TOP_RIGHT = 3
    MIDDLE_LEFT = 4
    MIDDLE = 5
    MIDDLE_RIGHT = 6
    BOTTOM_LEFT = 7
    BOTTOM_MIDDLE = 8
    BOTTOM_RIGHT = 9


@dataclass
class Ground:
    """Marks an entity as a ground tile."""

    type: GroundType = GroundType.NONE


@dataclass
class Jumper:
    """Jump in progress: target height, speed and height reached so far."""

    height: float
    speed: float = 5.0
    last_height: float = 0.0


@dataclass
class Runner:
    """Horizontal running speed; negative runs left."""

    speed: float = 0.0