"""Startup systems that build the level, its ground, the player and the backdrop."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Union

from chromic.components import (
    DynamicRigidBody,
    Ground,
    GroundType,
    Rect,
    Sprite,
    SpriteSheetAnimation,
    StaticRigidBody,
    Transform,
    tile_source_rect,
)
from chromic.constants import MOVEMENT_SPEED, TILE_SIZE
from chromic.system import StartupSystem
from chromic.vec2 import Vec2

DEFAULT_LEVEL_FILE = "res/level.txt"

BACKGROUND_COLOR = (0x22, 0x23, 0x23, 0xFF)
"""RGBA colour the screen is cleared to."""

PLAYER_TRACKS = {"idle": [240], "run": [241, 242, 243]}
PLAYER_BOUNDING_BOX = Rect(x=2, y=0, w=12, h=16)
GROUND_BOUNDING_BOX = Rect(x=0, y=0, w=16, h=16)

_GROUND_TILE_IDS = {
    GroundType.TOP_LEFT: 270,
    GroundType.TOP_MIDDLE: 271,
    GroundType.TOP_RIGHT: 272,
    GroundType.MIDDLE_LEFT: 290,
    GroundType.MIDDLE: 291,
    GroundType.MIDDLE_RIGHT: 292,
    GroundType.BOTTOM_LEFT: 310,
    GroundType.BOTTOM_MIDDLE: 311,
    GroundType.BOTTOM_RIGHT: 312,
}

# (left, right, top, bottom) neighbours that are ground -> ground type
_GROUND_SHAPES = {
    (False, True, False, True): GroundType.TOP_LEFT,
    (True, True, False, True): GroundType.TOP_MIDDLE,
    (True, False, False, True): GroundType.TOP_RIGHT,
    (False, True, True, True): GroundType.MIDDLE_LEFT,
    (True, True, True, True): GroundType.MIDDLE,
    (True, False, True, True): GroundType.MIDDLE_RIGHT,
    (False, True, True, False): GroundType.BOTTOM_LEFT,
    (True, True, True, False): GroundType.BOTTOM_MIDDLE,
    (True, False, True, False): GroundType.BOTTOM_RIGHT,
}


class TileType(Enum):
    """Kind of a cell in a level file."""

    NONE = 0
    PLAYER = 1
    GROUND = 5


Level = list[list[TileType]]


def parse_tile(text: str) -> TileType:
    """Return the tile named by a decimal number; anything else is NONE."""
    if not (text.isascii() and text.isdigit()):
        return TileType.NONE
    try:
        return TileType(int(text))
    except ValueError:
        return TileType.NONE


def parse_level(lines: Iterable[str]) -> Level:
    """Parse rows of space-separated tile numbers, skipping empty rows."""
    level: Level = []
    for line in lines:
        line = line.rstrip("\n")
        if not line:
            continue
        level.append([parse_tile(cell) for cell in line.split(" ")])
    return level


def load_level(path: Union[str, Path]) -> Level:
    """Read a level file; a file that cannot be opened gives an empty level."""
    try:
        with open(path, encoding="utf-8") as file:
            return parse_level(file)
    except OSError:
        return []


def _is_ground(level: Level, x: int, y: int) -> bool:
    if not 0 <= y < len(level):
        return False
    row = level[y]
    return 0 <= x < len(row) and row[x] is TileType.GROUND


def ground_type_at(level: Level, x: int, y: int) -> GroundType:
    """Return the ground type of cell (x, y) from its ground neighbours."""
    if not level:
        return GroundType.NONE
    shape = (
        _is_ground(level, x - 1, y),
        _is_ground(level, x + 1, y),
        _is_ground(level, x, y - 1),
        _is_ground(level, x, y + 1),
    )
    return _GROUND_SHAPES.get(shape, GroundType.NONE)


def tile_id_for_ground(ground_type: GroundType) -> int:
    """Return the tile map id drawn for a ground type; 0 for NONE."""
    return _GROUND_TILE_IDS.get(ground_type, 0)


class LevelStartup(StartupSystem):
    """Creates ground and player entities from a level file.

    A relative ``filename`` is looked up under ``game.resource_dir``.
    """

    def __init__(self, filename: Union[str, Path] = DEFAULT_LEVEL_FILE) -> None:
        self.filename = Path(filename)

    def startup(self, game: Any) -> None:
        world = game.world
        path = self.filename
        if not path.is_absolute():
            path = Path(game.resource_dir) / path
        level = load_level(path)
        tile_size = Vec2(float(TILE_SIZE), float(TILE_SIZE))
        for y, row in enumerate(level):
            for x, tile in enumerate(row):
                is_ground = tile is TileType.GROUND
                if is_ground:
                    entity_id = world.create_entity()
                elif tile is TileType.PLAYER and not world.has_player():
                    entity_id = world.create_player()
                else:
                    continue

                world.transforms.setdefault(
                    entity_id,
                    Transform(
                        position=tile_size * Vec2(float(x), float(y)),
                        size=Vec2(tile_size.x, tile_size.y),
                    ),
                )
                if is_ground:
                    world.grounds.setdefault(
                        entity_id, Ground(type=ground_type_at(level, x, y))
                    )


class GroundStartup(StartupSystem):
    """Gives every ground entity its sprite and a static body."""

    def startup(self, game: Any) -> None:
        world = game.world
        for entity_id in world.entities_with(world.grounds):
            ground = world.grounds[entity_id]
            source_rect = tile_source_rect(tile_id_for_ground(ground.type))

            sprite = world.sprites.get(entity_id)
            if sprite is not None:
                sprite.source_rect = source_rect
            else:
                world.sprites[entity_id] = Sprite(source_rect=source_rect)

            bounding_box = Rect(
                GROUND_BOUNDING_BOX.x,
                GROUND_BOUNDING_BOX.y,
                GROUND_BOUNDING_BOX.w,
                GROUND_BOUNDING_BOX.h,
            )
            body = world.static_rigid_bodies.get(entity_id)
            if body is not None:
                body.bounding_box = bounding_box
            else:
                world.static_rigid_bodies[entity_id] = StaticRigidBody(
                    bounding_box=bounding_box
                )


class PlayerStartup(StartupSystem):
    """Attaches the camera to the player and gives it animation and a body."""

    def startup(self, game: Any) -> None:
        world = game.world
        camera = game.camera
        player = world.player
        if camera is None or player is None:
            return

        camera.attach_entity(player)
        world.sprite_sheet_animations.setdefault(
            player,
            SpriteSheetAnimation(
                tracks={name: list(frames) for name, frames in PLAYER_TRACKS.items()},
                current_track_name="idle",
            ),
        )
        world.dynamic_rigid_bodies.setdefault(
            player,
            DynamicRigidBody(
                bounding_box=Rect(
                    PLAYER_BOUNDING_BOX.x,
                    PLAYER_BOUNDING_BOX.y,
                    PLAYER_BOUNDING_BOX.w,
                    PLAYER_BOUNDING_BOX.h,
                ),
                speed=MOVEMENT_SPEED,
            ),
        )


class BackgroundColorStartup(StartupSystem):
    """Sets the colour the game clears the screen to."""

    def startup(self, game: Any) -> None:
        game.background_color = BACKGROUND_COLOR