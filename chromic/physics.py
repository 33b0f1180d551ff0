"""Systems that move bodies: gravity, jumping, running, collisions and positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from chromic.components import Rect, Transform, Velocity
from chromic.constants import GRAVITY
from chromic.system import UpdateSystem
from chromic.vec2 import Vec2
from chromic.world import World

MAX_MOVE_STEP = 0.1
"""Longest frame time, in seconds, that a single running step accounts for."""


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned box in whole world units, given by its four edges."""

    top: int
    bottom: int
    left: int
    right: int

    @classmethod
    def from_body(cls, bounding_box: Rect, position: Vec2) -> Rectangle:
        """Place ``bounding_box`` at ``position``, truncating the position to integers."""
        top = int(position.y) + bounding_box.y
        left = int(position.x) + bounding_box.x
        return cls(
            top=top,
            bottom=top + bounding_box.h,
            left=left,
            right=left + bounding_box.w,
        )


def check_collision(a: Rectangle, b: Rectangle) -> bool:
    """Return whether two rectangles overlap; touching edges do not count."""
    return not (
        a.top >= b.bottom
        or a.bottom <= b.top
        or a.left >= b.right
        or a.right <= b.left
    )


class GravityUpdate(UpdateSystem):
    """Pulls every dynamic body down by gravity times the frame time."""

    def update(self, game: Any) -> None:
        world: World = game.world
        pull = GRAVITY * game.game_time.delta_time
        for entity_id in world.entities_with(world.dynamic_rigid_bodies):
            velocity = world.velocities.get(entity_id)
            if velocity is not None:
                velocity.y += pull
            else:
                world.velocities[entity_id] = Velocity(x=0.0, y=pull)


class JumpingUpdate(UpdateSystem):
    """Lifts jumping entities until they reach their jump height.

    A finished jump is removed once the entity no longer moves vertically.
    """

    def update(self, game: Any) -> None:
        world: World = game.world
        delta = game.game_time.delta_time
        for entity_id in world.entities_with(world.jumps):
            jumper = world.jumps[entity_id]
            velocity = world.velocities.get(entity_id)
            rise = jumper.height * jumper.speed * delta
            jumper.last_height += rise
            if jumper.last_height >= jumper.height:
                if velocity is None or velocity.y == 0.0:
                    del world.jumps[entity_id]
                    jumper.last_height = 0.0
                continue

            if velocity is not None:
                velocity.y = -rise
            else:
                world.velocities[entity_id] = Velocity(x=0.0, y=-rise)


class MovingUpdate(UpdateSystem):
    """Turns running speed into horizontal velocity for the frame."""

    def update(self, game: Any) -> None:
        world: World = game.world
        step = min(MAX_MOVE_STEP, game.game_time.delta_time)
        for entity_id in world.entities_with(world.runners):
            dx = world.runners[entity_id].speed * step
            velocity = world.velocities.get(entity_id)
            if velocity is not None:
                velocity.x = dx
            elif dx != 0.0:
                world.velocities[entity_id] = Velocity(x=dx, y=0.0)
            else:
                del world.runners[entity_id]


def _collide_with_static(world: World, moving_id: int, static_id: int) -> None:
    velocity = world.velocities[moving_id]
    body = world.dynamic_rigid_bodies[moving_id]
    moving_transform = world.transforms.setdefault(moving_id, Transform())
    static_body = world.static_rigid_bodies[static_id]
    static_transform = world.transforms.setdefault(static_id, Transform())

    obstacle = Rectangle.from_body(static_body.bounding_box, static_transform.position)
    if velocity.x != 0:
        moved = Rectangle.from_body(
            body.bounding_box, moving_transform.position + Vec2(velocity.x, 0.0)
        )
        if check_collision(moved, obstacle):
            velocity.x = 0.0
    if velocity.y != 0:
        moved = Rectangle.from_body(
            body.bounding_box, moving_transform.position + Vec2(0.0, velocity.y)
        )
        if check_collision(moved, obstacle):
            velocity.y = 0.0


class CollisionUpdate(UpdateSystem):
    """Cancels each axis of a dynamic body's velocity that would run it into a static body."""

    def update(self, game: Any) -> None:
        world: World = game.world
        moving = world.entities_with(world.dynamic_rigid_bodies, world.velocities)
        if not moving:
            return
        for moving_id in moving:
            for static_id in world.entities_with(world.static_rigid_bodies):
                _collide_with_static(world, moving_id, static_id)


class PositionUpdate(UpdateSystem):
    """Moves every entity with a transform by its velocity."""

    def update(self, game: Any) -> None:
        world: World = game.world
        for entity_id in world.entities_with(world.velocities, world.transforms):
            velocity = world.velocities[entity_id]
            if velocity.x != 0 or velocity.y != 0:
                position = world.transforms[entity_id].position
                position.x += velocity.x
                position.y += velocity.y