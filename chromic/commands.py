"""Commands that player input applies to an entity."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from chromic.components import Jumper, Runner
from chromic.world import World

JUMP_HEIGHT = 20.0


class Command(ABC):
    """An action applied to one entity of a world."""

    @abstractmethod
    def execute(self, world: World, entity_id: int) -> None:
        """Apply the action to ``entity_id``."""


class MoveDirection(Enum):
    """Horizontal direction of a move."""

    LEFT = "left"
    RIGHT = "right"


def _body_speed(world: World, entity_id: int) -> float:
    kinematic = world.kinematic_rigid_bodies.get(entity_id)
    if kinematic is not None:
        return kinematic.speed
    dynamic = world.dynamic_rigid_bodies.get(entity_id)
    if dynamic is not None:
        return dynamic.speed
    return 0.0


@dataclass(frozen=True)
class Move(Command):
    """Start or stop running in a direction at the entity's body speed."""

    direction: MoveDirection
    is_stop: bool

    def execute(self, world: World, entity_id: int) -> None:
        speed = _body_speed(world, entity_id)
        runner = world.runners.get(entity_id)
        rightward = self.direction is MoveDirection.RIGHT
        if self.is_stop:
            if runner is not None:
                runner.speed += -speed if rightward else speed
        else:
            delta = speed if rightward else -speed
            if runner is None:
                world.runners[entity_id] = Runner(speed=delta)
            else:
                runner.speed += delta


@dataclass(frozen=True)
class Jump(Command):
    """Start a jump, or cut one short when ``is_stop`` is set."""

    is_stop: bool

    def execute(self, world: World, entity_id: int) -> None:
        jumper = world.jumps.get(entity_id)
        if jumper is not None and self.is_stop:
            jumper.last_height = jumper.height
        elif jumper is None and not self.is_stop:
            world.jumps[entity_id] = Jumper(JUMP_HEIGHT)