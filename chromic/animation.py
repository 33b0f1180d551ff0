"""Systems that advance sprite sheet animations."""

from __future__ import annotations

import math
from typing import Any

from chromic.components import Sprite, SpriteSheetAnimation, tile_source_rect
from chromic.constants import ANIMATION_FRAME_RATE
from chromic.system import UpdateSystem

_UINT32_MASK = 0xFFFFFFFF


def _advance(game: Any, entity_id: int, animation: SpriteSheetAnimation) -> None:
    world = game.world
    now = game.game_time.current_time

    frames = animation.tracks.get(animation.current_track_name)
    if not frames:
        return

    elapsed = ((now - animation.last_update) & _UINT32_MASK) / 1000.0
    frames_to_update = math.floor(elapsed / (1.0 / ANIMATION_FRAME_RATE))
    if frames_to_update > 0:
        animation.current_track_frame_idx = (
            animation.current_track_frame_idx + frames_to_update
        ) % len(frames)
        animation.last_update = now

    source_rect = tile_source_rect(frames[animation.current_track_frame_idx])
    sprite = world.sprites.get(entity_id)
    if sprite is not None:
        sprite.source_rect = source_rect
    else:
        world.sprites[entity_id] = Sprite(source_rect=source_rect)


class AnimationUpdate(UpdateSystem):
    """Steps every animation at the animation frame rate and sets its sprite."""

    def update(self, game: Any) -> None:
        world = game.world
        animations = world.sprite_sheet_animations
        for entity_id in world.entities_with(animations):
            _advance(game, entity_id, animations[entity_id])


class PlayerAnimationUpdate(UpdateSystem):
    """Picks the player's track from whether it runs and faces it the right way."""

    def update(self, game: Any) -> None:
        world = game.world
        entity_id = world.player
        if entity_id is None:
            return

        animation = world.sprite_sheet_animations.get(entity_id)
        if animation is None:
            return

        runner = world.runners.get(entity_id)
        is_running = runner is not None and runner.speed != 0.0
        new_track = "run" if is_running else "idle"
        if animation.current_track_name != new_track:
            animation.current_track_name = new_track
            animation.current_track_frame_idx = 0
            animation.last_update = 0

        is_flip = is_running and runner.speed < 0.0
        sprite = world.sprites.get(entity_id)
        if sprite is not None:
            sprite.is_flip = is_flip
        else:
            world.sprites[entity_id] = Sprite(is_flip=is_flip)