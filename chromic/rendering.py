"""Camera tracking and sprite drawing."""

from __future__ import annotations

from typing import Any

import pygame

from chromic.camera import Camera
from chromic.components import Rect, Sprite, Transform
from chromic.system import DrawSystem, UpdateSystem


def sprite_destination(camera: Camera, transform: Transform) -> Rect:
    """Return the screen rectangle an entity with ``transform`` is drawn into."""
    scaled_size = transform.size * camera.zoom
    position = transform.position * camera.zoom + camera.position
    return Rect(
        x=int(position.x),
        y=int(position.y),
        w=int(scaled_size.x),
        h=int(scaled_size.y),
    )


class CameraPositionUpdate(UpdateSystem):
    """Moves the camera so that its attached entity sits in the middle of the view."""

    def update(self, game: Any) -> None:
        camera = game.camera
        if camera is None or camera.attached_entity is None:
            return

        transform = game.world.transforms.get(camera.attached_entity)
        if transform is None:
            return

        zoom = camera.zoom
        camera_center = camera.size * 0.5
        scaled_size = transform.size * zoom
        position = transform.position * zoom + scaled_size * 0.5
        camera.position = (position - camera_center) * -1.0


def _draw_sprite(game: Any, sprite: Sprite, transform: Transform) -> None:
    source = sprite.source_rect
    image = game.texture.subsurface(pygame.Rect(source.x, source.y, source.w, source.h))
    if sprite.is_flip:
        image = pygame.transform.flip(image, True, False)
    destination = sprite_destination(game.camera, transform)
    size = (max(destination.w, 0), max(destination.h, 0))
    if size != image.get_size():
        image = pygame.transform.scale(image, size)
    game.screen.blit(image, (destination.x, destination.y))


class SpriteDraw(DrawSystem):
    """Draws every entity with a sprite and a transform.

    Uses ``game.texture`` as the tile map and blits onto ``game.screen``.
    """

    def draw(self, game: Any) -> None:
        world = game.world
        for entity_id in world.entities_with(world.sprites, world.transforms):
            _draw_sprite(game, world.sprites[entity_id], world.transforms[entity_id])