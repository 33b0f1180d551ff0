from types import SimpleNamespace

import pygame
import pytest

from chromic.camera import Camera
from chromic.components import Rect, Sprite, Transform, tile_source_rect
from chromic.rendering import CameraPositionUpdate, SpriteDraw, sprite_destination
from chromic.vec2 import Vec2
from chromic.world import World

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
BLACK = (0, 0, 0, 255)


def test_destination_without_zoom_or_offset_is_transform():
    camera = Camera(size=Vec2(100.0, 100.0))
    transform = Transform(position=Vec2(3.0, 7.0), size=Vec2(16.0, 16.0))
    assert sprite_destination(camera, transform) == Rect(3, 7, 16, 16)


def test_destination_applies_camera_offset():
    camera = Camera(size=Vec2(100.0, 100.0), position=Vec2(-5.0, 10.0))
    transform = Transform(position=Vec2(5.0, 0.0), size=Vec2(16.0, 16.0))
    destination = sprite_destination(camera, transform)
    assert (destination.x, destination.y) == (0, 10)


def test_destination_scales_with_zoom():
    transform = Transform(position=Vec2(4.0, 6.0), size=Vec2(16.0, 16.0))
    plain = sprite_destination(Camera(size=Vec2(1.0, 1.0)), transform)
    zoomed = sprite_destination(Camera(size=Vec2(1.0, 1.0), zoom=2.0), transform)
    assert (zoomed.x, zoomed.y, zoomed.w, zoomed.h) == (
        plain.x * 2,
        plain.y * 2,
        plain.w * 2,
        plain.h * 2,
    )


@pytest.mark.parametrize("zoom", [1.0, 2.0, 5.0])
def test_camera_centres_attached_entity(zoom):
    world = World()
    entity = world.create_entity()
    world.transforms[entity] = Transform(position=Vec2(10.0, 20.0), size=Vec2(16.0, 16.0))
    camera = Camera(size=Vec2(1280.0, 720.0), zoom=zoom)
    camera.attach_entity(entity)
    CameraPositionUpdate().update(SimpleNamespace(world=world, camera=camera))
    destination = sprite_destination(camera, world.transforms[entity])
    assert destination.x + destination.w / 2 == pytest.approx(640.0, abs=1.0)
    assert destination.y + destination.h / 2 == pytest.approx(360.0, abs=1.0)


def test_detached_camera_stays_put():
    world = World()
    entity = world.create_entity()
    world.transforms[entity] = Transform(position=Vec2(10.0, 20.0), size=Vec2(16.0, 16.0))
    camera = Camera(size=Vec2(100.0, 100.0), position=Vec2(1.0, 2.0))
    CameraPositionUpdate().update(SimpleNamespace(world=world, camera=camera))
    assert camera.position == Vec2(1.0, 2.0)


def test_camera_attached_to_entity_without_transform_stays_put():
    world = World()
    entity = world.create_entity()
    camera = Camera(size=Vec2(100.0, 100.0), position=Vec2(1.0, 2.0))
    camera.attach_entity(entity)
    CameraPositionUpdate().update(SimpleNamespace(world=world, camera=camera))
    assert camera.position == Vec2(1.0, 2.0)


def make_draw_game(texture, camera):
    screen = pygame.Surface((64, 64), pygame.SRCALPHA)
    screen.fill(BLACK)
    return SimpleNamespace(world=World(), camera=camera, texture=texture, screen=screen)


def two_tile_texture():
    texture = pygame.Surface((32, 16), pygame.SRCALPHA)
    texture.fill(RED, pygame.Rect(0, 0, 16, 16))
    texture.fill(BLUE, pygame.Rect(16, 0, 16, 16))
    return texture


def test_sprite_drawn_from_source_rect_and_scaled():
    game = make_draw_game(two_tile_texture(), Camera(size=Vec2(64.0, 64.0), zoom=2.0))
    entity = game.world.create_entity()
    game.world.sprites[entity] = Sprite(source_rect=tile_source_rect(1))
    game.world.transforms[entity] = Transform(position=Vec2(0.0, 0.0), size=Vec2(16.0, 16.0))
    SpriteDraw().draw(game)
    assert tuple(game.screen.get_at((0, 0))) == BLUE
    assert tuple(game.screen.get_at((31, 31))) == BLUE
    assert tuple(game.screen.get_at((32, 32))) == BLACK


def test_flipped_sprite_is_mirrored():
    texture = pygame.Surface((2, 1), pygame.SRCALPHA)
    texture.set_at((0, 0), RED)
    texture.set_at((1, 0), BLUE)
    game = make_draw_game(texture, Camera(size=Vec2(64.0, 64.0)))
    entity = game.world.create_entity()
    game.world.sprites[entity] = Sprite(source_rect=Rect(0, 0, 2, 1), is_flip=True)
    game.world.transforms[entity] = Transform(position=Vec2(0.0, 0.0), size=Vec2(2.0, 1.0))
    SpriteDraw().draw(game)
    assert tuple(game.screen.get_at((0, 0))) == BLUE
    assert tuple(game.screen.get_at((1, 0))) == RED


def test_entity_without_transform_is_not_drawn():
    game = make_draw_game(two_tile_texture(), Camera(size=Vec2(64.0, 64.0)))
    entity = game.world.create_entity()
    game.world.sprites[entity] = Sprite(source_rect=tile_source_rect(0))
    SpriteDraw().draw(game)
    assert tuple(game.screen.get_at((0, 0))) == BLACK