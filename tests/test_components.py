import pytest

from chromic.components import (
    DynamicRigidBody,
    Ground,
    GroundType,
    Jumper,
    Rect,
    Runner,
    Sprite,
    SpriteSheetAnimation,
    StaticRigidBody,
    Transform,
    Velocity,
    tile_source_rect,
)
from chromic.constants import TILE_SIZE, TOTAL_TILES
from chromic.vec2 import Vec2


def test_first_tile_rect():
    assert tile_source_rect(0) == Rect(0, 0, TILE_SIZE, TILE_SIZE)


def test_tile_wraps_to_next_row():
    rect = tile_source_rect(TOTAL_TILES)
    assert (rect.x, rect.y) == (0, TILE_SIZE)


@pytest.mark.parametrize("tile_id", [1, 19, 240, 243, 270, 291, 312])
def test_tile_rect_maps_back_to_id(tile_id):
    rect = tile_source_rect(tile_id)
    assert rect.x % TILE_SIZE == 0 and rect.y % TILE_SIZE == 0
    assert rect.x // TILE_SIZE + (rect.y // TILE_SIZE) * TOTAL_TILES == tile_id
    assert (rect.w, rect.h) == (TILE_SIZE, TILE_SIZE)


def test_tile_rect_column_stays_inside_row():
    for tile_id in range(TOTAL_TILES * 3):
        assert tile_source_rect(tile_id).x < TOTAL_TILES * TILE_SIZE


def test_negative_tile_rejected():
    with pytest.raises(ValueError):
        tile_source_rect(-1)


def test_jumper_defaults():
    jumper = Jumper(20.0)
    assert jumper.height == 20.0
    assert jumper.speed == 5.0
    assert jumper.last_height == 0.0


def test_sprite_defaults_and_independence():
    first = Sprite()
    second = Sprite()
    assert first.source_rect == Rect()
    assert first.is_flip is False
    first.source_rect.x = TILE_SIZE
    assert second.source_rect.x == 0


def test_transform_defaults_are_independent():
    first = Transform()
    second = Transform()
    first.position.x = 3.0
    assert second.position == Vec2()


def test_animation_defaults():
    animation = SpriteSheetAnimation(tracks={"idle": [240]}, current_track_name="idle")
    assert animation.current_track_frame_idx == 0
    assert animation.last_update == 0
    assert animation.tracks["idle"] == [240]


def test_ground_default_type():
    assert Ground().type is GroundType.NONE
    assert Ground(GroundType.MIDDLE).type is GroundType.MIDDLE


def test_bodies_keep_bounding_box():
    box = Rect(2, 0, 12, 16)
    assert DynamicRigidBody(box, 50.0).bounding_box == box
    assert StaticRigidBody(box).bounding_box == box


def test_velocity_and_runner_are_mutable():
    velocity = Velocity()
    velocity.y += 1.5
    runner = Runner(50.0)
    runner.speed -= 50.0
    assert velocity == Velocity(0.0, 1.5)
    assert runner.speed == 0.0