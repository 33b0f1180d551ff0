# chromic

The building blocks of a small side-scrolling platformer. There is an
entity-component world, the systems that act on it, and the commands that
player input turns into. The systems cover gravity, jumping, running,
collisions with ground tiles, sprite-sheet animation, a camera that follows
the player, and drawing sprites.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## What is in the package

| Module | Contents |
|--------|----------|
| `chromic.constants` | `TILE_SIZE` (16), `TOTAL_TILES` (20 tiles per texture row), `FRAME_RATE`, `ANIMATION_FRAME_RATE`, `MOVEMENT_SPEED`, `GRAVITY` |
| `chromic.vec2` | `Vec2`: component-wise `+ - * /`, scaling by a number, equality within single-precision epsilon |
| `chromic.components` | `Rect`, `Transform`, `Velocity`, `Sprite`, `SpriteSheetAnimation`, `DynamicRigidBody`, `KinematicRigidBody`, `StaticRigidBody`, `GroundType`, `Ground`, `Jumper`, `Runner`, and `tile_source_rect(tile_id)` |
| `chromic.camera` | `Camera`: `size`, `position`, `zoom`, and `attach_entity` / `detach_entity` |
| `chromic.game_time` | `GameTime`: `reset()`, `current_time` (ms), `delta_time` (s) |
| `chromic.world` | `World`: entity ids, one dict per component kind, `entities_with(...)`, and the player entity |
| `chromic.system` | abstract `StartupSystem`, `UpdateSystem`, `DrawSystem` |
| `chromic.commands` | `Move(MoveDirection, is_stop)` and `Jump(is_stop)`, each with `execute(world, entity_id)` |
| `chromic.level` | level parsing (`parse_tile`, `parse_level`, `load_level`, `ground_type_at`, `tile_id_for_ground`) and `LevelStartup`, `GroundStartup`, `PlayerStartup`, `BackgroundColorStartup` |
| `chromic.physics` | `Rectangle`, `check_collision`, `GravityUpdate`, `JumpingUpdate`, `MovingUpdate`, `CollisionUpdate`, `PositionUpdate` |
| `chromic.animation` | `AnimationUpdate`, `PlayerAnimationUpdate` |
| `chromic.rendering` | `sprite_destination(camera, transform)`, `CameraPositionUpdate`, `SpriteDraw` |

## The game object

Systems take one argument, `game`. It is any object with these attributes:

- `world`: a `World`
- `game_time`: a `GameTime`
- `camera`: a `Camera`, or `None`
- `resource_dir`: the directory that `LevelStartup` resolves relative paths against
- `texture` and `screen`: pygame surfaces, needed only by `SpriteDraw`
- `background_color`: set by `BackgroundColorStartup` to `(0x22, 0x23, 0x23, 0xFF)`

## Levels

`LevelStartup` reads `res/level.txt` by default. The file has one row of
tiles per line, with tile codes separated by single spaces. `0` is empty,
`1` is the player's start and `5` is ground. Any other text counts as empty.
Empty lines are skipped. If the file is missing, the level is empty.
`GroundStartup` picks the sprite of each ground tile from its ground
neighbours. The sprite sheet is laid out as 16×16 pixel tiles, 20 per row.

## Example

```python
from types import SimpleNamespace

from chromic.animation import AnimationUpdate, PlayerAnimationUpdate
from chromic.camera import Camera
from chromic.commands import Jump, Move, MoveDirection
from chromic.game_time import GameTime
from chromic.level import BackgroundColorStartup, GroundStartup, LevelStartup, PlayerStartup
from chromic.physics import CollisionUpdate, GravityUpdate, JumpingUpdate, MovingUpdate, PositionUpdate
from chromic.rendering import CameraPositionUpdate
from chromic.vec2 import Vec2
from chromic.world import World

game = SimpleNamespace(
    world=World(),
    game_time=GameTime(),
    camera=Camera(Vec2(1280.0, 720.0), zoom=5.0),
    resource_dir="path/to/resources",
    background_color=None,
)

for system in (LevelStartup(), BackgroundColorStartup(), PlayerStartup(), GroundStartup()):
    system.startup(game)

updates = [JumpingUpdate(), GravityUpdate(), MovingUpdate(), CollisionUpdate(),
           PositionUpdate(), CameraPositionUpdate(), PlayerAnimationUpdate(), AnimationUpdate()]

player = game.world.player
if player is not None:
    Move(MoveDirection.RIGHT, False).execute(game.world, player)
    Jump(False).execute(game.world, player)

game.game_time.reset()
for system in updates:
    system.update(game)
```

## What the package does not do

The package has no command to start the game. It does not open a window,
run a frame loop, or read the keyboard. The caller must do these things:

- create the pygame display and load the tile map into `texture` and `screen`;
- call `game_time.reset()` and the update systems once per frame, then `SpriteDraw().draw(game)`;
- turn key presses and releases into `Move` and `Jump` commands for `world.player`.