"""Game-wide tuning constants."""

TILE_SIZE: int = 16
"""Edge length of one tile in the tile map, in pixels."""

TOTAL_TILES: int = 20
"""Number of tiles in one row of the tile map texture."""

FRAME_RATE: float = 60.0
"""Target frames per second of the main loop."""

ANIMATION_FRAME_RATE: float = 6.0
"""Frames per second of sprite sheet animations."""

MOVEMENT_SPEED: float = 50.0
"""Horizontal speed of the player."""

GRAVITY: float = 9.80665
"""Downward acceleration applied to dynamic bodies."""