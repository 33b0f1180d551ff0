"""Entity-component world, systems and commands for a tile-based 2D platformer."""

__version__ = "0.1.0"