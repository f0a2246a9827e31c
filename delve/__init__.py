"""A small terminal roguelike with generated dungeons, field of view and monsters that chase the player."""

__version__ = "0.1.0"