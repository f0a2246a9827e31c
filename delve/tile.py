"""Map tiles and how they look and behave."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from .colors import GRAY6, GREEN4, GREEN6
from .components import Renderable


class TileKind(Enum):
    WALL = "wall"
    FLOOR = "floor"


@dataclass
class Tile:
    """One map cell with its visibility and blocking state."""

    kind: TileKind = TileKind.WALL
    revealed: bool = False
    visible: bool = False
    blocked: bool = False

    def renderable(self) -> Renderable:
        """How the tile is drawn; tiles out of sight are greyed out."""
        if self.kind is TileKind.WALL:
            look = Renderable(glyph="#", fg=GREEN6)
        else:
            look = Renderable(glyph=".", fg=GREEN4)
        if not self.visible:
            look = replace(look, fg=GRAY6)
        return look

    def is_opaque(self) -> bool:
        return self.kind is TileKind.WALL

    def is_blocked(self) -> bool:
        """True when walls or an occupant keep anything from entering."""
        return self.blocked_path() or self.blocked

    def blocked_path(self) -> bool:
        """True when the terrain itself blocks movement."""
        return self.kind is TileKind.WALL

    def is_walkable(self) -> bool:
        return self.kind is TileKind.FLOOR