"""Components attached to entities: where they are, how they look and what they are."""

from __future__ import annotations

from dataclasses import dataclass, field

from .colors import BLACK, WHITE
from .geometry import Point


@dataclass(frozen=True)
class Cell:
    """One styled character cell ready to be drawn on the terminal."""

    text: str
    fg: int | None = None
    bg: int | None = None


@dataclass
class Position:
    """Location of an entity on the map."""

    x: int
    y: int

    @classmethod
    def from_point(cls, point: Point) -> Position:
        return cls(point.x, point.y)


@dataclass(frozen=True)
class Renderable:
    """Glyph and colours used to draw an entity or a tile."""

    glyph: str = " "
    fg: int = WHITE
    bg: int = BLACK

    def draw(self) -> Cell:
        return Cell(self.glyph, self.fg, self.bg)


@dataclass(frozen=True)
class BlockPath:
    """Marks an entity that stops others from walking onto its tile."""


@dataclass(frozen=True)
class Player:
    """Marks the entity controlled by the user."""


@dataclass(frozen=True)
class Monster:
    """Marks an entity driven by the monster AI."""


@dataclass
class Viewshed:
    """The cells an entity can currently see."""

    range: int
    visible_tiles: list[Point] = field(default_factory=list)
    dirty: bool = True


@dataclass
class Name:
    """Display name of an entity."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass
class CombatStats:
    """Hit points and fighting strength; starts at full health."""

    max_hp: int
    defense: int
    attack: int
    current_hp: int = field(init=False)

    def __post_init__(self) -> None:
        self.current_hp = self.max_hp