"""Placing the player and the monsters on a freshly built map."""

from __future__ import annotations

from dataclasses import dataclass

from .colors import BLACK, RED1, RED5
from .components import (
    BlockPath,
    CombatStats,
    Monster,
    Name,
    Player,
    Position,
    Renderable,
    Viewshed,
)
from .ecs import World
from .gamemap import Map
from .geometry import Point, Rect
from .rng import Rng


@dataclass(frozen=True)
class Spawn:
    """A named thing to be placed at a point."""

    name: str
    point: Point


def spawnable_points_in_room(room: Rect, game_map: Map) -> list[Point]:
    """Walkable cells strictly inside the room's corners, row by row."""
    return [
        Point(x, y)
        for y in range(room.y1 + 1, room.y2)
        for x in range(room.x1 + 1, room.x2)
        if game_map.tiles[game_map.index_of(x, y)].is_walkable()
    ]


def build_player_entity(world: World, spawn_point: Point) -> int:
    """Create the player entity at ``spawn_point`` and return its id."""
    return world.spawn(
        Renderable(glyph="@", fg=BLACK, bg=RED1),
        Position.from_point(spawn_point),
        Player(),
        Name("Player"),
        Viewshed(range=8),
        CombatStats(max_hp=50, defense=2, attack=6),
    )


def spawn_monsters(rng: Rng, world: World, game_map: Map) -> None:
    """Put one orc or goblin in every room except the first.

    Raises ValueError when a room has no walkable cell to spawn on.
    """
    for room in game_map.rooms[1:]:
        points = spawnable_points_in_room(room, game_map)
        spawn_point = points[rng.random_range(0, len(points))]

        if rng.random_range(0, 3) == 1:
            glyph, name, stats = "o", "Orc", CombatStats(max_hp=20, defense=2, attack=4)
        else:
            glyph, name, stats = "g", "Goblin", CombatStats(max_hp=18, defense=1, attack=3)

        world.spawn(
            Position.from_point(spawn_point),
            Renderable(glyph=glyph, fg=RED5),
            Viewshed(range=7),
            Monster(),
            Name(name),
            BlockPath(),
            stats,
        )