"""Per-turn systems: map indexing, field of view and monster behaviour."""

from __future__ import annotations

from .components import BlockPath, Monster, Name, Player, Position, Viewshed
from .ecs import World
from .gamemap import Map
from .geometry import Point, get_line
from .logger import Logger
from .pathfinding import a_star

_SHOUT_DISTANCE = 10


def map_indexing(world: World) -> None:
    """Record which entities stand on each tile and which tiles they block."""
    game_map = world.fetch(Map)
    game_map.populate_blocked_tiles()
    game_map.clear_tiles_content()

    for entity, position in world.query(Position):
        index = game_map.index_of(position.x, position.y)
        game_map.tiles[index].blocked = world.has(entity, BlockPath)
        game_map.content[index].append(entity)


def _trace(game_map: Map, line: list[Point], visible: list[Point]) -> None:
    for point in line:
        if not game_map.is_point_inbound(point):
            continue
        visible.append(point)
        if game_map.tiles[game_map.index_of_point(point)].is_opaque():
            break


def fov(center: Point, view_range: int, game_map: Map) -> list[Point]:
    """Cells seen from ``center`` by casting lines to the edge of a square.

    Lines stop at the first opaque cell, which is itself seen. A cell may
    appear more than once.
    """
    visible: list[Point] = []
    top = center.y - view_range
    bottom = center.y + view_range
    left = center.x - view_range
    right = center.x + view_range

    for x in range(max(left, 0), min(right, game_map.width)):
        _trace(game_map, get_line(center, Point(x, top)), visible)
        _trace(game_map, get_line(center, Point(x, bottom)), visible)

    for y in range(max(top + 1, 0), min(bottom - 1, game_map.height)):
        _trace(game_map, get_line(center, Point(left, y)), visible)
        _trace(game_map, get_line(center, Point(right, y)), visible)

    return visible


def visibility(world: World) -> None:
    """Recompute dirty viewsheds; the player's also lights up the map."""
    game_map = world.fetch(Map)
    for entity, viewshed, position in world.query(Viewshed, Position):
        if not viewshed.dirty:
            continue

        viewshed.visible_tiles = fov(Point.from_position(position), viewshed.range, game_map)

        if not world.has(entity, Player):
            continue

        game_map.clear_visibility()
        for point in viewshed.visible_tiles:
            tile = game_map.tiles[game_map.index_of_point(point)]
            tile.revealed = True
            tile.visible = True


def monster_ai(world: World) -> None:
    """Monsters that see the player insult it from close by or step towards it."""
    game_map = world.fetch(Map)
    player_point = world.fetch(Point)
    logger = world.fetch(Logger)

    for _, viewshed, position, _, name in world.query(Viewshed, Position, Monster, Name):
        if player_point not in viewshed.visible_tiles:
            continue

        monster_point = Point.from_position(position)
        distance = monster_point.distance_squared_to(player_point)
        if distance < _SHOUT_DISTANCE:
            logger.add(f"{name} shouts insults from {distance} meters")
            continue

        path = a_star(monster_point, player_point, game_map)
        if not path:
            continue

        step = path[0]
        position.x = step.x
        position.y = step.y
        game_map.tiles[game_map.index_of_point(step)].blocked = True
        viewshed.dirty = True