import pytest

from delve.builder import rooms_and_corridors
from delve.components import (
    BlockPath,
    CombatStats,
    Monster,
    Name,
    Player,
    Position,
    Renderable,
    Viewshed,
)
from delve.ecs import World
from delve.gamemap import Map
from delve.geometry import Point, Rect
from delve.rng import Rng
from delve.spawner import (
    Spawn,
    build_player_entity,
    spawn_monsters,
    spawnable_points_in_room,
)
from delve.tile import Tile, TileKind


def _floor_map(width=20, height=20):
    return Map(width, height, Tile(kind=TileKind.FLOOR))


def _inside(room, pos):
    return room.x1 < pos.x < room.x2 and room.y1 < pos.y < room.y2


def test_spawn_holds_name_and_point():
    spawn = Spawn("Orc", Point(1, 2))
    assert (spawn.name, spawn.point) == ("Orc", Point(1, 2))


def test_spawnable_points_are_strict_interior():
    game_map = _floor_map()
    room = Rect(x1=1, x2=4, y1=1, y2=4)
    assert spawnable_points_in_room(room, game_map) == [
        Point(2, 2),
        Point(3, 2),
        Point(2, 3),
        Point(3, 3),
    ]


def test_spawnable_points_skip_walls():
    game_map = _floor_map()
    game_map.tiles[game_map.index_of(2, 2)].kind = TileKind.WALL
    room = Rect(x1=1, x2=4, y1=1, y2=4)
    points = spawnable_points_in_room(room, game_map)
    assert Point(2, 2) not in points
    assert len(points) == 3


def test_build_player_entity():
    world = World()
    entity = build_player_entity(world, Point(7, 9))
    assert world.has(entity, Player)
    assert world.component(entity, Position) == Position(7, 9)
    assert str(world.component(entity, Name)) == "Player"
    assert world.component(entity, Viewshed).range == 8
    stats = world.component(entity, CombatStats)
    assert (stats.max_hp, stats.current_hp, stats.defense, stats.attack) == (50, 50, 2, 6)
    assert world.component(entity, Renderable).glyph == "@"


def test_spawn_monsters_one_per_room_after_first():
    game_map = _floor_map()
    game_map.rooms = [
        Rect.from_size(1, 1, 4, 4),
        Rect.from_size(8, 1, 4, 4),
        Rect.from_size(1, 10, 4, 4),
    ]
    world = World()
    spawn_monsters(Rng(12345), world, game_map)
    monsters = list(world.query(Monster, Position, Name, CombatStats))
    assert len(monsters) == 2
    for room, (entity, _, pos, name, stats) in zip(game_map.rooms[1:], monsters):
        assert _inside(room, pos)
        assert world.has(entity, BlockPath)
        assert world.component(entity, Viewshed).range == 7
        if name.name == "Orc":
            assert (stats.max_hp, stats.defense, stats.attack) == (20, 2, 4)
        else:
            assert name.name == "Goblin"
            assert (stats.max_hp, stats.defense, stats.attack) == (18, 1, 3)


def test_spawn_monsters_on_generated_dungeon():
    rng = Rng.from_string("Roguelike Dungeon")
    game_map = rooms_and_corridors(rng)
    world = World()
    spawn_monsters(rng, world, game_map)
    monsters = list(world.query(Monster, Position))
    assert len(monsters) == len(game_map.rooms) - 1
    for _, _, pos in monsters:
        assert game_map.tiles[game_map.index_of(pos.x, pos.y)].is_walkable()


def test_single_room_spawns_nothing():
    game_map = _floor_map()
    game_map.rooms = [Rect.from_size(1, 1, 4, 4)]
    world = World()
    spawn_monsters(Rng(1), world, game_map)
    assert world.entities() == []


def test_room_without_floor_raises():
    game_map = Map(20, 20, Tile(kind=TileKind.WALL))
    game_map.rooms = [Rect.from_size(1, 1, 4, 4), Rect.from_size(8, 8, 4, 4)]
    with pytest.raises(ValueError):
        spawn_monsters(Rng(1), World(), game_map)