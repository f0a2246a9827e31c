"""Dungeon generation: a starting layout refined by a chain of builders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from .gamemap import Map
from .geometry import Point, Rect
from .maths import order_value
from .rng import Rng
from .tile import TileKind


class InitialBuilder(ABC):
    """Lays down the first layout of a fresh map."""

    @abstractmethod
    def draw(self, rng: Rng, game_map: Map) -> None:
        ...


class MetaBuilder(ABC):
    """Refines a map that an earlier builder has already laid out."""

    @abstractmethod
    def draw(self, rng: Rng, game_map: Map) -> None:
        ...


class MapBuilder:
    """Runs one initial builder and then each meta builder in order."""

    def __init__(self, starter: InitialBuilder) -> None:
        self.starter = starter
        self.builders: list[MetaBuilder] = []

    def with_builder(self, builder: MetaBuilder) -> MapBuilder:
        self.builders.append(builder)
        return self

    def build(self, rng: Rng) -> Map:
        game_map = Map.default()
        self.starter.draw(rng, game_map)
        for builder in self.builders:
            builder.draw(rng, game_map)
        return game_map


class Empty(InitialBuilder):
    """Leaves the map untouched."""

    def draw(self, rng: Rng, game_map: Map) -> None:
        return None


class RandomRooms(InitialBuilder):
    """Carves up to ``max_rooms`` non-overlapping rectangular rooms."""

    def __init__(self, max_rooms: int, min_size: int, max_size: int) -> None:
        self.max_rooms = max_rooms
        self.min_size = min_size
        self.max_size = max_size

    def draw(self, rng: Rng, game_map: Map) -> None:
        rooms: list[Rect] = []
        for _ in range(self.max_rooms):
            w = rng.random_range(self.min_size, self.max_size)
            h = rng.random_range(self.min_size, self.max_size)
            room = Rect.from_size(
                rng.random_range(1, game_map.width - w - 1),
                rng.random_range(1, game_map.height - h - 1),
                w,
                h,
            )
            if not any(room.intersect(other) for other in rooms):
                rooms.append(room)

        for room in rooms:
            for y in range(room.y1 + 1, room.y2 + 1):
                for x in range(room.x1 + 1, room.x2 + 1):
                    game_map.tiles[game_map.index_of(x, y)].kind = TileKind.FLOOR

        game_map.starter_point = rooms[0].center_point() if rooms else Point()
        game_map.rooms = rooms


class _Orientation(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


def _draw_corridor(game_map: Map, a1: int, a2: int, b: int, orientation: _Orientation) -> None:
    lo, hi = order_value(a1, a2)
    for a in range(lo, hi + 1):
        x, y = (b, a) if orientation is _Orientation.VERTICAL else (a, b)
        if game_map.is_inbound(x, y):
            game_map.tiles[game_map.index_of(x, y)].kind = TileKind.FLOOR


class Corridors(MetaBuilder):
    """Joins each room to the next one with an L-shaped corridor."""

    def draw(self, rng: Rng, game_map: Map) -> None:
        rooms = list(game_map.rooms)
        if len(rooms) <= 1:
            return
        for room, following in zip(rooms, rooms[1:]):
            new_x, new_y = room.center()
            prev_x, prev_y = following.center()
            if rng.random_range(0, 2) == 1:
                middle_x, middle_y = new_x, prev_y
            else:
                middle_x, middle_y = prev_x, new_y
            _draw_corridor(game_map, prev_x, new_x, middle_y, _Orientation.HORIZONTAL)
            _draw_corridor(game_map, prev_y, new_y, middle_x, _Orientation.VERTICAL)


def rooms_and_corridors(rng: Rng) -> Map:
    """The standard dungeon: a few random rooms joined by corridors."""
    return MapBuilder(RandomRooms(4, 5, 8)).with_builder(Corridors()).build(rng)