"""The dungeon map: a grid of tiles plus what stands on each of them."""

from __future__ import annotations

from dataclasses import replace

from .geometry import Point, Rect
from .tile import Tile

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 50


class Map:
    """A rectangular grid of tiles stored row by row."""

    def __init__(self, width: int, height: int, tile: Tile) -> None:
        self.width = width
        self.height = height
        self.length = width * height
        self.tiles: list[Tile] = [replace(tile) for _ in range(self.length)]
        self.rooms: list[Rect] = []
        self.starter_point = Point(0, 0)
        self.content: list[list[int]] = [[] for _ in range(self.length)]

    @classmethod
    def default(cls) -> Map:
        """A full-size map made only of walls."""
        return cls(DEFAULT_WIDTH, DEFAULT_HEIGHT, Tile())

    def is_inbound(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_point_inbound(self, p: Point) -> bool:
        return self.is_inbound(p.x, p.y)

    def is_transparent(self, index: int, x: int, y: int) -> bool:
        return self.is_inbound(x, y) and not self.tiles[index].is_opaque()

    def index_of(self, x: int, y: int) -> int:
        return y * self.width + x

    def index_of_point(self, point: Point) -> int:
        return self.index_of(point.x, point.y)

    def point_at(self, index: int) -> Point:
        """Turn a tile index back into a point.

        Rows are split by the map height, so the result matches
        ``index_of`` only on square maps.
        """
        return Point(index % self.height, index // self.height)

    def clear_visibility(self) -> None:
        for tile in self.tiles:
            tile.visible = False

    def valid_neighbors(self, p: Point) -> list[Point]:
        """The orthogonal neighbours of ``p`` that can be walked onto.

        The order alternates with the parity of the cell so that paths
        zig-zag rather than run along one axis first.
        """
        x, y = p.to_xy()
        candidates = [(x + 1, y), (x - 1, y), (x, y - 1), (x, y + 1)]
        if (x + y) % 2 == 0:
            candidates.reverse()
        return [Point(cx, cy) for cx, cy in candidates if self._is_valid_xy(cx, cy)]

    def _is_valid_xy(self, x: int, y: int) -> bool:
        return self.is_inbound(x, y) and not self.tiles[self.index_of(x, y)].is_blocked()

    def populate_blocked_tiles(self) -> None:
        """Reset each tile's blocked flag to what its terrain dictates."""
        for tile in self.tiles:
            tile.blocked = tile.blocked_path()

    def clear_tiles_content(self) -> None:
        for entities in self.content:
            entities.clear()