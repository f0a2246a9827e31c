"""Path searches over the walkable cells of a map."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from .gamemap import Map
from .geometry import Point

_A_STAR_STEPS = 100


@dataclass(frozen=True)
class _Node:
    point: Point
    f: int
    parent: Point | None

    @classmethod
    def scored(cls, point: Point, start: Point, goal: Point, parent: Point | None) -> _Node:
        cost = point.distance_squared_to(start) + point.distance_squared_to(goal)
        return cls(point, cost, parent)


def a_star(start: Point, goal: Point, game_map: Map) -> list[Point]:
    """Search for a path from ``start`` to ``goal``, expanding at most 100 cells.

    The path leaves out ``start`` and ends at ``goal``. It is empty when
    the goal is not reached within the step budget, or is the start itself.
    """
    opened: dict[Point, _Node] = {start: _Node.scored(start, start, goal, None)}
    closed: dict[Point, _Node] = {}
    path: list[Point] = []

    for _ in range(_A_STAR_STEPS):
        if not opened:
            break
        current = min(opened.values(), key=lambda node: node.f)
        position = current.point
        del opened[position]
        closed[position] = _Node.scored(position, start, goal, current.parent)

        if position == goal:
            step: Point | None = position
            while step is not None:
                path.append(step)
                node = closed.get(step)
                step = node.parent if node is not None else None
            break

        for neighbor in game_map.valid_neighbors(position):
            if neighbor not in closed:
                opened[neighbor] = _Node.scored(neighbor, start, goal, position)

    if path:
        path.pop()
    path.reverse()
    return path


def breadth_first(start: Point, goal: Point, game_map: Map) -> list[Point] | None:
    """Flood the map from ``start`` and trace a path back from ``goal``.

    Returns the path without ``start`` and ending at ``goal``, or None
    when the goal was never reached (including when it is the start).
    """
    frontier: deque[Point] = deque([start])
    came_from: dict[Point, Point] = {}

    while frontier:
        current = frontier.popleft()
        if current == goal:
            break
        for neighbor in game_map.valid_neighbors(current):
            if neighbor not in came_from:
                came_from[neighbor] = current
                frontier.appendleft(neighbor)

    if goal not in came_from:
        return None

    path = []
    current = goal
    while current != start:
        path.append(current)
        current = came_from[current]
    path.reverse()
    return path