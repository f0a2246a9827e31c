"""Keyboard handling and movement of the player."""

from __future__ import annotations

import re
from typing import Any

from .components import CombatStats, Player, Position, Viewshed
from .gamemap import Map
from .geometry import Point
from .logger import Logger
from .maths import clamp

_POLL_SECONDS = 0.2

_MOVES = {
    "KEY_UP": (0, -1),
    "KEY_DOWN": (0, 1),
    "KEY_LEFT": (-1, 0),
    "KEY_RIGHT": (1, 0),
}

_FUNCTION_KEY = re.compile(r"KEY_F(\d+)")


def try_move_player(app: Any, dx: int, dy: int) -> None:
    """Move the player by ``(dx, dy)``, or attack whatever fights there."""
    from .app import AppState

    world = app.world
    game_map = world.fetch(Map)
    logger = world.fetch(Logger)

    for _, _, position, viewshed in world.query(Player, Position, Viewshed):
        target_x, target_y = position.x + dx, position.y + dy
        if not game_map.is_inbound(target_x, target_y):
            continue
        index = game_map.index_of(target_x, target_y)

        if any(world.has(target, CombatStats) for target in game_map.content[index]):
            logger.add("Attack!")
            return

        if game_map.tiles[index].is_blocked():
            continue

        position.x = clamp(0, game_map.width - 1, target_x)
        position.y = clamp(0, game_map.height - 1, target_y)
        world.insert(Point(position.x, position.y))

        viewshed.dirty = True
        app.state = AppState.RUNNING


def handle_key(app: Any, key: Any) -> None:
    """React to one key press: quit, move, or switch tab with a function key."""
    from .app import AppState

    name = getattr(key, "name", None)
    if name == "KEY_ESCAPE" or (name is None and str(key) == "q"):
        app.state = AppState.CLOSING
    elif name in _MOVES:
        try_move_player(app, *_MOVES[name])
    elif name and (match := _FUNCTION_KEY.fullmatch(name)):
        app.tab = int(match.group(1))


def player_input(app: Any, terminal: Any) -> None:
    """Wait briefly for a key on ``terminal`` and handle it if one came."""
    key = terminal.inkey(timeout=_POLL_SECONDS)
    if key:
        handle_key(app, key)