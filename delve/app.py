"""The game application: state, turn loop and the command that starts it."""

from __future__ import annotations

import argparse
from enum import Enum
from typing import Any

from .builder import rooms_and_corridors
from .ecs import World
from .logger import Logger
from .player import player_input
from .rng import Rng
from .spawner import build_player_entity, spawn_monsters
from .systems import map_indexing, monster_ai, visibility
from .ui import BottomBar, TopBar, render

DEFAULT_SEED = "Roguelike Dungeon"


class AppState(Enum):
    RUNNING = "running"
    CLOSING = "closing"
    PAUSED = "paused"


class App:
    """The running game: its world, selected tab and interface bars."""

    def __init__(self, rng: Rng | None = None) -> None:
        self.state = AppState.RUNNING
        self.world = World()
        self.tab = 1
        self.top_bar = TopBar(
            tab_list=["main tab", "second tab", "third tab"], selected_tab=1
        )
        self.bottom_bar = BottomBar()
        self.rng = rng if rng is not None else Rng.random_seed()

    def run_systems(self) -> None:
        """Advance the world by one turn."""
        visibility(self.world)
        map_indexing(self.world)
        monster_ai(self.world)

    def run(self, terminal: Any) -> None:
        """Alternate turns and key handling, drawing a frame after each, until closed."""
        while self.state is not AppState.CLOSING:
            if self.state is AppState.RUNNING:
                self.run_systems()
                self.state = AppState.PAUSED
            else:
                player_input(self, terminal)

            try:
                render(self, terminal)
            except OSError:
                self.world.fetch(Logger).add("Err: frame skipped")


def new_game(rng: Rng | None = None) -> App:
    """Build a dungeon, populate it and return an app ready to run."""
    app = App(rng if rng is not None else Rng.from_string(DEFAULT_SEED))
    game_map = rooms_and_corridors(app.rng)
    spawn_monsters(app.rng, app.world, game_map)

    player_point = game_map.starter_point
    build_player_entity(app.world, player_point)

    app.world.insert(Logger())
    app.world.insert(player_point)
    app.world.insert(game_map)
    return app


def main(argv: list[str] | None = None) -> int:
    """Start the game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="delve", description="Explore a generated dungeon in the terminal."
    )
    parser.add_argument(
        "--seed", default=DEFAULT_SEED, help="text the dungeon is generated from"
    )
    args = parser.parse_args(argv)

    from blessed import Terminal

    terminal = Terminal()
    app = new_game(Rng.from_string(args.seed))
    with terminal.fullscreen(), terminal.cbreak(), terminal.hidden_cursor():
        app.run(terminal)
    return 0