import io

import pytest

from delve.app import App, AppState, main, new_game
from delve.components import Player, Position, Renderable
from delve.gamemap import Map
from delve.geometry import Point
from delve.logger import Logger
from delve.rng import Rng


class FakeKey(str):
    def __new__(cls, text, name=None):
        key = super().__new__(cls, text)
        key.name = name
        return key


class BrokenStream:
    def write(self, text):
        raise OSError("terminal gone")

    def flush(self):
        raise OSError("terminal gone")


class FakeTerminal:
    def __init__(self, keys=(), stream=None):
        self.width = 80
        self.height = 50
        self.stream = stream if stream is not None else io.StringIO()
        self.normal = ""
        self._keys = list(keys)

    def move_xy(self, x, y):
        return ""

    def color_rgb(self, r, g, b):
        return ""

    def on_color_rgb(self, r, g, b):
        return ""

    def inkey(self, timeout=None):
        return self._keys.pop(0) if self._keys else FakeKey("")


ESCAPE = FakeKey("\x1b", "KEY_ESCAPE")


def test_app_defaults():
    app = App(Rng(1))
    assert app.state is AppState.RUNNING
    assert app.tab == 1
    assert app.top_bar.tab_list == ["main tab", "second tab", "third tab"]
    assert app.top_bar.selected_tab == 1
    assert app.rng.seed == 1


def test_new_game_places_player_at_start():
    app = new_game(Rng.from_string("Roguelike Dungeon"))
    game_map = app.world.fetch(Map)
    players = list(app.world.query(Player, Position, Renderable))
    assert len(players) == 1
    _, _, position, look = players[0]
    assert Point(position.x, position.y) == game_map.starter_point
    assert app.world.fetch(Point) == game_map.starter_point
    assert look.glyph == "@"
    assert len(app.world.fetch(Logger)) == 0


def test_new_game_is_deterministic():
    first = new_game(Rng.from_string("Roguelike Dungeon"))
    second = new_game(Rng.from_string("Roguelike Dungeon"))
    first_positions = [(p.x, p.y) for _, p in first.world.query(Position)]
    second_positions = [(p.x, p.y) for _, p in second.world.query(Position)]
    assert first_positions == second_positions
    assert first.world.fetch(Map).rooms == second.world.fetch(Map).rooms


def test_run_systems_reveals_and_indexes_player_tile():
    app = new_game(Rng.from_string("Roguelike Dungeon"))
    app.run_systems()
    game_map = app.world.fetch(Map)
    player_entity, _, position = next(app.world.query(Player, Position))
    index = game_map.index_of(position.x, position.y)
    assert game_map.tiles[index].visible
    assert game_map.tiles[index].revealed
    assert player_entity in game_map.content[index]


def test_run_switches_tab_then_closes_on_escape():
    app = new_game(Rng.from_string("Roguelike Dungeon"))
    terminal = FakeTerminal(keys=[FakeKey("\x1bOQ", "KEY_F2"), ESCAPE])
    app.run(terminal)
    assert app.state is AppState.CLOSING
    assert app.tab == 2
    assert app.top_bar.selected_tab == 2
    assert "Top Block" in terminal.stream.getvalue()


def test_run_closes_on_q():
    app = new_game(Rng.from_string("Roguelike Dungeon"))
    app.run(FakeTerminal(keys=[FakeKey("q")]))
    assert app.state is AppState.CLOSING


def test_run_logs_skipped_frames():
    app = new_game(Rng.from_string("Roguelike Dungeon"))
    app.run(FakeTerminal(keys=[ESCAPE], stream=BrokenStream()))
    assert app.world.fetch(Logger).entries.count("Err: frame skipped") == 2


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0