from types import SimpleNamespace

from blessed.keyboard import Keystroke

from delve.app import AppState
from delve.components import BlockPath, CombatStats, Player, Position, Viewshed
from delve.ecs import World
from delve.gamemap import Map
from delve.geometry import Point
from delve.logger import Logger
from delve.player import handle_key, player_input, try_move_player
from delve.systems import map_indexing
from delve.tile import Tile, TileKind


def _walled_map(width=12, height=12):
    game_map = Map(width, height, Tile(kind=TileKind.FLOOR))
    for y in range(height):
        for x in range(width):
            if x in (0, width - 1) or y in (0, height - 1):
                game_map.tiles[game_map.index_of(x, y)].kind = TileKind.WALL
    return game_map


def _app(start=Point(5, 5)):
    world = World()
    game_map = _walled_map()
    world.insert(game_map)
    world.insert(Logger())
    world.insert(start)
    position = Position(start.x, start.y)
    viewshed = Viewshed(range=8, dirty=False)
    world.spawn(position, viewshed, Player(), CombatStats(max_hp=50, defense=2, attack=6))
    app = SimpleNamespace(world=world, state=AppState.PAUSED, tab=1)
    return app, position, viewshed


class _FakeTerminal:
    def __init__(self, key):
        self.key = key
        self.timeouts = []

    def inkey(self, timeout=None):
        self.timeouts.append(timeout)
        return self.key


def test_move_onto_floor():
    app, position, viewshed = _app()
    try_move_player(app, 1, 0)
    assert position == Position(6, 5)
    assert app.world.fetch(Point) == Point(6, 5)
    assert viewshed.dirty is True
    assert app.state == AppState.RUNNING


def test_move_into_wall_is_refused():
    app, position, viewshed = _app(Point(1, 1))
    try_move_player(app, -1, 0)
    assert position == Position(1, 1)
    assert app.world.fetch(Point) == Point(1, 1)
    assert viewshed.dirty is False
    assert app.state == AppState.PAUSED


def test_move_into_fighter_attacks():
    app, position, _ = _app()
    app.world.spawn(Position(6, 5), BlockPath(), CombatStats(max_hp=18, defense=1, attack=3))
    map_indexing(app.world)
    try_move_player(app, 1, 0)
    assert app.world.fetch(Logger).entries == ("Attack!",)
    assert position == Position(5, 5)
    assert app.state == AppState.PAUSED


def test_q_closes():
    app, _, _ = _app()
    handle_key(app, Keystroke("q"))
    assert app.state == AppState.CLOSING


def test_escape_closes():
    app, _, _ = _app()
    handle_key(app, Keystroke("\x1b", name="KEY_ESCAPE"))
    assert app.state == AppState.CLOSING


def test_arrow_key_moves():
    app, position, _ = _app()
    handle_key(app, Keystroke("\x1b[A", name="KEY_UP"))
    assert position == Position(5, 4)
    handle_key(app, Keystroke("\x1b[D", name="KEY_LEFT"))
    assert position == Position(4, 4)


def test_function_key_selects_tab():
    app, _, _ = _app()
    handle_key(app, Keystroke("\x1bOR", name="KEY_F3"))
    assert app.tab == 3


def test_other_keys_change_nothing():
    app, position, _ = _app()
    handle_key(app, Keystroke("x"))
    assert (app.state, app.tab, position) == (AppState.PAUSED, 1, Position(5, 5))


def test_player_input_handles_key():
    app, _, _ = _app()
    terminal = _FakeTerminal(Keystroke("q"))
    player_input(app, terminal)
    assert app.state == AppState.CLOSING
    assert terminal.timeouts == [0.2]


def test_player_input_timeout_does_nothing():
    app, position, _ = _app()
    player_input(app, _FakeTerminal(Keystroke("")))
    assert (app.state, app.tab, position) == (AppState.PAUSED, 1, Position(5, 5))