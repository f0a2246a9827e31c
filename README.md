# delve

A small roguelike that runs in your terminal. Each game builds a dungeon of
random rooms joined by L-shaped corridors. You see only what lies in your field
of view. Goblins and orcs wait in the rooms. Once one of them sees you, it steps
towards you along a path. When it is close it shouts insults instead.

## Installing

```
pip install .
```

The package needs Python 3.10 or later. It draws the screen with `blessed`.

## Playing

```
delve
delve --seed "some other text"
```

The dungeon is generated from the text given with `--seed`. The default is
`"Roguelike Dungeon"`, so a plain `delve` always starts with the same layout.

| Key               | Action                                   |
|-------------------|------------------------------------------|
| Arrow keys        | Move the player (`@`)                    |
| Function keys     | Select a tab; the top bar highlights it  |
| `q` or `Esc`      | Quit                                     |

The screen is laid out from top to bottom as follows:

- the tab bar;
- a 60×30 map view centred on the player;
- the message log, newest messages first;
- a line of shortcuts.

Tiles you have already seen stay on the map in grey. Tiles in view, and the
creatures standing on them, are drawn in colour.

### What the game does not do

The game has no real fighting. If you move into a creature that has combat
stats, the log says `Attack!`, but no hit points change and nobody dies.
Monsters never attack you either. The game has no items, no levels beyond the
first and no way to win or lose. It cannot save a game. The tab bar lists three
tabs, but only the main view is ever drawn.

## Using it as a library

You can use the parts of the game on their own:

```python
from delve.rng import Rng
from delve.builder import rooms_and_corridors
from delve.pathfinding import a_star, breadth_first

rng = Rng.from_string("Roguelike Dungeon")
game_map = rooms_and_corridors(rng)
print(game_map.width, game_map.height, len(game_map.rooms))

start = game_map.rooms[0].center_point()
goal = game_map.rooms[-1].center_point()
print(a_star(start, goal, game_map))         # list of points, empty if not found
print(breadth_first(start, goal, game_map))  # list of points, or None
```

`delve.app.new_game(rng)` returns an `App` that is ready to play: it holds the
dungeon, the player and the monsters. `App.run_systems()` advances the world
by one turn.

Modules:

- `delve.geometry`: `Point`, `Rect` and `get_line` (Bresenham lines).
- `delve.maths`: `clamp` and `order_value`.
- `delve.rng`: `Rng`, a seeded xorshift generator, and `hash_string`.
- `delve.tile`, `delve.gamemap`: `Tile`, `TileKind` and the `Map` grid.
- `delve.builder`: `MapBuilder`, `RandomRooms`, `Corridors`, `Empty` and
  `rooms_and_corridors`.
- `delve.pathfinding`: `a_star` (limited to 100 expansions) and `breadth_first`.
- `delve.components`: `Position`, `Renderable`, `Viewshed`, `Name`,
  `CombatStats` and the `Player`, `Monster` and `BlockPath` markers.
- `delve.ecs`: `World`, a minimal entity store with components and resources.
- `delve.spawner`: places the player and the monsters.
- `delve.systems`: `fov`, `visibility`, `map_indexing` and `monster_ai`.
- `delve.logger`: `Logger`, the message log.
- `delve.ui`: `camera`, `log_lines`, `TopBar`, `BottomBar` and `render`.
- `delve.cp437`: `to_cp437` and `to_char` for code page 437 glyphs.
- `delve.colors`: the palette and `rgb`.

## Running the tests

```
pip install ".[test]"
pytest
```