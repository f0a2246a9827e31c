"""Screen layout: tab bar, camera view, message log and shortcut bar."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import groupby
from typing import Any

from .colors import YELLOW2, rgb
from .components import Cell, Position, Renderable
from .ecs import World
from .gamemap import Map
from .geometry import Point
from .logger import Logger

CAMERA_WIDTH = 60
CAMERA_HEIGHT = 30

_SIDE_MARGIN = 5
_BAR_HEIGHT = 2
_LOG_HEIGHT = 10
_LOG_ENTRIES = 8
_TAB_INDENT = 3

_BLANK = Cell(" ")


@dataclass
class TopBar:
    """The row of tab names, with the selected tab highlighted."""

    tab_list: list[str] = field(default_factory=list)
    selected_tab: int = 1

    def spans(self) -> list[Cell]:
        """One styled span per tab, numbered from F1."""
        return [
            Cell(f"[F{i}] {name}     ", YELLOW2 if i == self.selected_tab else None)
            for i, name in enumerate(self.tab_list, start=1)
        ]


@dataclass(frozen=True)
class BottomBar:
    """The line of keyboard shortcuts under the main view."""

    def spans(self) -> list[Cell]:
        return [Cell(" [←↑↓→] Move ")]


def camera(world: World, width: int, height: int) -> list[list[Cell]]:
    """The part of the map around the player, as rows of cells.

    Row 0 and column 0 are left blank; unrevealed and off-map cells are
    blank too. Entities are drawn only on tiles currently in view.
    """
    game_map = world.fetch(Map)
    player = world.fetch(Point)
    dx = player.x - width // 2
    dy = player.y - height // 2

    lines = [[_BLANK] * width for _ in range(height)]
    for y in range(1, height):
        for x in range(1, width):
            cx, cy = x + dx, y + dy
            if not game_map.is_inbound(cx, cy):
                continue
            tile = game_map.tiles[game_map.index_of(cx, cy)]
            if tile.revealed:
                lines[y][x] = tile.renderable().draw()

    for _, position, look in world.query(Position, Renderable):
        if not game_map.is_inbound(position.x, position.y):
            continue
        if not game_map.tiles[game_map.index_of(position.x, position.y)].visible:
            continue
        x, y = position.x - dx, position.y - dy
        if 0 <= y < height and 0 <= x < width:
            lines[y][x] = look.draw()

    return lines


def log_lines(world: World) -> list[str]:
    """The newest log messages, indented, newest first."""
    return ["  " + entry for entry in world.fetch(Logger).last_entries(_LOG_ENTRIES)]


class _Canvas:
    """A clipped grid of cells that a frame is composed on."""

    def __init__(self, width: int, height: int) -> None:
        self.width = max(width, 0)
        self.height = max(height, 0)
        self.cells = [[_BLANK] * self.width for _ in range(self.height)]

    def put(self, x: int, y: int, cell: Cell) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self.cells[y][x] = cell

    def write(self, x: int, y: int, spans: list[Cell], width: int) -> None:
        """Write spans left to right from ``(x, y)``, cut off after ``width`` cells."""
        column = x
        for span in spans:
            for char in span.text:
                if column >= x + width:
                    return
                self.put(column, y, Cell(char, span.fg, span.bg))
                column += 1

    def box(self, x: int, y: int, width: int, height: int, title: str) -> None:
        """Draw a plain single-line border with a title on its top edge."""
        if width < 1 or height < 1:
            return
        right, bottom = x + width - 1, y + height - 1
        for cx in range(x + 1, right):
            self.put(cx, y, Cell("─"))
            self.put(cx, bottom, Cell("─"))
        for cy in range(y + 1, bottom):
            self.put(x, cy, Cell("│"))
            self.put(right, cy, Cell("│"))
        self.put(x, y, Cell("┌"))
        self.put(right, y, Cell("┐"))
        self.put(x, bottom, Cell("└"))
        self.put(right, bottom, Cell("┘"))
        self.write(x + 1, y, [Cell(title)], width - 2)

    def plain_rows(self) -> list[str]:
        return ["".join(cell.text for cell in row) for row in self.cells]

    def styled(self, terminal: Any) -> str:
        parts = []
        for y, row in enumerate(self.cells):
            parts.append(terminal.move_xy(0, y))
            for (fg, bg), group in groupby(row, key=lambda cell: (cell.fg, cell.bg)):
                text = "".join(cell.text for cell in group)
                if fg is None and bg is None:
                    parts.append(text)
                    continue
                prefix = ""
                if fg is not None:
                    prefix += terminal.color_rgb(*rgb(fg))
                if bg is not None:
                    prefix += terminal.on_color_rgb(*rgb(bg))
                parts.append(prefix + text + terminal.normal)
        return "".join(parts)


def render(app: Any, terminal: Any) -> list[str]:
    """Draw one frame of ``app`` on ``terminal`` and return its plain text rows."""
    canvas = _Canvas(terminal.width, terminal.height)
    left = _SIDE_MARGIN

    app.top_bar.selected_tab = app.tab
    canvas.write(left + _TAB_INDENT, 0, app.top_bar.spans(), CAMERA_WIDTH - _TAB_INDENT)

    camera_top = _BAR_HEIGHT
    for y, line in enumerate(camera(app.world, CAMERA_WIDTH, CAMERA_HEIGHT)):
        canvas.write(left, camera_top + y, line, CAMERA_WIDTH)
    canvas.box(left, camera_top, CAMERA_WIDTH, CAMERA_HEIGHT, " Top Block ")

    log_top = camera_top + CAMERA_HEIGHT
    for y, text in enumerate(log_lines(app.world)[:_LOG_HEIGHT]):
        canvas.write(left, log_top + y, [Cell(text)], CAMERA_WIDTH)
    canvas.box(left, log_top, CAMERA_WIDTH, _LOG_HEIGHT, " Bottom Block ")

    canvas.write(left, log_top + _LOG_HEIGHT, app.bottom_bar.spans(), CAMERA_WIDTH)

    terminal.stream.write(canvas.styled(terminal))
    terminal.stream.flush()
    return canvas.plain_rows()