"""Tap To On: a lights-out puzzle where every light has to be switched on.

Tapping a light flips it and its four neighbours. The board is read from a
text file whose first line holds the side length ``n`` and whose next ``n``
lines hold ``n`` characters each, ``1`` for a lit light.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

CLEAR_MESSAGE = "Clear! Restart: R key"
DEFAULT_SIZE = 500
LIGHT_RADIUS = 20.0
LIGHT_PHASE = math.pi * 36 / 360
LIGHT_VERTEXES = 5


class Board:
    """A square grid of lights, indexed ``lights[py][px]``."""

    def __init__(self, lights: Iterable[Iterable[bool]]) -> None:
        rows = [[bool(light) for light in row] for row in lights]
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("the board must be square")
        self.lights: List[List[bool]] = rows

    @property
    def size(self) -> int:
        """The number of lights along each side."""
        return len(self.lights)

    @classmethod
    def from_text(cls, text: str) -> "Board":
        """Parse a board from its text form."""
        lines = text.splitlines()
        if not lines:
            raise ValueError("the board description is empty")
        size = int(lines[0])
        if size < 0:
            raise ValueError(f"the board size must not be negative, got {size}")
        rows = lines[1 : size + 1]
        if len(rows) < size:
            raise ValueError(f"expected {size} rows of lights, found {len(rows)}")
        lights = []
        for number, line in enumerate(rows, start=2):
            if len(line) < size:
                raise ValueError(f"line {number} holds fewer than {size} lights")
            lights.append([char == "1" for char in line[:size]])
        return cls(lights)

    @classmethod
    def load(cls, path: "str | Path") -> "Board":
        """Read a board from a file."""
        return cls.from_text(Path(path).read_text(encoding="utf-8"))

    def toggle(self, px: int, py: int) -> None:
        """Flip the light at ``(px, py)`` and its neighbours inside the board."""
        size = self.size
        if not (0 <= px < size and 0 <= py < size):
            raise IndexError(f"({px}, {py}) is outside a {size}x{size} board")
        for x, y in ((px, py), (px, py + 1), (px + 1, py), (px, py - 1), (px - 1, py)):
            if 0 <= x < size and 0 <= y < size:
                self.lights[y][x] = not self.lights[y][x]

    def lit_count(self) -> int:
        """Return how many lights are on."""
        return sum(row.count(True) for row in self.lights)

    def is_cleared(self) -> bool:
        """Return whether every light is on."""
        return self.lit_count() == self.size * self.size


@dataclass(frozen=True)
class Cell:
    """A light as laid out on screen, centred on ``(x, y)`` around the window centre."""

    px: int
    py: int
    x: float
    y: float
    lit: bool


class TapToOn:
    """The game: a board, a window size and the state of the mouse."""

    def __init__(
        self, path: "str | Path", width: int = DEFAULT_SIZE, height: int = DEFAULT_SIZE
    ) -> None:
        self.path = Path(path)
        self.board = Board.load(self.path)
        self.width = width
        self.height = height
        self.radius = LIGHT_RADIUS
        self.phase = LIGHT_PHASE
        self.playing = True
        self.running = True
        self.left_click = False
        self.clicked = False
        self.click_pos: Tuple[int, int] = (0, 0)
        self._click_handled = False

    def cell_centers(self) -> List[Cell]:
        """Return every light with its screen position, top row first."""
        size = self.board.size
        cells = []
        for row_index, row in enumerate(self.board.lights):
            py = size - 1 - row_index
            for px, lit in enumerate(row):
                x = self.width * (px - size / 2 + 0.5) * 0.8 / size
                y = self.height * (py - size / 2 + 0.5) * 0.8 / size
                cells.append(Cell(px, py, x, y, lit))
        return cells

    def mouse(self, left: bool, pressed: bool, x: int, y: int) -> None:
        """Record a mouse button going down (``pressed``) or up at window ``(x, y)``."""
        self.left_click = left
        if pressed:
            self.clicked = True
        else:
            self.clicked = False
            self._click_handled = False
        self.click_pos = (x, y)

    def update(self) -> bool:
        """Apply a pending tap and return whether the board is cleared.

        A press flips at most one light group until the button is released.
        """
        if self.clicked and not self._click_handled:
            click_x, click_y = self.click_pos
            half_w, half_h = self.width // 2, self.height // 2
            for cell in self.cell_centers():
                distance_sq = (click_x - cell.x - half_w) ** 2 + (click_y - cell.y - half_h) ** 2
                if distance_sq <= self.radius**2:
                    self.board.toggle(cell.px, cell.py)
                    self._click_handled = True
                    break
        cleared = self.board.is_cleared()
        if cleared:
            self.playing = False
        return cleared

    def handle_key(self, key: str) -> None:
        """Apply one key press: ``r`` reloads the board, space pauses, ``q`` quits."""
        if key == "q":
            self.running = False
        elif key == "r":
            self.board = Board.load(self.path)
            self.playing = True
        elif key == " ":
            self.playing = not self.playing


def _render(board: Board) -> str:
    return "\n".join("".join("1" if lit else "0" for lit in row) for row in board.lights)


def _tap(game: TapToOn, px: int, py: int) -> bool:
    for cell in game.cell_centers():
        if (cell.px, cell.py) == (px, py):
            x = round(cell.x + game.width // 2)
            y = round(cell.y + game.height // 2)
            game.mouse(True, True, x, y)
            game.update()
            game.mouse(True, False, x, y)
            return True
    return False


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play on the terminal: ``px py`` taps a light, ``r`` restarts, ``p`` pauses, ``q`` quits."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: taptoon map/map_data.txt", file=sys.stderr)
        return 1
    try:
        game = TapToOn(args[0])
    except (OSError, ValueError) as exc:
        print(f"cannot load the board: {exc}", file=sys.stderr)
        return 1
    print(f"Window Size: ({game.width}, {game.height})")
    print(_render(game.board))
    for line in sys.stdin:
        command = line.strip()
        if command == "q":
            game.handle_key("q")
            print("Quit")
            break
        if command == "r":
            game.handle_key("r")
        elif command == "p":
            game.handle_key(" ")
        else:
            parts = command.split()
            try:
                px, py = (int(part) for part in parts)
            except ValueError:
                print(f"unknown command: {command!r}", file=sys.stderr)
                continue
            if not _tap(game, px, py):
                print(f"no light at ({px}, {py})", file=sys.stderr)
                continue
        print(_render(game.board))
        if game.update():
            print(CLEAR_MESSAGE)
    return 0