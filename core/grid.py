"""
Grid – the 8×8 play-field model.

Pure data, no rendering (see ``boards.grid_board`` for the pixel side).
The grid does *no* game rules either; it only:
    1. Stores one immutable ``Cell`` per (row, col).
    2. Rejects out-of-bounds coordinates.
    3. Answers neighbour and ownership queries.
"""
from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from core.errors import OutOfBounds

ROWS             = 8
COLS             = 8
CAPACITY         = 4     # same for every cell, corners included
FIRST_MOVE_POWER = 3

Pos = Tuple[int, int]

# up, down, left, right
_DIRS: Tuple[Pos, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class Cell:
    owner: Optional[int] = None
    power: int           = 0

    @property
    def empty(self) -> bool:
        return self.owner is None

    @property
    def overflowing(self) -> bool:
        return self.power > CAPACITY


EMPTY = Cell()


class Grid:
    def __init__(self) -> None:
        self.rows = ROWS
        self.cols = COLS
        self._cells: List[List[Cell]] = [[EMPTY for _ in range(COLS)] for _ in range(ROWS)]

    # ───────────────────────────── access ────────────────────────────
    def in_bounds(self, pos: Pos) -> bool:
        r, c = pos
        return 0 <= r < self.rows and 0 <= c < self.cols

    def _check(self, pos: Pos) -> None:
        if not self.in_bounds(pos):
            raise OutOfBounds(pos)

    def get(self, pos: Pos) -> Cell:
        self._check(pos)
        r, c = pos
        return self._cells[r][c]

    def set(self, pos: Pos, cell: Cell) -> None:
        self._check(pos)
        r, c = pos
        self._cells[r][c] = cell

    def neighbors(self, pos: Pos) -> List[Pos]:
        self._check(pos)
        r, c = pos
        return [(r + dr, c + dc) for dr, dc in _DIRS if self.in_bounds((r + dr, c + dc))]

    # ───────────────────────────── queries ───────────────────────────
    def positions(self) -> Iterator[Pos]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield r, c

    def count_owned(self, player: int) -> int:
        return sum(cell.owner == player for row in self._cells for cell in row)

    def owners(self) -> Counter:
        """Tiles per owner, empty cells excluded."""
        return Counter(cell.owner for row in self._cells for cell in row
                       if cell.owner is not None)

    def overflowing(self) -> List[Pos]:
        return [p for p in self.positions() if self.get(p).overflowing]

    def snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self._cells)

    def copy(self) -> Grid:
        dup = Grid()
        dup._cells = [list(row) for row in self._cells]
        return dup

    def restore(self, other: Grid) -> None:
        self._cells = [list(row) for row in other._cells]

    def __repr__(self) -> str:
        def fmt(cell: Cell) -> str:
            return "." if cell.empty else f"{cell.owner}{cell.power}"
        return "\n".join(" ".join(f"{fmt(cell):>2}" for cell in row) for row in self._cells)
