"""
Players and the registry that tracks who is still in the match.

Tile counts are never stored: every query rescans the grid so the numbers
cannot drift from the board.
"""
from __future__ import annotations
import enum
import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Sequence, Tuple

from core.grid import Grid

logger = logging.getLogger(__name__)


class PlayerColor(enum.Enum):
    RED    = "Red"
    GREEN  = "Green"
    BLUE   = "Blue"
    YELLOW = "Yellow"

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return _RGB[self]


_RGB: Dict[PlayerColor, Tuple[int, int, int]] = {
    PlayerColor.RED:    (255,   0,   0),
    PlayerColor.GREEN:  (  0, 255,   0),
    PlayerColor.BLUE:   (  0,   0, 255),
    PlayerColor.YELLOW: (255, 255,   0),
}


@dataclass
class Player:
    id:             int
    color:          PlayerColor
    eliminated:     bool = False
    has_moved_once: bool = False

    @property
    def name(self) -> str:
        return self.color.value


class PlayerRegistry:
    def __init__(self, colors: Sequence[PlayerColor], grid: Grid):
        self._grid = grid
        self._players: List[Player] = [Player(i, color) for i, color in enumerate(colors)]

    # ───────────────────────────── lookup ────────────────────────────
    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, player: int) -> bool:
        return 0 <= player < len(self._players)

    def get(self, player: int) -> Player:
        return self._players[player]

    def by_color(self, color: PlayerColor) -> Player:
        for p in self._players:
            if p.color is color:
                return p
        raise KeyError(color)

    # ───────────────────────────── state ─────────────────────────────
    def tile_count(self, player: int) -> int:
        return self._grid.count_owned(player)

    def tile_counts(self) -> Dict[int, int]:
        owned = self._grid.owners()
        return {p.id: owned.get(p.id, 0) for p in self._players}

    def record_move(self, player: int) -> None:
        self._players[player].has_moved_once = True

    def is_eliminated(self, player: int) -> bool:
        return self._players[player].eliminated

    def mark_eliminated_if_empty(self, player: int) -> bool:
        """
        Eliminate *player* if they have moved at least once and own nothing.
        Returns True only when this call did the eliminating.
        """
        p = self._players[player]
        if p.eliminated or not p.has_moved_once:
            return False
        if self.tile_count(player) == 0:
            p.eliminated = True
            logger.info("%s player eliminated", p.name)
            return True
        return False

    def alive_players(self) -> List[int]:
        return [p.id for p in self._players if not p.eliminated]
