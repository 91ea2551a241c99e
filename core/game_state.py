"""
GameState – one Color War match.

Owns the grid, the player registry and the turn manager.  ``apply_move`` is
the single mutating entry point; it either applies the whole move and its
cascade, or raises and leaves everything as it was.
"""
from __future__ import annotations
import enum
import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from core.errors     import (CellNotEmpty, DuplicateColor, EngineStalled, GameAlreadyOver,
                             InvalidPlayerCount, NotOwnedByPlayer, NotYourTurn, OutOfBounds)
from core.explosions import ExplosionEngine, ExplosionEvent
from core.grid       import FIRST_MOVE_POWER, Cell, Grid, Pos
from core.players    import Player, PlayerColor, PlayerRegistry
from core.turns      import TurnManager

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2
MAX_PLAYERS = 4


class StatusKind(enum.Enum):
    IN_PROGRESS = "in_progress"
    WON         = "won"


@dataclass(frozen=True)
class GameStatus:
    kind:   StatusKind
    winner: Optional[int] = None

    @property
    def is_over(self) -> bool:
        return self.kind is StatusKind.WON


IN_PROGRESS = GameStatus(StatusKind.IN_PROGRESS)


class GameState:
    def __init__(self, colors: Sequence[PlayerColor], rng: random.Random):
        self.grid    = Grid()
        self.players = PlayerRegistry(colors, self.grid)
        self.turns   = TurnManager.shuffled([p.id for p in self.players], rng)
        self.engine  = ExplosionEngine()
        self.last_explosions: List[ExplosionEvent] = []
        self._status = IN_PROGRESS
        self._halted: Optional[EngineStalled] = None

    # ───────────────────────────── queries ───────────────────────────
    def status(self) -> GameStatus:
        return self._status

    @property
    def current_player(self) -> int:
        return self.turns.current

    def player(self, player: int) -> Player:
        return self.players.get(player)

    def snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        return self.grid.snapshot()

    def tile_counts(self) -> Dict[int, int]:
        return self.players.tile_counts()

    def turn_message(self) -> str:
        if self._status.is_over:
            return f"{self.player(self._status.winner).name} player wins!"
        return f"{self.player(self.current_player).name} player's turn - Place your tile!"

    # ───────────────────────────── moves ─────────────────────────────
    def _validate(self, player: int, pos: Pos) -> Cell:
        if self._halted is not None:
            raise self._halted
        if self._status.is_over:
            raise GameAlreadyOver(f"match already won by player {self._status.winner}")
        if player != self.current_player:
            raise NotYourTurn(player, self.current_player)
        if not self.grid.in_bounds(pos):
            raise OutOfBounds(pos)

        cell = self.grid.get(pos)
        if not self.player(player).has_moved_once:
            if not cell.empty:
                raise CellNotEmpty(pos)
        elif cell.owner != player:
            raise NotOwnedByPlayer(player, pos)
        return cell

    def apply_move(self, player: int, pos: Pos) -> List[ExplosionEvent]:
        """
        Play *player*'s tile at *pos* and return the explosions it caused.

        A first move claims an empty cell at power 3; every later move adds
        one power to a cell the player already owns.
        """
        cell = self._validate(player, pos)
        first_move = not self.player(player).has_moved_once

        before = self.grid.copy()
        if first_move:
            placed = Cell(owner=player, power=FIRST_MOVE_POWER)
        else:
            placed = Cell(owner=player, power=cell.power + 1)
        self.grid.set(pos, placed)

        events: List[ExplosionEvent] = []
        if placed.overflowing:
            try:
                events = self.engine.resolve(self.grid, pos)
            except EngineStalled as exc:
                self.grid.restore(before)
                self._halted = exc
                raise

        if first_move:
            self.players.record_move(player)
        self.turns.turn_number += 1
        self.last_explosions = events

        for p in self.players:
            self.players.mark_eliminated_if_empty(p.id)
        self._status = self._compute_status()

        if self._status.is_over:
            logger.info("%s", self.turn_message())
        else:
            self.turns.advance(self.players)
        return events

    def _compute_status(self) -> GameStatus:
        alive = self.players.alive_players()
        if len(alive) == 1:
            return GameStatus(StatusKind.WON, alive[0])
        return IN_PROGRESS


def new_game(player_colors: Sequence[PlayerColor], rng_seed: Optional[int] = None) -> GameState:
    """
    Start a match for 2–4 distinct colours.  Turn order is a uniform random
    permutation drawn from ``random.Random(rng_seed)``.
    """
    colors = list(player_colors)
    if not MIN_PLAYERS <= len(colors) <= MAX_PLAYERS:
        raise InvalidPlayerCount(
            f"need {MIN_PLAYERS}-{MAX_PLAYERS} players, got {len(colors)}")
    if len(set(colors)) != len(colors):
        raise DuplicateColor(f"colours must be distinct: {[c.value for c in colors]}")

    state = GameState(colors, random.Random(rng_seed))
    logger.info("new game: %s, order %s", [c.value for c in colors],
                [state.player(i).name for i in state.turns.order])
    return state
