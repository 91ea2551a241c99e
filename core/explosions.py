"""
ExplosionEngine – resolves chain reactions.

A cell whose power goes above ``CAPACITY`` explodes: it is emptied and each
orthogonal neighbour is captured by the exploding player and gains one
power.  Neighbours pushed over capacity explode in turn.  Resolution is an
explicit FIFO queue rather than recursion, and every explosion is recorded
as an ``ExplosionEvent`` so a renderer can replay the cascade wave by wave.
"""
from __future__ import annotations
import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple

from core.errors import EngineStalled
from core.grid   import CAPACITY, COLS, ROWS, Cell, EMPTY, Grid, Pos

logger = logging.getLogger(__name__)

MAX_EXPLOSIONS = ROWS * COLS * (CAPACITY + 1)


@dataclass(frozen=True)
class ExplosionEvent:
    wave:      int
    position:  Pos
    player:    Optional[int]
    neighbors: Tuple[Pos, ...]


class ExplosionEngine:
    def __init__(self, max_explosions: int = MAX_EXPLOSIONS):
        self.max_explosions = max_explosions

    def resolve(self, grid: Grid, trigger: Pos) -> List[ExplosionEvent]:
        """
        Drive *grid* to a settled state starting from *trigger*.

        Returns the explosions in the order they happened.  A position may
        sit in the queue more than once; stale entries are skipped when
        dequeued.
        """
        queue: Deque[Tuple[Pos, int]] = deque([(trigger, 0)])
        events: List[ExplosionEvent] = []

        while queue:
            pos, wave = queue.popleft()
            cell = grid.get(pos)
            if cell.power <= CAPACITY:
                continue
            if len(events) >= self.max_explosions:
                raise EngineStalled(
                    f"chain reaction from {trigger} exceeded {self.max_explosions} explosions")

            player = cell.owner
            grid.set(pos, EMPTY)
            nbrs = grid.neighbors(pos)
            for q in nbrs:
                hit = Cell(owner=player, power=grid.get(q).power + 1)
                grid.set(q, hit)
                if hit.overflowing:
                    queue.append((q, wave + 1))

            events.append(ExplosionEvent(wave, pos, player, tuple(nbrs)))
            logger.debug("explode %s wave=%d player=%s -> %s", pos, wave, player, nbrs)

        if events:
            logger.debug("cascade from %s settled after %d explosions in %d waves",
                         trigger, len(events), events[-1].wave + 1)
        return events
