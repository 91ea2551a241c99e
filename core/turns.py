"""
TurnManager – fixed turn order with a cursor.

The order is drawn once at match start.  Eliminated players are skipped
but stay in the permutation so the cursor arithmetic never shifts.
"""
from __future__ import annotations
import random
from typing import List, Sequence, Tuple

from core.players import PlayerRegistry


class TurnManager:
    def __init__(self, order: Sequence[int]):
        if not order:
            raise ValueError("turn order cannot be empty")
        self._order: Tuple[int, ...] = tuple(order)
        self._cursor = 0
        self.turn_number = 0   # moves completed so far

    @classmethod
    def shuffled(cls, players: Sequence[int], rng: random.Random) -> TurnManager:
        order: List[int] = list(players)
        rng.shuffle(order)
        return cls(order)

    @property
    def order(self) -> Tuple[int, ...]:
        return self._order

    @property
    def current(self) -> int:
        return self._order[self._cursor]

    def advance(self, registry: PlayerRegistry) -> int:
        """Move to the next player still in the match and return them."""
        if len(registry.alive_players()) <= 1:
            return self.current
        n = len(self._order)
        for _ in range(n):
            self._cursor = (self._cursor + 1) % n
            if not registry.is_eliminated(self.current):
                break
        return self.current
