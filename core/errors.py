"""
Exceptions raised by the Color War engine.

Move errors are local and recoverable: the offending call changes nothing
and the same player simply tries again.  Setup errors come from
``new_game``.  ``EngineStalled`` means the chain-reaction loop blew its
safety cap, which only a logic bug can cause; it ends the match.
"""
from __future__ import annotations
from typing import Tuple


class ColorWarError(Exception):
    """Base exception for everything the engine raises."""
    recoverable: bool = False


# ───────────────────────────── moves ─────────────────────────────────
class MoveError(ColorWarError):
    """A rejected move.  No state was mutated."""
    recoverable = True


class OutOfBounds(MoveError):
    def __init__(self, pos: Tuple[int, int]):
        super().__init__(f"position {pos} is outside the board")
        self.pos = pos


class NotYourTurn(MoveError):
    def __init__(self, player: int, current: int):
        super().__init__(f"player {player} moved during player {current}'s turn")
        self.player  = player
        self.current = current


class GameAlreadyOver(MoveError):
    pass


class NotOwnedByPlayer(MoveError):
    def __init__(self, player: int, pos: Tuple[int, int]):
        super().__init__(f"player {player} does not own {pos}")
        self.player = player
        self.pos    = pos


class CellNotEmpty(MoveError):
    def __init__(self, pos: Tuple[int, int]):
        super().__init__(f"first move must go on an empty cell, {pos} is taken")
        self.pos = pos


# ───────────────────────────── setup ─────────────────────────────────
class SetupError(ColorWarError):
    pass


class InvalidPlayerCount(SetupError):
    pass


class DuplicateColor(SetupError):
    pass


# ───────────────────────────── engine ────────────────────────────────
class EngineStalled(ColorWarError):
    # aka the "this can't happen" exception: total board power strictly
    # drops on every explosion, so hitting the cap means the engine is broken
    pass
