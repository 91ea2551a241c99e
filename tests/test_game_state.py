"""Unit tests for the GameState aggregate and match setup."""

import random
import unittest

from core.errors import (CellNotEmpty, DuplicateColor, EngineStalled, GameAlreadyOver,
                         InvalidPlayerCount, MoveError, NotOwnedByPlayer, NotYourTurn,
                         OutOfBounds)
from core.explosions import ExplosionEngine
from core.game_state import GameState, StatusKind, new_game
from core.grid import CAPACITY, Cell, EMPTY
from core.players import PlayerColor
from core.turns import TurnManager

RED, BLUE, GREEN = 0, 1, 2


def make_game(*colors: PlayerColor, order=None) -> GameState:
    """A match with a known turn order (registration order by default)."""
    state = new_game(colors, rng_seed=0)
    state.turns = TurnManager(order if order is not None else range(len(colors)))
    return state


def seat(state: GameState, player: int, *cells) -> None:
    """Put *player* on the board as if they had already moved."""
    state.players.record_move(player)
    for pos, power in cells:
        state.grid.set(pos, Cell(player, power))


class TestNewGame(unittest.TestCase):
    """Tests for match setup."""

    def test_initial_state(self) -> None:
        state = new_game([PlayerColor.RED, PlayerColor.BLUE], rng_seed=5)
        self.assertEqual(state.status().kind, StatusKind.IN_PROGRESS)
        self.assertIsNone(state.status().winner)
        self.assertTrue(all(c == EMPTY for row in state.snapshot() for c in row))
        for p in state.players:
            self.assertFalse(p.eliminated)
            self.assertFalse(p.has_moved_once)
        self.assertEqual(state.current_player, state.turns.order[0])
        self.assertEqual(state.turns.turn_number, 0)

    def test_seed_fixes_turn_order(self) -> None:
        colors = list(PlayerColor)
        a = new_game(colors, rng_seed=11)
        b = new_game(colors, rng_seed=11)
        self.assertEqual(a.turns.order, b.turns.order)
        self.assertEqual(sorted(a.turns.order), [0, 1, 2, 3])

    def test_too_few_players(self) -> None:
        with self.assertRaises(InvalidPlayerCount):
            new_game([PlayerColor.RED])
        with self.assertRaises(InvalidPlayerCount):
            new_game([])

    def test_too_many_players(self) -> None:
        with self.assertRaises(InvalidPlayerCount):
            new_game(list(PlayerColor) + [PlayerColor.RED])

    def test_duplicate_color(self) -> None:
        with self.assertRaises(DuplicateColor):
            new_game([PlayerColor.RED, PlayerColor.BLUE, PlayerColor.RED])

    def test_setup_errors_are_not_move_errors(self) -> None:
        with self.assertRaises(InvalidPlayerCount) as ctx:
            new_game([PlayerColor.RED])
        self.assertNotIsInstance(ctx.exception, MoveError)
        self.assertFalse(ctx.exception.recoverable)


class TestFirstMoves(unittest.TestCase):
    """Tests for the first-move placement rule."""

    def setUp(self) -> None:
        self.state = make_game(PlayerColor.RED, PlayerColor.BLUE)

    def test_first_move_places_three(self) -> None:
        events = self.state.apply_move(RED, (2, 2))
        self.assertEqual(events, [])
        self.assertEqual(self.state.grid.get((2, 2)), Cell(RED, 3))
        self.assertTrue(self.state.player(RED).has_moved_once)
        self.assertEqual(self.state.current_player, BLUE)
        self.assertEqual(self.state.turns.turn_number, 1)

    def test_first_move_on_every_cell(self) -> None:
        for pos in self.state.grid.positions():
            state = make_game(PlayerColor.RED, PlayerColor.BLUE)
            state.apply_move(RED, pos)
            self.assertEqual(state.grid.get(pos), Cell(RED, 3))

    def test_first_move_on_occupied_cell(self) -> None:
        self.state.apply_move(RED, (2, 2))
        with self.assertRaises(CellNotEmpty):
            self.state.apply_move(BLUE, (2, 2))

    def test_unmoved_player_not_eliminated(self) -> None:
        state = make_game(PlayerColor.RED, PlayerColor.BLUE, PlayerColor.GREEN)
        state.apply_move(RED, (0, 0))
        self.assertEqual(state.players.alive_players(), [RED, BLUE, GREEN])
        self.assertFalse(state.status().is_over)


class TestMoveErrors(unittest.TestCase):
    """Rejected moves change nothing."""

    def setUp(self) -> None:
        self.state = make_game(PlayerColor.RED, PlayerColor.BLUE)
        self.state.apply_move(RED, (0, 0))
        self.state.apply_move(BLUE, (7, 7))

    def assertUnchanged(self, move) -> None:
        before = self.state.snapshot()
        current = self.state.current_player
        turn = self.state.turns.turn_number
        with self.assertRaises(MoveError):
            move()
        self.assertEqual(self.state.snapshot(), before)
        self.assertEqual(self.state.current_player, current)
        self.assertEqual(self.state.turns.turn_number, turn)

    def test_not_your_turn(self) -> None:
        with self.assertRaises(NotYourTurn):
            self.state.apply_move(BLUE, (7, 7))
        self.assertUnchanged(lambda: self.state.apply_move(BLUE, (7, 7)))

    def test_unknown_player(self) -> None:
        with self.assertRaises(NotYourTurn):
            self.state.apply_move(9, (0, 0))

    def test_out_of_bounds(self) -> None:
        with self.assertRaises(OutOfBounds):
            self.state.apply_move(RED, (8, 0))
        self.assertUnchanged(lambda: self.state.apply_move(RED, (-1, 3)))

    def test_not_owned(self) -> None:
        with self.assertRaises(NotOwnedByPlayer):
            self.state.apply_move(RED, (7, 7))
        with self.assertRaises(NotOwnedByPlayer):
            self.state.apply_move(RED, (4, 4))
        self.assertUnchanged(lambda: self.state.apply_move(RED, (4, 4)))

    def test_errors_are_recoverable(self) -> None:
        with self.assertRaises(MoveError) as ctx:
            self.state.apply_move(BLUE, (7, 7))
        self.assertTrue(ctx.exception.recoverable)
        # same player can still move afterwards
        self.state.apply_move(RED, (0, 0))
        self.assertEqual(self.state.grid.get((0, 0)), Cell(RED, 4))


class TestScenarios(unittest.TestCase):
    """End-to-end move sequences."""

    def test_corner_explosion(self) -> None:
        state = make_game(PlayerColor.RED, PlayerColor.BLUE)
        state.apply_move(RED, (0, 0))
        self.assertEqual(state.grid.get((0, 0)), Cell(RED, 3))
        state.apply_move(BLUE, (7, 7))
        self.assertEqual(state.grid.get((7, 7)), Cell(BLUE, 3))

        self.assertEqual(state.apply_move(RED, (0, 0)), [])
        self.assertEqual(state.grid.get((0, 0)), Cell(RED, 4))
        state.apply_move(BLUE, (7, 7))

        events = state.apply_move(RED, (0, 0))
        self.assertEqual(len(events), 1)
        self.assertEqual(state.grid.get((0, 0)), EMPTY)
        self.assertEqual(state.grid.get((0, 1)), Cell(RED, 1))
        self.assertEqual(state.grid.get((1, 0)), Cell(RED, 1))
        self.assertEqual(state.tile_counts(), {RED: 2, BLUE: 1})
        self.assertEqual(state.last_explosions, events)
        self.assertEqual(state.current_player, BLUE)

    def test_chain_capture_across_players(self) -> None:
        state = make_game(PlayerColor.RED, PlayerColor.BLUE)
        seat(state, RED, ((3, 3), 4))
        seat(state, BLUE, ((3, 4), 4), ((6, 6), 1))

        events = state.apply_move(RED, (3, 3))
        self.assertEqual([(e.position, e.player) for e in events],
                         [((3, 3), RED), ((3, 4), RED)])
        self.assertEqual(state.grid.get((3, 4)), EMPTY)
        for q in [(2, 3), (4, 3), (3, 2), (3, 3), (2, 4), (4, 4), (3, 5)]:
            self.assertEqual(state.grid.get(q).owner, RED)
        self.assertEqual(state.tile_counts()[BLUE], 1)
        self.assertFalse(state.status().is_over)

    def test_elimination_skips_player(self) -> None:
        state = make_game(PlayerColor.RED, PlayerColor.BLUE, PlayerColor.GREEN)
        seat(state, RED, ((3, 3), 4))
        seat(state, BLUE, ((3, 4), 1))
        seat(state, GREEN, ((7, 0), 2))

        state.apply_move(RED, (3, 3))
        self.assertTrue(state.player(BLUE).eliminated)
        self.assertEqual(state.tile_counts()[BLUE], 0)
        self.assertEqual(state.current_player, GREEN)
        self.assertFalse(state.status().is_over)

        state.apply_move(GREEN, (7, 0))
        self.assertEqual(state.current_player, RED)

    def test_win(self) -> None:
        state = make_game(PlayerColor.RED, PlayerColor.BLUE)
        seat(state, RED, ((3, 3), 4))
        seat(state, BLUE, ((3, 4), 1))

        state.apply_move(RED, (3, 3))
        status = state.status()
        self.assertEqual(status.kind, StatusKind.WON)
        self.assertEqual(status.winner, RED)
        self.assertEqual(state.turn_message(), "Red player wins!")

        before = state.snapshot()
        for player, pos in [(RED, (2, 3)), (BLUE, (0, 0))]:
            with self.assertRaises(GameAlreadyOver):
                state.apply_move(player, pos)
        self.assertEqual(state.snapshot(), before)

    def test_turn_message(self) -> None:
        state = make_game(PlayerColor.YELLOW, PlayerColor.GREEN)
        self.assertEqual(state.turn_message(), "Yellow player's turn - Place your tile!")


class TestEngineStalled(unittest.TestCase):
    """A blown explosion cap halts the match without touching the board."""

    def setUp(self) -> None:
        self.state = make_game(PlayerColor.RED, PlayerColor.BLUE)
        seat(self.state, RED, ((0, 0), 4))
        seat(self.state, BLUE, ((7, 7), 1))
        self.state.engine = ExplosionEngine(max_explosions=0)

    def test_rolls_back_and_halts(self) -> None:
        before = self.state.snapshot()
        with self.assertRaises(EngineStalled) as ctx:
            self.state.apply_move(RED, (0, 0))
        self.assertNotIsInstance(ctx.exception, MoveError)
        self.assertEqual(self.state.snapshot(), before)
        self.assertEqual(self.state.current_player, RED)

        with self.assertRaises(EngineStalled):
            self.state.apply_move(RED, (0, 0))


class TestInvariants(unittest.TestCase):
    """Random legal play keeps the board consistent."""

    def legal_move(self, state: GameState, rng: random.Random):
        player = state.current_player
        if state.player(player).has_moved_once:
            options = [p for p in state.grid.positions() if state.grid.get(p).owner == player]
        else:
            options = [p for p in state.grid.positions() if state.grid.get(p).empty]
        return player, rng.choice(options)

    def check(self, state: GameState) -> None:
        cells = [c for row in state.snapshot() for c in row]
        for cell in cells:
            self.assertTrue(0 <= cell.power <= CAPACITY)
            if cell.owner is None:
                self.assertEqual(cell.power, 0)
        occupied = sum(not c.empty for c in cells)
        self.assertEqual(sum(state.players.tile_count(p.id) for p in state.players), occupied)
        for p in state.players:
            if not p.has_moved_once:
                self.assertFalse(p.eliminated)
        if not state.status().is_over:
            self.assertFalse(state.player(state.current_player).eliminated)

    def test_random_matches(self) -> None:
        for seed in range(6):
            rng = random.Random(seed)
            state = new_game(list(PlayerColor)[: 2 + seed % 3], rng_seed=seed)
            for _ in range(400):
                if state.status().is_over:
                    break
                player, pos = self.legal_move(state, rng)
                state.apply_move(player, pos)
                self.check(state)
            if state.status().is_over:
                winner = state.status().winner
                self.assertEqual(state.players.alive_players(), [winner])
                self.assertGreater(state.tile_counts()[winner], 0)


if __name__ == "__main__":
    unittest.main()
