import random
import unittest

from connect4.core.board import Board
from connect4.core.rules import (
    check_winner,
    check_winner_with_line,
    find_win,
    is_draw,
    is_win,
    wins_through,
)
from connect4.game.actions import attempt_drop
from connect4.game.results import Placed, WIN
from connect4.game.state import new_game


def _board_with(cells, player=1, rows=6, cols=7):
    b = Board(rows=rows, cols=cols)
    for (r, c) in cells:
        b.grid[r][c] = player
    return b


class TestWinDetection(unittest.TestCase):
    def test_horizontal(self):
        b = _board_with([(5, 2), (5, 3), (5, 4), (5, 5)])
        self.assertTrue(is_win(b, 1))
        self.assertFalse(is_win(b, 2))

    def test_vertical(self):
        b = _board_with([(1, 6), (2, 6), (3, 6), (4, 6)], player=2)
        self.assertTrue(is_win(b, 2))
        self.assertEqual(check_winner(b), 2)

    def test_diagonal_down_right(self):
        b = _board_with([(0, 0), (1, 1), (2, 2), (3, 3)])
        self.assertTrue(is_win(b, 1))

    def test_diagonal_down_left(self):
        b = _board_with([(5, 0), (4, 1), (3, 2), (2, 3)])
        line = find_win(b, 1)
        self.assertIsNotNone(line)
        self.assertEqual(set(line), {(5, 0), (4, 1), (3, 2), (2, 3)})

    def test_three_in_a_row_is_not_a_win(self):
        b = _board_with([(5, 0), (5, 1), (5, 2)])
        self.assertFalse(is_win(b, 1))
        self.assertIsNone(check_winner_with_line(b))

    def test_runs_do_not_wrap_around_edges(self):
        b = _board_with([(5, 5), (5, 6), (4, 0), (4, 1)])
        self.assertFalse(is_win(b, 1))

    def test_mixed_line_is_not_a_win(self):
        b = _board_with([(5, 0), (5, 1), (5, 3)])
        b.grid[5][2] = 2
        self.assertFalse(is_win(b, 1))
        self.assertFalse(is_win(b, 2))

    def test_narrow_board_never_wins_horizontally(self):
        b = _board_with([(0, 0), (0, 1), (0, 2)], rows=1, cols=3)
        self.assertFalse(is_win(b, 1))
        self.assertTrue(is_draw(b))

    def test_winning_full_board_is_not_a_draw(self):
        b = _board_with([(0, c) for c in range(4)], rows=1, cols=4)
        self.assertFalse(is_draw(b))


class TestThroughCellScan(unittest.TestCase):
    def test_wins_through_needs_the_cell_to_be_the_players(self):
        b = _board_with([(5, 0), (5, 1), (5, 2), (5, 3)])
        self.assertTrue(wins_through(b, 5, 1, 1))
        self.assertFalse(wins_through(b, 4, 1, 1))
        self.assertFalse(wins_through(b, 5, 1, 2))
        self.assertFalse(wins_through(b, 9, 9, 1))

    def test_given_random_games_then_both_scans_agree_on_every_move(self):
        rng = random.Random(1337)
        for _ in range(200):
            state = new_game()
            while not state.is_over:
                mover = state.current
                res = attempt_drop(state, rng.choice(state.board.valid_moves()))
                self.assertIsInstance(res, Placed)
                self.assertEqual(
                    wins_through(state.board, res.row, res.column, mover),
                    res.outcome == WIN,
                )


if __name__ == "__main__":
    unittest.main()
