"""
Tests for win detection.
"""

from itertools import permutations

import pytest

from logic.board import Mark, empty_board, place
from logic.win_checker import WinChecker


@pytest.fixture
def checker() -> WinChecker:
    return WinChecker()


class TestCheckWinner:
    """Tests for check_winner."""

    def test_empty_board_has_no_winner(self, checker):
        assert checker.check_winner(empty_board()) is None

    @pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
    @pytest.mark.parametrize("mark", [Mark.FIRST, Mark.SECOND])
    def test_every_line_wins(self, checker, line, mark):
        board = empty_board()
        for index in line:
            board = place(board, index, mark)

        assert checker.check_winner(board) == mark

    def test_two_of_three_is_not_a_win(self, checker, make_board):
        assert checker.check_winner(make_board("XX.OO....")) is None

    def test_mixed_line_is_not_a_win(self, checker, make_board):
        assert checker.check_winner(make_board("XOX......")) is None

    def test_diagonal_win(self, checker, make_board):
        assert checker.check_winner(make_board("O.X.X.X.O")) == Mark.FIRST

    def test_first_line_in_order_breaks_ties(self, checker, make_board):
        # Not reachable in a real game: O has row 0, X has row 1
        assert checker.check_winner(make_board("OOOXXX...")) == Mark.SECOND

    def test_placement_order_does_not_matter(self, checker):
        moves = [(0, Mark.FIRST), (4, Mark.FIRST), (8, Mark.FIRST),
                 (1, Mark.SECOND), (2, Mark.SECOND)]

        results = set()
        for order in permutations(moves):
            board = empty_board()
            for index, mark in order:
                board = place(board, index, mark)
            results.add(checker.check_winner(board))

        assert results == {Mark.FIRST}

    def test_board_is_not_modified(self, checker, make_board):
        board = make_board("XXXOO....")
        before = tuple(board)

        checker.check_winner(board)

        assert board == before


class TestWinningLine:
    """Tests for get_winning_line."""

    def test_returns_matching_line(self, checker, make_board):
        assert checker.get_winning_line(make_board(".X..X..X.")) == (1, 4, 7)

    def test_none_without_winner(self, checker, make_board):
        assert checker.get_winning_line(make_board("XO.......")) is None


class TestCheckDraw:
    """Tests for check_draw."""

    def test_full_board_without_winner_is_draw(self, checker, make_board):
        assert checker.check_draw(make_board("XXOOOXXOX"))

    def test_full_board_with_winner_is_not_draw(self, checker, make_board):
        assert not checker.check_draw(make_board("XXXOOXOXO"))

    def test_board_with_empty_cells_is_not_draw(self, checker, make_board):
        assert not checker.check_draw(make_board("XXOOOX.OX"))
