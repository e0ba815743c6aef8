"""
Win checker for TicTacToe.
Checks if a board has a winner or is a draw.
"""

from typing import Optional, Tuple

from .board import Board, Mark, is_full


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells holding the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as cell index triples).
    # Checked in this order; the first full line wins.
    WINNING_LINES = [
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    ]

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The board snapshot to evaluate.

        Returns:
            The winning Mark, or None if no winner.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner

        return None

    def _check_line(self, board: Board, line: Tuple[int, int, int]) -> Optional[Mark]:
        """Return the mark filling all 3 cells of the line, else None."""
        a, b, c = line
        mark = board[a]
        if mark is None:
            return None  # Empty cell, no winner on this line

        if board[b] == mark and board[c] == mark:
            return mark

        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the board is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        return self.check_winner(board) is None and is_full(board)

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            board: The board snapshot.

        Returns:
            The winning line as a cell index triple, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None
