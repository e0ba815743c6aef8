"""
Move validator for TicTacToe.
Decides whether a mark may be placed on the board at the cursor.
"""

from typing import TYPE_CHECKING, List, Optional
from dataclasses import dataclass

from .board import empty_cells
from .win_checker import WinChecker

if TYPE_CHECKING:
    from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Cell index must be 0-8
    2. Game must not be won at the current turn
    3. Can only place on empty cells
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def validate_move(self, game_state: "GameState", index: int) -> ValidationResult:
        """
        Validate a move on the board at the game's cursor.

        Args:
            game_state: Current game state.
            index: Cell to place the next mark in (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        board = game_state.board

        # bool is an int subclass, but True is not a cell
        if isinstance(index, bool) or not isinstance(index, int):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index!r}. Must be an integer."
            )

        if not 0 <= index < len(board):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{len(board) - 1}."
            )

        if game_state.winner is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already over! Player {game_state.winner} won."
            )

        if board[index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {board[index]}!"
            )

        # The cached winner should already cover this
        winner = self.win_checker.check_winner(board)
        if winner is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Board at turn {game_state.cursor} was already won by {winner}!"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: "GameState") -> List[int]:
        """
        Get all valid moves for the next mark.

        Args:
            game_state: Current game state.

        Returns:
            List of empty cell indices, or [] once the board is won.
        """
        if game_state.winner is not None:
            return []

        if self.win_checker.check_winner(game_state.board) is not None:
            return []

        return empty_cells(game_state.board)
