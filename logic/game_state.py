"""
Game state management for TicTacToe.
Tracks every board reached so far, which one is shown, whose turn it is,
and who has won. Supports stepping back and forth through the turns and
branching off an earlier turn.
"""

from typing import List, Optional, Tuple
from dataclasses import dataclass, field

from .board import Board, Mark, empty_board, place, format_board
from .config import GameConfig
from .move_validator import MoveValidator
from .win_checker import WinChecker


@dataclass
class GameState:
    """
    The complete state of a TicTacToe session.

    Tracks:
    - History of boards, one per turn (history[0] is the empty board)
    - Cursor: which turn of the history is shown
    - The mark placed by the next move
    - The winner of the board at the cursor

    All intents return True when applied and False when ignored.
    An ignored intent leaves the state unchanged.
    """

    # Every board along the current timeline
    history: List[Board] = field(default_factory=lambda: [empty_board()])

    # Index into history of the board being shown
    cursor: int = 0

    # Mark placed by the next move
    next_mark: Mark = Mark.FIRST

    config: GameConfig = field(default_factory=GameConfig, repr=False, compare=False)

    # Winner of history[cursor], kept in sync by every intent
    winner: Optional[Mark] = field(default=None, init=False)

    def __post_init__(self):
        # Own the list, place_mark appends to it
        self.history = list(self.history)

        if not self.history:
            raise ValueError("History must contain at least the empty board!")
        if self.history[0] != empty_board():
            raise ValueError("History must start with the empty board!")
        if not 0 <= self.cursor < len(self.history):
            raise ValueError(
                f"Cursor {self.cursor} is outside history of length {len(self.history)}!"
            )

        for turn in range(1, len(self.history)):
            self._check_turn(turn)

        expected_mark = self._mark_for_turn(self.cursor)
        if self.next_mark is not expected_mark:
            raise ValueError(
                f"Next mark at turn {self.cursor} must be {expected_mark}, got {self.next_mark}!"
            )

        self.win_checker = WinChecker()
        self.validator = MoveValidator(self.win_checker)
        self.winner = self.win_checker.check_winner(self.board)

    @property
    def board(self) -> Board:
        """The board at the cursor."""
        return self.history[self.cursor]

    @property
    def turns(self) -> Tuple[Board, ...]:
        """Read-only view of the history."""
        return tuple(self.history)

    @property
    def can_step_backward(self) -> bool:
        return self.cursor > 0

    @property
    def can_step_forward(self) -> bool:
        return self.cursor < len(self.history) - 1

    @property
    def is_draw(self) -> bool:
        """True when the board at the cursor is full with no winner."""
        return self.win_checker.check_draw(self.board)

    @property
    def is_game_over(self) -> bool:
        return self.winner is not None or self.is_draw

    def place_mark(self, index: int) -> bool:
        """
        Place the next mark at the given cell of the board at the cursor.

        If the cursor is not at the last turn, the move starts a new
        timeline: the turn after the cursor is replaced and every later
        turn is discarded.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the mark was placed, False if the move was ignored.
        """
        result = self.validator.validate_move(self, index)
        if not result.is_valid:
            self._debug(result.error_message)
            return False

        next_board = place(self.board, index, self.next_mark)

        if self.cursor + 1 < len(self.history):
            # Diverging from the recorded future, drop it
            self.history[self.cursor + 1] = next_board
            del self.history[self.cursor + 2:]
        else:
            self.history.append(next_board)

        self.cursor += 1
        self.next_mark = self.next_mark.next()
        self.winner = self.win_checker.check_winner(next_board)

        return True

    def step_backward(self) -> bool:
        """
        Show the previous turn.

        Returns:
            True if the cursor moved, False if already at the first turn.
        """
        if not self.can_step_backward:
            self._debug("Already at the first turn!")
            return False

        self.cursor -= 1
        self.next_mark = self.next_mark.next()
        self.winner = self.win_checker.check_winner(self.board)

        return True

    def step_forward(self) -> bool:
        """
        Show the next turn.

        Returns:
            True if the cursor moved, False if already at the last turn.
        """
        if not self.can_step_forward:
            self._debug("Already at the last turn!")
            return False

        self.cursor += 1
        self.next_mark = self.next_mark.next()
        self.winner = self.win_checker.check_winner(self.board)

        return True

    def reset(self) -> None:
        """Start a new game."""
        self.history = [empty_board()]
        self.cursor = 0
        self.next_mark = Mark.FIRST
        self.winner = None

    def get_valid_moves(self) -> List[int]:
        """Cells where place_mark would be accepted."""
        return self.validator.get_valid_moves(self)

    def status_text(self) -> str:
        """One-line status, as shown above the board."""
        if self.winner is not None:
            return f"Player {self.winner} won!"
        return f"It's {self.next_mark}'s turn"

    def copy(self) -> "GameState":
        """Create an independent copy of the game state."""
        # Boards are tuples, so copying the list is enough
        return GameState(
            history=list(self.history),
            cursor=self.cursor,
            next_mark=self.next_mark,
            config=self.config
        )

    def print_board(self):
        """Print the board at the cursor to console."""
        highlight = ()
        if self.config.HIGHLIGHT_WINNING_LINE:
            highlight = self.win_checker.get_winning_line(self.board) or ()

        print(f"\nTurn {self.cursor} of {len(self.history) - 1}")
        print(format_board(self.board, highlight, self.config.EMPTY_SYMBOL))

        if self.is_draw:
            print("\nIt's a DRAW!")
        else:
            print(f"\n{self.status_text()}")

    @staticmethod
    def _mark_for_turn(turn: int) -> Mark:
        """Mark placed by the move made from the given turn."""
        return Mark.FIRST if turn % 2 == 0 else Mark.SECOND

    def _check_turn(self, turn: int):
        """
        Check that a turn adds exactly one mark to the turn before it.

        Raises:
            ValueError: If the board differs in anything but one
                previously empty cell holding the right mark.
        """
        before = self.history[turn - 1]
        after = self.history[turn]
        if len(after) != len(before):
            raise ValueError(f"Turn {turn} has {len(after)} cells, expected {len(before)}!")

        changed = [index for index in range(len(before)) if before[index] != after[index]]
        if len(changed) != 1 or before[changed[0]] is not None:
            raise ValueError(f"Turn {turn} must place exactly one mark in an empty cell!")

        expected_mark = self._mark_for_turn(turn - 1)
        if after[changed[0]] is not expected_mark:
            raise ValueError(f"Turn {turn} must place {expected_mark}!")

    def _debug(self, message: Optional[str]):
        if self.config.DEBUG_MODE:
            print(message)
