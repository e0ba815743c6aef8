"""
Board representation for TicTacToe.
A board is an immutable snapshot of the 9 cells at one point in the game.
"""

from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .config import GameConfig


class Mark(Enum):
    """The two marks players place on the board."""
    FIRST = "X"
    SECOND = "O"

    def next(self) -> "Mark":
        """Get the other mark."""
        return Mark.SECOND if self == Mark.FIRST else Mark.FIRST

    def __str__(self) -> str:
        return self.value


# 9 cells, row-major. None means empty.
Board = Tuple[Optional[Mark], ...]


def empty_board() -> Board:
    """Create a board with every cell empty."""
    return (None,) * GameConfig.CELL_COUNT


def place(board: Board, index: int, mark: Mark) -> Board:
    """
    Put a mark on a board.

    Args:
        board: The board to start from (left untouched).
        index: Cell index (0-8).
        mark: The mark to place.

    Returns:
        A new board with the mark placed.

    Raises:
        ValueError: If the index is out of range or the cell is occupied.
    """
    if not 0 <= index < len(board):
        raise ValueError(f"Invalid cell {index}. Must be 0-{len(board) - 1}.")
    if board[index] is not None:
        raise ValueError(f"Cell {index} is already occupied by {board[index]}!")

    cells = list(board)
    cells[index] = mark
    return tuple(cells)


def empty_cells(board: Board) -> List[int]:
    """Get the indices of all empty cells."""
    return [index for index, mark in enumerate(board) if mark is None]


def is_full(board: Board) -> bool:
    return all(mark is not None for mark in board)


def cell_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a cell index."""
    return row * GameConfig.BOARD_SIZE + col


def format_board(
    board: Board,
    highlight: Iterable[int] = (),
    empty_symbol: str = GameConfig.EMPTY_SYMBOL
) -> str:
    """
    Render a board as text.

    Args:
        board: The board to render.
        highlight: Cell indices to wrap in brackets (e.g. a winning line).
        empty_symbol: What to show for an empty cell.

    Returns:
        The board drawn with ASCII borders, one row per line.
    """
    highlight = set(highlight)
    size = GameConfig.BOARD_SIZE
    border = "+" + "+".join(["---"] * size) + "+"

    lines = [border]
    for row in range(size):
        cells = []
        for col in range(size):
            index = cell_to_index(row, col)
            mark = board[index]
            symbol = str(mark) if mark is not None else empty_symbol
            if index in highlight:
                cells.append(f"[{symbol}]")
            else:
                cells.append(f" {symbol} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(border)

    return "\n".join(lines)
