"""
Pytest fixtures for TicTacToe tests.
"""

import pytest

from logic.board import Board, Mark
from logic.config import GameConfig
from logic.game_state import GameState


class QuietConfig(GameConfig):
    """Config that keeps ignored intents off the console."""
    DEBUG_MODE = False


SYMBOLS = {"X": Mark.FIRST, "O": Mark.SECOND, ".": None}


@pytest.fixture
def make_board():
    """Build a board from a 9 character string like "XO.X....."."""
    def _make_board(cells: str) -> Board:
        assert len(cells) == 9
        return tuple(SYMBOLS[cell] for cell in cells)
    return _make_board


@pytest.fixture
def game() -> GameState:
    """A fresh game."""
    return GameState(config=QuietConfig())


@pytest.fixture
def won_game(game: GameState) -> GameState:
    """X wins on the top row after 5 moves."""
    for index in (0, 3, 1, 4, 2):
        assert game.place_mark(index)
    return game


@pytest.fixture
def drawn_game(game: GameState) -> GameState:
    """All 9 cells filled, no line completed."""
    # X: 0, 1, 5, 6, 8 / O: 2, 3, 4, 7
    for index in (0, 2, 1, 3, 5, 4, 6, 7, 8):
        assert game.place_mark(index)
    return game
