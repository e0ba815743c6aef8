"""
TicTacToe with Time Travel
==========================
Logic module: the board, the turn history, and win detection.

Every turn is kept, so the game can be stepped back and forth,
and playing from an earlier turn starts a new timeline.
"""

from .board import Board, Mark
from .config import GameConfig
from .game_state import GameState
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker

__version__ = "1.0.0"
