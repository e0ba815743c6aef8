"""
Console entry point for TicTacToe with time travel.

Plays a scripted list of intents and prints the resulting board:
- a cell number (0-8) places the next mark there
- b steps back one turn
- f steps forward one turn
- n starts a new game

Example:
    python main.py 0 3 1 4 b b 8
"""

import argparse
import sys
from typing import List, Optional, Union

from logic.config import GameConfig
from logic.game_state import GameState


Intent = Union[int, str]

STEP_BACKWARD = "b"
STEP_FORWARD = "f"
NEW_GAME = "n"

COMMANDS = (STEP_BACKWARD, STEP_FORWARD, NEW_GAME)


def parse_intent(token: str) -> Intent:
    """
    Parse one command line token into an intent.

    Args:
        token: A cell number or one of b/f/n.

    Returns:
        The cell index as int, or the command letter.
    """
    token = token.strip().lower()
    if token in COMMANDS:
        return token

    try:
        return int(token)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"'{token}' is not a cell number (0-8) or one of: {', '.join(COMMANDS)}"
        )


class ConsoleGame:
    """
    Drives a GameState from text intents.

    The game state does the validation; this class only maps
    each intent to the matching GameState call.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.game_state = GameState(config=config or GameConfig())

    def apply(self, intent: Intent) -> bool:
        """
        Apply a single intent.

        Returns:
            True if the game state changed.
        """
        if intent == STEP_BACKWARD:
            return self.game_state.step_backward()
        if intent == STEP_FORWARD:
            return self.game_state.step_forward()
        if intent == NEW_GAME:
            self.game_state.reset()
            return True
        return self.game_state.place_mark(intent)

    def run(self, intents: List[Intent]) -> int:
        """
        Apply every intent in order.

        Returns:
            How many intents were ignored.
        """
        ignored = 0
        for intent in intents:
            if not self.apply(intent):
                ignored += 1
        return ignored


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe with time travel")
    parser.add_argument(
        "intents",
        nargs="*",
        type=parse_intent,
        help="Cell numbers (0-8) to play, b to step back, f to step forward, n for a new game"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Don't print why an intent was ignored"
    )

    args = parser.parse_args(argv)

    config = GameConfig()
    if args.quiet:
        config.DEBUG_MODE = False

    game = ConsoleGame(config)
    ignored = game.run(args.intents)

    game.game_state.print_board()
    if ignored and not args.quiet:
        print(f"({ignored} intent(s) ignored)")

    return 0


if __name__ == "__main__":
    sys.exit(main())
