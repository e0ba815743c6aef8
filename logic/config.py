"""
Game configuration for TicTacToe.
All the settings for the board, console output and debugging.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Subclass and override the console and debug values to change behaviour.
    The board settings are fixed: the board helpers and win lines assume 3x3.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Cells are indexed 0..8, row-major
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9

    # ==================== CONSOLE SETTINGS ====================
    # What print_board shows for an empty cell
    EMPTY_SYMBOL = " "

    # Marks the cells of the winning line, e.g. "[X]"
    HIGHLIGHT_WINNING_LINE = True

    # ==================== DEBUG SETTINGS ====================
    # Print the reason whenever an intent is ignored
    DEBUG_MODE = True
