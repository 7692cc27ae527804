"""
Configuration for TicTacToe.
Board settings, display text, window look and logging.
"""

from .game_state import BOARD_SIZE, CELL_COUNT


class GameConfig:
    """
    Configuration class for the game and its window.
    Change these values to restyle the game.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = BOARD_SIZE
    CELL_COUNT = CELL_COUNT

    # ==================== STATUS TEXT ====================
    CURRENT_PLAYER_TEXT = "Current player: {player}"
    WINNER_TEXT = "Winner: {player}"
    DRAW_TEXT = "It's a draw!"

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Tic Tac Toe"
    BACKGROUND = '#1a1a2e'
    CELL_BACKGROUND = '#16213e'
    HIGHLIGHT_BACKGROUND = '#065f46'
    MARK_COLORS = {
        "X": '#00d4ff',
        "O": '#f87171',
    }
    TITLE_FONT = ('Segoe UI', 16, 'bold')
    STATUS_FONT = ('Segoe UI', 12)
    CELL_FONT = ('Segoe UI', 24, 'bold')
    BUTTON_FONT = ('Segoe UI', 11, 'bold')

    # ==================== LOGGING ====================
    # Overridden by TICTACTOE_LOG_LEVEL or --log-level
    LOG_LEVEL_ENV = "TICTACTOE_LOG_LEVEL"
    DEFAULT_LOG_LEVEL = "WARNING"
