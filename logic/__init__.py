"""
Logic module for TicTacToe.
Handles game state, rules and the game engine.
"""

__version__ = "1.0.0"

from .game_state import GameState, Player, Status, Outcome
from .move_validator import MoveValidator, IllegalMove
from .win_checker import WinChecker, WINNING_LINES
from .engine import GameEngine, Rejected
