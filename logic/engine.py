"""
Game engine for TicTacToe.
Applies the rules: legal moves, turn order, win/draw and restart.
"""

from typing import Optional, Union
from dataclasses import dataclass

from .game_state import GameState, Status
from .logger import get_logger
from .move_validator import IllegalMove, MoveValidator
from .win_checker import WinChecker


@dataclass(frozen=True)
class Rejected:
    """
    A refused move. The state it was tried on is unchanged.

    Falsy, so callers can write ``if not result``.
    """
    reason: IllegalMove
    message: str
    index: object = None

    def __bool__(self) -> bool:
        return False


MoveResult = Union[GameState, Rejected]


class GameEngine:
    """
    Enforces the rules of TicTacToe.

    Every operation is a pure function of its arguments: states are
    never modified, a new GameState is returned instead.
    """

    def __init__(self, log_level: Optional[str] = None):
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.log = get_logger(self.__class__.__name__, log_level)

    def initialize(self) -> GameState:
        """Fresh game: empty board, X to play."""
        return GameState()

    def apply_move(self, state: GameState, index) -> MoveResult:
        """
        Mark a cell for the current player.

        Args:
            state: The state to move from.
            index: Cell to mark (0-8).

        Returns:
            The next GameState, or Rejected if the move is illegal.
        """
        validation = self.validator.validate_move(state, index)
        if not validation.is_valid:
            self.log.debug("Rejected move %r: %s", index, validation.error_message)
            return Rejected(validation.reason, validation.error_message, index)

        player = state.current_player
        board = list(state.board)
        board[index] = player
        outcome = self.win_checker.evaluate(board)

        # Turn only passes while the game is still open
        next_player = player.opposite() if outcome.status == Status.IN_PROGRESS else player

        new_state = GameState(
            board=tuple(board),
            current_player=next_player,
            outcome=outcome,
        )
        self.log.info("%s played %d", player.value, index)
        if new_state.is_game_over:
            if new_state.winner:
                self.log.info("%s wins on %s", new_state.winner.value, new_state.winning_line)
            else:
                self.log.info("Game drawn")
        return new_state

    def restart(self, state: Optional[GameState] = None) -> GameState:
        """Throw away the given state and start over."""
        return self.initialize()
