"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass
from .game_state import GameState, CELL_COUNT


class IllegalMove(Enum):
    """Why a move was refused."""
    GAME_OVER = "game_over"
    OUT_OF_RANGE = "out_of_range"
    OCCUPIED = "occupied"


@dataclass(frozen=True)
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    reason: Optional[IllegalMove] = None
    error_message: Optional[str] = None


def is_cell_index(index) -> bool:
    """True for a plain int in 0-8 (bools are not indices)."""
    return (
        isinstance(index, int)
        and not isinstance(index, bool)
        and 0 <= index < CELL_COUNT
    )


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order:
    1. Game must not be over
    2. Index must be 0-8
    3. Can only place on empty cells
    """

    def validate_move(self, game_state: GameState, index) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to mark (0-8).

        Returns:
            ValidationResult with is_valid, reason and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                reason=IllegalMove.GAME_OVER,
                error_message="Game is already over!"
            )

        if not is_cell_index(index):
            return ValidationResult(
                is_valid=False,
                reason=IllegalMove.OUT_OF_RANGE,
                error_message=f"Invalid position {index!r}. Must be 0-{CELL_COUNT - 1}."
            )

        occupant = game_state.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                reason=IllegalMove.OCCUPIED,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of cell indices, empty once the game is over.
        """
        if game_state.is_game_over:
            return []
        return game_state.get_empty_cells()
