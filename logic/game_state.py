"""
Game state for two-player TicTacToe.
Holds the board, whose turn it is, and the derived outcome.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


# A cell is either empty (None) or owned by a player
Cell = Optional[Player]

# Three board indices (0-8, row-major)
Line = Tuple[int, int, int]

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Status(Enum):
    """Where the game stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    The derived game result.

    winner and line are only set when status is WON, so the
    highlighted line always comes from the same check as the winner.
    """
    status: Status = Status.IN_PROGRESS
    winner: Optional[Player] = None
    line: Optional[Line] = None

    @classmethod
    def won(cls, player: Player, line: Line) -> "Outcome":
        return cls(Status.WON, player, tuple(line))

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(Status.DRAW)


def empty_board() -> Tuple[Cell, ...]:
    return (None,) * CELL_COUNT


@dataclass(frozen=True)
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The 9 cells, indexed 0-8 row by row
    - Current player
    - Outcome (in progress, won, draw)

    States are never changed in place. Each accepted move
    produces a new GameState (see logic.engine).
    """

    board: Tuple[Cell, ...] = field(default_factory=empty_board)

    # X always starts
    current_player: Player = Player.X

    outcome: Outcome = field(default_factory=Outcome)

    @property
    def status(self) -> Status:
        return self.outcome.status

    @property
    def winner(self) -> Optional[Player]:
        return self.outcome.winner

    @property
    def winning_line(self) -> Optional[Line]:
        return self.outcome.line

    @property
    def is_draw(self) -> bool:
        return self.outcome.status == Status.DRAW

    @property
    def is_game_over(self) -> bool:
        return self.outcome.status != Status.IN_PROGRESS

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of indices in ascending order.
        """
        return [index for index, cell in enumerate(self.board) if cell is None]

    def count(self, player: Player) -> int:
        """Number of cells owned by a player."""
        return sum(1 for cell in self.board if cell == player)

    def rows(self) -> List[Tuple[Cell, ...]]:
        """The board split into its three rows."""
        return [
            self.board[row * BOARD_SIZE:(row + 1) * BOARD_SIZE]
            for row in range(BOARD_SIZE)
        ]
