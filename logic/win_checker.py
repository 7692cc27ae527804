"""
Win checker for TicTacToe.
Works out whether a board is won, drawn, or still open.
"""

from typing import Optional, Sequence, Tuple
from .game_state import Cell, Line, Outcome, Player


# All possible winning lines, in the order they are checked
WINNING_LINES: Tuple[Line, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally).
    Lines are scanned in WINNING_LINES order and the first
    complete one is reported.
    """

    WINNING_LINES = WINNING_LINES

    def find_winning_line(
        self,
        board: Sequence[Cell]
    ) -> Optional[Tuple[Player, Line]]:
        """
        Find the first completed line.

        Args:
            board: The 9 cells.

        Returns:
            (winner, line), or None if no line is complete.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner, line
        return None

    def check_winner(self, board: Sequence[Cell]) -> Optional[Player]:
        """The winning Player, or None if no winner yet."""
        found = self.find_winning_line(board)
        return found[0] if found else None

    def _check_line(self, board: Sequence[Cell], line: Line) -> Optional[Player]:
        a, b, c = (board[index] for index in line)
        if a is not None and a == b == c:
            return a
        return None

    def check_draw(self, board: Sequence[Cell]) -> bool:
        """
        A draw is a full board with no completed line.
        """
        if self.find_winning_line(board) is not None:
            return False
        return all(cell is not None for cell in board)

    def evaluate(self, board: Sequence[Cell]) -> Outcome:
        """
        Derive the outcome of a board in a single pass.

        Args:
            board: The 9 cells.

        Returns:
            Outcome with status WON (plus winner and line), DRAW
            or IN_PROGRESS.
        """
        found = self.find_winning_line(board)
        if found is not None:
            winner, line = found
            return Outcome.won(winner, line)
        if all(cell is not None for cell in board):
            return Outcome.draw()
        return Outcome()
