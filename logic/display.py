"""
Text shown to the players, derived from a GameState.
Shared by the window and the console front-end.
"""

from .config import GameConfig
from .game_state import BOARD_SIZE, Cell, GameState


def status_text(state: GameState) -> str:
    """One line describing whose turn it is, or how the game ended."""
    if state.winner is not None:
        return GameConfig.WINNER_TEXT.format(player=state.winner.value)
    if state.is_draw:
        return GameConfig.DRAW_TEXT
    return GameConfig.CURRENT_PLAYER_TEXT.format(player=state.current_player.value)


def cell_text(cell: Cell) -> str:
    return cell.value if cell is not None else ""


def board_text(state: GameState) -> str:
    """
    Draw the board as a text grid.

    Empty cells show their index so they can be typed in.
    Cells of the winning line are wrapped in brackets.
    """
    highlighted = set(state.winning_line or ())
    lines = ["┌───┬───┬───┐"]
    for row, cells in enumerate(state.rows()):
        row_str = "│"
        for col, cell in enumerate(cells):
            index = row * BOARD_SIZE + col
            if cell is None:
                row_str += f" {index} │"
            elif index in highlighted:
                row_str += f"[{cell.value}]│"
            else:
                row_str += f" {cell.value} │"
        lines.append(row_str)
        if row < BOARD_SIZE - 1:
            lines.append("├───┼───┼───┤")
    lines.append("└───┴───┴───┘")
    return "\n".join(lines)
