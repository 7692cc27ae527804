"""
TicTacToe UI
A graphical interface for two players on one device, using Tkinter.

Shows:
- The 3x3 board (click a cell to play it)
- Game status (whose turn, winner or draw)
- The winning line, highlighted
- A restart button
"""

import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from logic.config import GameConfig
from logic.display import cell_text, status_text
from logic.engine import GameEngine
from logic.game_state import GameState
from logic.logger import get_logger


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    Holds nothing but the current GameState; every click goes
    through the engine and the whole board is redrawn from the result.
    """

    def __init__(self, log_level: Optional[str] = None):
        """Initialize the UI."""
        self.engine = GameEngine(log_level)
        self.log = get_logger(self.__class__.__name__, log_level)
        self.game_state: GameState = self.engine.initialize()
        self.board_cells: List[tk.Button] = []

        # Create UI
        self._create_ui()
        self._update_board_display()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(GameConfig.WINDOW_TITLE)
        self.root.configure(bg=GameConfig.BACKGROUND)
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.BACKGROUND)
        style.configure('TLabel', background=GameConfig.BACKGROUND, foreground='white')
        style.configure('Title.TLabel', font=GameConfig.TITLE_FONT, foreground='#00d4ff')
        style.configure('Status.TLabel', font=GameConfig.STATUS_FONT, foreground='#ffd700')

        ttk.Label(main_frame, text=GameConfig.WINDOW_TITLE, style='Title.TLabel').pack(pady=(0, 10))

        # Board grid
        self.board_frame = ttk.Frame(main_frame)
        self.board_frame.pack(pady=10)

        for index in range(GameConfig.CELL_COUNT):
            row, col = divmod(index, GameConfig.BOARD_SIZE)
            cell = tk.Button(
                self.board_frame,
                text="",
                font=GameConfig.CELL_FONT,
                width=4,
                height=2,
                bg=GameConfig.CELL_BACKGROUND,
                fg='white',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_clicked(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        # Game status
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        self.reset_btn = tk.Button(
            control_frame,
            text="🔄 Restart",
            font=GameConfig.BUTTON_FONT,
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        )
        self.reset_btn.pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="✕ Quit",
            font=GameConfig.BUTTON_FONT,
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_clicked(self, index: int):
        """Forward a click to the engine."""
        result = self.engine.apply_move(self.game_state, index)
        if not result:
            # Occupied cells and finished games are disabled, so this is rare
            return
        self.game_state = result
        self._update_board_display()

    def _update_board_display(self):
        """Redraw every cell and the status line from the game state."""
        highlighted = set(self.game_state.winning_line or ())
        for index, cell in enumerate(self.game_state.board):
            button = self.board_cells[index]
            text = cell_text(cell)
            playable = cell is None and not self.game_state.is_game_over
            button.configure(
                text=text,
                fg=GameConfig.MARK_COLORS.get(text, 'white'),
                disabledforeground=GameConfig.MARK_COLORS.get(text, 'white'),
                bg=GameConfig.HIGHLIGHT_BACKGROUND if index in highlighted else GameConfig.CELL_BACKGROUND,
                state='normal' if playable else 'disabled'
            )
        self.status_label.configure(text=status_text(self.game_state))

    def _reset_game(self):
        """Reset the game."""
        self.log.info("Restarting game")
        self.game_state = self.engine.restart(self.game_state)
        self._update_board_display()

    def _quit(self):
        """Quit the application."""
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
