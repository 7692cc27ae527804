"""
Main entry point for TicTacToe.

Opens the Tkinter window by default. With --no-ui the same game
is played in the terminal: type a cell number (0-8) to play it,
'r' to restart, 'q' to quit.
"""

from typing import Callable, Optional

from logic.display import board_text, status_text
from logic.engine import GameEngine
from logic.game_state import GameState


QUIT_COMMANDS = ("q", "quit", "exit")
RESTART_COMMANDS = ("r", "restart")


class ConsoleGame:
    """
    Two players sharing one terminal.

    Game flow:
    1. Show the board and whose turn it is
    2. Read a cell number and pass it to the engine
    3. Repeat until someone wins or it's a draw
    4. Offer a restart
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        log_level: Optional[str] = None
    ):
        """
        Args:
            input_func: Where moves are read from (default: stdin).
            log_level: Engine log level, e.g. "INFO".
        """
        self.input_func = input_func
        self.engine = GameEngine(log_level)
        self.game_state: GameState = self.engine.initialize()
        self.is_running = False

    def start(self):
        """Start the game."""
        print("\n" + "="*40)
        print("   Tic Tac Toe")
        print("="*40)
        print("Type 0-8 to play a cell, 'r' to restart, 'q' to quit\n")

        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            print(board_text(self.game_state))
            print(status_text(self.game_state))

            if self.game_state.is_game_over:
                self._show_game_result()
                self._ask_restart()
                continue

            self._handle_command(self._read("> "))

    def _read(self, prompt: str) -> str:
        try:
            return self.input_func(prompt).strip().lower()
        except EOFError:
            return QUIT_COMMANDS[0]

    def _handle_command(self, command: str):
        """Turn one line of input into a move, restart or quit."""
        if command in QUIT_COMMANDS:
            self.is_running = False
            return
        if command in RESTART_COMMANDS:
            self._reset_game()
            return

        try:
            index = int(command)
        except ValueError:
            print(f"'{command}' is not a cell number (0-8).")
            return

        result = self.engine.apply_move(self.game_state, index)
        if not result:
            print(result.message)
            return
        self.game_state = result

    def _ask_restart(self):
        answer = self._read("Play again? [y/N] ")
        if answer in ("y", "yes") + RESTART_COMMANDS:
            self._reset_game()
        else:
            self.is_running = False

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*40)
        print("   GAME OVER!")
        print("="*40)
        if self.game_state.winner:
            print(f"\n🏆 {self.game_state.winner.value} WINS!")
        else:
            print("\n🤝 It's a draw! Good game!")
        print("="*40 + "\n")

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nNew game!\n")
        self.game_state = self.engine.restart(self.game_state)


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Two-player Tic Tac Toe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the terminal instead of a window"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (DEBUG, INFO, WARNING...). Defaults to $TICTACTOE_LOG_LEVEL or WARNING"
    )

    args = parser.parse_args(argv)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(log_level=args.log_level)
        ui.run()
        return

    game = ConsoleGame(log_level=args.log_level)
    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
