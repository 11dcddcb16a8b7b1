"""
TicTacToe console UI.
Prints the board and game messages to the terminal.

Shows:
- The board (O for Player One, X for Player Two)
- Whose turn it is
- Invalid moves and input
- The final result
"""

from typing import Callable, Protocol

from tictactoe.board import Board, CellState, Player
from tictactoe.config import GameConfig
from tictactoe.rules import GameRules


class GameDisplay(Protocol):
    """Everything the game loop tells the players."""

    def show_message(self, message: str) -> None: ...
    def show_turn(self, player: Player) -> None: ...
    def show_invalid_move(self) -> None: ...
    def show_winner(self, player: Player) -> None: ...
    def show_draw(self) -> None: ...
    def show_invalid_input(self, message: str) -> None: ...
    def clear(self) -> None: ...
    def display(self) -> None: ...


class ConsoleDisplay:
    """
    Console display for a game.

    Everything is written through `out` (print by default), so the
    output can be captured.
    """

    def __init__(
        self,
        board: Board,
        out: Callable[[str], None] = print,
        clear_screen: bool = False
    ):
        """
        Initialize the display.

        Args:
            board: The board to draw.
            out: Function that writes one line of text.
            clear_screen: If True, clear() wipes the terminal.
        """
        self.board = board
        self.out = out
        self.clear_screen = clear_screen

    def show_message(self, message: str):
        self.out(message)

    def show_turn(self, player: Player):
        self.out(f"\nCurrent turn: Player {player.name.title()} ({player.symbol})")

    def show_invalid_move(self):
        self.out("That cell is taken or off the board. Try again.")

    def show_winner(self, player: Player):
        self.out(f"\n🏆 Player {player.name.title()} ({player.symbol}) WINS!")
        line = GameRules().get_winning_line(self.board)
        if line is not None:
            cells = " ".join(f"({row},{column})" for row, column in line)
            self.out(f"Winning line: {cells}")

    def show_draw(self):
        self.out("\n🤝 It's a DRAW!")

    def show_invalid_input(self, message: str):
        self.out(f"Invalid input: {message}")

    def clear(self):
        if self.clear_screen:
            self.out(GameConfig.CLEAR_SEQUENCE)

    def display(self):
        """Print the board to console."""
        for line in render_board(self.board):
            self.out(line)


def render_board(board: Board):
    """
    Draw the board as lines of text.

    Returns:
        List of strings, one per printed line.
    """
    marks = {
        CellState.EMPTY: GameConfig.EMPTY_SYMBOL,
        CellState.PLAYER_ONE: GameConfig.PLAYER_ONE_SYMBOL,
        CellState.PLAYER_TWO: GameConfig.PLAYER_TWO_SYMBOL,
    }

    lines = ["\n    1   2   3", "  ┌───┬───┬───┐"]
    for index, row in enumerate(board.rows(), start=1):
        cells = "│".join(f" {marks[cell]} " for cell in row)
        lines.append(f"{index} │{cells}│")
        if index < GameConfig.BOARD_SIZE:
            lines.append("  ├───┼───┼───┤")
    lines.append("  └───┴───┴───┘")
    return lines
