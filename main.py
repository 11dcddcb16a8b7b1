"""
Main orchestration script for TicTacToe.

This script ties together:
- Logic (board, rules, AI)
- Players (humans at the keyboard, or the AI)
- Display (console output)

Run this script to play TicTacToe in the terminal!
"""

from typing import Callable, Optional

from tictactoe.ai_player import AIPlayer
from tictactoe.board import Board, Player
from tictactoe.config import GameConfig
from tictactoe.errors import GameSetupError
from tictactoe.players import ConsoleHumanPlayer, MoveSource
from tictactoe.rules import GameOutcome, GameRules
from ui import ConsoleDisplay, GameDisplay


class TicTacToeGame:
    """
    Runs one game of TicTacToe.

    Game flow:
    1. Clear and draw the board
    2. Stop if someone has won or the board is full
    3. Ask the current player for a move
    4. Place it, or report an invalid move and ask the same player again
    5. Repeat
    """

    def __init__(
        self,
        board: Board,
        display: GameDisplay,
        rules: GameRules,
        player_one: Optional[MoveSource] = None,
        player_two: Optional[MoveSource] = None,
        read_input: Optional[Callable[[str], str]] = None,
        hints: bool = False
    ):
        """
        Initialize the game.

        Args:
            board: The board to play on (may already hold marks).
            display: Where game events are shown.
            rules: Win/draw rules.
            player_one: Player One's move source, or None to pick a mode later.
            player_two: Player Two's move source, or None to pick a mode later.
            read_input: Line reader handed to console players (default: input).
            hints: If True, show the AI's suggestion before each human move.
        """
        self.board = board
        self.display = display
        self.rules = rules
        self.player_one = player_one
        self.player_two = player_two
        self.read_input = read_input
        self.hints = hints

    def select_game_mode(self, choice: str) -> bool:
        """
        Set up the players from a menu choice.

        Args:
            choice: "1" for Human vs Human, "2" for Human vs AI.

        Returns:
            True if the choice was understood, False otherwise.
        """
        choice = (choice or "").strip()

        if choice == GameConfig.MODE_HUMAN_VS_HUMAN:
            self.player_one = self._human(Player.ONE)
            self.player_two = self._human(Player.TWO)
            self.display.show_message("Human vs Human mode selected!")
            return True

        if choice == GameConfig.MODE_HUMAN_VS_AI:
            self.player_one = self._human(Player.ONE)
            self.player_two = AIPlayer(Player.TWO)
            self.display.show_message("Human vs AI mode selected!")
            self.display.show_message(
                f"You will play as {Player.ONE.symbol} (Player One)"
            )
            return True

        self.display.show_invalid_input(
            f"'{choice}' is not a game mode. Choose "
            f"{GameConfig.MODE_HUMAN_VS_HUMAN} or {GameConfig.MODE_HUMAN_VS_AI}."
        )
        return False

    def _human(self, player: Player) -> ConsoleHumanPlayer:
        return ConsoleHumanPlayer(player, self.display, self.read_input)

    def current_player(self) -> Player:
        """
        Work out whose turn it is from the marks on the board.

        Player One moves first, so it is Player One's turn whenever it
        has no more marks than Player Two.
        """
        if self.board.count(Player.ONE) <= self.board.count(Player.TWO):
            return Player.ONE
        return Player.TWO

    def _source_for(self, player: Player) -> MoveSource:
        source = self.player_one if player == Player.ONE else self.player_two
        if source is None:
            raise GameSetupError(
                "No players selected. Call select_game_mode() or pass players in."
            )
        return source

    def play_game(self) -> GameOutcome:
        """
        Play until the game ends or a player gives up.

        Returns:
            The final outcome. IN_PROGRESS means a player returned no
            move and the game was abandoned.
        """
        while True:
            self.display.clear()
            self.display.display()

            outcome = self.rules.game_outcome(self.board)
            if outcome.is_over:
                self._report(outcome)
                return outcome

            player = self.current_player()
            source = self._source_for(player)
            self.display.show_turn(player)

            if self.hints and not isinstance(source, AIPlayer):
                self.display.show_message(
                    "Hint: " + AIPlayer(player).get_move_suggestion(self.board)
                )

            # Keep asking the same player until the move is accepted
            while True:
                move = source.get_next_move(self.board)
                if move is None:
                    return GameOutcome.IN_PROGRESS

                row, column = move
                if self.board.try_play(row, column, player):
                    break
                self.display.show_invalid_move()

    def _report(self, outcome: GameOutcome):
        """Show the one final message for a finished game."""
        if outcome == GameOutcome.PLAYER1_WINS:
            self.display.show_winner(Player.ONE)
        elif outcome == GameOutcome.PLAYER2_WINS:
            self.display.show_winner(Player.TWO)
        elif outcome == GameOutcome.DRAW:
            self.display.show_draw()


def main(argv=None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--mode",
        choices=[GameConfig.MODE_HUMAN_VS_HUMAN, GameConfig.MODE_HUMAN_VS_AI],
        help="1 = Human vs Human, 2 = Human vs AI (asks if not given)"
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Clear the terminal before drawing the board"
    )
    parser.add_argument(
        "--hint",
        action="store_true",
        help="Show the AI's suggested move on each human turn"
    )

    args = parser.parse_args(argv)

    board = Board()
    display = ConsoleDisplay(board, clear_screen=args.clear)
    game = TicTacToeGame(board, display, GameRules(), hints=args.hint)

    print("\n" + "="*40)
    print("   TicTacToe")
    print("="*40 + "\n")

    try:
        if args.mode is not None:
            game.select_game_mode(args.mode)
        else:
            while not game.select_game_mode(input(GameConfig.MODE_PROMPT)):
                pass

        outcome = game.play_game()
        if outcome == GameOutcome.IN_PROGRESS:
            print("\nGame abandoned.")
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
        return 1
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
