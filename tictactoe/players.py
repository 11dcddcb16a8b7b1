"""
Players for TicTacToe.

Anything with a `player` attribute and a get_next_move(board) method can
take a turn. AIPlayer is one; the human variants live here.
"""

from collections import deque
from typing import Callable, Optional, Protocol

from .board import Board, Move, Player
from .config import GameConfig
from .move_validator import MoveValidator


class MoveSource(Protocol):
    """Something that can choose a move for one player."""
    player: Player
    
    def get_next_move(self, board: Board) -> Optional[Move]:
        ...


class ScriptedPlayer:
    """
    A player that replays a fixed list of moves.
    
    Returns None once the moves run out.
    """
    
    def __init__(self, player: Player, *moves: Move):
        self.player = player
        self._moves = deque(moves)
    
    def get_next_move(self, board: Board) -> Optional[Move]:
        if not self._moves:
            return None
        return self._moves.popleft()


class ConsoleHumanPlayer:
    """
    A human typing moves into the terminal.
    
    Bad input is reported to the display and asked for again. Typing
    'q' (or closing the input) gives up the game.
    """
    
    def __init__(
        self,
        player: Player,
        display,
        read_input: Optional[Callable[[str], str]] = None
    ):
        """
        Args:
            player: Which player this human controls.
            display: Display used to report unreadable input.
            read_input: Function used to read a line (default: input).
        """
        self.player = player
        self.display = display
        self.read_input = read_input or input
        self.validator = MoveValidator()
    
    def get_next_move(self, board: Board) -> Optional[Move]:
        while True:
            try:
                text = self.read_input(GameConfig.MOVE_PROMPT)
            except EOFError:
                return None
            
            if text.strip().lower() in GameConfig.QUIT_COMMANDS:
                return None
            
            result = self.validator.parse_move(text)
            if result.is_valid:
                return result.move
            
            self.display.show_invalid_input(result.error_message)
