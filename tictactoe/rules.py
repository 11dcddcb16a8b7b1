"""
Game rules for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import List, Optional, Tuple

from .board import Board, CellState, Move, Player
from .config import GameConfig


# Three cells that win the game when one player holds all of them
Line = Tuple[Move, Move, Move]


class GameOutcome(Enum):
    """Where the game stands."""
    IN_PROGRESS = "in_progress"
    PLAYER1_WINS = "player1_wins"
    PLAYER2_WINS = "player2_wins"
    DRAW = "draw"
    
    @classmethod
    def win_for(cls, player: Player) -> "GameOutcome":
        return cls.PLAYER1_WINS if player == Player.ONE else cls.PLAYER2_WINS
    
    @property
    def is_over(self) -> bool:
        return self != GameOutcome.IN_PROGRESS


class GameRules:
    """
    Checks for win conditions in TicTacToe.
    
    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally).
    
    The rules hold no state. Every method reads the board it is given
    and never changes it.
    """
    
    WINNING_LINES = GameConfig.WINNING_LINES
    
    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.
        
        Lines are scanned rows first, then columns, then diagonals.
        On a (constructed) board where both players hold a line, the
        first line found decides.
        
        Args:
            board: The board to check.
            
        Returns:
            The winning Player, or None if no winner.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        row, column = line[0]
        return Player.from_cell(board.get_cell(row, column))
    
    def get_winning_line(self, board: Board) -> Optional[Line]:
        """
        Get the first complete line, if there is one.
        
        Returns:
            The winning line as three (row, column) cells, or None.
        """
        for line in self.WINNING_LINES:
            if self._line_owner(board, line) is not None:
                return line
        return None
    
    def _line_owner(self, board: Board, line: Line) -> Optional[CellState]:
        """The cell state filling the whole line, or None."""
        cells = [board.get_cell(row, column) for row, column in line]
        
        if cells[0] == CellState.EMPTY:
            return None  # Empty cell, no winner on this line
        
        if cells[0] == cells[1] == cells[2]:
            return cells[0]
        
        return None
    
    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.
        
        A draw occurs when all cells are filled and nobody has a line.
        """
        return board.is_full() and self.check_winner(board) is None
    
    def game_outcome(self, board: Board) -> GameOutcome:
        """
        Work out the state of the game.
        
        The winner is checked before the board is checked for being
        full, so a winning last move counts as a win.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return GameOutcome.win_for(winner)
        
        if board.is_full():
            return GameOutcome.DRAW
        
        return GameOutcome.IN_PROGRESS
    
    def would_win(self, board: Board, row: int, column: int, player: Player) -> bool:
        """
        Check whether a move would win the game for a player.
        
        The move is tried on a copy, the board passed in is not touched.
        
        Args:
            board: Current board.
            row: Row to try (1-3).
            column: Column to try (1-3).
            player: Who would play there.
            
        Returns:
            True if the move is legal and completes a line for player.
        """
        scratch = board.copy()
        if not scratch.try_play(row, column, player):
            return False
        
        target = player.cell_state
        for line in self.WINNING_LINES:
            if (row, column) in line and self._line_owner(scratch, line) == target:
                return True
        return False
    
    def get_valid_moves(self, board: Board) -> List[Move]:
        """
        Get all legal moves.
        
        Returns:
            Empty cells in row-major order, or an empty list if the
            game is already over.
        """
        if self.game_outcome(board).is_over:
            return []
        return board.empty_cells()
