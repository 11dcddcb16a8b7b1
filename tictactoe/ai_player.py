"""
AI player for TicTacToe.
Picks a move with a fixed list of priorities.
"""

from typing import Iterable, Optional

from .board import Board, Move, Player
from .config import GameConfig
from .rules import GameRules


class AIPlayer:
    """
    An AI that plays TicTacToe by following simple rules of thumb.
    
    In order, the first rule that finds a cell is used:
    1. Win right now if possible
    2. Block the opponent's winning cell
    3. Take the center
    4. Take a corner
    5. Take an edge
    
    Ties are broken by scanning cells in a fixed order, so the same
    board always gets the same answer. The AI keeps no state between
    calls and never changes the board.
    """
    
    def __init__(self, player: Player = Player.TWO):
        """
        Initialize the AI player.
        
        Args:
            player: Which player the AI controls (default: TWO)
        """
        self.player = player
        self.rules = GameRules()
    
    def get_best_move(self, board: Board) -> Optional[Move]:
        """
        Get the best move for the current position.
        
        Args:
            board: Current board.
            
        Returns:
            (row, column) of best move, or None if the board is full.
        """
        empty = board.empty_cells()
        
        if not empty:
            return None
        
        # Win if we can
        move = self._find_winning_cell(board, empty, self.player)
        if move is not None:
            return move
        
        # Otherwise stop the opponent from winning
        move = self._find_winning_cell(board, empty, self.player.opposite())
        if move is not None:
            return move
        
        if GameConfig.CENTER in empty:
            return GameConfig.CENTER
        
        move = self._first_free(GameConfig.CORNERS, empty)
        if move is not None:
            return move
        
        return self._first_free(GameConfig.EDGES, empty)
    
    def get_next_move(self, board: Board) -> Optional[Move]:
        """Player interface: same as get_best_move."""
        return self.get_best_move(board)
    
    def _find_winning_cell(self, board: Board, empty, player: Player) -> Optional[Move]:
        """First empty cell (row-major) where player would complete a line."""
        for row, column in empty:
            if self.rules.would_win(board, row, column, player):
                return (row, column)
        return None
    
    @staticmethod
    def _first_free(candidates: Iterable[Move], empty) -> Optional[Move]:
        for cell in candidates:
            if cell in empty:
                return cell
        return None
    
    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.
        
        Args:
            board: Current board.
            
        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(board)
        
        if move is None:
            return "No moves available!"
        
        row, column = move
        return f"Place {self.player.symbol} at row {row}, column {column}"
