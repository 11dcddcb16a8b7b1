"""
Move validator for TicTacToe.
Turns what a human typed into a move, and explains what is wrong with it.
"""

import re
from dataclasses import dataclass
from typing import Optional

from .board import Move
from .config import GameConfig


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    move: Optional[Move] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.
    
    Accepted input: "2 3", "2,3" or "23" (row then column, 1-3).
    """
    
    # Two numbers separated by spaces and/or a comma, or two digits
    _MOVE_PATTERN = re.compile(r"^\s*(\d+)\s*[,\s]\s*(\d+)\s*$|^\s*(\d)(\d)\s*$")
    
    def parse_move(self, text: str) -> ValidationResult:
        """
        Parse a move typed by a player.
        
        Only the format and range are checked here. Whether the cell is
        free is up to the board.
        
        Args:
            text: Raw input, e.g. "1 3".
            
        Returns:
            ValidationResult with the (row, column) move or an error message.
        """
        match = self._MOVE_PATTERN.match(text or "")
        if match is None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Could not read '{text.strip() if text else ''}'. Type a row and a column, e.g. '2 3'."
            )
        
        groups = [g for g in match.groups() if g is not None]
        row, column = int(groups[0]), int(groups[1])
        
        if not self._in_range(row, column):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {column}). Must be 1-3."
            )
        
        return ValidationResult(is_valid=True, move=(row, column))
    
    @staticmethod
    def _in_range(row: int, column: int) -> bool:
        low, high = GameConfig.MIN_INDEX, GameConfig.MAX_INDEX
        return low <= row <= high and low <= column <= high
