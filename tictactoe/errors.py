"""
Exceptions for TicTacToe.

Rejected moves are not errors: Board.try_play reports them with False.
These are raised only when a caller breaks a contract.
"""


class TicTacToeError(Exception):
    """Base class for all game errors."""


class InvalidCellError(TicTacToeError, ValueError):
    """A board query used a row or column outside 1-3."""
    
    def __init__(self, row, column):
        self.row = row
        self.column = column
        super().__init__(f"Invalid cell ({row}, {column}). Row and column must be 1-3.")


class GameSetupError(TicTacToeError, RuntimeError):
    """The game was started before both players were chosen."""
