"""
Board for TicTacToe.
Owns the 3x3 grid and is the only thing allowed to change it.
"""

from enum import Enum, IntEnum
from typing import List, Tuple

import numpy as np

from .config import GameConfig
from .errors import InvalidCellError


class CellState(IntEnum):
    """What a single cell holds."""
    EMPTY = 0
    PLAYER_ONE = 1
    PLAYER_TWO = 2


class Player(Enum):
    """The two players in the game."""
    ONE = 1
    TWO = 2
    
    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.TWO if self == Player.ONE else Player.ONE
    
    @property
    def cell_state(self) -> CellState:
        """The mark this player leaves on the board."""
        return CellState.PLAYER_ONE if self == Player.ONE else CellState.PLAYER_TWO
    
    @property
    def symbol(self) -> str:
        return GameConfig.PLAYER_ONE_SYMBOL if self == Player.ONE else GameConfig.PLAYER_TWO_SYMBOL
    
    @classmethod
    def from_cell(cls, cell: CellState) -> "Player":
        """Get the player owning a non-empty cell."""
        if cell == CellState.PLAYER_ONE:
            return cls.ONE
        if cell == CellState.PLAYER_TWO:
            return cls.TWO
        raise ValueError("An empty cell has no player")


# A move is just a (row, column) pair, 1-based
Move = Tuple[int, int]


def _is_index(value) -> bool:
    """True if value is an integer row/column in 1-3."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        return False
    return GameConfig.MIN_INDEX <= value <= GameConfig.MAX_INDEX


class Board:
    """
    The 3x3 TicTacToe board.
    
    Cells are stored in a numpy array of CellState values. Rows and
    columns are 1-based everywhere in the public methods.
    
    A cell can only be filled through try_play, and once filled it
    never changes again.
    """
    
    def __init__(self):
        size = GameConfig.BOARD_SIZE
        self._grid = np.full((size, size), CellState.EMPTY, dtype=np.int8)
    
    def try_play(self, row: int, column: int, player: Player) -> bool:
        """
        Try to place a player's mark.
        
        Args:
            row: Row (1-3).
            column: Column (1-3).
            player: Who is playing.
            
        Returns:
            True if the mark was placed. False if the coordinates are out
            of range or the cell is taken; the board is left unchanged.
        """
        if not (_is_index(row) and _is_index(column)):
            return False
        
        if self._grid[row - 1, column - 1] != CellState.EMPTY:
            return False
        
        self._grid[row - 1, column - 1] = player.cell_state
        return True
    
    def get_cell(self, row: int, column: int) -> CellState:
        """
        Get the state of one cell.
        
        Raises:
            InvalidCellError: If row or column is outside 1-3.
        """
        if not (_is_index(row) and _is_index(column)):
            raise InvalidCellError(row, column)
        return CellState(int(self._grid[row - 1, column - 1]))
    
    def is_full(self) -> bool:
        """True if no empty cell is left."""
        return bool(np.all(self._grid != CellState.EMPTY))
    
    def empty_cells(self) -> List[Move]:
        """
        Get all empty cells in row-major order.
        
        Returns:
            List of (row, column) tuples, (1,1), (1,2), ... (3,3).
        """
        rows, cols = np.nonzero(self._grid == CellState.EMPTY)
        return [(int(r) + 1, int(c) + 1) for r, c in zip(rows, cols)]
    
    def move_count(self) -> int:
        """Number of marks on the board."""
        return int(np.count_nonzero(self._grid))
    
    def count(self, player: Player) -> int:
        """Number of marks a player has on the board."""
        return int(np.count_nonzero(self._grid == player.cell_state))
    
    def rows(self) -> List[List[CellState]]:
        """Snapshot of the grid as nested lists (row 1 first)."""
        return [[CellState(int(cell)) for cell in row] for row in self._grid]
    
    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board()
        new_board._grid = self._grid.copy()
        return new_board
    
    def __repr__(self) -> str:
        marks = {
            CellState.EMPTY: ".",
            CellState.PLAYER_ONE: GameConfig.PLAYER_ONE_SYMBOL,
            CellState.PLAYER_TWO: GameConfig.PLAYER_TWO_SYMBOL,
        }
        text = "/".join("".join(marks[cell] for cell in row) for row in self.rows())
        return f"Board({text})"
