"""
TicTacToe
=========
A 3x3 TicTacToe engine for two humans, or a human against the AI.

Handles the board, rules, and AI opponent.
"""

from .board import Board, CellState, Player
from .rules import GameRules, GameOutcome
from .ai_player import AIPlayer
from .move_validator import MoveValidator, ValidationResult
from .players import ConsoleHumanPlayer, ScriptedPlayer
from .errors import TicTacToeError, InvalidCellError, GameSetupError

__version__ = "1.0.0"
