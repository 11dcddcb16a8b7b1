"""
Tests for the TicTacToe logic modules.
Run with pytest, or run this file directly.
"""

import sys

import pytest

from tictactoe import (
    AIPlayer,
    Board,
    CellState,
    ConsoleHumanPlayer,
    GameOutcome,
    GameRules,
    InvalidCellError,
    MoveValidator,
    Player,
    ScriptedPlayer,
)


def board_from(*rows: str) -> Board:
    """
    Build a board from three strings like "OX.".
    O is Player One, X is Player Two, anything else is empty.
    """
    board = Board()
    for row, text in enumerate(rows, start=1):
        for column, mark in enumerate(text, start=1):
            if mark == "O":
                assert board.try_play(row, column, Player.ONE)
            elif mark == "X":
                assert board.try_play(row, column, Player.TWO)
    return board


DRAW_ROWS = ("OXO", "XOX", "XOX")


# ==================== BOARD ====================

def test_board_starts_empty():
    board = Board()
    assert board.move_count() == 0
    assert not board.is_full()
    assert len(board.empty_cells()) == 9
    assert board.get_cell(2, 2) == CellState.EMPTY


def test_try_play_places_mark():
    board = Board()
    assert board.try_play(1, 3, Player.TWO)
    assert board.get_cell(1, 3) == CellState.PLAYER_TWO
    assert board.move_count() == 1
    assert board.count(Player.TWO) == 1
    assert board.count(Player.ONE) == 0


def test_try_play_rejects_occupied_cell():
    board = Board()
    assert board.try_play(2, 2, Player.ONE)
    before = board.rows()

    assert not board.try_play(2, 2, Player.TWO)
    assert not board.try_play(2, 2, Player.ONE)
    assert board.rows() == before
    assert board.get_cell(2, 2) == CellState.PLAYER_ONE
    assert board.move_count() == 1


@pytest.mark.parametrize("row, column", [
    (0, 1), (1, 0), (4, 2), (2, 4), (-1, -1), (10, 10), ("1", 1), (1.0, 1), (True, 1),
])
def test_try_play_rejects_out_of_range(row, column):
    board = Board()
    assert not board.try_play(row, column, Player.ONE)
    assert board.move_count() == 0


@pytest.mark.parametrize("row, column", [(0, 1), (1, 4), (3, 0), (-2, 2)])
def test_get_cell_raises_for_out_of_range(row, column):
    board = Board()
    with pytest.raises(InvalidCellError):
        board.get_cell(row, column)
    # InvalidCellError is a ValueError for callers that catch that
    with pytest.raises(ValueError):
        board.get_cell(row, column)


def test_empty_cells_row_major_order():
    board = board_from("O.X", ".X.", "O..")
    assert board.empty_cells() == [(1, 2), (2, 1), (2, 3), (3, 2), (3, 3)]


def test_is_full():
    assert board_from(*DRAW_ROWS).is_full()
    assert board_from(*DRAW_ROWS).empty_cells() == []
    assert not board_from("OXO", "XOX", "XO.").is_full()


def test_board_never_exceeds_nine_marks():
    board = board_from(*DRAW_ROWS)
    for row in range(1, 4):
        for column in range(1, 4):
            assert not board.try_play(row, column, Player.ONE)
    assert board.move_count() == 9


def test_copy_is_independent():
    board = board_from("O..", "...", "...")
    copy = board.copy()

    assert copy.try_play(3, 3, Player.TWO)
    assert board.get_cell(3, 3) == CellState.EMPTY
    assert copy.get_cell(1, 1) == CellState.PLAYER_ONE


def test_player_helpers():
    assert Player.ONE.opposite() == Player.TWO
    assert Player.TWO.opposite() == Player.ONE
    assert Player.ONE.symbol == "O"
    assert Player.TWO.symbol == "X"
    assert Player.from_cell(CellState.PLAYER_TWO) == Player.TWO
    with pytest.raises(ValueError):
        Player.from_cell(CellState.EMPTY)


# ==================== RULES ====================

def test_no_winner_on_empty_board():
    rules = GameRules()
    assert rules.check_winner(Board()) is None
    assert rules.game_outcome(Board()) == GameOutcome.IN_PROGRESS


def test_no_winner_without_full_line():
    rules = GameRules()
    assert rules.check_winner(board_from("OO.", "XX.", "...")) is None
    assert rules.check_winner(board_from("OXO", "XOX", "...")) is None


@pytest.mark.parametrize("rows, winner", [
    (("OOO", "XX.", "..."), Player.ONE),      # row
    (("XO.", "XO.", "X.O"), Player.TWO),      # column
    (("OX.", ".OX", "..O"), Player.ONE),      # diagonal
    (("O.X", "OX.", "X.O"), Player.TWO),      # anti-diagonal
])
def test_check_winner_finds_each_line_type(rows, winner):
    assert GameRules().check_winner(board_from(*rows)) == winner


def test_simultaneous_winners_first_line_decides():
    # Not reachable in play; rows are scanned before columns and diagonals
    board = board_from("XXX", "...", "OOO")
    rules = GameRules()
    assert rules.check_winner(board) == Player.TWO
    assert rules.get_winning_line(board) == ((1, 1), (1, 2), (1, 3))


def test_get_winning_line():
    rules = GameRules()
    assert rules.get_winning_line(board_from("O.X", "OX.", "X.O")) == ((1, 3), (2, 2), (3, 1))
    assert rules.get_winning_line(Board()) is None


def test_check_draw():
    rules = GameRules()
    assert rules.check_draw(board_from(*DRAW_ROWS))
    assert not rules.check_draw(Board())
    assert not rules.check_draw(board_from("OXO", "XOX", "XO."))


def test_win_on_full_board_is_not_a_draw():
    rules = GameRules()
    board = board_from("OOO", "XXO", "OXX")
    assert board.is_full()
    assert not rules.check_draw(board)
    assert rules.game_outcome(board) == GameOutcome.PLAYER1_WINS


def test_game_outcome():
    rules = GameRules()
    assert rules.game_outcome(board_from(*DRAW_ROWS)) == GameOutcome.DRAW
    assert rules.game_outcome(board_from("XXX", "OO.", "...")) == GameOutcome.PLAYER2_WINS
    assert not GameOutcome.IN_PROGRESS.is_over
    assert GameOutcome.DRAW.is_over


def test_would_win_does_not_touch_board():
    rules = GameRules()
    board = board_from("OO.", "XX.", "...")
    before = board.rows()

    assert rules.would_win(board, 1, 3, Player.ONE)
    assert rules.would_win(board, 2, 3, Player.TWO)
    assert not rules.would_win(board, 1, 3, Player.TWO)
    assert not rules.would_win(board, 3, 3, Player.ONE)
    assert board.rows() == before


def test_would_win_false_for_unplayable_cell():
    rules = GameRules()
    board = board_from("OO.", "XX.", "...")
    assert not rules.would_win(board, 1, 1, Player.ONE)
    assert not rules.would_win(board, 0, 3, Player.ONE)


def test_get_valid_moves():
    rules = GameRules()
    assert rules.get_valid_moves(board_from("OX.", "...", "...")) == [
        (1, 3), (2, 1), (2, 2), (2, 3), (3, 1), (3, 2), (3, 3)
    ]
    # Nothing left to play once someone has won
    assert rules.get_valid_moves(board_from("OOO", "XX.", "...")) == []


# ==================== AI ====================

def test_ai_takes_center_on_empty_board():
    assert AIPlayer(Player.TWO).get_best_move(Board()) == (2, 2)
    assert AIPlayer(Player.ONE).get_best_move(Board()) == (2, 2)


def test_ai_takes_first_corner_when_center_taken():
    board = board_from("...", ".X.", "...")
    assert AIPlayer(Player.ONE).get_best_move(board) == (1, 1)


def test_ai_takes_winning_move():
    board = board_from("X.X", ".O.", "...")
    assert AIPlayer(Player.TWO).get_best_move(board) == (1, 2)


def test_ai_blocks_opponent():
    board = board_from("XX.", ".O.", "...")
    assert AIPlayer(Player.ONE).get_best_move(board) == (1, 3)


def test_ai_prefers_win_over_block():
    board = board_from("XX.", "OO.", "...")
    assert AIPlayer(Player.TWO).get_best_move(board) == (1, 3)
    assert AIPlayer(Player.ONE).get_best_move(board) == (2, 3)


def test_ai_picks_first_win_in_row_major_order():
    # X can win at (1,3) or (2,1)
    board = board_from("XX.", ".O.", "XO.")
    assert AIPlayer(Player.TWO).get_best_move(board) == (1, 3)


def test_ai_takes_last_free_cell_that_wins():
    board = board_from("OXO", "XOX", "XO.")
    assert AIPlayer(Player.ONE).get_best_move(board) == (3, 3)


def test_ai_falls_back_to_corner_then_edge():
    board = board_from("O..", ".X.", "...")
    assert AIPlayer(Player.TWO).get_best_move(board) == (1, 3)

    # Center and corners all taken, no threats
    board = board_from("OXO", ".O.", "XOX")
    assert AIPlayer(Player.TWO).get_best_move(board) == (2, 1)
    assert AIPlayer(Player.ONE).get_best_move(board) == (2, 1)


def test_ai_returns_none_on_full_board():
    ai = AIPlayer(Player.TWO)
    assert ai.get_best_move(board_from(*DRAW_ROWS)) is None
    assert ai.get_move_suggestion(board_from(*DRAW_ROWS)) == "No moves available!"


def test_ai_is_deterministic_and_read_only():
    board = board_from("O..", "...", "..X")
    before = board.rows()
    ai = AIPlayer(Player.TWO)

    moves = {ai.get_best_move(board) for _ in range(5)}
    assert moves == {(2, 2)}
    assert AIPlayer(Player.TWO).get_next_move(board) == (2, 2)
    assert board.rows() == before


def test_ai_move_suggestion():
    board = board_from("X.X", ".O.", "...")
    assert AIPlayer(Player.TWO).get_move_suggestion(board) == "Place X at row 1, column 2"


# ==================== INPUT ====================

@pytest.mark.parametrize("text, move", [
    ("2 3", (2, 3)),
    ("2,3", (2, 3)),
    (" 1 , 1 ", (1, 1)),
    ("31", (3, 1)),
    ("3  3\n", (3, 3)),
])
def test_parse_move_accepts(text, move):
    result = MoveValidator().parse_move(text)
    assert result.is_valid
    assert result.move == move
    assert result.error_message is None


@pytest.mark.parametrize("text", ["", "hello", "a b", "1", "1 2 3", "2-2"])
def test_parse_move_rejects_garbage(text):
    result = MoveValidator().parse_move(text)
    assert not result.is_valid
    assert result.move is None
    assert "Could not read" in result.error_message


@pytest.mark.parametrize("text", ["0 1", "4 2", "2 9", "10 1"])
def test_parse_move_rejects_out_of_range(text):
    result = MoveValidator().parse_move(text)
    assert not result.is_valid
    assert "Must be 1-3" in result.error_message


# ==================== PLAYERS ====================

class _Messages:
    """Collects invalid input messages."""

    def __init__(self):
        self.invalid_inputs = []

    def show_invalid_input(self, message):
        self.invalid_inputs.append(message)


def _reader(*lines):
    """An input() stand-in returning the given lines, then EOF."""
    queue = list(lines)

    def read(prompt=""):
        if not queue:
            raise EOFError
        return queue.pop(0)

    return read


def test_scripted_player_runs_out():
    player = ScriptedPlayer(Player.ONE, (1, 1), (2, 2))
    assert player.get_next_move(Board()) == (1, 1)
    assert player.get_next_move(Board()) == (2, 2)
    assert player.get_next_move(Board()) is None


def test_console_player_asks_again_after_bad_input():
    display = _Messages()
    player = ConsoleHumanPlayer(Player.ONE, display, _reader("hello", "5 5", "2 2"))

    assert player.get_next_move(Board()) == (2, 2)
    assert len(display.invalid_inputs) == 2


@pytest.mark.parametrize("lines", [("q",), ("QUIT",), ()])
def test_console_player_can_give_up(lines):
    display = _Messages()
    player = ConsoleHumanPlayer(Player.TWO, display, _reader(*lines))
    assert player.get_next_move(Board()) is None
    assert display.invalid_inputs == []


def test_console_player_uses_builtin_input(monkeypatch):
    monkeypatch.setattr("builtins.input", _reader("3 1"))
    player = ConsoleHumanPlayer(Player.ONE, _Messages())
    assert player.get_next_move(Board()) == (3, 1)


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Module Tests")
    print("="*60)

    return pytest.main([__file__, "-v"])


if __name__ == "__main__":
    sys.exit(run_all_tests())
