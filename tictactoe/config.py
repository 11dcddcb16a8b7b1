"""
Game configuration for TicTacToe.
Board geometry, player marks, and the text shown to players.
"""


class GameConfig:
    """
    Configuration class for game settings.
    All coordinates are 1-based (row, column) pairs.
    """
    
    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    
    # Valid row/column indices
    MIN_INDEX = 1
    MAX_INDEX = BOARD_SIZE
    
    # All possible winning lines
    # Order matters: rows, then columns, then diagonals
    WINNING_LINES = (
        # Rows
        ((1, 1), (1, 2), (1, 3)),
        ((2, 1), (2, 2), (2, 3)),
        ((3, 1), (3, 2), (3, 3)),
        # Columns
        ((1, 1), (2, 1), (3, 1)),
        ((1, 2), (2, 2), (3, 2)),
        ((1, 3), (2, 3), (3, 3)),
        # Diagonals
        ((1, 1), (2, 2), (3, 3)),
        ((1, 3), (2, 2), (3, 1)),
    )
    
    # ==================== AI PREFERENCES ====================
    CENTER = (2, 2)
    CORNERS = ((1, 1), (1, 3), (3, 1), (3, 3))
    EDGES = ((1, 2), (2, 1), (2, 3), (3, 2))
    
    # ==================== DISPLAY SETTINGS ====================
    # Player One plays O, Player Two plays X
    PLAYER_ONE_SYMBOL = "O"
    PLAYER_TWO_SYMBOL = "X"
    EMPTY_SYMBOL = " "
    
    # ANSI sequence to wipe the terminal
    CLEAR_SEQUENCE = "\033[2J\033[H"
    
    # ==================== MODE SELECTION ====================
    MODE_HUMAN_VS_HUMAN = "1"
    MODE_HUMAN_VS_AI = "2"
    
    MODE_PROMPT = (
        "Select game mode:\n"
        "  1) Human vs Human\n"
        "  2) Human vs AI\n"
        "> "
    )
    MOVE_PROMPT = "Enter row and column (1-3), or 'q' to quit: "
    QUIT_COMMANDS = ("q", "quit", "exit")
