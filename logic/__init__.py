"""
Logic module for TicTacToe.
Handles the board, rules, bot opponent, and game session.
"""

__version__ = "1.0.0"

from .board import (
    Board,
    EMPTY,
    InvalidPositionError,
    apply_move,
    get_empty_cells,
    new_board,
)
from .win_checker import (
    GameStatus,
    Outcome,
    detect_winner,
    get_outcome,
    get_winning_line,
    is_draw,
    is_terminal,
)
from .move_validator import MoveValidator, ValidationResult
from .ai_player import BotPlayer, Difficulty, compute_bot_move
from .config import GameConfig
from .game_session import GameSession, PlayerInfo, PlayerType
