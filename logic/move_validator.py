"""
Move validator for TicTacToe.
Validates that moves and player setup follow the rules.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .board import BOARD_SIZE, EMPTY, Position, get_empty_cells
from .win_checker import is_terminal


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Position must be on the board
    3. Can only place on empty cells
    4. The two players' symbols must be non-empty and different
    """

    def validate_move(
        self,
        board: Sequence[Sequence[str]],
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place the symbol (0-2).
            col: Column to place the symbol (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if is_terminal(board):
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-2."
            )

        if board[row][col] != EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {board[row][col]}"
            )

        return ValidationResult(is_valid=True)

    def validate_symbols(self, symbol_a: str, symbol_b: str) -> ValidationResult:
        """
        Check that two players can share a board.

        Symbols identify both a mark on the board and the player who owns
        it, so they must differ for the whole session.
        """
        if symbol_a == EMPTY or symbol_b == EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message="Both players need a symbol"
            )

        if symbol_a == symbol_b:
            return ValidationResult(
                is_valid=False,
                error_message=f"Both players picked {symbol_a}. Symbols must be different."
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Sequence[Sequence[str]]) -> List[Position]:
        """
        Get all valid moves.

        Args:
            board: Current board.

        Returns:
            List of (row, col) positions, empty once the game is over.
        """
        if is_terminal(board):
            return []
        return get_empty_cells(board)
