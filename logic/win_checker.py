"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from .board import BOARD_SIZE, EMPTY


# All possible winning lines (as tuples of (row, col))
WINNING_LINES: Tuple[Tuple[Tuple[int, int], ...], ...] = (
    # Rows
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    # Columns
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    # Diagonals
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


class GameStatus(Enum):
    """Where a game stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.

    winner is only set when status is WON.
    """
    status: GameStatus
    winner: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS


def _check_line(
    board: Sequence[Sequence[str]],
    line: Sequence[Tuple[int, int]]
) -> Optional[str]:
    """
    Check if a single line has a winner.

    Args:
        board: The game board.
        line: The (row, col) positions to check.

    Returns:
        The symbol filling all three cells, None otherwise.
    """
    (r0, c0), (r1, c1), (r2, c2) = line
    first = board[r0][c0]
    if first == EMPTY:
        return None
    if first == board[r1][c1] == board[r2][c2]:
        return first
    return None


def detect_winner(board: Sequence[Sequence[str]]) -> Optional[str]:
    """
    Check if there's a winner.

    Lines are checked in a fixed order (rows, columns, then the two
    diagonals) and the first match wins.

    Args:
        board: A Board or a list-of-lists grid.

    Returns:
        The winning symbol, or None if no line is complete.
    """
    for line in WINNING_LINES:
        winner = _check_line(board, line)
        if winner is not None:
            return winner
    return None


def get_winning_line(board: Sequence[Sequence[str]]) -> Optional[Tuple[Tuple[int, int], ...]]:
    """
    Get the winning line if there is one.

    Args:
        board: The game board.

    Returns:
        The winning line as a tuple of (row, col), or None.
    """
    for line in WINNING_LINES:
        if _check_line(board, line) is not None:
            return line
    return None


def is_draw(board: Sequence[Sequence[str]]) -> bool:
    """
    Check if the game is a draw.

    A draw is a full board with no winner. A full board that does
    contain a winning line is a win, not a draw.
    """
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if board[row][col] == EMPTY:
                return False
    return detect_winner(board) is None


def is_terminal(board: Sequence[Sequence[str]]) -> bool:
    """True if the board is won or drawn."""
    return detect_winner(board) is not None or is_draw(board)


def get_outcome(board: Sequence[Sequence[str]]) -> Outcome:
    """Evaluate the board into an Outcome."""
    winner = detect_winner(board)
    if winner is not None:
        return Outcome(GameStatus.WON, winner)
    if is_draw(board):
        return Outcome(GameStatus.DRAW)
    return Outcome(GameStatus.IN_PROGRESS)


# Quick test
if __name__ == "__main__":
    print("Testing win checker...")

    board = [
        ["X", "X", "X"],
        ["", "O", ""],
        ["O", "", ""],
    ]
    winner = detect_winner(board)
    print(f"Test 1 (horizontal): winner = {winner}")
    assert winner == "X"

    board = [
        ["X", "O", "X"],
        ["X", "O", "O"],
        ["O", "X", "X"],
    ]
    print(f"Test 2 (full board): draw = {is_draw(board)}")
    assert is_draw(board)

    print("\nWin checker test done!")
