"""
Board model for TicTacToe.
Holds the 3x3 grid of cell marks and applies moves to it.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple


# An empty cell. Any other (non-empty) string is a player's symbol.
EMPTY = ""

BOARD_SIZE = 3

Position = Tuple[int, int]
Grid = List[List[str]]


class InvalidPositionError(ValueError):
    """Raised when a (row, col) pair is outside the 3x3 board."""

    def __init__(self, row: int, col: int):
        super().__init__(f"Invalid position ({row}, {col}). Must be 0-2.")
        self.row = row
        self.col = col


def check_position(row: int, col: int) -> None:
    """Raise InvalidPositionError unless (row, col) is on the board."""
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise InvalidPositionError(row, col)


@dataclass(frozen=True)
class Board:
    """
    An immutable 3x3 TicTacToe board.

    Cells are read as ``board[row][col]``. Each cell is either EMPTY
    or one of the two player symbols. Symbols are opaque tokens and
    are only ever compared for equality.
    """

    cells: Tuple[Tuple[str, ...], ...] = tuple(
        tuple(EMPTY for _ in range(BOARD_SIZE)) for _ in range(BOARD_SIZE)
    )

    def __post_init__(self):
        cells = tuple(tuple(row) for row in self.cells)
        if len(cells) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in cells):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")
        # Frozen, so bypass __setattr__ to store the normalised rows
        object.__setattr__(self, "cells", cells)

    def __getitem__(self, row: int) -> Tuple[str, ...]:
        return self.cells[row]

    def __iter__(self):
        return iter(self.cells)

    def __len__(self) -> int:
        return BOARD_SIZE

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[str]]) -> "Board":
        """
        Freeze a list-of-lists grid into a Board.

        Args:
            grid: 3 rows of 3 cell marks.

        Returns:
            A new Board with the same contents.
        """
        return cls(tuple(tuple(row) for row in grid))

    def copy_grid(self) -> Grid:
        """Return a mutable working copy of the cells."""
        return [list(row) for row in self.cells]

    def is_full(self) -> bool:
        """True if no cell is EMPTY."""
        return all(cell != EMPTY for row in self.cells for cell in row)

    def render(self) -> str:
        """
        Draw the board as text for the console.

        Empty cells are shown blank. Wide glyphs (emoji) will push the
        grid lines slightly out of alignment.
        """
        lines = ["    0   1   2", "  ┌───┬───┬───┐"]
        for row in range(BOARD_SIZE):
            row_str = "│"
            for col in range(BOARD_SIZE):
                mark = self.cells[row][col]
                row_str += f" {mark or ' '} │"
            lines.append(f"{row} {row_str}")
            if row < BOARD_SIZE - 1:
                lines.append("  ├───┼───┼───┤")
        lines.append("  └───┴───┴───┘")
        return "\n".join(lines)


def new_board() -> Board:
    """Create an empty board."""
    return Board()


def apply_move(board: Board, row: int, col: int, symbol: str) -> Tuple[Board, bool]:
    """
    Place a symbol on the board.

    Does not check whose turn it is, or whether the game is already over.
    The caller is responsible for that.

    Args:
        board: The current board.
        row: Row index (0-2).
        col: Column index (0-2).
        symbol: The player's symbol (non-empty).

    Returns:
        (new_board, accepted). If the cell is already taken the original
        board is returned unchanged with accepted=False.

    Raises:
        InvalidPositionError: If row or col is outside 0-2.
        ValueError: If symbol is empty.
    """
    check_position(row, col)
    if symbol == EMPTY:
        raise ValueError("Symbol must be a non-empty string")

    if board[row][col] != EMPTY:
        return board, False

    grid = board.copy_grid()
    grid[row][col] = symbol
    return Board.from_grid(grid), True


def get_empty_cells(board: Sequence[Sequence[str]]) -> List[Position]:
    """
    Get all empty cells on the board, in row-major order.

    Args:
        board: A Board or a list-of-lists grid.

    Returns:
        List of (row, col) tuples.
    """
    empty = []
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if board[row][col] == EMPTY:
                empty.append((row, col))
    return empty
