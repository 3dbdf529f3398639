"""
Bot player for TicTacToe.
Picks the bot's next move at one of three difficulty levels.
"""

import random
from contextlib import contextmanager
from enum import Enum
from typing import Optional, Sequence

from .board import EMPTY, Grid, Position, get_empty_cells
from .win_checker import detect_winner


class Difficulty(Enum):
    """Bot difficulty levels."""
    EASY = 1      # Random moves
    MEDIUM = 2    # Win or block, else random
    HARD = 3      # Full minimax

    @classmethod
    def parse(cls, text: str) -> "Difficulty":
        """Look up a difficulty by name, ignoring case."""
        try:
            return cls[text.strip().upper()]
        except KeyError:
            names = ", ".join(d.name.lower() for d in cls)
            raise ValueError(f"Unknown difficulty {text!r} (expected one of: {names})") from None


@contextmanager
def _placed(grid: Grid, row: int, col: int, symbol: str):
    """Temporarily put a symbol on the grid; always cleared on exit."""
    grid[row][col] = symbol
    try:
        yield grid
    finally:
        grid[row][col] = EMPTY


class BotPlayer:
    """
    A computer opponent.

    EASY picks any empty cell at random. MEDIUM takes a winning cell if
    there is one, otherwise blocks the opponent's winning cell, otherwise
    plays randomly. HARD searches the whole game tree with minimax and
    never loses.
    """

    def __init__(
        self,
        symbol: str,
        opponent_symbol: str,
        difficulty: Difficulty = Difficulty.HARD,
        rng=None,
        verbose: bool = False
    ):
        """
        Initialize the bot.

        Args:
            symbol: The bot's own symbol.
            opponent_symbol: The other player's symbol.
            difficulty: Which strategy to use.
            rng: Random source with a choice() method (default: random.Random()).
            verbose: Print a summary after each minimax search.

        Raises:
            ValueError: If difficulty is not a Difficulty.
        """
        if not isinstance(difficulty, Difficulty):
            raise ValueError(f"Unknown difficulty {difficulty!r}")

        self.symbol = symbol
        self.opponent_symbol = opponent_symbol
        self.difficulty = difficulty
        self.rng = rng if rng is not None else random.Random()
        self.verbose = verbose

        # How many positions the last minimax search visited (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, board: Sequence[Sequence[str]]) -> Optional[Position]:
        """
        Get the bot's move for the current position.

        Args:
            board: Current board (not modified).

        Returns:
            (row, col) to play, or None if the board is full.
        """
        if self.difficulty == Difficulty.EASY:
            return self.random_move(board)
        elif self.difficulty == Difficulty.MEDIUM:
            return self.block_or_win_move(board)
        elif self.difficulty == Difficulty.HARD:
            return self.minimax_move(board)
        raise ValueError(f"Unknown difficulty {self.difficulty!r}")

    def random_move(self, board: Sequence[Sequence[str]]) -> Optional[Position]:
        """Pick a uniformly random empty cell."""
        empty_cells = get_empty_cells(board)
        return self.rng.choice(empty_cells) if empty_cells else None

    def block_or_win_move(self, board: Sequence[Sequence[str]]) -> Optional[Position]:
        """
        Win if possible, else block, else play randomly.

        Cells are scanned in row-major order, so the first winning
        (or blocking) cell found is the one played.
        """
        empty_cells = get_empty_cells(board)
        if not empty_cells:
            return None

        grid = [list(row) for row in board]

        for symbol in (self.symbol, self.opponent_symbol):
            for row, col in empty_cells:
                with _placed(grid, row, col, symbol):
                    if detect_winner(grid) == symbol:
                        return (row, col)

        return self.rng.choice(empty_cells)

    def minimax_move(self, board: Sequence[Sequence[str]]) -> Optional[Position]:
        """
        Find the best move with an exhaustive minimax search.

        Ties go to the first best cell in row-major order.
        """
        self.positions_evaluated = 0

        empty_cells = get_empty_cells(board)
        if not empty_cells:
            return None

        grid = [list(row) for row in board]
        best_score = float('-inf')
        best_move = None

        for row, col in empty_cells:
            with _placed(grid, row, col, self.symbol):
                score = self._minimax(grid, is_maximizing=False)

            if score > best_score:
                best_score = score
                best_move = (row, col)

        if self.verbose:
            print(f"Bot evaluated {self.positions_evaluated} positions. "
                  f"Best move: {best_move} (score: {best_score})")

        return best_move

    def _minimax(self, grid: Grid, is_maximizing: bool) -> int:
        """
        Score a position by playing it out to the end.

        Args:
            grid: Working grid, restored before returning.
            is_maximizing: True if it's the bot's turn to move.

        Returns:
            +1 if the bot wins with best play, -1 if it loses, 0 for a draw.
        """
        self.positions_evaluated += 1

        winner = detect_winner(grid)
        if winner == self.symbol:
            return 1
        elif winner is not None:
            return -1

        empty_cells = get_empty_cells(grid)
        if not empty_cells:
            return 0  # Draw

        if is_maximizing:
            best = -1
            for row, col in empty_cells:
                with _placed(grid, row, col, self.symbol):
                    best = max(best, self._minimax(grid, False))
            return best
        else:
            best = 1
            for row, col in empty_cells:
                with _placed(grid, row, col, self.opponent_symbol):
                    best = min(best, self._minimax(grid, True))
            return best


def compute_bot_move(
    board: Sequence[Sequence[str]],
    bot_symbol: str,
    opponent_symbol: str,
    difficulty: Difficulty,
    rng=None
) -> Optional[Position]:
    """
    Compute the bot's next move.

    Args:
        board: Current board.
        bot_symbol: The bot's symbol.
        opponent_symbol: The other player's symbol.
        difficulty: Which strategy to use.
        rng: Optional random source for EASY/MEDIUM.

    Returns:
        (row, col), or None if there is no empty cell.
    """
    bot = BotPlayer(bot_symbol, opponent_symbol, difficulty, rng=rng)
    return bot.get_best_move(board)


# Quick test
if __name__ == "__main__":
    print("Testing BotPlayer...")

    bot = BotPlayer("O", "X", Difficulty.HARD, verbose=True)

    # Test 1: bot should block a winning move
    board = [
        ["X", "X", ""],
        ["", "O", ""],
        ["", "", ""],
    ]
    move = bot.get_best_move(board)
    print(f"Bot's move: {move}")
    assert move == (0, 2), f"Expected (0, 2), got {move}"
    print("✓ Bot correctly blocks the win!")

    # Test 2: bot should take a winning move
    board = [
        ["O", "O", ""],
        ["", "X", ""],
        ["X", "", ""],
    ]
    move = bot.get_best_move(board)
    print(f"Bot's move: {move}")
    assert move == (0, 2), f"Expected (0, 2), got {move}"
    print("✓ Bot correctly takes the win!")

    print("\nBotPlayer test done!")
