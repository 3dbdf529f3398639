"""
Game session management for TicTacToe.
Tracks the board, whose turn it is, and the bot's pending move.
"""

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .ai_player import Difficulty, compute_bot_move
from .board import Board, apply_move, check_position, new_board
from .config import GameConfig
from .move_validator import MoveValidator
from .win_checker import GameStatus, get_outcome, get_winning_line


class PlayerType(Enum):
    """Who controls a seat."""
    HUMAN = "human"
    BOT = "bot"


@dataclass(frozen=True)
class PlayerInfo:
    """A player taking part in the session."""
    name: str
    symbol: str
    type: PlayerType = PlayerType.HUMAN

    @property
    def is_bot(self) -> bool:
        return self.type == PlayerType.BOT


# scheduler(delay_seconds, callback) -> handle with a cancel() method
Scheduler = Callable[[float, Callable[[], None]], object]


def timer_scheduler(delay: float, callback: Callable[[], None]) -> threading.Timer:
    """Run callback after delay seconds on a background timer thread."""
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


class GameSession:
    """
    One playthrough of TicTacToe, owned by the front end.

    Game flow:
    1. Player 1 moves first
    2. After every move the board is checked for a win or draw
    3. If the game goes on, the turn passes to the other player
    4. When a bot is to move, its move is scheduled after a short delay.
       Human moves are refused until it has played.
    5. reset() starts a new board and drops any pending bot move
    """

    def __init__(
        self,
        player1: PlayerInfo,
        player2: PlayerInfo,
        difficulty: Optional[Difficulty] = None,
        scheduler: Optional[Scheduler] = None,
        rng=None,
        think_delay: float = GameConfig.BOT_THINK_DELAY
    ):
        """
        Set up a session. The board starts empty with player 1 to move.

        Args:
            player1: First player (moves first).
            player2: Second player.
            difficulty: Bot difficulty. Required if either player is a bot.
            scheduler: Used to delay bot moves (default: threading.Timer).
            rng: Random source handed to the bot.
            think_delay: Seconds the bot waits before moving.

        Raises:
            ValueError: If the symbols clash, or a bot has no valid difficulty.
        """
        result = MoveValidator().validate_symbols(player1.symbol, player2.symbol)
        if not result.is_valid:
            raise ValueError(result.error_message)
        if difficulty is None and (player1.is_bot or player2.is_bot):
            raise ValueError("A bot player needs a difficulty")
        if difficulty is not None and not isinstance(difficulty, Difficulty):
            raise ValueError(f"Unknown difficulty {difficulty!r}")

        self.players = (player1, player2)
        self.difficulty = difficulty
        self.scheduler = scheduler if scheduler is not None else timer_scheduler
        self.rng = rng
        self.think_delay = think_delay

        # Guards state shared with the timer thread
        self._lock = threading.RLock()
        self._pending = None
        # Bumped on every bot request and every reset; stale callbacks compare against it
        self._request_id = 0

        self.board: Board = new_board()
        self.current_player = 1
        self.winner: Optional[str] = None
        self.is_draw = False
        self.is_bot_thinking = False

        with self._lock:
            self._maybe_schedule_bot()

    @classmethod
    def pvp(
        cls,
        player1_name: str = "",
        player2_name: str = "",
        player1_symbol: str = GameConfig.PLAYER1_SYMBOL,
        player2_symbol: str = GameConfig.PLAYER2_SYMBOL,
        **kwargs
    ) -> "GameSession":
        """Two humans sharing one device. Blank names get defaults."""
        return cls(
            PlayerInfo(player1_name.strip() or GameConfig.PLAYER1_NAME, player1_symbol),
            PlayerInfo(player2_name.strip() or GameConfig.PLAYER2_NAME, player2_symbol),
            **kwargs
        )

    @classmethod
    def vs_bot(
        cls,
        difficulty: Difficulty,
        player_name: str = "",
        player_symbol: str = GameConfig.PLAYER1_SYMBOL,
        bot_first: bool = False,
        **kwargs
    ) -> "GameSession":
        """
        A human against the bot.

        The bot takes the first symbol option the human didn't pick.
        """
        human = PlayerInfo(player_name.strip() or GameConfig.HUMAN_VS_BOT_NAME, player_symbol)
        bot = PlayerInfo(
            GameConfig.BOT_NAME,
            GameConfig.pick_bot_symbol(player_symbol),
            PlayerType.BOT
        )
        if bot_first:
            return cls(bot, human, difficulty=difficulty, **kwargs)
        return cls(human, bot, difficulty=difficulty, **kwargs)

    # ==================== STATE ====================

    @property
    def is_game_over(self) -> bool:
        return self.winner is not None or self.is_draw

    @property
    def current_info(self) -> PlayerInfo:
        """The player whose turn it is."""
        return self.players[self.current_player - 1]

    @property
    def opponent_info(self) -> PlayerInfo:
        return self.players[2 - self.current_player]

    def winning_line(self):
        """The completed line, for highlighting, or None."""
        return get_winning_line(self.board)

    def result_message(self) -> str:
        """Text for the result popup, or "" while the game is running."""
        if self.is_draw:
            return "It's a Draw!"
        for player in self.players:
            if self.winner == player.symbol:
                return f"{player.name} Wins!"
        return ""

    # ==================== MOVES ====================

    def play(self, row: int, col: int) -> bool:
        """
        Make a human move for the current player.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            True if the move was made, False if it was refused (game over,
            bot thinking, bot's turn, or cell taken).

        Raises:
            InvalidPositionError: If the position is off the board.
        """
        check_position(row, col)
        with self._lock:
            if self.is_game_over or self.is_bot_thinking:
                return False
            if self.current_info.is_bot:
                return False
            return self._commit(row, col)

    def reset(self):
        """Start a new board. Any pending bot move is dropped."""
        with self._lock:
            self._cancel_pending()
            self.board = new_board()
            self.current_player = 1
            self.winner = None
            self.is_draw = False
            self._maybe_schedule_bot()

    def _commit(self, row: int, col: int) -> bool:
        """Apply a move for the current player and advance the game."""
        self.board, accepted = apply_move(self.board, row, col, self.current_info.symbol)
        if not accepted:
            return False

        outcome = get_outcome(self.board)
        if outcome.status == GameStatus.WON:
            self.winner = outcome.winner
        elif outcome.status == GameStatus.DRAW:
            self.is_draw = True
        else:
            self.current_player = 3 - self.current_player
            self._maybe_schedule_bot()
        return True

    # ==================== BOT ====================

    def _maybe_schedule_bot(self):
        if self.is_game_over or not self.current_info.is_bot:
            return

        self._request_id += 1
        request_id = self._request_id
        self.is_bot_thinking = True

        handle = self.scheduler(self.think_delay, lambda: self._bot_move(request_id))

        # A synchronous scheduler may already have run the move
        if self.is_bot_thinking and self._request_id == request_id:
            self._pending = handle

    def _bot_move(self, request_id: int):
        """Timer callback: play the bot's move unless it has gone stale."""
        with self._lock:
            if request_id != self._request_id:
                return  # Session was reset while the bot was thinking

            self._pending = None
            self.is_bot_thinking = False
            if self.is_game_over:
                return

            bot = self.current_info
            move = compute_bot_move(
                self.board,
                bot.symbol,
                self.opponent_info.symbol,
                self.difficulty,
                rng=self.rng
            )
            if move is None:
                return
            self._commit(*move)

    def _cancel_pending(self):
        self._request_id += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        self.is_bot_thinking = False
