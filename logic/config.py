"""
Game configuration for TicTacToe.
Symbols, default names, and bot pacing.
"""

from .ai_player import Difficulty


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak the game!
    """

    # ==================== BOT SETTINGS ====================
    # Pause before the bot plays, in seconds. Pacing only.
    BOT_THINK_DELAY = 0.5

    # Difficulty preselected on the bot setup screen
    DEFAULT_DIFFICULTY = Difficulty.EASY

    # ==================== SYMBOLS ====================
    # Symbols a player can pick from
    SYMBOL_OPTIONS = [
        "⭕", "❌", "⭐", "🍀", "🐱", "🐶",
        "🍕", "🎲", "🎮", "🌈", "🔥", "💎",
    ]

    PLAYER1_SYMBOL = "⭕"
    PLAYER2_SYMBOL = "❌"

    # ==================== NAMES ====================
    # Used when a name is left blank
    PLAYER1_NAME = "Player 1"
    PLAYER2_NAME = "Player 2"
    HUMAN_VS_BOT_NAME = "You"
    BOT_NAME = "Bot"

    @classmethod
    def pick_bot_symbol(cls, player_symbol: str) -> str:
        """
        Pick the bot's symbol.

        Args:
            player_symbol: The symbol the human chose.

        Returns:
            The first option that isn't the human's symbol.
        """
        return next(s for s in cls.SYMBOL_OPTIONS if s != player_symbol)
