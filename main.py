"""
Console front end for TicTacToe.

Play against a friend on the same keyboard, or against the bot at
easy, medium or hard difficulty.

Run this script to play TicTacToe in the terminal!
"""

import time
from typing import Callable, Optional, Tuple

from logic import __version__
from logic.ai_player import Difficulty
from logic.config import GameConfig
from logic.game_session import GameSession
from logic.move_validator import MoveValidator


class _Done:
    """Handle for a callback that has already run."""

    def cancel(self):
        pass


def blocking_scheduler(delay: float, callback: Callable[[], None]) -> _Done:
    """Wait, then run the callback right away on this thread."""
    time.sleep(delay)
    callback()
    return _Done()


def parse_move(text: str) -> Optional[Tuple[int, int]]:
    """
    Parse a move typed as "row col" (or "row,col").

    Returns:
        (row, col), or None if the text isn't two integers.
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


class TicTacToeConsole:
    """
    Terminal game loop.

    Commands:
    - "row col" places your symbol (e.g. "1 1" for the centre)
    - "r" restarts the round
    - "q" quits
    """

    def __init__(self, session: GameSession):
        self.session = session
        self.validator = MoveValidator()
        self.is_running = False

    def start(self):
        """Start the game."""
        print("\nStarting TicTacToe game...")
        print("Enter moves as 'row col'. Press 'r' to restart, 'q' to quit.\n")

        p1, p2 = self.session.players
        print(f"   {p1.name} plays: {p1.symbol}")
        print(f"   {p2.name} plays: {p2.symbol}")

        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            print()
            print(self.session.board.render())

            if self.session.is_game_over:
                self._show_game_result()
                if not self._ask_play_again():
                    break
                continue

            player = self.session.current_info
            text = input(f"\n{player.name} ({player.symbol}) > ").strip().lower()

            if text == "q":
                print("\nGame quit by user.")
                self.is_running = False
            elif text == "r":
                self._reset_game()
            else:
                self._process_human_move(text)

    def _process_human_move(self, text: str):
        """Validate and play a typed move."""
        move = parse_move(text)
        if move is None:
            print("Please type a move as 'row col', e.g. '0 2'.")
            return

        row, col = move
        result = self.validator.validate_move(self.session.board, row, col)
        if not result.is_valid:
            print(result.error_message)
            free = self.validator.get_valid_moves(self.session.board)
            print("Free cells: " + ", ".join(f"{r} {c}" for r, c in free))
            return

        if not self.session.play(row, col):
            print("Wait for your turn!")

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "=" * 40)
        print(f"   {self.session.result_message()}")
        print("=" * 40)

    def _ask_play_again(self) -> bool:
        answer = input("\nPlay again? [y/N] ").strip().lower()
        if answer == "y":
            self._reset_game()
            return True
        return False

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.session.reset()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--pvp",
        action="store_true",
        help="Two players on one keyboard (no bot)"
    )
    parser.add_argument(
        "--difficulty",
        default=GameConfig.DEFAULT_DIFFICULTY,
        type=Difficulty.parse,
        help="Bot difficulty: easy, medium or hard "
             f"(default: {GameConfig.DEFAULT_DIFFICULTY.name.lower()})"
    )
    parser.add_argument(
        "--name",
        default="",
        help="Your name"
    )
    parser.add_argument(
        "--symbol",
        default=GameConfig.PLAYER1_SYMBOL,
        help="Your symbol (default: %(default)s)"
    )
    parser.add_argument(
        "--bot-first",
        action="store_true",
        help="Let the bot make the first move"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    args = parser.parse_args()

    try:
        if args.pvp:
            session = GameSession.pvp(
                player1_name=args.name,
                player1_symbol=args.symbol,
                player2_symbol=GameConfig.pick_bot_symbol(args.symbol),
            )
        else:
            session = GameSession.vs_bot(
                args.difficulty,
                player_name=args.name,
                player_symbol=args.symbol,
                bot_first=args.bot_first,
                scheduler=blocking_scheduler,
            )
    except ValueError as e:
        parser.error(str(e))

    console = TicTacToeConsole(session)

    try:
        console.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
