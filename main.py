"""
Main entry point for Blink Tac Toe.

Launches the Tkinter UI by default, or a console version with --no-ui.
The console keeps the window's timing: each move's aging pass runs once
AGING_DELAY_MS has gone by, so quick players can still line up three.
"""

import random
import time
from typing import Callable, List, Optional

from logic.game_state import AGING_DELAY_MS, MAX_PER_PLAYER, GameStatus, InvalidMove
from logic.turn_controller import TurnController
from audio.sound_player import SoundPlayer


class ConsoleGame:
    """
    Plays Blink Tac Toe in the terminal.

    Game flow:
    1. Run every aging pass whose delay has passed
    2. Show the board (glyph:lifetime, or the cell number if empty)
    3. Read a cell number 1-9 for the active player (empty line waits
       for all queued aging passes)
    4. Apply the move and queue its aging pass
    5. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        controller: TurnController,
        sound: Optional[SoundPlayer] = None,
        clock: Callable[[], float] = time.monotonic,
        delay_ms: int = AGING_DELAY_MS
    ):
        self.controller = controller
        self.sound = sound
        self.clock = clock
        self.delay = delay_ms / 1000.0

        # When each queued aging pass is due (clock seconds), oldest first
        self.aging_deadlines: List[float] = []

        if sound is not None:
            controller.set_listener(sound.play)

    def start(self):
        """Run the input loop until the game ends or the user quits."""
        print("\nStarting Blink Tac Toe...")
        print("Enter a cell number 1-9. Empty line waits, 'r' restarts, 'q' quits.\n")

        while True:
            self._run_due_aging()
            self._print_board()

            if self.controller.state.is_game_over:
                self._show_game_result()
                return

            snap = self.controller.snapshot()
            if snap.at_limit:
                if self.aging_deadlines:
                    print("Emoji limit reached! Press Enter to let some vanish.")
                else:
                    # Placements never come back, so this player is stuck
                    print(f"Player {snap.current_player.value} has used all "
                          f"{MAX_PER_PLAYER} placements. Press 'r' for a new game.")

            raw = input(f"Player {snap.current_player.value} move: ").strip().lower()
            if raw == "q":
                print("\nGame quit by user.")
                return
            if raw == "r":
                self._reset_game()
                continue
            if raw == "":
                self._run_due_aging(wait=True)
                continue

            index = self._parse_cell(raw)
            if index is None:
                print("Please enter a number from 1 to 9.")
                continue

            # Passes that came due while the player was typing go first
            self._run_due_aging()

            try:
                self.controller.apply_move(index)
            except InvalidMove as e:
                print(f"That cell can't be played. {e}")
                continue

            if self.controller.state.is_game_over:
                self.aging_deadlines.clear()
            else:
                self.aging_deadlines.append(self.clock() + self.delay)

    def _run_due_aging(self, wait: bool = False) -> int:
        """
        Run queued aging passes whose deadline has passed.

        Args:
            wait: Run every queued pass, as if the delay had gone by.

        Returns:
            Number of glyphs that vanished.
        """
        now = self.clock()
        removed = 0
        while self.aging_deadlines and (wait or self.aging_deadlines[0] <= now):
            self.aging_deadlines.pop(0)
            removed += self.controller.advance_turn()

        if self.controller.state.is_game_over:
            self.aging_deadlines.clear()
        if removed:
            print(f"💨 {removed} emoji(s) vanished!")
        return removed

    def _parse_cell(self, raw: str) -> Optional[int]:
        if not raw.isdigit():
            return None
        number = int(raw)
        if not 1 <= number <= 9:
            return None
        return number - 1

    def _print_board(self):
        snap = self.controller.snapshot()
        print()
        print(self.controller.state.render_text())
        print(f"Moves: {snap.moves}  Vanished: {snap.vanished}  Active: {snap.active_cells}")
        print("  ".join(
            f"P{player.value}: {count}/{MAX_PER_PLAYER}" for player, count in snap.placed.items()
        ))

    def _show_game_result(self):
        """Show the final game result."""
        state = self.controller.state
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        if state.status == GameStatus.WON:
            print(f"\n🎉 Player {state.winner.value} wins!")
        else:
            print("\n🤝 It's a draw! Good game!")

        print("\n" + "="*60)

    def _reset_game(self):
        print("\nResetting game...")
        self.aging_deadlines.clear()
        self.controller.reset()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Blink Tac Toe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the console instead of a window"
    )
    parser.add_argument(
        "--no-sound",
        action="store_true",
        help="Start with sound off"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for glyph selection (repeatable games)"
    )

    args = parser.parse_args()

    controller = TurnController(rng=random.Random(args.seed))
    sound = SoundPlayer(enabled=not args.no_sound)

    if not args.no_ui:
        from ui import BlinkTacToeUI
        print("\n" + "="*60)
        print("   Blink Tac Toe")
        print("="*60 + "\n")
        ui = BlinkTacToeUI(controller=controller, sound_player=sound)
        ui.run()
        return

    game = ConsoleGame(controller, sound)
    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        sound.close()
        print("Goodbye!")


if __name__ == "__main__":
    main()
