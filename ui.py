"""
Blink Tac Toe UI
A graphical interface for the game using Tkinter.

Shows:
- The 3x3 board with each glyph's remaining lifetime
- Whose turn it is and their glyph palette
- Placement counters, move and vanish stats
- New Game and Sound On/Off controls
"""

import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from logic.game_state import AGING_DELAY_MS, BLINK_DURATION, MAX_PER_PLAYER, PLAYER_GLYPHS, Player, GameStatus
from logic.turn_controller import GameSnapshot, TurnController
from audio.sound_player import SoundPlayer


class UIConfig:
    """Window layout, colors and timing."""

    WINDOW_TITLE = "✨ Blink Tac Toe ✨"
    WINDOW_SIZE = "900x620"
    MIN_SIZE = (760, 560)

    AGING_DELAY_MS = AGING_DELAY_MS

    FONT = 'Segoe UI'
    BG = '#1e1b4b'
    CELL_BG = '#312e81'
    CELL_FILLED_BG = '#4338ca'
    CELL_EXPIRING_BG = '#7f1d1d'   # Glyph vanishes on the next aging pass
    CELL_WIN_BG = '#a16207'
    TITLE_FG = '#facc15'
    STATUS_FG = '#fde68a'
    MUTED_FG = '#c7d2fe'
    WARN_FG = '#f87171'


class BlinkTacToeUI:
    """
    Main UI class for Blink Tac Toe.
    """

    def __init__(
        self,
        controller: Optional[TurnController] = None,
        sound_player: Optional[SoundPlayer] = None
    ):
        """Initialize the UI."""
        self.config = UIConfig()
        self.controller = controller or TurnController()
        self.sound = sound_player or SoundPlayer()
        self.controller.set_listener(self.sound.play)

        # Pending root.after() ids for queued aging passes
        self.aging_jobs: List[str] = []

        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.config

        self.root = tk.Tk()
        self.root.title(cfg.WINDOW_TITLE)
        self.root.configure(bg=cfg.BG)
        self.root.geometry(cfg.WINDOW_SIZE)
        self.root.minsize(*cfg.MIN_SIZE)

        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.BG)
        style.configure('TLabel', background=cfg.BG, foreground='white', font=(cfg.FONT, 11))
        style.configure('Title.TLabel', font=(cfg.FONT, 16, 'bold'), foreground=cfg.TITLE_FG)
        style.configure('Status.TLabel', font=(cfg.FONT, 14, 'bold'), foreground=cfg.STATUS_FG)
        style.configure('Muted.TLabel', font=(cfg.FONT, 10), foreground=cfg.MUTED_FG)
        style.configure('Warn.TLabel', font=(cfg.FONT, 10, 'bold'), foreground=cfg.WARN_FG)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        ttk.Label(main_frame, text=cfg.WINDOW_TITLE, style='Title.TLabel').pack()
        ttk.Label(
            main_frame,
            text=f"Emojis vanish after {BLINK_DURATION} turns! Use strategy and timing to win!",
            style='Muted.TLabel'
        ).pack(pady=(0, 10))

        # Left panel - board and status
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(0, 10))

        board_frame = ttk.Frame(left_frame)
        board_frame.pack(pady=10)

        self.board_cells: List[tk.Button] = []
        for index in range(9):
            cell = tk.Button(
                board_frame,
                text="",
                font=(cfg.FONT, 22, 'bold'),
                width=4,
                height=2,
                bg=cfg.CELL_BG,
                fg='white',
                activebackground=cfg.CELL_FILLED_BG,
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=index // 3, column=index % 3, padx=3, pady=3)
            self.board_cells.append(cell)

        self.status_label = ttk.Label(left_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.palette_label = ttk.Label(left_frame, text="", font=(cfg.FONT, 18))
        self.palette_label.pack()

        self.limit_label = ttk.Label(left_frame, text="", style='Warn.TLabel')
        self.limit_label.pack(pady=5)

        # Right panel - stats and controls
        right_frame = ttk.Frame(main_frame, width=300)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        ttk.Label(right_frame, text="👥 Player Stats", style='Title.TLabel').pack()
        self.player_labels = {}
        for player in Player:
            label = ttk.Label(right_frame, text="")
            label.pack(anchor=tk.W, pady=2)
            self.player_labels[player] = label

        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        ttk.Label(right_frame, text="📊 Game Stats", style='Title.TLabel').pack()

        self.moves_label = ttk.Label(right_frame, text="")
        self.moves_label.pack(anchor=tk.W)
        self.vanished_label = ttk.Label(right_frame, text="")
        self.vanished_label.pack(anchor=tk.W)
        self.active_label = ttk.Label(right_frame, text="")
        self.active_label.pack(anchor=tk.W)

        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        tk.Button(
            right_frame,
            text="🔄 New Game",
            font=(cfg.FONT, 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=20,
            command=self._reset_game
        ).pack(pady=4)

        self.sound_btn = tk.Button(
            right_frame,
            text="",
            font=(cfg.FONT, 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=20,
            command=self._toggle_sound
        )
        self.sound_btn.pack(pady=4)

        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        ttk.Label(right_frame, text="📖 How to Play", style='Title.TLabel').pack()
        rules = [
            "• Click empty cells to place random emojis",
            f"• Emojis vanish after {BLINK_DURATION} turns",
            f"• Max {MAX_PER_PLAYER} emojis per player",
            "• Get 3 in a row to win!",
        ]
        for rule in rules:
            ttk.Label(right_frame, text=rule, style='Muted.TLabel').pack(anchor=tk.W)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Place a glyph; schedule the aging pass if the game goes on."""
        if not self.controller.try_move(index):
            return

        if self.controller.pending_aging > 0:
            job = self.root.after(self.config.AGING_DELAY_MS, self._run_aging)
            self.aging_jobs.append(job)

        self._refresh()

    def _run_aging(self):
        """Delayed half of the turn."""
        if self.aging_jobs:
            self.aging_jobs.pop(0)
        self.controller.advance_turn()
        self._refresh()

    def _refresh(self):
        """Redraw everything from a fresh snapshot."""
        snap = self.controller.snapshot()
        self._update_board_display(snap)
        self._update_game_info(snap)

    def _update_board_display(self, snap: GameSnapshot):
        """Update the board grid display."""
        cfg = self.config
        winning = snap.winning_line or ()
        playing = snap.status == GameStatus.PLAYING

        for index, cell in enumerate(snap.cells):
            button = self.board_cells[index]

            if cell is None:
                state = 'normal' if playing and not snap.at_limit else 'disabled'
                button.configure(text="", bg=cfg.CELL_BG, state=state)
                continue

            if index in winning:
                bg = cfg.CELL_WIN_BG
            elif cell.remaining_lifetime == 1:
                bg = cfg.CELL_EXPIRING_BG
            else:
                bg = cfg.CELL_FILLED_BG

            button.configure(
                text=f"{cell.symbol}\n{cell.remaining_lifetime}",
                bg=bg,
                state='disabled',
                disabledforeground='white'
            )

    def _update_game_info(self, snap: GameSnapshot):
        """Update status labels."""
        if snap.status == GameStatus.WON:
            self.status_label.configure(text=f"🎉 Player {snap.winner.value} Wins! 🎉")
            self.palette_label.configure(text=" ".join(PLAYER_GLYPHS[snap.winner]))
        elif snap.status == GameStatus.DRAW:
            self.status_label.configure(text="🤝 It's a Draw! 🤝")
            self.palette_label.configure(text="")
        else:
            self.status_label.configure(text=f"Player {snap.current_player.value}'s Turn")
            self.palette_label.configure(text=" ".join(PLAYER_GLYPHS[snap.current_player]))

        if snap.status == GameStatus.PLAYING and snap.at_limit:
            self.limit_label.configure(text="Emoji limit reached! Wait for some to vanish.")
        else:
            self.limit_label.configure(text="")

        for player, label in self.player_labels.items():
            marker = "▶ " if player == snap.current_player else "   "
            glyphs = "".join(PLAYER_GLYPHS[player])
            label.configure(
                text=f"{marker}Player {player.value}  {snap.placed[player]}/{MAX_PER_PLAYER}  {glyphs}"
            )

        self.moves_label.configure(text=f"Total Moves: {snap.moves}")
        self.vanished_label.configure(text=f"Vanished Emojis: {snap.vanished}")
        self.active_label.configure(text=f"Active Emojis: {snap.active_cells}")

        self.sound_btn.configure(
            text="🔊 Sound On" if self.sound.enabled else "🔇 Sound Off"
        )

    def _cancel_aging_jobs(self):
        for job in self.aging_jobs:
            self.root.after_cancel(job)
        self.aging_jobs.clear()

    def _reset_game(self):
        """Reset the game."""
        print("Resetting game...")
        self._cancel_aging_jobs()
        self.controller.reset()
        self._refresh()

    def _toggle_sound(self):
        enabled = self.sound.toggle()
        print(f"Sound {'on' if enabled else 'off'}")
        self._refresh()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._cancel_aging_jobs()
        self.sound.close()

        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Blink Tac Toe UI")
    parser.add_argument(
        "--no-sound",
        action="store_true",
        help="Start with sound off"
    )

    args = parser.parse_args()

    print("\n" + "="*60)
    print("   Blink Tac Toe")
    print("="*60 + "\n")

    ui = BlinkTacToeUI(sound_player=SoundPlayer(enabled=not args.no_sound))
    ui.run()


if __name__ == "__main__":
    main()
