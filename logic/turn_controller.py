"""
Turn controller for Blink Tac Toe.
Runs a turn in two phases: apply_move places a glyph, advance_turn ages
the board. A UI calls advance_turn after a delay, tests call it directly.
"""

import random
from enum import Enum
from typing import Callable, Dict, Optional, Tuple
from dataclasses import dataclass

from .game_state import (
    BoardState, Cell, GameStatus, InvalidMove, Player, PLAYER_GLYPHS,
)
from .move_validator import MoveValidator
from .win_checker import WinChecker


class GameEvent(str, Enum):
    """Tags sent to the audio cue listener."""
    PLACE = "place"
    VANISH = "vanish"
    WIN = "win"
    DRAW = "draw"


EventListener = Callable[[GameEvent], None]


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of the game for rendering."""
    cells: Tuple[Optional[Cell], ...]
    current_player: Player
    status: GameStatus
    winner: Optional[Player]
    winning_line: Optional[Tuple[int, int, int]]
    moves: int
    vanished: int
    active_cells: int
    placed: Dict[Player, int]
    at_limit: bool
    pending_aging: int


class TurnController:
    """
    Owns one game and orchestrates its turns.

    Turn flow:
    1. apply_move validates and places a random glyph for the active player
    2. The outcome is checked; a win or draw ends the game right there
    3. Otherwise the active player switches and one aging pass is queued
    4. advance_turn runs the queued pass and checks the outcome again,
       since vanishing glyphs can change the result
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        on_event: Optional[EventListener] = None
    ):
        """
        Initialize the controller.

        Args:
            rng: Random source for glyph choice (default: fresh Random()).
            on_event: Called with a GameEvent on place/vanish/win/draw.
        """
        self.rng = rng or random.Random()
        self.on_event = on_event

        self.state = BoardState()
        self.current_player = Player.ONE
        self.pending_aging = 0

        self.validator = MoveValidator()
        self.win_checker = WinChecker()

    def set_listener(self, on_event: Optional[EventListener]):
        self.on_event = on_event

    def apply_move(self, index: int) -> Cell:
        """
        Place a glyph for the active player.

        Args:
            index: Cell to place in (0-8).

        Returns:
            The placed Cell.

        Raises:
            InvalidMove: If the move breaks a rule. State is unchanged.
        """
        player = self.current_player
        self.validator.check_move(self.state, index, player)

        symbol = self.rng.choice(PLAYER_GLYPHS[player])
        cell = self.state.place_cell(index, player, symbol)
        self.state.moves += 1
        self._emit(GameEvent.PLACE)

        if self._check_outcome():
            return cell

        self.current_player = player.opposite()
        self.pending_aging += 1

        return cell

    def try_move(self, index: int) -> bool:
        """apply_move for click handlers: invalid moves are just ignored."""
        try:
            self.apply_move(index)
        except InvalidMove:
            return False
        return True

    def advance_turn(self) -> int:
        """
        Run one queued aging pass and re-check the outcome.

        Returns:
            Number of glyphs that vanished (0 if nothing was queued or
            the game is over).
        """
        if self.pending_aging == 0 or self.state.is_game_over:
            return 0

        self.pending_aging -= 1
        removed = self.state.age_cells()
        if removed > 0:
            self._emit(GameEvent.VANISH)

        self._check_outcome()

        return removed

    def _check_outcome(self) -> bool:
        """Update status; emit win/draw. Returns True if the game ended."""
        self.win_checker.update_game_state(self.state)

        if self.state.status == GameStatus.WON:
            self.pending_aging = 0
            self._emit(GameEvent.WIN)
            return True
        if self.state.status == GameStatus.DRAW:
            self.pending_aging = 0
            self._emit(GameEvent.DRAW)
            return True

        return False

    def _emit(self, event: GameEvent):
        if self.on_event is None:
            return
        try:
            self.on_event(event)
        except Exception as e:
            # Sound/visual effects must never break the game
            print(f"WARNING: {event.value} listener failed: {e}")

    def snapshot(self) -> GameSnapshot:
        """Copy of everything the UI needs to draw the game."""
        state = self.state.copy()
        return GameSnapshot(
            cells=tuple(state.cells),
            current_player=self.current_player,
            status=state.status,
            winner=state.winner,
            winning_line=self.win_checker.get_winning_line(state.cells),
            moves=state.moves,
            vanished=state.vanished,
            active_cells=state.active_cell_count(),
            placed=dict(state.placed),
            at_limit=not state.can_place(self.current_player),
            pending_aging=self.pending_aging,
        )

    def reset(self):
        """Start a new game. Keeps the random source and listener."""
        self.state.reset()
        self.current_player = Player.ONE
        self.pending_aging = 0
