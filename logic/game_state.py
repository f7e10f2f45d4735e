"""
Game state management for Blink Tac Toe.
Tracks the board, per-cell lifetimes, and the placement counters.
"""

from enum import Enum
from typing import Optional, List, Dict
from dataclasses import dataclass, field


class Player(Enum):
    """The two players in the game."""
    ONE = 1
    TWO = 2

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.TWO if self == Player.ONE else Player.ONE


class GameStatus(Enum):
    """Where the game is. WON and DRAW are terminal."""
    PLAYING = "playing"
    WON = "won"
    DRAW = "draw"


class InvalidMove(ValueError):
    """Raised when a placement is not allowed."""


BOARD_CELLS = 9

# Glyphs vanish after this many aging passes
BLINK_DURATION = 3

# Placements allowed per player for the whole game
MAX_PER_PLAYER = 6

# Delay between a placement and its aging pass (milliseconds)
AGING_DELAY_MS = 500

# Each player draws a random glyph from its own palette
PLAYER_GLYPHS = {
    Player.ONE: ["🔥", "⚡", "💫", "🌟", "✨"],
    Player.TWO: ["🌊", "❄️", "🌙", "💎", "🔮"],
}


@dataclass
class Cell:
    """
    A glyph sitting on the board.
    """
    symbol: str                 # Glyph from the owner's palette
    owner: Player               # Who placed it
    remaining_lifetime: int     # Aging passes left before it vanishes
    identity: str               # Unique token (e.g. "1-7")


def _empty_counts() -> Dict[Player, int]:
    return {Player.ONE: 0, Player.TWO: 0}


@dataclass
class BoardState:
    """
    The board half of the game engine.

    Tracks:
    - The 9 slots (row-major 3x3, None means empty)
    - How many glyphs each player has placed (0-6, never decremented)
    - Game status and winner
    - Running stats (moves made, glyphs vanished)
    """

    cells: List[Optional[Cell]] = field(
        default_factory=lambda: [None] * BOARD_CELLS
    )

    placed: Dict[Player, int] = field(default_factory=_empty_counts)

    status: GameStatus = GameStatus.PLAYING
    winner: Optional[Player] = None

    moves: int = 0
    vanished: int = 0

    # Serial used to build cell identities
    _serial: int = 0

    @property
    def is_game_over(self) -> bool:
        return self.status != GameStatus.PLAYING

    def can_place(self, player: Player) -> bool:
        """True if the player still has placements left."""
        return self.placed[player] < MAX_PER_PLAYER

    def place_cell(self, index: int, player: Player, symbol: str) -> Cell:
        """
        Put a new glyph on the board.

        Args:
            index: Slot index (0-8).
            player: The owner.
            symbol: Glyph to show.

        Returns:
            The new Cell.

        Raises:
            InvalidMove: Game over, bad index, occupied slot, or limit reached.
        """
        if self.is_game_over:
            raise InvalidMove("Game is already over!")

        if not 0 <= index < BOARD_CELLS:
            raise InvalidMove(f"Invalid cell {index}. Must be 0-{BOARD_CELLS - 1}.")

        if self.cells[index] is not None:
            raise InvalidMove(f"Cell {index} is already occupied by {self.cells[index].symbol}")

        if not self.can_place(player):
            raise InvalidMove(f"Player {player.value} has no placements left!")

        self._serial += 1
        cell = Cell(
            symbol=symbol,
            owner=player,
            remaining_lifetime=BLINK_DURATION,
            identity=f"{player.value}-{self._serial}",
        )
        self.cells[index] = cell
        self.placed[player] += 1

        return cell

    def age_cells(self) -> int:
        """
        Run one aging pass.

        Every live cell loses one turn of lifetime; cells that reach zero
        are removed.

        Returns:
            Number of cells removed.
        """
        removed = 0
        for index, cell in enumerate(self.cells):
            if cell is None:
                continue
            cell.remaining_lifetime -= 1
            if cell.remaining_lifetime <= 0:
                self.cells[index] = None
                removed += 1

        self.vanished += removed
        return removed

    def empty_cells(self) -> List[int]:
        """Indices of all empty slots."""
        return [i for i, cell in enumerate(self.cells) if cell is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def live_cells(self, player: Player) -> List[int]:
        """Indices of the cells a player currently owns."""
        return [
            i for i, cell in enumerate(self.cells)
            if cell is not None and cell.owner == player
        ]

    def active_cell_count(self) -> int:
        return BOARD_CELLS - len(self.empty_cells())

    def reset(self):
        """Clear everything for a new game."""
        self.cells = [None] * BOARD_CELLS
        self.placed = _empty_counts()
        self.status = GameStatus.PLAYING
        self.winner = None
        self.moves = 0
        self.vanished = 0
        self._serial = 0

    def copy(self) -> "BoardState":
        """Create a deep copy of the board state."""
        return BoardState(
            cells=[
                None if cell is None else Cell(
                    cell.symbol, cell.owner, cell.remaining_lifetime, cell.identity
                )
                for cell in self.cells
            ],
            placed=dict(self.placed),
            status=self.status,
            winner=self.winner,
            moves=self.moves,
            vanished=self.vanished,
            _serial=self._serial,
        )

    def render_text(self) -> str:
        """Board as console text: glyph plus lifetime, or the cell number."""
        border = "+------+------+------+"
        lines = [border]
        for row in range(3):
            parts = []
            for col in range(3):
                index = row * 3 + col
                cell = self.cells[index]
                if cell is None:
                    parts.append(f"  {index + 1}   ")
                else:
                    parts.append(f" {cell.symbol}:{cell.remaining_lifetime} ")
            lines.append("|" + "|".join(parts) + "|")
            lines.append(border)
        return "\n".join(lines)


# Quick test
if __name__ == "__main__":
    print("Testing BoardState...")

    state = BoardState()
    state.place_cell(4, Player.ONE, "🔥")
    state.place_cell(0, Player.TWO, "🌊")
    print(state.render_text())

    for _ in range(3):
        removed = state.age_cells()
        print(f"Aged, removed {removed}")
    print(state.render_text())

    print("\nBoardState test done!")
