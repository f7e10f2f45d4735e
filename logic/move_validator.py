"""
Move validator for Blink Tac Toe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass
from .game_state import BoardState, Player, InvalidMove, BOARD_CELLS, MAX_PER_PLAYER


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates Blink Tac Toe moves.

    Rules:
    1. Game must not be over
    2. Can only place on empty cells (0-8)
    3. Each player gets at most MAX_PER_PLAYER placements
    """

    def validate_move(
        self,
        state: BoardState,
        index: int,
        player: Player
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            state: Current board state.
            index: Cell to place in (0-8).
            player: Player making the move.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not 0 <= index < BOARD_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{BOARD_CELLS - 1}."
            )

        if state.cells[index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {state.cells[index].symbol}"
            )

        if not state.can_place(player):
            return ValidationResult(
                is_valid=False,
                error_message=f"Player {player.value} has used all {MAX_PER_PLAYER} placements!"
            )

        return ValidationResult(is_valid=True)

    def check_move(self, state: BoardState, index: int, player: Player):
        """Like validate_move, but raises InvalidMove on failure."""
        result = self.validate_move(state, index, player)
        if not result.is_valid:
            raise InvalidMove(result.error_message)

    def get_valid_moves(self, state: BoardState, player: Player) -> List[int]:
        """
        Get all valid moves for a player.

        Returns:
            List of cell indices, empty if the player cannot move.
        """
        if state.is_game_over or not state.can_place(player):
            return []

        return state.empty_cells()


# Quick test
if __name__ == "__main__":
    print("Testing MoveValidator...")

    state = BoardState()
    validator = MoveValidator()

    result = validator.validate_move(state, 4, Player.ONE)
    print(f"Move 4: valid={result.is_valid}, error={result.error_message}")

    state.place_cell(4, Player.ONE, "🔥")

    result = validator.validate_move(state, 4, Player.TWO)
    print(f"Move 4 again: valid={result.is_valid}, error={result.error_message}")

    result = validator.validate_move(state, 12, Player.TWO)
    print(f"Move 12: valid={result.is_valid}, error={result.error_message}")

    print(f"Valid moves: {validator.get_valid_moves(state, Player.TWO)}")

    print("\nMoveValidator test done!")
