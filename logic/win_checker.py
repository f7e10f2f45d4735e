"""
Win checker for Blink Tac Toe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, List, Tuple
from .game_state import BoardState, Cell, GameStatus, Player


class WinChecker:
    """
    Checks for win conditions.

    Win condition: 3 live glyphs of the same owner in a row
    (horizontally, vertically, or diagonally). Lines are checked in
    a fixed order so results are reproducible.
    """

    WINNING_LINES = [
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    ]

    def check_winner(self, cells: List[Optional[Cell]]) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            cells: The 9 board slots.

        Returns:
            The winning Player, or None if no winner yet.
        """
        line = self.get_winning_line(cells)
        if line is None:
            return None
        return cells[line[0]].owner

    def get_winning_line(self, cells: List[Optional[Cell]]) -> Optional[Tuple[int, int, int]]:
        """
        Get the first winning line, if there is one.

        Returns:
            The line as a tuple of cell indices, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(cells, line):
                return line
        return None

    def _check_line(self, cells: List[Optional[Cell]], line: Tuple[int, int, int]) -> bool:
        a, b, c = (cells[i] for i in line)
        if a is None or b is None or c is None:
            return False
        return a.owner == b.owner == c.owner

    def check_draw(self, cells: List[Optional[Cell]], moves: int) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when every cell is filled, at least one move was
        made, and nobody has three in a row.
        """
        if self.check_winner(cells) is not None:
            return False

        return moves > 0 and all(cell is not None for cell in cells)

    def evaluate(
        self,
        cells: List[Optional[Cell]],
        moves: int
    ) -> Tuple[GameStatus, Optional[Player]]:
        """
        Classify a board. Win is checked before draw.

        Returns:
            (status, winner) where winner is only set for GameStatus.WON.
        """
        winner = self.check_winner(cells)
        if winner is not None:
            return GameStatus.WON, winner

        if self.check_draw(cells, moves):
            return GameStatus.DRAW, None

        return GameStatus.PLAYING, None

    def update_game_state(self, state: BoardState) -> BoardState:
        """
        Update the board state with winner/draw information.

        Terminal states are left alone.
        """
        if state.is_game_over:
            return state

        status, winner = self.evaluate(state.cells, state.moves)
        state.status = status
        state.winner = winner

        return state


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Top row for player 1
    cells = [None] * 9
    for i in (0, 1, 2):
        cells[i] = Cell("🔥", Player.ONE, 3, f"1-{i}")
    winner = checker.check_winner(cells)
    print(f"Test 1 (row): winner = {winner}")
    assert winner == Player.ONE

    # Test 2: Mixed owners, no winner
    cells[1] = Cell("🌊", Player.TWO, 3, "2-1")
    print(f"Test 2 (mixed): {checker.evaluate(cells, 3)}")
    assert checker.check_winner(cells) is None

    print("\nWinChecker test done!")
