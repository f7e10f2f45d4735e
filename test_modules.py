"""
Tests for the Blink Tac Toe game engine.
Run with pytest, or directly: python test_modules.py
"""

import random
import sys

import pytest

from logic.game_state import (
    BLINK_DURATION, MAX_PER_PLAYER, PLAYER_GLYPHS,
    BoardState, Cell, GameStatus, InvalidMove, Player,
)
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker
from logic.turn_controller import GameEvent, TurnController


def play(controller, moves, age=False):
    """Apply a list of cell indices, optionally aging after each one."""
    for index in moves:
        controller.apply_move(index)
        if age:
            controller.advance_turn()


def board_with(owners):
    """Build 9 slots from a dict {index: Player}."""
    cells = [None] * 9
    for index, owner in owners.items():
        cells[index] = Cell("x", owner, BLINK_DURATION, f"t{index}")
    return cells


# ==================== BOARD STATE ====================

def test_place_cell_sets_lifetime_and_counter():
    state = BoardState()
    cell = state.place_cell(4, Player.ONE, "🔥")

    assert state.cells[4] is cell
    assert cell.owner == Player.ONE
    assert cell.remaining_lifetime == BLINK_DURATION
    assert state.placed[Player.ONE] == 1
    assert state.placed[Player.TWO] == 0


def test_place_cell_rejects_occupied_and_out_of_range():
    state = BoardState()
    state.place_cell(0, Player.ONE, "🔥")

    with pytest.raises(InvalidMove):
        state.place_cell(0, Player.TWO, "🌊")
    with pytest.raises(InvalidMove):
        state.place_cell(9, Player.TWO, "🌊")
    with pytest.raises(InvalidMove):
        state.place_cell(-1, Player.TWO, "🌊")

    assert state.placed[Player.TWO] == 0


def test_place_cell_rejects_when_game_over():
    state = BoardState(status=GameStatus.DRAW)
    with pytest.raises(InvalidMove):
        state.place_cell(0, Player.ONE, "🔥")


def test_cell_survives_exactly_three_aging_passes():
    state = BoardState()
    state.place_cell(4, Player.ONE, "🔥")

    assert state.age_cells() == 0
    assert state.cells[4].remaining_lifetime == 2
    assert state.age_cells() == 0
    assert state.cells[4].remaining_lifetime == 1
    assert state.age_cells() == 1
    assert state.cells[4] is None
    assert state.vanished == 1


def test_aging_twice_at_lifetime_one_stays_empty():
    state = BoardState()
    state.cells[0] = Cell("🔥", Player.ONE, 1, "1-1")

    assert state.age_cells() == 1
    assert state.cells[0] is None
    assert state.age_cells() == 0
    assert state.cells[0] is None
    assert state.vanished == 1


def test_identities_are_unique():
    state = BoardState()
    ids = {state.place_cell(i, Player.ONE if i % 2 else Player.TWO, "x").identity for i in range(6)}
    assert len(ids) == 6


def test_copy_is_independent():
    state = BoardState()
    state.place_cell(0, Player.ONE, "🔥")
    clone = state.copy()
    state.age_cells()

    assert clone.cells[0].remaining_lifetime == BLINK_DURATION
    assert state.cells[0].remaining_lifetime == BLINK_DURATION - 1


def test_render_text_shows_glyphs_and_numbers():
    state = BoardState()
    state.place_cell(0, Player.ONE, "🔥")
    text = state.render_text()

    assert "🔥:3" in text
    assert "  9   " in text


# ==================== OUTCOME EVALUATOR ====================

@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
@pytest.mark.parametrize("player", list(Player))
def test_every_line_wins(line, player):
    checker = WinChecker()
    cells = board_with({i: player for i in line})

    assert checker.check_winner(cells) == player
    assert checker.get_winning_line(cells) == line
    assert checker.evaluate(cells, 3) == (GameStatus.WON, player)


def test_all_lines_win_for_both_players():
    checker = WinChecker()
    for line in WinChecker.WINNING_LINES:
        for player in Player:
            cells = board_with({i: player for i in line})
            assert checker.check_winner(cells) == player, line
            assert checker.get_winning_line(cells) == line


def test_mixed_line_is_not_a_win():
    checker = WinChecker()
    cells = board_with({0: Player.ONE, 1: Player.TWO, 2: Player.ONE})
    assert checker.check_winner(cells) is None
    assert checker.evaluate(cells, 3) == (GameStatus.PLAYING, None)


def test_rows_are_checked_before_columns():
    checker = WinChecker()
    cells = board_with({0: Player.ONE, 1: Player.ONE, 2: Player.ONE, 3: Player.ONE, 6: Player.ONE})
    assert checker.get_winning_line(cells) == (0, 1, 2)


def test_full_board_needs_a_move_to_be_a_draw():
    checker = WinChecker()
    owners = [Player.ONE, Player.TWO, Player.ONE,
              Player.ONE, Player.TWO, Player.TWO,
              Player.TWO, Player.ONE, Player.ONE]
    cells = board_with(dict(enumerate(owners)))

    assert checker.check_draw(cells, 9)
    assert not checker.check_draw(cells, 0)
    assert not checker.check_draw(board_with({}), 5)


def test_win_beats_draw_on_full_board():
    checker = WinChecker()
    owners = [Player.ONE, Player.ONE, Player.TWO,
              Player.TWO, Player.ONE, Player.ONE,
              Player.TWO, Player.TWO, Player.ONE]
    cells = board_with(dict(enumerate(owners)))

    assert not checker.check_draw(cells, 9)
    assert checker.evaluate(cells, 9) == (GameStatus.WON, Player.ONE)


def test_terminal_state_is_not_re_evaluated():
    checker = WinChecker()
    state = BoardState(status=GameStatus.DRAW)
    state.cells = board_with({0: Player.ONE, 1: Player.ONE, 2: Player.ONE})

    checker.update_game_state(state)
    assert state.status == GameStatus.DRAW
    assert state.winner is None


# ==================== MOVE VALIDATOR ====================

def test_validator_messages():
    validator = MoveValidator()
    state = BoardState()
    state.place_cell(4, Player.ONE, "🔥")

    assert validator.validate_move(state, 0, Player.TWO).is_valid
    result = validator.validate_move(state, 4, Player.TWO)
    assert not result.is_valid
    assert "occupied" in result.error_message

    state.placed[Player.TWO] = MAX_PER_PLAYER
    assert not validator.validate_move(state, 0, Player.TWO).is_valid
    assert validator.get_valid_moves(state, Player.TWO) == []
    assert 4 not in validator.get_valid_moves(state, Player.ONE)


# ==================== TURN CONTROLLER ====================

def test_three_in_a_row_before_aging_wins():
    controller = TurnController(rng=random.Random(0))
    play(controller, [0, 8, 1, 6, 2])

    assert controller.state.status == GameStatus.WON
    assert controller.state.winner == Player.ONE
    # Winner stays active, nothing left to age
    assert controller.current_player == Player.ONE
    assert controller.pending_aging == 0


def test_full_board_without_line_is_draw():
    controller = TurnController(rng=random.Random(1))
    play(controller, [0, 1, 2, 4, 3, 5, 7, 6, 8])

    assert controller.state.status == GameStatus.DRAW
    assert controller.state.winner is None
    assert controller.state.moves == 9


def test_winning_move_that_fills_board_is_a_win():
    controller = TurnController(rng=random.Random(2))
    play(controller, [1, 2, 5, 3, 0, 6, 4, 7, 8])

    assert controller.state.is_full()
    assert controller.state.status == GameStatus.WON
    assert controller.state.winner == Player.ONE


def test_seventh_placement_is_rejected():
    controller = TurnController(rng=random.Random(3))
    for _ in range(2 * MAX_PER_PLAYER):
        controller.apply_move(controller.state.empty_cells()[0])
        controller.advance_turn()

    assert controller.state.status == GameStatus.PLAYING
    assert controller.current_player == Player.ONE
    assert controller.state.placed[Player.ONE] == MAX_PER_PLAYER
    assert controller.snapshot().at_limit

    before = [None if c is None else c.identity for c in controller.state.cells]
    with pytest.raises(InvalidMove):
        controller.apply_move(controller.state.empty_cells()[0])

    after = [None if c is None else c.identity for c in controller.state.cells]
    assert after == before
    assert controller.state.moves == 2 * MAX_PER_PLAYER
    assert controller.state.placed[Player.ONE] == MAX_PER_PLAYER


def test_live_cells_never_exceed_limit():
    for seed in range(40):
        rng = random.Random(seed)
        controller = TurnController(rng=random.Random(seed))

        for _ in range(80):
            if rng.random() < 0.6:
                controller.try_move(rng.randrange(9))
            else:
                controller.advance_turn()

            state = controller.state
            for player in Player:
                assert len(state.live_cells(player)) <= MAX_PER_PLAYER
                assert state.placed[player] <= MAX_PER_PLAYER
            for cell in state.cells:
                if cell is not None:
                    assert 1 <= cell.remaining_lifetime <= BLINK_DURATION


def test_invalid_move_leaves_turn_alone():
    controller = TurnController(rng=random.Random(4))
    controller.apply_move(4)

    assert not controller.try_move(4)
    assert controller.current_player == Player.TWO
    assert controller.pending_aging == 1
    assert controller.state.moves == 1


def test_each_move_queues_one_aging_pass():
    controller = TurnController(rng=random.Random(5))
    play(controller, [0, 1])
    assert controller.pending_aging == 2

    controller.advance_turn()
    controller.advance_turn()
    assert controller.pending_aging == 0
    assert controller.state.cells[0].remaining_lifetime == 1
    assert controller.state.cells[1].remaining_lifetime == 1

    # Nothing queued: no-op
    assert controller.advance_turn() == 0
    assert controller.state.cells[0].remaining_lifetime == 1


def test_no_moves_after_game_over():
    controller = TurnController(rng=random.Random(6))
    play(controller, [0, 8, 1, 6, 2])

    with pytest.raises(InvalidMove):
        controller.apply_move(3)
    assert controller.advance_turn() == 0
    assert controller.state.cells[0] is not None


def test_glyphs_come_from_palette_and_follow_seed():
    first = TurnController(rng=random.Random(42))
    second = TurnController(rng=random.Random(42))
    play(first, [0, 1, 2, 3], age=True)
    play(second, [0, 1, 2, 3], age=True)

    for a, b in zip(first.state.cells, second.state.cells):
        assert (a is None) == (b is None)
        if a is not None:
            assert a.symbol == b.symbol
            assert a.symbol in PLAYER_GLYPHS[a.owner]


def test_events_are_emitted_in_order():
    events = []
    controller = TurnController(rng=random.Random(7), on_event=events.append)
    play(controller, [0, 4, 8], age=True)

    assert events == [GameEvent.PLACE, GameEvent.PLACE, GameEvent.PLACE, GameEvent.VANISH]
    assert controller.state.vanished == 1

    events.clear()
    controller.reset()
    play(controller, [0, 8, 1, 6, 2])
    assert events[-1] == GameEvent.WIN


def test_failing_listener_does_not_break_game():
    def explode(event):
        raise RuntimeError("no speakers")

    controller = TurnController(rng=random.Random(8), on_event=explode)
    play(controller, [0, 8, 1, 6, 2])

    assert controller.state.status == GameStatus.WON
    assert controller.state.moves == 5


def test_snapshot_is_a_copy():
    controller = TurnController(rng=random.Random(9))
    controller.apply_move(0)
    snap = controller.snapshot()
    controller.advance_turn()

    assert snap.cells[0].remaining_lifetime == BLINK_DURATION
    assert snap.current_player == Player.TWO
    assert snap.moves == 1
    assert snap.active_cells == 1
    assert snap.pending_aging == 1
    assert snap.winning_line is None


def test_reset_starts_a_new_game():
    controller = TurnController(rng=random.Random(10))
    play(controller, [0, 8, 1, 6, 2])
    controller.reset()

    assert controller.state.status == GameStatus.PLAYING
    assert controller.current_player == Player.ONE
    assert controller.state.empty_cells() == list(range(9))
    assert controller.state.moves == 0
    assert controller.state.placed == {Player.ONE: 0, Player.TWO: 0}


def run_all_tests():
    """Run the fixture-free tests without pytest's runner."""
    print("="*60)
    print("   Blink Tac Toe - Engine Tests")
    print("="*60)

    found = [
        (name, fn) for name, fn in sorted(globals().items())
        if name.startswith("test_") and callable(fn)
    ]
    tests = [(name, fn) for name, fn in found if fn.__code__.co_argcount == 0]
    skipped = [name for name, fn in found if fn.__code__.co_argcount > 0]

    failed = 0
    for name, fn in tests:
        try:
            fn()
            print(f"  ✓ {name}")
        except Exception as e:
            failed += 1
            print(f"  ✗ {name}: {e!r}")

    print("="*60)
    print(f"   {len(tests) - failed}/{len(tests)} passed")
    if skipped:
        print(f"   Skipped (need pytest): {', '.join(skipped)}")
    print("="*60)
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
