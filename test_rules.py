"""
Tests for the Othello rule engine.
"""
import sys
import io
import random
import logging
from pathlib import Path

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.absolute() / "src"))

from othello.game import (
    DARK, LIGHT, GameState, Move, MAX_MOVES, IllegalMoveError, opponent,
    is_legal_move, count_captures, apply_move, generate_moves,
    has_legal_moves, is_terminal, count_pieces, pass_turn
)


def random_positions(seed: int, games: int = 3):
    """Yield every position reached in a few random games."""
    rng = random.Random(seed)
    for _ in range(games):
        state = GameState.initial()
        while not is_terminal(state):
            yield state.copy()
            moves = generate_moves(state)
            if not moves:
                pass_turn(state)
                continue
            apply_move(state, rng.choice(moves))
        yield state


def test_legality_matches_captures():
    """A cell is legal exactly when it captures something."""
    for state in random_positions(seed=7):
        for row in range(8):
            for col in range(8):
                for color in (DARK, LIGHT):
                    legal = is_legal_move(state, row, col, color)
                    assert legal == (count_captures(state, row, col, color) > 0), \
                        f"Mismatch at ({row}, {col}) for color {color}\n{state}"


def test_capture_conservation():
    """A move adds one piece; flips only change colors."""
    for state in random_positions(seed=11, games=2):
        mover = state.turn
        total = count_pieces(state, DARK) + count_pieces(state, LIGHT)
        for move in generate_moves(state):
            child = state.copy()
            captured = count_captures(state, move.row, move.col, mover)
            apply_move(child, move)
            assert count_pieces(child, DARK) + count_pieces(child, LIGHT) == total + 1
            assert count_pieces(child, mover) == count_pieces(state, mover) + captured + 1
            assert child.turn == opponent(mover)


def test_generate_moves_row_major():
    for state in random_positions(seed=3, games=1):
        moves = generate_moves(state)
        assert moves == sorted(moves)
        assert len(moves) <= MAX_MOVES
        assert all(isinstance(m, Move) for m in moves)


def test_generate_moves_for_other_color():
    state = GameState.initial()
    assert generate_moves(state, LIGHT) == [Move(2, 3), Move(3, 2), Move(4, 5), Move(5, 4)]
    assert state.turn == DARK


def test_opening_flip():
    state = GameState.initial()
    assert count_captures(state, 2, 4, DARK) == 1
    apply_move(state, Move(2, 4))
    assert state.cell(3, 4) == DARK
    assert count_pieces(state, DARK) == 4
    assert count_pieces(state, LIGHT) == 1
    assert state.turn == LIGHT


def test_multi_direction_capture():
    rows = [
        "........",
        ".D.D.D..",
        "..LLL...",
        ".DL.LD..",
        "..LLL...",
        ".D.D.D..",
        "........",
        "........",
    ]
    state = GameState.from_rows(rows)
    assert count_captures(state, 3, 3, DARK) == 8
    apply_move(state, Move(3, 3))
    assert count_pieces(state, LIGHT) == 0
    assert count_pieces(state, DARK) == 17


def test_run_must_be_closed():
    """A run that reaches the edge or an empty cell flips nothing."""
    rows = [
        ".LLLLLLL",
        "L.......",
        "L.......",
        "........",
        "........",
        "........",
        "........",
        "........",
    ]
    state = GameState.from_rows(rows)
    assert not is_legal_move(state, 0, 0, DARK)
    assert count_captures(state, 0, 0, DARK) == 0


def test_out_of_range_queries_are_rejected():
    state = GameState.initial()
    for row, col in [(-1, 0), (0, -1), (8, 0), (0, 8), (100, 100)]:
        assert not is_legal_move(state, row, col, DARK)
        assert count_captures(state, row, col, DARK) == 0


def test_apply_move_rejects_bad_moves():
    state = GameState.initial()
    before = state.copy()
    with pytest.raises(IllegalMoveError):
        apply_move(state, Move(8, 0))
    with pytest.raises(IllegalMoveError):
        apply_move(state, Move(3, 3))
    with pytest.raises(IllegalMoveError):
        apply_move(state, Move(0, 0))
    assert state == before


def test_full_board_is_terminal():
    state = GameState.from_rows(["DLDLDLDL", "LDLDLDLD"] * 4)
    assert is_terminal(state)
    assert generate_moves(state) == []


def test_blocked_board_is_terminal():
    """Empty cells remain, but nobody can move."""
    rows = ["D......."] + ["........"] * 7
    state = GameState.from_rows(rows, turn=LIGHT)
    assert not has_legal_moves(state, DARK)
    assert not has_legal_moves(state, LIGHT)
    assert is_terminal(state)


def test_terminal_independent_of_turn():
    rows = ["DL......"] + ["........"] * 7
    for turn in (DARK, LIGHT):
        state = GameState.from_rows(rows, turn=turn)
        assert not is_terminal(state)
    assert not has_legal_moves(state, LIGHT)


def test_pass_turn():
    state = GameState.initial()
    pass_turn(state)
    assert state.turn == LIGHT
    assert count_pieces(state, DARK) == 2


def test_state_validation():
    with pytest.raises(ValueError):
        GameState(turn=0)
    with pytest.raises(ValueError):
        GameState.from_rows(["........"] * 7)


def test_cell_rejects_off_board_coordinates():
    state = GameState.initial()
    state.board[7, 0] = DARK
    assert state.cell(3, 3) == DARK
    assert state.cell(7, 0) == DARK
    for row, col in [(-1, 0), (0, -1), (8, 0), (0, 8)]:
        with pytest.raises(IndexError):
            state.cell(row, col)


def test_pass_is_logged_with_color_name():
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    rules_logger = logging.getLogger('othello.game.rules')
    previous_level = rules_logger.level
    rules_logger.addHandler(handler)
    rules_logger.setLevel(logging.DEBUG)
    try:
        state = GameState.initial()
        pass_turn(state)
        pass_turn(state)
    finally:
        rules_logger.removeHandler(handler)
        rules_logger.setLevel(previous_level)
    lines = stream.getvalue().splitlines()
    assert lines == ["Pass: Dark has no legal move", "Pass: Light has no legal move"]


if __name__ == "__main__":
    print("Running rule engine tests...\n")
    test_legality_matches_captures()
    print("Legality matches captures test passed!")
    test_capture_conservation()
    print("Capture conservation test passed!")
    test_generate_moves_row_major()
    print("Generate moves row major test passed!")
    test_generate_moves_for_other_color()
    print("Generate moves for other color test passed!")
    test_opening_flip()
    print("Opening flip test passed!")
    test_multi_direction_capture()
    print("Multi direction capture test passed!")
    test_run_must_be_closed()
    print("Run must be closed test passed!")
    test_out_of_range_queries_are_rejected()
    print("Out of range queries are rejected test passed!")
    test_apply_move_rejects_bad_moves()
    print("Apply move rejects bad moves test passed!")
    test_full_board_is_terminal()
    print("Full board is terminal test passed!")
    test_blocked_board_is_terminal()
    print("Blocked board is terminal test passed!")
    test_terminal_independent_of_turn()
    print("Terminal independent of turn test passed!")
    test_pass_turn()
    print("Pass turn test passed!")
    test_state_validation()
    print("State validation test passed!")
    test_cell_rejects_off_board_coordinates()
    print("Cell rejects off board coordinates test passed!")
    test_pass_is_logged_with_color_name()
    print("Pass is logged with color name test passed!")

    print("\nAll tests passed successfully!")
