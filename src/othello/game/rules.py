"""
Rule engine for Othello.

Every function takes an explicit GameState and holds no state of its own.
Legality, capture counting and move application all go through the same
directional scan, ``_capture_runs``.
"""
import logging
from typing import List, Optional, Tuple

from .board import (
    SIZE, BOARD_SIZE, EMPTY, DARK, LIGHT, COLOR_NAMES, GameState, Move, opponent, in_bounds
)

logger = logging.getLogger(__name__)

# Capacity any fixed move buffer must provide; a position never has more
# legal moves than there are cells.
MAX_MOVES = BOARD_SIZE

DIRECTIONS = [(-1, -1), (-1, 0), (-1, 1),
              (0, -1),           (0, 1),
              (1, -1),  (1, 0),  (1, 1)]


class IllegalMoveError(ValueError):
    """Raised when apply_move is handed a move that cannot be played."""


def _capture_runs(cells, row: int, col: int, color: int) -> List[Tuple[int, int, int]]:
    """
    Scan the 8 rays out of (row, col) for runs that placing ``color`` would flip.

    Args:
        cells: Nested list view of the board (``board.tolist()``)
        row, col: The candidate cell, assumed on the board
        color: The color being placed

    Returns:
        List of (dr, dc, length) for every direction with a non-empty run of
        opposing pieces closed by a ``color`` piece
    """
    other = opponent(color)
    runs = []
    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        length = 0
        while 0 <= r < SIZE and 0 <= c < SIZE and cells[r][c] == other:
            r += dr
            c += dc
            length += 1
        if length and 0 <= r < SIZE and 0 <= c < SIZE and cells[r][c] == color:
            runs.append((dr, dc, length))
    return runs


def _is_legal(cells, row: int, col: int, color: int) -> bool:
    return cells[row][col] == EMPTY and bool(_capture_runs(cells, row, col, color))


def is_legal_move(state: GameState, row: int, col: int, color: int) -> bool:
    """Check whether ``color`` may place at (row, col). Off-board cells are never legal."""
    if not in_bounds(row, col) or color not in (DARK, LIGHT):
        return False
    return _is_legal(state.board.tolist(), row, col, color)


def count_captures(state: GameState, row: int, col: int, color: int) -> int:
    """Number of opposing pieces that placing ``color`` at (row, col) would flip."""
    if not in_bounds(row, col) or color not in (DARK, LIGHT):
        return 0
    cells = state.board.tolist()
    if cells[row][col] != EMPTY:
        return 0
    return sum(length for _, _, length in _capture_runs(cells, row, col, color))


def apply_move(state: GameState, move: Move) -> None:
    """
    Place a piece for the side to move, flip every captured run and pass the turn.

    Raises:
        IllegalMoveError: If the move is off the board, targets an occupied
            cell or captures nothing. The state is unchanged in that case.
    """
    row, col = move
    color = state.turn
    if not in_bounds(row, col):
        raise IllegalMoveError(f"Move {tuple(move)} is off the board")
    cells = state.board.tolist()
    if cells[row][col] != EMPTY:
        raise IllegalMoveError(f"Cell {tuple(move)} is already occupied")
    runs = _capture_runs(cells, row, col, color)
    if not runs:
        raise IllegalMoveError(f"Move {tuple(move)} captures nothing")

    board = state.board
    board[row, col] = color
    for dr, dc, length in runs:
        for step in range(1, length + 1):
            board[row + dr * step, col + dc * step] = color
    state.turn = opponent(color)


def generate_moves(state: GameState, color: Optional[int] = None) -> List[Move]:
    """
    All legal moves for ``color`` (default: the side to move) in row-major order.

    The order is the search tie-break, so it must stay row-major.
    """
    if color is None:
        color = state.turn
    cells = state.board.tolist()
    moves = [Move(r, c) for r in range(SIZE) for c in range(SIZE)
             if _is_legal(cells, r, c, color)]
    assert len(moves) <= MAX_MOVES
    return moves


def has_legal_moves(state: GameState, color: int) -> bool:
    """Check whether ``color`` has at least one legal move."""
    cells = state.board.tolist()
    return any(_is_legal(cells, r, c, color)
               for r in range(SIZE) for c in range(SIZE))


def is_terminal(state: GameState) -> bool:
    """The game is over when neither color can move, whoever is on turn."""
    return not has_legal_moves(state, DARK) and not has_legal_moves(state, LIGHT)


def count_pieces(state: GameState, color: int) -> int:
    """Number of pieces of ``color`` on the board."""
    return int((state.board == color).sum())


def pass_turn(state: GameState) -> None:
    """
    Hand the turn to the opponent without placing a piece.

    Only valid when the side to move has no legal move; the caller owns that
    policy, this just flips ``turn``.
    """
    logger.debug(f"Pass: {COLOR_NAMES[state.turn]} has no legal move")
    state.turn = opponent(state.turn)
