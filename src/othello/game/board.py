"""
Board module for Othello.
Holds the board grid, the side to move and the move type.
"""
from typing import NamedTuple, Optional
import numpy as np

# Board dimensions
SIZE = 8
BOARD_SIZE = SIZE * SIZE

# Cell values
EMPTY = 0
DARK = 1   # Moves first
LIGHT = 2

COLOR_NAMES = {DARK: 'Dark', LIGHT: 'Light'}


class Move(NamedTuple):
    """A (row, col) placement, meaningful only against the state it was generated for."""
    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


def opponent(color: int) -> int:
    """Return the other color."""
    return 3 - color


def in_bounds(row: int, col: int) -> bool:
    """Check that a coordinate lies on the board."""
    return 0 <= row < SIZE and 0 <= col < SIZE


class GameState:
    """
    The board grid plus the color whose turn it is.

    Only ``apply_move`` in the rules module mutates a state; the search
    works on copies.
    """

    __slots__ = ['board', 'turn']

    def __init__(self, board: Optional[np.ndarray] = None, turn: int = DARK):
        """
        Initialize a state.

        Args:
            board: 8x8 array of EMPTY/DARK/LIGHT. If None, the board is empty.
            turn: The color to move next
        """
        if board is None:
            board = np.zeros((SIZE, SIZE), dtype=np.int8)
        elif board.shape != (SIZE, SIZE):
            raise ValueError("Only 8x8 board is supported")
        if turn not in (DARK, LIGHT):
            raise ValueError(f"Invalid turn color: {turn}")
        self.board = board
        self.turn = turn

    @classmethod
    def initial(cls) -> 'GameState':
        """Create the standard starting position with Dark to move."""
        state = cls()
        mid = SIZE // 2 - 1
        state.board[mid, mid] = DARK
        state.board[mid, mid + 1] = LIGHT
        state.board[mid + 1, mid] = LIGHT
        state.board[mid + 1, mid + 1] = DARK
        return state

    @classmethod
    def from_rows(cls, rows, turn: int = DARK) -> 'GameState':
        """
        Build a state from eight strings using '.', 'D' and 'L'.

        Handy for setting up positions in tests and scripts.
        """
        symbols = {'.': EMPTY, 'D': DARK, 'L': LIGHT}
        if len(rows) != SIZE or any(len(r) != SIZE for r in rows):
            raise ValueError("Expected 8 rows of 8 cells")
        board = np.array([[symbols[ch] for ch in row] for row in rows], dtype=np.int8)
        return cls(board, turn)

    def copy(self) -> 'GameState':
        """Create a deep copy of the state."""
        return GameState(self.board.copy(), self.turn)

    def cell(self, row: int, col: int) -> int:
        """Return the value at (row, col)."""
        if not in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is off the board")
        return int(self.board[row, col])

    def __eq__(self, other) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self.turn == other.turn and np.array_equal(self.board, other.board)

    def __str__(self) -> str:
        """Return a string representation of the board."""
        symbols = {EMPTY: '.', DARK: 'D', LIGHT: 'L'}
        lines = ['  ' + ' '.join(str(c) for c in range(SIZE))]
        for i in range(SIZE):
            lines.append(f"{i} " + ' '.join(symbols[int(v)] for v in self.board[i]))
        lines.append(f"Turn: {COLOR_NAMES[self.turn]}")
        return "\n".join(lines)
