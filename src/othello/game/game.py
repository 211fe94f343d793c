"""
Othello game module.
Handles game flow: turn order, forced passes and the end of the game.
"""
import logging
from typing import List, Tuple, Optional

from .board import DARK, LIGHT, COLOR_NAMES, GameState, Move
from . import rules

logger = logging.getLogger(__name__)


class OthelloGame:
    """
    Owns the live GameState of one game and applies the caller-side policies
    the rule engine leaves out, most notably passing when a side cannot move.
    """

    def __init__(self, state: Optional[GameState] = None):
        """
        Initialize a new game.

        Args:
            state: Starting position (default: the standard opening)
        """
        self.state = state if state is not None else GameState.initial()
        self.pass_count = 0
        self.move_count = 0
        self._skip_blocked_turn()

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self.state = GameState.initial()
        self.pass_count = 0
        self.move_count = 0

    def _skip_blocked_turn(self) -> None:
        """Pass when the side to move is stuck but the opponent is not."""
        if not rules.has_legal_moves(self.state, self.state.turn) and not rules.is_terminal(self.state):
            logger.info(f"{COLOR_NAMES[self.state.turn]} has no legal move and passes")
            rules.pass_turn(self.state)
            self.pass_count += 1

    def make_move(self, row: int, col: int) -> bool:
        """
        Play a move for the side to move.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            bool: True if the move was legal and made, False otherwise
        """
        if self.is_game_over():
            return False
        if not rules.is_legal_move(self.state, row, col, self.state.turn):
            return False

        rules.apply_move(self.state, Move(row, col))
        self.move_count += 1
        self._skip_blocked_turn()

        if self.is_game_over():
            dark, light = self.get_score()
            logger.info(f"Game over after {self.move_count} moves. Dark: {dark}, Light: {light}")
        return True

    def machine_move(self, engine) -> Optional[Move]:
        """
        Let a SearchEngine choose and play the move for the side to move.

        Returns:
            The move played, or None if the game is over
        """
        if self.is_game_over():
            return None
        result = engine.find_best_move(self.state)
        if result.move is None:
            return None
        self.make_move(result.move.row, result.move.col)
        return result.move

    def get_valid_moves(self) -> List[Move]:
        """All legal moves for the side to move, row-major."""
        return rules.generate_moves(self.state)

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return rules.is_terminal(self.state)

    def get_winner(self) -> Optional[int]:
        """
        Get the winner of the game.

        Returns:
            int: DARK, LIGHT, or 0 for draw, None if game not over
        """
        if not self.is_game_over():
            return None
        dark, light = self.get_score()
        if dark > light:
            return DARK
        if light > dark:
            return LIGHT
        return 0

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current piece count (dark, light).
        """
        return rules.count_pieces(self.state, DARK), rules.count_pieces(self.state, LIGHT)

    def get_current_player(self) -> int:
        return self.state.turn

    def copy(self) -> 'OthelloGame':
        """Create a deep copy of the game."""
        new_game = OthelloGame(self.state.copy())
        new_game.pass_count = self.pass_count
        new_game.move_count = self.move_count
        return new_game

    def __str__(self) -> str:
        """String representation of the game state."""
        dark, light = self.get_score()
        result = str(self.state)
        result += f"\nScore - Dark: {dark}, Light: {light}"
        if self.is_game_over():
            winner = self.get_winner()
            if winner == 0:
                result += "\nGame over! It's a draw!"
            else:
                result += f"\nGame over! {COLOR_NAMES[winner]} wins!"
        return result
