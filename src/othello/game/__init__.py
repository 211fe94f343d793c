"""
Othello game module.
This package contains the rule engine, evaluator and game flow.
"""

from .board import EMPTY, DARK, LIGHT, GameState, Move, opponent
from .rules import (
    MAX_MOVES, IllegalMoveError, is_legal_move, count_captures, apply_move,
    generate_moves, has_legal_moves, is_terminal, count_pieces, pass_turn
)
from .evaluator import evaluate
from .game import OthelloGame

__all__ = [
    'EMPTY', 'DARK', 'LIGHT', 'GameState', 'Move', 'opponent',
    'MAX_MOVES', 'IllegalMoveError', 'is_legal_move', 'count_captures', 'apply_move',
    'generate_moves', 'has_legal_moves', 'is_terminal', 'count_pieces', 'pass_turn',
    'evaluate', 'OthelloGame',
]
