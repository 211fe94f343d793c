"""
Static position evaluator for Othello.

Scores are from the point of view of the side to move. Terminal positions
return the win/loss sentinels from the config, which the heuristic terms can
never reach.
"""
from typing import Optional
import numpy as np

from ..config import EvalConfig
from .board import SIZE, GameState, opponent
from .rules import generate_moves

DEFAULT_EVAL_CONFIG = EvalConfig()

CORNERS = [(0, 0), (0, SIZE - 1), (SIZE - 1, 0), (SIZE - 1, SIZE - 1)]


def _corner_neighbours(row: int, col: int):
    """The edge-orthogonal and diagonal neighbours of a corner."""
    dr = 1 if row == 0 else -1
    dc = 1 if col == 0 else -1
    return [(row, col + dc), (row + dr, col), (row + dr, col + dc)]


CORNER_NEIGHBOURS = {corner: _corner_neighbours(*corner) for corner in CORNERS}

# Border cells other than the corners
EDGE_MASK = np.zeros((SIZE, SIZE), dtype=bool)
EDGE_MASK[0, :] = EDGE_MASK[-1, :] = EDGE_MASK[:, 0] = EDGE_MASK[:, -1] = True
for _r, _c in CORNERS:
    EDGE_MASK[_r, _c] = False


def terminal_score(state: GameState, config: Optional[EvalConfig] = None) -> int:
    """Win/loss sentinel or 0, decided by piece count alone."""
    config = config or DEFAULT_EVAL_CONFIG
    me = state.turn
    diff = int((state.board == me).sum()) - int((state.board == opponent(me)).sum())
    if diff > 0:
        return config.win_score
    if diff < 0:
        return -config.win_score
    return 0


def evaluate(state: GameState, config: Optional[EvalConfig] = None) -> int:
    """
    Score a position for the side to move.

    Args:
        state: Position to score
        config: Evaluation weights (default weights if None)

    Returns:
        Heuristic score, or a terminal sentinel when neither side can move
    """
    config = config or DEFAULT_EVAL_CONFIG
    board = state.board
    me = state.turn
    opp = opponent(me)

    my_mobility = len(generate_moves(state, me))
    opp_mobility = len(generate_moves(state, opp))
    if my_mobility == 0 and opp_mobility == 0:
        return terminal_score(state, config)

    mine = board == me
    theirs = board == opp

    score = config.material * (int(mine.sum()) - int(theirs.sum()))

    for corner in CORNERS:
        owner = board[corner]
        if owner == me:
            score += config.corner
        elif owner == opp:
            score -= config.corner
        else:
            # Taking a cell next to an open corner usually gives the corner away
            for cell in CORNER_NEIGHBOURS[corner]:
                if board[cell] == me:
                    score -= config.corner_adjacent
                elif board[cell] == opp:
                    score += config.corner_adjacent

    score += config.edge * (int(mine[EDGE_MASK].sum()) - int(theirs[EDGE_MASK].sum()))
    score += config.mobility * (my_mobility - opp_mobility)
    return int(score)
