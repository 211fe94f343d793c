"""
Fixed-depth minimax search with optional alpha-beta pruning.

The engine only talks to a game through the ``GameRules`` capability
interface, so it holds no game-specific fields. ``OthelloRules`` plugs the
Othello rule engine and evaluator into it.
"""
import logging
import math
import time
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Protocol, TypeVar

from ..config import EvalConfig
from ..game.board import LIGHT, GameState, Move
from ..game import rules
from ..game.evaluator import evaluate

logger = logging.getLogger(__name__)

S = TypeVar('S')
M = TypeVar('M')


class GameRules(Protocol[S, M]):
    """Everything the search needs to know about a game."""

    def generate_moves(self, state: S) -> List[M]:
        """Legal moves for the side to move, in a fixed order."""
        ...

    def copy(self, state: S) -> S:
        ...

    def apply_move(self, state: S, move: M) -> None:
        ...

    def is_terminal(self, state: S) -> bool:
        ...

    def evaluate(self, state: S) -> float:
        """Static score from the point of view of the side to move."""
        ...

    def is_maximizing_player(self, state: S) -> bool:
        """True when the side to move is the fixed maximizing side."""
        ...


class OthelloRules:
    """GameRules implementation backed by the Othello rule engine."""

    def __init__(self, maximizing_color: int = LIGHT, eval_config: Optional[EvalConfig] = None):
        """
        Args:
            maximizing_color: The machine's color; scores are maximized for it
            eval_config: Evaluator weights
        """
        self.maximizing_color = maximizing_color
        self.eval_config = eval_config

    def generate_moves(self, state: GameState) -> List[Move]:
        return rules.generate_moves(state)

    def copy(self, state: GameState) -> GameState:
        return state.copy()

    def apply_move(self, state: GameState, move: Move) -> None:
        rules.apply_move(state, move)

    def is_terminal(self, state: GameState) -> bool:
        return rules.is_terminal(state)

    def evaluate(self, state: GameState) -> int:
        return evaluate(state, self.eval_config)

    def is_maximizing_player(self, state: GameState) -> bool:
        return state.turn == self.maximizing_color


@dataclass
class SearchResult(Generic[M]):
    """Chosen move plus diagnostics. ``nodes`` and ``elapsed`` never affect play."""
    move: Optional[M]
    score: float
    nodes: int
    elapsed: float


class SearchEngine:
    """Bounded-depth minimax over any game exposing GameRules."""

    def __init__(self, game_rules: GameRules, depth: int = 3, use_alpha_beta: bool = True):
        """
        Initialize the search engine.

        Args:
            game_rules: Capability set for the game being searched
            depth: Search depth counting the root move. Root moves are searched at
                depth - 1 and leaves are reached at depth <= 0, so depths 0 and 1
                both score each root move by its immediate evaluation
            use_alpha_beta: Prune branches that cannot change the result
        """
        if depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {depth}")
        self.rules = game_rules
        self.depth = depth
        self.use_alpha_beta = use_alpha_beta
        self.nodes = 0

    def _score(self, state: Any) -> float:
        """Evaluator score adjusted to the maximizing side's point of view."""
        value = self.rules.evaluate(state)
        return value if self.rules.is_maximizing_player(state) else -value

    def _minimax(self, state: Any, depth: int, alpha: float, beta: float) -> float:
        self.nodes += 1
        if depth <= 0 or self.rules.is_terminal(state):
            return self._score(state)

        moves = self.rules.generate_moves(state)
        if not moves:
            # The side to move must pass; passing is not searched
            return self._score(state)

        maximizing = self.rules.is_maximizing_player(state)
        best = -math.inf if maximizing else math.inf
        for move in moves:
            child = self.rules.copy(state)
            self.rules.apply_move(child, move)
            value = self._minimax(child, depth - 1, alpha, beta)
            if maximizing:
                best = max(best, value)
                alpha = max(alpha, best)
            else:
                best = min(best, value)
                beta = min(beta, best)
            if self.use_alpha_beta and alpha >= beta:
                break
        return best

    def find_best_move(self, state: Any) -> SearchResult:
        """
        Pick a move for the side to move in ``state``.

        The caller's state is never modified. Among equally scored moves the
        first in generation order wins.

        Returns:
            SearchResult whose move is None when the side to move has no move
        """
        self.nodes = 1
        start_time = time.perf_counter()

        moves = [] if self.rules.is_terminal(state) else self.rules.generate_moves(state)
        if not moves:
            elapsed = time.perf_counter() - start_time
            logger.debug("No move available, nothing to search")
            return SearchResult(move=None, score=self._score(state), nodes=self.nodes, elapsed=elapsed)

        maximizing = self.rules.is_maximizing_player(state)
        alpha, beta = -math.inf, math.inf
        best_move = None
        best_score = -math.inf if maximizing else math.inf

        for move in moves:
            child = self.rules.copy(state)
            self.rules.apply_move(child, move)
            value = self._minimax(child, self.depth - 1, alpha, beta)
            # Strict comparison keeps the earliest move on ties
            if (maximizing and value > best_score) or (not maximizing and value < best_score):
                best_score = value
                best_move = move
            if maximizing:
                alpha = max(alpha, best_score)
            else:
                beta = min(beta, best_score)

        elapsed = time.perf_counter() - start_time
        logger.debug(f"Search depth {self.depth}: move {best_move} score {best_score} "
                    f"nodes {self.nodes} time {elapsed:.3f}s")
        return SearchResult(move=best_move, score=best_score, nodes=self.nodes, elapsed=elapsed)


def create_engine(config, maximizing_color: Optional[int] = None,
                  depth: Optional[int] = None) -> SearchEngine:
    """
    Build an Othello search engine from a Config.

    Args:
        config: Project configuration
        maximizing_color: Side the engine plays (default: config.search.machine_color)
        depth: Explicit depth overriding the configured one
    """
    config.eval.validate()
    color = maximizing_color if maximizing_color is not None else config.search.machine_color
    game_rules = OthelloRules(maximizing_color=color, eval_config=config.eval)
    return SearchEngine(
        game_rules,
        depth=depth if depth is not None else config.search.resolved_depth(),
        use_alpha_beta=config.search.use_alpha_beta,
    )
