"""
Depth-limited minimax with alpha-beta pruning, plus strategy adapters.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, NamedTuple, Optional

from config import get_engine_settings

from .eval import get_evaluator
from .types import EvalFn, Move, PlayerIndex

if TYPE_CHECKING:
    from .engine import GameState

logger = logging.getLogger(__name__)

INF = float("inf")


class SearchResult(NamedTuple):
    score: float
    move: Optional[Move]


class SearchEngine:
    """Alpha-beta search over the legal-move tree.

    Every branch is explored on its own copy of the state, so sibling
    explorations never share mutable state and no undo is needed.
    """

    def __init__(self, evaluator: Optional[EvalFn] = None,
                 default_depth: Optional[int] = None) -> None:
        self.evaluator: EvalFn = evaluator if evaluator is not None else get_evaluator()
        self.default_depth: int = (
            default_depth if default_depth is not None else get_engine_settings().default_depth
        )
        self.nodes: int = 0

    def _minimax(self, state: 'GameState', depth: int, alpha: float, beta: float,
                 maximizing: bool, root_player: PlayerIndex) -> float:
        self.nodes += 1
        if depth == 0 or state.is_over():
            return float(self.evaluator(state, root_player))
        moves = state.valid_moves()
        if not moves:
            return float(self.evaluator(state, root_player))
        if maximizing:
            val = -INF
            for m in moves:
                child = state.copy()
                child.apply_move(m, validate=False)
                sc = self._minimax(child, depth - 1, alpha, beta, False, root_player)
                if sc > val:
                    val = sc
                if val > alpha:
                    alpha = val
                if alpha >= beta:
                    break
            return val
        else:
            val = INF
            for m in moves:
                child = state.copy()
                child.apply_move(m, validate=False)
                sc = self._minimax(child, depth - 1, alpha, beta, True, root_player)
                if sc < val:
                    val = sc
                if val < beta:
                    beta = val
                if alpha >= beta:
                    break
            return val

    def search(self, state: 'GameState', depth: Optional[int] = None,
               alpha: float = -INF, beta: float = INF) -> SearchResult:
        """Best move for the player to move and its score from that player's view."""
        depth = self.default_depth if depth is None else depth
        root_player = state.current_player()
        self.nodes = 1
        if depth <= 0 or state.is_over():
            return SearchResult(float(self.evaluator(state, root_player)), None)
        moves = state.valid_moves()
        if not moves:
            return SearchResult(float(self.evaluator(state, root_player)), None)

        best_score = -INF
        best_move: Optional[Move] = None
        for m in moves:
            child = state.copy()
            child.apply_move(m, validate=False)
            sc = self._minimax(child, depth - 1, alpha, beta, False, root_player)
            if sc > best_score:
                best_score = sc
                best_move = m
            if best_score > alpha:
                alpha = best_score
            if alpha >= beta:
                break
        logger.debug("Search depth %d: %d nodes, best %s (%.2f)",
                     depth, self.nodes, best_move, best_score)
        return SearchResult(best_score, best_move)


class SearchStrategy(ABC):
    """Abstract interface for search strategies."""

    @abstractmethod
    def search(self, state: 'GameState', depth: int) -> SearchResult:  # pragma: no cover
        raise NotImplementedError


class AlphaBetaSearchStrategy(SearchStrategy):
    """Adapter around SearchEngine implementing the interface."""

    def __init__(self, evaluator: Optional[EvalFn] = None) -> None:
        self._engine = SearchEngine(evaluator)

    def search(self, state: 'GameState', depth: int) -> SearchResult:
        return self._engine.search(state, depth)


def get_engine(evaluator: Optional[EvalFn] = None) -> SearchEngine:
    """Get a new search engine instance."""
    return SearchEngine(evaluator)


def get_search_strategy() -> SearchStrategy:
    """Factory for a default search strategy (alpha-beta)."""
    return AlphaBetaSearchStrategy()


__all__ = [
    "AlphaBetaSearchStrategy",
    "SearchEngine",
    "SearchResult",
    "SearchStrategy",
    "get_engine",
    "get_search_strategy",
]
