"""
Move sources for the turn loop: search-based, human and scripted players.
"""
from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Iterable, Iterator, Optional

from config import get_engine_settings

from .search import SearchEngine
from .types import EvalFn

if TYPE_CHECKING:
    from .engine import GameState

logger = logging.getLogger(__name__)


class Player(ABC):
    """Anything that can choose a move string for the player to move."""

    @abstractmethod
    def get_move(self, state: 'GameState') -> str:  # pragma: no cover
        raise NotImplementedError


class SearchPlayer(Player):
    """Alpha-beta player that stops searching once it has no walls left.

    Out of walls, it follows the first step of its BFS shortest path. That
    step ignores pawns and can land on the opponent's square, which is not a
    valid traversal; a uniformly random legal move is played instead.
    """

    def __init__(self, depth: Optional[int] = None, evaluator: Optional[EvalFn] = None,
                 fallback_threshold: Optional[int] = None,
                 rng: Optional[random.Random] = None) -> None:
        settings = get_engine_settings()
        self.depth: int = depth if depth is not None else settings.default_depth
        self.fallback_threshold: int = (
            fallback_threshold if fallback_threshold is not None else settings.fallback_threshold
        )
        self.rng: random.Random = rng if rng is not None else random.Random(settings.seed)
        self.engine = SearchEngine(evaluator, default_depth=self.depth)

    def get_move(self, state: 'GameState') -> str:
        if state.current_player_num_walls() >= self.fallback_threshold:
            return self._fallback_move(state)
        result = self.engine.search(state, self.depth)
        if result.move is None:
            return self._fallback_move(state)
        return str(result.move)

    def _fallback_move(self, state: 'GameState') -> str:
        path = state.shortest_path_to_win()
        if path and state.is_valid_traversal(path[0]):
            return str(path[0])
        moves = state.valid_moves()
        logger.debug("Path step %s not playable on turn %d; picking from %d legal moves",
                     path[0] if path else None, state.turn, len(moves))
        return str(self.rng.choice(moves))


class HumanPlayer(Player):
    """Reads one move string per prompt, trimmed and lower-cased but otherwise unvalidated."""

    def __init__(self, input_fn: Callable[[str], str] = input, prompt: str = "Move: ") -> None:
        self.input_fn = input_fn
        self.prompt = prompt

    def get_move(self, state: 'GameState') -> str:
        return self.input_fn(self.prompt).strip().lower()


class ScriptedPlayer(Player):
    """Plays a fixed sequence of move strings."""

    def __init__(self, moves: Iterable[str]) -> None:
        self._moves: Iterator[str] = iter(moves)

    def get_move(self, state: 'GameState') -> str:
        try:
            return next(self._moves)
        except StopIteration:
            raise RuntimeError(f"Scripted player ran out of moves on turn {state.turn}") from None

