"""
Evaluation interfaces and the default path-length evaluator.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional, Sequence, Union

import numpy as np

from config import get_eval_settings

from .types import GOAL_ROWS, PlayerIndex

if TYPE_CHECKING:
    from .engine import GameState

WIN_SCORE: float = 10000.0

# Feature order: opponent path, own path, own walls left, opponent walls left
FEATURE_NAMES = ("opponent_path", "own_path", "own_walls", "opponent_walls")


class Evaluator(ABC):
    """Abstract evaluator interface for position scoring.

    Scores are from the point of view of `player`: higher is better for it.
    """

    @abstractmethod
    def evaluate_position(self, state: 'GameState', player: PlayerIndex) -> float:  # pragma: no cover
        raise NotImplementedError

    def __call__(self, state: 'GameState', player: PlayerIndex) -> float:
        return self.evaluate_position(state, player)

    def batch_predict(
        self,
        states: Sequence['GameState'],
        players: Union[List[PlayerIndex], np.ndarray],
    ) -> np.ndarray:
        """Score several positions. Default uses one call per position."""
        if isinstance(players, list):
            players_np = np.array(players, dtype=np.int64)
        else:
            players_np = players
        out = np.zeros(len(states), dtype=np.float32)
        for i, state in enumerate(states):
            out[i] = float(self.evaluate_position(state, int(players_np[i])))
        return out


def path_length(state: 'GameState', player: PlayerIndex) -> int:
    """Number of steps `player` needs to reach its goal row, ignoring pawns."""
    return len(state.shortest_path_to_row(state.positions[player], GOAL_ROWS[player]))


class PathLengthEvaluator(Evaluator):
    """Linear evaluation over shortest-path lengths and remaining walls."""

    def __init__(self, weights: Optional[Union[Sequence[float], np.ndarray]] = None) -> None:
        if weights is None:
            settings = get_eval_settings()
            weights = [settings.path_weight, -settings.path_weight,
                       settings.wall_weight, -settings.wall_weight]
        self.weights: np.ndarray = np.asarray(weights, dtype=np.float64)
        if self.weights.shape != (len(FEATURE_NAMES),):
            raise ValueError(f"Expected {len(FEATURE_NAMES)} weights, got shape {self.weights.shape}")

    def state_to_features(self, state: 'GameState', player: PlayerIndex) -> np.ndarray:
        opponent = 1 - player
        return np.array([
            path_length(state, opponent),
            path_length(state, player),
            state.walls_remaining(player),
            state.walls_remaining(opponent),
        ], dtype=np.float64)

    def states_to_features_batch(self, states: Sequence['GameState'],
                                 players: Sequence[PlayerIndex]) -> np.ndarray:
        """Stack feature vectors into an (N, 4) matrix."""
        if not states:
            return np.zeros((0, len(FEATURE_NAMES)), dtype=np.float64)
        return np.stack([self.state_to_features(s, int(p)) for s, p in zip(states, players)])

    def evaluate_position(self, state: 'GameState', player: PlayerIndex) -> float:
        winner = state.winner()
        if winner is not None:
            return WIN_SCORE if winner == player else -WIN_SCORE
        return float(self.state_to_features(state, player) @ self.weights)

    def batch_predict(
        self,
        states: Sequence['GameState'],
        players: Union[List[PlayerIndex], np.ndarray],
    ) -> np.ndarray:
        players_list = [int(p) for p in players]
        scores = self.states_to_features_batch(states, players_list) @ self.weights
        # Terminal positions bypass the linear model
        for i, (state, player) in enumerate(zip(states, players_list)):
            winner = state.winner()
            if winner is not None:
                scores[i] = WIN_SCORE if winner == player else -WIN_SCORE
        return scores.astype(np.float32)


def get_evaluator() -> Evaluator:
    """Factory for the default evaluator, weighted from configuration."""
    return PathLengthEvaluator()


__all__ = [
    "Evaluator",
    "PathLengthEvaluator",
    "WIN_SCORE",
    "get_evaluator",
    "path_length",
]
