"""Quoridor package: thin re-exports.

Usage examples:
    from quoridor import GameState, Coordinate, Wall
    from quoridor import SearchEngine, SearchPlayer
    from quoridor import play_game
"""
from __future__ import annotations

# Value types
from .types import (
    BOARD_SIZE,
    GOAL_ROWS,
    WALL_QUOTA,
    Coordinate,
    Move,
    Orientation,
    Wall,
)

# Errors
from .exceptions import (
    GameAlreadyOverError,
    IllegalMoveError,
    IllegalTraversalError,
    IllegalWallPlacementError,
    MoveSyntaxError,
    QuoridorError,
    WallRejection,
)

# Engine API
from .engine import GameState, apply_move, initial_state, is_terminal
from .moves import MoveGenerator, MoveValidator, legal_moves, move_to_str, parse_move_str

# Evaluation and search
from .eval import Evaluator, PathLengthEvaluator, get_evaluator
from .search import (
    AlphaBetaSearchStrategy,
    SearchEngine,
    SearchResult,
    SearchStrategy,
    get_engine,
    get_search_strategy,
)

# Players, loop and rendering
from .players import HumanPlayer, Player, ScriptedPlayer, SearchPlayer
from .game import play_game
from .render import render_board
