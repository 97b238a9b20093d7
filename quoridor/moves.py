"""Move notation and legal-move enumeration."""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, List, Optional

from .types import BOARD_SIZE, Coordinate, Move, Orientation, Wall

if TYPE_CHECKING:
    from .engine import GameState

# Column letter, row digit, optional wall orientation
MOVE_PATTERN = re.compile(r"[a-i][1-9][hv]?")

# Traversal candidates are drawn from this Chebyshev radius around the mover
TRAVERSAL_RADIUS: int = 2


def is_valid_syntax(s: str) -> bool:
    return MOVE_PATTERN.fullmatch(s) is not None


def is_traversal(s: str) -> bool:
    return is_valid_syntax(s) and len(s) == 2


def is_wall_placement(s: str) -> bool:
    return is_valid_syntax(s) and len(s) == 3


def parse_move_str(s: str) -> Optional[Move]:
    """Parse a move string into a Coordinate or a Wall. None on bad syntax."""
    if not is_valid_syntax(s):
        return None
    if len(s) == 2:
        return Coordinate.from_str(s)
    return Wall.from_str(s)


def move_to_str(move: Move) -> str:
    return str(move)


class MoveGenerator:
    """Enumerates legal moves for the player to move in a game state.

    Traversals come first (nearby squares in row-major order), then every
    wall over the full grid, row-major, horizontal before vertical.
    """

    def __init__(self, state: 'GameState') -> None:
        self.state = state

    def traversals(self) -> List[Coordinate]:
        origin = self.state.current_player_position()
        return [sq for sq in origin.neighbourhood(TRAVERSAL_RADIUS)
                if self.state.is_valid_traversal(sq)]

    def wall_placements(self) -> List[Wall]:
        walls: List[Wall] = []
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                anchor = Coordinate(r, c)
                for o in Orientation:
                    wall = Wall(anchor, o)
                    if self.state.is_valid_wall_placement(wall):
                        walls.append(wall)
        return walls

    def legal_moves(self) -> List[Move]:
        moves: List[Move] = list(self.traversals())
        moves.extend(self.wall_placements())
        return moves


class MoveValidator:
    """Validates moves against the rules without touching the state."""

    @staticmethod
    def validate(state: 'GameState', move: Move) -> bool:
        if isinstance(move, Wall):
            return state.is_valid_wall_placement(move)
        return state.is_valid_traversal(move)


# Convenience functional API

def legal_moves(state: 'GameState') -> List[Move]:
    return MoveGenerator(state).legal_moves()
