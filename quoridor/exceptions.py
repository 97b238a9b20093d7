"""Custom exception classes for the Quoridor engine."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import Coordinate, Wall


class WallRejection(str, Enum):
    """Why a wall placement was refused, in the order the rules are checked."""

    QUOTA = "quota exceeded"
    BORDER = "anchor on the border"
    INTERSECTS = "intersects a placed wall"
    BLOCKS_PATH = "leaves a player without a path to goal"


class QuoridorError(Exception):
    """Base exception for all Quoridor engine errors."""


class MoveSyntaxError(QuoridorError):
    """Raised when a move string does not match the move grammar."""

    def __init__(self, move: str) -> None:
        self.move = move
        super().__init__(f"Malformed move: {move!r}")


class IllegalMoveError(QuoridorError):
    """Raised when a well-formed move breaks the rules."""


class GameAlreadyOverError(IllegalMoveError):
    """Raised when trying to move after a pawn has reached its goal row."""

    def __init__(self) -> None:
        super().__init__("Cannot move; game already finished")


class IllegalTraversalError(IllegalMoveError):
    """Raised when a pawn cannot reach the requested square."""

    def __init__(self, dest: 'Coordinate') -> None:
        self.dest = dest
        super().__init__(f"Illegal traversal to {dest}")


class IllegalWallPlacementError(IllegalMoveError):
    """Raised when a wall cannot be placed."""

    def __init__(self, wall: 'Wall', reason: WallRejection) -> None:
        self.wall = wall
        self.reason = reason
        super().__init__(f"Illegal wall {wall}: {reason.value}")


__all__ = [
    "GameAlreadyOverError",
    "IllegalMoveError",
    "IllegalTraversalError",
    "IllegalWallPlacementError",
    "MoveSyntaxError",
    "QuoridorError",
    "WallRejection",
]
