"""
Value types for the Quoridor engine.

Squares are addressed as (row, column) with both in 0..8. In move strings the
column is a letter a..i and the row a digit 1..9, so ``e9`` is (8, 4).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union

BOARD_SIZE: int = 9
WALL_QUOTA: int = 10
COLUMN_LETTERS: str = "abcdefghi"

# Goal row per player index (0 = player 1, 1 = player 2)
GOAL_ROWS: Tuple[int, int] = (0, BOARD_SIZE - 1)

PlayerIndex = int  # 0 for player 1, 1 for player 2


def _on_board(row: int, column: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= column < BOARD_SIZE


class Orientation(str, Enum):
    HORIZONTAL = "h"
    VERTICAL = "v"


@dataclass(frozen=True)
class Coordinate:
    """Immutable grid address."""

    row: int
    column: int

    def __post_init__(self) -> None:
        if not _on_board(self.row, self.column):
            raise ValueError(f"Coordinate ({self.row}, {self.column}) is off the board")

    @classmethod
    def from_str(cls, s: str) -> 'Coordinate':
        """Parse algebraic notation such as ``e9``."""
        if len(s) != 2 or s[0] not in COLUMN_LETTERS or not s[1].isdigit():
            raise ValueError(f"Not a square: {s!r}")
        return cls(int(s[1]) - 1, COLUMN_LETTERS.index(s[0]))

    def __str__(self) -> str:
        return f"{COLUMN_LETTERS[self.column]}{self.row + 1}"

    def neighbor(self, dr: int, dc: int) -> Optional['Coordinate']:
        """Coordinate at the given offset, or None if it falls off the board."""
        r, c = self.row + dr, self.column + dc
        if _on_board(r, c):
            return Coordinate(r, c)
        return None

    def opposite(self, other: 'Coordinate') -> Optional['Coordinate']:
        """The square on the far side of `other`, seen from this square."""
        return other.neighbor(other.row - self.row, other.column - self.column)

    def is_cardinal_to(self, other: 'Coordinate') -> bool:
        return self.row == other.row or self.column == other.column

    def neighbourhood(self, distance: int) -> List['Coordinate']:
        """All squares within Chebyshev `distance`, row-major, excluding self."""
        squares: List[Coordinate] = []
        for dr in range(-distance, distance + 1):
            for dc in range(-distance, distance + 1):
                if dr == 0 and dc == 0:
                    continue
                sq = self.neighbor(dr, dc)
                if sq is not None:
                    squares.append(sq)
        return squares


Edge = Tuple[Coordinate, Coordinate]


@dataclass(frozen=True)
class Wall:
    """A two-unit wall identified by its north-west anchor square.

    A horizontal wall at (r, c) runs under row r across columns c and c+1;
    a vertical wall at (r, c) runs right of column c across rows r and r+1.
    Anchors on row 8 or column 8 can be represented but never placed.
    """

    anchor: Coordinate
    orientation: Orientation

    @classmethod
    def from_str(cls, s: str) -> 'Wall':
        if len(s) != 3:
            raise ValueError(f"Not a wall: {s!r}")
        return cls(Coordinate.from_str(s[:2]), Orientation(s[2]))

    def __str__(self) -> str:
        return f"{self.anchor}{self.orientation.value}"

    def neighbor(self, dr: int, dc: int, orientation: Orientation) -> Optional['Wall']:
        anchor = self.anchor.neighbor(dr, dc)
        if anchor is None:
            return None
        return Wall(anchor, orientation)

    def conflicting_walls(self) -> List['Wall']:
        """Walls that would cross or overlap this one."""
        if self.orientation == Orientation.HORIZONTAL:
            candidates = [
                self.neighbor(0, 0, Orientation.VERTICAL),
                self.neighbor(0, -1, Orientation.HORIZONTAL),
                self.neighbor(0, 1, Orientation.HORIZONTAL),
            ]
        else:
            candidates = [
                self.neighbor(0, 0, Orientation.HORIZONTAL),
                self.neighbor(-1, 0, Orientation.VERTICAL),
                self.neighbor(1, 0, Orientation.VERTICAL),
            ]
        return [w for w in candidates if w is not None]

    def severed_edges(self) -> Tuple[Edge, Edge]:
        """The two pawn links this wall cuts. Only defined off the border."""
        a = self.anchor
        if self.orientation == Orientation.HORIZONTAL:
            pairs = ((a, a.neighbor(1, 0)), (a.neighbor(0, 1), a.neighbor(1, 1)))
        else:
            pairs = ((a, a.neighbor(0, 1)), (a.neighbor(1, 0), a.neighbor(1, 1)))
        for x, y in pairs:
            assert x is not None and y is not None, f"Wall {self} lies on the border"
        return pairs  # type: ignore[return-value]


Move = Union[Coordinate, Wall]

# Static evaluator contract: (state, maximizing player) -> score
EvalFn = Callable[..., float]
