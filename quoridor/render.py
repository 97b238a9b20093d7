"""
Fixed-width text rendering of a game state.

The art grid is (2*9+1) x (2*9+1): even rows and columns are wall lines,
odd/odd positions are squares. Row numbers are printed on square rows and
column letters above the grid.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Set, Tuple

from config import get_ui_settings

from .types import BOARD_SIZE, COLUMN_LETTERS, Orientation

if TYPE_CHECKING:
    from .engine import GameState

ART_SIZE: int = 2 * BOARD_SIZE + 1

WallKey = Tuple[int, int, Orientation]


def _transform(i: int, j: int) -> Tuple[int, int]:
    """Art coordinates to (row, column) of the square they belong to."""
    return (i - 1) >> 1, (j - 1) >> 1


def _has_wall(walls: Set[WallKey], i: int, j: int) -> bool:
    if i % 2 == 0:
        r, c = _transform(i - 1, j)
        return ((r, c, Orientation.HORIZONTAL) in walls
                or (r, c - 1, Orientation.HORIZONTAL) in walls)
    r, c = _transform(i, j - 1)
    return ((r, c, Orientation.VERTICAL) in walls
            or (r - 1, c, Orientation.VERTICAL) in walls)


def _cell(state: 'GameState', walls: Set[WallKey], icons: Tuple[str, str], i: int, j: int) -> str:
    if (i + j) % 2 == 0:
        if j % 2 == 0:
            return "+"
        sq = _transform(i, j)
        for player, pos in enumerate(state.positions):
            if (pos.row, pos.column) == sq:
                return f" {icons[player]} "
        return "   "
    if i % 2 == 0:
        return "###" if _has_wall(walls, i, j) else "---"
    return "#" if _has_wall(walls, i, j) else "|"


def render_header(state: 'GameState', icons: Tuple[str, str]) -> str:
    me = state.current_player()
    return (f"Turn: {state.turn} | Player to Move: {icons[me]} | "
            f"Walls Remaining: {state.walls_remaining(me)}\n")


def render_board(state: 'GameState', icons: Optional[Tuple[str, str]] = None,
                 show_header: Optional[bool] = None) -> str:
    """Render the board as text. Icons and header default to the UI settings."""
    ui = get_ui_settings()
    if icons is None:
        icons = (ui.player1_icon, ui.player2_icon)
    if show_header is None:
        show_header = ui.show_header

    walls: Set[WallKey] = {(w.anchor.row, w.anchor.column, w.orientation) for w in state.walls}
    parts = []
    if show_header:
        parts.append(render_header(state, icons))
    parts.append("   " + "".join(c + "   " for c in COLUMN_LETTERS) + "\n")
    for i in range(ART_SIZE):
        parts.append(" " if i % 2 == 0 else str((i + 1) >> 1))
        for j in range(ART_SIZE):
            parts.append(_cell(state, walls, icons, i, j))
        parts.append("\n")
    return "".join(parts)
