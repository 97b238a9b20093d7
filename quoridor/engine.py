"""
Board graph engine.

The board is a graph with one vertex per square and an edge for every open
pawn step. Placing a wall deletes the two edges it severs. Move legality,
path finding and the terminal test all read this graph.
"""
from __future__ import annotations

import logging
from collections import deque
from typing import AbstractSet, Deque, Dict, FrozenSet, Iterable, List, Optional, Union

from .exceptions import (
    GameAlreadyOverError,
    IllegalMoveError,
    IllegalTraversalError,
    IllegalWallPlacementError,
    MoveSyntaxError,
    WallRejection,
)
from .moves import MoveGenerator, parse_move_str
from .types import (
    BOARD_SIZE,
    GOAL_ROWS,
    WALL_QUOTA,
    Coordinate,
    Edge,
    Move,
    PlayerIndex,
    Wall,
)

logger = logging.getLogger(__name__)

Adjacency = Dict[Coordinate, List[Coordinate]]

PLAYER_1_START: Coordinate = Coordinate.from_str("e9")
PLAYER_2_START: Coordinate = Coordinate.from_str("e1")


def initial_adjacency() -> Adjacency:
    """Fully connected grid. Neighbours are listed north, west, south, east."""
    adjacency: Adjacency = {}
    for i in range(BOARD_SIZE):
        for j in range(BOARD_SIZE):
            adjacent: List[Coordinate] = []
            for d in (-1, 1):
                if 0 <= i + d < BOARD_SIZE:
                    adjacent.append(Coordinate(i + d, j))
                if 0 <= j + d < BOARD_SIZE:
                    adjacent.append(Coordinate(i, j + d))
            adjacency[Coordinate(i, j)] = adjacent
    return adjacency


def _edge_key(a: Coordinate, b: Coordinate) -> FrozenSet[Coordinate]:
    return frozenset((a, b))


class GameState:
    """Complete Quoridor position: graph, walls, pawns, wall counters and turn."""

    def __init__(self) -> None:
        self.adjacency: Adjacency = initial_adjacency()
        self.walls: List[Wall] = []
        self.positions: List[Coordinate] = [PLAYER_1_START, PLAYER_2_START]
        self.walls_placed: List[int] = [0, 0]
        self.turn: int = 0
        self.history: List[str] = []

    @classmethod
    def from_moves(cls, moves: Iterable[str]) -> 'GameState':
        """Replay move strings from the initial layout. Raises on an illegal move."""
        state = cls()
        for m in moves:
            state.apply_move(m)
        return state

    def copy(self) -> 'GameState':
        """Independent copy sharing no mutable structure with this state."""
        gs = GameState.__new__(GameState)
        gs.adjacency = {sq: list(adj) for sq, adj in self.adjacency.items()}
        gs.walls = list(self.walls)
        gs.positions = list(self.positions)
        gs.walls_placed = list(self.walls_placed)
        gs.turn = self.turn
        gs.history = list(self.history)
        return gs

    # ============================
    # Players
    # ============================
    def current_player(self) -> PlayerIndex:
        """0 if player 1 is to move, 1 if player 2 is."""
        return self.turn % 2

    def other_player(self) -> PlayerIndex:
        return 1 - self.current_player()

    def current_player_position(self) -> Coordinate:
        return self.positions[self.current_player()]

    def other_player_position(self) -> Coordinate:
        return self.positions[self.other_player()]

    def current_player_num_walls(self) -> int:
        """Walls placed so far by the player to move."""
        return self.walls_placed[self.current_player()]

    def other_player_num_walls(self) -> int:
        return self.walls_placed[self.other_player()]

    def walls_remaining(self, player: PlayerIndex) -> int:
        return WALL_QUOTA - self.walls_placed[player]

    # ============================
    # Graph
    # ============================
    def _remove_edge(self, a: Coordinate, b: Coordinate) -> None:
        # list.remove raises if the edge is missing; that is a construction bug
        self.adjacency[a].remove(b)
        self.adjacency[b].remove(a)

    def is_adjacent(self, a: Coordinate, b: Coordinate) -> bool:
        return b in self.adjacency[a]

    # ============================
    # Shortest paths
    # ============================
    def _bfs(self, src: Coordinate, row: int,
             severed: AbstractSet[FrozenSet[Coordinate]] = frozenset()) -> List[Coordinate]:
        parent: Dict[Coordinate, Optional[Coordinate]] = {src: None}
        queue: Deque[Coordinate] = deque([src])
        while queue:
            t = queue.popleft()
            if t.row == row:
                path: List[Coordinate] = []
                while t != src:
                    path.append(t)
                    t = parent[t]  # type: ignore[assignment]
                path.reverse()
                return path
            for e in self.adjacency[t]:
                if e in parent:
                    continue
                if severed and _edge_key(t, e) in severed:
                    continue
                parent[e] = t
                queue.append(e)
        return []

    def shortest_path_to_row(self, src: Coordinate, row: int) -> List[Coordinate]:
        """Shortest path from `src` (exclusive) to the first square reached on `row`.

        Empty when the row is unreachable or `src` is already on it.
        """
        return self._bfs(src, row)

    def shortest_path_to_win(self) -> List[Coordinate]:
        """Shortest path for the player to move to its goal row."""
        me = self.current_player()
        return self.shortest_path_to_row(self.positions[me], GOAL_ROWS[me])

    def has_path_to_goal(self) -> bool:
        """True if both pawns can still reach their goal rows."""
        return self._both_players_have_path(frozenset())

    def _both_players_have_path(self, severed: AbstractSet[FrozenSet[Coordinate]]) -> bool:
        for player in (0, 1):
            src = self.positions[player]
            goal = GOAL_ROWS[player]
            if src.row != goal and not self._bfs(src, goal, severed):
                return False
        return True

    # ============================
    # Validation
    # ============================
    def is_valid_traversal(self, dest: Coordinate) -> bool:
        """Can the player to move step or jump to `dest`?"""
        me = self.current_player_position()
        other = self.other_player_position()
        if dest == me or dest == other:
            return False
        if self.is_adjacent(me, dest):
            return True
        if self.is_adjacent(me, other):
            behind = me.opposite(other)
            if behind is not None and self.is_adjacent(other, behind):
                # Straight lane open: only the straight jump is allowed
                return self.is_adjacent(other, dest) and me.is_cardinal_to(dest)
            return self.is_adjacent(other, dest)
        return False

    def wall_placement_violation(self, wall: Wall) -> Optional[WallRejection]:
        """First rule the wall breaks, or None if it may be placed.

        Never mutates the graph: the connectivity check runs the BFS with the
        wall's edges masked out.
        """
        if self.current_player_num_walls() >= WALL_QUOTA:
            return WallRejection.QUOTA
        anchor = wall.anchor
        if anchor.row == BOARD_SIZE - 1 or anchor.column == BOARD_SIZE - 1:
            return WallRejection.BORDER
        if wall in self.walls or any(w in self.walls for w in wall.conflicting_walls()):
            return WallRejection.INTERSECTS
        severed = frozenset(_edge_key(a, b) for a, b in wall.severed_edges())
        if not self._both_players_have_path(severed):
            return WallRejection.BLOCKS_PATH
        return None

    def is_valid_wall_placement(self, wall: Wall) -> bool:
        return self.wall_placement_violation(wall) is None

    def valid_moves(self) -> List[Move]:
        """All legal moves for the player to move, traversals first."""
        return MoveGenerator(self).legal_moves()

    # ============================
    # Applying moves
    # ============================
    def _traverse(self, dest: Coordinate) -> None:
        self.positions[self.current_player()] = dest

    def _place_wall(self, wall: Wall) -> None:
        self.walls_placed[self.current_player()] += 1
        self.walls.append(wall)
        for a, b in wall.severed_edges():
            self._remove_edge(a, b)

    def apply_move(self, move: Union[str, Move], validate: bool = True) -> None:
        """Apply a move string, Coordinate or Wall for the player to move.

        Raises a QuoridorError subclass and leaves the state untouched when the
        move is malformed or illegal. `validate=False` skips the rule checks
        for moves that came from `valid_moves()` on this very state.
        """
        if isinstance(move, str):
            parsed = parse_move_str(move)
            if parsed is None:
                raise MoveSyntaxError(move)
            move = parsed
        if validate:
            if self.is_over():
                raise GameAlreadyOverError()
            if isinstance(move, Wall):
                reason = self.wall_placement_violation(move)
                if reason is not None:
                    raise IllegalWallPlacementError(move, reason)
            elif not self.is_valid_traversal(move):
                raise IllegalTraversalError(move)
        if isinstance(move, Wall):
            self._place_wall(move)
        else:
            self._traverse(move)
        self.history.append(str(move))
        self.turn += 1

    def move(self, move: Union[str, Move]) -> bool:
        """Apply a move if it is legal. Returns False, changing nothing, otherwise."""
        try:
            self.apply_move(move)
        except (MoveSyntaxError, IllegalMoveError) as e:
            logger.debug("Rejected move on turn %d: %s", self.turn, e)
            return False
        return True

    # ============================
    # Terminal test
    # ============================
    def is_over(self) -> bool:
        """True once either pawn has reached its goal row."""
        return self.positions[0].row == GOAL_ROWS[0] or self.positions[1].row == GOAL_ROWS[1]

    def winner(self) -> Optional[PlayerIndex]:
        """0 if player 1 won, 1 if player 2 won, None while the game is running."""
        if self.positions[0].row == GOAL_ROWS[0]:
            return 0
        if self.positions[1].row == GOAL_ROWS[1]:
            return 1
        return None

    def edges(self) -> List[Edge]:
        """Every open link once, in adjacency order."""
        seen = set()
        out: List[Edge] = []
        for a, adj in self.adjacency.items():
            for b in adj:
                key = _edge_key(a, b)
                if key not in seen:
                    seen.add(key)
                    out.append((a, b))
        return out

    def __str__(self) -> str:
        # Local import to avoid a cycle with the renderer
        from .render import render_board
        return render_board(self)


def initial_state() -> GameState:
    return GameState()


def apply_move(state: GameState, move: Union[str, Move]) -> GameState:
    """Functional form: return a new state with the move applied."""
    child = state.copy()
    child.apply_move(move)
    return child


def is_terminal(state: GameState) -> bool:
    return state.is_over()
