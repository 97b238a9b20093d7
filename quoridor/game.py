"""
Turn loop: alternates players until a pawn reaches its goal row.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from .engine import GameState
from .players import Player
from .types import PlayerIndex

logger = logging.getLogger(__name__)

MoveCallback = Callable[[GameState, str], None]


def play_game(state: GameState, players: Sequence[Player],
              on_move: Optional[MoveCallback] = None,
              on_invalid: Optional[MoveCallback] = None,
              max_turns: Optional[int] = None) -> Optional[PlayerIndex]:
    """Run the game to completion and return the winner.

    A rejected move is reported through `on_invalid` and the same player is
    asked again. Returns None if `max_turns` applied moves pass without a
    winner.
    """
    if len(players) != 2:
        raise ValueError("Quoridor needs exactly two players")
    applied = 0
    while not state.is_over():
        if max_turns is not None and applied >= max_turns:
            logger.info("Stopping after %d turns without a winner", applied)
            return None
        player = players[state.current_player()]
        move = player.get_move(state)
        if not state.move(move):
            if on_invalid is not None:
                on_invalid(state, move)
            continue
        applied += 1
        if on_move is not None:
            on_move(state, move)
    winner = state.winner()
    logger.info("Game over on turn %d, winner index %s", state.turn, winner)
    return winner
