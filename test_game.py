import random

import pytest

from quoridor.engine import GameState
from quoridor.game import play_game
from quoridor.players import ScriptedPlayer, SearchPlayer


def test_scripted_game_to_completion():
    p1 = ScriptedPlayer(["e8", "e7", "e6", "e5", "e4", "e3", "e2", "e1"])
    p2 = ScriptedPlayer(["d1", "c1", "b1", "a1", "b1", "a1", "b1"])
    played = []
    state = GameState()

    winner = play_game(state, [p1, p2], on_move=lambda gs, m: played.append(m))

    assert winner == 0
    assert state.turn == 15
    assert len(played) == 15
    assert played[-1] == "e1"
    assert state.is_over()


def test_invalid_move_reprompts_same_player():
    p1 = ScriptedPlayer(["e5", "zz", "e8"])
    p2 = ScriptedPlayer(["e2"])
    rejected = []
    state = GameState()

    result = play_game(state, [p1, p2], on_invalid=lambda gs, m: rejected.append((gs.turn, m)),
                       max_turns=2)

    assert result is None
    assert rejected == [(0, "e5"), (0, "zz")]
    assert state.history == ["e8", "e2"]


def test_max_turns_stops_without_winner():
    p1 = ScriptedPlayer(["e8", "e9"])
    p2 = ScriptedPlayer(["e2", "e1"])
    state = GameState()
    assert play_game(state, [p1, p2], max_turns=4) is None
    assert state.turn == 4
    assert not state.is_over()


def test_requires_two_players():
    with pytest.raises(ValueError):
        play_game(GameState(), [ScriptedPlayer([])])


def test_two_fallback_players_finish_or_stop():
    rng = random.Random(3)
    players = [SearchPlayer(fallback_threshold=0, rng=rng),
               SearchPlayer(fallback_threshold=0, rng=rng)]
    state = GameState()
    winner = play_game(state, players, max_turns=200)
    assert (winner is None) == (not state.is_over())
    if winner is not None:
        assert winner == state.winner()
