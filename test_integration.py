from __future__ import annotations

from quoridor import (
    GameState,
    SearchEngine,
    apply_move,
    get_evaluator,
    initial_state,
    is_terminal,
    legal_moves,
)


def test_end_to_end_move_and_eval():
    evaluator = get_evaluator()
    state = initial_state()
    assert evaluator.evaluate_position(state, 0) == 0.0

    result = SearchEngine(evaluator).search(state, depth=1)
    assert result.move in legal_moves(state)
    child = apply_move(state, result.move)
    assert child is not state
    assert child.turn == 1
    assert state.turn == 0
    assert not is_terminal(child)


def test_replay_and_continue():
    state = GameState.from_moves(["e8", "e2", "c3h"])
    assert state.current_player() == 1
    assert state.walls_remaining(0) == 9
    assert state.move("e3")
    assert state.history == ["e8", "e2", "c3h", "e3"]
