import pytest

from quoridor.engine import GameState
from quoridor.moves import (
    MoveGenerator,
    MoveValidator,
    is_traversal,
    is_valid_syntax,
    is_wall_placement,
    legal_moves,
    move_to_str,
    parse_move_str,
)
from quoridor.types import Coordinate, Orientation, Wall


@pytest.mark.parametrize("move", ["e8", "a1", "i9", "a1h", "i9v"])
def test_valid_syntax(move):
    assert is_valid_syntax(move)


@pytest.mark.parametrize("move", ["", "j1", "a0", "e10", "e8x", "8e", "e", "e8hv", "e 8", " e8 ", "E8", "e3H"])
def test_invalid_syntax(move):
    assert not is_valid_syntax(move)
    assert parse_move_str(move) is None


def test_traversal_and_wall_forms():
    assert is_traversal("e8")
    assert not is_traversal("e8h")
    assert is_wall_placement("e8h")
    assert not is_wall_placement("e8")


def test_parse_move_str():
    assert parse_move_str("e8") == Coordinate(7, 4)
    assert parse_move_str("c3v") == Wall(Coordinate(2, 2), Orientation.VERTICAL)
    assert move_to_str(parse_move_str("c3v")) == "c3v"


def test_traversals_initial_position():
    state = GameState()
    gen = MoveGenerator(state)
    assert gen.traversals() == [Coordinate(7, 4), Coordinate(8, 3), Coordinate(8, 5)]


def test_wall_placements_initial_position():
    state = GameState()
    walls = MoveGenerator(state).wall_placements()
    # Every anchor off the border, both orientations
    assert len(walls) == 8 * 8 * 2
    assert walls[0] == Wall(Coordinate(0, 0), Orientation.HORIZONTAL)
    assert walls[1] == Wall(Coordinate(0, 0), Orientation.VERTICAL)


def test_legal_moves_traversals_first():
    state = GameState()
    moves = legal_moves(state)
    assert len(moves) == 3 + 128
    assert all(isinstance(m, Coordinate) for m in moves[:3])
    assert all(isinstance(m, Wall) for m in moves[3:])
    assert moves == state.valid_moves()


def test_move_validator_with_generated_moves():
    state = GameState()
    for m in legal_moves(state)[:10]:
        assert MoveValidator.validate(state, m)
    assert not MoveValidator.validate(state, Coordinate(6, 4))
    assert not MoveValidator.validate(state, Wall(Coordinate(8, 0), Orientation.HORIZONTAL))
