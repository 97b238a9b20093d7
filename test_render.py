from quoridor.engine import GameState
from quoridor.render import render_board


def lines_of(state, **kwargs):
    return render_board(state, **kwargs).splitlines()


def test_initial_board():
    lines = lines_of(GameState())
    assert len(lines) == 21
    assert lines[0] == "Turn: 0 | Player to Move: A | Walls Remaining: 10"
    assert lines[1].split() == list("abcdefghi")
    assert lines[2] == " " + "+---" * 9 + "+"
    assert lines[3] == "1" + "|   " * 4 + "| B " + "|   " * 4 + "|"
    assert lines[19] == "9" + "|   " * 4 + "| A " + "|   " * 4 + "|"


def test_horizontal_wall_drawn_below_its_row():
    state = GameState.from_moves(["e3h"])
    lines = lines_of(state)
    assert lines[0] == "Turn: 1 | Player to Move: B | Walls Remaining: 10"
    assert lines[8] == " +---+---+---+---+###+###+---+---+---+"


def test_vertical_wall_spans_two_rows():
    state = GameState.from_moves(["e3v"])
    lines = lines_of(state)
    expected_row = "|   " * 5 + "#   " + "|   " * 3 + "|"
    assert lines[7] == "3" + expected_row
    assert lines[9] == "4" + expected_row
    assert "#" not in lines[11]


def test_icons_and_header_override():
    lines = lines_of(GameState(), icons=("X", "O"), show_header=False)
    assert len(lines) == 20
    assert " X " in lines[18]
    assert " O " in lines[2]


def test_str_uses_renderer():
    state = GameState.from_moves(["e8", "c3h"])
    assert str(state) == render_board(state)
