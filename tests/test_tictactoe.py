import io

import pytest

from dsakit.tictactoe import Board, GameStatus, main


def _board_with(moves):
    board = Board()
    for position, mark in moves:
        board.play(position, mark)
    return board


def test_new_board_is_in_progress_with_numbered_squares():
    board = Board()
    assert board.status() is GameStatus.IN_PROGRESS
    assert board.cells == tuple("123456789")


def test_status_values_match_game_codes():
    win = _board_with([(1, "X"), (2, "X"), (3, "X")])
    draw = _board_with(
        [(1, "X"), (2, "O"), (3, "X"), (5, "O"), (4, "X"), (6, "O"), (8, "X"), (7, "O"), (9, "X")]
    )
    assert win.status().value == 1
    assert draw.status().value == 0
    assert Board().status().value == -1


@pytest.mark.parametrize(
    "line",
    [(1, 2, 3), (4, 5, 6), (7, 8, 9), (1, 4, 7), (2, 5, 8), (3, 6, 9), (1, 5, 9), (3, 5, 7)],
)
def test_any_complete_line_wins(line):
    board = _board_with([(position, "O") for position in line])
    assert board.status() is GameStatus.WIN


def test_full_board_without_line_is_draw():
    moves = [(1, "X"), (2, "O"), (3, "X"), (5, "O"), (4, "X"), (6, "O"), (8, "X"), (7, "O"), (9, "X")]
    board = _board_with(moves)
    assert board.status() is GameStatus.DRAW


def test_play_places_mark():
    board = _board_with([(5, "X")])
    assert board.cells[4] == "X"
    assert board.status() is GameStatus.IN_PROGRESS


def test_taken_square_is_rejected():
    board = _board_with([(1, "X")])
    with pytest.raises(ValueError):
        board.play(1, "O")
    assert board.cells[0] == "X"


@pytest.mark.parametrize("position", [0, 10, -1])
def test_position_off_board_is_rejected(position):
    with pytest.raises(ValueError):
        Board().play(position, "X")


def test_unknown_mark_is_rejected():
    with pytest.raises(ValueError):
        Board().play(3, "Z")


def test_render_shows_marks_and_numbers():
    board = _board_with([(1, "X"), (9, "O")])
    text = board.render()
    assert "Player 1 (X)  -  Player 2 (O)" in text
    assert "  X  |  2  |  3\n" in text
    assert "  7  |  8  |  O\n" in text
    assert text.count("_____|_____|_____") == 2


def _run(monkeypatch, capsys, moves):
    monkeypatch.setattr("sys.stdin", io.StringIO("".join(f"{m}\n" for m in moves)))
    code = main([])
    return code, capsys.readouterr().out


def test_main_first_player_wins(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["1", "4", "2", "5", "3"])
    assert code == 0
    assert "Player 1 win" in out


def test_main_second_player_wins(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["1", "4", "2", "5", "9", "6"])
    assert code == 0
    assert "Player 2 win" in out


def test_main_draw(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["1", "2", "3", "5", "4", "6", "8", "7", "9"])
    assert code == 0
    assert "Game draw" in out


def test_main_invalid_move_keeps_player(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["1", "1", "abc", "4", "2", "5", "3"])
    assert code == 0
    assert out.count("Invalid move") == 2
    assert "Player 1 win" in out


def test_main_end_of_input_fails(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["1"])
    assert code == 1
    assert "win" not in out