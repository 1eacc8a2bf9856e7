import io
import sys

import pytest

from glsketches.lightsout import CLEAR_MESSAGE, Board, TapToOn, main


def _write(tmp_path, text):
    path = tmp_path / "map.txt"
    path.write_text(text, encoding="utf-8")
    return path


def _click(game, px, py):
    for cell in game.cell_centers():
        if (cell.px, cell.py) == (px, py):
            return round(cell.x + game.width // 2), round(cell.y + game.height // 2)
    raise AssertionError("cell not found")


def test_from_text_reads_lights():
    board = Board.from_text("2\n10\n01\n")
    assert board.size == 2
    assert board.lights == [[True, False], [False, True]]
    assert board.lit_count() == 2


def test_from_text_short_row_raises():
    with pytest.raises(ValueError):
        Board.from_text("3\n111\n11\n111\n")


def test_from_text_missing_rows_raises():
    with pytest.raises(ValueError):
        Board.from_text("3\n111\n")


def test_non_square_board_raises():
    with pytest.raises(ValueError):
        Board([[True, False], [True]])


def test_toggle_twice_restores_board():
    board = Board.from_text("3\n101\n010\n110\n")
    before = [row[:] for row in board.lights]
    board.toggle(1, 1)
    assert board.lights != before
    board.toggle(1, 1)
    assert board.lights == before


def test_toggle_centre_and_corner_counts():
    board = Board.from_text("3\n000\n000\n000\n")
    board.toggle(1, 1)
    assert board.lit_count() == 5
    corner = Board.from_text("3\n000\n000\n000\n")
    corner.toggle(0, 0)
    assert corner.lit_count() == 3


def test_toggle_outside_raises():
    board = Board.from_text("2\n00\n00\n")
    with pytest.raises(IndexError):
        board.toggle(2, 0)


def test_is_cleared():
    assert Board.from_text("2\n11\n11\n").is_cleared()
    assert not Board.from_text("2\n11\n10\n").is_cleared()


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        Board.load(tmp_path / "absent.txt")


def test_cell_centers_cover_board(tmp_path):
    game = TapToOn(_write(tmp_path, "3\n100\n000\n000\n"))
    cells = game.cell_centers()
    assert len(cells) == 9
    assert {(c.px, c.py) for c in cells} == {(x, y) for x in range(3) for y in range(3)}
    top_left = cells[0]
    assert top_left.py == 2 and top_left.px == 0 and top_left.lit
    assert sum(c.x for c in cells) == pytest.approx(0.0)


def test_click_flips_once_per_press(tmp_path):
    game = TapToOn(_write(tmp_path, "3\n000\n000\n000\n"))
    x, y = _click(game, 1, 1)
    game.mouse(True, True, x, y)
    game.update()
    assert game.board.lit_count() == 5
    game.update()
    assert game.board.lit_count() == 5
    game.mouse(True, False, x, y)
    game.mouse(True, True, x, y)
    game.update()
    assert game.board.lit_count() == 0


def test_click_outside_lights_does_nothing(tmp_path):
    game = TapToOn(_write(tmp_path, "2\n00\n00\n"))
    game.mouse(True, True, 0, 0)
    assert game.update() is False
    assert game.board.lit_count() == 0


def test_clearing_stops_play_and_reload_restores(tmp_path):
    game = TapToOn(_write(tmp_path, "2\n01\n11\n"))
    x, y = _click(game, 0, 1)
    game.mouse(True, True, x, y)
    game.update()
    game.board = Board.from_text("2\n11\n11\n")
    assert game.update() is True
    assert game.playing is False
    game.handle_key("r")
    assert game.playing is True
    assert game.board.lights == [[False, True], [True, True]]


def test_keys_pause_and_quit(tmp_path):
    game = TapToOn(_write(tmp_path, "1\n0\n"))
    game.handle_key(" ")
    assert game.playing is False
    game.handle_key("q")
    assert game.running is False


def test_main_without_arguments_fails(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_plays_from_stdin(tmp_path, capsys, monkeypatch):
    path = _write(tmp_path, "2\n00\n00\n")
    monkeypatch.setattr(sys, "stdin", io.StringIO("0 0\nq\n"))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Window Size: (500, 500)" in out
    assert "11\n10" in out
    assert out.rstrip().endswith("Quit")
    assert CLEAR_MESSAGE not in out