"""Tests for console_gui.screen and console_gui.terminal"""
import pytest

from console_gui.colors import Color
from console_gui.errors import GeometryBoundsError
from console_gui.screen import ScreenBuffer
from console_gui.terminal import ProcessTerminal


@pytest.fixture
def screen(terminal):
    return ScreenBuffer(terminal, 20, 5, Color.DARK_BLUE, Color.YELLOW)


class TestScreenBuffer:
    def test_starts_blank(self, screen):
        assert screen.row_text(0) == " " * 20
        assert screen.cell(3, 3).bg is Color.DARK_BLUE

    def test_write_updates_cells(self, screen):
        screen.write(2, 1, "abc", Color.BLACK, Color.WHITE)
        assert screen.text_at(2, 1, 3) == "abc"
        assert screen.cell(3, 1).fg is Color.WHITE

    def test_write_reaches_terminal(self, screen, terminal):
        screen.write(2, 1, "abc", Color.BLACK, Color.WHITE)
        assert terminal.get_output() == "abc"
        assert terminal.moves[-1] == (2, 1)
        assert terminal.colors == (Color.BLACK, Color.WHITE)

    def test_unchanged_write_is_skipped(self, screen, terminal):
        screen.write(0, 0, "hello", Color.BLACK, Color.WHITE)
        before = terminal.writes
        screen.write(0, 0, "hello", Color.BLACK, Color.WHITE)
        assert terminal.writes == before

    def test_only_changed_span_is_sent(self, screen, terminal):
        screen.write(0, 0, "hello", Color.BLACK, Color.WHITE)
        terminal.clear_output()
        screen.write(0, 0, "hallo", Color.BLACK, Color.WHITE)
        assert terminal.get_output() == "a"
        assert terminal.moves[-1] == (1, 0)

    def test_color_change_is_a_change(self, screen, terminal):
        screen.write(0, 0, "x", Color.BLACK, Color.WHITE)
        before = terminal.writes
        screen.write(0, 0, "x", Color.RED, Color.WHITE)
        assert terminal.writes == before + 1

    def test_wide_characters_replaced(self, screen):
        screen.write(0, 0, "a中b", Color.BLACK, Color.WHITE)
        assert screen.text_at(0, 0, 3) == "a?b"

    def test_box_drawing_kept(self, screen):
        screen.write(0, 0, "┌─╬░▲", Color.BLACK, Color.WHITE)
        assert screen.text_at(0, 0, 5) == "┌─╬░▲"

    def test_out_of_bounds_rejected(self, screen):
        with pytest.raises(GeometryBoundsError):
            screen.write(18, 0, "abc", Color.BLACK, Color.WHITE)
        with pytest.raises(GeometryBoundsError):
            screen.write(0, 5, "a", Color.BLACK, Color.WHITE)

    def test_clear(self, screen, terminal):
        screen.write(0, 0, "abc", Color.BLACK, Color.WHITE)
        screen.clear(Color.DARK_GREEN, Color.WHITE)
        assert screen.row_text(0) == " " * 20
        assert screen.cell(0, 0).bg is Color.DARK_GREEN
        assert terminal.clears == 1


class TestProcessTerminal:
    def test_move_to_is_one_based(self, capsys):
        ProcessTerminal().move_to(0, 0)
        assert capsys.readouterr().out == "\x1b[1;1H"

    def test_colors_cached(self, capsys):
        term = ProcessTerminal()
        term.set_colors(Color.DARK_BLUE, Color.YELLOW)
        term.set_colors(Color.DARK_BLUE, Color.YELLOW)
        assert capsys.readouterr().out == "\x1b[44;93m"

    def test_title(self, capsys):
        ProcessTerminal().set_title("Cards")
        assert capsys.readouterr().out == "\x1b]0;Cards\x07"

    def test_write_log(self, capsys, monkeypatch, tmp_path):
        log_file = tmp_path / "writes.log"
        monkeypatch.setenv("CONSOLE_GUI_WRITE_LOG", str(log_file))
        term = ProcessTerminal()
        term.write("hello")
        term.hide_cursor()
        assert log_file.read_text(encoding="utf-8") == "hello\x1b[?25l"
