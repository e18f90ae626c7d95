"""Tests for console_gui.log_box"""
from console_gui.colors import Color


class TestLogBox:
    def test_starts_empty(self, gui):
        assert gui.log.text == ""
        assert gui.log.entries == 0
        assert gui.screen.row_text(0) == " " * 128

    def test_entries_are_numbered(self, gui):
        gui.log.print("first")
        assert gui.log.text == "(00) : first"
        gui.log.print("second")
        assert gui.log.text == "(01) : second\n(00) : first"
        assert gui.log.entries == 2

    def test_latest_entry_shown(self, gui):
        gui.log.print("first")
        gui.log.print("second")
        assert gui.screen.row_text(0).rstrip() == "(01) : second"

    def test_scroll_to_older_entries(self, gui):
        gui.log.print("first")
        gui.log.print("second")
        gui.log.scroll_down()
        assert gui.screen.row_text(0).rstrip() == "(00) : first"
        gui.log.scroll_down()
        assert gui.screen.row_text(0).rstrip() == "(00) : first"
        gui.log.scroll_up()
        assert gui.screen.row_text(0).rstrip() == "(01) : second"

    def test_log_colors(self, gui):
        gui.log.print("x")
        cell = gui.screen.cell(0, 0)
        assert (cell.bg, cell.fg) == (Color.BLACK, Color.WHITE)

    def test_long_message_wraps_onto_hidden_lines(self, small_gui):
        small_gui.log.print("y" * 50)
        assert len(small_gui.log.panel) == 3
        assert small_gui.screen.row_text(0).rstrip() == "(00) :"
        small_gui.log.scroll_down()
        assert small_gui.screen.row_text(0) == "y" * 40

    def test_print_is_logged(self, gui, caplog):
        with caplog.at_level("INFO", logger="console_gui.log_box"):
            gui.log.print("hello")
        assert "(00) : hello" in caplog.text

    def test_numbering_past_99(self, gui):
        for i in range(101):
            gui.log.print(str(i))
        assert gui.log.text.startswith("(100) : 100\n(99) : 99")
