"""Tests for console_gui.borders and console_gui.glyphs"""
import pytest

from console_gui.borders import (
    box_edges,
    horizontal_line,
    validate_box,
    validate_column,
    validate_line,
    validate_zigzag_column,
    validate_zigzag_line,
    vertical_line,
    zigzag_column,
    zigzag_line,
)
from console_gui.errors import GeometryBoundsError, GuiError
from console_gui.glyphs import BorderStyle, Corner, Junction, corner_glyph


class TestGlyphs:
    def test_plain_corners(self):
        assert corner_glyph(Corner.TOP_LEFT, BorderStyle.SINGLE) == "┌"
        assert corner_glyph(Corner.BOTTOM_RIGHT, BorderStyle.DOUBLE) == "╝"

    def test_junction_variants(self):
        assert corner_glyph(Corner.TOP_LEFT, BorderStyle.SINGLE, Junction.VERTICAL) == "├"
        assert corner_glyph(Corner.TOP_RIGHT, BorderStyle.DOUBLE, Junction.VERTICAL) == "╣"
        assert corner_glyph(Corner.TOP_LEFT, BorderStyle.SINGLE, Junction.HORIZONTAL) == "┬"
        assert corner_glyph(Corner.BOTTOM_LEFT, BorderStyle.DOUBLE, Junction.HORIZONTAL) == "╩"
        assert corner_glyph(Corner.BOTTOM_RIGHT, BorderStyle.SINGLE, Junction.CROSSING) == "┼"


class TestStraightLines:
    def test_horizontal_plain(self):
        assert horizontal_line(5) == "─────"

    def test_horizontal_with_junctions(self):
        line = horizontal_line(10, BorderStyle.SINGLE, Junction.VERTICAL, Junction.VERTICAL)
        assert line == "├────────┤"

    def test_horizontal_double(self):
        assert horizontal_line(4, BorderStyle.DOUBLE, Junction.CROSSING) == "╬═══"

    def test_vertical_with_junctions(self):
        column = vertical_line(5, BorderStyle.SINGLE, Junction.HORIZONTAL, Junction.HORIZONTAL)
        assert column == ["┬", "│", "│", "│", "┴"]

    def test_box_edges(self):
        top, side, bottom = box_edges(5)
        assert (top, side, bottom) == ("┌───┐", "│", "└───┘")

    def test_box_edges_double_with_junctions(self):
        top, side, bottom = box_edges(4, BorderStyle.DOUBLE, top_left=Junction.VERTICAL,
                                      bottom_right=Junction.HORIZONTAL)
        assert top == "╠══╗"
        assert side == "║"
        assert bottom == "╚══╩"


class TestZigzagLine:
    def test_width_eight(self):
        assert zigzag_line(8) == ("┌─┐  ┌─┐", " └──┘ ")

    def test_width_seven_needs_no_midpoint_adjustment(self):
        assert zigzag_line(7) == ("┌─┐ ┌─┐", " └─┘ ")

    def test_width_six(self):
        assert zigzag_line(6) == ("┌─┐┌─┐", " └┘ ")

    def test_width_five(self):
        assert zigzag_line(5) == ("┌┐ ┌┐", "└─┘")

    def test_minimum_width(self):
        assert zigzag_line(2) == ("┌┐", "")

    def test_straight_edge_ends(self):
        first, second = zigzag_line(7, straight_edge=True)
        assert first == "──┐ ┌──"
        assert second == " └─┘ "

    def test_flipped(self):
        assert zigzag_line(7, flipped=True) == ("└─┘ └─┘", " ┌─┐ ")

    def test_double_style(self):
        assert zigzag_line(7, BorderStyle.DOUBLE) == ("╔═╗ ╔═╗", " ╚═╝ ")

    @pytest.mark.parametrize("width", range(2, 40))
    def test_row_lengths(self, width):
        first, second = zigzag_line(width)
        assert len(first) == width
        assert len(second) == width - 2


class TestZigzagColumn:
    def test_height_four(self):
        assert zigzag_column(4) == [(0, "┌"), (0, "└─┐"), (0, "┌─┘"), (0, "└")]

    def test_odd_height_has_straight_centre(self):
        assert zigzag_column(5) == [(0, "┌"), (0, "└─┐"), (0, "  │"), (0, "┌─┘"), (0, "└")]

    def test_mirrored(self):
        assert zigzag_column(4, mirrored=True) == [(2, "┐"), (0, "┌─┘"), (0, "└─┐"), (2, "┘")]

    def test_straight_edge_ends(self):
        rows = zigzag_column(4, straight_edge=True)
        assert rows[0] == (0, "│")
        assert rows[-1] == (0, "│")

    @pytest.mark.parametrize("height", range(4, 30))
    def test_row_count_and_widths(self, height):
        rows = zigzag_column(height)
        assert len(rows) == height
        assert all(len(text) == 1 for _, text in (rows[0], rows[-1]))
        assert all(len(text) == 3 for _, text in rows[1:-1])


class TestValidation:
    def test_box_fits(self):
        validate_box(0, 0, 5, 2, 128, 48)

    def test_box_too_wide(self):
        with pytest.raises(GeometryBoundsError) as exc:
            validate_box(126, 0, 5, 2, 128, 48)
        assert exc.value.argument == "width"

    def test_box_too_small(self):
        with pytest.raises(GeometryBoundsError):
            validate_box(0, 0, 1, 5, 128, 48)

    def test_origin_outside_grid(self):
        with pytest.raises(GeometryBoundsError) as exc:
            validate_line(0, 48, 5, 128, 48)
        assert exc.value.argument == "y"

    def test_negative_origin(self):
        with pytest.raises(GeometryBoundsError):
            validate_column(-1, 0, 5, 128, 48)

    def test_line_too_short(self):
        with pytest.raises(GeometryBoundsError):
            validate_line(0, 0, 2, 128, 48)

    def test_line_reaching_the_edge_fits(self):
        validate_line(120, 0, 8, 128, 48)

    def test_column_too_short(self):
        with pytest.raises(GeometryBoundsError) as exc:
            validate_column(0, 0, 2, 128, 48)
        assert exc.value.argument == "height"

    def test_zigzag_line_too_short(self):
        with pytest.raises(GeometryBoundsError) as exc:
            validate_zigzag_line(0, 0, 1, 128, 48)
        assert exc.value.argument == "width"

    def test_column_too_long(self):
        with pytest.raises(GeometryBoundsError):
            validate_column(0, 40, 9, 128, 48)

    def test_zigzag_line_needs_two_rows(self):
        validate_zigzag_line(0, 46, 8, 128, 48)
        with pytest.raises(GeometryBoundsError):
            validate_zigzag_line(0, 47, 8, 128, 48)

    def test_zigzag_column_needs_three_columns(self):
        validate_zigzag_column(125, 0, 4, 128, 48)
        with pytest.raises(GeometryBoundsError):
            validate_zigzag_column(126, 0, 4, 128, 48)

    def test_zigzag_column_minimum_height(self):
        with pytest.raises(GeometryBoundsError):
            validate_zigzag_column(0, 0, 3, 128, 48)

    def test_error_hierarchy(self):
        with pytest.raises(ValueError):
            validate_box(0, 0, 0, 0, 128, 48)
        with pytest.raises(GuiError):
            validate_box(0, 0, 0, 0, 128, 48)
