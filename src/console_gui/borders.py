"""
Border geometry — pure functions producing the glyph runs of lines, boxes and
zigzag separators, plus the bounds checks every drawing primitive runs first.

Nothing here touches the screen. Coordinates passed to the validators are
caller coordinates (row 0 = first drawable row); ``grid_height`` counts the
drawable rows only.
"""
from __future__ import annotations

from .errors import GeometryBoundsError
from .glyphs import BorderStyle, Corner, Junction, corner_glyph, horizontal_glyph, vertical_glyph

# Minimum extents of each primitive
MIN_LINE_LENGTH = 3
MIN_ZIGZAG_LINE_LENGTH = 2
MIN_ZIGZAG_COLUMN_LENGTH = 4
MIN_BOX_SIZE = 2

ZIGZAG_COLUMN_WIDTH = 3

# ─────────────────────────────────────────────────────────────────────────────
# Straight lines and boxes
# ─────────────────────────────────────────────────────────────────────────────

def horizontal_line(
    width: int,
    style: BorderStyle = BorderStyle.SINGLE,
    left: Junction = Junction.NONE,
    right: Junction = Junction.NONE,
) -> str:
    """A horizontal run of *width* glyphs, optionally ending in junctions."""
    h = horizontal_glyph(style)
    first = h if left is Junction.NONE else corner_glyph(Corner.TOP_LEFT, style, left)
    last = h if right is Junction.NONE else corner_glyph(Corner.TOP_RIGHT, style, right)
    return first + h * (width - 2) + last


def vertical_line(
    height: int,
    style: BorderStyle = BorderStyle.SINGLE,
    top: Junction = Junction.NONE,
    bottom: Junction = Junction.NONE,
) -> list[str]:
    """One glyph per row of a vertical line, top to bottom."""
    v = vertical_glyph(style)
    first = v if top is Junction.NONE else corner_glyph(Corner.TOP_LEFT, style, top)
    last = v if bottom is Junction.NONE else corner_glyph(Corner.BOTTOM_LEFT, style, bottom)
    return [first] + [v] * (height - 2) + [last]


def box_edges(
    width: int,
    style: BorderStyle = BorderStyle.SINGLE,
    top_left: Junction = Junction.NONE,
    top_right: Junction = Junction.NONE,
    bottom_left: Junction = Junction.NONE,
    bottom_right: Junction = Junction.NONE,
) -> tuple[str, str, str]:
    """Return ``(top_row, side_glyph, bottom_row)`` for a box *width* wide."""
    fill = horizontal_glyph(style) * (width - 2)
    top = (corner_glyph(Corner.TOP_LEFT, style, top_left) + fill
           + corner_glyph(Corner.TOP_RIGHT, style, top_right))
    bottom = (corner_glyph(Corner.BOTTOM_LEFT, style, bottom_left) + fill
              + corner_glyph(Corner.BOTTOM_RIGHT, style, bottom_right))
    return top, vertical_glyph(style), bottom


# ─────────────────────────────────────────────────────────────────────────────
# Zigzag patterns
# ─────────────────────────────────────────────────────────────────────────────

def zigzag_line(
    width: int,
    style: BorderStyle = BorderStyle.SINGLE,
    straight_edge: bool = False,
    flipped: bool = False,
) -> tuple[str, str]:
    """
    Build the two rows of a horizontal zigzag.

    Returns ``(first, second)``. *first* is *width* glyphs long and belongs
    at ``(x, y + flipped)``; *second* is ``width - 2`` glyphs long and
    belongs at ``(x + 1, y + (not flipped))``.

    The pattern steps through two four-glyph fragments. At the midpoint the
    step is adjusted according to ``width % 4`` so both halves line up:
    0 repeats the previous glyph, 1 rewinds one glyph and emits three,
    2 emits a single shifted step, 3 needs no adjustment.
    """
    h = horizontal_glyph(style)
    tl = corner_glyph(Corner.TOP_LEFT, style)
    tr = corner_glyph(Corner.TOP_RIGHT, style)
    bl = corner_glyph(Corner.BOTTOM_LEFT, style)
    br = corner_glyph(Corner.BOTTOM_RIGHT, style)

    if flipped:
        upper, lower = f"{bl}{h}{br} ", f"{tr} {tl}{h}"
    else:
        upper, lower = f"{tl}{h}{tr} ", f"{br} {bl}{h}"

    zags, remainder = divmod(width, 4)
    mid_points_up = zags % 2 == 0
    midpoint = width // 2

    first = [h if straight_edge else upper[0]]
    second: list[str] = []
    cursor = 1

    def step() -> None:
        nonlocal cursor
        if cursor >= len(upper):
            cursor = 0
        first.append(upper[cursor])
        second.append(lower[cursor])
        cursor += 1

    pos = 1
    while pos < width - 1:
        if pos == midpoint and remainder != 3:
            if mid_points_up:
                cursor += 1
            if remainder == 0:
                first.append(first[-1])
                second.append(second[-1])
            elif remainder == 1:
                first.pop()
                second.pop()
                for _ in range(3):
                    step()
                pos += 1
                cursor += 1
            else:
                if not mid_points_up:
                    cursor += 1
                step()
            pos += 1
            continue

        step()
        pos += 1

    first.append(h if straight_edge else upper[2])
    return "".join(first), "".join(second)


def zigzag_column(
    height: int,
    style: BorderStyle = BorderStyle.SINGLE,
    straight_edge: bool = False,
    mirrored: bool = False,
) -> list[tuple[int, str]]:
    """
    Build the rows of a vertical zigzag three cells wide.

    Returns one ``(x_offset, text)`` pair per row, top to bottom. The first
    and last rows hold a single glyph; the rows between hold three-glyph
    fragments, with a straight centre row when *height* is odd.
    """
    h = horizontal_glyph(style)
    v = vertical_glyph(style)
    down_right = (corner_glyph(Corner.TOP_LEFT, style) + h
                  + corner_glyph(Corner.BOTTOM_RIGHT, style))
    up_right = (corner_glyph(Corner.BOTTOM_LEFT, style) + h
                + corner_glyph(Corner.TOP_RIGHT, style))
    fragments = (down_right, up_right)
    end_offset = 2 if mirrored else 0
    odd_height = height % 2 == 1

    top = v if straight_edge else (up_right[2] if mirrored else down_right[0])
    rows: list[tuple[int, str]] = [(end_offset, top)]

    half = (height - 2) // 2
    for line in range(half):
        odd_line = line % 2 == 1
        rows.append((0, fragments[0 if mirrored != odd_line else 1]))

    line = half
    if odd_height:
        odd_zags = (height - 5) % 4 == 0
        rows.append((0, f"  {v}" if mirrored != odd_zags else f"{v}  "))
        line += 1

    for line in range(line, height - 2):
        odd_line = line % 2 == 1
        phase = (not odd_line) != (not odd_height)
        rows.append((0, fragments[0 if mirrored != phase else 1]))

    bottom = v if straight_edge else (down_right[2] if mirrored else up_right[0])
    rows.append((end_offset, bottom))
    return rows


# ─────────────────────────────────────────────────────────────────────────────
# Bounds validation
# ─────────────────────────────────────────────────────────────────────────────

def _check_origin(x: int, y: int, grid_width: int, grid_height: int) -> None:
    if x < 0 or x >= grid_width:
        raise GeometryBoundsError("x", "Origin point is beyond horizontal buffer bounds.")
    if y < 0 or y >= grid_height:
        raise GeometryBoundsError("y", "Origin point is beyond vertical buffer bounds.")


def validate_line(x: int, y: int, width: int, grid_width: int, grid_height: int) -> None:
    _check_origin(x, y, grid_width, grid_height)
    if x + width > grid_width:
        raise GeometryBoundsError("width", "Too long.")
    if width < MIN_LINE_LENGTH:
        raise GeometryBoundsError("width", f"Length can't be less than {MIN_LINE_LENGTH}.")


def validate_column(x: int, y: int, height: int, grid_width: int, grid_height: int) -> None:
    _check_origin(x, y, grid_width, grid_height)
    if y + height > grid_height:
        raise GeometryBoundsError("height", "Too long.")
    if height < MIN_LINE_LENGTH:
        raise GeometryBoundsError("height", f"Length can't be less than {MIN_LINE_LENGTH}.")


def validate_box(left: int, top: int, width: int, height: int, grid_width: int, grid_height: int) -> None:
    _check_origin(left, top, grid_width, grid_height)
    if left + width > grid_width:
        raise GeometryBoundsError("width", "Too wide.")
    if top + height > grid_height:
        raise GeometryBoundsError("height", "Too tall.")
    if width < MIN_BOX_SIZE or height < MIN_BOX_SIZE:
        raise GeometryBoundsError(
            "width, height", f"Can't be smaller than {MIN_BOX_SIZE} by {MIN_BOX_SIZE}."
        )


def validate_zigzag_line(x: int, y: int, width: int, grid_width: int, grid_height: int) -> None:
    _check_origin(x, y, grid_width, grid_height)
    if y + 2 > grid_height:
        raise GeometryBoundsError("y", "Second row is beyond vertical buffer bounds.")
    if x + width > grid_width:
        raise GeometryBoundsError("width", "Too long.")
    if width < MIN_ZIGZAG_LINE_LENGTH:
        raise GeometryBoundsError("width", f"Length can't be less than {MIN_ZIGZAG_LINE_LENGTH}.")


def validate_zigzag_column(x: int, y: int, height: int, grid_width: int, grid_height: int) -> None:
    _check_origin(x, y, grid_width, grid_height)
    if x + ZIGZAG_COLUMN_WIDTH > grid_width:
        raise GeometryBoundsError("x", "Column is partially out of horizontal buffer bounds.")
    if y + height > grid_height:
        raise GeometryBoundsError("height", "Too long.")
    if height < MIN_ZIGZAG_COLUMN_LENGTH:
        raise GeometryBoundsError("height", f"Length can't be less than {MIN_ZIGZAG_COLUMN_LENGTH}.")
