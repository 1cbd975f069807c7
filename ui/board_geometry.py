# ui/board_geometry.py
# Layout math for the board widget. No GTK imports, so it is usable from tests.
from collections import namedtuple
from typing import Optional, Tuple

# cell: spacing between lines; x0, y0: pixel position of intersection (0, 0);
# span: pixel length of one grid side
Layout = namedtuple('Layout', ['cell', 'x0', 'y0', 'span'])


def compute_layout(board_size: int, width: float, height: float) -> Layout:
    # two cells of margin on every side for labels and the status line
    cell = min(width, height) / (board_size + 4)
    span = cell * (board_size - 1)
    x0 = width * 0.5 - span * 0.5
    y0 = height * 0.5 - span * 0.5
    return Layout(cell=cell, x0=x0, y0=y0, span=span)


def point_to_coords(layout: Layout, x: int, y: int) -> Tuple[float, float]:
    return layout.x0 + x * layout.cell, layout.y0 + y * layout.cell


def coords_to_point(layout: Layout, px: float, py: float) -> Optional[Tuple[int, int]]:
    """Snap a pointer position to the nearest intersection.

    The result is not clipped to the board; Board.place ignores anything off
    it. Returns None only when the layout is degenerate.
    """
    if layout.cell <= 0:
        return None
    gx = int(round((px - layout.x0) / layout.cell))
    gy = int(round((py - layout.y0) / layout.cell))
    return gx, gy


def is_over_grid(layout: Layout, px: float, py: float) -> bool:
    lx = px - layout.x0
    ly = py - layout.y0
    return 0 < lx <= layout.span and 0 < ly <= layout.span


def status_text(captured_white: int, captured_black: int) -> str:
    return f"White captured: {captured_white} Black captured: {captured_black}"
