# ui/board_view.py
import math

import gi
from cairo import Context

gi.require_version("Gtk", "4.0")
gi.require_version("Pango", "1.0")
gi.require_version("PangoCairo", "1.0")
from gi.repository import Gtk, Pango, PangoCairo
import cairo
from typing import Optional, Dict, List, Tuple, Callable

from stonegrid.cell import Cell
from stonegrid.config import DEFAULT_SETTINGS
from ui.board_geometry import (
    Layout,
    compute_layout,
    coords_to_point,
    is_over_grid,
    point_to_coords,
    status_text,
)


# Pango helper
def draw_text_cr(cr: cairo.Context, x: float, y: float, text: str, font_size: int,
                 font_family: str, color=(1, 1, 1)):
    layout = PangoCairo.create_layout(cr)
    desc = Pango.font_description_from_string(f"{font_family} {max(1, font_size)}px")
    layout.set_font_description(desc)
    layout.set_text(text, -1)
    cr.set_source_rgb(*color)
    cr.move_to(x, y)
    PangoCairo.show_layout(cr, layout)


class BoardView(Gtk.Box):
    def __init__(self, board_size: int = 19, style: Optional[Dict] = None):
        super().__init__(orientation=Gtk.Orientation.VERTICAL)

        self.board_size = board_size
        self.style = dict(DEFAULT_SETTINGS) if style is None else {**DEFAULT_SETTINGS, **style}

        # state
        self.board_state: List[List[Cell]] = [[Cell.EMPTY] * board_size for _ in range(board_size)]
        self.captured_black = 0
        self.captured_white = 0
        self._layout = Layout(cell=0.0, x0=0.0, y0=0.0, span=0.0)
        self._hover: Optional[Tuple[float, float]] = None

        # drawing area
        self.darea = Gtk.DrawingArea()
        self.darea.set_hexpand(True)
        self.darea.set_vexpand(True)
        self.darea.set_draw_func(self.on_draw, None)

        # input controllers; button 0 listens to every mouse button
        click = Gtk.GestureClick.new()
        click.set_button(0)
        click.connect("pressed", self._on_pressed)
        self.darea.add_controller(click)

        motion = Gtk.EventControllerMotion.new()
        motion.connect("motion", self._on_motion)
        motion.connect("leave", self._on_leave)
        self.darea.add_controller(motion)

        self.append(self.darea)

        # callbacks
        self._click_cb: Optional[Callable[[int, int, int], None]] = None

    # Public API
    def set_board(self, board_state, captured_black: int, captured_white: int):
        self.board_state = [row[:] for row in board_state]
        self.board_size = len(self.board_state)
        self.captured_black = captured_black
        self.captured_white = captured_white
        self.darea.queue_draw()

    def on_click(self, callback: Callable[[int, int, int], None]):
        """callback(x, y, button) with raw grid coordinates."""
        self._click_cb = callback

    # Events
    def _on_pressed(self, gesture, n_press, x, y):
        pt = coords_to_point(self._layout, x, y)
        if pt is None:
            return
        button = gesture.get_current_button()
        if self._click_cb:
            try:
                self._click_cb(pt[0], pt[1], button)
            except Exception as e:
                print("[BoardView] click callback error:", e)

    def _on_motion(self, controller, x, y):
        self._hover = (x, y)
        self.darea.queue_draw()
        return False

    def _on_leave(self, controller):
        if self._hover is not None:
            self._hover = None
            self.darea.queue_draw()

    # Drawing
    def on_draw(self, area, cr: cairo.Context, width: int, height: int, user_data):
        self._layout = compute_layout(self.board_size, width, height)
        self._draw_background(cr, width, height)
        self._draw_grid_and_labels(cr)
        self._draw_stones(cr)
        self._draw_hover(cr)
        self._draw_status(cr, width)

    def _draw_background(self, cr: Context, width: int, height: int):
        cr.set_source_rgb(*self.style['board_bg'])
        cr.rectangle(0, 0, width, height)
        cr.fill()

    def _draw_grid_and_labels(self, cr: Context):
        cell, x0, y0, span = self._layout
        font_px = int(cell * self.style['font_scale'])
        cr.set_source_rgb(*self.style['foreground'])
        cr.set_line_width(max(1.0, cell * self.style['line_width_factor']))
        for i in range(self.board_size):
            cr.move_to(x0, y0 + i * cell)
            cr.line_to(x0 + span, y0 + i * cell)
            cr.move_to(x0 + i * cell, y0)
            cr.line_to(x0 + i * cell, y0 + span)
        cr.stroke()
        for i in range(self.board_size):
            label = str(i + 1)
            # rows on the left, columns on top
            draw_text_cr(cr, x0 - cell * 1.3, y0 + i * cell - cell * 0.5, label, font_px,
                         self.style['font_family'], self.style['foreground'])
            draw_text_cr(cr, x0 + i * cell - cell * 0.25, y0 - cell * 1.5, label, font_px,
                         self.style['font_family'], self.style['foreground'])

    def _draw_stones(self, cr: Context):
        radius = self._layout.cell * self.style['stone_radius_factor']
        for y, row in enumerate(self.board_state):
            for x, color in enumerate(row):
                if color is Cell.EMPTY:
                    continue
                cx, cy = point_to_coords(self._layout, x, y)
                key = 'stone_black' if color is Cell.BLACK else 'stone_white'
                cr.set_source_rgb(*self.style[key])
                cr.arc(cx, cy, radius, 0, 2.0 * math.pi)
                cr.fill()

    def _draw_hover(self, cr: Context):
        if self._hover is None or not is_over_grid(self._layout, *self._hover):
            return
        gx, gy = coords_to_point(self._layout, *self._hover)
        cx, cy = point_to_coords(self._layout, gx, gy)
        cr.set_source_rgba(*self.style['hover_ring'], self.style['hover_ring_alpha'])
        cr.set_line_width(5.0)
        cr.arc(cx, cy, self._layout.cell * 0.5, 0, 2.0 * math.pi)
        cr.stroke()

    def _draw_status(self, cr: Context, width: int):
        cell, x0, y0, span = self._layout
        font_px = int(min(cell * self.style['font_scale'], width / 25.0))
        draw_text_cr(cr, x0, y0 + span + span * 0.1 - font_px, status_text(self.captured_white, self.captured_black),
                     font_px, self.style['font_family'], self.style['foreground'])
