# ui/controller.py
from typing import Optional

from stonegrid.board_model import Board, PlaceOutcome, PlaceResult
from stonegrid.cell import Cell
from stonegrid.config import DEFAULT_SETTINGS
from stonegrid.persistence import SaveFormatError, save_to_file

DEBUG = DEFAULT_SETTINGS['debug']

# Gdk button numbers: 1 primary, 2 middle, 3 secondary
BUTTON_COLORS = {
    1: Cell.BLACK,
    2: Cell.EMPTY,
    3: Cell.WHITE,
}


class Controller:
    """
    Owns the Board for a session and keeps the view in sync with it.
    The view is expected to offer on_click(cb) and set_board(state, captured_black, captured_white).
    """

    def __init__(self, board_view, board: Board, save_path: Optional[str] = None):
        self.view = board_view
        self.board = board
        self.save_path = save_path or DEFAULT_SETTINGS['save_path']
        try:
            board_view.on_click(self._on_click)
        except Exception as e:
            print("[Controller] failed to wire board view callbacks", e)
        self.refresh_view()

    def refresh_view(self):
        self.view.set_board(self.board.get_board(), self.board.captured_black, self.board.captured_white)

    def _on_click(self, x: int, y: int, button: int):
        color = BUTTON_COLORS.get(button)
        if color is None:
            return
        self.place(x, y, color)

    def place(self, x: int, y: int, color: Cell) -> PlaceResult:
        result = self.board.place(x, y, color)
        if DEBUG:
            print("[Controller] place", (x, y), color, "->", result.outcome.value,
                  "removed", [len(c.points) for c in result.removed])
        if result.outcome is PlaceOutcome.APPLIED:
            self.refresh_view()
        return result

    def save(self) -> bool:
        """Write the board to save_path. Returns False if the write failed."""
        try:
            save_to_file(self.board, self.save_path)
        except (OSError, SaveFormatError) as e:
            print("[Controller] save failed:", e)
            return False
        if DEBUG:
            print("[Controller] saved to", self.save_path)
        return True
