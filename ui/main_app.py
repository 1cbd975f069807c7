# ui/main_app.py
import sys

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Gdk", "4.0")
from gi.repository import Gtk, Gdk

from stonegrid.board_model import Board
from stonegrid.config import DEFAULT_SETTINGS
from stonegrid.launcher import board_from_argv
from stonegrid.persistence import SaveFormatError
from ui.board_view import BoardView
from ui.controller import Controller


class MainWindow(Gtk.ApplicationWindow):
    def __init__(self, app, board: Board):
        super().__init__(application=app, title=DEFAULT_SETTINGS['window_title'])
        self.set_default_size(DEFAULT_SETTINGS['window_width'], DEFAULT_SETTINGS['window_height'])

        self.board_view = BoardView(board_size=board.size)
        self.controller = Controller(self.board_view, board)
        self.set_child(self.board_view)

        keys = Gtk.EventControllerKey.new()
        keys.connect("key-pressed", self._on_key_pressed)
        self.add_controller(keys)

    def _on_key_pressed(self, controller, keyval, keycode, state):
        if keyval in (Gdk.KEY_s, Gdk.KEY_S):
            self.controller.save()
            return True
        return False


class App(Gtk.Application):
    def __init__(self, board: Board):
        super().__init__(application_id="org.stonegrid.app")
        self.board = board

    def do_activate(self):
        win = MainWindow(self, self.board)
        win.present()


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    try:
        board = board_from_argv(args)
    except (OSError, SaveFormatError, ValueError) as e:
        print("[App] cannot start:", e, file=sys.stderr)
        return 1
    app = App(board)
    # arguments are consumed above, GTK gets none
    return app.run(None)


if __name__ == "__main__":
    raise SystemExit(main())
