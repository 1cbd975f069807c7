# persistence.py
"""
JSON save/load for Board.

Record layout:
    {"size": N, "board": [[tag, ...] * N] * N,
     "captured_black": int, "captured_white": int}
where tag is one of "Black", "White", "None" and rows are indexed by y.
"""
import json

from stonegrid.board_model import Board
from stonegrid.cell import Cell
from stonegrid.config import DEFAULT_SETTINGS
from stonegrid.group_finder import BoardError

DEBUG = DEFAULT_SETTINGS['debug']


class SaveFormatError(BoardError): pass


def board_to_dict(board: Board) -> dict:
    return {
        'size': board.size,
        'board': [[cell.value for cell in row] for row in board.get_board()],
        'captured_black': board.captured_black,
        'captured_white': board.captured_white,
    }


def _require_int(data: dict, key: str) -> int:
    if key not in data:
        raise SaveFormatError(f"Missing field {key!r}")
    v = data[key]
    # bool is an int subclass but never a valid count
    if not isinstance(v, int) or isinstance(v, bool) or v < 0:
        raise SaveFormatError(f"Field {key!r} must be a non-negative integer, got {v!r}")
    return v


def board_from_dict(data: dict) -> Board:
    if not isinstance(data, dict):
        raise SaveFormatError("Saved board must be an object")
    size = _require_int(data, 'size')
    if size < 1:
        raise SaveFormatError("Field 'size' must be positive")
    rows = data.get('board')
    if not isinstance(rows, list) or len(rows) != size:
        raise SaveFormatError(f"Field 'board' must hold {size} rows")
    board = Board(size=size)
    for y, row in enumerate(rows):
        if not isinstance(row, list) or len(row) != size:
            raise SaveFormatError(f"Row {y} must hold {size} cells")
        for x, tag in enumerate(row):
            try:
                board._board[y][x] = Cell(tag)
            except ValueError as e:
                raise SaveFormatError(f"Unknown cell tag {tag!r} at ({x}, {y})") from e
    board.captured_black = _require_int(data, 'captured_black')
    board.captured_white = _require_int(data, 'captured_white')
    return board


def save_to_file(board: Board, path: str = None):
    path = path or DEFAULT_SETTINGS['save_path']
    with open(path, 'wt', encoding='utf-8') as fp:
        json.dump(board_to_dict(board), fp)
    if DEBUG:
        print("[Persistence] saved", board, "to", path)


def load_from_file(path: str) -> Board:
    with open(path, 'rt', encoding='utf-8') as fp:
        try:
            data = json.load(fp)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SaveFormatError(f"{path} is not a saved board: {e}") from e
    board = board_from_dict(data)
    if DEBUG:
        print("[Persistence] loaded", board, "from", path)
    return board
