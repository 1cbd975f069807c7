# tests/test_persistence_roundtrip.py
import json

import pytest
from stonegrid.board_model import Board
from stonegrid.cell import Cell
from stonegrid.persistence import (
    SaveFormatError,
    board_from_dict,
    board_to_dict,
    load_from_file,
    save_to_file,
)

def _mixed_board():
    b = Board(size=5)
    b.place(1, 1, Cell.WHITE)
    for x, y in [(0, 1), (2, 1), (1, 0), (1, 2)]:
        b.place(x, y, Cell.BLACK)
    b.place(4, 4, Cell.BLACK)
    b.place(3, 4, Cell.WHITE)
    b.place(4, 3, Cell.WHITE)
    return b

def test_roundtrip_file(tmp_path):
    b = _mixed_board()
    assert b.captured_black == 1
    assert b.captured_white == 1
    path = tmp_path / 'save.gs'
    save_to_file(b, str(path))
    b2 = load_from_file(str(path))
    assert b2 == b
    assert b2.get_board() == b.get_board()

def test_record_layout():
    b = Board(size=2)
    b.place(1, 0, Cell.BLACK)
    b.place(0, 1, Cell.WHITE)
    assert board_to_dict(b) == {
        'size': 2,
        'board': [['None', 'Black'], ['White', 'None']],
        'captured_black': 0,
        'captured_white': 0,
    }

def test_saved_file_is_json(tmp_path):
    path = tmp_path / 'board.json'
    save_to_file(Board(size=3), str(path))
    data = json.loads(path.read_text(encoding='utf-8'))
    assert data['size'] == 3
    assert data['board'] == [['None'] * 3] * 3

def test_loaded_board_keeps_playing():
    data = board_to_dict(_mixed_board())
    b = board_from_dict(data)
    b.place(0, 0, Cell.WHITE)
    # white at the corner has no liberty once (0,1) and (1,0) are black
    assert b.get(0, 0) is Cell.EMPTY
    assert b.captured_black == 2

@pytest.mark.parametrize('patch', [
    {'board': [['None', 'Red'], ['None', 'None']]},
    {'board': [['None', 'None']]},
    {'board': [['None'], ['None', 'None']]},
    {'captured_black': -1},
    {'captured_white': 'many'},
    {'size': 0},
    {'size': True},
])
def test_malformed_record_rejected(patch):
    data = {
        'size': 2,
        'board': [['None', 'None'], ['None', 'None']],
        'captured_black': 0,
        'captured_white': 0,
    }
    data.update(patch)
    with pytest.raises(SaveFormatError):
        board_from_dict(data)

def test_missing_field_rejected():
    data = board_to_dict(Board(size=2))
    del data['captured_white']
    with pytest.raises(SaveFormatError):
        board_from_dict(data)

def test_not_json_rejected(tmp_path):
    path = tmp_path / 'junk.gs'
    path.write_text('not a board', encoding='utf-8')
    with pytest.raises(SaveFormatError):
        load_from_file(str(path))

def test_invalid_utf8_rejected(tmp_path):
    path = tmp_path / 'binary.gs'
    path.write_bytes(b'\xff\xfe{"size": 2}')
    with pytest.raises(SaveFormatError):
        load_from_file(str(path))
