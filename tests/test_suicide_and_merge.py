# tests/test_suicide_and_merge.py
from stonegrid.board_model import Board
from stonegrid.cell import Cell

def test_suicide_removes_the_placed_stone():
    b = Board(size=3)
    # surround corner (0,0) with black, then white plays into it
    b.place(0, 1, Cell.BLACK)
    b.place(1, 0, Cell.BLACK)
    result = b.place(0, 0, Cell.WHITE)
    assert b.get(0, 0) is Cell.EMPTY
    assert b.captured_black == 1
    assert [c.color for c in result.removed] == [Cell.WHITE]

def test_own_cluster_is_checked_before_neighbors():
    # 2x2: white at (1,0) and (0,1) share their last liberty at (0,0);
    # black playing there dies first, so the white stones regain a liberty
    b = Board(size=2)
    b.place(1, 0, Cell.WHITE)
    b.place(1, 1, Cell.BLACK)
    b.place(0, 1, Cell.WHITE)  # captures black at (1,1)
    assert b.get(1, 1) is Cell.EMPTY
    assert b.captured_white == 1
    b.place(0, 0, Cell.BLACK)
    assert b.get(0, 0) is Cell.EMPTY
    assert b.get(1, 0) is Cell.WHITE
    assert b.get(0, 1) is Cell.WHITE
    assert b.captured_white == 2
    assert b.captured_black == 0

def test_merge_keeps_liberties():
    b = Board(size=5)
    b.place(0, 1, Cell.BLACK)
    b.place(1, 0, Cell.WHITE)
    b.place(2, 2, Cell.BLACK)
    b.place(1, 2, Cell.WHITE)
    # white connects the two stones through (1,1)
    result = b.place(1, 1, Cell.WHITE)
    assert result.removed == []
    assert b.get(1, 1) is Cell.WHITE

def test_merged_group_captured_as_one():
    b = Board(size=3)
    b.place(0, 0, Cell.WHITE)
    b.place(0, 1, Cell.WHITE)
    b.place(1, 0, Cell.BLACK)
    b.place(1, 1, Cell.BLACK)
    result = b.place(0, 2, Cell.BLACK)
    assert b.get(0, 0) is Cell.EMPTY
    assert b.get(0, 1) is Cell.EMPTY
    assert b.captured_black == 2
    assert len(result.removed) == 1
