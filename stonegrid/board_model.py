# board_model.py
from collections import namedtuple
from enum import Enum
from typing import List

from stonegrid.cell import Cell, opponent
from stonegrid.config import DEFAULT_SETTINGS
from stonegrid.group_finder import Cluster, InvalidClusterSeed, compute_cluster, has_liberties

DEBUG = DEFAULT_SETTINGS['debug']


class PlaceOutcome(Enum):
    APPLIED = 'applied'
    IGNORED = 'ignored'  # coordinate off the board


PlaceResult = namedtuple('PlaceResult', ['outcome', 'removed'])


class Board:
    def __init__(self, size=19):
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self.size = size
        self._board = [[Cell.EMPTY] * size for _ in range(size)]
        self.captured_black = 0
        self.captured_white = 0

    # --- helpers ---
    def in_bounds(self, x, y):
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, x, y):
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is off the board")
        return self._board[y][x]

    def neighbors(self, x, y):
        # up, left, right, down
        for dx, dy in ((0, -1), (-1, 0), (1, 0), (0, 1)):
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.size and 0 <= ny < self.size:
                yield nx, ny

    def has_liberty(self, x, y):
        return any(self._board[ny][nx] is Cell.EMPTY for nx, ny in self.neighbors(x, y))

    def remove_cluster(self, cluster: Cluster):
        """Empty every member and credit the capture to the other color."""
        if cluster.color is Cell.EMPTY:
            raise InvalidClusterSeed("Cannot remove an empty cluster")
        for x, y in cluster.points:
            self._board[y][x] = Cell.EMPTY
        if opponent(cluster.color) is Cell.BLACK:
            self.captured_black += len(cluster.points)
        else:
            self.captured_white += len(cluster.points)
        if DEBUG:
            print("[Board] removed", cluster.color, "cluster of", len(cluster.points),
                  "captures B/W:", self.captured_black, self.captured_white)

    def _remove_if_dead(self, x, y, removed: List[Cluster]):
        # cells emptied by an earlier removal are skipped here
        if self._board[y][x] is Cell.EMPTY:
            return
        cluster = compute_cluster(self, x, y)
        if not has_liberties(self, cluster):
            self.remove_cluster(cluster)
            removed.append(cluster)

    # --- main API ---
    def place(self, x, y, color) -> PlaceResult:
        """Set (x, y) to color, then remove every liberty-less cluster it touches.

        The placed stone's own cluster is checked before its neighbors, so a
        stone played into a fully surrounded point removes itself. Off-board
        coordinates change nothing and report PlaceOutcome.IGNORED.
        """
        color = Cell(color)
        if not self.in_bounds(x, y):
            if DEBUG:
                print("[Board] ignored placement off the board:", (x, y))
            return PlaceResult(PlaceOutcome.IGNORED, [])
        self._board[y][x] = color
        removed = []
        self._remove_if_dead(x, y, removed)
        for nx, ny in self.neighbors(x, y):
            self._remove_if_dead(nx, ny, removed)
        return PlaceResult(PlaceOutcome.APPLIED, removed)

    # utility for tests
    def pretty(self):
        marks = {Cell.BLACK: 'X', Cell.WHITE: 'O', Cell.EMPTY: '.'}
        return '\n'.join(''.join(marks[v] for v in row) for row in self._board)

    def get_board(self) -> List[List[Cell]]:
        """Return a copy of the rows, indexed [y][x]."""
        return [row[:] for row in self._board]

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.size == other.size
            and self._board == other._board
            and self.captured_black == other.captured_black
            and self.captured_white == other.captured_white
        )

    def __repr__(self):
        return (f"Board(size={self.size}, captured_black={self.captured_black}, "
                f"captured_white={self.captured_white})")
