# group_finder.py
from collections import namedtuple

from stonegrid.cell import Cell


# Exceptions
class BoardError(Exception): pass


class InvalidClusterSeed(BoardError): pass


# points: frozenset of (x, y)
Cluster = namedtuple('Cluster', ['color', 'points'])


def compute_cluster(board, x, y):
    """Return the Cluster of same-colored stones connected to (x, y).

    Flood fill with an explicit stack, so board size is not bounded by the
    interpreter's recursion limit. Raises InvalidClusterSeed if (x, y) is out
    of bounds or Empty.
    """
    if not board.in_bounds(x, y):
        raise InvalidClusterSeed(f"Seed ({x}, {y}) is off the board")
    color = board.get(x, y)
    if color is Cell.EMPTY:
        raise InvalidClusterSeed(f"Seed ({x}, {y}) is empty")
    visited = set()
    stack = [(x, y)]
    while stack:
        p = stack.pop()
        if p in visited: continue
        visited.add(p)
        for nx, ny in board.neighbors(*p):
            if board.get(nx, ny) is color and (nx, ny) not in visited:
                stack.append((nx, ny))
    return Cluster(color=color, points=frozenset(visited))


def has_liberties(board, cluster):
    """True iff some member of cluster touches an Empty intersection."""
    return any(board.has_liberty(x, y) for x, y in cluster.points)
