# cell.py
from enum import Enum


class Cell(Enum):
    """State of a single intersection. Values double as the save-file tags."""
    BLACK = 'Black'
    WHITE = 'White'
    EMPTY = 'None'

    def __str__(self):
        return self.value


def opponent(color):
    if color is Cell.EMPTY:
        raise ValueError("Empty has no opponent")
    return Cell.WHITE if color is Cell.BLACK else Cell.BLACK
