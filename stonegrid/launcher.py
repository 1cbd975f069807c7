# launcher.py
import re
from typing import List

from stonegrid.board_model import Board
from stonegrid.config import DEFAULT_SETTINGS
from stonegrid.persistence import load_from_file

# plain decimal digits only; "-3", "1_0" and " 9 " are file names
SIZE_ARG = re.compile(r'[0-9]+')


def board_from_argv(args: List[str]) -> Board:
    """Pick the starting board from command-line arguments (program name excluded).

    No argument gives the configured default size, a non-negative decimal
    gives a fresh board of that size, anything else is read as a save file.
    """
    if not args:
        return Board(size=DEFAULT_SETTINGS['board_size'])
    if SIZE_ARG.fullmatch(args[0]):
        return Board(size=int(args[0]))
    return load_from_file(args[0])
