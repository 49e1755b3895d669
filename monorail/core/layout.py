from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .board import Board
from .region import RegionConstraint
from .state import Player

# Track already laid along the top and down the middle of the board.
STARTING_LAYOUT: Tuple[Tuple[bool, ...], ...] = (
    (False, True, True, True, False),
    (False, False, False, True, False),
    (False, False, False, True, False),
    (False, False, False, False, False),
)

STARTING_PLAYER = Player.YEON_SEUNG


def initialize_board(constraint: Optional[RegionConstraint] = None) -> Board:
    return Board(STARTING_LAYOUT, constraint)


def parse_layout(rows: Sequence[str], constraint: Optional[RegionConstraint] = None) -> Board:
    """Build a board from rows of ``#`` (occupied) and ``.`` (free)."""
    layout = []
    for line in rows:
        cells = line.replace(" ", "")
        unknown = set(cells) - {"#", "."}
        if unknown:
            raise ValueError(f"Unexpected layout characters {sorted(unknown)} in {line!r}.")
        layout.append([cell == "#" for cell in cells])
    return Board(layout, constraint)
