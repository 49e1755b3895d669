"""Core board logic for the monorail solver."""

from .geometry import DIRECTIONS, NUM_COLS, NUM_ROWS, Coordinate, Direction
from .region import RegionConstraint
from .moves import MOVE_SHAPES, Move, MoveShape, footprint, in_bounds
from .state import Outcome, Player
from .board import Board, BoardStateError, EmptyHistoryError, IncompatibleConstraintError
from .layout import STARTING_LAYOUT, STARTING_PLAYER, initialize_board, parse_layout

__all__ = [
    "Board",
    "BoardStateError",
    "Coordinate",
    "DIRECTIONS",
    "Direction",
    "EmptyHistoryError",
    "IncompatibleConstraintError",
    "MOVE_SHAPES",
    "Move",
    "MoveShape",
    "NUM_COLS",
    "NUM_ROWS",
    "Outcome",
    "Player",
    "RegionConstraint",
    "STARTING_LAYOUT",
    "STARTING_PLAYER",
    "footprint",
    "in_bounds",
    "initialize_board",
    "parse_layout",
]
