"""Forced-result solver for the JunSeok vs YeonSeung track puzzle."""

from . import core, search
from .core import (
    Board,
    BoardStateError,
    Coordinate,
    Direction,
    EmptyHistoryError,
    IncompatibleConstraintError,
    Move,
    MoveShape,
    Outcome,
    Player,
    RegionConstraint,
    STARTING_LAYOUT,
    STARTING_PLAYER,
    initialize_board,
    parse_layout,
)
from .search import (
    ForcedResultSearch,
    ResponseLine,
    SearchConfig,
    SearchResult,
    analyze_responses,
)
from .search import search as solve

__all__ = [
    "core",
    "search",
    "Board",
    "BoardStateError",
    "Coordinate",
    "Direction",
    "EmptyHistoryError",
    "IncompatibleConstraintError",
    "Move",
    "MoveShape",
    "Outcome",
    "Player",
    "RegionConstraint",
    "STARTING_LAYOUT",
    "STARTING_PLAYER",
    "initialize_board",
    "parse_layout",
    "ForcedResultSearch",
    "ResponseLine",
    "SearchConfig",
    "SearchResult",
    "analyze_responses",
    "solve",
]
