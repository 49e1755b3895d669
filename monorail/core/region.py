"""Board types for the lower-left corner of the board.

The corner can end up in one of three layouts (left, middle, right). Early
placements there are often compatible with more than one of them, so the board
keeps the layout unresolved (``None``) or partially resolved until a placement
forces a decision.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, FrozenSet, Optional, Tuple

from .geometry import Coordinate


class RegionConstraint(IntEnum):
    LEFT = 0
    LEFT_OR_MIDDLE = 1
    MIDDLE = 2
    RIGHT_OR_MIDDLE = 3
    RIGHT = 4

    def is_final(self) -> bool:
        return self in FINAL_CONSTRAINTS

    def applies_to(self, current: Optional["RegionConstraint"]) -> bool:
        """Can a board whose constraint is ``current`` become this type?"""
        if current is None:
            return True
        return self in NARROWINGS[current]

    def induced_by(self, coord: Coordinate) -> bool:
        """Is a tile at ``coord`` consistent with the board ending up as this type?"""
        if not coord.in_region():
            return True
        allowed = ONLY_ALLOWED.get(self)
        if allowed is not None:
            return coord == allowed
        return coord not in FORBIDDEN[self]

    def forbids(self, coord: Coordinate) -> bool:
        """Cells that can never be filled once the board has this type."""
        return coord.in_region() and coord in FORBIDDEN[self]


FINAL_CONSTRAINTS: FrozenSet[RegionConstraint] = frozenset(
    {RegionConstraint.LEFT, RegionConstraint.MIDDLE, RegionConstraint.RIGHT}
)

ALL_CONSTRAINTS: Tuple[RegionConstraint, ...] = tuple(RegionConstraint)

NARROWINGS: Dict[RegionConstraint, FrozenSet[RegionConstraint]] = {
    RegionConstraint.LEFT: frozenset({RegionConstraint.LEFT}),
    RegionConstraint.LEFT_OR_MIDDLE: frozenset(
        {RegionConstraint.LEFT_OR_MIDDLE, RegionConstraint.LEFT, RegionConstraint.MIDDLE}
    ),
    RegionConstraint.MIDDLE: frozenset({RegionConstraint.MIDDLE}),
    RegionConstraint.RIGHT_OR_MIDDLE: frozenset(
        {RegionConstraint.RIGHT_OR_MIDDLE, RegionConstraint.RIGHT, RegionConstraint.MIDDLE}
    ),
    RegionConstraint.RIGHT: frozenset({RegionConstraint.RIGHT}),
}

# A partial type forbids the cells its two refinements agree on.
FORBIDDEN: Dict[RegionConstraint, FrozenSet[Coordinate]] = {
    RegionConstraint.LEFT: frozenset({Coordinate(2, 1), Coordinate(1, 1)}),
    RegionConstraint.LEFT_OR_MIDDLE: frozenset({Coordinate(1, 1)}),
    RegionConstraint.MIDDLE: frozenset({Coordinate(3, 0), Coordinate(1, 1)}),
    RegionConstraint.RIGHT_OR_MIDDLE: frozenset({Coordinate(3, 0)}),
    RegionConstraint.RIGHT: frozenset({Coordinate(3, 0), Coordinate(2, 0)}),
}

# A placement only keeps a partial type open when its single shared cell is the
# one touched inside the corner.
ONLY_ALLOWED: Dict[RegionConstraint, Coordinate] = {
    RegionConstraint.LEFT_OR_MIDDLE: Coordinate(1, 0),
    RegionConstraint.RIGHT_OR_MIDDLE: Coordinate(3, 1),
}

# Partial type -> refinements it makes redundant as separate branches.
DOMINATES: Dict[RegionConstraint, FrozenSet[RegionConstraint]] = {
    RegionConstraint.LEFT_OR_MIDDLE: frozenset({RegionConstraint.LEFT, RegionConstraint.MIDDLE}),
    RegionConstraint.RIGHT_OR_MIDDLE: frozenset({RegionConstraint.RIGHT, RegionConstraint.MIDDLE}),
}


def is_final(constraint: Optional[RegionConstraint]) -> bool:
    return constraint is not None and constraint.is_final()


def compatible_with(constraint: Optional[RegionConstraint], coord: Coordinate) -> bool:
    if constraint is None:
        return True
    return not constraint.forbids(coord)


def reduce_dominated(candidates: FrozenSet[RegionConstraint]) -> Tuple[RegionConstraint, ...]:
    """Drop refinements already reachable from a partial candidate, sorted canonically."""
    remaining = set(candidates)
    for partial, refinements in DOMINATES.items():
        if partial in candidates:
            remaining -= refinements
    return tuple(sorted(remaining))
