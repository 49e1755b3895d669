from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .geometry import NUM_COLS, NUM_ROWS, Coordinate, Direction
from .region import RegionConstraint

Step = Tuple[Direction, int]


class MoveShape(Enum):
    SINGLE = "single"
    ONE_UP = "one_up"
    ONE_DOWN = "one_down"
    ONE_LEFT = "one_left"
    ONE_RIGHT = "one_right"
    TWO_UP = "two_up"
    TWO_DOWN = "two_down"
    TWO_LEFT = "two_left"
    TWO_RIGHT = "two_right"
    UP_AND_DOWN = "up_and_down"
    LEFT_AND_RIGHT = "left_and_right"

    @property
    def steps(self) -> Tuple[Step, ...]:
        return SHAPE_STEPS[self]


MOVE_SHAPES: Tuple[MoveShape, ...] = tuple(MoveShape)

SHAPE_STEPS: Dict[MoveShape, Tuple[Step, ...]] = {
    MoveShape.SINGLE: (),
    MoveShape.ONE_UP: ((Direction.UP, 1),),
    MoveShape.ONE_DOWN: ((Direction.DOWN, 1),),
    MoveShape.ONE_LEFT: ((Direction.LEFT, 1),),
    MoveShape.ONE_RIGHT: ((Direction.RIGHT, 1),),
    MoveShape.TWO_UP: ((Direction.UP, 1), (Direction.UP, 2)),
    MoveShape.TWO_DOWN: ((Direction.DOWN, 1), (Direction.DOWN, 2)),
    MoveShape.TWO_LEFT: ((Direction.LEFT, 1), (Direction.LEFT, 2)),
    MoveShape.TWO_RIGHT: ((Direction.RIGHT, 1), (Direction.RIGHT, 2)),
    MoveShape.UP_AND_DOWN: ((Direction.UP, 1), (Direction.DOWN, 1)),
    MoveShape.LEFT_AND_RIGHT: ((Direction.LEFT, 1), (Direction.RIGHT, 1)),
}


@dataclass(frozen=True)
class Move:
    anchor: Coordinate
    shape: MoveShape
    resulting_constraint: Optional[RegionConstraint] = None

    def in_bounds(self) -> bool:
        return in_bounds(self.anchor, self.shape)

    def footprint(self) -> List[Coordinate]:
        return footprint(self.anchor, self.shape)

    def cells(self) -> List[Coordinate]:
        return [self.anchor, *self.footprint()]

    def as_tuple(self) -> Tuple[int, int, str, Optional[str]]:
        constraint = self.resulting_constraint.name if self.resulting_constraint is not None else None
        return (self.anchor.row, self.anchor.col, self.shape.name, constraint)

    def __str__(self) -> str:
        text = f"{self.shape.name}@{self.anchor}"
        if self.resulting_constraint is not None:
            text += f"->{self.resulting_constraint.name}"
        return text


def in_bounds(anchor: Coordinate, shape: MoveShape) -> bool:
    row, col = anchor.row, anchor.col
    if shape is MoveShape.SINGLE:
        return True
    if shape is MoveShape.ONE_UP:
        return row >= 1
    if shape is MoveShape.ONE_DOWN:
        return row < NUM_ROWS - 1
    if shape is MoveShape.ONE_LEFT:
        return col >= 1
    if shape is MoveShape.ONE_RIGHT:
        return col < NUM_COLS - 1
    if shape is MoveShape.TWO_UP:
        return row >= 2
    if shape is MoveShape.TWO_DOWN:
        return row < NUM_ROWS - 2
    if shape is MoveShape.TWO_LEFT:
        return col >= 2
    if shape is MoveShape.TWO_RIGHT:
        return col < NUM_COLS - 2
    if shape is MoveShape.UP_AND_DOWN:
        return 1 <= row < NUM_ROWS - 1
    if shape is MoveShape.LEFT_AND_RIGHT:
        return 1 <= col < NUM_COLS - 1
    raise ValueError(f"Unknown move shape {shape!r}.")


def footprint(anchor: Coordinate, shape: MoveShape) -> List[Coordinate]:
    """Cells beyond the anchor covered by ``shape``.

    Callers check ``in_bounds`` first; a footprint leaving the grid is an error.
    """
    cells: List[Coordinate] = []
    for direction, distance in shape.steps:
        dest = anchor.move_in(direction, distance)
        if dest is None:
            raise ValueError(f"{shape.name} at {anchor} leaves the board.")
        cells.append(dest)
    return cells
