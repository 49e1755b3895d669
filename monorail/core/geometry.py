from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple

NUM_ROWS = 4
NUM_COLS = 5


class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value


DIRECTIONS: Tuple[Direction, ...] = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


@dataclass(frozen=True)
class Coordinate:
    row: int
    col: int

    def move_in(self, direction: Direction, delta: int = 1) -> Optional["Coordinate"]:
        dr, dc = direction.delta
        row = self.row + dr * delta
        col = self.col + dc * delta
        if not in_bounds(row, col):
            return None
        return Coordinate(row, col)

    def neighbours(self) -> Iterator["Coordinate"]:
        for direction in DIRECTIONS:
            dest = self.move_in(direction, 1)
            if dest is not None:
                yield dest

    def in_region(self) -> bool:
        # The lower left corner of the board.
        return self.col < 2 and self.row >= 1

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < NUM_ROWS and 0 <= col < NUM_COLS


def all_coordinates() -> Iterator[Coordinate]:
    for row in range(NUM_ROWS):
        for col in range(NUM_COLS):
            yield Coordinate(row, col)
