from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .geometry import NUM_COLS, NUM_ROWS, Coordinate, all_coordinates
from .moves import MOVE_SHAPES, Move
from .region import ALL_CONSTRAINTS, RegionConstraint, compatible_with, is_final, reduce_dominated

BoolArray = NDArray[np.bool_]
BoardKey = Tuple[bytes, Optional[RegionConstraint]]


class BoardStateError(RuntimeError):
    """Raised when a caller breaks the board's apply/undo contract."""


class IncompatibleConstraintError(BoardStateError):
    pass


class EmptyHistoryError(BoardStateError):
    pass


@dataclass(frozen=True)
class HistoryEntry:
    move: Move
    previous_constraint: Optional[RegionConstraint]


class Board:
    """Occupancy grid plus the current board type of the lower-left corner.

    The board is mutated in place by ``make_move`` and ``undo_move``; every
    applied move is recorded so that ``undo_move`` can revert it exactly.
    """

    def __init__(
        self,
        occupancy: ArrayLike,
        constraint: Optional[RegionConstraint] = None,
    ) -> None:
        grid = np.array(occupancy, dtype=bool)
        if grid.shape != (NUM_ROWS, NUM_COLS):
            raise ValueError(f"Board layout must have shape ({NUM_ROWS}, {NUM_COLS}), got {grid.shape}.")
        self._grid: BoolArray = grid
        self._constraint = constraint
        self._history: List[HistoryEntry] = []

    # ------------------------------------------------------------------
    @property
    def grid(self) -> BoolArray:
        view = self._grid.view()
        view.flags.writeable = False
        return view

    @property
    def constraint(self) -> Optional[RegionConstraint]:
        return self._constraint

    @property
    def history(self) -> Tuple[Move, ...]:
        return tuple(entry.move for entry in self._history)

    @property
    def depth(self) -> int:
        return len(self._history)

    def copy(self) -> "Board":
        clone = Board(self._grid, self._constraint)
        clone._history = list(self._history)
        return clone

    def key(self) -> BoardKey:
        return (np.packbits(self._grid).tobytes(), self._constraint)

    # ------------------------------------------------------------------
    def occupied(self, coord: Coordinate) -> bool:
        return bool(self._grid[coord.row, coord.col])

    def compatible(self, coord: Coordinate) -> bool:
        """Can ``coord`` still be filled given the current board type?"""
        return compatible_with(self._constraint, coord)

    def constraint_final(self) -> bool:
        return is_final(self._constraint)

    def free_cells(self) -> int:
        return int(self._grid.size - np.count_nonzero(self._grid))

    def frontier(self) -> Iterator[Coordinate]:
        for coord in all_coordinates():
            if self.occupied(coord) or not self.compatible(coord):
                continue
            if any(self.occupied(neighbour) for neighbour in coord.neighbours()):
                yield coord

    # ------------------------------------------------------------------
    def iter_legal_moves(self) -> Iterator[Move]:
        constraint_final = self.constraint_final()
        for anchor in self.frontier():
            for shape in MOVE_SHAPES:
                candidate = Move(anchor, shape)
                if not candidate.in_bounds():
                    continue
                extensions = candidate.footprint()
                if any(self.occupied(cell) or not self.compatible(cell) for cell in extensions):
                    continue

                touches_region = anchor.in_region() or any(cell.in_region() for cell in extensions)
                if not touches_region or constraint_final:
                    yield candidate
                    continue

                for constraint in self._candidate_constraints(anchor, extensions):
                    yield Move(anchor, shape, constraint)

    def legal_moves(self) -> List[Move]:
        return list(self.iter_legal_moves())

    def _candidate_constraints(
        self, anchor: Coordinate, extensions: Sequence[Coordinate]
    ) -> Tuple[RegionConstraint, ...]:
        candidates = frozenset(
            constraint
            for constraint in ALL_CONSTRAINTS
            if constraint.applies_to(self._constraint)
            and constraint.induced_by(anchor)
            and all(constraint.induced_by(cell) for cell in extensions)
        )
        return reduce_dominated(candidates)

    # ------------------------------------------------------------------
    def make_move(self, move: Move) -> None:
        new_constraint = move.resulting_constraint
        if new_constraint is not None and not new_constraint.applies_to(self._constraint):
            raise IncompatibleConstraintError(
                f"Board type is {_name(self._constraint)}, not compatible with {new_constraint.name}."
            )
        cells = move.cells()
        self._history.append(HistoryEntry(move, self._constraint))
        if new_constraint is not None:
            self._constraint = new_constraint
        self._set_cells(cells, True)

    def undo_move(self) -> Move:
        if not self._history:
            raise EmptyHistoryError("No move to undo.")
        entry = self._history.pop()
        self._constraint = entry.previous_constraint
        self._set_cells(entry.move.cells(), False)
        return entry.move

    def _set_cells(self, cells: Sequence[Coordinate], value: bool) -> None:
        for cell in cells:
            self._grid[cell.row, cell.col] = value

    # ------------------------------------------------------------------
    def render(self) -> str:
        rows = ["   " + " ".join(str(col) for col in range(NUM_COLS))]
        for r in range(NUM_ROWS):
            row = " ".join("#" if self._grid[r, c] else "." for c in range(NUM_COLS))
            rows.append(f"{r:>2} {row}")
        rows.append(f"board type: {_name(self._constraint)}")
        return "\n".join(rows)

    def __repr__(self) -> str:
        return f"Board(constraint={_name(self._constraint)}, depth={self.depth})\n{self.render()}"


def _name(constraint: Optional[RegionConstraint]) -> str:
    return constraint.name if constraint is not None else "UNRESOLVED"
