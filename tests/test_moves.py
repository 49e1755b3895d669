import pytest

from monorail.core import MOVE_SHAPES, Coordinate, Move, MoveShape, RegionConstraint, footprint, in_bounds
from monorail.core.geometry import all_coordinates


def test_eleven_shapes_in_canonical_order():
    assert len(MOVE_SHAPES) == 11
    assert MOVE_SHAPES[0] is MoveShape.SINGLE
    assert MOVE_SHAPES[-1] is MoveShape.LEFT_AND_RIGHT


def test_footprints():
    anchor = Coordinate(1, 2)
    assert footprint(anchor, MoveShape.SINGLE) == []
    assert footprint(anchor, MoveShape.ONE_UP) == [Coordinate(0, 2)]
    assert footprint(anchor, MoveShape.TWO_RIGHT) == [Coordinate(1, 3), Coordinate(1, 4)]
    assert footprint(anchor, MoveShape.TWO_DOWN) == [Coordinate(2, 2), Coordinate(3, 2)]
    assert footprint(anchor, MoveShape.UP_AND_DOWN) == [Coordinate(0, 2), Coordinate(2, 2)]
    assert footprint(anchor, MoveShape.LEFT_AND_RIGHT) == [Coordinate(1, 1), Coordinate(1, 3)]


def test_bounds_checks():
    assert not in_bounds(Coordinate(1, 0), MoveShape.TWO_UP)
    assert in_bounds(Coordinate(2, 0), MoveShape.TWO_UP)
    assert not in_bounds(Coordinate(2, 0), MoveShape.TWO_DOWN)
    assert in_bounds(Coordinate(1, 0), MoveShape.TWO_DOWN)
    assert not in_bounds(Coordinate(0, 2), MoveShape.UP_AND_DOWN)
    assert not in_bounds(Coordinate(3, 2), MoveShape.UP_AND_DOWN)
    assert not in_bounds(Coordinate(1, 4), MoveShape.LEFT_AND_RIGHT)
    assert not in_bounds(Coordinate(1, 3), MoveShape.TWO_RIGHT)


def test_in_bounds_matches_footprint_everywhere():
    for anchor in all_coordinates():
        for shape in MOVE_SHAPES:
            if in_bounds(anchor, shape):
                assert len(footprint(anchor, shape)) == len(shape.steps)
            else:
                with pytest.raises(ValueError):
                    footprint(anchor, shape)


def test_move_text():
    move = Move(Coordinate(3, 3), MoveShape.TWO_LEFT, RegionConstraint.RIGHT_OR_MIDDLE)
    assert str(move) == "TWO_LEFT@(3,3)->RIGHT_OR_MIDDLE"
    assert move.as_tuple() == (3, 3, "TWO_LEFT", "RIGHT_OR_MIDDLE")
    assert str(Move(Coordinate(0, 0), MoveShape.SINGLE)) == "SINGLE@(0,0)"
    assert move.cells() == [Coordinate(3, 3), Coordinate(3, 2), Coordinate(3, 1)]
