import pytest

from advent.solutions.day05 import (
    Point,
    Vent,
    VentError,
    VentSystem,
    part_one,
    part_two,
)

EXAMPLE = (
    "0,9 -> 5,9\n"
    "8,0 -> 0,8\n"
    "9,4 -> 3,4\n"
    "2,2 -> 2,1\n"
    "7,0 -> 7,4\n"
    "6,4 -> 2,0\n"
    "0,9 -> 2,9\n"
    "3,4 -> 1,4\n"
    "0,0 -> 8,8\n"
    "5,5 -> 8,2\n"
)


def vent(x1, y1, x2, y2):
    return Vent(Point(x1, y1), Point(x2, y2))


def example_vent_system():
    return VentSystem(
        (
            vent(0, 9, 5, 9),
            vent(8, 0, 0, 8),
            vent(9, 4, 3, 4),
            vent(2, 2, 2, 1),
            vent(7, 0, 7, 4),
            vent(6, 4, 2, 0),
            vent(0, 9, 2, 9),
            vent(3, 4, 1, 4),
            vent(0, 0, 8, 8),
            vent(5, 5, 8, 2),
        )
    )


def test_parse_input():
    assert VentSystem.parse(EXAMPLE) == example_vent_system()


def test_parse_errors():
    with pytest.raises(VentError):
        Point.parse("12")
    with pytest.raises(VentError):
        Vent.parse("1,2 3,4")
    with pytest.raises(VentError):
        Point.parse("a,1")


def test_points_diagonal_not_allowed():
    assert list(vent(0, 0, 8, 8).points(False)) == []


def test_points_horizontal():
    assert list(vent(2, 4, 5, 4).points(False)) == [
        Point(2, 4),
        Point(3, 4),
        Point(4, 4),
        Point(5, 4),
    ]


def test_points_vertical():
    assert list(vent(7, 0, 7, 4).points(False)) == [Point(7, y) for y in range(5)]


def test_count_overlapping_points():
    assert example_vent_system().count_overlapping_points(False) == 5


def test_part_one():
    assert part_one(EXAMPLE) == 5


def test_vent_slope():
    assert vent(7, 0, 7, 4).slope() == (0, 1)
    assert vent(2, 3, 6, 3).slope() == (1, 0)
    assert vent(4, 4, 6, 2).slope() == (1, -1)


def test_points_diagonal():
    assert list(vent(0, 0, 8, 8).points(True)) == [Point(i, i) for i in range(9)]


def test_points_reverse_diagonal():
    assert list(vent(8, 0, 6, 2).points(True)) == [Point(8, 0), Point(7, 1), Point(6, 2)]


def test_count_overlapping_points_with_diagonals():
    assert example_vent_system().count_overlapping_points(True) == 12


def test_part_two():
    assert part_two(EXAMPLE) == 12


def test_invalid_input_gives_none():
    assert part_one("garbage") is None
    assert part_two("1,2 -> x,4") is None