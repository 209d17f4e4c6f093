import pytest

from advent.solutions.day13 import Fold, Paper, PaperError, part_one, part_two

EXAMPLE = """6,10
0,14
9,10
0,3
10,4
4,11
6,0
6,12
4,1
0,13
10,12
3,4
3,0
8,4
1,10
2,14
8,10
9,0

fold along y=7
fold along x=5
"""

EXAMPLE_OUTPUT = "█████\n█   █\n█   █\n█   █\n█████\n"


def example_paper():
    dots = {
        (6, 10), (0, 14), (9, 10), (0, 3), (10, 4), (4, 11), (6, 0), (6, 12), (4, 1),
        (0, 13), (10, 12), (3, 4), (3, 0), (8, 4), (1, 10), (2, 14), (8, 10), (9, 0),
    }
    return Paper(dots=dots, folds=[Fold("x", 5), Fold("y", 7)])


def example_paper_after_fold():
    dots = {
        (0, 0), (2, 0), (3, 0), (6, 0), (9, 0), (0, 1), (4, 1), (6, 2), (10, 2),
        (0, 3), (4, 3), (1, 4), (3, 4), (6, 4), (8, 4), (9, 4), (10, 4),
    }
    return Paper(dots=dots, folds=[Fold("x", 5)])


def test_parse_input():
    assert Paper.parse(EXAMPLE) == example_paper()


def test_parse_requires_fold_section():
    with pytest.raises(PaperError):
        Paper.parse("1,2\n3,4\n")


def test_parse_rejects_bad_fold():
    with pytest.raises(PaperError):
        Fold.parse("fold along z=3")


def test_move_coordinate():
    assert Fold.move_coordinate(3, 7) == 3
    assert Fold.move_coordinate(10, 7) == 4
    assert Fold.move_coordinate(15, 7) is None


def test_paper_fold_once():
    paper = example_paper()
    paper.fold_once()
    assert paper == example_paper_after_fold()


def test_part_one():
    assert part_one(EXAMPLE) == 17


def test_fold_and_output():
    paper = example_paper()
    assert paper.fold_and_output() == EXAMPLE_OUTPUT
    assert paper == example_paper()


def test_part_two():
    assert part_two(EXAMPLE) == EXAMPLE_OUTPUT


def test_parts_return_none_for_bad_input():
    assert part_one("1,2\n") is None
    assert part_two("a,b\n\nfold along x=1\n") is None