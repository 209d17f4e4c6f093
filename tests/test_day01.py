from advent.solutions.day01 import (
    count_increases,
    count_three_value_window_increases,
    part_one,
    part_two,
)

VALUES = [199, 200, 208, 210, 200, 207, 240, 269, 260, 263]
EXAMPLE = "\n".join(str(value) for value in VALUES) + "\n"


def test_count_increases():
    assert count_increases(iter(VALUES)) == 7


def test_three_value_windows():
    assert count_three_value_window_increases(iter(VALUES)) == 5


def test_part_one():
    assert part_one(EXAMPLE) == 7


def test_part_two():
    assert part_two(EXAMPLE) == 5


def test_empty_input_has_no_answer():
    assert count_increases([]) is None
    assert part_one("") is None


def test_windows_need_three_values():
    assert count_three_value_window_increases([1, 2]) is None
    assert count_three_value_window_increases([1, 2, 3]) == 0


def test_unparsable_lines_are_skipped():
    assert part_one("1\nfoo\n2\n-3\n3\n") == 2