import pytest

from advent.solutions.day10 import LineCheck, LineKind, check_line, part_one, part_two

EXAMPLE_LINES = [
    "[({(<(())[]>[[{[]{<()<>>",
    "[(()[<>])]({[<{<<[]>>(",
    "{([(<{}[<>[]}>{[]{[(<()>",
    "(((({<>}<{<{<>}{[]{[]{}",
    "[[<[([]))<([[{}[[()]]]",
    "[{[{({}]{}}([{[{{{}}([]",
    "{<[[]]>}<{[{[{[]{()[[[]",
    "[<(<(<(<{}))><([]([]()",
    "<{([([[(<>()){}]>(<<{{",
    "<{([{{}}[<[[[<>{}]]]>[]]",
]
EXAMPLE = "\n".join(EXAMPLE_LINES) + "\n"


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("{([(<{}[<>[]}>{[]{[(<()>", LineCheck(LineKind.CORRUPTED, 1197)),
        ("[[<[([]))<([[{}[[()]]]", LineCheck(LineKind.CORRUPTED, 3)),
        ("[{[{({}]{}}([{[{{{}}([]", LineCheck(LineKind.CORRUPTED, 57)),
        ("[<(<(<(<{}))><([]([]()", LineCheck(LineKind.CORRUPTED, 3)),
        ("<{([([[(<>()){}]>(<<{{", LineCheck(LineKind.CORRUPTED, 25_137)),
        ("[({(<(())[]>[[{[]{<()<>>", LineCheck(LineKind.INCOMPLETE, 288_957)),
        ("[(()[<>])]({[<{<<[]>>(", LineCheck(LineKind.INCOMPLETE, 5_566)),
        ("(((({<>}<{<{<>}{[]{[]{}", LineCheck(LineKind.INCOMPLETE, 1_480_781)),
        ("{<[[]]>}<{[{[{[]{()[[[]", LineCheck(LineKind.INCOMPLETE, 995_444)),
        ("<{([{{}}[<[[[<>{}]]]>[]]", LineCheck(LineKind.INCOMPLETE, 294)),
    ],
)
def test_check_line(line, expected):
    assert check_line(line) == expected


def test_part_one():
    assert part_one(EXAMPLE) == 26_397


def test_part_two():
    assert part_two(EXAMPLE) == 288_957


def test_part_two_without_incomplete_lines():
    assert part_two("(]\n") is None


def test_complete_line_scores_zero():
    assert check_line("([]{})") == LineCheck(LineKind.INCOMPLETE, 0)


def test_unexpected_closer_on_empty_stack():
    assert check_line(">") == LineCheck(LineKind.CORRUPTED, 25_137)