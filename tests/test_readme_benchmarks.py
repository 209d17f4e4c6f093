import pytest

from advent.day import Day
from advent.readme_benchmarks import (
    MARKER,
    ReadmeError,
    construct_table,
    get_path_for_bin,
    locate_table,
    update,
    update_content,
)
from advent.timings import Timing, Timings


def mock_timings() -> Timings:
    return Timings(
        data=[
            Timing(Day(1), "10ms", "20ms", 3e10),
            Timing(Day(2), "30ms", "40ms", 7e10),
            Timing(Day(4), "40ms", "50ms", 9e10),
        ]
    )


def test_errors_if_marker_not_present():
    with pytest.raises(ReadmeError):
        update_content("# readme", mock_timings(), 190.0)


def test_errors_if_too_many_markers_present():
    with pytest.raises(ReadmeError):
        update_content(f"{MARKER} {MARKER} {MARKER}", mock_timings(), 190.0)


def test_updates_empty_benchmarks():
    text = update_content(f"foo\nbar\n{MARKER}{MARKER}\nbaz", mock_timings(), 190.0)
    assert "## Benchmarks" in text


def test_updates_existing_benchmarks():
    text = update_content(f"foo\nbar\n{MARKER}{MARKER}\nbaz", mock_timings(), 190.0)
    text = update_content(text, mock_timings(), 190.0)
    assert text.count(MARKER) == 2
    assert text.count("## Benchmarks") == 1


def test_format_benchmarks():
    text = update_content(f"foo\nbar\n{MARKER}\n{MARKER}\nbaz", mock_timings(), 190.0)
    expected = "\n".join(
        [
            "foo",
            "bar",
            "<!--- benchmarking table --->",
            "## Benchmarks",
            "",
            "| Day | Part 1 | Part 2 |",
            "| :---: | :---: | :---:  |",
            "| [Day 1](./src/bin/01.rs) | `10ms` | `20ms` |",
            "| [Day 2](./src/bin/02.rs) | `30ms` | `40ms` |",
            "| [Day 4](./src/bin/04.rs) | `40ms` | `50ms` |",
            "",
            "**Total: 190.00ms**",
            "<!--- benchmarking table --->",
            "baz",
        ]
    )
    assert text == expected


def test_missing_parts_shown_as_dash():
    timings = Timings(data=[Timing(Day(3), "1ms", None, 0.0)])
    table = construct_table("##", timings, 1.0)
    assert "| [Day 3](./src/bin/03.rs) | `1ms` | `-` |" in table


def test_locate_table_offsets():
    text = f"ab{MARKER}cd{MARKER}ef"
    assert locate_table(text) == (2, len(text) - 2)


def test_get_path_for_bin():
    assert get_path_for_bin(Day(7)) == "./src/bin/07.rs"


def test_update_rewrites_file(tmp_path):
    readme = tmp_path / "README.md"
    readme.write_text(f"intro\n{MARKER}{MARKER}\n", encoding="utf-8")
    update(mock_timings(), readme)
    content = readme.read_text(encoding="utf-8")
    assert "**Total: 190000.00ms**" in content
    assert content.startswith("intro\n")


def test_update_missing_file_raises(tmp_path):
    with pytest.raises(ReadmeError):
        update(mock_timings(), tmp_path / "missing.md")