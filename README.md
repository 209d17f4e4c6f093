# advent

A workspace for Advent of Code: puzzle solutions for days 1 to 14 and a
small command line, `advent`, that downloads puzzles, runs solutions,
benchmarks them and submits answers.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

Downloading, reading and submitting go through the external `aoc` command
(aoc-cli), which must be installed and on your `PATH` with a session
configured. If `AOC_YEAR` is set to a number, it is passed on to `aoc` as
`--year`.

## Directory layout

All commands run from the workspace root and use these files:

- `data/inputs/NN.txt` – your puzzle input for day `NN`
- `data/examples/NN.txt` – the example input from the puzzle text
- `data/puzzles/NN.md` – the puzzle description, as downloaded
- `data/timings.json` – stored benchmark results
- `README.md` – gets a benchmark table between two
  `<!--- benchmarking table --->` markers when timings are stored

Days are always written with two digits (`01` … `25`) in file names; on the
command line any number from 1 to 25 is accepted.

## Commands

```
advent download 5          # fetch input and description for day 5
advent read 5              # print the description of day 5
advent solve 5             # run the solution for day 5 on its input
advent solve 5 --release   # run it under Python's -O flag
advent solve 5 --submit 1  # run it and submit the answer to part 1
advent all                 # run every day that has a solution
advent all --release
advent time                # benchmark days without complete stored timings
advent time --all          # benchmark every day
advent time 5              # benchmark a single day
advent time --all --store  # benchmark and save to data/timings.json and README.md
advent today               # on 1–25 December: fetch and show today's puzzle
```

Solutions run in a child Python process. Days that have no solution module
are reported as `Not solved.` by `all` and `time`.

`today` uses the puzzle server's clock (UTC−5) and refuses to run outside
1–25 December.

While a solution runs, each part prints its answer followed by how long it
took. When benchmarking, each part is run repeatedly (between 10 and 10000
samples, aiming at about a second in total) and the average is shown as
`Part 1: 42 (1.2ms @ 830 samples)`. A part whose answer is missing is shown
as `Part 1: ✖`.

## Using the library

Each day lives in `advent.solutions.dayNN` (`day01` to `day14`) and exposes
`part_one` and `part_two`, taking the puzzle text and returning the answer,
or `None` when there is none:

```python
from advent.day import Day
from advent.inputs import read_file
from advent.solutions import day01

text = read_file("examples", Day.parse("1"))
print(day01.part_one(text), day01.part_two(text))
```

`advent.day.all_days()` yields every day from 1 to 25.
`advent.timings.Timings` reads, merges and stores benchmark results, and
`advent.readme_benchmarks.update` rewrites the benchmark table in a README.

## What is not included

- There is no command that starts a new day: solution modules, and empty
  input and example files, are not generated for you.
- Solutions exist only for days 1 to 14.
- There is no memory profiling of a solution run.