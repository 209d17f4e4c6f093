from collections import Counter

import pytest

from advent.solutions.day14 import (
    InsertionRule,
    Polymer,
    PolymerError,
    parse_element,
    part_one,
    part_two,
)

EXAMPLE = """NNCB

CH -> B
HH -> N
CB -> H
NH -> C
HB -> C
HC -> B
HN -> C
NN -> C
BH -> H
NC -> B
NB -> B
BN -> B
BB -> N
BC -> B
CC -> N
CN -> C
"""

LETTER = {"B": 1, "C": 2, "H": 7, "N": 13}

RULE_TRIPLES = (
    "CHB HHN CBH NHC HBC HCB HNC NNC BHH NCB NBB BNB BBN BCB CCN CNC"
).split()


def _pairs(table):
    return Counter({(LETTER[key[0]], LETTER[key[1]]): count for key, count in table.items()})


def _counts(table):
    return Counter({LETTER[key]: count for key, count in table.items()})


def example_rules():
    return [InsertionRule(*(LETTER[ch] for ch in triple)) for triple in RULE_TRIPLES]


def example_polymer():
    return Polymer(
        counts=_counts({"N": 2, "C": 1, "B": 1}),
        pairs=_pairs({"NN": 1, "NC": 1, "CB": 1}),
        rules=example_rules(),
    )


def example_polymer_after_four_steps():
    return Polymer(
        counts=_counts({"N": 11, "B": 23, "C": 10, "H": 5}),
        pairs=_pairs(
            {
                "BB": 9, "BC": 4, "BH": 3, "BN": 6,
                "CB": 5, "CC": 2, "CN": 3,
                "HC": 3, "HH": 1, "HN": 1,
                "NB": 9, "NC": 1, "NH": 1,
            }
        ),
        rules=example_rules(),
    )


def test_parse_element():
    assert parse_element("A") == 0
    assert parse_element("n") == LETTER["N"]
    with pytest.raises(PolymerError):
        parse_element("1")


def test_parse_input():
    assert Polymer.parse(EXAMPLE) == example_polymer()


def test_parse_rejects_bad_rule():
    with pytest.raises(PolymerError):
        InsertionRule.parse("AB => C")


def test_expand():
    polymer = example_polymer()
    polymer.expand(4)
    assert polymer == example_polymer_after_four_steps()


def test_check_sum():
    assert example_polymer().check_sum() == 1
    assert example_polymer_after_four_steps().check_sum() == 18


def test_check_sum_of_empty_polymer():
    assert Polymer().check_sum() is None


def test_part_one():
    assert part_one(EXAMPLE) == 1588


def test_part_two():
    assert part_two(EXAMPLE) == 2_188_189_693_529


def test_parts_return_none_for_bad_input():
    assert part_one("NNCB\n") is None
    assert part_two("N1\n\nNN -> C\n") is None