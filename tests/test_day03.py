import io

import pytest

from solutions import day03
from solutions.errors import MalformedGroupingError, ParseError

SAMPLE = """vJrwpWtwJgWrhcsFMMfFFhFp
jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL
PmmdzqPrVvPwwTWBwg
wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn
ttgJtRGJQctTZtZT
CrZsJsPPZsGzwwsLwLmpwMDw"""


@pytest.mark.parametrize(
    "char, expected",
    [("a", 1), ("p", 16), ("z", 26), ("A", 27), ("L", 38), ("Z", 52), ("3", None), ("", None)],
)
def test_priority(char, expected):
    assert day03.priority(char) == expected


@pytest.mark.parametrize(
    "strings, expected",
    [
        (("abc", "cde"), {"c"}),
        (("aA", "A"), {"A"}),
        (("aaa", "a"), {"a"}),
        (("abc", "def"), set()),
        (("abcd", "bcde", "cdef"), {"c", "d"}),
        (("", "a"), set()),
    ],
)
def test_common_chars(strings, expected):
    assert day03.common_chars(*strings) == expected


def test_common_chars_nested_matches_variadic():
    a, b, c = SAMPLE.splitlines()[:3]
    assert day03.common_chars(a, day03.common_chars(b, c)) == day03.common_chars(a, b, c) == {"r"}


def test_pick():
    assert day03.pick({"q"}) == "q"
    assert day03.pick(set()) is None
    assert day03.pick({"a", "b"}) in {"a", "b"}


def test_bisect():
    assert day03.bisect("abcd", 1) == ("ab", "cd")
    assert day03.bisect("", 1) == ("", "")


def test_bisect_odd_length():
    with pytest.raises(ParseError) as exc_info:
        day03.parse_compartments(io.StringIO("abcd\nabc"))
    assert exc_info.value.line_no == 2


def test_parse_compartments_sample():
    compartments = day03.parse_compartments(io.StringIO(SAMPLE))
    assert compartments[:3] == [
        ("vJrwpWtwJgWr", "hcsFMMfFFhFp"),
        ("jqHRNqRjqzjGDLGL", "rsFMfFZSrLrFZsSL"),
        ("PmmdzqPrV", "vPwwTWBwg"),
    ]


def test_sample_priorities():
    compartments = day03.parse_compartments(io.StringIO(SAMPLE))
    assert list(day03.group_priorities(compartments)) == [16, 38, 42, 22, 20, 19]
    triples = day03.parse_triples(io.StringIO(SAMPLE))
    assert len(triples) == 2
    assert list(day03.group_priorities(triples)) == [18, 52]


@pytest.mark.parametrize("n_lines", [1, 2, 4, 5, 7])
def test_partial_triple_is_fatal(n_lines):
    text = "\n".join(["aa"] * n_lines)
    with pytest.raises(MalformedGroupingError) as exc_info:
        day03.parse_triples(io.StringIO(text))
    assert exc_info.value.n_lines == n_lines


def test_groups_without_common_letter_are_skipped():
    assert list(day03.group_priorities([("ab", "cd"), ("1x", "1y"), ("aq", "Qq")])) == [17]
    assert day03.run(io.StringIO("abcd\n1x1y\naqQq"), part_2=False) == 17
    assert day03.run(io.StringIO("ab\n\ncd"), part_2=True) == 0


def test_run_sample():
    assert day03.run(io.StringIO(SAMPLE), part_2=False) == 157
    assert day03.run(io.StringIO(SAMPLE), part_2=True) == 70


def test_run_empty():
    assert day03.run(io.StringIO(""), part_2=False) == 0
    assert day03.run(io.StringIO(""), part_2=True) == 0


def test_self_check():
    day03.test()
