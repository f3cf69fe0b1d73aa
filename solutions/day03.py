"""Rucksack reorganization: score the item shared between compartments or between elves.

Part 1 splits each line into two equal halves; part 2 takes lines in consecutive groups of three.
Each group is expected to share exactly one item, whose priority (a-z -> 1-26, A-Z -> 27-52) is
summed. Groups with no shared letter are skipped rather than treated as errors, but malformed
lines (odd length in part 1, a trailing partial group in part 2) fail the parse.
"""
from functools import reduce
from itertools import chain
from typing import IO, AbstractSet, Iterable, Iterator, List, Optional, Sequence, Set, Tuple

from .errors import MalformedGroupingError, ParseError
from .util import chunked, first_or_none, numbered_lines, print_

GROUP_SIZE = 3

PRIORITY = dict(
    chain(
        zip(map(chr, range(ord("a"), ord("z") + 1)), range(1, 27)),
        zip(map(chr, range(ord("A"), ord("Z") + 1)), range(27, 53)),
    )
)


def priority(char: str) -> Optional[int]:
    return PRIORITY.get(char)


def common_chars(first: Iterable[str], *others: Iterable[str]) -> Set[str]:
    def inner(coll1: Set[str], coll2: Iterable[str]):
        return {c for c in coll2 if c in coll1}

    return reduce(inner, others, set(first))


def pick(common: AbstractSet[str]) -> Optional[str]:
    if len(common) > 1:
        print_(f"Expected a single common item, got {sorted(common)}; picking arbitrarily")
    return first_or_none(common)


# Problem 1


def bisect(line: str, line_no: int) -> Tuple[str, str]:
    size, odd = divmod(len(line), 2)
    if odd:
        raise ParseError(f"can't split {len(line)} items into equal compartments", line, line_no)
    return line[:size], line[size:]


def parse_compartments(input_: Iterable[str]) -> List[Tuple[str, str]]:
    return [bisect(line, line_no) for line_no, line in numbered_lines(input_)]


# Problem 2


def parse_triples(input_: Iterable[str]) -> List[Tuple[str, str, str]]:
    lines = [line for _, line in numbered_lines(input_)]
    groups = list(chunked(GROUP_SIZE, lines))
    if groups and len(groups[-1]) != GROUP_SIZE:
        raise MalformedGroupingError(GROUP_SIZE, len(lines))
    return [(a, b, c) for a, b, c in groups]


def group_priorities(groups: Iterable[Sequence[str]]) -> Iterator[int]:
    for ix, group in enumerate(groups):
        char = pick(common_chars(*group))
        value = None if char is None else priority(char)
        if value is None:
            print_(f"Skipping group {ix}: no common letter ({char!r})")
        else:
            yield value


def run(input_: IO[str], part_2: bool = True) -> int:
    groups: Iterable[Sequence[str]]
    if part_2:
        groups = parse_triples(input_)
    else:
        groups = parse_compartments(input_)
    return sum(group_priorities(groups))


def test():
    import io

    f = io.StringIO
    assert priority("a") == 1 and priority("z") == 26
    assert priority("A") == 27 and priority("Z") == 52
    assert priority("3") is None
    compartments = parse_compartments(f(_test_input))
    assert compartments[0] == ("vJrwpWtwJgWr", "hcsFMMfFFhFp")
    assert [pick(common_chars(*c)) for c in compartments] == ["p", "L", "P", "v", "t", "s"]
    assert list(group_priorities(compartments)) == [16, 38, 42, 22, 20, 19]
    assert list(group_priorities(parse_triples(f(_test_input)))) == [18, 52]
    assert run(f(_test_input), part_2=False) == 157
    assert run(f(_test_input), part_2=True) == 70


_test_input = """vJrwpWtwJgWrhcsFMMfFFhFp
jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL
PmmdzqPrVvPwwTWBwg
wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn
ttgJtRGJQctTZtZT
CrZsJsPPZsGzwwsLwLmpwMDw"""
