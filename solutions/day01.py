"""Calorie counting: sum blank-line-delimited groups of integers.

Part 1 is the largest group total, part 2 the sum of the `n` largest totals (3 by default).
A blank line always closes the current group, so repeated blank lines produce empty groups with a
total of 0; these never affect the answers but are kept so group positions match the input.
"""
import heapq
import re
from typing import IO, Iterable, List, NamedTuple

from .errors import EmptyInputError, ParseError
from .util import numbered_lines, print_

UNSIGNED_INT = re.compile(r"[0-9]+")


class Group(NamedTuple):
    position: int
    values: List[int]

    @property
    def total(self) -> int:
        return sum(self.values)


def parse_int(line: str, line_no: int) -> int:
    if not UNSIGNED_INT.fullmatch(line):
        raise ParseError(f"expected an unsigned integer, got {line!r}", line, line_no)
    return int(line)


def parse_groups(input_: Iterable[str]) -> List[Group]:
    groups: List[Group] = []
    values: List[int] = []
    for line_no, line in numbered_lines(input_):
        if line:
            values.append(parse_int(line, line_no))
        else:
            groups.append(Group(len(groups), values))
            values = []
    groups.append(Group(len(groups), values))
    return groups


def total(group: Group) -> int:
    return group.total


def largest(groups: Iterable[Group]) -> Group:
    # max returns the first of several equal maxima
    group = max(groups, key=total, default=None)
    if group is None:
        raise EmptyInputError("can't take the largest of zero groups")
    return group


def top_k(groups: Iterable[Group], k: int) -> List[Group]:
    if k < 0:
        raise ValueError(f"k must be non-negative; got {k}")
    # equivalent to a stable sorted(..., reverse=True)[:k]
    return heapq.nlargest(k, groups, key=total)


def sum_totals(groups: Iterable[Group]) -> int:
    return sum(map(total, groups))


def run(input_: IO[str], part_2: bool = True, n: int = 3) -> int:
    groups = parse_groups(input_)
    print_(f"Parsed {len(groups)} groups")
    if part_2:
        return sum_totals(top_k(groups, n))
    else:
        best = largest(groups)
        print_(f"Largest group is #{best.position} with {len(best.values)} values")
        return best.total


def test():
    import io

    f = io.StringIO
    groups = parse_groups(f(_test_input))
    assert groups == [
        Group(0, [1000, 2000, 3000]),
        Group(1, [4000]),
        Group(2, [5000, 6000]),
        Group(3, [7000, 8000, 9000]),
        Group(4, [10000]),
    ]
    assert largest(groups) == Group(3, [7000, 8000, 9000])
    assert [g.position for g in top_k(groups, 3)] == [3, 2, 4]
    assert run(f(_test_input), part_2=False) == 24000
    assert run(f(_test_input), part_2=True) == 45000


_test_input = """1000
2000
3000

4000

5000
6000

7000
8000
9000

10000"""
