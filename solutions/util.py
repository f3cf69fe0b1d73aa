import sys
from itertools import islice
from typing import Iterable, Iterator, List, Optional, Tuple, TypeVar

VERBOSE = False

T = TypeVar("T")


# Iterators


def chunked(n: int, it: Iterable[T]) -> Iterator[List[T]]:
    it_ = iter(it)
    return iter(lambda: list(islice(it_, n)), [])


def first_or_none(it: Iterable[T]) -> Optional[T]:
    return next(iter(it), None)


def numbered_lines(input_: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """Lines with trailing whitespace stripped, paired with their 1-based line numbers"""
    return enumerate(map(str.rstrip, input_), 1)


# I/O


def set_verbose(value: bool):
    global VERBOSE
    VERBOSE = value


def print_(*args, **kwargs):
    if VERBOSE:
        print(*args, **kwargs, file=sys.stderr)
