#! /usr/bin/env python
import io
import json
import sys
from importlib import import_module
from inspect import signature
from pathlib import Path
from time import perf_counter_ns
from typing import IO, Protocol, TypeVar, Union

from bourbaki.application.cli import CommandLineInterface, cli_spec  # type: ignore
from bourbaki.application.typed_io.cli_parse import cli_parser  # type: ignore

from solutions.util import set_verbose

INPUT_DIR = Path("inputs/")
DAYS = range(1, 4)
PARTS = (1, 2)

Solution = TypeVar("Solution", covariant=True)
Param = Union[int, float, bool, str]


class Problem(Protocol[Solution]):
    def run(self, input_: IO[str], **args: Param) -> Solution:
        ...

    def test(self):
        ...


@cli_parser.register(Param, as_const=True, derive_nargs=True)
def parse_param(s: str):
    return json.loads(s)


def print_solution(solution):
    print(solution)


def problem_name(problem: int) -> str:
    assert problem in DAYS, f"problem number must be between {DAYS[0]} and {DAYS[-1]}, inclusive"
    return f"day{str(problem).zfill(2)}"


def import_problem(problem: int) -> Problem:
    name = problem_name(problem)
    return import_module(f"solutions.{name}")


def get_input(day: int) -> IO[str]:
    name = problem_name(day)
    filename = INPUT_DIR / (name + ".txt")
    return open(filename) if sys.stdin.isatty() else sys.stdin


def solve(day: int, part: int, input_text: str, **args: Param) -> str:
    """Solve one part of one day's problem for the given raw input text, returning the answer
    as text"""
    if part not in PARTS:
        raise ValueError(f"part must be one of {PARTS}; got {part}")
    if "part_2" in args:
        raise ValueError("choose the part with `part`, not `part_2`")
    problem = import_problem(day)
    solution = problem.run(io.StringIO(input_text), part_2=part == 2, **args)
    return str(solution)


cli = CommandLineInterface(
    prog="main",
    require_options=False,
    require_subcommand=True,
    implicit_flags=True,
    use_verbose_flag=True,
)


@cli.definition
class AOC2022:
    """Run and test solutions to the first Advent of Code 2022 problems"""

    @cli_spec.output_handler(print_solution)
    def run(self, day: int, part: int = 2, trace: bool = False, **args: Param):
        """Run the solution to a particular day's problem. The default input is in the inputs/ folder,
        but input will be read from stdin if input is piped there.

        :param day: the day number of the problem to solve (1-3)
        :param part: which part of the problem to solve (1 or 2)
        :param trace: print diagnostics about parsing and scoring to stderr
        :param args: keyword arguments to pass to the problem solution in case it is parameterized.
          Run the `info` command for the problem in question to see its parameters.
        """
        set_verbose(trace)
        with get_input(day) as input_:
            input_text = input_.read()
        print(f"Running solution to day {day}, part {part}...", file=sys.stderr)
        tic = perf_counter_ns()
        solution = solve(day, part, input_text, **args)
        toc = perf_counter_ns()
        print(f"Ran in {(toc - tic) / 1000000} ms", file=sys.stderr)
        return solution

    def test(self, day: int):
        """Run unit tests for functions used in the solution to a particular day's problem

        :param day: the day number of the problem to run tests for (1-3)
        """
        problem = import_problem(day)
        problem.test()
        print(f"Tests pass for day {day}!")

    def info(self, day: int):
        """Print the doc string for a particular day's solution, providing some details about methodology

        :param day: the day number of the problem to run tests for (1-3)
        """
        problem = import_problem(day)
        print(f"Day {day} problem info:")
        if problem.__doc__:
            print(problem.__doc__, end="\n\n")
        print("Signature:")
        print(signature(problem.run))

    def input(self, day: int):
        """Print the input text for a particular day's problem to stdout"""
        with open(INPUT_DIR / f"{problem_name(day)}.txt", "r") as f:
            for line in f:
                print(line, file=sys.stdout, end="")


if __name__ == "__main__":
    cli.run()
