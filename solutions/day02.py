"""Rock, paper, scissors strategy guide.

Each line holds the opponent's play (A, B, C) and a second symbol (X, Y, Z). In part 1 the second
symbol is our play; in part 2 it is the outcome we must force (X lose, Y tie, Z win). The two
readings have separate parsers, `parse_choice` and `resolve_strategy`, and any bad line fails the
whole parse.
"""
from enum import IntEnum
from typing import IO, Callable, Dict, Iterable, List, NamedTuple, Optional, Tuple

from .errors import InvalidChoiceError, InvalidStrategyError, ParseError
from .util import numbered_lines, print_


class Outcome(IntEnum):
    loss = 0
    tie = 3
    win = 6


class Play(IntEnum):
    rock = 1
    paper = 2
    scissors = 3


class Round(NamedTuple):
    theirs: Play
    ours: Play


# (ours, theirs) -> outcome for us
OUTCOMES: Dict[Tuple[Play, Play], Outcome] = {
    (Play.rock, Play.rock): Outcome.tie,
    (Play.rock, Play.paper): Outcome.loss,
    (Play.rock, Play.scissors): Outcome.win,
    (Play.paper, Play.rock): Outcome.win,
    (Play.paper, Play.paper): Outcome.tie,
    (Play.paper, Play.scissors): Outcome.loss,
    (Play.scissors, Play.rock): Outcome.loss,
    (Play.scissors, Play.paper): Outcome.win,
    (Play.scissors, Play.scissors): Outcome.tie,
}
# play -> the play it defeats
BEATS: Dict[Play, Play] = {p: q for (p, q), o in OUTCOMES.items() if o == Outcome.win}
BEATEN_BY: Dict[Play, Play] = {q: p for p, q in BEATS.items()}
CHOICE_MAPPING: Dict[str, Play] = {
    "A": Play.rock,
    "B": Play.paper,
    "C": Play.scissors,
    "X": Play.rock,
    "Y": Play.paper,
    "Z": Play.scissors,
}
STRATEGY_MAPPING: Dict[str, Outcome] = {"X": Outcome.loss, "Y": Outcome.tie, "Z": Outcome.win}


def outcome(ours: Play, theirs: Play) -> Outcome:
    return OUTCOMES[ours, theirs]


def score(round_: Round) -> int:
    return round_.ours + outcome(round_.ours, round_.theirs)


def parse_choice(token: str, line_no: Optional[int] = None, line: Optional[str] = None) -> Play:
    play = CHOICE_MAPPING.get(token)
    if play is None:
        raise InvalidChoiceError(token, line_no, line)
    return play


def resolve_strategy(
    theirs: Play, symbol: str, line_no: Optional[int] = None, line: Optional[str] = None
) -> Play:
    outcome_ = STRATEGY_MAPPING.get(symbol)
    if outcome_ is None:
        raise InvalidStrategyError(symbol, line_no, line)
    if outcome_ == Outcome.tie:
        return theirs
    elif outcome_ == Outcome.win:
        return BEATEN_BY[theirs]
    else:
        return BEATS[theirs]


def split_line(line: str, line_no: int) -> Tuple[str, str]:
    tokens = line.split()
    if len(tokens) != 2:
        raise ParseError(f"expected 2 space-separated symbols, got {len(tokens)}", line, line_no)
    their_token, our_token = tokens
    return their_token, our_token


# Problem 1


def parse_round_literal(line: str, line_no: int) -> Round:
    their_token, our_token = split_line(line, line_no)
    theirs = parse_choice(their_token, line_no, line)
    return Round(theirs, parse_choice(our_token, line_no, line))


# Problem 2


def parse_round_strategy(line: str, line_no: int) -> Round:
    their_token, symbol = split_line(line, line_no)
    theirs = parse_choice(their_token, line_no, line)
    return Round(theirs, resolve_strategy(theirs, symbol, line_no, line))


def parse_rounds(parse: Callable[[str, int], Round], input_: Iterable[str]) -> List[Round]:
    return [parse(line, line_no) for line_no, line in numbered_lines(input_)]


def parse_rounds_literal(input_: Iterable[str]) -> List[Round]:
    return parse_rounds(parse_round_literal, input_)


def parse_rounds_strategy(input_: Iterable[str]) -> List[Round]:
    return parse_rounds(parse_round_strategy, input_)


def run(input_: IO[str], part_2: bool = True) -> int:
    parse = parse_rounds_strategy if part_2 else parse_rounds_literal
    rounds = parse(input_)
    print_(f"Scoring {len(rounds)} rounds")
    return sum(map(score, rounds))


def test():
    import io

    f = io.StringIO
    for play in Play:
        assert outcome(play, play) == Outcome.tie
        assert resolve_strategy(play, "Y") == play
        assert outcome(BEATEN_BY[play], play) == Outcome.win
    assert parse_rounds_literal(f(_test_input)) == [
        Round(Play.rock, Play.paper),
        Round(Play.paper, Play.rock),
        Round(Play.scissors, Play.scissors),
    ]
    assert parse_rounds_strategy(f(_test_input)) == [
        Round(Play.rock, Play.rock),
        Round(Play.paper, Play.rock),
        Round(Play.scissors, Play.rock),
    ]
    assert run(f(_test_input), part_2=False) == 15
    assert run(f(_test_input), part_2=True) == 12


_test_input = """A Y
B X
C Z"""
