from typing import Optional


class PuzzleError(Exception):
    """Base class for all failures raised while solving a puzzle"""


class ParseError(PuzzleError, ValueError):
    """A line of puzzle input could not be interpreted"""

    def __init__(self, message: str, line: Optional[str] = None, line_no: Optional[int] = None):
        self.line = line
        self.line_no = line_no
        location = "" if line_no is None else f"line {line_no}: "
        super().__init__(f"{location}{message}")


class InvalidChoiceError(ParseError):
    def __init__(self, token: str, line_no: Optional[int] = None, line: Optional[str] = None):
        self.token = token
        super().__init__(f"invalid play {token!r}; expected one of A, B, C, X, Y, Z", line, line_no)


class InvalidStrategyError(ParseError):
    def __init__(self, symbol: str, line_no: Optional[int] = None, line: Optional[str] = None):
        self.symbol = symbol
        super().__init__(f"invalid strategy {symbol!r}; expected one of X, Y, Z", line, line_no)


class MalformedGroupingError(ParseError):
    def __init__(self, size: int, n_lines: int):
        self.size = size
        self.n_lines = n_lines
        super().__init__(f"{n_lines} lines can't be split into groups of {size}")


class EmptyInputError(PuzzleError):
    pass
