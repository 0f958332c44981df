"""Tokenizer and parser for the SVG path drawing-command grammar.

This module turns the text of a path ``d`` attribute into structured data:
- Tokens (command letters and numbers) with their source spans
- Commands (a letter and its numeric arguments)
- Contours (verbatim slices of the text, one per move command)
- Coordinate pairs and bounding boxes

Parsing is best-effort: unknown characters are skipped and nothing raises.
All functions are pure and stateless.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto

from stencilbridge.domain import Bounds

COMMAND_LETTERS = "MmZzLlHhVvCcSsQqTtAa"
MOVE_COMMANDS = frozenset("Mm")
CLOSE_COMMANDS = frozenset("Zz")

_TOKEN_RE = re.compile(
    rf"(?P<command>[{COMMAND_LETTERS}])"
    r"|(?P<number>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)"
)


class TokenKind(Enum):
    """Kind of a path-data token."""

    COMMAND = auto()
    NUMBER = auto()


@dataclass(frozen=True, slots=True)
class PathToken:
    """A single token of path data.

    Attributes:
        kind: Command letter or number
        text: Source text of the token
        start: Offset of the first character in the source
        end: Offset one past the last character in the source
    """

    kind: TokenKind
    text: str
    start: int
    end: int

    @property
    def value(self) -> float:
        """Numeric value of a NUMBER token."""
        return float(self.text)


@dataclass(frozen=True)
class PathCommand:
    """A command letter with the numbers that follow it.

    Numbers appearing before any command letter are grouped under an
    empty letter so that no coordinate is lost.

    Attributes:
        letter: Command letter ("" for leading numbers)
        args: Numeric arguments in source order
        start: Offset of the command in the source
        end: Offset one past the last argument in the source
    """

    letter: str
    args: tuple[float, ...]
    start: int
    end: int

    @property
    def is_move(self) -> bool:
        return self.letter in MOVE_COMMANDS

    @property
    def is_close(self) -> bool:
        return self.letter in CLOSE_COMMANDS

    @property
    def is_relative(self) -> bool:
        """Lowercase letters use coordinates relative to the current point."""
        return self.letter.islower()


def tokenize_path_data(text: str) -> list[PathToken]:
    """Split path data into command and number tokens.

    Separators (whitespace, commas) and unrecognized characters are skipped.

    Args:
        text: Raw path data

    Returns:
        Tokens in source order

    Examples:
        >>> [t.text for t in tokenize_path_data("M10,20l-5.5.5z")]
        ['M', '10', '20', 'l', '-5.5', '.5', 'z']
    """
    tokens: list[PathToken] = []
    for match in _TOKEN_RE.finditer(text):
        kind = TokenKind.COMMAND if match.lastgroup == "command" else TokenKind.NUMBER
        tokens.append(PathToken(kind, match.group(), match.start(), match.end()))
    return tokens


def parse_path_data(text: str) -> list[PathCommand]:
    """Parse path data into a list of commands.

    Args:
        text: Raw path data

    Returns:
        Commands in source order, each with its numeric arguments
    """
    commands: list[PathCommand] = []
    letter: str | None = None
    args: list[float] = []
    start = end = 0

    for token in tokenize_path_data(text):
        if token.kind is TokenKind.COMMAND:
            if letter is not None:
                commands.append(PathCommand(letter, tuple(args), start, end))
            letter, args = token.text, []
            start, end = token.start, token.end
        else:
            if letter is None:
                letter, start = "", token.start
            args.append(token.value)
            end = token.end

    if letter is not None:
        commands.append(PathCommand(letter, tuple(args), start, end))

    return commands


def split_contours(text: str) -> list[str]:
    """Split path data into one string per contour.

    A contour begins with a move command and ends with the next close command,
    the next move command, or the end of the text. Commands between a close
    and the following move belong to no contour. Text without any move command
    is returned whole as a single contour.

    Args:
        text: Raw path data

    Returns:
        Verbatim slices of the input, one per contour
    """
    commands = parse_path_data(text)
    if not any(cmd.is_move for cmd in commands):
        return [text]

    contours: list[str] = []
    contour_start: int | None = None
    last_end = 0

    for cmd in commands:
        if cmd.is_move:
            if contour_start is not None:
                contours.append(text[contour_start:last_end])
            contour_start = cmd.start
        elif cmd.is_close and contour_start is not None:
            contours.append(text[contour_start:cmd.end])
            contour_start = None
        last_end = cmd.end

    if contour_start is not None:
        contours.append(text[contour_start:last_end])

    return contours


def starts_relative(text: str) -> bool:
    """Check if a contour starts with a relative move command ("m")."""
    commands = parse_path_data(text)
    return bool(commands) and commands[0].letter == "m"


def coordinate_pairs(text: str) -> list[tuple[float, float]]:
    """Read every number of the path data pairwise as (x, y).

    All arguments are paired in order regardless of the command that owns
    them, so control points count as coordinates. A trailing odd number is
    dropped.

    Args:
        text: Raw path data

    Returns:
        List of (x, y) pairs
    """
    numbers = [value for cmd in parse_path_data(text) for value in cmd.args]
    return list(zip(numbers[0::2], numbers[1::2]))


def estimate_bounds(text: str) -> Bounds:
    """Estimate the bounding box of path data from its coordinate pairs.

    Args:
        text: Raw path data

    Returns:
        Min/max box over all pairs, or zero bounds when there is no pair

    Examples:
        >>> estimate_bounds("M0 0 L10 0 L10 10 L0 10 Z")
        Bounds(x=0.0, y=0.0, width=10.0, height=10.0)
        >>> estimate_bounds("M5")
        Bounds(x=0.0, y=0.0, width=0.0, height=0.0)
    """
    return Bounds.from_points(coordinate_pairs(text))
