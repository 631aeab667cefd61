from __future__ import annotations
import re
import string
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .engine import Coordinate
from .errors import OutOfRange, ParseError

COLUMNS = string.ascii_uppercase

# Column letter then a positive row number, e.g. "C12".
_POSITION = re.compile(r'([A-Za-z])([0-9]+)')


class CommandKind(Enum):
    EMPTY = 'empty'
    REVEAL = 'reveal'
    FLAG = 'flag'
    HELP = 'help'
    QUIT = 'quit'


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    position: Optional[Coordinate] = None


def parse_position(text: str, width: int, height: int) -> Coordinate:
    m = _POSITION.fullmatch(text)
    if m is None:
        raise ParseError(f'not a position: {text!r}')
    x = COLUMNS.index(m.group(1).upper())
    y = int(m.group(2)) - 1
    if not (0 <= x < width and 0 <= y < height):
        raise OutOfRange(f'{text} is not on a {width}x{height} board')
    return (x, y)


def parse_command(text: str, width: int, height: int) -> Command:
    """Turn one line of player input into a Command.

    The grammar is an optional lowercase kind letter followed by an optional
    position: '' prints the board, 'r<pos>' or a bare '<pos>' reveals,
    'f<pos>' toggles a flag, 'h' or '?' asks for help and 'q' quits.
    Raises ParseError (or OutOfRange for a position off the board).
    """
    if text == '':
        return Command(CommandKind.EMPTY)
    head, rest = text[0], text[1:]
    if head in ('h', '?'):
        return Command(CommandKind.HELP)
    if head == 'q':
        return Command(CommandKind.QUIT)
    if head == 'f':
        return Command(CommandKind.FLAG, parse_position(rest, width, height))
    if head == 'r':
        return Command(CommandKind.REVEAL, parse_position(rest, width, height))
    return Command(CommandKind.REVEAL, parse_position(text, width, height))
