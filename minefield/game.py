from __future__ import annotations
import sys
from typing import Optional, TextIO

from .commands import parse_command
from .config import GameConfig
from .engine import Board
from .errors import ParseError
from .interpreter import Event, Interpreter, Result
from .render import render_board
from .snapshot import BoardSnapshot

# Longest accepted command, e.g. "fZ30" plus some slack.
CMD_MAX = 7

GAME_OVERVIEW = """\
The purpose of this game is to flag all the mines hidden under tiles on the
board. You must flag the correct tiles, and nothing more, to win. If a tile
has one or more mines adjacent or immediately diagonal, it is displayed as
that number from 1 to 8. Try to reveal tiles which you know to be safe to
isolate the mines.
"""

COMMAND_OVERVIEW = """\
Commands are used to interact with the program. A command is an optional
lowercase letter followed by an optional position. A position is a capital
letter indicating a column followed by a positive integer indicating a row.
These quantities must fit within the board.
"""

COMMAND_LIST = """\
Commands:
  <nothing>    Perform no action and print out the board.
  r<position>  Reveal <position>. If a mine is there, you're dead.
  <position>   Same as r<position>.
  f<position>  Toggle the flag at <position>. Nothing happens if the tile is
               already revealed.
  ?            Print this help information.
  q            Quit the game. You will have to confirm your quitting unless
               you have yet to perform any action.
"""

HELP_TEXT = f'\n{GAME_OVERVIEW}\n{COMMAND_OVERVIEW}\n{COMMAND_LIST}'

MESSAGES = {
    Event.BLOCKED: 'Unflag the space before you reveal it.',
    Event.INVALID: "Invalid command. Use command '?' for help.",
    Event.WON: 'All mines found! You win!',
    Event.LOST: 'You hit a mine! Game over.',
    Event.QUIT: 'Game quit.',
}


class LineReader:
    """Line-oriented input for the game loop."""

    def __init__(self, stream: TextIO, out: TextIO):
        self.stream = stream
        self.out = out

    def read(self) -> Optional[str]:
        line = self.stream.readline()
        if line == '':
            return None
        return line.rstrip('\r\n').lstrip()

    def confirm_quit(self) -> bool:
        self.out.write('Are you sure you want to quit? [yN] ')
        self.out.flush()
        answer = self.read()
        if answer is None:
            return True
        return answer[:1].lower() == 'y'


def run_game(config: GameConfig, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> Result:
    """Play one game on the given streams and return the final result."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    board = Board(config.width, config.height, config.mines, seed=config.seed)
    reader = LineReader(stdin, stdout)
    interp = Interpreter(board, reader.confirm_quit)

    def show_board():
        stdout.write(config.separator)
        print(render_board(BoardSnapshot.of(board), final=interp.state.terminal), file=stdout)

    show_board()
    print("Type a command. For help, type '?' then ENTER.", file=stdout)
    result = None
    while result is None or not result.state.terminal:
        line = reader.read()
        if line is None:
            # End of input counts as quitting.
            result = interp.abandon()
            show_board()
            print(MESSAGES[Event.QUIT], file=stdout)
            break
        if len(line) > CMD_MAX:
            print(f"Command too long; characters after '{line[CMD_MAX - 1]}' ignored.", file=stdout)
            continue
        try:
            command = parse_command(line, board.width, board.height)
        except ParseError:
            print(MESSAGES[Event.INVALID], file=stdout)
            continue
        result = interp.execute(command)
        if result.event is Event.HELP:
            print(HELP_TEXT, end='', file=stdout)
        elif result.event in (Event.RENDER, Event.WON, Event.LOST, Event.QUIT):
            show_board()
        if result.event in MESSAGES:
            print(MESSAGES[result.event], file=stdout)
    print(f'Score: {interp.score}', file=stdout)
    return result
