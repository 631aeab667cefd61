from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .commands import Command, CommandKind
from .engine import Board, FlagOutcome, RevealOutcome


class GameState(Enum):
    PLAYING = 'playing'
    WON = 'won'
    LOST = 'lost'
    QUIT = 'quit'

    @property
    def terminal(self) -> bool:
        return self is not GameState.PLAYING


class Event(Enum):
    RENDER = 'render'
    HELP = 'help'
    BLOCKED = 'blocked'
    INVALID = 'invalid'
    QUIT_DECLINED = 'quit_declined'
    WON = 'won'
    LOST = 'lost'
    QUIT = 'quit'
    IGNORED = 'ignored'


@dataclass(frozen=True)
class Result:
    state: GameState
    event: Event


class Interpreter:
    """Applies player commands to a Board and tracks the game state.

    ``confirm_quit`` is asked before quitting a game that has already
    started; it returns True to quit.
    """

    def __init__(self, board: Board, confirm_quit: Callable[[], bool]):
        self.board = board
        self.confirm_quit = confirm_quit
        self.state = GameState.PLAYING

    @property
    def score(self) -> int:
        return self.board.score()

    def execute(self, command: Command) -> Result:
        if self.state.terminal:
            return Result(self.state, Event.IGNORED)
        kind = command.kind
        if kind is CommandKind.EMPTY:
            return self._playing(Event.RENDER)
        if kind is CommandKind.HELP:
            return self._playing(Event.HELP)
        if kind is CommandKind.QUIT:
            return self._quit()
        if command.position is None or not self.board.in_bounds(*command.position):
            return self._playing(Event.INVALID)
        x, y = command.position
        if kind is CommandKind.REVEAL:
            return self._reveal(x, y)
        return self._flag(x, y)

    def abandon(self) -> Result:
        """End the game without confirmation, as when input runs out."""
        if self.state.terminal:
            return Result(self.state, Event.IGNORED)
        return self._finish(GameState.QUIT, Event.QUIT)

    def _reveal(self, x: int, y: int) -> Result:
        board = self.board
        if not board.initialized:
            board.place_mines()
            board.relocate_if_mined(x, y)
        if board.tile(x, y).flagged:
            return self._playing(Event.BLOCKED)
        if board.reveal(x, y) is RevealOutcome.MINE:
            return self._finish(GameState.LOST, Event.LOST)
        return self._playing(Event.RENDER)

    def _flag(self, x: int, y: int) -> Result:
        board = self.board
        # No relocation here: flagging first gives no safety guarantee.
        board.place_mines()
        if board.toggle_flag(x, y) is not FlagOutcome.IGNORED and board.is_won():
            return self._finish(GameState.WON, Event.WON)
        return self._playing(Event.RENDER)

    def _quit(self) -> Result:
        if self.board.initialized and not self.confirm_quit():
            return self._playing(Event.QUIT_DECLINED)
        return self._finish(GameState.QUIT, Event.QUIT)

    def _finish(self, state: GameState, event: Event) -> Result:
        self.board.place_mines()
        self.board.reveal_all()
        self.state = state
        return Result(state, event)

    def _playing(self, event: Event) -> Result:
        return Result(GameState.PLAYING, event)
