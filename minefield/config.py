from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional

from .engine import MAX_HEIGHT, MAX_MINES, MAX_WIDTH, MIN_HEIGHT, MIN_MINES, MIN_WIDTH
from .errors import ConfigError

DEFAULT_SEPARATOR = '\n\n\n\n'


@dataclass(frozen=True)
class GameConfig:
    width: int = 20
    height: int = 20
    mines: int = 40
    # Printed before every frame; an ANSI clear sequence works too.
    separator: str = DEFAULT_SEPARATOR
    seed: Optional[int] = None

    def validated(self) -> 'GameConfig':
        """Check the limits and clamp the mine count to the board area."""
        _check_range('width', self.width, MIN_WIDTH, MAX_WIDTH)
        _check_range('height', self.height, MIN_HEIGHT, MAX_HEIGHT)
        _check_range('mines', self.mines, MIN_MINES, MAX_MINES)
        return replace(self, mines=min(self.mines, self.width * self.height))


def _check_range(name: str, value: int, lo: int, hi: int) -> None:
    if not lo <= value <= hi:
        raise ConfigError(f'{name} must be between {lo} and {hi}')
