from __future__ import annotations
import itertools
import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

Coordinate = Tuple[int, int]

MIN_WIDTH = 1
MAX_WIDTH = 26
MIN_HEIGHT = 1
MAX_HEIGHT = 30
MIN_MINES = 0
MAX_MINES = MAX_WIDTH * MAX_HEIGHT

_seed_counter = itertools.count()


def default_seed() -> int:
    # Wall clock and monotonic clock, perturbed by a counter so two boards
    # built in the same tick still differ.
    n = next(_seed_counter)
    return (time.time_ns() + n) ^ (time.perf_counter_ns() - n * 7919)


class RevealOutcome(Enum):
    MINE = 'mine'
    OPENED = 'opened'


class FlagOutcome(Enum):
    IGNORED = 'ignored'
    FLAGGED = 'flagged'
    UNFLAGGED = 'unflagged'


@dataclass
class Tile:
    has_mine: bool = False
    revealed: bool = False
    flagged: bool = False


class Board:
    def __init__(self, width: int, height: int, mine_count: int, seed: Optional[int] = None):
        assert MIN_WIDTH <= width <= MAX_WIDTH
        assert MIN_HEIGHT <= height <= MAX_HEIGHT
        assert mine_count >= 0
        self.width = width
        self.height = height
        self.mine_count = min(mine_count, width * height)
        self.seed = int(seed) if seed is not None else default_seed()
        self.rng = random.Random(self.seed)
        self.grid: List[List[Tile]] = [[Tile() for _ in range(width)] for _ in range(height)]
        self.initialized = False
        self.flag_count = 0
        self.found_count = 0
        self.revealed_count = 0

    @classmethod
    def with_mines(cls, width: int, height: int, mines: Iterable[Coordinate], seed: Optional[int] = 0) -> 'Board':
        """Build an already initialized board with mines at the given tiles."""
        coords = set(mines)
        board = cls(width, height, len(coords), seed=seed)
        for (x, y) in coords:
            assert board.in_bounds(x, y)
            board.grid[y][x].has_mine = True
        board.initialized = True
        return board

    @property
    def area(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile(self, x: int, y: int) -> Tile:
        return self.grid[y][x]

    def neighbors(self, x: int, y: int) -> List[Coordinate]:
        coords = []
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                nx, ny = x + dx, y + dy
                if self.in_bounds(nx, ny):
                    coords.append((nx, ny))
        return coords

    def coordinates(self) -> Iterator[Coordinate]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def mine_coordinates(self) -> List[Coordinate]:
        return [(x, y) for (x, y) in self.coordinates() if self.grid[y][x].has_mine]

    def place_mines(self) -> None:
        if self.initialized:
            return
        self.initialized = True
        cells = list(self.coordinates())
        for (x, y) in cells[:self.mine_count]:
            self.grid[y][x].has_mine = True
        # Shuffle each seeded tile with a random one; every tile can end up mined.
        for (x, y) in cells[:self.mine_count]:
            ox = self.rng.randrange(self.width)
            oy = self.rng.randrange(self.height)
            here, there = self.grid[y][x], self.grid[oy][ox]
            here.has_mine, there.has_mine = there.has_mine, here.has_mine

    def relocate_if_mined(self, x: int, y: int) -> Optional[Coordinate]:
        """Move a mine off (x, y) to a random unmined tile.

        The destination is drawn uniformly with one reservoir-sampling pass, so
        the call finishes in a single scan of the board. Returns the new mine
        position, or None when (x, y) is clear or every tile is mined.
        """
        if not self.grid[y][x].has_mine:
            return None
        chosen: Optional[Coordinate] = None
        seen = 0
        for (cx, cy) in self.coordinates():
            if self.grid[cy][cx].has_mine:
                continue
            seen += 1
            if self.rng.randrange(seen) == 0:
                chosen = (cx, cy)
        if chosen is None:
            return None
        cx, cy = chosen
        self.grid[y][x].has_mine = False
        self.grid[cy][cx].has_mine = True
        return chosen

    def adjacent_mine_count(self, x: int, y: int) -> int:
        return sum(1 for (nx, ny) in self.neighbors(x, y) if self.grid[ny][nx].has_mine)

    def reveal(self, x: int, y: int) -> RevealOutcome:
        start = self.grid[y][x]
        if start.has_mine:
            return RevealOutcome.MINE
        if start.revealed or start.flagged:
            return RevealOutcome.OPENED
        start.revealed = True
        self.revealed_count += 1
        stack = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            if self.adjacent_mine_count(cx, cy) != 0:
                continue
            for (nx, ny) in self.neighbors(cx, cy):
                ncell = self.grid[ny][nx]
                if ncell.revealed or ncell.flagged:
                    continue
                # A zero tile has no mined neighbours, so this never opens a mine.
                ncell.revealed = True
                self.revealed_count += 1
                stack.append((nx, ny))
        return RevealOutcome.OPENED

    def toggle_flag(self, x: int, y: int) -> FlagOutcome:
        c = self.grid[y][x]
        if c.revealed:
            return FlagOutcome.IGNORED
        c.flagged = not c.flagged
        step = 1 if c.flagged else -1
        self.flag_count += step
        if c.has_mine:
            self.found_count += step
        return FlagOutcome.FLAGGED if c.flagged else FlagOutcome.UNFLAGGED

    def is_won(self) -> bool:
        return self.found_count == self.mine_count and self.flag_count == self.found_count

    def reveal_all(self) -> None:
        # Flags stay in place so the counters keep describing the final board.
        for row in self.grid:
            for c in row:
                if not c.flagged and not c.revealed:
                    c.revealed = True
                    self.revealed_count += 1

    def score(self) -> int:
        return self.found_count * self.found_count * 1000 // self.area
