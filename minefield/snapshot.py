from __future__ import annotations
from dataclasses import dataclass
import numpy as np

# Read-only view of a Board for renderers. Arrays are indexed [y, x].


def count_adjacent(mines: np.ndarray) -> np.ndarray:
    height, width = mines.shape
    padded = np.pad(mines.astype(np.int8), 1)
    total = np.zeros((height, width), dtype=np.int8)
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            total += padded[1 + dy:1 + dy + height, 1 + dx:1 + dx + width]
    return total


@dataclass(frozen=True)
class BoardSnapshot:
    width: int
    height: int
    mine_count: int
    flag_count: int
    found_count: int
    mines: np.ndarray
    revealed: np.ndarray
    flagged: np.ndarray
    adjacent: np.ndarray

    @classmethod
    def of(cls, board) -> 'BoardSnapshot':
        mines = np.array([[c.has_mine for c in row] for row in board.grid], dtype=bool)
        revealed = np.array([[c.revealed for c in row] for row in board.grid], dtype=bool)
        flagged = np.array([[c.flagged for c in row] for row in board.grid], dtype=bool)
        for arr in (mines, revealed, flagged):
            arr.setflags(write=False)
        adjacent = count_adjacent(mines)
        adjacent.setflags(write=False)
        return cls(
            width=board.width,
            height=board.height,
            mine_count=board.mine_count,
            flag_count=board.flag_count,
            found_count=board.found_count,
            mines=mines,
            revealed=revealed,
            flagged=flagged,
            adjacent=adjacent,
        )
