from __future__ import annotations
from typing import List

from .commands import COLUMNS
from .snapshot import BoardSnapshot

MINE = '*'
EMPTY = ' '
FLAG = 'F'
CONCEALED = '@'


def tile_symbol(snap: BoardSnapshot, x: int, y: int, final: bool = False) -> str:
    # The final board shows what lies under every flag.
    if snap.revealed[y, x] or (final and snap.flagged[y, x]):
        if snap.mines[y, x]:
            return MINE
        n = int(snap.adjacent[y, x])
        return str(n) if n > 0 else EMPTY
    if snap.flagged[y, x]:
        return FLAG
    return CONCEALED


def _column_names(width: int) -> str:
    return '    ' + ''.join(f' {COLUMNS[x]}' for x in range(width))


def _border(width: int) -> str:
    return '    -' + ' -' * width


def render_board(snap: BoardSnapshot, final: bool = False) -> str:
    """Bordered grid with column letters and row numbers, plus a flag count.

    With ``final`` set, flagged tiles show their contents as on a fully
    revealed board; the board itself and its counters are left alone.
    """
    lines: List[str] = [_column_names(snap.width), _border(snap.width)]
    for y in range(snap.height):
        row = y + 1
        cells = ''.join(f'`{tile_symbol(snap, x, y, final)}' for x in range(snap.width))
        lines.append(f'{row:2d} |{cells}`| {row}')
    lines.append(_border(snap.width))
    lines.append(_column_names(snap.width))
    lines.append(f'Flags: {snap.flag_count}/{snap.mine_count}')
    return '\n'.join(lines)
