"""
Board rules for the 3x3 int8 board (0 = empty).

The eight winning lines are pre-computed once, in scan order, as
WinInfo values paired with flat cell indices.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from totito.core.types import BOARD_SIZE, Player, WinInfo, WinType


def _line_table() -> Tuple[Tuple[WinInfo, np.ndarray], ...]:
    infos = (
        [WinInfo(WinType.ROW, i) for i in range(BOARD_SIZE)]
        + [WinInfo(WinType.COLUMN, i) for i in range(BOARD_SIZE)]
        + [WinInfo(WinType.MAIN_DIAGONAL), WinInfo(WinType.ANTI_DIAGONAL)]
    )
    return tuple(
        (info, np.array([r * BOARD_SIZE + c for r, c in info.cells()], dtype=np.intp))
        for info in infos
    )


# Rows, then columns, then main and anti diagonal
WIN_LINES = _line_table()


def in_bounds(r: int, c: int) -> bool:
    """Return True if (r, c) addresses a cell."""
    return 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE


def board_full(board: np.ndarray) -> bool:
    """Return True if no cell is empty."""
    return not np.any(board == Player.NONE)


def empty_cells(board: np.ndarray) -> List[Tuple[int, int]]:
    """Empty cell coordinates in row-major order."""
    return [(int(r), int(c)) for r, c in np.argwhere(board == Player.NONE)]


def find_winning_line(board: np.ndarray) -> Optional[Tuple[Player, WinInfo]]:
    """
    Scan WIN_LINES in order.

    Returns:
        (winner, WinInfo) for the first line holding one non-empty value
        in all three cells, or None if there is no such line.
    """
    flat = board.ravel()
    for info, cells in WIN_LINES:
        values = flat[cells]
        first = values[0]
        if first != Player.NONE and values[1] == first and values[2] == first:
            return Player(int(first)), info
    return None
