"""
Games module - the 3x3 rule engine and its board helpers.
"""

from totito.games.game_state import GameState
from totito.games.game_rules import (
    WIN_LINES,
    in_bounds,
    board_full,
    empty_cells,
    find_winning_line,
)
from totito.games.engine import GameEngine

__all__ = [
    "GameState",
    "GameEngine",
    "WIN_LINES",
    "in_bounds",
    "board_full",
    "empty_cells",
    "find_winning_line",
]
