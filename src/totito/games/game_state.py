"""
GameState - board and turn container.

Uses int8 board matching the Player encoding:
    0 = empty
    1 = X
    2 = O
"""

from __future__ import annotations

import numpy as np

from totito.core.types import BOARD_SIZE, Player


class GameState:
    """Lightweight state container owned by a GameEngine."""

    __slots__ = ('board', 'current_player')

    def __init__(self, board: np.ndarray, current_player: Player):
        self.board = board
        self.current_player = current_player

    @classmethod
    def initial(cls, first_player: Player = Player.X) -> "GameState":
        """Empty board with first_player to move."""
        return cls(np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8), first_player)

    def copy(self) -> "GameState":
        """Fast copy - board.copy() is optimized for contiguous int arrays."""
        return GameState(self.board.copy(), self.current_player)

    def read_only_board(self) -> np.ndarray:
        """Copy of the board that cannot be written to."""
        view = self.board.copy()
        view.flags.writeable = False
        return view
