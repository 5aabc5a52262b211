"""
GameEngine - the 3x3 mark-placement rule engine.

Uses int8 board:
    0 = empty
    1 = X
    2 = O

Invalid requests never raise; make_move reports them through
MoveOutcome.status and leaves state untouched.
"""

from __future__ import annotations

import logging
from numbers import Integral, Real
from typing import List, Optional, Tuple

import numpy as np

from totito.core.events import EventHub, GameFinished, GameRestarted, MoveMade
from totito.core.types import (
    BOARD_SIZE,
    GameResult,
    MoveOutcome,
    MoveStatus,
    Player,
)
from totito.games.game_rules import board_full, empty_cells, find_winning_line, in_bounds
from totito.games.game_state import GameState
from totito.utils.config import DEFAULT_CONFIG, Config

logger = logging.getLogger(__name__)


def _as_index(value) -> Optional[int]:
    """int for integers and integral floats, None for anything else."""
    if isinstance(value, bool):
        return None
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, Real) and float(value).is_integer():
        return int(value)
    return None


class GameEngine:
    """
    Owns one game: board, current player, game-over flag.

    Each instance is independent; there is no shared module state.
    Calls must be serialized by the host.
    """

    __slots__ = ('config', 'events', '_state', '_game_over', '_turns_passed', '_result')

    def __init__(self, config: Optional[Config] = None):
        self.config = config or DEFAULT_CONFIG
        self.events = EventHub()
        self._state = GameState.initial(self.config.first_player)
        self._game_over = False
        self._turns_passed = 0
        self._result: Optional[GameResult] = None

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def board(self) -> np.ndarray:
        """Read-only copy of the board."""
        return self._state.read_only_board()

    @property
    def current_player(self) -> Player:
        return self._state.current_player

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def turns_passed(self) -> int:
        """Accepted moves since construction or the last reset."""
        return self._turns_passed

    @property
    def result(self) -> Optional[GameResult]:
        """Terminal result, or None while the game is running."""
        return self._result

    def cell(self, row: int, col: int) -> Player:
        if not in_bounds(row, col):
            raise IndexError(f"Cell ({row},{col}) is outside the board")
        return Player(int(self._state.board[row, col]))

    def get_state(self) -> GameState:
        return self._state.copy()

    def valid_moves(self) -> List[Tuple[int, int]]:
        """Empty cells, or nothing once the game is over."""
        if self._game_over:
            return []
        return empty_cells(self._state.board)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def make_move(self, row: int, col: int) -> MoveOutcome:
        """
        Place the current player's mark at (row, col).

        Args:
            row: Row index (0-2). Integral floats such as 1.0 are accepted;
                anything else that is not an integer counts as out of range.
            col: Column index (0-2).

        Returns:
            MoveOutcome describing what happened. On acceptance the board,
            turn and game-over flag are fully updated before MoveMade is
            emitted, followed by GameFinished if the move ended the game.
        """
        r, c = _as_index(row), _as_index(col)
        board = self._state.board

        if r is None or c is None or not in_bounds(r, c):
            logger.debug("Rejected (%r,%r): out of range", row, col)
            return MoveOutcome(MoveStatus.REJECTED_OUT_OF_RANGE, row, col)

        if self._game_over:
            logger.debug("Rejected (%d,%d): game is over", r, c)
            return MoveOutcome(MoveStatus.REJECTED_GAME_OVER, r, c)

        if board[r, c] != Player.NONE:
            logger.debug("Rejected (%d,%d): cell is occupied", r, c)
            return MoveOutcome(MoveStatus.REJECTED_OCCUPIED, r, c)

        player = self._state.current_player
        board[r, c] = player
        self._turns_passed += 1
        logger.debug("%s played (%d,%d)", player.name, r, c)

        result = self._evaluate()
        if result is not None:
            self._game_over = True
            self._result = result
            if result.is_tie:
                logger.info("Game finished in a tie after %d turns", self._turns_passed)
            else:
                logger.info(
                    "Game won by %s on %s %d",
                    result.winner.name, result.win_info.type.name, result.win_info.index,
                )
        else:
            self._state.current_player = player.opponent()

        # State is final here; listeners only observe it
        self.events.emit(MoveMade(r, c, player))
        if result is not None:
            self.events.emit(GameFinished(result))

        return MoveOutcome(MoveStatus.ACCEPTED, r, c, player, result)

    def reset(self) -> None:
        """Clear the board and start over with the first player. Valid at any time."""
        self._state = GameState.initial(self.config.first_player)
        self._game_over = False
        self._turns_passed = 0
        self._result = None
        logger.info("Game restarted")
        self.events.emit(GameRestarted())

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _evaluate(self) -> Optional[GameResult]:
        """Full-board rescan. Returns the terminal result or None."""
        line = find_winning_line(self._state.board)
        if line is not None:
            winner, win_info = line
            return GameResult(winner, win_info)
        if board_full(self._state.board):
            return GameResult.tie()
        return None

    def state_string(self) -> str:
        symbols = self.config.symbols
        board = self._state.board
        lines = ["╭───┬───┬───╮"]
        for i in range(BOARD_SIZE):
            row = "│ " + " │ ".join(
                symbols[Player(int(board[i, j]))] for j in range(BOARD_SIZE)
            ) + " │"
            lines.append(row)
            if i < BOARD_SIZE - 1:
                lines.append("├───┼───┼───┤")
        lines.append("╰───┴───┴───╯")
        return "\n".join(lines)
