"""
Core types, constants, and value objects.

This module contains the fundamental types used throughout the engine:
- Player: tri-state cell / winner value, int-backed for the int8 board
- WinType / WinInfo: geometric classification of a winning line
- GameResult: terminal outcome handed to GameFinished listeners
- MoveStatus / MoveOutcome: the value returned by every make_move call
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import NamedTuple, Optional, Tuple

# Board is always 3x3
BOARD_SIZE = 3


class Player(IntEnum):
    """
    Cell occupant and winner value.

    Values match the int8 board encoding:
        0 = empty / no winner
        1 = X (moves first by default)
        2 = O
    """

    NONE = 0
    X = 1
    O = 2

    def opponent(self) -> "Player":
        """Return the other concrete player."""
        if self is Player.NONE:
            raise ValueError("Player.NONE has no opponent")
        return Player(3 - self.value)  # Toggle 1↔2


class WinType(Enum):
    ROW = auto()
    COLUMN = auto()
    MAIN_DIAGONAL = auto()
    ANTI_DIAGONAL = auto()


class WinInfo(NamedTuple):
    """Which line won. Diagonals carry index 0 as a placeholder."""

    type: WinType
    index: int = 0

    def cells(self) -> Tuple[Tuple[int, int], ...]:
        """Return the three (row, col) coordinates of the line."""
        n = BOARD_SIZE
        if self.type is WinType.ROW:
            return tuple((self.index, c) for c in range(n))
        if self.type is WinType.COLUMN:
            return tuple((r, self.index) for r in range(n))
        if self.type is WinType.MAIN_DIAGONAL:
            return tuple((i, i) for i in range(n))
        return tuple((i, n - 1 - i) for i in range(n))


@dataclass(frozen=True)
class GameResult:
    """
    Terminal outcome of a game.

    winner is Player.NONE for a tie, in which case win_info must be None.
    A concrete winner always carries win_info.
    """
    winner: Player
    win_info: Optional[WinInfo] = None

    def __post_init__(self):
        object.__setattr__(self, "winner", Player(self.winner))
        if (self.winner is Player.NONE) != (self.win_info is None):
            raise ValueError(
                f"Inconsistent result: winner={self.winner!r}, win_info={self.win_info!r}"
            )

    @classmethod
    def tie(cls) -> "GameResult":
        return cls(Player.NONE, None)

    @property
    def is_tie(self) -> bool:
        return self.winner is Player.NONE


class MoveStatus(Enum):
    ACCEPTED = auto()
    REJECTED_OCCUPIED = auto()
    REJECTED_GAME_OVER = auto()
    REJECTED_OUT_OF_RANGE = auto()


class MoveOutcome(NamedTuple):
    """What a single make_move call did."""

    status: MoveStatus
    row: int
    col: int
    player: Player = Player.NONE  # Who moved; NONE when rejected
    result: Optional[GameResult] = None  # Set only on the game-ending move

    @property
    def accepted(self) -> bool:
        return self.status is MoveStatus.ACCEPTED

    @property
    def finished(self) -> bool:
        return self.result is not None
