"""
Core module - fundamental types and notifications.

This module provides the building blocks used by the engine and by any
presentation layer that drives it.
"""

from totito.core.types import (
    BOARD_SIZE,
    Player,
    WinType,
    WinInfo,
    GameResult,
    MoveStatus,
    MoveOutcome,
)
from totito.core.events import (
    EventHub,
    MoveMade,
    GameFinished,
    GameRestarted,
)

__all__ = [
    # Types
    "Player",
    "WinType",
    "WinInfo",
    "GameResult",
    "MoveStatus",
    "MoveOutcome",
    # Notifications
    "EventHub",
    "MoveMade",
    "GameFinished",
    "GameRestarted",
    # Constants
    "BOARD_SIZE",
]
