"""
Totito - turn-based rule engine for a two-player 3x3 mark-placement game.

The engine owns the board and the turn order, validates and applies
moves, detects wins and ties, and notifies any presentation layer
through synchronous listeners.

Quick Start:
    from totito import GameEngine, GameFinished

    engine = GameEngine()
    engine.events.subscribe(GameFinished, lambda e: print(e.result))
    outcome = engine.make_move(1, 1)

Modules:
    core   - Player/WinInfo/GameResult types and notification hub
    games  - GameEngine and numpy board helpers
    utils  - Configuration
    api    - Text-mode driver
    cli    - Command-line entry point
"""

from totito.api import play_game
from totito.core import (
    Player,
    WinType,
    WinInfo,
    GameResult,
    MoveStatus,
    MoveOutcome,
    EventHub,
    MoveMade,
    GameFinished,
    GameRestarted,
)
from totito.games import GameEngine, GameState
from totito.utils.config import Config, DEFAULT_CONFIG

__version__ = "1.0.0"

__all__ = [
    # Main API
    "GameEngine",
    "GameState",
    "play_game",
    "Config",
    "DEFAULT_CONFIG",
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
]
