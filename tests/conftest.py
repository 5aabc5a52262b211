"""
Shared test fixtures for totito tests.

Design principles:
- One fresh engine per test, never shared
- Recorded notifications as plain lists for ordering checks
- Minimal, focused fixtures
"""

from typing import List, Tuple

import pytest

from totito.core.events import Event, GameFinished, GameRestarted, MoveMade
from totito.games.engine import GameEngine


# =============================================================================
# Move Sequences
# =============================================================================

@pytest.fixture
def row_zero_win() -> List[Tuple[int, int]]:
    """X wins on row 0: (0,0)X (1,1)O (0,1)X (1,0)O (0,2)X."""
    return [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)]


@pytest.fixture
def tie_game() -> List[Tuple[int, int]]:
    """Final board X,O,X / X,O,O / O,X,X with no line for either player."""
    return [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture
def engine() -> GameEngine:
    """Fresh engine with default config."""
    return GameEngine()


@pytest.fixture
def recorder(engine: GameEngine) -> List[Event]:
    """Every notification the engine emits, in order."""
    events: List[Event] = []
    for event_type in (MoveMade, GameFinished, GameRestarted):
        engine.events.subscribe(event_type, events.append)
    return events

