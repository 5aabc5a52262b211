"""
Engine and driver configuration.
"""

import logging
from typing import Dict, Optional

from totito.core.types import Player


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_SYMBOLS = {
    Player.NONE: " ",
    Player.X: "X",
    Player.O: "O",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _parse_player(value) -> Player:
    """Accept a Player, its name ("X"/"O") or its int value."""
    if isinstance(value, str):
        try:
            return Player[value.strip().upper()]
        except KeyError as e:
            raise ValueError(f"Unknown player: {value!r}") from e
    return Player(value)


class Config:
    """Engine configuration with sensible defaults."""

    def __init__(
        self,
        first_player: Player = Player.X,
        symbols: Optional[Dict[Player, str]] = None,
        log_level: str = "WARNING",
    ):
        first = _parse_player(first_player)
        if first is Player.NONE:
            raise ValueError("first_player must be X or O")
        self.first_player = first

        self.symbols = dict(DEFAULT_SYMBOLS)
        if symbols:
            self.symbols.update({_parse_player(p): s for p, s in symbols.items()})

        level = log_level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level: {log_level}. Available: {', '.join(LOG_LEVELS)}"
            )
        self.log_level = level

    @property
    def log_level_value(self) -> int:
        """Numeric level for logging.basicConfig."""
        return getattr(logging, self.log_level)


# Default configuration
DEFAULT_CONFIG = Config()
