"""
Engine notifications and the listener registry.

Notifications are plain frozen dataclasses. Listeners subscribe per
notification type and are called synchronously, in registration order,
inside the call that produced the notification. Nothing is queued.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Type, TypeVar, Union

from totito.core.types import GameResult, Player

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveMade:
    """A legal move was written to the board."""
    row: int
    col: int
    player: Player


@dataclass(frozen=True)
class GameFinished:
    """The preceding MoveMade ended the game."""
    result: GameResult


@dataclass(frozen=True)
class GameRestarted:
    """The board was cleared by reset()."""


Event = Union[MoveMade, GameFinished, GameRestarted]
EVENT_TYPES = (MoveMade, GameFinished, GameRestarted)

E = TypeVar("E", MoveMade, GameFinished, GameRestarted)
Listener = Callable[[E], None]


class EventHub:
    """
    Per-engine listener registry.

    Every engine owns its own hub, so independent games never
    share subscribers.
    """

    __slots__ = ("_listeners",)

    def __init__(self):
        self._listeners: Dict[type, List[Callable]] = {t: [] for t in EVENT_TYPES}

    def subscribe(self, event_type: Type[E], listener: Listener) -> Callable[[], None]:
        """
        Register listener for event_type.

        Returns:
            A no-argument callable that removes the subscription.
        """
        if event_type not in self._listeners:
            raise TypeError(f"Unknown event type: {event_type!r}")
        self._listeners[event_type].append(listener)
        return lambda: self.unsubscribe(event_type, listener)

    def unsubscribe(self, event_type: Type[E], listener: Listener) -> bool:
        """Remove listener. Returns False if it was not subscribed."""
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)
            return True
        return False

    def listener_count(self, event_type: Type[E]) -> int:
        return len(self._listeners.get(event_type, []))

    def clear(self) -> None:
        for listeners in self._listeners.values():
            listeners.clear()

    def emit(self, event: Event) -> None:
        """
        Deliver event to every listener of its type.

        Listener exceptions propagate to the caller; later listeners
        for the same event are not called.
        """
        # Copy so a listener may unsubscribe itself mid-dispatch
        for listener in list(self._listeners[type(event)]):
            listener(event)
        logger.debug("Emitted %s", event)

    # Decorator shortcuts

    def on_move_made(self, listener: Listener) -> Listener:
        self.subscribe(MoveMade, listener)
        return listener

    def on_game_finished(self, listener: Listener) -> Listener:
        self.subscribe(GameFinished, listener)
        return listener

    def on_game_restarted(self, listener: Listener) -> Listener:
        self.subscribe(GameRestarted, listener)
        return listener
