"""
Transition events published by a rule engine.

Each engine owns one EventEmitter. After an accepted transition the engine
builds a TransitionEvent and hands it to every subscriber for that event
type, then to every subscriber of all types. Subscribers run synchronously
while the engine still holds its lock, so one engine's events arrive in
history order.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Dict, List
import threading
import logging
from enum import Enum

logger = logging.getLogger("tablestate.events")


class EngineEventType(Enum):
    """What kind of transition an event reports."""

    PLAYER_JOINED = "player_joined"
    GAME_STARTED = "game_started"
    GAME_ENDED = "game_ended"
    GAME_CREATED = "game_created"


@dataclass(frozen=True)
class TransitionEvent:
    """
    Immutable record of one accepted transition.

    Attributes:
        event_type: Which transition happened
        engine_id: Identifier of the engine that accepted it
        progress: Phase name after the transition
        previous_progress: Phase name before the transition
        player_count: Seated players after the transition
        depth: Length of the active path after the transition
        created_at: Creation instant of the new history node
    """

    event_type: EngineEventType
    engine_id: str
    progress: str
    previous_progress: str
    player_count: int
    depth: int
    created_at: int


Subscriber = Callable[[TransitionEvent], None]


class EventEmitter:
    """Subscriber registry for one engine's transition events."""

    def __init__(self):
        self._listeners: Dict[EngineEventType, List[Subscriber]] = defaultdict(list)
        self._global_listeners: List[Subscriber] = []
        self._listener_lock = threading.RLock()

    def on(self, event_type: EngineEventType, callback: Subscriber) -> Callable[[], None]:
        """
        Subscribe to one kind of transition.

        Returns:
            Function that removes this subscription
        """
        if not isinstance(event_type, EngineEventType):
            raise TypeError(f"Unknown event type: {event_type!r}")

        with self._listener_lock:
            self._listeners[event_type].append(callback)

        def unsubscribe():
            with self._listener_lock:
                if callback in self._listeners[event_type]:
                    self._listeners[event_type].remove(callback)

        return unsubscribe

    def on_any(self, callback: Subscriber) -> Callable[[], None]:
        """Subscribe to every transition. Returns the unsubscribe function."""
        with self._listener_lock:
            self._global_listeners.append(callback)

        def unsubscribe():
            with self._listener_lock:
                if callback in self._global_listeners:
                    self._global_listeners.remove(callback)

        return unsubscribe

    def emit(self, event: TransitionEvent) -> None:
        """
        Deliver an event to its subscribers, type-specific ones first.

        A subscriber that raises is logged and skipped so that the rest
        still hear about the transition.
        """
        with self._listener_lock:
            callbacks = list(self._listeners.get(event.event_type, []))
            callbacks.extend(self._global_listeners)

        for callback in callbacks:
            try:
                callback(event)
            except Exception as e:
                logger.error(
                    f"Error in event handler for {event.event_type.name}: {e}",
                    exc_info=True,
                )
