"""
Rule engine for a blackjack table.

The engine owns the history tree and is the only way to extend it. Every
mutating operation reads the current snapshot, checks that the table is in
the phase the operation requires, derives a new snapshot and records it one
level below the active leaf. A refused operation raises and leaves the
history untouched.

Lifecycle::

    STARTING --begin_play--> PLAYING --end_play--> DONE --reset_game--> STARTING
       ^  |
       +--+ register_player
"""

import logging
import threading
import uuid
from typing import Callable, Dict, Iterator, Optional

from tablestate.common.hand import House, Player
from tablestate.common.shoe import Shoe
from tablestate.config import TableConfig
from tablestate.events import EngineEventType, EventEmitter, TransitionEvent
from tablestate.state.errors import InvalidStateTransitionError, TableFullError
from tablestate.state.history import HistoryNode
from tablestate.state.models import Progress, Snapshot

logger = logging.getLogger("tablestate.rules")

# Phase each mutating operation is legal from
GUARDS: Dict[str, Progress] = {
    "register_player": Progress.STARTING,
    "begin_play": Progress.STARTING,
    "end_play": Progress.PLAYING,
    "reset_game": Progress.DONE,
}


class RuleEngine:
    """
    Gatekeeper for the table lifecycle.

    Mutating calls on one engine are serialised by an internal lock, so two
    threads can never attach to the same leaf. Transition events are
    delivered under the same lock, in history order. Reads are not locked.
    """

    def __init__(
        self,
        config: Optional[TableConfig] = None,
        event_bus: Optional[EventEmitter] = None,
    ):
        """
        Create a table in the STARTING phase with no players.

        Args:
            config: Table settings; defaults to TableConfig()
            event_bus: Emitter for transition events; defaults to a new
                emitter owned by this engine. Pass one in to share it.
        """
        self.id = str(uuid.uuid4())
        self.config = config or TableConfig()
        self.event_bus = event_bus if event_bus is not None else EventEmitter()
        self._lock = threading.RLock()

        initial = Snapshot(
            dealer=House(),
            shoe=Shoe(num_decks=self.config.num_decks, shuffle=self.config.shuffle),
        )
        self._root = HistoryNode(initial)

    @property
    def history(self) -> HistoryNode:
        """Root of the history tree."""
        return self._root

    def register_player(self) -> Player:
        """
        Seat a new player with an empty hand.

        Returns:
            The seated player

        Raises:
            InvalidStateTransitionError: If the table is not STARTING
            TableFullError: If max_players seats are already taken
        """
        player = Player()
        max_players = self.config.max_players

        def seat(state: Snapshot) -> Snapshot:
            if max_players is not None and state.player_count >= max_players:
                raise TableFullError(max_players)
            return state.with_player(player)

        self._advance("register_player", seat, EngineEventType.PLAYER_JOINED)
        return player

    def begin_play(self) -> None:
        """Move the table from STARTING to PLAYING."""
        self._advance(
            "begin_play",
            lambda state: state.with_progress(Progress.PLAYING),
            EngineEventType.GAME_STARTED,
        )

    def end_play(self) -> None:
        """Move the table from PLAYING to DONE."""
        self._advance(
            "end_play",
            lambda state: state.with_progress(Progress.DONE),
            EngineEventType.GAME_ENDED,
        )

    def reset_game(self) -> None:
        """
        Start a new game once the current one is DONE.

        Seated players keep their seats.
        """
        self._advance(
            "reset_game",
            lambda state: state.with_progress(Progress.STARTING),
            EngineEventType.GAME_CREATED,
        )

    def _advance(
        self,
        operation: str,
        apply: Callable[[Snapshot], Snapshot],
        event_type: EngineEventType,
    ) -> Snapshot:
        with self._lock:
            current = self.current_snapshot()
            if current.progress is not GUARDS[operation]:
                raise InvalidStateTransitionError(current.progress)

            new_state = apply(current)
            node = self._root.add_along_active_path(new_state)
            depth = self._root.depth()

            logger.debug(
                "Accepted %s: %s -> %s (depth %d)",
                operation,
                current.progress,
                new_state.progress,
                depth,
            )

            self.event_bus.emit(
                TransitionEvent(
                    event_type=event_type,
                    engine_id=self.id,
                    progress=new_state.progress.name,
                    previous_progress=current.progress.name,
                    player_count=new_state.player_count,
                    depth=depth,
                    created_at=node.created_at,
                )
            )
        return new_state

    def can(self, operation: str) -> bool:
        """
        Check whether a mutating operation is legal right now.

        Args:
            operation: One of register_player, begin_play, end_play, reset_game

        Raises:
            ValueError: If the operation name is unknown
        """
        try:
            required = GUARDS[operation]
        except KeyError:
            raise ValueError(f"Unknown operation: {operation}") from None
        return self.current_progress() is required

    def current_snapshot(self) -> Snapshot:
        return self._root.current_snapshot()

    def current_progress(self) -> Progress:
        return self.current_snapshot().progress

    def is_starting(self) -> bool:
        return self.current_progress() is Progress.STARTING

    def is_playing(self) -> bool:
        return self.current_progress() is Progress.PLAYING

    def is_done(self) -> bool:
        return self.current_progress() is Progress.DONE

    def depth(self) -> int:
        """Number of accepted transitions on the active path."""
        return self._root.depth()

    def __iter__(self) -> Iterator[Snapshot]:
        """Snapshots on the active path, oldest first, ending at the current one."""
        return (node.value for node in self._root.active_path())

    def __repr__(self) -> str:
        return f"RuleEngine(progress={self.current_progress()}, depth={self.depth()})"
