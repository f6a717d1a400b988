"""
Tests for transition events.

Events are driven through a RuleEngine wherever possible, since the engine
is the only publisher.
"""

import logging
import threading
from dataclasses import FrozenInstanceError
from unittest.mock import MagicMock

import pytest

from tablestate.config import TableConfig
from tablestate.events import EngineEventType, EventEmitter, TransitionEvent
from tablestate.state import RuleEngine


def play_one_game(engine):
    engine.register_player()
    engine.begin_play()
    engine.end_play()
    engine.reset_game()


def test_each_engine_gets_its_own_emitter():
    first = RuleEngine(TableConfig(num_decks=1))
    second = RuleEngine(TableConfig(num_decks=1))
    assert first.event_bus is not second.event_bus
    assert first.id != second.id


def test_default_engines_do_not_hear_each_other():
    first = RuleEngine(TableConfig(num_decks=1))
    second = RuleEngine(TableConfig(num_decks=1))
    listener = MagicMock()
    first.event_bus.on(EngineEventType.GAME_STARTED, listener)

    second.begin_play()
    listener.assert_not_called()

    first.begin_play()
    listener.assert_called_once()
    assert listener.call_args[0][0].engine_id == first.id


def test_shared_emitter_tells_engines_apart(emitter):
    first = RuleEngine(TableConfig(num_decks=1), event_bus=emitter)
    second = RuleEngine(TableConfig(num_decks=1), event_bus=emitter)
    seen = []
    emitter.on_any(lambda event: seen.append(event.engine_id))

    first.register_player()
    second.register_player()
    second.begin_play()

    assert seen == [first.id, second.id, second.id]


def test_typed_subscription_only_hears_its_type(engine, emitter):
    joined = MagicMock()
    emitter.on(EngineEventType.PLAYER_JOINED, joined)

    play_one_game(engine)

    joined.assert_called_once()
    assert joined.call_args[0][0].event_type is EngineEventType.PLAYER_JOINED


def test_on_any_hears_the_whole_lifecycle_in_order(engine, emitter):
    seen = []
    emitter.on_any(lambda event: seen.append(event.event_type))

    play_one_game(engine)

    assert seen == [
        EngineEventType.PLAYER_JOINED,
        EngineEventType.GAME_STARTED,
        EngineEventType.GAME_ENDED,
        EngineEventType.GAME_CREATED,
    ]


def test_typed_subscribers_run_before_catch_all(engine, emitter):
    order = []
    emitter.on_any(lambda event: order.append("any"))
    emitter.on(EngineEventType.GAME_STARTED, lambda event: order.append("typed"))

    engine.begin_play()

    assert order == ["typed", "any"]


def test_unsubscribe_stops_delivery(engine, emitter):
    typed = MagicMock()
    catch_all = MagicMock()
    stop_typed = emitter.on(EngineEventType.PLAYER_JOINED, typed)
    stop_catch_all = emitter.on_any(catch_all)

    engine.register_player()
    stop_typed()
    stop_catch_all()
    engine.register_player()

    assert typed.call_count == 1
    assert catch_all.call_count == 1
    # Unsubscribing twice is harmless
    stop_typed()


def test_event_describes_the_new_history_node(engine, emitter):
    events = []
    emitter.on_any(events.append)

    engine.register_player()
    engine.begin_play()

    leaf = engine.history.active_leaf()
    assert events[-1] == TransitionEvent(
        event_type=EngineEventType.GAME_STARTED,
        engine_id=engine.id,
        progress="PLAYING",
        previous_progress="STARTING",
        player_count=1,
        depth=2,
        created_at=leaf.created_at,
    )


def test_events_are_immutable(engine, emitter):
    events = []
    emitter.on_any(events.append)
    engine.begin_play()

    with pytest.raises(FrozenInstanceError):
        events[0].depth = 99


def test_refused_transition_publishes_nothing(engine, emitter):
    listener = MagicMock()
    emitter.on_any(listener)

    with pytest.raises(Exception):
        engine.end_play()

    listener.assert_not_called()


def test_failing_subscriber_is_logged_and_skipped(engine, emitter, caplog):
    def broken(event):
        raise ValueError("boom")

    after = MagicMock()
    emitter.on(EngineEventType.GAME_STARTED, broken)
    emitter.on(EngineEventType.GAME_STARTED, after)

    with caplog.at_level(logging.ERROR, logger="tablestate.events"):
        engine.begin_play()

    after.assert_called_once()
    assert engine.is_playing()
    assert "Error in event handler for GAME_STARTED" in caplog.text


def test_subscriber_can_query_the_engine(engine, emitter):
    observed = []
    emitter.on_any(lambda event: observed.append(engine.current_progress()))

    engine.begin_play()

    assert observed == [engine.current_progress()]


def test_concurrent_transitions_are_delivered_in_history_order(emitter):
    engine = RuleEngine(TableConfig(num_decks=1), event_bus=emitter)
    depths = []
    emitter.on(EngineEventType.PLAYER_JOINED, lambda event: depths.append(event.depth))
    barrier = threading.Barrier(8)

    def seat():
        barrier.wait()
        for _ in range(25):
            engine.register_player()

    threads = [threading.Thread(target=seat) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert depths == list(range(1, 201))


def test_on_rejects_unknown_event_types():
    emitter = EventEmitter()
    with pytest.raises(TypeError):
        emitter.on("player_joined", MagicMock())
