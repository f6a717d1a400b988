#!/usr/bin/env python3
"""
Example demonstrating the table lifecycle and its history.

This script seats a few players, plays through one game, shows what happens
when an operation is attempted in the wrong phase, and then prints every
snapshot recorded on the active path.
"""

import argparse
import logging

from tablestate import InvalidStateTransitionError, RuleEngine, TableConfig
from tablestate.events import EventEmitter

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("table_history_demo")


def main():
    parser = argparse.ArgumentParser(description="Walk a table through one game")
    parser.add_argument("--decks", type=int, default=7, help="Decks in the shoe")
    parser.add_argument("--players", type=int, default=2, help="Players to seat")
    parser.add_argument("--debug", action="store_true", help="Log engine decisions")
    args = parser.parse_args()

    if args.debug:
        logging.getLogger("tablestate").setLevel(logging.DEBUG)

    events = EventEmitter()
    events.on_any(
        lambda event: logger.info("event %s: %s", event.event_type.name, event)
    )

    engine = RuleEngine(TableConfig(num_decks=args.decks), event_bus=events)
    print(f"New table: {engine.current_progress()}")

    for _ in range(args.players):
        engine.register_player()
    print(f"Seated {engine.current_snapshot().player_count} players")

    engine.begin_play()
    print(f"Now: {engine.current_progress()}")

    try:
        engine.register_player()
    except InvalidStateTransitionError as e:
        print(f"Late arrival refused: {e}")

    engine.end_play()
    engine.reset_game()

    print("\nActive path:")
    for depth, snapshot in enumerate(engine):
        print(
            f"  {depth}: {snapshot.progress} with {snapshot.player_count} players, "
            f"{snapshot.shoe.remaining_count()} cards in the shoe"
        )

    print(f"\nHistory holds {len(engine.history)} snapshots")


if __name__ == "__main__":
    main()
