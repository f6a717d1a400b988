"""
Tests for the Snapshot model and Progress cycle.
"""

from dataclasses import FrozenInstanceError

import pytest

from tablestate.common.card import Card, Suit
from tablestate.common.hand import House, Player
from tablestate.common.shoe import Shoe
from tablestate.state.models import Progress, Snapshot


def test_default_snapshot():
    snapshot = Snapshot()
    assert snapshot.progress is Progress.STARTING
    assert snapshot.players == []
    assert snapshot.player_count == 0
    assert isinstance(snapshot.dealer, House)
    assert snapshot.dealer.hand.cards == []
    assert snapshot.shoe.remaining_count() == 52 * 7


def test_default_snapshots_do_not_share_handles():
    a, b = Snapshot(), Snapshot()
    assert a.dealer is not b.dealer
    assert a.shoe is not b.shoe
    assert a.players is not b.players


def test_progress_str():
    assert str(Progress.STARTING) == "Starting"
    assert str(Progress.PLAYING) == "Playing"
    assert str(Progress.DONE) == "Done"


def test_progress_cycle():
    assert Progress.STARTING.next() is Progress.PLAYING
    assert Progress.PLAYING.next() is Progress.DONE
    assert Progress.DONE.next() is Progress.STARTING


def test_snapshot_is_frozen():
    snapshot = Snapshot()
    with pytest.raises(FrozenInstanceError):
        snapshot.progress = Progress.DONE


def test_clone_is_equal_but_independent_player_list():
    snapshot = Snapshot(players=[Player(), Player()])
    clone = snapshot.clone()

    assert clone == snapshot
    assert clone is not snapshot
    assert clone.players is not snapshot.players
    # Handles are shared with the owning subsystems
    assert clone.players[0] is snapshot.players[0]
    assert clone.dealer is snapshot.dealer
    assert clone.shoe is snapshot.shoe

    clone.players.append(Player())
    assert snapshot.player_count == 2


def test_with_player_appends_in_order():
    first, second = Player(), Player()
    snapshot = Snapshot()
    updated = snapshot.with_player(first).with_player(second)

    assert updated.players == [first, second]
    assert snapshot.players == []
    assert updated.progress is Progress.STARTING


def test_with_progress_leaves_original_alone():
    snapshot = Snapshot(players=[Player()])
    playing = snapshot.with_progress(Progress.PLAYING)

    assert playing.progress is Progress.PLAYING
    assert snapshot.progress is Progress.STARTING
    assert playing.players == snapshot.players
    assert playing.players is not snapshot.players


def test_different_progress_is_not_equal():
    snapshot = Snapshot()
    assert snapshot.with_progress(Progress.DONE) != snapshot


def test_to_dict():
    dealer = House()
    dealer.hand.receive(Card(1, Suit.SPADES))
    player = Player()
    player.hand.receive(Card(10, Suit.HEARTS))
    snapshot = Snapshot(dealer=dealer, players=[player], shoe=Shoe(num_decks=1))

    assert snapshot.to_dict() == {
        "progress": "STARTING",
        "dealer": {"hand": ["Ace of ♠"]},
        "players": [{"hand": ["10 of ♥"]}],
        "shoe_cards_remaining": 52,
    }
