"""
Immutable state models for a blackjack table.

This module provides the dataclasses that describe one point-in-time view of
the table. A Snapshot is never modified once it has been recorded in the
history; transitions build a new Snapshot from the current one instead.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List
from enum import Enum, auto

from tablestate.common.hand import House, Player
from tablestate.common.shoe import Shoe


class Progress(Enum):
    """
    Lifecycle phases of a table.
    """

    STARTING = auto()
    PLAYING = auto()
    DONE = auto()

    def next(self) -> "Progress":
        """The phase that legally follows this one."""
        return _CYCLE[self]

    def __str__(self) -> str:
        return self.name.capitalize()


_CYCLE = {
    Progress.STARTING: Progress.PLAYING,
    Progress.PLAYING: Progress.DONE,
    Progress.DONE: Progress.STARTING,
}


@dataclass(frozen=True)
class Snapshot:
    """
    Immutable representation of the table at one instant.

    Attributes:
        progress: Current lifecycle phase
        dealer: The house's hand holder
        players: Seated players, in seating order
        shoe: The remaining-card supply

    The dealer, players and shoe are handles owned by the card and hand
    subsystems. Copies share them; only the players list itself is copied.
    """

    progress: Progress = Progress.STARTING
    dealer: House = field(default_factory=House)
    players: List[Player] = field(default_factory=list)
    shoe: Shoe = field(default_factory=Shoe)

    @property
    def player_count(self) -> int:
        return len(self.players)

    def clone(self) -> "Snapshot":
        """Return an equal Snapshot that does not share the players list."""
        return replace(self, players=list(self.players))

    def with_player(self, player: Player) -> "Snapshot":
        """
        Seat a player at the end of the table.

        Args:
            player: The player to seat

        Returns:
            New snapshot with the player appended
        """
        new_players = list(self.players)
        new_players.append(player)
        return replace(self, players=new_players)

    def with_progress(self, progress: Progress) -> "Snapshot":
        return replace(self.clone(), progress=progress)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the snapshot to a dictionary suitable for serialization.

        Returns:
            Dictionary representation of the snapshot
        """
        return {
            "progress": self.progress.name,
            "dealer": {"hand": [str(card) for card in self.dealer.hand.cards]},
            "players": [
                {"hand": [str(card) for card in player.hand.cards]}
                for player in self.players
            ],
            "shoe_cards_remaining": self.shoe.remaining_count(),
        }
