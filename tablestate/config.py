from typing import Optional

from tablestate.common.shoe import DEFAULT_NUM_DECKS


class TableConfig:
    def __init__(
        self,
        num_decks: int = DEFAULT_NUM_DECKS,
        shuffle: bool = True,
        max_players: Optional[int] = None,
    ):
        """
        Settings for a new table.

        :param num_decks: Number of decks in the shoe (default is 7)
        :param shuffle: Whether the initial shoe is shuffled
        :param max_players: Seat limit, or None for no limit
        """
        if num_decks < 1:
            raise ValueError("Number of decks must be at least 1")
        if max_players is not None and max_players < 1:
            raise ValueError("max_players must be at least 1")

        self.num_decks = num_decks
        self.shuffle = shuffle
        self.max_players = max_players

    def to_dict(self) -> dict:
        """Convert the config to a dictionary for serialization."""
        return {
            "num_decks": self.num_decks,
            "shuffle": self.shuffle,
            "max_players": self.max_players,
        }

    def __repr__(self) -> str:
        return (
            f"TableConfig(num_decks={self.num_decks}, shuffle={self.shuffle}, "
            f"max_players={self.max_players})"
        )
