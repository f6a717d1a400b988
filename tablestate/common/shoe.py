from typing import Callable, List, Optional
import random

from tablestate.common.card import Card
from tablestate.common.deck import Deck

DEFAULT_NUM_DECKS = 7


class Shoe:
    def __init__(
        self,
        num_decks: int = DEFAULT_NUM_DECKS,
        shuffle: bool = True,
        deck_factory: Optional[Callable[[], List[Card]]] = None,
    ):
        """
        Initialize a Shoe instance.

        :param num_decks: Number of decks to combine in the shoe (default is 7)
        :param shuffle: Whether to shuffle the combined cards straight away
        :param deck_factory: Optional callable that returns a list of cards for one deck
        """
        if num_decks < 1:
            raise ValueError("Number of decks must be at least 1")

        self.num_decks = num_decks
        self.deck_factory = deck_factory
        self.cards: List[Card] = []

        self.initialize_shoe()
        if shuffle:
            self.shuffle()

    def initialize_shoe(self) -> None:
        """Fill the shoe with the configured number of decks, in deck order."""
        self.cards = []
        for _ in range(self.num_decks):
            if self.deck_factory:
                self.cards.extend(self.deck_factory())
            else:
                self.cards.extend(Deck().cards)

    def shuffle(self) -> None:
        """Shuffle the cards still in the shoe."""
        random.shuffle(self.cards)

    def deal(self) -> Optional[Card]:
        """
        Deal the next card from the shoe.

        :return: A Card, or None when the shoe has run out
        """
        if not self.cards:
            return None
        return self.cards.pop()

    def remaining_count(self) -> int:
        """Return the number of cards remaining in the shoe."""
        return len(self.cards)

    def __str__(self) -> str:
        return f"Shoe with {self.remaining_count()} cards remaining"

    def __repr__(self) -> str:
        return f"Shoe(num_decks={self.num_decks})"
