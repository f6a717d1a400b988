"""
This module contains the Deck class, which represents one standard deck of cards.

>>> deck = Deck()
>>> deck.cards_left()
52
>>> deck.deal()
Card(13, Suit.SPADES)
>>> deck.cards_left()
51
"""

import random
from typing import List, Optional

from tablestate.common.card import MAX_VALUE, MIN_VALUE, Card, Suit

CARDS_PER_DECK = 52


class Deck:
    """
    A standard deck without jokers: four suits, Ace through King.
    """

    # Precompute the default deck
    _default_deck = [
        Card(face, suit)
        for suit in [Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES]
        for face in range(MIN_VALUE, MAX_VALUE + 1)
    ]

    def __init__(self, cards: Optional[List[Card]] = None):
        """
        Initialize a Deck instance.

        :param cards: A list of Card instances to populate the deck (optional).
                      If not provided, a default deck will be constructed.
        """
        if cards is None:
            self.cards: List[Card] = self._default_deck.copy()
        else:
            self.cards = cards.copy()

    def shuffle(self) -> None:
        """Shuffle the cards in the deck."""
        random.shuffle(self.cards)

    def deal(self) -> Optional[Card]:
        """
        Pop the top card from the deck.

        :return: The card, or None once the deck is empty.
        """
        if not self.cards:
            return None
        return self.cards.pop()

    def cards_left(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck({[repr(card) for card in self.cards]})"

    def __str__(self) -> str:
        return f"Deck of {len(self.cards)} cards"
