"""
This module contains classes to represent who holds cards at a blackjack table.

It includes an abstract base class `AbstractHand`, a concrete implementation `Hand`,
and the two hand holders a table seats: `Player` and `House`.

Classes:

AbstractHand: An abstract base class for a hand of cards.
Hand: A concrete implementation of a hand of cards.
Player: A seat at the table holding one hand.
House: The dealer, holding one hand.
"""
from abc import ABC
from typing import List, Optional

from tablestate.common.card import Card


class AbstractHand(ABC):
    """
    An abstract base class for a hand of cards.

    This class provides a basic structure for a hand of cards, including methods to receive and discard cards.
    Subclasses should override the __repr__ and __str__ methods to provide a string representation of the hand.
    """

    def __init__(self):
        self._cards: List[Card] = []

    @property
    def cards(self) -> List[Card]:
        """Returns the cards in the hand."""
        return self._cards

    def number_of_cards(self) -> int:
        return len(self._cards)

    def receive(self, card: Card) -> None:
        """
        Adds a card to the hand.

        Args:
            card: The card to add.
        """
        self._cards.append(card)

    def peek_top_card(self) -> Optional[Card]:
        """Returns the first card received (the face-up card), or None."""
        if not self._cards:
            return None
        return self._cards[0]

    def all_cards(self) -> List[Card]:
        """Returns a copy of every card in the hand, in the order received."""
        return list(self._cards)

    def discard_all(self) -> List[Card]:
        """
        Empties the hand.

        Returns:
            The cards that were in the hand.
        """
        discarded = self._cards
        self._cards = []
        return discarded

    def discard_one(self) -> Optional[Card]:
        """Removes and returns the most recently received card, or None."""
        if not self._cards:
            return None
        return self._cards.pop()


class Hand(AbstractHand):
    """
    A concrete implementation of a hand of cards.

    This class provides a string representation of a hand of cards for both debugging and display purposes.
    """

    def __repr__(self) -> str:
        """
        Returns a string representation of the hand for debugging.

        Returns:
            A string in the form "Hand([Card(...), ...])".
        """
        return f"Hand({self.cards!r})"

    def __str__(self) -> str:
        """
        Returns a string representation of the hand for display.

        Returns:
            A string in the form "Card(...), ...".
        """
        return ", ".join(str(card) for card in self.cards)


class Player:
    """A seat at the table. The hand is owned here, not by the game state."""

    def __init__(self, hand: Optional[Hand] = None):
        self.hand = hand if hand is not None else Hand()

    def __repr__(self) -> str:
        return f"Player({self.hand!r})"


class House:
    """The dealer's side of the table."""

    def __init__(self, hand: Optional[Hand] = None):
        self.hand = hand if hand is not None else Hand()

    def __repr__(self) -> str:
        return f"House({self.hand!r})"
