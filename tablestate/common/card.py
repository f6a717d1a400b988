"""
This module defines the `Suit` and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard deck of playing
cards: Clubs, Hearts, Spades, and Diamonds.

- `Card`: A class representing a playing card. A card has a face value from
1 (Ace) to 13 (King) and a suit. The `Card` class exposes the printed rank
and the blackjack point value of the card.

This module is part of the `tablestate` package.
"""

from enum import Enum, unique

FACE_NAMES = {1: "Ace", 11: "Jack", 12: "Queen", 13: "King"}

MIN_VALUE = 1
MAX_VALUE = 13


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    CLUBS = "♣"
    HEARTS = "♥"
    SPADES = "♠"
    DIAMONDS = "♦"

    def __str__(self) -> str:
        return self.value


class Card:
    """
    Class representing a playing card. This class is a member of a card deck.

    >>> card = Card(1, Suit.CLUBS)
    >>> print(card)
    Ace of ♣
    >>> card.value
    1
    """

    __slots__ = ("_face", "_suit")

    def __init__(self, face: int, suit: Suit):
        """
        Initialize a Card instance.

        :param face: Face value between 1 (Ace) and 13 (King)
        :param suit: Suit of the card (one of the Suit enums)
        :raises ValueError: If the face value is out of range
        """
        if not isinstance(suit, Suit):
            raise TypeError(f"Invalid suit: {suit}")
        if not MIN_VALUE <= face <= MAX_VALUE:
            raise ValueError(f"The value of {face} is out of range")
        self._face = face
        self._suit = suit

    @property
    def face(self) -> int:
        """The raw face value, 1 through 13."""
        return self._face

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def rank(self) -> str:
        """The printed rank: Ace, Jack, Queen, King, or the number."""
        return FACE_NAMES.get(self._face, str(self._face))

    @property
    def value(self) -> int:
        """Point value used for scoring. Face cards count 10, an Ace counts 1."""
        return min(self._face, 10)

    def __eq__(self, other):
        if isinstance(other, Card):
            return self._face == other._face and self._suit == other._suit
        return NotImplemented

    def __hash__(self):
        return hash((self._face, self._suit))

    def __repr__(self) -> str:
        return f"Card({self._face}, Suit.{self._suit.name})"

    def __str__(self) -> str:
        return f"{self.rank} of {self._suit}"
