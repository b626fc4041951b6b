"""Card and Deck classes."""

import logging
from collections import deque
from enum import Enum
from random import Random
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


class Suit(Enum):
    """Card suits, in deck order."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"

    def __str__(self) -> str:
        symbols = {
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks, in deck order."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def label(self) -> str:
        """Long rank name ("7", "queen", "ace")."""
        if self.value <= 10:
            return str(self.value)
        return self.name.lower()

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return 11
        return 10  # Face cards

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


_RANK_MAP = {
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "T": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
    "A": Rank.ACE,
}

_SUIT_MAP = {
    "H": Suit.HEARTS,
    "♥": Suit.HEARTS,
    "D": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "C": Suit.CLUBS,
    "♣": Suit.CLUBS,
    "S": Suit.SPADES,
    "♠": Suit.SPADES,
}


class Card:
    """
    A playing card held by exactly one hand at a time.

    Rank and suit (and therefore the blackjack value) are fixed; only the
    face orientation changes. Equality ignores orientation.
    """

    __slots__ = ("_rank", "_suit", "face_up")

    def __init__(self, rank: Rank, suit: Suit, face_up: bool = True) -> None:
        self._rank = rank
        self._suit = suit
        self.face_up = face_up

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return (self._rank, self._suit) == (other._rank, other._suit)

    def __hash__(self) -> int:
        return hash((self._rank, self._suit))

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        orientation = "" if self.face_up else ", face_down"
        return f"Card({self.rank.name}, {self.suit.name}{orientation})"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    def flip(self) -> None:
        """Turn the card over."""
        self.face_up = not self.face_up

    def copy(self) -> "Card":
        """Return an independent card with the same rank, suit and orientation."""
        return Card(self.rank, self.suit, self.face_up)

    def describe(self) -> str:
        """Long form, e.g. 'ace of spades'."""
        return f"{self.rank.label} of {self.suit.value}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        if rank_str not in _RANK_MAP:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_MAP:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANK_MAP[rank_str], _SUIT_MAP[suit_str])


def standard_cards() -> list[Card]:
    """The 52 canonical cards, suit by suit, ranks ascending."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


class Deck:
    """
    A standard 52-card deck that never runs out.

    Cards are dealt from the front. When the deck is empty at deal time it
    is rebuilt from 52 fresh cards and reshuffled before dealing.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """Initialize a new deck in canonical order."""
        self._rng = rng or Random()
        self._cards: deque[Card] = deque()
        self._reshuffle_count = 0
        self.reset()

    @classmethod
    def stacked(cls, cards: Iterable[Card | str], rng: Random | None = None) -> "Deck":
        """
        Build a deck that deals the given cards first, in order.

        Strings are parsed with Card.from_string. Once the stacked cards run
        out the deck behaves like any other and reshuffles a fresh set.
        """
        deck = cls(rng=rng)
        deck._cards = deque(
            Card.from_string(c) if isinstance(c, str) else c.copy() for c in cards
        )
        return deck

    def reset(self) -> None:
        """Reset deck to all 52 cards in order."""
        self._cards = deque(standard_cards())

    def shuffle(self) -> None:
        """Shuffle the remaining cards."""
        cards = list(self._cards)
        self._rng.shuffle(cards)
        self._cards = deque(cards)

    def deal_card(self) -> Card:
        """Remove and return the first card, reshuffling a new deck if empty."""
        if not self._cards:
            self.reset()
            self.shuffle()
            self._reshuffle_count += 1
            logger.debug("Deck exhausted, reshuffled (count=%d)", self._reshuffle_count)
        return self._cards.popleft()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    @property
    def reshuffle_count(self) -> int:
        """Number of automatic reshuffles caused by an empty deck."""
        return self._reshuffle_count
