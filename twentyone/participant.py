"""Seats at the table: players, the dealer, and the dealer's playing policy."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Protocol

from twentyone.cards import Card
from twentyone.hand import BUST_LIMIT, Hand


class CardSource(Protocol):
    """Anything that can deal a card (normally a Deck)."""

    def deal_card(self) -> Card:
        ...


class DealerPolicy(ABC):
    """
    Automatic play for the dealer seat.

    A policy is attached to exactly one seat and runs once per round, after
    every player has finished.
    """

    @abstractmethod
    def play(self, seat: "Participant", deck: CardSource) -> list[Card]:
        """
        Play out the seat's hand from the deck.

        Returns:
            The cards drawn, in order
        """
        ...


class StandThresholdPolicy(DealerPolicy):
    """Reveal the hole card, hit while below a threshold, then stand."""

    def __init__(self, stands_on: int = 16) -> None:
        self.stands_on = stands_on

    def play(self, seat: "Participant", deck: CardSource) -> list[Card]:
        seat.hand.reveal_all()

        drawn: list[Card] = []
        while not seat.is_done and seat.hand.value < self.stands_on:
            card = deck.deal_card()
            seat.hit(card)
            drawn.append(card)

        seat.stand()
        return drawn

    def __repr__(self) -> str:
        return f"StandThresholdPolicy(stands_on={self.stands_on})"


@dataclass
class Participant:
    """
    A seat at the table.

    Players and the dealer share this shape; the dealer seat is the one
    carrying a policy.
    """

    name: str
    hand: Hand = field(default_factory=Hand)
    standing: bool = False
    busted: bool = False
    policy: DealerPolicy | None = None

    @property
    def is_dealer(self) -> bool:
        """Check if this seat plays automatically."""
        return self.policy is not None

    @property
    def is_done(self) -> bool:
        """Check if the seat can take no more cards."""
        return self.standing or self.busted

    @property
    def value(self) -> int:
        """Current value of the face-up cards."""
        return self.hand.value

    def hit(self, card: Card) -> bool:
        """
        Take a card unless standing or busted.

        Returns:
            True if the card was added to the hand
        """
        if self.is_done:
            return False

        self.hand.add_card(card)
        if self.hand.value > BUST_LIMIT:
            self.busted = True
        return True

    def stand(self) -> None:
        """End this seat's turn."""
        self.standing = True

    def reset(self) -> None:
        """Start a new round with an empty hand."""
        self.hand = Hand()
        self.standing = False
        self.busted = False

    def auto_play(self, deck: CardSource) -> list[Card]:
        """Run the attached policy against the deck."""
        if self.policy is None:
            raise ValueError(f"{self.name} has no automatic-play policy")
        return self.policy.play(self, deck)

    def __str__(self) -> str:
        return f"{self.name}: {self.hand}"


def make_dealer(name: str = "Dealer", stands_on: int = 16) -> Participant:
    """Create the dealer seat with the standard threshold policy."""
    return Participant(name=name, policy=StandThresholdPolicy(stands_on))
