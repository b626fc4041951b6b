"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from typing import Iterator

from twentyone.cards import Card

BUST_LIMIT = 21


@dataclass
class Hand:
    """
    A blackjack hand with value calculation.

    Only face-up cards count toward the value, so a dealer's hole card has
    no effect on totals or bust checks until it is revealed.
    """

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def calculate_value(self) -> int:
        """
        Calculate the best value of the face-up cards.

        Aces count 11 each; while the total is over 21 one ace at a time is
        dropped to 1.
        """
        total = 0
        aces = 0

        for card in self.visible_cards:
            total += card.value
            if card.is_ace:
                aces += 1

        while total > BUST_LIMIT and aces > 0:
            total -= 10
            aces -= 1

        return total

    @property
    def value(self) -> int:
        """Current value of the face-up cards."""
        return self.calculate_value()

    def reveal_all(self) -> None:
        """Turn every face-down card face up."""
        for card in self.cards:
            if not card.face_up:
                card.flip()

    @property
    def visible_cards(self) -> list[Card]:
        """Face-up cards in deal order."""
        return [card for card in self.cards if card.face_up]

    @property
    def has_hidden_cards(self) -> bool:
        """Check if any card is face down."""
        return any(not card.face_up for card in self.cards)

    @property
    def is_soft(self) -> bool:
        """
        Check if the hand is soft (has an ace counted as 11).

        Considers face-up cards only, like the value.
        """
        visible = self.visible_cards
        if not any(card.is_ace for card in visible):
            return False

        total_hard = sum(1 if card.is_ace else card.value for card in visible)
        return total_hard + 10 <= BUST_LIMIT

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > BUST_LIMIT

    @property
    def num_cards(self) -> int:
        """Return the number of cards in the hand."""
        return len(self.cards)

    def copy(self) -> "Hand":
        """Return a hand holding independent copies of these cards."""
        return Hand([card.copy() for card in self.cards])

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) if card.face_up else "??" for card in self.cards)
        value_str = f"({self.value})"
        if self.is_soft:
            value_str = f"(soft {self.value})"
        if self.is_busted:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"
