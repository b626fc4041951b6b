"""Shared builders for blackjack engine tests."""

from hypothesis import strategies as st

from twentyone.cards import Card, Rank, Suit
from twentyone.hand import Hand


def make_hand(*cards: str) -> Hand:
    """Build a hand from card strings; a trailing '*' deals the card face down."""
    hand = Hand()
    for s in cards:
        card = Card.from_string(s.rstrip("*"))
        if s.endswith("*"):
            card.face_up = False
        hand.add_card(card)
    return hand


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def hand_strategy(draw, min_cards=1, max_cards=8):
    """Generate a random hand of face-up cards."""
    cards = draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards))
    hand = Hand()
    for card in cards:
        hand.add_card(card)
    return hand
