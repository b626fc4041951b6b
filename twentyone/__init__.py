"""Blackjack round engine - 100% UI-agnostic."""

from twentyone.cards import Card, Deck, Rank, Suit
from twentyone.hand import Hand
from twentyone.participant import DealerPolicy, Participant, StandThresholdPolicy
from twentyone.rules import TableRules

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Hand",
    "DealerPolicy",
    "Participant",
    "StandThresholdPolicy",
    "TableRules",
]
