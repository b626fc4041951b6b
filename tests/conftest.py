"""Pytest fixtures for blackjack engine tests."""

import pytest
from random import Random

from twentyone.cards import Deck
from twentyone.hand import Hand
from twentyone.participant import Participant, make_dealer
from twentyone.game import BlackjackGame

from helpers import make_hand


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10S", "6H")


@pytest.fixture
def player():
    """A player seat with no cards."""
    return Participant(name="Alice")


@pytest.fixture
def dealer():
    """A dealer seat with the standard policy."""
    return make_dealer()


@pytest.fixture
def alice_deck(rng):
    """
    Deck stacked for a one-player round.

    Alice 10+6, dealer 9 up and 2 down, Alice's hit 5, dealer's hit 6.
    """
    return Deck.stacked(["10S", "6H", "9C", "2D", "5H", "6C"], rng=rng)


@pytest.fixture
def alice_game(alice_deck):
    """One-player game dealt from the stacked deck."""
    return BlackjackGame(["Alice"], deck=alice_deck)


@pytest.fixture
def two_player_game(rng):
    """A new two-player game instance."""
    return BlackjackGame(["Alice", "Bob"], rng=rng)

