"""Pytest fixtures for blackjack round tests."""

import pytest
from random import Random

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.hand import Hand
from config import RoundConfig


def make_hand(*ranks: Rank) -> Hand:
    """Build a hand from ranks, cycling through suits."""
    suits = list(Suit)
    hand = Hand()
    for i, rank in enumerate(ranks):
        hand.add_card(Card(rank, suits[i % len(suits)]))
    return hand


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A fresh, unshuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def shuffled_deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def round_config():
    """Round settings that ignore the environment."""
    return RoundConfig(seed=42, shuffle=True, show_verbose_deck=False)


@pytest.fixture
def hand_of():
    """Factory building a hand from ranks."""
    return make_hand


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand (A-K)."""
    return make_hand(Rank.ACE, Rank.KING)


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand(Rank.ACE, Rank.SIX)


@pytest.fixture
def bust_hand():
    """A busted hand (K-Q-2)."""
    return make_hand(Rank.KING, Rank.QUEEN, Rank.TWO)
