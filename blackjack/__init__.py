"""Single-round blackjack: deck, hands, scoring and winner - no UI."""

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.exceptions import BlackjackError, DealError, EmptyDeckError, RoundStateError
from blackjack.hand import Hand, Winner, determine_winner, evaluate_hands

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Hand",
    "Winner",
    "determine_winner",
    "evaluate_hands",
    "BlackjackError",
    "DealError",
    "EmptyDeckError",
    "RoundStateError",
]
