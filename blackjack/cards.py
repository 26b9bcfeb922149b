"""Rank, Suit, Card and Deck - immutable cards and a single 52-card deck."""

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterator


class Suit(Enum):
    """Card suits, in deck construction order."""

    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"
    SPADES = "♠"

    def __str__(self) -> str:
        return self.glyph

    @property
    def display_name(self) -> str:
        """Return the full suit name, e.g. 'HEARTS'."""
        return self.name

    @property
    def glyph(self) -> str:
        """Return the suit symbol."""
        return self.value


class Rank(Enum):
    """Card ranks from ACE to KING, valued 1 to 13."""

    ACE = 1
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

    def __str__(self) -> str:
        return self.glyph

    @property
    def number(self) -> int:
        """Return the rank number (Ace = 1, King = 13). Not a scoring value."""
        return self.value

    @property
    def display_name(self) -> str:
        """Return the full rank name, e.g. 'QUEEN'."""
        return self.name

    @property
    def glyph(self) -> str:
        """Return the one-character rank symbol. Ten is written as '0'."""
        if self == Rank.TEN:
            return "0"
        if 2 <= self.value <= 9:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, ten and face cards = 10)."""
        if self == Rank.ACE:
            return 11
        return min(self.value, 10)

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


_RANK_CODES = {rank.glyph: rank for rank in Rank} | {"10": Rank.TEN, "T": Rank.TEN}
_SUIT_CODES = {suit.glyph: suit for suit in Suit} | {suit.name[0]: suit for suit in Suit}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def describe(self) -> str:
        """Return the long form, e.g. 'ACE of HEARTS'."""
        return f"{self.rank.display_name} of {self.suit.display_name}"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '0♠', 'AH', '10d' or 'Ts'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        if rank_str not in _RANK_CODES:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_CODES:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANK_CODES[rank_str], _SUIT_CODES[suit_str])


class Deck:
    """A standard 52-card deck, dealt from the end of the list."""

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize a new, unshuffled deck.

        Args:
            rng: Random number generator used by shuffle()
        """
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Reset deck to all 52 cards in order."""
        self._cards = [Card(rank, suit) for suit in Suit for rank in Rank]

    def shuffle(self, rng: Random | None = None) -> None:
        """Shuffle the remaining cards in place."""
        (rng or self._rng).shuffle(self._cards)

    def draw(self) -> Card | None:
        """Draw the top card, or return None if the deck is empty."""
        if not self._cards:
            return None
        return self._cards.pop()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards(self) -> tuple[Card, ...]:
        """Return a snapshot of the remaining cards."""
        return tuple(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)
