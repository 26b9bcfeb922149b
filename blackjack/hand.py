"""Hand evaluation and winner selection."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from blackjack.cards import Card
from blackjack.exceptions import EmptyDeckError

BUST_LIMIT = 21
ACE_REDUCTION = 10


@dataclass
class Hand:
    """A blackjack hand with value calculation."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card | None) -> None:
        """
        Add a card to the hand.

        Raises:
            EmptyDeckError: if card is None (the deck ran out)
            TypeError: if card is not a Card
        """
        if card is None:
            raise EmptyDeckError("Cannot add a missing card; the deck is empty")
        if not isinstance(card, Card):
            raise TypeError(f"Expected a Card, got {type(card).__name__}")
        self.cards.append(card)

    def _score(self) -> tuple[int, int]:
        """Return the hand total and the number of aces still counted as 11."""
        total = 0
        aces = 0

        for card in self.cards:
            if card.is_ace:
                aces += 1
            total += card.value

        # Reduce aces from 11 to 1 as needed
        while total > BUST_LIMIT and aces > 0:
            total -= ACE_REDUCTION
            aces -= 1

        return total, aces

    @property
    def value(self) -> int:
        """
        Calculate the hand value.

        Aces start at 11 and are dropped to 1 one at a time while the total
        is over 21. The result is not capped, so a bust keeps its real total.
        """
        return self._score()[0]

    @property
    def is_soft(self) -> bool:
        """Check if the hand still counts an ace as 11."""
        return self._score()[1] > 0

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return len(self.cards) == 2 and self.value == BUST_LIMIT

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > BUST_LIMIT

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = f"({self.value})"
        if self.is_soft:
            value_str = f"(soft {self.value})"
        if self.is_busted:
            value_str = f"(BUST {self.value})"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"


class Winner(Enum):
    """Which side won the round."""

    PLAYER = "player"
    DEALER = "dealer"

    def __str__(self) -> str:
        return self.value.title()


def determine_winner(player_value: int, dealer_value: int) -> Winner:
    """
    Pick the winner from two hand values.

    The dealer has to beat the player outright. Ties go to the player,
    including two busted hands with the same total, and busts are not
    treated specially: a higher total wins even when it is over 21.
    """
    if dealer_value > player_value:
        return Winner.DEALER
    return Winner.PLAYER


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> Winner:
    """Compare player and dealer hands by value."""
    return determine_winner(player_hand.value, dealer_hand.value)
