"""Exceptions raised by the blackjack round.

Running out of cards is not an error for the deck itself (draw() returns
None); it only becomes one when a caller tries to put that missing card
into a hand.
"""


class BlackjackError(Exception):
    """Base class for blackjack errors."""


class DealError(BlackjackError):
    """A card could not be dealt into a hand."""


class EmptyDeckError(DealError):
    """A hand was dealt a card from an exhausted deck."""


class RoundStateError(BlackjackError):
    """A round operation was attempted in the wrong state."""
