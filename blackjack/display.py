"""Text formatting for cards and the end-of-round report."""

from typing import Iterable

from blackjack.cards import Card
from blackjack.game.engine import RoundResult
from blackjack.hand import Winner

WIN_MESSAGES = {
    Winner.DEALER: "Dealer wins. Boo!",
    Winner.PLAYER: "Player wins. Yae!",
}


def format_cards(cards: Iterable[Card]) -> str:
    """Format cards compactly, e.g. 'A♥, 0♠, '."""
    return "".join(f"{card}, " for card in cards)


def format_cards_verbose(cards: Iterable[Card]) -> str:
    """Format cards in long form, e.g. 'ACE of HEARTS, TEN of SPADES, '."""
    return "".join(f"{card.describe()}, " for card in cards)


class RoundReport:
    """Render a finished round for the terminal."""

    def __init__(self, show_verbose_deck: bool = False):
        """
        Initialize the report.

        Args:
            show_verbose_deck: Also list the remaining deck in long form
        """
        self.show_verbose_deck = show_verbose_deck

    def render(self, result: RoundResult) -> str:
        lines = [
            f"Dealer hand: {format_cards(result.dealer_hand)}value: {result.dealer_value}",
            f"Player hand: {format_cards(result.player_hand)}value: {result.player_value}",
            WIN_MESSAGES[result.winner],
            f"What's left in the deck of {result.cards_remaining} cards",
            format_cards(result.remaining),
        ]
        if self.show_verbose_deck:
            lines.append(format_cards_verbose(result.remaining))
        return "\n".join(lines)

    def print_round(self, result: RoundResult) -> None:
        """Print the report to stdout."""
        print(self.render(result))
