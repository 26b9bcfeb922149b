"""Single-round blackjack engine with state machine."""

import logging
from dataclasses import dataclass
from random import Random
from typing import Callable

from transitions import Machine, MachineError

from blackjack.cards import Card, Deck
from blackjack.exceptions import RoundStateError
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.state import RoundState
from blackjack.hand import Hand, Winner, determine_winner
from config import RoundConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundResult:
    """Outcome of a finished round."""

    player_hand: Hand
    dealer_hand: Hand
    player_value: int
    dealer_value: int
    winner: Winner
    remaining: tuple[Card, ...]

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards left in the deck."""
        return len(self.remaining)


class BlackjackRound:
    """
    One deal-and-compare round between a player and a dealer.

    No hitting or standing: each side gets two cards, both hands are
    scored, and the higher value wins with ties going to the player.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "begin_deal", "source": "ready", "dest": "dealing"},
        {"trigger": "begin_scoring", "source": "dealing", "dest": "scoring"},
        {"trigger": "finish", "source": "scoring", "dest": "complete"},
    ]

    def __init__(
        self,
        deck: Deck | None = None,
        rng: Random | None = None,
        config: RoundConfig | None = None,
    ) -> None:
        """
        Initialize a new round.

        Args:
            deck: Deck to deal from (a fresh deck if not provided)
            rng: Random number generator for the shuffle
            config: Round settings (read from the environment if not provided)
        """
        self.config = config or RoundConfig()
        self.rng = rng or self.config.make_rng()
        self.deck = deck if deck is not None else Deck(rng=self.rng)

        self.player_hand = Hand()
        self.dealer_hand = Hand()
        self.events = EventEmitter()
        self.result: RoundResult | None = None

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="ready",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to round events."""
        self.events.subscribe(handler, event_type)

    def _advance(self, trigger: str) -> None:
        try:
            getattr(self, trigger)()
        except MachineError as exc:
            raise RoundStateError(
                f"Cannot {trigger.replace('_', ' ')} while round is {self.state}"
            ) from exc

    def play(self) -> RoundResult:
        """
        Shuffle, deal, score and declare a winner.

        Raises:
            RoundStateError: if the round has already been played
            EmptyDeckError: if the deck runs out while dealing
        """
        self._advance("begin_deal")
        self.events.emit_new(EventType.ROUND_STARTED, cards_in_deck=len(self.deck))

        if self.config.shuffle:
            self.deck.shuffle(self.rng)
            logger.debug("Shuffled deck of %d cards", len(self.deck))
            self.events.emit_new(EventType.DECK_SHUFFLED, cards_in_deck=len(self.deck))

        self._deal_initial_cards()

        self._advance("begin_scoring")
        player_value = self.player_hand.value
        dealer_value = self.dealer_hand.value
        self.events.emit_new(EventType.HAND_SCORED, hand="player", hand_value=player_value)
        self.events.emit_new(EventType.HAND_SCORED, hand="dealer", hand_value=dealer_value)

        winner = determine_winner(player_value, dealer_value)
        self.events.emit_new(
            EventType.WINNER_DECLARED,
            winner=winner.value,
            player_value=player_value,
            dealer_value=dealer_value,
        )
        logger.info(
            "%s wins: player %d, dealer %d", winner, player_value, dealer_value
        )

        self.result = RoundResult(
            player_hand=self.player_hand,
            dealer_hand=self.dealer_hand,
            player_value=player_value,
            dealer_value=dealer_value,
            winner=winner,
            remaining=self.deck.cards,
        )
        self._advance("finish")
        self.events.emit_new(EventType.ROUND_ENDED, cards_remaining=len(self.deck))
        return self.result

    def _deal_initial_cards(self) -> None:
        """Deal: all player cards first, then all dealer cards."""
        for hand in (self.player_hand, self.dealer_hand):
            for _ in range(self.config.cards_per_hand):
                self._deal_card_to_hand(hand)

    def _deal_card_to_hand(self, hand: Hand) -> Card:
        """Deal a card to a hand."""
        card = self.deck.draw()
        hand.add_card(card)
        name = "dealer" if hand is self.dealer_hand else "player"
        logger.debug("Dealt %r to %s", card, name)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card),
            hand=name,
            hand_value=hand.value,
        )
        return card  # type: ignore[return-value]
