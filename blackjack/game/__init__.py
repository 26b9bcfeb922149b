"""Round engine and state management."""

from blackjack.game.events import EventEmitter, GameEvent, EventType
from blackjack.game.state import RoundState
from blackjack.game.engine import BlackjackRound, RoundResult

__all__ = [
    "EventEmitter",
    "GameEvent",
    "EventType",
    "RoundState",
    "BlackjackRound",
    "RoundResult",
]
