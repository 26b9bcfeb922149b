"""Round state enumeration."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: READY → DEALING → SCORING → COMPLETE
    """

    # Deck built, nothing dealt yet
    READY = auto()

    # Cards being dealt
    DEALING = auto()

    # Hand values being compared
    SCORING = auto()

    # Winner declared
    COMPLETE = auto()

    def __str__(self) -> str:
        return self.name.title()


# Valid state transitions
VALID_TRANSITIONS: dict[RoundState, list[RoundState]] = {
    RoundState.READY: [RoundState.DEALING],
    RoundState.DEALING: [RoundState.SCORING],
    RoundState.SCORING: [RoundState.COMPLETE],
    RoundState.COMPLETE: [],  # Terminal state
}


def is_valid_transition(from_state: RoundState, to_state: RoundState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
