"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Game state machine states.

    Flow: START → PLAYER_ACTION (loop) → DEALER_OPEN → DEALER_ACTION (loop) → END
    The player busting jumps straight from PLAYER_ACTION to END.
    """

    # Deck built, nothing dealt yet
    START = auto()

    # Player decides hit or stand
    PLAYER_ACTION = auto()

    # Dealer turns the hole card over
    DEALER_OPEN = auto()

    # Dealer plays by policy
    DEALER_ACTION = auto()

    # Result decided
    END = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[GameState, list[GameState]] = {
    GameState.START: [GameState.PLAYER_ACTION],
    GameState.PLAYER_ACTION: [GameState.PLAYER_ACTION, GameState.DEALER_OPEN, GameState.END],
    GameState.DEALER_OPEN: [GameState.DEALER_ACTION],
    GameState.DEALER_ACTION: [GameState.DEALER_ACTION, GameState.END],
    GameState.END: [],  # Terminal state
}


def is_valid_transition(from_state: GameState, to_state: GameState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
