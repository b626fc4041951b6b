"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Game state machine states.

    Flow: PLAYER_TURN → DEALER_TURN → GAME_OVER, and back to PLAYER_TURN on reset.
    """

    # Players act in seat order
    PLAYER_TURN = auto()

    # Dealer plays automatically
    DEALER_TURN = auto()

    # Round finished, outcomes available
    GAME_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[GameState, list[GameState]] = {
    GameState.PLAYER_TURN: [GameState.DEALER_TURN, GameState.PLAYER_TURN],
    GameState.DEALER_TURN: [GameState.GAME_OVER, GameState.PLAYER_TURN],
    GameState.GAME_OVER: [GameState.PLAYER_TURN],  # reset only
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
