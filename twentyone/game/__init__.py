"""Game engine and state management."""

from twentyone.game.events import GameEvent, EventType, EventEmitter
from twentyone.game.state import GameState
from twentyone.game.outcome import Outcome, OutcomeKind, evaluate_outcome
from twentyone.game.engine import BlackjackGame
from twentyone.game.snapshot import CardView, SeatView, TableSnapshot

__all__ = [
    "GameEvent",
    "EventType",
    "EventEmitter",
    "GameState",
    "Outcome",
    "OutcomeKind",
    "evaluate_outcome",
    "BlackjackGame",
    "CardView",
    "SeatView",
    "TableSnapshot",
]
