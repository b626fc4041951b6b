"""Tests for game states and events."""

from twentyone.game.events import EventEmitter, EventType, GameEvent
from twentyone.game.state import GameState, is_valid_transition


class TestGameState:
    """Tests for the state table."""

    def test_round_flow(self):
        assert is_valid_transition(GameState.PLAYER_TURN, GameState.DEALER_TURN)
        assert is_valid_transition(GameState.DEALER_TURN, GameState.GAME_OVER)

    def test_reset_from_any_state(self):
        for state in GameState:
            assert is_valid_transition(state, GameState.PLAYER_TURN)

    def test_no_shortcuts(self):
        assert not is_valid_transition(GameState.PLAYER_TURN, GameState.GAME_OVER)
        assert not is_valid_transition(GameState.GAME_OVER, GameState.DEALER_TURN)

    def test_str(self):
        assert str(GameState.PLAYER_TURN) == "Player Turn"
        assert str(GameState.GAME_OVER) == "Game Over"


class TestEventEmitter:
    """Tests for event subscription."""

    def test_typed_and_catch_all_handlers(self):
        emitter = EventEmitter()
        typed, everything = [], []
        emitter.subscribe(typed.append, EventType.PLAYER_HIT)
        emitter.subscribe(everything.append)

        emitter.emit_new(EventType.PLAYER_HIT, player="Alice")
        emitter.emit_new(EventType.PLAYER_STAND, player="Alice")

        assert [e.event_type for e in typed] == [EventType.PLAYER_HIT]
        assert len(everything) == 2

    def test_unsubscribe(self):
        emitter = EventEmitter()
        seen = []
        emitter.subscribe(seen.append)
        assert emitter.unsubscribe(seen.append)
        assert not emitter.unsubscribe(seen.append)

        emitter.emit_new(EventType.ROUND_STARTED)
        assert seen == []

    def test_history(self):
        emitter = EventEmitter()
        event = emitter.emit_new(EventType.DEALER_HITS, card="6♣")
        emitter.emit_new(EventType.DEALER_STANDS, hand_value=17)

        assert emitter.history[0] is event
        assert len(emitter.of_type(EventType.DEALER_STANDS)) == 1

        emitter.clear_history()
        assert emitter.history == []

    def test_event_str(self):
        event = GameEvent(EventType.PLAYER_BUSTS, {"player": "Alice"})
        assert str(event) == "PLAYER_BUSTS: {'player': 'Alice'}"
