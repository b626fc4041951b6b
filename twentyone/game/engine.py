"""Blackjack round engine with state machine."""

import logging
from random import Random
from typing import Callable, Sequence

from transitions import Machine

from twentyone.cards import Card, Deck
from twentyone.hand import BUST_LIMIT
from twentyone.participant import Participant, make_dealer
from twentyone.rules import TableRules
from twentyone.game.events import EventEmitter, EventType, GameEvent
from twentyone.game.outcome import Outcome, evaluate_outcome
from twentyone.game.state import GameState

logger = logging.getLogger(__name__)


class BlackjackGame:
    """
    One table of players against a dealer, round by round.

    This is the core game logic, completely UI-agnostic. Commands that do
    not apply in the current state are ignored: they return False and emit
    an INVALID_ACTION event instead of raising.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "players_finished", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "dealer_finished", "source": "dealer_turn", "dest": "game_over"},
        {"trigger": "restart", "source": "*", "dest": "player_turn"},
    ]

    def __init__(
        self,
        player_names: Sequence[str],
        rules: TableRules | None = None,
        rng: Random | None = None,
        deck: Deck | None = None,
    ) -> None:
        """
        Seat the players and deal the first round.

        Args:
            player_names: One name per seat, in turn order; blank names become "Player N"
            rules: Table rules (uses defaults if not provided)
            rng: Random number generator for reproducible games
            deck: Deck to deal from as-is; a new shuffled deck is built if omitted

        Raises:
            ValueError: If the number of players is outside the table limits
        """
        self.rules = rules or TableRules()
        names = list(player_names)
        self.rules.validate_player_count(len(names))

        self._rng = rng or Random()
        if deck is None:
            deck = Deck(rng=self._rng)
            deck.shuffle()
        self.deck = deck

        self._players = tuple(
            Participant(name=name.strip() or f"Player {seat}")
            for seat, name in enumerate(names, start=1)
        )
        self.dealer = make_dealer(self.rules.dealer_name, self.rules.dealer_stands_on)
        self.current_player_index = 0
        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="player_turn",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

        self._deal_initial_cards()

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    @property
    def players(self) -> tuple[Participant, ...]:
        """Players in turn order."""
        return self._players

    @property
    def participants(self) -> tuple[Participant, ...]:
        """Players in turn order, then the dealer."""
        return self._players + (self.dealer,)

    @property
    def current_player(self) -> Participant | None:
        """The player whose turn it is, or None outside PLAYER_TURN."""
        if self.state != GameState.PLAYER_TURN:
            return None
        return self._players[self.current_player_index]

    @property
    def is_over(self) -> bool:
        return self.state == GameState.GAME_OVER

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def _deal_initial_cards(self) -> None:
        """Two cards to each player in seat order, then the dealer's up card and hole card."""
        for player in self._players:
            self._deal_card_to(player)
            self._deal_card_to(player)

        self._deal_card_to(self.dealer)
        self._deal_card_to(self.dealer, face_up=False)

        self.events.emit_new(
            EventType.ROUND_STARTED,
            players=[p.name for p in self._players],
            dealer_showing=self.dealer.value,
        )
        logger.debug(
            "Round started: %s vs %s showing %d",
            ", ".join(p.name for p in self._players),
            self.dealer.name,
            self.dealer.value,
        )

    def _draw(self) -> Card:
        """Deal from the deck, reporting an automatic reshuffle."""
        reshuffles = self.deck.reshuffle_count
        card = self.deck.deal_card()
        self._report_reshuffles(reshuffles)
        return card

    def _report_reshuffles(self, before: int) -> None:
        if self.deck.reshuffle_count != before:
            self.events.emit_new(EventType.DECK_RESHUFFLED, reshuffles=self.deck.reshuffle_count)

    def _deal_card_to(self, seat: Participant, face_up: bool = True) -> Card:
        """Deal a card to a seat, face up unless told otherwise."""
        card = self._draw()
        card.face_up = face_up
        seat.hit(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            seat=seat.name,
            hand_value=seat.value,
        )
        return card

    def _ignore(self, command: str) -> bool:
        """Report a command that does not apply in the current state."""
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=f"Cannot {command} in current state",
            state=self.state.name,
        )
        return False

    def player_hit(self) -> bool:
        """
        Current player takes a card.

        The turn passes on automatically when the player busts or reaches 21.

        Returns:
            True if a card was dealt
        """
        player = self.current_player
        if player is None:
            return self._ignore("hit")

        self._deal_card_to(player)
        self.events.emit_new(EventType.PLAYER_HIT, player=player.name, hand_value=player.value)

        if player.busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, player=player.name, hand_value=player.value)
            self._advance_turn()
        elif self.rules.auto_advance_on_21 and player.value == BUST_LIMIT:
            self._advance_turn()
        return True

    def player_stand(self) -> bool:
        """
        Current player stands and the turn passes on.

        Returns:
            True if the stand was accepted
        """
        player = self.current_player
        if player is None:
            return self._ignore("stand")

        player.stand()
        self.events.emit_new(EventType.PLAYER_STAND, player=player.name, hand_value=player.value)
        self._advance_turn()
        return True

    def _advance_turn(self) -> None:
        """Move to the next player, or play the dealer when everyone is done."""
        self.current_player_index += 1

        if self.current_player_index >= len(self._players):
            self.players_finished()
            self._play_dealer()
            return

        self.events.emit_new(
            EventType.TURN_ADVANCED,
            player=self._players[self.current_player_index].name,
            index=self.current_player_index,
        )
        logger.debug("Turn passed to %s", self._players[self.current_player_index].name)

    def _play_dealer(self) -> None:
        """Dealer plays their hand and the round ends."""
        hole_hidden = self.dealer.hand.has_hidden_cards
        reshuffles = self.deck.reshuffle_count
        drawn = self.dealer.auto_play(self.deck)
        self.dealer_finished()
        self._report_reshuffles(reshuffles)

        if hole_hidden:
            self.events.emit_new(
                EventType.DEALER_REVEALS,
                card=str(self.dealer.hand.cards[1]) if len(self.dealer.hand) > 1 else None,
            )
        for card in drawn:
            self.events.emit_new(EventType.DEALER_HITS, card=str(card))

        if self.dealer.busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer.value)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer.value)

        outcomes = self.determine_winners()
        self.events.emit_new(
            EventType.ROUND_ENDED,
            outcomes=[outcome.to_dict() for outcome in outcomes],
        )
        logger.info("Round ended: %s", "; ".join(o.message for o in outcomes))

    def determine_winners(self) -> list[Outcome]:
        """
        Evaluate every player against the dealer.

        Returns:
            One outcome per player in seat order, or an empty list while the
            round is still in progress
        """
        if self.state != GameState.GAME_OVER:
            return []
        return [evaluate_outcome(player, self.dealer) for player in self._players]

    def reset(self) -> None:
        """Start a new round at the same table with a fresh shuffled deck."""
        self.events.clear_history()
        self.deck.reset()
        self.deck.shuffle()
        for seat in self.participants:
            seat.reset()
        self.current_player_index = 0
        self.restart()
        self._deal_initial_cards()

    def status_lines(self) -> list[str]:
        """Short status text: whose turn it is, or the results once the round is over."""
        lines = []
        player = self.current_player
        if player is not None:
            lines.append(f"Current turn: {player.name}")
        if self.is_over:
            lines.extend(outcome.message for outcome in self.determine_winners())
        return lines

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.current_player is not None

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.state == GameState.PLAYER_TURN
