"""Read-only snapshots of a table for the presentation layer."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from twentyone.cards import Card
from twentyone.game.outcome import Outcome
from twentyone.game.state import GameState
from twentyone.participant import Participant

if TYPE_CHECKING:
    from twentyone.game.engine import BlackjackGame


@dataclass(frozen=True)
class CardView:
    """A card as the table shows it."""

    rank: str  # "2".."10", "jack", "queen", "king", "ace"
    suit: str  # "hearts", "diamonds", "clubs", "spades"
    face_up: bool

    @classmethod
    def from_card(cls, card: Card) -> "CardView":
        return cls(rank=card.rank.label, suit=card.suit.value, face_up=card.face_up)

    def to_dict(self) -> dict[str, Any]:
        return {"rank": self.rank, "suit": self.suit, "face_up": self.face_up}


@dataclass(frozen=True)
class SeatView:
    """One seat: player or dealer."""

    name: str
    cards: tuple[CardView, ...]
    value: int
    standing: bool
    busted: bool
    is_dealer: bool
    is_current: bool

    @classmethod
    def from_participant(cls, seat: Participant, is_current: bool = False) -> "SeatView":
        return cls(
            name=seat.name,
            cards=tuple(CardView.from_card(card) for card in seat.hand),
            value=seat.value,
            standing=seat.standing,
            busted=seat.busted,
            is_dealer=seat.is_dealer,
            is_current=is_current,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "cards": [card.to_dict() for card in self.cards],
            "value": self.value,
            "standing": self.standing,
            "busted": self.busted,
            "is_dealer": self.is_dealer,
            "is_current": self.is_current,
        }


@dataclass(frozen=True)
class TableSnapshot:
    """
    Snapshot of game state for rendering.

    Every field is a copy; holding a snapshot never exposes live cards.
    """

    state: GameState
    players: tuple[SeatView, ...]
    dealer: SeatView
    current_player: str | None
    outcomes: tuple[Outcome, ...]

    @classmethod
    def capture(cls, game: "BlackjackGame") -> "TableSnapshot":
        current = game.current_player
        return cls(
            state=game.state,
            players=tuple(
                SeatView.from_participant(player, is_current=player is current)
                for player in game.players
            ),
            dealer=SeatView.from_participant(game.dealer),
            current_player=current.name if current else None,
            outcomes=tuple(game.determine_winners()),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "state": self.state.name,
            "players": [player.to_dict() for player in self.players],
            "dealer": self.dealer.to_dict(),
            "current_player": self.current_player,
            "outcomes": [outcome.to_dict() for outcome in self.outcomes],
        }
