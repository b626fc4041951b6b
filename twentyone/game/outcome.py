"""Round outcomes: comparing each player against the dealer."""

from dataclasses import dataclass
from enum import Enum

from twentyone.participant import Participant


class OutcomeKind(Enum):
    """How a player's round ended."""

    BUST = "bust"
    DEALER_BUST = "dealer_bust"
    WIN = "win"
    LOSE = "lose"
    PUSH = "push"


@dataclass(frozen=True)
class Outcome:
    """Result for one player."""

    player_name: str
    kind: OutcomeKind
    player_value: int
    dealer_value: int
    dealer_name: str = "Dealer"

    @property
    def player_wins(self) -> bool:
        return self.kind in (OutcomeKind.WIN, OutcomeKind.DEALER_BUST)

    @property
    def is_push(self) -> bool:
        return self.kind == OutcomeKind.PUSH

    @property
    def message(self) -> str:
        """One-line description suitable for a results panel."""
        name, dealer = self.player_name, self.dealer_name
        p, d = self.player_value, self.dealer_value
        if self.kind == OutcomeKind.BUST:
            return f"{name} busted! {dealer} wins."
        if self.kind == OutcomeKind.DEALER_BUST:
            return f"{dealer} busted! {name} wins."
        if self.kind == OutcomeKind.WIN:
            return f"{name} wins! {p} vs {d}"
        if self.kind == OutcomeKind.LOSE:
            return f"{dealer} wins against {name}! {d} vs {p}"
        return f"{name} pushes with {dealer.lower()}. Both have {p}"

    def to_dict(self) -> dict:
        return {
            "player_name": self.player_name,
            "outcome": self.kind.value,
            "player_value": self.player_value,
            "dealer_value": self.dealer_value,
            "message": self.message,
        }

    def __str__(self) -> str:
        return self.message


def evaluate_outcome(player: Participant, dealer: Participant) -> Outcome:
    """
    Compare a player against the dealer's final hand.

    Bust checks come before the value comparison: a busted player loses even
    if the dealer also busted.
    """
    player_value = player.hand.value
    dealer_value = dealer.hand.value

    if player.busted:
        kind = OutcomeKind.BUST
    elif dealer.busted:
        kind = OutcomeKind.DEALER_BUST
    elif player_value > dealer_value:
        kind = OutcomeKind.WIN
    elif player_value < dealer_value:
        kind = OutcomeKind.LOSE
    else:
        kind = OutcomeKind.PUSH

    return Outcome(
        player_name=player.name,
        kind=kind,
        player_value=player_value,
        dealer_value=dealer_value,
        dealer_name=dealer.name,
    )
