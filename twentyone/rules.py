"""Table rule constants."""

from dataclasses import dataclass

from twentyone.hand import BUST_LIMIT


@dataclass(frozen=True)
class TableRules:
    """
    Blackjack table rules configuration.

    The defaults describe the house game: the dealer hits below 16 and the
    table seats one to four players.
    """

    # Dealer hits while the revealed hand is below this value
    dealer_stands_on: int = 16

    # Seats
    min_players: int = 1
    max_players: int = 4

    dealer_name: str = "Dealer"

    # A player drawing to exactly 21 ends their turn without standing
    auto_advance_on_21: bool = True

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if self.min_players < 1:
            raise ValueError("min_players must be at least 1")
        if self.max_players < self.min_players:
            raise ValueError("max_players must not be less than min_players")
        if not 1 < self.dealer_stands_on <= BUST_LIMIT:
            raise ValueError(f"dealer_stands_on must be between 2 and {BUST_LIMIT}")
        if not self.dealer_name.strip():
            raise ValueError("dealer_name must not be blank")

    def validate_player_count(self, count: int) -> None:
        """Raise ValueError if a table cannot seat this many players."""
        if count < self.min_players:
            raise ValueError(
                f"At least {self.min_players} player(s) required, got {count}"
            )
        if count > self.max_players:
            raise ValueError(
                f"At most {self.max_players} players allowed, got {count}"
            )
