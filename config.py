"""Configuration management with environment variable support."""

import logging
import os
from dataclasses import dataclass, field
from random import Random

from twentyone.game import BlackjackGame
from twentyone.rules import TableRules


def _parse_player_names() -> list[str]:
    """Parse BLACKJACK_PLAYERS environment variable."""
    names = os.getenv("BLACKJACK_PLAYERS", "Player 1")
    return [n.strip() for n in names.split(",") if n.strip()]


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED environment variable."""
    seed = os.getenv("BLACKJACK_SEED")
    if seed is None or not seed.strip():
        return None
    try:
        return int(seed)
    except ValueError:
        raise ValueError(f"BLACKJACK_SEED must be an integer, got {seed!r}") from None


@dataclass(frozen=True)
class GameConfig:
    """Default game configuration."""

    player_names: list[str] = field(default_factory=_parse_player_names)
    seed: int | None = field(default_factory=_parse_seed)
    dealer_stands_on: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_DEALER_STANDS_ON", "16"))
    )
    max_players: int = 4
    dealer_name: str = "Dealer"

    def rules(self) -> TableRules:
        """Build the table rules."""
        return TableRules(
            dealer_stands_on=self.dealer_stands_on,
            max_players=self.max_players,
            dealer_name=self.dealer_name,
        )

    def rng(self) -> Random:
        """Build the shuffle source, seeded when a seed is configured."""
        return Random(self.seed)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())

    game: GameConfig = field(default_factory=GameConfig)

    @property
    def effective_log_level(self) -> int:
        """Logging level, forced to DEBUG in debug mode."""
        if self.debug:
            return logging.DEBUG
        level = logging.getLevelName(self.log_level)
        if not isinstance(level, int):
            raise ValueError(f"Unknown LOG_LEVEL: {self.log_level}")
        return level


def configure_logging(app_config: AppConfig | None = None) -> None:
    """Install a stream handler on the root logger at the configured level."""
    app_config = app_config or config
    logging.basicConfig(
        level=app_config.effective_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("twentyone").setLevel(app_config.effective_log_level)


def new_game(app_config: AppConfig | None = None) -> BlackjackGame:
    """Create a game from configuration."""
    app_config = app_config or config
    return BlackjackGame(
        app_config.game.player_names,
        rules=app_config.game.rules(),
        rng=app_config.game.rng(),
    )


# Global configuration instance
config = AppConfig()
