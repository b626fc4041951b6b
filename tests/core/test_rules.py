"""Tests for table rules."""

import pytest

from twentyone.rules import TableRules


class TestTableRules:
    """Tests for the TableRules dataclass."""

    def test_defaults(self):
        rules = TableRules()
        assert rules.dealer_stands_on == 16
        assert rules.min_players == 1
        assert rules.max_players == 4
        assert rules.dealer_name == "Dealer"
        assert rules.auto_advance_on_21

    def test_frozen(self):
        rules = TableRules()
        with pytest.raises(AttributeError):
            rules.max_players = 6

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"min_players": 0},
            {"min_players": 3, "max_players": 2},
            {"dealer_stands_on": 1},
            {"dealer_stands_on": 22},
            {"dealer_name": "  "},
        ],
    )
    def test_invalid_rules_rejected(self, kwargs):
        with pytest.raises(ValueError):
            TableRules(**kwargs)

    def test_player_count_limits(self):
        rules = TableRules()
        rules.validate_player_count(1)
        rules.validate_player_count(4)
        with pytest.raises(ValueError, match="At least"):
            rules.validate_player_count(0)
        with pytest.raises(ValueError, match="At most"):
            rules.validate_player_count(5)
