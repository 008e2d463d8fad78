from decimal import Decimal

import pytest

from debt_planner.engine.strategy import order_debts, parse_strategy
from debt_planner.engine.validation import ValidationError
from debt_planner.models.debt import Debt, Strategy


def make_debt(debt_id: str, balance: str, apr: str, minimum: str = "50") -> Debt:
    return Debt(
        id=debt_id,
        name=debt_id.title(),
        balance=Decimal(balance),
        apr=Decimal(apr),
        minimum_payment=Decimal(minimum),
    )


class TestParseStrategy:
    def test_enum_passthrough(self):
        assert parse_strategy(Strategy.SNOWBALL) is Strategy.SNOWBALL

    def test_string(self):
        assert parse_strategy("Avalanche") is Strategy.AVALANCHE

    def test_unknown(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_strategy("highest-interest")
        assert exc_info.value.field == "strategy"


class TestOrderDebts:
    def test_avalanche_highest_apr_first(self, sample_debts):
        assert order_debts(sample_debts, Strategy.AVALANCHE) == ["cc", "car", "student"]

    def test_snowball_smallest_balance_first(self):
        debts = [
            make_debt("big", "9000", "24"),
            make_debt("small", "500", "3"),
            make_debt("mid", "2000", "12"),
        ]
        assert order_debts(debts, Strategy.SNOWBALL) == ["small", "mid", "big"]

    def test_avalanche_ties_keep_input_order(self):
        debts = [
            make_debt("first", "1000", "15"),
            make_debt("higher", "1000", "20"),
            make_debt("second", "500", "15"),
        ]
        assert order_debts(debts, "avalanche") == ["higher", "first", "second"]

    def test_snowball_ties_keep_input_order(self):
        debts = [
            make_debt("a", "1000", "5"),
            make_debt("b", "1000", "25"),
            make_debt("c", "100", "1"),
        ]
        assert order_debts(debts, "snowball") == ["c", "a", "b"]

    def test_reversed_input_flips_tie_break(self):
        debts = [make_debt("a", "1000", "15"), make_debt("b", "2000", "15")]
        assert order_debts(debts, "avalanche") == ["a", "b"]
        assert order_debts(list(reversed(debts)), "avalanche") == ["b", "a"]

    def test_empty(self):
        assert order_debts([], Strategy.AVALANCHE) == []
