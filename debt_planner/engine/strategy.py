"""Repayment strategy ordering.

The order is computed once per run from the original debt records and never
changes while the run progresses.
"""

from collections.abc import Sequence

from debt_planner.engine.validation import ValidationError
from debt_planner.models.debt import Debt, Strategy


def parse_strategy(value: Strategy | str) -> Strategy:
    if isinstance(value, Strategy):
        return value
    try:
        return Strategy(str(value).strip().lower())
    except ValueError:
        raise ValidationError(
            f"Unknown strategy {value!r}; expected 'avalanche' or 'snowball'",
            field="strategy",
        )


def order_debts(debts: Sequence[Debt], strategy: Strategy | str) -> list[str]:
    """Return debt ids in waterfall priority order.

    Avalanche: APR descending. Snowball: original balance ascending.
    sorted() is stable, so ties keep input order.
    """
    strategy = parse_strategy(strategy)
    if strategy is Strategy.AVALANCHE:
        ranked = sorted(debts, key=lambda d: d.apr, reverse=True)
    else:
        ranked = sorted(debts, key=lambda d: d.balance)
    return [d.id for d in ranked]
