"""One month of payment allocation across a debt set.

Two passes in strategy order: every open debt gets its minimum, then the
remaining capacity waterfalls onto debts by priority. Extra capacity is
never taken out of another debt's minimum.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal

from debt_planner.engine.amortization import amortize_one_debt, round_money, ZERO
from debt_planner.models.debt import Debt
from debt_planner.models.results import MonthlyAllocation


@dataclass(frozen=True)
class MonthAllocation:
    balances: dict[str, Decimal]  # End-of-month working balances
    allocations: tuple[MonthlyAllocation, ...]  # Input order
    unallocated: Decimal


def payment_capacity(debts: Sequence[Debt], extra_monthly_payment: Decimal) -> Decimal:
    """Fixed monthly budget: every minimum (paid-off debts included) plus extra."""
    return round_money(sum((d.minimum_payment for d in debts), ZERO) + extra_monthly_payment)


def allocate_month(
    balances: Mapping[str, Decimal],
    order: Sequence[str],
    debts: Sequence[Debt],
    extra_monthly_payment: Decimal,
) -> MonthAllocation:
    """Allocate one month's payment capacity.

    Args:
        balances: Working balance per debt id at the start of the month
        order: Strategy priority (debt ids), fixed for the run
        debts: Validated debt records, in input order
        extra_monthly_payment: Capacity on top of the minimums
    """
    by_id = {d.id: d for d in debts}
    new_balances = dict(balances)
    interest: dict[str, Decimal] = {}
    minimum_applied: dict[str, Decimal] = {}
    extra_applied: dict[str, Decimal] = {d.id: ZERO for d in debts}

    pool = payment_capacity(debts, extra_monthly_payment)

    # Minimum pass
    for debt_id in order:
        debt = by_id[debt_id]
        accrued, applied, remaining = amortize_one_debt(
            new_balances[debt_id], debt.apr, debt.minimum_payment
        )
        interest[debt_id] = accrued
        minimum_applied[debt_id] = applied
        new_balances[debt_id] = remaining
        pool -= applied

    # Waterfall pass
    for debt_id in order:
        if pool <= 0:
            break
        remaining = new_balances[debt_id]
        if remaining <= 0:
            continue
        extra = min(pool, remaining)
        new_balances[debt_id] = round_money(remaining - extra)
        extra_applied[debt_id] = extra
        pool -= extra

    allocations = tuple(
        MonthlyAllocation(
            debt_id=d.id,
            interest_accrued=interest[d.id],
            minimum_applied=minimum_applied[d.id],
            extra_applied=extra_applied[d.id],
            remaining_balance=new_balances[d.id],
        )
        for d in debts
    )
    return MonthAllocation(
        balances=new_balances,
        allocations=allocations,
        unallocated=round_money(max(pool, ZERO)),
    )
