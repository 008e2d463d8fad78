"""Plan aggregation over a finished ledger.

The ledger is the source of truth: nothing here recomputes balances.
"""

import calendar
from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from debt_planner.models.debt import Debt, SimulationConfig, Strategy
from debt_planner.models.results import DebtPayoff, PayoffPlan, ScheduleRow, SimulationResult

ZERO = Decimal("0")


def add_months(start: date, months: int) -> date:
    """Shift a date forward by whole months, clamping the day to the target month."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def month_date(config: SimulationConfig, month: int | None) -> date | None:
    if config.start_date is None or month is None:
        return None
    return add_months(config.start_date, month)


def summarize(
    debts: Sequence[Debt],
    strategy: Strategy,
    order: Sequence[str],
    result: SimulationResult,
    config: SimulationConfig,
) -> PayoffPlan:
    """Build the immutable PayoffPlan from a finished run."""
    ledger = result.ledger
    payoff_months = result.payoff_months
    converged = result.converged

    interest_by_debt: dict[str, Decimal] = {d.id: ZERO for d in debts}
    paid_by_debt: dict[str, Decimal] = {d.id: ZERO for d in debts}

    for entry in ledger:
        for allocation in entry.allocations:
            interest_by_debt[allocation.debt_id] += allocation.interest_accrued
            paid_by_debt[allocation.debt_id] += allocation.payment_applied

    per_debt = {
        d.id: DebtPayoff(
            debt_id=d.id,
            name=d.name,
            original_balance=d.balance,
            apr=d.apr,
            payoff_month=payoff_months.get(d.id),
            total_interest_paid=interest_by_debt[d.id],
            total_paid=paid_by_debt[d.id],
            payoff_date=month_date(config, payoff_months.get(d.id)),
        )
        for d in debts
    }

    total_payment = sum((e.total_payment for e in ledger), ZERO)
    total_interest = sum((e.total_interest for e in ledger), ZERO)

    return PayoffPlan(
        strategy=strategy,
        converged=converged,
        months=len(ledger),
        total_payment=total_payment,
        total_interest=total_interest,
        per_debt=per_debt,
        ledger=tuple(ledger),
        order=tuple(order),
        payoff_date=month_date(config, len(ledger)) if converged else None,
    )


def debt_schedule(plan: PayoffPlan, debt_id: str) -> list[ScheduleRow]:
    """Amortization rows for one debt, through its payoff month.

    Raises KeyError for an id not in the plan.
    """
    payoff = plan.per_debt[debt_id]
    last_month = payoff.payoff_month if payoff.payoff_month is not None else plan.months

    rows: list[ScheduleRow] = []
    for entry in plan.ledger:
        if entry.month > last_month:
            break
        allocation = entry.allocation_for(debt_id)
        rows.append(ScheduleRow(
            month=entry.month,
            payment=allocation.payment_applied,
            interest=allocation.interest_accrued,
            principal=allocation.principal_paid,
            balance=allocation.remaining_balance,
            date=entry.date,
        ))
    return rows


def yearly_payoff_summary(plan: PayoffPlan) -> list[dict[str, Decimal]]:
    """Aggregate the ledger by plan year.

    Returns list of dicts with keys: year, payment, interest, principal, ending_balance
    """
    yearly: list[dict[str, Decimal]] = []
    year_payment = ZERO
    year_interest = ZERO

    for entry in plan.ledger:
        year_payment += entry.total_payment
        year_interest += entry.total_interest

        if entry.month % 12 == 0 or entry.month == plan.months:
            year_num = (entry.month - 1) // 12 + 1
            yearly.append({
                "year": Decimal(str(year_num)),
                "payment": year_payment,
                "interest": year_interest,
                "principal": year_payment - year_interest,
                "ending_balance": entry.remaining_balance,
            })
            year_payment = ZERO
            year_interest = ZERO

    return yearly
