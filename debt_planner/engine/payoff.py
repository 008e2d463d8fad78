"""Debt payoff orchestrator: validate, order, simulate, summarize.

Pure computation. No I/O. Raw debts in, PayoffPlan out.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from decimal import localcontext
from typing import Any

from debt_planner.engine.allocation import allocate_month
from debt_planner.engine.strategy import order_debts, parse_strategy
from debt_planner.engine.summary import month_date, summarize
from debt_planner.engine.validation import validate_config, validate_debts
from debt_planner.models.debt import Debt, SimulationConfig, Strategy, ENGINE_PRECISION
from debt_planner.models.results import (
    LedgerMonth,
    PayoffPlan,
    SimulationResult,
    SimulationState,
    StrategyComparison,
)

logger = logging.getLogger(__name__)


def _checked(config: SimulationConfig) -> SimulationConfig:
    return validate_config(config.extra_monthly_payment, config.max_months, config.start_date)


def _next_state(balances: Mapping, month: int, max_months: int) -> SimulationState:
    if all(b <= 0 for b in balances.values()):
        return SimulationState.CONVERGED
    if month >= max_months:
        return SimulationState.NON_CONVERGED
    return SimulationState.RUNNING


def simulate(
    debts: Sequence[Debt],
    order: Sequence[str],
    config: SimulationConfig,
) -> SimulationResult:
    """Run months until every balance is zero or the month cap is reached."""
    balances = {d.id: d.balance for d in debts}
    # Debts that start at zero are paid off before month 1
    payoff_months: dict[str, int] = {d.id: 0 for d in debts if d.balance <= 0}
    ledger: list[LedgerMonth] = []
    month = 0

    state = _next_state(balances, month, config.max_months)
    while state is SimulationState.RUNNING:
        allocation = allocate_month(balances, order, debts, config.extra_monthly_payment)
        month += 1
        balances = allocation.balances
        ledger.append(LedgerMonth(
            month=month,
            allocations=allocation.allocations,
            unallocated=allocation.unallocated,
            date=month_date(config, month),
        ))

        for debt_id, balance in balances.items():
            if balance <= 0 and debt_id not in payoff_months:
                payoff_months[debt_id] = month

        state = _next_state(balances, month, config.max_months)

    if state is SimulationState.NON_CONVERGED:
        open_debts = [debt_id for debt_id, b in balances.items() if b > 0]
        logger.info(
            "Payoff did not converge within %d months; %d debt(s) still open: %s",
            config.max_months, len(open_debts), ", ".join(open_debts),
        )

    return SimulationResult(state=state, ledger=tuple(ledger), payoff_months=payoff_months)


def run_plan(
    debts: Sequence[Debt],
    strategy: Strategy | str,
    config: SimulationConfig,
) -> PayoffPlan:
    """Simulate already-validated debts under one strategy.

    Arithmetic runs in a local Decimal context wide enough for a bounded
    debt left to compound for the longest allowed run.
    """
    strategy = parse_strategy(strategy)
    order = order_debts(debts, strategy)
    logger.debug(
        "Simulating %d debt(s), strategy=%s, extra=%s, order=%s",
        len(debts), strategy.value, config.extra_monthly_payment, order,
    )
    with localcontext() as ctx:
        ctx.prec = ENGINE_PRECISION
        result = simulate(debts, order, config)
        plan = summarize(debts, strategy, order, result, config)
    logger.debug(
        "Simulation finished: converged=%s months=%d total_interest=%s",
        plan.converged, plan.months, plan.total_interest,
    )
    return plan


def build_payoff_plan(
    raw_debts: Iterable[Mapping[str, Any] | Debt],
    strategy: Strategy | str,
    config: SimulationConfig | None = None,
) -> PayoffPlan:
    """Primary entry point: raw debts → full payoff plan with ledger.

    Raises ValidationError (or DuplicateDebtId) before any month runs.
    An empty debt set returns a converged zero-month plan.
    """
    config = config or SimulationConfig()
    config = _checked(config)
    strategy = parse_strategy(strategy)
    debts = validate_debts(raw_debts)
    return run_plan(debts, strategy, config)


def compare_strategies(
    raw_debts: Iterable[Mapping[str, Any] | Debt],
    config: SimulationConfig | None = None,
) -> StrategyComparison:
    """Run avalanche and snowball over the same inputs and capacity."""
    config = config or SimulationConfig()
    config = _checked(config)
    debts = validate_debts(raw_debts)
    return StrategyComparison(
        avalanche=run_plan(debts, Strategy.AVALANCHE, config),
        snowball=run_plan(debts, Strategy.SNOWBALL, config),
    )
