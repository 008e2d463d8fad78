"""Debt payoff routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from debt_planner.api.deps import get_settings
from debt_planner.api.schemas import (
    AllocationResponse,
    CompareRequest,
    CompareResponse,
    DebtPayoffResponse,
    LedgerMonthResponse,
    PayoffPlanResponse,
    PayoffRequest,
)
from debt_planner.config import Settings
from debt_planner.engine.payoff import build_payoff_plan, compare_strategies
from debt_planner.engine.validation import ValidationError
from debt_planner.models.debt import SimulationConfig
from debt_planner.models.results import PayoffPlan

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/payoff", tags=["payoff"])


def _build_config(req: CompareRequest, settings: Settings) -> SimulationConfig:
    return SimulationConfig(
        extra_monthly_payment=req.extra_monthly_payment,
        max_months=req.max_months if req.max_months is not None else settings.max_payoff_months,
        start_date=req.start_date,
    )


def _bad_request(e: ValidationError) -> HTTPException:
    logger.warning("Rejected payoff request: %s (field=%s, debt=%s)", e.message, e.field, e.debt_id)
    return HTTPException(
        status_code=400,
        detail={"message": e.message, "field": e.field, "debt_id": e.debt_id},
    )


def _plan_to_response(plan: PayoffPlan) -> PayoffPlanResponse:
    """Convert engine PayoffPlan to API response."""
    ledger = [
        LedgerMonthResponse(
            month=entry.month,
            date=entry.date,
            total_payment=entry.total_payment,
            total_interest=entry.total_interest,
            unallocated=entry.unallocated,
            allocations=[
                AllocationResponse(
                    debt_id=a.debt_id,
                    interest_accrued=a.interest_accrued,
                    minimum_applied=a.minimum_applied,
                    extra_applied=a.extra_applied,
                    payment_applied=a.payment_applied,
                    remaining_balance=a.remaining_balance,
                )
                for a in entry.allocations
            ],
        )
        for entry in plan.ledger
    ]

    per_debt = {
        debt_id: DebtPayoffResponse(
            debt_id=p.debt_id,
            name=p.name,
            original_balance=p.original_balance,
            apr=p.apr,
            payoff_month=p.payoff_month,
            payoff_date=p.payoff_date,
            total_interest_paid=p.total_interest_paid,
            total_paid=p.total_paid,
        )
        for debt_id, p in plan.per_debt.items()
    }

    return PayoffPlanResponse(
        strategy=plan.strategy.value,
        converged=plan.converged,
        months=plan.months,
        payoff_date=plan.payoff_date,
        total_payment=plan.total_payment,
        total_interest=plan.total_interest,
        total_principal=plan.total_principal,
        order=list(plan.order),
        per_debt=per_debt,
        ledger=ledger,
    )


@router.post("/plan", response_model=PayoffPlanResponse)
def payoff_plan(req: PayoffRequest, settings: Settings = Depends(get_settings)):
    """Simulate one strategy and return the plan with its full monthly ledger."""
    try:
        plan = build_payoff_plan(
            [d.model_dump() for d in req.debts],
            req.strategy,
            _build_config(req, settings),
        )
    except ValidationError as e:
        raise _bad_request(e)
    return _plan_to_response(plan)


@router.post("/compare", response_model=CompareResponse)
def compare(req: CompareRequest, settings: Settings = Depends(get_settings)):
    """Run avalanche and snowball side by side on the same inputs."""
    try:
        comparison = compare_strategies(
            [d.model_dump() for d in req.debts],
            _build_config(req, settings),
        )
    except ValidationError as e:
        raise _bad_request(e)
    return CompareResponse(
        avalanche=_plan_to_response(comparison.avalanche),
        snowball=_plan_to_response(comparison.snowball),
        interest_savings=comparison.interest_savings,
        months_difference=comparison.months_difference,
    )
