"""Pydantic schemas for API request/response models."""

import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from debt_planner.models.debt import MAX_MONTHS_LIMIT


# ---- Request schemas ----

class DebtInput(BaseModel):
    id: str = Field(..., description="Caller-supplied stable id")
    name: str
    balance: Decimal
    apr: Decimal = Field(..., description="Annual percentage rate, e.g. 18.99")
    minimum_payment: Decimal


class CompareRequest(BaseModel):
    debts: list[DebtInput] = []
    extra_monthly_payment: Decimal = Decimal("0")
    max_months: int | None = Field(
        None, ge=1, le=MAX_MONTHS_LIMIT, description="Non-convergence cap; defaults to settings"
    )
    start_date: datetime.date | None = Field(None, description="Month 1 falls one month after this date")


class PayoffRequest(CompareRequest):
    strategy: str = "avalanche"


# ---- Response schemas ----

class AllocationResponse(BaseModel):
    debt_id: str
    interest_accrued: Decimal
    minimum_applied: Decimal
    extra_applied: Decimal
    payment_applied: Decimal
    remaining_balance: Decimal


class LedgerMonthResponse(BaseModel):
    month: int
    date: datetime.date | None = None
    total_payment: Decimal
    total_interest: Decimal
    unallocated: Decimal
    allocations: list[AllocationResponse]


class DebtPayoffResponse(BaseModel):
    debt_id: str
    name: str
    original_balance: Decimal
    apr: Decimal
    payoff_month: int | None = None
    payoff_date: datetime.date | None = None
    total_interest_paid: Decimal
    total_paid: Decimal


class PayoffPlanResponse(BaseModel):
    strategy: str
    converged: bool
    months: int
    payoff_date: datetime.date | None = None
    total_payment: Decimal
    total_interest: Decimal
    total_principal: Decimal
    order: list[str]
    per_debt: dict[str, DebtPayoffResponse]
    ledger: list[LedgerMonthResponse]


class CompareResponse(BaseModel):
    avalanche: PayoffPlanResponse
    snowball: PayoffPlanResponse
    interest_savings: Decimal
    months_difference: int
