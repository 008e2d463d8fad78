import datetime
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from debt_planner.models.debt import Strategy


class SimulationState(Enum):
    RUNNING = "running"
    CONVERGED = "converged"
    NON_CONVERGED = "non_converged"


@dataclass(frozen=True)
class MonthlyAllocation:
    debt_id: str
    interest_accrued: Decimal = Decimal("0")
    minimum_applied: Decimal = Decimal("0")  # Minimum pass
    extra_applied: Decimal = Decimal("0")  # Waterfall pass
    remaining_balance: Decimal = Decimal("0")

    @property
    def payment_applied(self) -> Decimal:
        return self.minimum_applied + self.extra_applied

    @property
    def principal_paid(self) -> Decimal:
        return self.payment_applied - self.interest_accrued


@dataclass(frozen=True)
class LedgerMonth:
    month: int  # 1-indexed
    allocations: tuple[MonthlyAllocation, ...] = ()  # Input order, one per debt
    unallocated: Decimal = Decimal("0")  # Capacity left once every debt is paid off
    date: datetime.date | None = None

    @property
    def total_payment(self) -> Decimal:
        return sum((a.payment_applied for a in self.allocations), Decimal("0"))

    @property
    def total_interest(self) -> Decimal:
        return sum((a.interest_accrued for a in self.allocations), Decimal("0"))

    @property
    def remaining_balance(self) -> Decimal:
        return sum((a.remaining_balance for a in self.allocations), Decimal("0"))

    def allocation_for(self, debt_id: str) -> MonthlyAllocation | None:
        for allocation in self.allocations:
            if allocation.debt_id == debt_id:
                return allocation
        return None


@dataclass(frozen=True)
class SimulationResult:
    """Raw output of the simulation driver, before summarizing."""
    state: SimulationState
    ledger: tuple[LedgerMonth, ...] = ()
    payoff_months: dict[str, int] = field(default_factory=dict)

    @property
    def converged(self) -> bool:
        return self.state is SimulationState.CONVERGED


@dataclass(frozen=True)
class DebtPayoff:
    debt_id: str
    name: str
    original_balance: Decimal
    apr: Decimal
    payoff_month: int | None = None  # None if never paid off within the cap
    total_interest_paid: Decimal = Decimal("0")
    total_paid: Decimal = Decimal("0")
    payoff_date: datetime.date | None = None


@dataclass(frozen=True)
class PayoffPlan:
    strategy: Strategy
    converged: bool
    months: int
    total_payment: Decimal = Decimal("0")
    total_interest: Decimal = Decimal("0")
    per_debt: dict[str, DebtPayoff] = field(default_factory=dict)
    ledger: tuple[LedgerMonth, ...] = ()
    order: tuple[str, ...] = ()  # Strategy priority, fixed for the run
    payoff_date: datetime.date | None = None

    @property
    def total_principal(self) -> Decimal:
        return self.total_payment - self.total_interest


@dataclass(frozen=True)
class StrategyComparison:
    avalanche: PayoffPlan
    snowball: PayoffPlan

    @property
    def interest_savings(self) -> Decimal:
        """Interest avoided by choosing avalanche over snowball."""
        return self.snowball.total_interest - self.avalanche.total_interest

    @property
    def months_difference(self) -> int:
        return self.snowball.months - self.avalanche.months


@dataclass(frozen=True)
class ScheduleRow:
    month: int
    payment: Decimal
    interest: Decimal
    principal: Decimal
    balance: Decimal
    date: datetime.date | None = None
