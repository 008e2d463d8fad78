from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

DEFAULT_MAX_MONTHS = 600

# Input bounds. Worst case (MAX_AMOUNT at MAX_APR, no principal paid for
# MAX_MONTHS_LIMIT months) grows to ~330 digits, inside ENGINE_PRECISION.
MAX_AMOUNT = Decimal("1000000000000")  # 1 trillion
MAX_APR = Decimal("1000")  # Percent
MAX_MONTHS_LIMIT = 1200  # 100 years
ENGINE_PRECISION = 400  # Decimal context precision for a simulation run


class Strategy(Enum):
    AVALANCHE = "avalanche"  # Highest APR first
    SNOWBALL = "snowball"    # Smallest original balance first


@dataclass(frozen=True)
class Debt:
    id: str
    name: str
    balance: Decimal  # Outstanding principal, cents
    apr: Decimal  # Annual percent, e.g. Decimal("18.99")
    minimum_payment: Decimal  # Monthly floor, cents


@dataclass(frozen=True)
class SimulationConfig:
    extra_monthly_payment: Decimal = Decimal("0")
    max_months: int = DEFAULT_MAX_MONTHS
    start_date: date | None = None  # Month 1 falls one month after this
