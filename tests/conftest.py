"""Canonical test fixtures used across engine and API tests.

Fixture: credit card $5,000 at 18.99% ($150 min), car loan $12,000 at 6.5%
($300 min), student loan $25,000 at 4.5% ($200 min).
"""

import pytest
from decimal import Decimal

from debt_planner.models.debt import Debt, SimulationConfig


@pytest.fixture
def credit_card() -> Debt:
    return Debt(
        id="cc",
        name="Credit Card",
        balance=Decimal("5000.00"),
        apr=Decimal("18.99"),
        minimum_payment=Decimal("150.00"),
    )


@pytest.fixture
def car_loan() -> Debt:
    return Debt(
        id="car",
        name="Car Loan",
        balance=Decimal("12000.00"),
        apr=Decimal("6.5"),
        minimum_payment=Decimal("300.00"),
    )


@pytest.fixture
def student_loan() -> Debt:
    return Debt(
        id="student",
        name="Student Loan",
        balance=Decimal("25000.00"),
        apr=Decimal("4.5"),
        minimum_payment=Decimal("200.00"),
    )


@pytest.fixture
def sample_debts(credit_card, car_loan, student_loan) -> list[Debt]:
    return [credit_card, car_loan, student_loan]


@pytest.fixture
def raw_debts() -> list[dict]:
    """Debts as a caller would submit them (floats, camelCase minimum)."""
    return [
        {"id": "cc", "name": "Credit Card", "balance": 5000, "apr": 18.99, "minimumPayment": 150},
        {"id": "car", "name": "Car Loan", "balance": 12000, "apr": 6.5, "minimumPayment": 300},
    ]


@pytest.fixture
def extra_200() -> SimulationConfig:
    return SimulationConfig(extra_monthly_payment=Decimal("200"))
