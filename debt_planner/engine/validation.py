"""Debt input validation and normalization.

Pure functions: raw mappings in, frozen Debt records out. No I/O.
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any

from debt_planner.models.debt import (
    Debt,
    SimulationConfig,
    DEFAULT_MAX_MONTHS,
    MAX_AMOUNT,
    MAX_APR,
    MAX_MONTHS_LIMIT,
)

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")

# Accept both the Python field names and the dashboard's camelCase keys
_FIELD_ALIASES = {
    "minimum_payment": ("minimum_payment", "minimumPayment"),
    "apr": ("apr", "interestRate"),
}


class ValidationError(ValueError):
    """Raised for a bad debt or simulation field, before any month runs."""

    def __init__(self, message: str, field: str | None = None, debt_id: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.debt_id = debt_id


class DuplicateDebtId(ValidationError):
    def __init__(self, debt_id: str):
        super().__init__(f"Duplicate debt id: {debt_id}", field="id", debt_id=debt_id)


def _lookup(raw: Mapping[str, Any], name: str) -> Any:
    for key in _FIELD_ALIASES.get(name, (name,)):
        if key in raw:
            return raw[key]
    return None


def _to_decimal(value: Any, field: str, debt_id: str | None) -> Decimal:
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field} is required", field=field, debt_id=debt_id)
    try:
        result = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"{field} must be a number, got {value!r}", field=field, debt_id=debt_id)
    if not result.is_finite():
        raise ValidationError(f"{field} must be finite", field=field, debt_id=debt_id)
    return result


def _money(value: Any, field: str, debt_id: str | None) -> Decimal:
    amount = _to_decimal(value, field, debt_id)
    if abs(amount) > MAX_AMOUNT:
        raise ValidationError(f"{field} must not exceed {MAX_AMOUNT}", field=field, debt_id=debt_id)
    try:
        return amount.quantize(TWO_PLACES, ROUND_HALF_UP)
    except InvalidOperation:
        raise ValidationError(f"{field} cannot be rounded to cents", field=field, debt_id=debt_id)


def validate_debt(raw: Mapping[str, Any] | Debt) -> Debt:
    """Validate a single debt.

    Money fields are quantized to cents (half-up). APR is kept as given.
    """
    if isinstance(raw, Debt):
        raw = {
            "id": raw.id,
            "name": raw.name,
            "balance": raw.balance,
            "apr": raw.apr,
            "minimum_payment": raw.minimum_payment,
        }

    raw_id = raw.get("id")
    if raw_id is None or str(raw_id).strip() == "":
        raise ValidationError("id is required", field="id")
    debt_id = str(raw_id)

    name = raw.get("name")
    if name is None or str(name).strip() == "":
        raise ValidationError("name must not be empty", field="name", debt_id=debt_id)

    balance = _money(raw.get("balance"), "balance", debt_id)
    if balance < 0:
        raise ValidationError("balance must be >= 0", field="balance", debt_id=debt_id)

    apr = _to_decimal(_lookup(raw, "apr"), "apr", debt_id)
    if apr < 0:
        raise ValidationError("apr must be >= 0", field="apr", debt_id=debt_id)
    if apr > MAX_APR:
        raise ValidationError(f"apr must not exceed {MAX_APR}", field="apr", debt_id=debt_id)

    minimum = _money(_lookup(raw, "minimum_payment"), "minimum_payment", debt_id)
    if minimum <= 0:
        raise ValidationError(
            "minimum_payment must be > 0", field="minimum_payment", debt_id=debt_id
        )

    return Debt(
        id=debt_id,
        name=str(name).strip(),
        balance=balance,
        apr=apr,
        minimum_payment=minimum,
    )


def validate_debts(raw_debts: Iterable[Mapping[str, Any] | Debt]) -> list[Debt]:
    """Validate a debt set, preserving input order.

    Raises ValidationError on the first bad field, DuplicateDebtId on a
    repeated id. An empty input yields an empty list.
    """
    debts: list[Debt] = []
    seen: set[str] = set()
    for raw in raw_debts:
        try:
            debt = validate_debt(raw)
        except ValidationError as e:
            logger.debug("Rejected debt %s: %s", e.debt_id, e.message)
            raise
        if debt.id in seen:
            logger.debug("Rejected duplicate debt id %s", debt.id)
            raise DuplicateDebtId(debt.id)
        seen.add(debt.id)
        debts.append(debt)
    return debts


def validate_config(
    extra_monthly_payment: Any = Decimal("0"),
    max_months: int | None = None,
    start_date: date | None = None,
) -> SimulationConfig:
    """Build a SimulationConfig.

    Rejects negative extra, a cap outside 1..MAX_MONTHS_LIMIT and a start
    date that is not a date.
    """
    extra = _money(extra_monthly_payment, "extra_monthly_payment", None)
    if extra < 0:
        raise ValidationError(
            "extra_monthly_payment must be >= 0", field="extra_monthly_payment"
        )

    months = DEFAULT_MAX_MONTHS if max_months is None else max_months
    if isinstance(months, bool) or not isinstance(months, int) or months < 1:
        raise ValidationError("max_months must be a positive integer", field="max_months")
    if months > MAX_MONTHS_LIMIT:
        raise ValidationError(f"max_months must not exceed {MAX_MONTHS_LIMIT}", field="max_months")

    if start_date is not None and not isinstance(start_date, date):
        raise ValidationError(
            f"start_date must be a date, got {type(start_date).__name__}", field="start_date"
        )

    return SimulationConfig(
        extra_monthly_payment=extra,
        max_months=months,
        start_date=start_date,
    )
