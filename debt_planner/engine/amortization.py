"""Single-debt monthly amortization.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")


def round_money(amount: Decimal) -> Decimal:
    """Round to cents, half-up."""
    return amount.quantize(TWO_PLACES, ROUND_HALF_UP)


def monthly_interest(balance: Decimal, apr: Decimal) -> Decimal:
    """One month of interest on balance at an annual percentage rate (e.g. 18.99)."""
    if balance <= 0 or apr <= 0:
        return ZERO.quantize(TWO_PLACES)
    # I = B * (APR / 100 / 12)
    return round_money(balance * apr / Decimal("1200"))


def amortize_one_debt(
    working_balance: Decimal, apr: Decimal, payment: Decimal
) -> tuple[Decimal, Decimal, Decimal]:
    """Advance one debt by one month.

    Returns (interest_accrued, applied_payment, new_balance). The payment is
    capped at the balance after interest. A debt already at or below zero is
    skipped: no interest, no payment.
    """
    if working_balance <= 0:
        zero = ZERO.quantize(TWO_PLACES)
        return zero, zero, zero

    interest = monthly_interest(working_balance, apr)
    balance_after_interest = round_money(working_balance + interest)
    applied = round_money(min(max(payment, ZERO), balance_after_interest))
    new_balance = round_money(balance_after_interest - applied)
    return interest, applied, new_balance
