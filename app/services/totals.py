# app/services/totals.py
#
# The only place a sale's amount is derived. Used when validating a
# discount on write and when rendering a sale on read.

from decimal import Decimal, ROUND_HALF_UP

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")
# Numeric(10, 2) columns hold at most 99,999,999.99
MAX_AMOUNT = Decimal("100000000")


def to_money(value) -> Decimal:
    if value is None:
        return ZERO
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


def calculate_subtotal(items) -> Decimal:
    """Sum of unit_price * quantity over anything exposing those two attributes."""
    subtotal = Decimal("0")
    for item in items or []:
        subtotal += Decimal(str(item.unit_price)) * item.quantity
    return to_money(subtotal)


def calculate_total_value(items, discount=None) -> Decimal:
    total = calculate_subtotal(items) - to_money(discount)
    if total < 0:
        return ZERO
    return total
