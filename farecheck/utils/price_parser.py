"""Parsing and formatting of displayed prices."""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Union

CENT = Decimal('0.01')
INFINITY = Decimal('Infinity')
ZERO = Decimal('0.00')

_SEPARATORS = re.compile(r'[,\s]')
_AMOUNT = re.compile(r'\d+(?:\.\d+)?')


def _to_cents(amount: Decimal) -> Optional[Decimal]:
    """Round to cents; None when the amount has too many digits for the context."""
    try:
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return None


def _extract_amount(text: Optional[str]) -> Optional[Decimal]:
    """Return the first amount in ``text`` rounded to cents, or None."""
    if not text:
        return None
    match = _AMOUNT.search(_SEPARATORS.sub('', text))
    if not match:
        return None
    return _to_cents(Decimal(match.group()))


def parse_price(text: Optional[str]) -> Decimal:
    """
    Parse a displayed price such as ``"₹ 4,567"`` or ``"Rs. 1,234.50"``.

    Currency symbols and thousands separators are dropped. Text without
    any digits parses to ``Decimal('Infinity')`` so that it can never win
    a cheapest-fare comparison.

    Args:
        text: Raw text read from the page (may be None)

    Returns:
        Non-negative Decimal with two places, or Infinity
    """
    amount = _extract_amount(text)
    return INFINITY if amount is None else amount


def parse_discount(text: Optional[str]) -> Decimal:
    """Parse a displayed discount; unreadable text counts as no discount."""
    amount = _extract_amount(text)
    return ZERO if amount is None else amount


def to_money(value: Union[int, float, str, Decimal]) -> Decimal:
    """
    Coerce a number or displayed text into a two-place Decimal.

    Floats go through ``str()`` first so 0.1 stays 0.10 and not the
    binary approximation. Non-finite values and amounts too large to hold
    in cents become ``Decimal('Infinity')``, the same as unreadable text.

    Raises:
        TypeError: If value is None
        ValueError: If value is a negative number
    """
    if value is None:
        raise TypeError("amount is required")
    if isinstance(value, str):
        return parse_price(value)
    if isinstance(value, Decimal):
        amount = value
    else:
        amount = Decimal(str(value))
    if not amount.is_finite():
        return INFINITY
    if amount < 0:
        raise ValueError(f"amount must not be negative, got {amount}")
    cents = _to_cents(amount)
    return INFINITY if cents is None else cents


def format_price(value: Decimal) -> str:
    if not value.is_finite():
        return "∞"
    return f"{value:,.2f}"
