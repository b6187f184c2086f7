from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import DEFAULT_CURRENCY_SYMBOL, MONEY_PLACES


def quantize_money(amount: Decimal) -> Decimal:
    return Decimal(amount).quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)


def format_currency(amount: Decimal, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format as ``$1,234.50`` (negative amounts as ``-$50.00``)."""
    value = quantize_money(amount)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"
