"""Presentation formatting for currency amounts and dates.

``format_number`` mirrors an en-US ``toLocaleString()``: thousands separators,
at most three fraction digits, trailing zeros dropped.
"""
from __future__ import annotations
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP, localcontext

_THOUSANDTHS = Decimal("0.001")
DATE_FORMAT = "%b %d, %Y"


def format_number(value: float | int | Decimal) -> str:
    amount = Decimal(str(value))
    if not amount.is_finite():
        return "0"
    # Precision must cover every integer digit plus the three decimals.
    with localcontext() as ctx:
        ctx.prec = max(28, amount.adjusted() + 4)
        text = f"{amount.quantize(_THOUSANDTHS, rounding=ROUND_HALF_UP):,f}"
    return text.rstrip("0").rstrip(".")


def format_currency(value: float | int | Decimal | None, symbol: str = "$") -> str:
    """``None`` renders as ``{symbol}0``: an absent amount looks like a zero balance."""
    if value is None:
        return f"{symbol}0"
    return f"{symbol}{format_number(value)}"


def format_date(value: date | datetime) -> str:
    return value.strftime(DATE_FORMAT)


def signed_amount(type_: str, amount: float | int | Decimal, symbol: str = "$") -> str:
    sign = "+" if type_ == "income" else "-"
    return f"{sign}{symbol}{format_number(amount)}"
