"""
Display formatting for list pages
"""
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from store_admin.core.config import settings


def ordinal(day: int) -> str:
    """1 -> 1st, 2 -> 2nd, 11 -> 11th, 23 -> 23rd"""
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_date(value: datetime) -> str:
    """Format as "MMMM do, yyyy", e.g. October 3rd, 2025"""
    return f"{value.strftime('%B')} {ordinal(value.day)}, {value.year}"


def format_price(
    value: Union[Decimal, float, int],
    symbol: str = None,
    decimals: int = None,
) -> str:
    """
    Currency with "." thousands and "," decimals (id-ID style)

    format_price(Decimal("10000")) -> "Rp 10.000,00"
    """
    symbol = settings.CURRENCY_SYMBOL if symbol is None else symbol
    decimals = settings.CURRENCY_DECIMALS if decimals is None else decimals

    amount = Decimal(str(value))
    quantum = Decimal(1).scaleb(-decimals)
    amount = amount.quantize(quantum, rounding=ROUND_HALF_UP)

    sign = "-" if amount < 0 else ""
    text = f"{abs(amount):,.{decimals}f}"
    # Swap separators: 10,000.00 -> 10.000,00
    text = text.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}{symbol} {text}".strip()
