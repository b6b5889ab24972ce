"""Brazilian locale formatting for the settlement statement."""

from __future__ import annotations

from datetime import date
from decimal import Decimal


def format_currency(value: Decimal | float | int | None) -> str:
    """Format as Brazilian currency: 1234.50 -> "R$ 1.234,50"."""
    if value is None:
        return "-"
    d = Decimal(str(value))
    sign = "-" if d < 0 else ""
    # Format with 2 decimal places, then swap separators for pt-BR
    formatted = f"{abs(d):,.2f}"
    formatted = formatted.replace(",", "X").replace(".", ",").replace("X", ".")
    return f"{sign}R$ {formatted}"


def format_date(value: date | None) -> str:
    """Format as DD/MM/YYYY."""
    if value is None:
        return "-"
    return value.strftime("%d/%m/%Y")
