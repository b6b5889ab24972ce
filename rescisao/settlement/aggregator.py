"""Totals for the settlement statement.

Earnings and deductions are summed independently over the already-rounded
line-item values, so the statement always reconciles to its parts.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from rescisao.models.enums import LineItemKind
from rescisao.schemas.settlement import SettlementLineItem


@dataclass(frozen=True)
class SettlementTotals:
    """Earnings, deductions and their difference."""

    total_earnings: Decimal
    total_deductions: Decimal
    net_total: Decimal


def _sum_kind(items: Iterable[SettlementLineItem], kind: LineItemKind) -> Decimal:
    return sum((item.value for item in items if item.kind == kind), start=Decimal("0.00"))


def aggregate(items: list[SettlementLineItem]) -> SettlementTotals:
    """Sum earnings and deductions; net = earnings - deductions."""
    earnings = _sum_kind(items, LineItemKind.EARNING)
    deductions = _sum_kind(items, LineItemKind.DEDUCTION)
    return SettlementTotals(
        total_earnings=earnings,
        total_deductions=deductions,
        net_total=earnings - deductions,
    )
