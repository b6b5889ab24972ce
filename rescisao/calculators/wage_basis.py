"""Remuneration basis for the rescission (Súmula 264 TST).

Habitual extras integrate the basis before any proportional fraction is
applied: danger pay (30% of salary), night-shift pay (20% of salary) and the
monthly overtime average, each with its weekly-rest reflex (DSR, 1/6).
"""

from __future__ import annotations

from decimal import Decimal

from rescisao.schemas.settlement import WageBasis

DANGER_PAY_RATE = Decimal("0.30")
NIGHT_SHIFT_RATE = Decimal("0.20")
WEEKLY_REST_DIVISOR = Decimal("6")

_ZERO = Decimal("0")


def calculate_wage_basis(
    salary: Decimal,
    additional_hours: Decimal = _ZERO,
    danger_pay: bool = False,
    night_shift_pay: bool = False,
) -> WageBasis:
    """Fold habitual extras into the monthly wage basis.

    Args:
        salary: Nominal monthly salary.
        additional_hours: Monthly average of overtime pay, in reais.
        danger_pay: Whether periculosidade is paid.
        night_shift_pay: Whether adicional noturno is paid.

    Returns:
        WageBasis with each component and the total, unrounded.
    """
    danger = salary * DANGER_PAY_RATE if danger_pay else _ZERO
    night = salary * NIGHT_SHIFT_RATE if night_shift_pay else _ZERO
    night_rest = night / WEEKLY_REST_DIVISOR if night > 0 else _ZERO
    overtime_rest = additional_hours / WEEKLY_REST_DIVISOR if additional_hours > 0 else _ZERO

    total = salary + danger + night + night_rest + additional_hours + overtime_rest

    return WageBasis(
        salary=salary,
        danger_pay=danger,
        night_shift_pay=night,
        night_shift_rest=night_rest,
        overtime=additional_hours,
        overtime_rest=overtime_rest,
        total=total,
    )
