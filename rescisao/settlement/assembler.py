"""Line-item assembler — builds the itemized Termo de Rescisão.

Emission order follows the conventional statement layout:

    saldo de salário → aviso prévio → 13º (notified year, then current)
    → férias vencidas → férias integrais → férias proporcionais
    → FGTS s/ rescisão → multa FGTS → multa Art. 467 → multa Art. 477

A notice projection that crosses January 1st or a hire anniversary closes
a 13th-salary year or an acquisition period; those are paid in full next
to the new period's proportional share.

Amounts are carried unrounded between generators. Each value is rounded to
centavos exactly once, when its line item is emitted.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from rescisao.calculators.accruals import (
    overdue_vacation_value,
    proportional_value,
    vacation_bonus,
)
from rescisao.calculators.tenure import COMMERCIAL_MONTH_DAYS
from rescisao.models.enums import LineItemGroup, LineItemKind, NoticeDisposition
from rescisao.schemas.settlement import (
    DerivedState,
    EntitlementProfile,
    SettlementLineItem,
    TerminationScenario,
)

FGTS_DEPOSIT_RATE = Decimal("0.08")
FINE_467_RATE = Decimal("0.50")

_ZERO = Decimal("0")


@dataclass(frozen=True)
class Assembly:
    """Emitted line items plus the unrounded FGTS amounts the engine reuses."""

    items: list[SettlementLineItem]
    fgts_deposits: Decimal
    fgts_multa: Decimal


def _to_reais(value: Decimal) -> Decimal:
    """Round to 2 decimal places."""
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def _line(
    description: str,
    reference: str,
    value: Decimal,
    basis: Decimal | None,
    group: LineItemGroup,
    kind: LineItemKind = LineItemKind.EARNING,
) -> SettlementLineItem:
    return SettlementLineItem(
        description=description,
        reference=reference,
        value=_to_reais(value),
        calculation_basis=_to_reais(basis) if basis is not None else None,
        kind=kind,
        group=group,
    )


def _percent(factor: Decimal) -> str:
    return f"{(factor * 100).normalize():f}%"


def notice_value(basis: Decimal, notice_days: int, factor: Decimal) -> Decimal:
    """Indemnified notice paid by the employer."""
    return basis * notice_days / COMMERCIAL_MONTH_DAYS * factor


def assemble_items(
    scenario: TerminationScenario,
    derived: DerivedState,
    entitlement: EntitlementProfile,
) -> Assembly:
    """Emit every line item the entitlement profile allows, in statement order.

    Args:
        scenario: Validated termination scenario.
        derived: Dates, month counts and wage basis from the earlier stages.
        entitlement: Capability record for the scenario's category.

    Returns:
        Assembly with the ordered items and the raw FGTS deposit/multa amounts.
    """
    items: list[SettlementLineItem] = []
    basis = derived.wage_basis.total

    # ── Saldo de salário ─────────────────────────────────────────────
    balance_days = derived.salary_balance_days
    salary_balance = basis * balance_days / COMMERCIAL_MONTH_DAYS
    items.append(_line(
        "Saldo de Salário", f"{balance_days} dias", salary_balance, basis, LineItemGroup.TERMINATION,
    ))

    # ── Aviso prévio ─────────────────────────────────────────────────
    notice = _ZERO
    indemnified = scenario.notice_disposition == NoticeDisposition.INDEMNIFIED
    if entitlement.notice_factor > 0 and indemnified:
        notice = notice_value(basis, derived.resolved_notice_days, entitlement.notice_factor)
        reference = f"{derived.resolved_notice_days} dias"
        if entitlement.notice_factor != 1:
            reference += f" × {_percent(entitlement.notice_factor)}"
        items.append(_line(
            "Aviso Prévio Indenizado", reference, notice, basis, LineItemGroup.TERMINATION,
        ))
    elif entitlement.notice_owed_by_employee and scenario.notice_disposition != NoticeDisposition.WORKED:
        # Unserved notice on resignation: one month of wage basis, Art. 487 §2
        items.append(_line(
            "Desconto Aviso Prévio",
            f"{COMMERCIAL_MONTH_DAYS} dias",
            basis,
            basis,
            LineItemGroup.TERMINATION,
            kind=LineItemKind.DEDUCTION,
        ))

    # ── 13º salário ──────────────────────────────────────────────────
    thirteenth = _ZERO
    if entitlement.thirteenth_eligible:
        prior_months = derived.thirteenth_months_prior_year
        if prior_months > 0:
            prior = proportional_value(basis, prior_months)
            thirteenth += prior
            items.append(_line(
                f"13º Salário {scenario.end_date.year}",
                f"{prior_months}/12 avos",
                prior,
                basis,
                LineItemGroup.THIRTEENTH_SALARY,
            ))
        current = proportional_value(basis, derived.months_thirteenth)
        thirteenth += current
        items.append(_line(
            "13º Salário Proporcional",
            f"{derived.months_thirteenth}/12 avos",
            current,
            basis,
            LineItemGroup.THIRTEENTH_SALARY,
        ))

    # ── Férias ───────────────────────────────────────────────────────
    vacation_total = _ZERO
    periods = scenario.overdue_vacation_periods
    if entitlement.overdue_vacation_eligible and periods > 0:
        overdue = overdue_vacation_value(basis, periods)
        overdue_bonus = vacation_bonus(overdue)
        vacation_total += overdue + overdue_bonus
        items.append(_line(
            "Férias Vencidas", f"{periods} período(s)", overdue, basis, LineItemGroup.VACATION,
        ))
        items.append(_line(
            "1/3 Férias Vencidas", "1/3 Constitucional", overdue_bonus, overdue, LineItemGroup.VACATION,
        ))

    completed = derived.vacation_periods_completed
    if entitlement.overdue_vacation_eligible and completed > 0:
        full = overdue_vacation_value(basis, completed)
        full_bonus = vacation_bonus(full)
        vacation_total += full + full_bonus
        items.append(_line(
            "Férias Integrais", f"{completed} período(s)", full, basis, LineItemGroup.VACATION,
        ))
        items.append(_line(
            "1/3 Férias Integrais", "1/3 Constitucional", full_bonus, full, LineItemGroup.VACATION,
        ))

    if entitlement.vacation_proportional_eligible:
        proportional = proportional_value(basis, derived.months_vacation)
        proportional_bonus = vacation_bonus(proportional)
        vacation_total += proportional + proportional_bonus
        items.append(_line(
            "Férias Proporcionais",
            f"{derived.months_vacation}/12 avos",
            proportional,
            basis,
            LineItemGroup.VACATION,
        ))
        items.append(_line(
            "1/3 Férias Proporcionais",
            "1/3 Constitucional",
            proportional_bonus,
            proportional,
            LineItemGroup.VACATION,
        ))

    # ── FGTS ─────────────────────────────────────────────────────────
    # Indemnified vacation carries no FGTS (Lei 8.036, Art. 15 §6)
    deposits = _ZERO
    if entitlement.fgts_deposits_eligible:
        deposit_basis = salary_balance + notice + thirteenth
        if deposit_basis > 0:
            deposits = deposit_basis * FGTS_DEPOSIT_RATE
            items.append(_line(
                "FGTS sobre Rescisão",
                _percent(FGTS_DEPOSIT_RATE),
                deposits,
                deposit_basis,
                LineItemGroup.FGTS,
            ))

    multa = _ZERO
    if entitlement.fgts_multa_factor > 0:
        multa_basis = scenario.fgts_balance + deposits
        multa = multa_basis * entitlement.fgts_multa_factor
        items.append(_line(
            f"Multa {_percent(entitlement.fgts_multa_factor)} FGTS",
            f"{_percent(entitlement.fgts_multa_factor)} do saldo total",
            multa,
            multa_basis,
            LineItemGroup.FINES,
        ))

    # ── Multas CLT ───────────────────────────────────────────────────
    if scenario.apply_fine_467 and entitlement.fine_467_eligible:
        uncontested = notice + thirteenth + vacation_total
        if uncontested > 0:
            items.append(_line(
                "Multa Art. 467 CLT",
                f"{_percent(FINE_467_RATE)} Verbas Incontroversas",
                uncontested * FINE_467_RATE,
                uncontested,
                LineItemGroup.FINES,
            ))

    if scenario.apply_fine_477 and entitlement.fine_477_eligible:
        items.append(_line(
            "Multa Art. 477 CLT",
            "1 Salário Base",
            scenario.salary,
            scenario.salary,
            LineItemGroup.FINES,
        ))

    return Assembly(items=items, fgts_deposits=deposits, fgts_multa=multa)
