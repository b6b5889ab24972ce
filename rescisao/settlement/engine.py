"""Termination settlement engine — the single compute entry point.

Pure Python orchestrator. No I/O, no clock: every date comes from the
scenario, so identical scenarios always produce identical results.
The stages run in a fixed order because later ones need earlier values:

    validation → tenure & notice → contract dates → wage basis
    → accrual month counts → entitlement-driven assembly → totals
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import ValidationError

from rescisao.calculators.accruals import (
    months_for_thirteenth,
    months_for_vacation,
    thirteenth_months_prior_year,
    vacation_periods_completed,
)
from rescisao.calculators.notice import statutory_notice_days
from rescisao.calculators.tenure import resolve_contract_dates, salary_balance_days, service_time
from rescisao.calculators.wage_basis import calculate_wage_basis
from rescisao.entitlements.matrix import entitlement_for
from rescisao.schemas.settlement import (
    DerivedState,
    EntitlementProfile,
    SettlementResult,
    TerminationScenario,
)
from rescisao.settlement.aggregator import aggregate
from rescisao.settlement.assembler import assemble_items
from rescisao.settlement.validation import MissingScenarioField, validate_scenario

logger = logging.getLogger(__name__)


def _to_reais(value: Decimal) -> Decimal:
    """Round to 2 decimal places."""
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def derive_state(scenario: TerminationScenario, entitlement: EntitlementProfile) -> DerivedState:
    """Run the date, notice and accrual stages for a validated scenario."""
    tenure = service_time(scenario.start_date, scenario.end_date)
    notice_days = statutory_notice_days(scenario.start_date, scenario.end_date)
    dates = resolve_contract_dates(scenario, entitlement, notice_days)
    start, projected_end = scenario.start_date, dates.projected_end_date

    wage_basis = calculate_wage_basis(
        scenario.salary,
        additional_hours=scenario.additional_hours,
        danger_pay=scenario.danger_pay,
        night_shift_pay=scenario.night_shift_pay,
    )

    return DerivedState(
        tenure=tenure,
        notice_days=notice_days,
        resolved_notice_days=dates.resolved_notice_days,
        projected_end_date=dates.projected_end_date,
        last_worked_date=dates.last_worked_date,
        months_thirteenth=months_for_thirteenth(start, projected_end),
        months_vacation=months_for_vacation(start, projected_end),
        thirteenth_months_prior_year=thirteenth_months_prior_year(
            start, scenario.end_date, projected_end,
        ),
        vacation_periods_completed=vacation_periods_completed(
            start, scenario.end_date, projected_end,
        ),
        salary_balance_days=salary_balance_days(start, dates.last_worked_date),
        wage_basis=wage_basis,
    )


def compute(scenario: TerminationScenario) -> SettlementResult:
    """Compute the itemized settlement for one termination scenario.

    Raises:
        SettlementInputError: Any validation failure; nothing is emitted.
    """
    validate_scenario(scenario)
    entitlement = entitlement_for(scenario.termination_category)
    derived = derive_state(scenario, entitlement)

    assembly = assemble_items(scenario, derived, entitlement)
    totals = aggregate(assembly.items)

    fgts_withdrawable = _to_reais(
        (scenario.fgts_balance + assembly.fgts_deposits) * entitlement.fgts_withdrawal_factor
        + assembly.fgts_multa
    )

    logger.debug(
        "Settlement computed: category=%s notice_days=%d projected_end=%s items=%d net=%s",
        scenario.termination_category.value,
        derived.resolved_notice_days,
        derived.projected_end_date.isoformat(),
        len(assembly.items),
        totals.net_total,
    )

    return SettlementResult(
        items=assembly.items,
        total_earnings=totals.total_earnings,
        total_deductions=totals.total_deductions,
        net_total=totals.net_total,
        projected_end_date=derived.projected_end_date,
        notice_days=derived.resolved_notice_days,
        fgts_withdrawable=fgts_withdrawable,
        dependents=scenario.dependents,
        derived=derived,
    )


def build_scenario(payload: Mapping[str, Any]) -> TerminationScenario:
    """Validate raw data (e.g. a JSON body) into a TerminationScenario.

    Raises:
        MissingScenarioField: If required fields are absent or ill-typed.
    """
    try:
        return TerminationScenario.model_validate(payload)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        raise MissingScenarioField(
            f"Invalid scenario payload: {fields}",
            user_message=f"Dados obrigatórios ausentes ou inválidos: {fields}.",
        ) from exc


def compute_from_payload(payload: Mapping[str, Any]) -> SettlementResult:
    """Build a scenario from raw data and compute it.

    Raises:
        SettlementInputError: Any validation failure, including missing fields.
    """
    return compute(build_scenario(payload))
