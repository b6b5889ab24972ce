"""Pydantic schemas for the termination settlement pipeline.

Pure data classes — no business logic. The scenario flows in, each stage
derives new values into DerivedState, and the assembler emits line items
collected into a SettlementResult. All models are frozen: nothing is
mutated once built.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from rescisao.models.enums import (
    LineItemGroup,
    LineItemKind,
    NoticeDisposition,
    TerminationCategory,
)

# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


class TerminationScenario(BaseModel):
    """Everything the engine needs to compute one settlement.

    Identity fields are display only and never enter the math.
    Range checks live in settlement.validation so that bad inputs map to
    the engine's own error taxonomy rather than pydantic's.
    """

    model_config = ConfigDict(frozen=True)

    # Identity (display only)
    employee_name: str = ""
    company_name: str = ""

    # Contract
    salary: Decimal
    start_date: date
    end_date: date                     # notified end, before any projection
    termination_category: TerminationCategory

    # Notice
    notice_disposition: NoticeDisposition
    notice_start_date: date | None = None
    notice_end_date: date | None = None

    # Vacation / tax
    overdue_vacation_periods: int = 0
    dependents: int = 0                # carried through for the caller's IRRF

    # Habitual extras folded into the wage basis
    additional_hours: Decimal = Field(default=Decimal("0"))
    danger_pay: bool = False           # periculosidade
    night_shift_pay: bool = False      # adicional noturno

    # FGTS
    fgts_balance: Decimal = Field(default=Decimal("0"))

    # Statutory fines, flagged by the caller
    apply_fine_467: bool = False
    apply_fine_477: bool = False


# ---------------------------------------------------------------------------
# Derived values
# ---------------------------------------------------------------------------


class ServiceTime(BaseModel):
    """Calendar-aware length of service."""

    model_config = ConfigDict(frozen=True)

    years: int
    months: int
    days: int


class WageBasis(BaseModel):
    """Monthly remuneration used for every proportional calculation.

    Kept at full precision; rounding happens only when a line item is emitted.
    """

    model_config = ConfigDict(frozen=True)

    salary: Decimal
    danger_pay: Decimal = Decimal("0")
    night_shift_pay: Decimal = Decimal("0")
    night_shift_rest: Decimal = Decimal("0")   # DSR reflex on night shift
    overtime: Decimal = Decimal("0")
    overtime_rest: Decimal = Decimal("0")      # DSR reflex on overtime
    total: Decimal


class EntitlementProfile(BaseModel):
    """Capabilities granted by a termination category."""

    model_config = ConfigDict(frozen=True)

    notice_factor: Decimal                # share of notice paid by the employer
    projects_notice: bool                 # indemnified notice extends the contract
    notice_owed_by_employee: bool         # unserved notice is deducted
    thirteenth_eligible: bool
    vacation_proportional_eligible: bool
    overdue_vacation_eligible: bool
    fgts_deposits_eligible: bool
    fgts_multa_factor: Decimal
    fgts_withdrawal_factor: Decimal
    fine_467_eligible: bool
    fine_477_eligible: bool


class DerivedState(BaseModel):
    """Values derived from the scenario, stage by stage."""

    model_config = ConfigDict(frozen=True)

    tenure: ServiceTime
    notice_days: int                  # statutory length, always computed
    resolved_notice_days: int         # length actually paid, projected or served
    projected_end_date: date
    last_worked_date: date
    months_thirteenth: int
    months_vacation: int
    salary_balance_days: int          # commercial days of the final month
    thirteenth_months_prior_year: int = 0   # notified year, when projected past Dec 31
    vacation_periods_completed: int = 0     # periods closed by the projection
    wage_basis: WageBasis


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class SettlementLineItem(BaseModel):
    """One line of the settlement statement."""

    model_config = ConfigDict(frozen=True)

    description: str
    reference: str                     # e.g. "36 dias", "7/12 avos"
    value: Decimal
    calculation_basis: Decimal | None = None
    kind: LineItemKind
    group: LineItemGroup


class SettlementResult(BaseModel):
    """Itemized settlement returned by compute()."""

    model_config = ConfigDict(frozen=True)

    items: list[SettlementLineItem]
    total_earnings: Decimal
    total_deductions: Decimal
    net_total: Decimal
    projected_end_date: date
    notice_days: int
    fgts_withdrawable: Decimal         # informational, not part of the totals
    dependents: int
    derived: DerivedState
