"""Per-category entitlement profiles.

Single source of truth for the assembler: every line-item generator checks
the profile before emitting anything, and nothing is included by default.

| Category         | Notice      | 13th | Vac. prop. | FGTS multa | FGTS access |
|------------------|-------------|------|------------|------------|-------------|
| Sem justa causa  | paid        | yes  | yes        | 40%        | full        |
| Pedido demissão  | owed (desc) | yes  | yes        | —          | none        |
| Justa causa      | —           | no   | no         | —          | none        |
| Culpa recíproca  | half        | yes  | yes        | 20%        | full        |
| Acordo comum     | half        | yes  | yes        | 20%        | half        |

Overdue vacation and both statutory fines are due in every category.
"""

from __future__ import annotations

from decimal import Decimal

from rescisao.models.enums import TerminationCategory
from rescisao.schemas.settlement import EntitlementProfile
from rescisao.settlement.validation import UnsupportedCategoryNoticeCombination

_FULL = Decimal("1")
_HALF = Decimal("0.5")
_NONE = Decimal("0")

ENTITLEMENTS: dict[TerminationCategory, EntitlementProfile] = {
    TerminationCategory.WITHOUT_CAUSE: EntitlementProfile(
        notice_factor=_FULL,
        projects_notice=True,
        notice_owed_by_employee=False,
        thirteenth_eligible=True,
        vacation_proportional_eligible=True,
        overdue_vacation_eligible=True,
        fgts_deposits_eligible=True,
        fgts_multa_factor=Decimal("0.40"),
        fgts_withdrawal_factor=_FULL,
        fine_467_eligible=True,
        fine_477_eligible=True,
    ),
    TerminationCategory.RESIGNATION: EntitlementProfile(
        notice_factor=_NONE,
        projects_notice=False,
        notice_owed_by_employee=True,
        thirteenth_eligible=True,
        vacation_proportional_eligible=True,
        overdue_vacation_eligible=True,
        fgts_deposits_eligible=False,
        fgts_multa_factor=_NONE,
        fgts_withdrawal_factor=_NONE,
        fine_467_eligible=True,
        fine_477_eligible=True,
    ),
    TerminationCategory.FOR_CAUSE: EntitlementProfile(
        notice_factor=_NONE,
        projects_notice=False,
        notice_owed_by_employee=False,
        thirteenth_eligible=False,
        vacation_proportional_eligible=False,
        overdue_vacation_eligible=True,
        fgts_deposits_eligible=False,
        fgts_multa_factor=_NONE,
        fgts_withdrawal_factor=_NONE,
        fine_467_eligible=True,
        fine_477_eligible=True,
    ),
    TerminationCategory.MUTUAL_FAULT: EntitlementProfile(
        notice_factor=_HALF,
        projects_notice=True,
        notice_owed_by_employee=False,
        thirteenth_eligible=True,
        vacation_proportional_eligible=True,
        overdue_vacation_eligible=True,
        fgts_deposits_eligible=True,
        fgts_multa_factor=Decimal("0.20"),
        fgts_withdrawal_factor=_FULL,
        fine_467_eligible=True,
        fine_477_eligible=True,
    ),
    TerminationCategory.MUTUAL_AGREEMENT: EntitlementProfile(
        notice_factor=_HALF,
        projects_notice=True,
        notice_owed_by_employee=False,
        thirteenth_eligible=True,
        vacation_proportional_eligible=True,
        overdue_vacation_eligible=True,
        fgts_deposits_eligible=True,
        fgts_multa_factor=Decimal("0.20"),
        fgts_withdrawal_factor=_HALF,
        fine_467_eligible=True,
        fine_477_eligible=True,
    ),
}


def entitlement_for(category: TerminationCategory | str) -> EntitlementProfile:
    """Look up the capability record for a termination category.

    Raises:
        UnsupportedCategoryNoticeCombination: If the category is unknown.
    """
    try:
        return ENTITLEMENTS[TerminationCategory(category)]
    except (KeyError, ValueError) as exc:
        raise UnsupportedCategoryNoticeCombination(
            f"unknown termination category: {category!r}",
            user_message="Tipo de rescisão não suportado.",
        ) from exc
