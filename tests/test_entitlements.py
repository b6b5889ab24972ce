"""Tests for the entitlement matrix."""

from __future__ import annotations

from decimal import Decimal

import pytest

from rescisao.entitlements import ENTITLEMENTS, entitlement_for
from rescisao.models.enums import TerminationCategory
from rescisao.settlement.validation import UnsupportedCategoryNoticeCombination


class TestMatrix:
    """Each category maps to exactly the capabilities the CLT grants."""

    def test_every_category_covered(self) -> None:
        assert set(ENTITLEMENTS) == set(TerminationCategory)

    def test_without_cause(self) -> None:
        e = entitlement_for(TerminationCategory.WITHOUT_CAUSE)
        assert e.notice_factor == Decimal("1")
        assert e.projects_notice is True
        assert e.thirteenth_eligible is True
        assert e.vacation_proportional_eligible is True
        assert e.fgts_multa_factor == Decimal("0.40")
        assert e.fgts_withdrawal_factor == Decimal("1")

    def test_resignation(self) -> None:
        e = entitlement_for(TerminationCategory.RESIGNATION)
        assert e.notice_factor == Decimal("0")
        assert e.notice_owed_by_employee is True
        assert e.thirteenth_eligible is True
        assert e.fgts_multa_factor == Decimal("0")
        assert e.fgts_withdrawal_factor == Decimal("0")
        assert e.fgts_deposits_eligible is False

    def test_for_cause(self) -> None:
        e = entitlement_for(TerminationCategory.FOR_CAUSE)
        assert e.notice_factor == Decimal("0")
        assert e.projects_notice is False
        assert e.thirteenth_eligible is False
        assert e.vacation_proportional_eligible is False
        assert e.overdue_vacation_eligible is True
        assert e.fgts_multa_factor == Decimal("0")

    def test_mutual_fault(self) -> None:
        e = entitlement_for(TerminationCategory.MUTUAL_FAULT)
        assert e.notice_factor == Decimal("0.5")
        assert e.fgts_multa_factor == Decimal("0.20")
        assert e.fgts_withdrawal_factor == Decimal("1")

    def test_mutual_agreement(self) -> None:
        e = entitlement_for(TerminationCategory.MUTUAL_AGREEMENT)
        assert e.notice_factor == Decimal("0.5")
        assert e.fgts_multa_factor == Decimal("0.20")
        assert e.fgts_withdrawal_factor == Decimal("0.5")

    def test_lookup_by_value(self) -> None:
        assert entitlement_for("acordo_comum") == ENTITLEMENTS[TerminationCategory.MUTUAL_AGREEMENT]

    def test_unknown_category(self) -> None:
        with pytest.raises(UnsupportedCategoryNoticeCombination):
            entitlement_for("demissao_voluntaria")
