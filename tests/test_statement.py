"""Tests for the plain-text statement and pt-BR formatters."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from rescisao import compute
from rescisao.models.enums import NoticeDisposition, TerminationCategory
from rescisao.schemas.settlement import TerminationScenario
from rescisao.settlement.formatters import format_currency, format_date
from rescisao.settlement.statement import render_statement

# ── Formatter unit tests ─────────────────────────────────────────────


class TestFormatCurrency:
    def test_integer(self):
        assert format_currency(1000) == "R$ 1.000,00"

    def test_decimal(self):
        assert format_currency(Decimal("1750.50")) == "R$ 1.750,50"

    def test_large(self):
        assert format_currency(Decimal("1234567.89")) == "R$ 1.234.567,89"

    def test_small(self):
        assert format_currency(Decimal("0.50")) == "R$ 0,50"

    def test_negative(self):
        assert format_currency(Decimal("-10")) == "-R$ 10,00"

    def test_none(self):
        assert format_currency(None) == "-"


class TestFormatDate:
    def test_date(self):
        assert format_date(date(2024, 7, 1)) == "01/07/2024"

    def test_none(self):
        assert format_date(None) == "-"


# ── Statement rendering ──────────────────────────────────────────────


def _scenario(**overrides) -> TerminationScenario:
    data = {
        "employee_name": "Maria Souza",
        "company_name": "Comércio Exemplo Ltda",
        "salary": Decimal("3000.00"),
        "start_date": date(2022, 1, 1),
        "end_date": date(2024, 7, 1),
        "termination_category": TerminationCategory.WITHOUT_CAUSE,
        "notice_disposition": NoticeDisposition.INDEMNIFIED,
        "fgts_balance": Decimal("10000.00"),
    }
    data.update(overrides)
    return TerminationScenario(**data)


class TestRenderStatement:
    def test_header(self):
        scenario = _scenario()
        text = render_statement(scenario, compute(scenario))
        assert "Maria Souza" in text
        assert "Comércio Exemplo Ltda" in text
        assert "01/01/2022" in text
        assert "06/08/2024" in text
        assert "Sem Justa Causa" in text
        assert "Indenizado (36 dias)" in text

    def test_items_and_totals(self):
        scenario = _scenario()
        text = render_statement(scenario, compute(scenario))
        assert "Aviso Prévio Indenizado (36 dias)" in text
        assert "R$ 3.600,00" in text
        assert "R$ 12.393,73" in text
        assert "FGTS disponível para saque:" in text
        assert "DEDUÇÕES" not in text

    def test_deductions_section(self):
        scenario = _scenario(
            termination_category=TerminationCategory.RESIGNATION,
            notice_disposition=NoticeDisposition.NOT_SERVED,
        )
        text = render_statement(scenario, compute(scenario))
        assert "DEDUÇÕES" in text
        assert "Desconto Aviso Prévio" in text
        assert "FGTS disponível" not in text

    def test_anonymous_scenario(self):
        scenario = _scenario(employee_name="", company_name="")
        text = render_statement(scenario, compute(scenario))
        assert text.splitlines()[2].endswith("-")
