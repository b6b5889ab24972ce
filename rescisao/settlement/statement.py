"""Plain-text Termo de Rescisão.

Renders a computed SettlementResult as a fixed-width statement: header,
earnings, deductions, totals. Meant for the HTTP text endpoint and for
attaching to case notes; it never recomputes anything.
"""

from __future__ import annotations

from rescisao.models.enums import (
    NOTICE_DISPOSITION_LABELS,
    TERMINATION_CATEGORY_LABELS,
    LineItemKind,
)
from rescisao.schemas.settlement import SettlementLineItem, SettlementResult, TerminationScenario
from rescisao.settlement.formatters import format_currency, format_date

WIDTH = 72


def _row(label: str, value: str) -> str:
    gap = max(WIDTH - len(label) - len(value), 1)
    return f"{label}{' ' * gap}{value}"


def _item_row(item: SettlementLineItem) -> str:
    return _row(f"  {item.description} ({item.reference})", format_currency(item.value))


def render_statement(scenario: TerminationScenario, result: SettlementResult) -> str:
    """Render the settlement as plain text."""
    lines: list[str] = [
        "TERMO DE RESCISÃO DO CONTRATO DE TRABALHO",
        "=" * WIDTH,
        _row("Empregado:", scenario.employee_name or "-"),
        _row("Empregador:", scenario.company_name or "-"),
        _row("Admissão:", format_date(scenario.start_date)),
        _row("Afastamento:", format_date(scenario.end_date)),
        _row("Projeção do aviso:", format_date(result.projected_end_date)),
        _row("Causa:", TERMINATION_CATEGORY_LABELS[scenario.termination_category]),
        _row(
            "Aviso prévio:",
            f"{NOTICE_DISPOSITION_LABELS[scenario.notice_disposition]} ({result.notice_days} dias)",
        ),
        "-" * WIDTH,
        "VERBAS RESCISÓRIAS",
    ]

    earnings = [i for i in result.items if i.kind == LineItemKind.EARNING]
    deductions = [i for i in result.items if i.kind == LineItemKind.DEDUCTION]

    lines.extend(_item_row(item) for item in earnings)

    if deductions:
        lines.append("DEDUÇÕES")
        lines.extend(_item_row(item) for item in deductions)

    lines += [
        "-" * WIDTH,
        _row("Total de proventos:", format_currency(result.total_earnings)),
        _row("Total de descontos:", format_currency(result.total_deductions)),
        _row("LÍQUIDO A RECEBER:", format_currency(result.net_total)),
    ]

    if result.fgts_withdrawable > 0:
        lines.append(_row("FGTS disponível para saque:", format_currency(result.fgts_withdrawable)))

    return "\n".join(lines) + "\n"
