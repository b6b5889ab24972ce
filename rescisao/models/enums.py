"""Domain enums used across the settlement schemas and calculators.

All enums use str mixin for JSON serialization; values are the Portuguese
terms used on the Termo de Rescisão.
"""

from __future__ import annotations

from enum import Enum


class TerminationCategory(str, Enum):
    """Legal category of the termination — drives the entitlement matrix."""

    WITHOUT_CAUSE = "sem_justa_causa"      # dispensa pelo empregador
    RESIGNATION = "pedido_demissao"        # pedido de demissão
    FOR_CAUSE = "justa_causa"              # Art. 482 CLT
    MUTUAL_FAULT = "culpa_reciproca"       # Art. 484 CLT
    MUTUAL_AGREEMENT = "acordo_comum"      # Art. 484-A CLT


class NoticeDisposition(str, Enum):
    """How the aviso prévio was handled."""

    INDEMNIFIED = "indenizado"
    WORKED = "trabalhado"
    NOT_SERVED = "dispensado"  # dispensado pelo empregador / não cumprido


class LineItemKind(str, Enum):
    """Side of the statement a line item lands on."""

    EARNING = "earning"
    DEDUCTION = "deduction"


class LineItemGroup(str, Enum):
    """Statement section a line item belongs to."""

    TERMINATION = "rescisorias"
    VACATION = "ferias"
    THIRTEENTH_SALARY = "decimo_terceiro"
    FGTS = "fgts"
    FINES = "multas"
    OTHER = "outros"


# Portuguese display names for the statement header
TERMINATION_CATEGORY_LABELS: dict[TerminationCategory, str] = {
    TerminationCategory.WITHOUT_CAUSE: "Sem Justa Causa",
    TerminationCategory.RESIGNATION: "Pedido de Demissão",
    TerminationCategory.FOR_CAUSE: "Justa Causa",
    TerminationCategory.MUTUAL_FAULT: "Culpa Recíproca",
    TerminationCategory.MUTUAL_AGREEMENT: "Acordo Comum (Art. 484-A)",
}

NOTICE_DISPOSITION_LABELS: dict[NoticeDisposition, str] = {
    NoticeDisposition.INDEMNIFIED: "Indenizado",
    NoticeDisposition.WORKED: "Trabalhado",
    NoticeDisposition.NOT_SERVED: "Dispensado/Não Cumprido",
}
