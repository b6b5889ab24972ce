"""Input validation for termination scenarios.

Every failure is raised before any stage runs, so the caller never sees a
partial result. Each error carries a Portuguese user_message that the HTTP
layer can show to the end user as-is.
"""

from __future__ import annotations

from decimal import Decimal

from rescisao.models.enums import NoticeDisposition
from rescisao.schemas.settlement import TerminationScenario

MAX_AMOUNT = Decimal("1000000000")          # R$ 1 bilhão per monetary input
MAX_OVERDUE_VACATION_PERIODS = 100


class SettlementInputError(ValueError):
    """Base class for scenario validation failures."""

    code = "invalid_input"

    def __init__(self, message: str, user_message: str) -> None:
        super().__init__(message)
        self.message = message
        self.user_message = user_message


class InvalidDateRange(SettlementInputError):
    """Raised when the employment end date precedes the start date."""

    code = "invalid_date_range"


class InvalidAmount(SettlementInputError):
    """Raised when a monetary amount or a count is negative or out of range."""

    code = "invalid_amount"


class UnsupportedCategoryNoticeCombination(SettlementInputError):
    """Raised when notice inputs contradict each other or the category."""

    code = "unsupported_notice_combination"


class MissingScenarioField(SettlementInputError):
    """Raised when a payload lacks required fields or carries bad types."""

    code = "missing_field"


def _check_non_negative(name: str, label: str, value: Decimal | int) -> None:
    if value < 0:
        raise InvalidAmount(
            f"{name} must be non-negative, got {value}",
            user_message=f"{label} não pode ser negativo.",
        )


def _check_at_most(name: str, label: str, value: Decimal | int, limit: Decimal | int) -> None:
    if value > limit:
        raise InvalidAmount(
            f"{name} must not exceed {limit}, got {value}",
            user_message=f"{label} excede o limite aceito.",
        )


def check_date_range(scenario: TerminationScenario) -> None:
    """Raise InvalidDateRange when end_date < start_date."""
    if scenario.end_date < scenario.start_date:
        raise InvalidDateRange(
            f"end_date {scenario.end_date} precedes start_date {scenario.start_date}",
            user_message="A data de demissão não pode ser anterior à data de admissão.",
        )


def check_amounts(scenario: TerminationScenario) -> None:
    """Raise InvalidAmount for any negative amount or count, or one above its limit."""
    _check_non_negative("salary", "O salário", scenario.salary)
    _check_non_negative(
        "overdue_vacation_periods", "O número de férias vencidas", scenario.overdue_vacation_periods,
    )
    _check_non_negative("additional_hours", "O valor de horas extras", scenario.additional_hours)
    _check_non_negative("fgts_balance", "O saldo do FGTS", scenario.fgts_balance)
    _check_non_negative("dependents", "O número de dependentes", scenario.dependents)

    _check_at_most("salary", "O salário", scenario.salary, MAX_AMOUNT)
    _check_at_most("additional_hours", "O valor de horas extras", scenario.additional_hours, MAX_AMOUNT)
    _check_at_most("fgts_balance", "O saldo do FGTS", scenario.fgts_balance, MAX_AMOUNT)
    _check_at_most(
        "overdue_vacation_periods",
        "O número de férias vencidas",
        scenario.overdue_vacation_periods,
        MAX_OVERDUE_VACATION_PERIODS,
    )


def check_notice_override(scenario: TerminationScenario) -> None:
    """Validate the optional explicit notice dates against the disposition.

    The override pair is only meaningful for worked notice, must be complete,
    ordered, and cannot start before the hire date.
    """
    start, end = scenario.notice_start_date, scenario.notice_end_date
    if start is None and end is None:
        return

    if scenario.notice_disposition != NoticeDisposition.WORKED:
        raise UnsupportedCategoryNoticeCombination(
            f"notice dates given for disposition {scenario.notice_disposition.value}",
            user_message="Datas do aviso prévio só se aplicam ao aviso trabalhado.",
        )

    if start is None or end is None:
        raise UnsupportedCategoryNoticeCombination(
            "notice override requires both notice_start_date and notice_end_date",
            user_message="Informe as datas de início e fim do aviso prévio trabalhado.",
        )

    if end < start:
        raise UnsupportedCategoryNoticeCombination(
            f"notice_end_date {end} precedes notice_start_date {start}",
            user_message="O fim do aviso prévio não pode ser anterior ao início.",
        )

    if start < scenario.start_date:
        raise UnsupportedCategoryNoticeCombination(
            f"notice_start_date {start} precedes start_date {scenario.start_date}",
            user_message="O aviso prévio não pode começar antes da admissão.",
        )


def validate_scenario(scenario: TerminationScenario) -> None:
    """Run every check; the first failure aborts the computation."""
    check_date_range(scenario)
    check_amounts(scenario)
    check_notice_override(scenario)
