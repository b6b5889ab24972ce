"""Tenure and contract-date resolution.

Calendar-aware, via dateutil.relativedelta: a month of service counts once
its day-of-month has been reached, never by dividing a day count.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from rescisao.models.enums import NoticeDisposition
from rescisao.schemas.settlement import EntitlementProfile, ServiceTime, TerminationScenario
from rescisao.settlement.validation import InvalidDateRange

COMMERCIAL_MONTH_DAYS = 30


@dataclass(frozen=True)
class ResolvedDates:
    """Contract dates after applying the notice disposition."""

    projected_end_date: date
    last_worked_date: date
    resolved_notice_days: int


def service_time(start: date, end: date) -> ServiceTime:
    """Whole years, months and leftover days of service between two dates.

    Raises:
        InvalidDateRange: If end precedes start.
    """
    if end < start:
        raise InvalidDateRange(
            f"end {end} precedes start {start}",
            user_message="A data de demissão não pode ser anterior à data de admissão.",
        )
    delta = relativedelta(end, start)
    return ServiceTime(years=delta.years, months=delta.months, days=delta.days)


def project_end_date(end: date, notice_days: int) -> date:
    """Legal end of the contract once indemnified notice is counted as service."""
    return end + timedelta(days=notice_days)


def inclusive_days(start: date, end: date) -> int:
    """Number of calendar days from start to end, both included."""
    return (end - start).days + 1


def salary_balance_days(start: date, last_worked: date) -> int:
    """Days of the final month owed as saldo de salário.

    Counts from the 1st, or from the hire date when hired that month. Uses
    the commercial month: a month worked through its last day is 30 days
    whatever its length, and no month pays more than 30.
    """
    month_start = max(start, last_worked.replace(day=1))
    if month_start.day == 1 and last_worked == last_worked + relativedelta(day=31):
        return COMMERCIAL_MONTH_DAYS
    return min(inclusive_days(month_start, last_worked), COMMERCIAL_MONTH_DAYS)


def resolve_contract_dates(
    scenario: TerminationScenario,
    entitlement: EntitlementProfile,
    notice_days: int,
) -> ResolvedDates:
    """Apply the notice disposition to the notified end date.

    - Indemnified notice on a category that projects it extends the contract
      by the full statutory length.
    - Worked notice with explicit dates ends on the later of the served end
      and the notified end; the served length becomes the resolved count.
    - Worked notice without dates ends on the notified end.
    - Anything else leaves the notified end untouched. Unserved notice owed
      by a resigning employee resolves to one commercial month. Waived
      notice on a category with employer-paid notice still reports the
      statutory length; for cause reports none.

    Args:
        scenario: Validated termination scenario.
        entitlement: Capability record for the scenario's category.
        notice_days: Statutory notice length from the notice rule.

    Returns:
        ResolvedDates with the projected end, last worked day and notice count.
    """
    end = scenario.end_date
    disposition = scenario.notice_disposition

    if disposition == NoticeDisposition.WORKED:
        if scenario.notice_start_date is not None and scenario.notice_end_date is not None:
            served_end = max(scenario.notice_end_date, end)
            served = inclusive_days(scenario.notice_start_date, scenario.notice_end_date)
            return ResolvedDates(served_end, served_end, served)
        return ResolvedDates(end, end, notice_days)

    if disposition == NoticeDisposition.INDEMNIFIED and entitlement.projects_notice:
        return ResolvedDates(project_end_date(end, notice_days), end, notice_days)

    if entitlement.notice_owed_by_employee:
        return ResolvedDates(end, end, COMMERCIAL_MONTH_DAYS)

    if entitlement.projects_notice:
        return ResolvedDates(end, end, notice_days)

    return ResolvedDates(end, end, 0)
