"""Proportional accruals — 13th salary and vacation.

Both use the 1/12-per-month rule: a month counts in full once 15 or more
days of it have been worked. Values stay unrounded; the assembler rounds
once when it emits the line item.
"""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

from dateutil.relativedelta import relativedelta

from rescisao.calculators.tenure import inclusive_days

MIN_DAYS_FOR_MONTH = 15
MONTHS_PER_YEAR = 12


def months_for_thirteenth(start: date, projected_end: date) -> int:
    """Months of the termination year that count toward the 13th salary.

    Counts from January 1st of the projected end's year, or from the hire
    date when hired that year. Each calendar month counts when at least 15
    of its days fall inside the worked period.
    """
    cursor = max(date(projected_end.year, 1, 1), start)
    months = 0
    while cursor <= projected_end:
        month_end = cursor + relativedelta(day=31)
        active_end = min(month_end, projected_end)
        if inclusive_days(cursor, active_end) >= MIN_DAYS_FOR_MONTH:
            months += 1
        cursor = month_end + timedelta(days=1)
    return min(months, MONTHS_PER_YEAR)


def last_anniversary(start: date, on_or_before: date) -> date:
    """Most recent hire anniversary (período aquisitivo start) not after a date."""
    years = relativedelta(on_or_before, start).years
    return start + relativedelta(years=years)


def months_for_vacation(start: date, projected_end: date) -> int:
    """Months of the current acquisition period that count toward vacation."""
    anniversary = last_anniversary(start, projected_end)
    delta = relativedelta(projected_end, anniversary)
    months = delta.months
    if delta.days + 1 >= MIN_DAYS_FOR_MONTH:
        months += 1
    return min(months, MONTHS_PER_YEAR)


def thirteenth_months_prior_year(start: date, end: date, projected_end: date) -> int:
    """Months of the notified year owed when the projection crosses into the next.

    months_for_thirteenth only covers the projected end's year. This counts
    the notified year through December 31st, which the projected contract
    fully spans. Returns 0 when both dates fall in the same year.
    """
    if projected_end.year == end.year:
        return 0
    return months_for_thirteenth(start, date(end.year, 12, 31))


def vacation_periods_completed(start: date, end: date, projected_end: date) -> int:
    """Acquisition periods that close between the notified and projected ends.

    A period closes on the hire anniversary, the same boundary
    months_for_vacation restarts its count from.
    """
    return relativedelta(projected_end, start).years - relativedelta(end, start).years


def proportional_value(basis: Decimal, months: int) -> Decimal:
    """basis / 12 per counted month."""
    return basis * months / MONTHS_PER_YEAR


def vacation_bonus(value: Decimal) -> Decimal:
    """Constitutional one-third bonus (Art. 7, XVII CF)."""
    return value / 3


def overdue_vacation_value(basis: Decimal, periods: int) -> Decimal:
    """Full wage basis for each accrued but unused vacation period."""
    return basis * periods
