"""Aviso prévio length — Lei 12.506/2011.

30 days for any tenure, plus 3 days per full year of service, capped at 90.
The length is computed for every scenario; whether it is paid, projected
or deducted is decided by the entitlement matrix.
"""

from __future__ import annotations

from datetime import date

from rescisao.calculators.tenure import project_end_date, service_time

BASE_NOTICE_DAYS = 30
DAYS_PER_YEAR = 3
MAX_NOTICE_DAYS = 90


def notice_days_for(full_years: int) -> int:
    """Statutory notice length for a number of full years of service."""
    years = max(full_years, 0)
    return min(BASE_NOTICE_DAYS + DAYS_PER_YEAR * years, MAX_NOTICE_DAYS)


def statutory_notice_days(start: date, end: date) -> int:
    """Notice length, counting the projected extension as service time.

    Starts from raw tenure, projects the end date, and recomputes until the
    count stops changing. The count only grows and is capped, so this settles
    after at most a couple of passes.
    """
    days = notice_days_for(service_time(start, end).years)
    while True:
        projected = project_end_date(end, days)
        recomputed = notice_days_for(service_time(start, projected).years)
        if recomputed == days:
            return days
        days = recomputed
