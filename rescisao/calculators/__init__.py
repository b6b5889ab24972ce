"""Settlement calculators — tenure, notice, wage basis, proportional accruals."""

from rescisao.calculators.accruals import (
    months_for_thirteenth,
    months_for_vacation,
    overdue_vacation_value,
    proportional_value,
    thirteenth_months_prior_year,
    vacation_bonus,
    vacation_periods_completed,
)
from rescisao.calculators.notice import notice_days_for, statutory_notice_days
from rescisao.calculators.tenure import (
    inclusive_days,
    project_end_date,
    resolve_contract_dates,
    salary_balance_days,
    service_time,
)
from rescisao.calculators.wage_basis import calculate_wage_basis

__all__ = [
    "service_time",
    "project_end_date",
    "inclusive_days",
    "resolve_contract_dates",
    "salary_balance_days",
    "notice_days_for",
    "statutory_notice_days",
    "calculate_wage_basis",
    "months_for_thirteenth",
    "months_for_vacation",
    "proportional_value",
    "vacation_bonus",
    "overdue_vacation_value",
    "thirteenth_months_prior_year",
    "vacation_periods_completed",
]
