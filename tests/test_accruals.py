"""Tests for the wage basis and proportional accruals.

Tests cover:
- Habitual extras folded into the wage basis with DSR reflexes
- 13th salary month counting (15-day rule, hire-year start)
- Vacation month counting from the last hire anniversary
- Proportional values and the 1/3 bonus
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from rescisao.calculators.accruals import (
    last_anniversary,
    months_for_thirteenth,
    months_for_vacation,
    overdue_vacation_value,
    proportional_value,
    thirteenth_months_prior_year,
    vacation_bonus,
    vacation_periods_completed,
)
from rescisao.calculators.wage_basis import calculate_wage_basis


class TestWageBasis:
    """Test remuneration basis composition."""

    def test_salary_only(self) -> None:
        basis = calculate_wage_basis(Decimal("3000"))
        assert basis.total == Decimal("3000")
        assert basis.danger_pay == Decimal("0")

    def test_danger_pay(self) -> None:
        basis = calculate_wage_basis(Decimal("3000"), danger_pay=True)
        assert basis.danger_pay == Decimal("900.00")
        assert basis.total == Decimal("3900.00")

    def test_night_shift_with_rest_reflex(self) -> None:
        basis = calculate_wage_basis(Decimal("3000"), night_shift_pay=True)
        assert basis.night_shift_pay == Decimal("600.00")
        assert basis.night_shift_rest == Decimal("100")
        assert basis.total == Decimal("3700")

    def test_overtime_with_rest_reflex(self) -> None:
        basis = calculate_wage_basis(Decimal("3000"), additional_hours=Decimal("600"))
        assert basis.overtime_rest == Decimal("100")
        assert basis.total == Decimal("3700")

    def test_all_extras(self) -> None:
        basis = calculate_wage_basis(
            Decimal("3000"),
            additional_hours=Decimal("600"),
            danger_pay=True,
            night_shift_pay=True,
        )
        assert basis.total == Decimal("5300")


class TestMonthsForThirteenth:
    """Test 13th salary 1/12 counting."""

    def test_fifteen_days_counts(self) -> None:
        assert months_for_thirteenth(date(2020, 1, 1), date(2024, 3, 15)) == 3

    def test_fourteen_days_does_not_count(self) -> None:
        assert months_for_thirteenth(date(2020, 1, 1), date(2024, 3, 14)) == 2

    def test_hired_same_year_fifteen_days(self) -> None:
        assert months_for_thirteenth(date(2024, 3, 17), date(2024, 3, 31)) == 1

    def test_hired_same_year_fourteen_days(self) -> None:
        assert months_for_thirteenth(date(2024, 3, 18), date(2024, 3, 31)) == 0

    def test_projection_into_next_month(self) -> None:
        """Jan–Jul full, Aug 1–6 short → 7."""
        assert months_for_thirteenth(date(2022, 1, 1), date(2024, 8, 6)) == 7

    def test_full_year(self) -> None:
        assert months_for_thirteenth(date(2020, 5, 1), date(2024, 12, 31)) == 12

    def test_february_counts_in_full(self) -> None:
        assert months_for_thirteenth(date(2023, 1, 1), date(2023, 2, 28)) == 2


class TestMonthsForVacation:
    """Test vacation 1/12 counting from the acquisition anniversary."""

    def test_last_anniversary(self) -> None:
        assert last_anniversary(date(2022, 1, 1), date(2024, 8, 6)) == date(2024, 1, 1)
        assert last_anniversary(date(2022, 9, 1), date(2024, 8, 6)) == date(2023, 9, 1)

    def test_fifteen_day_remainder_counts(self) -> None:
        assert months_for_vacation(date(2023, 5, 10), date(2024, 7, 24)) == 3

    def test_fourteen_day_remainder_does_not_count(self) -> None:
        assert months_for_vacation(date(2023, 5, 10), date(2024, 7, 23)) == 2

    def test_projected_example(self) -> None:
        assert months_for_vacation(date(2022, 1, 1), date(2024, 8, 6)) == 7

    def test_first_period(self) -> None:
        assert months_for_vacation(date(2024, 1, 1), date(2024, 6, 30)) == 6

    def test_complete_period_capped(self) -> None:
        assert months_for_vacation(date(2023, 1, 1), date(2023, 12, 31)) == 12

    def test_on_anniversary(self) -> None:
        assert months_for_vacation(date(2022, 1, 1), date(2024, 1, 1)) == 0


class TestPeriodsClosedByProjection:
    """Accrual periods that end between the notified and projected end dates."""

    def test_prior_year_counted_when_crossing_january(self) -> None:
        assert thirteenth_months_prior_year(date(2020, 1, 1), date(2024, 12, 10), date(2025, 1, 24)) == 12

    def test_prior_year_from_mid_year_hire(self) -> None:
        assert thirteenth_months_prior_year(date(2024, 6, 20), date(2024, 12, 10), date(2025, 1, 9)) == 6

    def test_no_prior_year_within_same_year(self) -> None:
        assert thirteenth_months_prior_year(date(2022, 1, 1), date(2024, 7, 1), date(2024, 8, 6)) == 0

    def test_period_completed_by_projection(self) -> None:
        assert vacation_periods_completed(date(2022, 7, 20), date(2024, 7, 1), date(2024, 8, 6)) == 1

    def test_no_anniversary_crossed(self) -> None:
        assert vacation_periods_completed(date(2022, 1, 1), date(2024, 7, 1), date(2024, 8, 6)) == 0

    def test_unprojected_end(self) -> None:
        assert vacation_periods_completed(date(2022, 7, 20), date(2024, 7, 1), date(2024, 7, 1)) == 0


class TestValues:
    def test_proportional_value(self) -> None:
        assert proportional_value(Decimal("3000"), 7) == Decimal("1750")

    def test_vacation_bonus(self) -> None:
        assert vacation_bonus(Decimal("3000")) == Decimal("1000")

    def test_overdue_vacation_value(self) -> None:
        assert overdue_vacation_value(Decimal("3000"), 2) == Decimal("6000")
