"""Salary-based benefit surcharge."""

from __future__ import annotations

from decimal import Decimal

from benefitcalc.calc.guards import check_config, check_non_negative
from benefitcalc.models.paycheck import CalculationConfig, FeatureToggles

MONTHS_PER_YEAR = 12


def calculate_high_salary_surcharge(
    salary: Decimal, config: CalculationConfig, toggles: FeatureToggles
) -> Decimal:
    """Monthly surcharge for salaries strictly above the high-salary threshold."""
    check_non_negative(salary, "salary")
    check_config(config)

    if salary <= config.high_salary_threshold:
        return Decimal("0")
    if not toggles.high_salary_surcharge_enabled:
        return Decimal("0")
    return salary * config.high_salary_percentage / MONTHS_PER_YEAR
