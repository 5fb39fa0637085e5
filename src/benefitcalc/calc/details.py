"""Aggregate monthly benefit costs and spread them over paychecks."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from benefitcalc.calc.dependents import calculate_dependent_cost
from benefitcalc.calc.guards import check_config, check_non_negative, require
from benefitcalc.calc.surcharges import MONTHS_PER_YEAR, calculate_high_salary_surcharge
from benefitcalc.models.employee import EmployeeSnapshot
from benefitcalc.models.paycheck import (
    CalculationConfig,
    DependentCostBreakdown,
    FeatureToggles,
    PaycheckDetails,
)


def calculate_per_paycheck_deduction(total_monthly_cost: Decimal, config: CalculationConfig) -> Decimal:
    """Annualize the monthly cost, then divide it evenly across the paychecks."""
    check_non_negative(total_monthly_cost, "total_monthly_cost")
    check_config(config)

    total_yearly_cost = total_monthly_cost * MONTHS_PER_YEAR
    return total_yearly_cost / config.paychecks_per_year


def calculate_benefit_details(
    employee: EmployeeSnapshot,
    config: CalculationConfig,
    toggles: FeatureToggles,
    as_of: date | None = None,
) -> PaycheckDetails:
    """Itemized monthly benefit costs and the resulting per-paycheck deduction."""
    require(employee, "employee")
    check_config(config)

    total_monthly_cost = config.base_employee_monthly_cost
    dependents_cost = Decimal("0")
    senior_cost = Decimal("0")
    breakdowns: list[DependentCostBreakdown] = []

    for dependent in employee.dependents:
        row = calculate_dependent_cost(dependent, config, toggles, as_of)
        dependents_cost += row.base_cost
        senior_cost += row.senior_additional_cost
        total_monthly_cost += row.total_cost
        if toggles.detailed_breakdown_enabled:
            breakdowns.append(row)

    high_salary_cost = calculate_high_salary_surcharge(employee.salary, config, toggles)
    total_monthly_cost += high_salary_cost

    return PaycheckDetails(
        employee_base_cost=config.base_employee_monthly_cost,
        dependents_cost=dependents_cost,
        high_salary_additional_cost=high_salary_cost,
        senior_dependents_cost=senior_cost,
        total_monthly_cost=total_monthly_cost,
        per_paycheck_deduction=calculate_per_paycheck_deduction(total_monthly_cost, config),
        paychecks_per_year=config.paychecks_per_year,
        dependent_breakdowns=tuple(breakdowns),
    )
