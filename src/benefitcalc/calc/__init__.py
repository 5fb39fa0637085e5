"""Benefit and paycheck calculation engine.

Pure functions over immutable inputs: no I/O, no settings lookups, no flag
lookups. Callers resolve CalculationConfig and FeatureToggles first.
"""

from __future__ import annotations

from benefitcalc.calc.age import calculate_age
from benefitcalc.calc.dependents import calculate_dependent_cost
from benefitcalc.calc.details import calculate_benefit_details, calculate_per_paycheck_deduction
from benefitcalc.calc.paycheck import calculate_gross_pay_per_paycheck, calculate_paycheck
from benefitcalc.calc.surcharges import MONTHS_PER_YEAR, calculate_high_salary_surcharge

__all__ = [
    "MONTHS_PER_YEAR",
    "calculate_age",
    "calculate_benefit_details",
    "calculate_dependent_cost",
    "calculate_gross_pay_per_paycheck",
    "calculate_high_salary_surcharge",
    "calculate_paycheck",
    "calculate_per_paycheck_deduction",
]
