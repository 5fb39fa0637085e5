"""Calculation inputs (config, toggles) and paycheck outputs."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from benefitcalc.core.types import Money
from benefitcalc.models.base import CamelModel
from benefitcalc.models.employee import Relationship


class CalculationConfig(BaseModel):
    """Benefit cost rules. Built from CalculationSettings and passed into every call."""

    model_config = ConfigDict(frozen=True)

    base_employee_monthly_cost: Decimal = Decimal("1000")
    dependent_monthly_cost: Decimal = Decimal("600")
    high_salary_threshold: Decimal = Decimal("80000")  # annual
    high_salary_percentage: Decimal = Decimal("0.02")  # fraction of annual salary
    senior_age_threshold: int = 50
    senior_monthly_surcharge: Decimal = Decimal("200")
    paychecks_per_year: int = 26


class FeatureToggles(BaseModel):
    """Feature flags resolved once per request. Every toggle must be decided."""

    model_config = ConfigDict(frozen=True)

    high_salary_surcharge_enabled: bool
    senior_surcharge_enabled: bool
    detailed_breakdown_enabled: bool

    @classmethod
    def all_enabled(cls) -> FeatureToggles:
        return cls(
            high_salary_surcharge_enabled=True,
            senior_surcharge_enabled=True,
            detailed_breakdown_enabled=True,
        )


class DependentCostBreakdown(CamelModel):
    """Monthly cost of a single dependent."""

    dependent_id: int
    dependent_name: str
    relationship: Relationship
    age: int
    base_cost: Money
    senior_additional_cost: Money
    total_cost: Money


class PaycheckDetails(CamelModel):
    """How the per-paycheck benefit deduction was built up from monthly costs."""

    employee_base_cost: Money
    dependents_cost: Money
    high_salary_additional_cost: Money
    senior_dependents_cost: Money
    total_monthly_cost: Money
    per_paycheck_deduction: Money
    paychecks_per_year: int
    dependent_breakdowns: tuple[DependentCostBreakdown, ...] = ()


class PaycheckResult(CamelModel):
    """Gross pay, benefit deduction and net pay for one paycheck."""

    employee_id: int
    employee_name: str
    gross_pay: Money
    benefit_deductions: Money
    net_pay: Money
    details: PaycheckDetails
