"""Monthly benefit cost of a single dependent."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from benefitcalc.calc.age import calculate_age
from benefitcalc.calc.guards import check_config, require
from benefitcalc.models.employee import DependentSnapshot
from benefitcalc.models.paycheck import CalculationConfig, DependentCostBreakdown, FeatureToggles


def calculate_dependent_cost(
    dependent: DependentSnapshot,
    config: CalculationConfig,
    toggles: FeatureToggles,
    as_of: date | None = None,
) -> DependentCostBreakdown:
    """Flat dependent cost plus the senior surcharge when the dependent qualifies.

    The senior threshold is inclusive: a dependent exactly at the threshold age
    pays the surcharge.
    """
    require(dependent, "dependent")
    check_config(config)

    base_cost = config.dependent_monthly_cost
    age = calculate_age(dependent.date_of_birth, as_of)

    senior_cost = Decimal("0")
    if age >= config.senior_age_threshold and toggles.senior_surcharge_enabled:
        senior_cost = config.senior_monthly_surcharge

    return DependentCostBreakdown(
        dependent_id=dependent.id,
        dependent_name=dependent.full_name,
        relationship=dependent.relationship,
        age=age,
        base_cost=base_cost,
        senior_additional_cost=senior_cost,
        total_cost=base_cost + senior_cost,
    )
