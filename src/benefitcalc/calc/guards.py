"""Input and configuration checks shared by the calculators."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from benefitcalc.core.exceptions import ConfigurationError, InvalidArgumentError
from benefitcalc.models.paycheck import CalculationConfig

_NON_NEGATIVE_FIELDS = (
    "base_employee_monthly_cost",
    "dependent_monthly_cost",
    "high_salary_threshold",
    "high_salary_percentage",
    "senior_age_threshold",
    "senior_monthly_surcharge",
)


def require(value: Any, name: str) -> None:
    """Reject a missing employee/dependent reference."""
    if value is None:
        raise InvalidArgumentError(f"{name} is required")


def check_config(config: CalculationConfig) -> None:
    """Raise ConfigurationError for a config the calculators cannot use."""
    require(config, "config")
    if config.paychecks_per_year <= 0:
        raise ConfigurationError(
            f"paychecks_per_year must be positive, got {config.paychecks_per_year}"
        )
    for field in _NON_NEGATIVE_FIELDS:
        if getattr(config, field) < 0:
            raise ConfigurationError(f"{field} cannot be negative")


def check_non_negative(amount: Decimal, name: str) -> None:
    if amount < 0:
        raise InvalidArgumentError(f"{name} cannot be negative, got {amount}")
