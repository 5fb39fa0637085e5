"""benefitcalc exception hierarchy."""

from __future__ import annotations


class BenefitCalcError(Exception):
    """Base exception for all benefitcalc errors."""


class InvalidArgumentError(BenefitCalcError, ValueError):
    """An input violates the calculation contract (negative salary, missing employee)."""


class ConfigurationError(BenefitCalcError):
    """Calculation configuration is unusable (e.g. zero paychecks per year)."""


class EmployeeNotFoundError(BenefitCalcError):
    """No employee with the requested id."""

    def __init__(self, employee_id: int) -> None:
        self.employee_id = employee_id
        super().__init__(f"Employee with id {employee_id} not found")


class DependentNotFoundError(BenefitCalcError):
    """No dependent with the requested id."""

    def __init__(self, dependent_id: int) -> None:
        self.dependent_id = dependent_id
        super().__init__(f"Dependent with id {dependent_id} not found")


class FeatureDisabledError(BenefitCalcError):
    """A feature flag gating the requested operation is off."""

    def __init__(self, flag: str, message: str) -> None:
        self.flag = flag
        super().__init__(message)


class FlagNotFoundError(BenefitCalcError):
    """Feature flag name is unknown to the store."""


class RepositoryError(BenefitCalcError):
    """Employee/dependent storage operation failed."""


class CacheError(BenefitCalcError):
    """Redis cache operation failed."""
