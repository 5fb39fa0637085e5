"""Shared test doubles: in-memory backends and snapshot builders."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from benefitcalc.models.employee import DependentSnapshot, EmployeeSnapshot, Relationship
from benefitcalc.models.flags import FeatureFlag
from benefitcalc.persistence.memory_backend import (
    MemoryCacheBackend,
    MemoryEmployeeRepository,
    MemoryFeatureFlagStore,
)

# Fixed calculation date so ages never drift between runs.
AS_OF = date(2025, 6, 1)


def born_years_ago(years: int, as_of: date = AS_OF) -> date:
    """Birth date that makes someone exactly ``years`` old on ``as_of``."""
    return as_of.replace(year=as_of.year - years)


def make_dependent(
    dependent_id: int = 1,
    age: int = 30,
    relationship: Relationship = Relationship.CHILD,
    employee_id: int = 1,
    date_of_birth: date | None = None,
) -> DependentSnapshot:
    return DependentSnapshot(
        id=dependent_id,
        first_name=f"Dep{dependent_id}",
        last_name="Test",
        date_of_birth=date_of_birth or born_years_ago(age),
        relationship=relationship,
        employee_id=employee_id,
    )


def make_employee(
    employee_id: int = 1,
    salary: str | Decimal = "52000",
    dependents: tuple[DependentSnapshot, ...] = (),
    first_name: str = "Test",
    last_name: str = "Employee",
) -> EmployeeSnapshot:
    return EmployeeSnapshot(
        id=employee_id,
        first_name=first_name,
        last_name=last_name,
        salary=Decimal(salary),
        date_of_birth=date(1985, 1, 15),
        dependents=dependents,
    )


def flag_store(**overrides: bool) -> MemoryFeatureFlagStore:
    """Memory flag store with every flag on except the ones overridden by value name."""
    flags = {flag.value: True for flag in FeatureFlag}
    flags[FeatureFlag.ENABLE_ADVANCED_LOGGING.value] = False
    flags.update(overrides)
    return MemoryFeatureFlagStore(flags)


__all__ = [
    "AS_OF",
    "MemoryCacheBackend",
    "MemoryEmployeeRepository",
    "MemoryFeatureFlagStore",
    "born_years_ago",
    "flag_store",
    "make_dependent",
    "make_employee",
]
