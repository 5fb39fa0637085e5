"""Employee and dependent snapshots handed to the calculation engine.

Snapshots are loaded by the repository layer with dependents fully
materialized. The engine reads them and never mutates them.
"""

from __future__ import annotations

from datetime import date
from enum import StrEnum

from benefitcalc.core.types import Money
from benefitcalc.models.base import CamelModel


class Relationship(StrEnum):
    SPOUSE = "Spouse"
    DOMESTIC_PARTNER = "DomesticPartner"
    CHILD = "Child"


class DependentSnapshot(CamelModel):
    """A dependent as stored for an employee."""

    id: int
    first_name: str = ""
    last_name: str = ""
    date_of_birth: date
    relationship: Relationship
    employee_id: int

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class EmployeeSnapshot(CamelModel):
    """An employee with all dependents loaded."""

    id: int
    first_name: str = ""
    last_name: str = ""
    salary: Money  # annual
    date_of_birth: date
    dependents: tuple[DependentSnapshot, ...] = ()

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class DependentCreate(CamelModel):
    """Dependent supplied when creating an employee; the id is assigned on save."""

    first_name: str
    last_name: str
    date_of_birth: date
    relationship: Relationship


class EmployeeUpdate(CamelModel):
    """Editable employee fields. Dependents are left as stored."""

    first_name: str
    last_name: str
    salary: Money
    date_of_birth: date


class EmployeeCreate(EmployeeUpdate):
    dependents: tuple[DependentCreate, ...] = ()
