"""Protocol interfaces for benefitcalc collaborators.

Services depend on these Protocols only; backends satisfy them structurally
and can be swapped for the in-memory fakes in tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from benefitcalc.models.api import PagedResult
from benefitcalc.models.employee import DependentSnapshot, EmployeeSnapshot, Relationship


# ---------------------------------------------------------------------------
# Persistence: Employee Repository
# ---------------------------------------------------------------------------

@runtime_checkable
class IEmployeeRepository(Protocol):
    """Employee and dependent storage. Employees are always returned with dependents."""

    def get_with_dependents(self, employee_id: int) -> EmployeeSnapshot | None: ...

    def list_paged(
        self, page: int, page_size: int, sort_by: str | None = None, ascending: bool = True
    ) -> PagedResult[EmployeeSnapshot]: ...

    def next_employee_id(self) -> int: ...

    def next_dependent_id(self) -> int: ...

    def add(self, employee: EmployeeSnapshot) -> EmployeeSnapshot:
        """Insert or replace an employee together with its dependents."""
        ...

    def delete(self, employee_id: int) -> bool: ...

    def get_dependent(self, dependent_id: int) -> DependentSnapshot | None: ...

    def list_dependents_paged(
        self,
        page: int,
        page_size: int,
        employee_id: int | None = None,
        relationship: Relationship | None = None,
        sort_by: str | None = None,
        ascending: bool = True,
    ) -> PagedResult[DependentSnapshot]: ...


# ---------------------------------------------------------------------------
# Feature Flags
# ---------------------------------------------------------------------------

@runtime_checkable
class IFeatureFlagStore(Protocol):
    """Source of named boolean feature flags."""

    def is_enabled(self, name: str) -> bool: ...


# ---------------------------------------------------------------------------
# Persistence: Cache Backend
# ---------------------------------------------------------------------------

@runtime_checkable
class ICacheBackend(Protocol):
    """Redis-compatible cache interface."""

    def get(self, key: str) -> str | None: ...

    def setex(self, key: str, ttl: int, value: str) -> None: ...

    def delete(self, key: str) -> None: ...

    def ping(self) -> bool: ...
