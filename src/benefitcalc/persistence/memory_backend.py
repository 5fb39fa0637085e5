"""In-memory backends for unit tests and local development: dict-backed fakes."""

from __future__ import annotations

from benefitcalc.core.exceptions import FlagNotFoundError
from benefitcalc.models.api import PagedResult, clamp_paging
from benefitcalc.models.employee import DependentSnapshot, EmployeeSnapshot, Relationship
from benefitcalc.persistence.sorting import (
    DEPENDENT_SORT_KEYS,
    EMPLOYEE_SORT_KEYS,
    page_slice,
    sort_items,
)


class MemoryEmployeeRepository:
    """Dict-backed IEmployeeRepository."""

    def __init__(self, employees: list[EmployeeSnapshot] | None = None) -> None:
        self._employees: dict[int, EmployeeSnapshot] = {}
        for employee in employees or []:
            self.add(employee)

    def get_with_dependents(self, employee_id: int) -> EmployeeSnapshot | None:
        return self._employees.get(employee_id)

    def list_paged(
        self, page: int, page_size: int, sort_by: str | None = None, ascending: bool = True
    ) -> PagedResult[EmployeeSnapshot]:
        page, page_size = clamp_paging(page, page_size)
        ordered = sort_items(list(self._employees.values()), EMPLOYEE_SORT_KEYS, sort_by, ascending)
        return PagedResult[EmployeeSnapshot](
            items=page_slice(ordered, page, page_size),
            current_page=page,
            page_size=page_size,
            total_items=len(ordered),
        )

    def next_employee_id(self) -> int:
        return max(self._employees, default=0) + 1

    def next_dependent_id(self) -> int:
        return max((d.id for d in self._all_dependents()), default=0) + 1

    def add(self, employee: EmployeeSnapshot) -> EmployeeSnapshot:
        self._employees[employee.id] = employee
        return employee

    def delete(self, employee_id: int) -> bool:
        return self._employees.pop(employee_id, None) is not None

    def get_dependent(self, dependent_id: int) -> DependentSnapshot | None:
        for dependent in self._all_dependents():
            if dependent.id == dependent_id:
                return dependent
        return None

    def list_dependents_paged(
        self,
        page: int,
        page_size: int,
        employee_id: int | None = None,
        relationship: Relationship | None = None,
        sort_by: str | None = None,
        ascending: bool = True,
    ) -> PagedResult[DependentSnapshot]:
        page, page_size = clamp_paging(page, page_size)
        matches = [
            d for d in self._all_dependents()
            if (employee_id is None or d.employee_id == employee_id)
            and (relationship is None or d.relationship == relationship)
        ]
        ordered = sort_items(matches, DEPENDENT_SORT_KEYS, sort_by, ascending)
        return PagedResult[DependentSnapshot](
            items=page_slice(ordered, page, page_size),
            current_page=page,
            page_size=page_size,
            total_items=len(ordered),
        )

    def _all_dependents(self) -> list[DependentSnapshot]:
        return [d for e in self._employees.values() for d in e.dependents]


class MemoryFeatureFlagStore:
    """Dict-backed IFeatureFlagStore."""

    def __init__(self, flags: dict[str, bool] | None = None) -> None:
        self._flags: dict[str, bool] = dict(flags or {})

    def set(self, name: str, enabled: bool) -> None:
        self._flags[name] = enabled

    def is_enabled(self, name: str) -> bool:
        try:
            return self._flags[name]
        except KeyError:
            raise FlagNotFoundError(f"Feature flag {name!r} is not defined") from None


class MemoryCacheBackend:
    """Dict-backed ICacheBackend."""

    def __init__(self) -> None:
        self._store: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._store.get(key)

    def setex(self, key: str, ttl: int, value: str) -> None:
        self._store[key] = value

    def delete(self, key: str) -> None:
        self._store.pop(key, None)

    def ping(self) -> bool:
        return True
