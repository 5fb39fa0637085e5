"""Sort keys shared by the repository backends.

Sort field names are matched case-insensitively; unknown or missing names
fall back to sorting by id.
"""

from __future__ import annotations

from typing import Any, Callable

from benefitcalc.models.employee import DependentSnapshot, EmployeeSnapshot

EMPLOYEE_SORT_KEYS: dict[str, Callable[[EmployeeSnapshot], Any]] = {
    "firstname": lambda e: e.first_name,
    "lastname": lambda e: e.last_name,
    "salary": lambda e: e.salary,
    "dateofbirth": lambda e: e.date_of_birth,
}

DEPENDENT_SORT_KEYS: dict[str, Callable[[DependentSnapshot], Any]] = {
    "firstname": lambda d: d.first_name,
    "lastname": lambda d: d.last_name,
    "dateofbirth": lambda d: d.date_of_birth,
    "relationship": lambda d: d.relationship.value,
    "employeeid": lambda d: d.employee_id,
}


def sort_items(items: list, keys: dict[str, Callable[[Any], Any]],
               sort_by: str | None, ascending: bool) -> list:
    key = keys.get((sort_by or "").lower(), lambda item: item.id)
    return sorted(items, key=key, reverse=not ascending)


def page_slice(items: list, page: int, page_size: int) -> list:
    start = (page - 1) * page_size
    return items[start:start + page_size]
