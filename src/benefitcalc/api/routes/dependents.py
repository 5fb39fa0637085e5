"""Dependent endpoints (read-only)."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from benefitcalc.api.dependencies import get_employee_service
from benefitcalc.models.api import ApiResponse, PagedResult
from benefitcalc.models.employee import DependentSnapshot, Relationship
from benefitcalc.services.employees import EmployeeService

router = APIRouter(tags=["dependents"])


@router.get("", response_model=ApiResponse[PagedResult[DependentSnapshot]])
def list_dependents(
    page: int = 1,
    page_size: int = Query(10, alias="pageSize"),
    employee_id: Optional[int] = Query(None, alias="employeeId"),
    relationship: Optional[Relationship] = None,
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: Optional[str] = Query(None, alias="sortOrder"),
    service: EmployeeService = Depends(get_employee_service),
) -> ApiResponse[PagedResult[DependentSnapshot]]:
    return ApiResponse(data=service.list_dependents(
        page, page_size, employee_id, relationship, sort_by, sort_order
    ))


@router.get("/{dependent_id}", response_model=ApiResponse[DependentSnapshot])
def get_dependent(
    dependent_id: int, service: EmployeeService = Depends(get_employee_service)
) -> ApiResponse[DependentSnapshot]:
    return ApiResponse(data=service.get_dependent(dependent_id))
