"""Employee endpoints: reads, writes and the paycheck calculation."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response

from benefitcalc.api.dependencies import get_employee_service
from benefitcalc.models.api import ApiResponse, PagedResult
from benefitcalc.models.employee import EmployeeCreate, EmployeeSnapshot, EmployeeUpdate
from benefitcalc.models.paycheck import PaycheckResult
from benefitcalc.services.employees import EmployeeService

router = APIRouter(tags=["employees"])


@router.get("", response_model=ApiResponse[PagedResult[EmployeeSnapshot]])
def list_employees(
    page: int = 1,
    page_size: int = Query(10, alias="pageSize"),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: Optional[str] = Query(None, alias="sortOrder"),
    service: EmployeeService = Depends(get_employee_service),
) -> ApiResponse[PagedResult[EmployeeSnapshot]]:
    """Employees with dependents; sortable by firstName, lastName, salary, dateOfBirth."""
    return ApiResponse(data=service.list_employees(page, page_size, sort_by, sort_order))


@router.get("/{employee_id}", response_model=ApiResponse[EmployeeSnapshot])
def get_employee(
    employee_id: int, service: EmployeeService = Depends(get_employee_service)
) -> ApiResponse[EmployeeSnapshot]:
    return ApiResponse(data=service.get_employee(employee_id))


@router.get("/{employee_id}/paycheck", response_model=ApiResponse[PaycheckResult])
def get_employee_paycheck(
    employee_id: int, service: EmployeeService = Depends(get_employee_service)
) -> ApiResponse[PaycheckResult]:
    return ApiResponse(data=service.get_paycheck(employee_id))


@router.post("", status_code=201, response_model=ApiResponse[EmployeeSnapshot])
def create_employee(
    body: EmployeeCreate,
    request: Request,
    response: Response,
    service: EmployeeService = Depends(get_employee_service),
) -> ApiResponse[EmployeeSnapshot]:
    """Create an employee, optionally with dependents (at most one spouse or domestic partner)."""
    employee = service.create_employee(body)
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{employee.id}"
    return ApiResponse(data=employee, message="Employee created successfully")


@router.put("/{employee_id}", response_model=ApiResponse[EmployeeSnapshot])
def update_employee(
    employee_id: int,
    body: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
) -> ApiResponse[EmployeeSnapshot]:
    return ApiResponse(data=service.update_employee(employee_id, body), message="Employee updated successfully")


@router.delete("/{employee_id}", response_model=ApiResponse)
def delete_employee(
    employee_id: int, service: EmployeeService = Depends(get_employee_service)
) -> ApiResponse:
    service.delete_employee(employee_id)
    return ApiResponse(message="Employee deleted successfully")
