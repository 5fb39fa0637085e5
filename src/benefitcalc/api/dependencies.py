"""FastAPI dependencies resolving services wired onto app.state."""

from __future__ import annotations

from fastapi import Request

from benefitcalc.services.employees import EmployeeService
from benefitcalc.services.feature_flags import FeatureFlagService


def get_employee_service(request: Request) -> EmployeeService:
    return request.app.state.employee_service


def get_flag_service(request: Request) -> FeatureFlagService:
    return request.app.state.flag_service
