"""Employee, dependent and paycheck use cases on top of the repository."""

from __future__ import annotations

from datetime import date

from benefitcalc.calc import calculate_paycheck
from benefitcalc.core.exceptions import (
    DependentNotFoundError,
    EmployeeNotFoundError,
    FeatureDisabledError,
    InvalidArgumentError,
)
from benefitcalc.core.logging import get_logger
from benefitcalc.core.protocols import IEmployeeRepository
from benefitcalc.models.api import PagedResult
from benefitcalc.models.employee import (
    DependentCreate,
    DependentSnapshot,
    EmployeeCreate,
    EmployeeSnapshot,
    EmployeeUpdate,
    Relationship,
)
from benefitcalc.models.flags import FeatureFlag
from benefitcalc.models.paycheck import CalculationConfig, PaycheckResult
from benefitcalc.services.feature_flags import FeatureFlagService

logger = get_logger(__name__)


def parse_sort_order(sort_order: str | None) -> bool:
    """True (ascending) unless the order string says descending."""
    return (sort_order or "").strip().lower() not in ("desc", "descending")


def validate_employee(request: EmployeeUpdate, today: date | None = None) -> None:
    """Reject blank names, non-positive salary and future birth dates."""
    if today is None:
        today = date.today()
    if not request.first_name.strip():
        raise InvalidArgumentError("FirstName is required")
    if not request.last_name.strip():
        raise InvalidArgumentError("LastName is required")
    if request.salary <= 0:
        raise InvalidArgumentError("Salary must be positive")
    if request.date_of_birth > today:
        raise InvalidArgumentError("DateOfBirth cannot be in the future")


def validate_dependents(dependents: tuple[DependentCreate, ...], today: date | None = None) -> None:
    """Per-dependent checks plus the one spouse or domestic partner rule."""
    if today is None:
        today = date.today()
    for dependent in dependents:
        if not dependent.first_name.strip():
            raise InvalidArgumentError("Dependent FirstName is required")
        if not dependent.last_name.strip():
            raise InvalidArgumentError("Dependent LastName is required")
        if dependent.date_of_birth > today:
            raise InvalidArgumentError("Dependent DateOfBirth cannot be in the future")

    spouses = sum(d.relationship is Relationship.SPOUSE for d in dependents)
    partners = sum(d.relationship is Relationship.DOMESTIC_PARTNER for d in dependents)
    if spouses and partners:
        raise InvalidArgumentError("An employee may only have 1 spouse or domestic partner, not both")
    if spouses > 1:
        raise InvalidArgumentError("An employee may only have 1 spouse")
    if partners > 1:
        raise InvalidArgumentError("An employee may only have 1 domestic partner")


class EmployeeService:
    """Employee reads and writes over the repository, plus paycheck calculation."""

    def __init__(
        self,
        *,
        repository: IEmployeeRepository,
        flags: FeatureFlagService,
        calculation: CalculationConfig,
    ) -> None:
        self._repository = repository
        self._flags = flags
        self._calculation = calculation

    def get_employee(self, employee_id: int) -> EmployeeSnapshot:
        employee = self._repository.get_with_dependents(employee_id)
        if employee is None:
            logger.warning("employee_not_found", employee_id=employee_id)
            raise EmployeeNotFoundError(employee_id)
        return employee

    def list_employees(self, page: int = 1, page_size: int = 10, sort_by: str | None = None,
                       sort_order: str | None = None) -> PagedResult[EmployeeSnapshot]:
        return self._repository.list_paged(page, page_size, sort_by, parse_sort_order(sort_order))

    def create_employee(self, request: EmployeeCreate) -> EmployeeSnapshot:
        """Store a new employee and its dependents under freshly assigned ids."""
        validate_employee(request)
        validate_dependents(request.dependents)

        employee_id = self._repository.next_employee_id()
        first_dependent_id = self._repository.next_dependent_id()
        dependents = tuple(
            DependentSnapshot(id=first_dependent_id + offset, employee_id=employee_id, **dependent.model_dump())
            for offset, dependent in enumerate(request.dependents)
        )
        employee = EmployeeSnapshot(
            id=employee_id, dependents=dependents, **request.model_dump(exclude={"dependents"})
        )
        self._repository.add(employee)
        logger.info("employee_created", employee_id=employee_id, dependents=len(dependents))
        return employee

    def update_employee(self, employee_id: int, request: EmployeeUpdate) -> EmployeeSnapshot:
        validate_employee(request)
        updated = self.get_employee(employee_id).model_copy(
            update=request.model_dump(include=set(EmployeeUpdate.model_fields))
        )
        self._repository.add(updated)
        logger.info("employee_updated", employee_id=employee_id)
        return updated

    def delete_employee(self, employee_id: int) -> None:
        if not self._repository.delete(employee_id):
            logger.warning("employee_not_found", employee_id=employee_id)
            raise EmployeeNotFoundError(employee_id)
        logger.info("employee_deleted", employee_id=employee_id)

    def get_dependent(self, dependent_id: int) -> DependentSnapshot:
        self._require(FeatureFlag.ENABLE_DEPENDENT_OPERATIONS, "Dependent operations are currently disabled")
        dependent = self._repository.get_dependent(dependent_id)
        if dependent is None:
            logger.warning("dependent_not_found", dependent_id=dependent_id)
            raise DependentNotFoundError(dependent_id)
        return dependent

    def list_dependents(
        self,
        page: int = 1,
        page_size: int = 10,
        employee_id: int | None = None,
        relationship: Relationship | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> PagedResult[DependentSnapshot]:
        self._require(FeatureFlag.ENABLE_DEPENDENT_OPERATIONS, "Dependent operations are currently disabled")
        return self._repository.list_dependents_paged(
            page, page_size, employee_id, relationship, sort_by, parse_sort_order(sort_order)
        )

    def get_paycheck(self, employee_id: int, as_of: date | None = None) -> PaycheckResult:
        """Calculate the paycheck for a stored employee using the current flags."""
        self._require(FeatureFlag.ENABLE_PAYCHECK_CALCULATION, "Paycheck calculation feature is currently disabled")
        logger.info("paycheck_requested", employee_id=employee_id)

        employee = self.get_employee(employee_id)
        toggles = self._flags.resolve_toggles()
        paycheck = calculate_paycheck(employee, self._calculation, toggles, as_of)

        logger.info("paycheck_calculated", employee_id=employee_id)
        return paycheck

    def _require(self, flag: FeatureFlag, message: str) -> None:
        if not self._flags.is_enabled(flag):
            raise FeatureDisabledError(flag.value, message)
