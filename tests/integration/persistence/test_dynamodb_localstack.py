"""Integration tests for the DynamoDB backends against LocalStack."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from benefitcalc.models.employee import EmployeeCreate, Relationship
from benefitcalc.models.paycheck import CalculationConfig
from benefitcalc.services.employees import EmployeeService
from benefitcalc.services.feature_flags import FeatureFlagService
from tests.integration.conftest import skip_no_localstack


@skip_no_localstack
class TestDynamoDBIntegration:
    def test_employee_from_seed(self, employee_repo):
        employee = employee_repo.get_with_dependents(3)
        assert employee.full_name == "Michael Jordan"
        assert employee.salary == Decimal("143211.12")

    def test_dependents_from_seed(self, employee_repo):
        page = employee_repo.list_dependents_paged(1, 10, relationship=Relationship.CHILD)
        assert page.total_items == 2

    def test_flags_from_seed(self, flag_table):
        assert flag_table.is_enabled("EnablePaycheckCalculation") is True
        assert flag_table.is_enabled("EnableRateLimiting") is False

    def test_create_then_delete(self, employee_repo, flag_table):
        service = EmployeeService(
            repository=employee_repo,
            flags=FeatureFlagService(flag_table),
            calculation=CalculationConfig(),
        )
        created = service.create_employee(EmployeeCreate(
            first_name="Zion",
            last_name="Williamson",
            salary=Decimal("65000"),
            date_of_birth=date(2000, 7, 6),
        ))
        assert employee_repo.get_with_dependents(created.id) == created
        service.delete_employee(created.id)
        assert employee_repo.get_with_dependents(created.id) is None
