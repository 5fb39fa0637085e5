"""Demo roster loaded into the in-memory backend and by scripts/seed_dynamodb.py."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from benefitcalc.models.employee import DependentSnapshot, EmployeeSnapshot, Relationship

DEMO_EMPLOYEES: tuple[EmployeeSnapshot, ...] = (
    EmployeeSnapshot(
        id=1,
        first_name="LeBron",
        last_name="James",
        salary=Decimal("75420.99"),
        date_of_birth=date(1984, 12, 30),
    ),
    EmployeeSnapshot(
        id=2,
        first_name="Ja",
        last_name="Morant",
        salary=Decimal("92365.22"),
        date_of_birth=date(1999, 8, 10),
        dependents=(
            DependentSnapshot(id=1, first_name="Spouse", last_name="Morant",
                              date_of_birth=date(1998, 3, 3),
                              relationship=Relationship.SPOUSE, employee_id=2),
            DependentSnapshot(id=2, first_name="Child1", last_name="Morant",
                              date_of_birth=date(2020, 6, 23),
                              relationship=Relationship.CHILD, employee_id=2),
            DependentSnapshot(id=3, first_name="Child2", last_name="Morant",
                              date_of_birth=date(2021, 5, 18),
                              relationship=Relationship.CHILD, employee_id=2),
        ),
    ),
    EmployeeSnapshot(
        id=3,
        first_name="Michael",
        last_name="Jordan",
        salary=Decimal("143211.12"),
        date_of_birth=date(1963, 2, 17),
        dependents=(
            DependentSnapshot(id=4, first_name="DP", last_name="Jordan",
                              date_of_birth=date(1974, 1, 2),
                              relationship=Relationship.DOMESTIC_PARTNER, employee_id=3),
        ),
    ),
)
