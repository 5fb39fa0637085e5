"""Tests for gross pay, net pay and the full paycheck composition."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

import pytest

from benefitcalc.calc import calculate_gross_pay_per_paycheck, calculate_paycheck
from benefitcalc.core.exceptions import ConfigurationError, InvalidArgumentError
from benefitcalc.models.employee import Relationship
from benefitcalc.models.paycheck import CalculationConfig, FeatureToggles
from benefitcalc.persistence.seed import DEMO_EMPLOYEES
from tests.fakes import AS_OF, make_dependent, make_employee

CONFIG = CalculationConfig()
ALL_ON = FeatureToggles.all_enabled()


def cents(value: Decimal) -> Decimal:
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def demo(employee_id: int):
    return next(e for e in DEMO_EMPLOYEES if e.id == employee_id)


class TestGrossPay:
    def test_exact_division(self):
        assert calculate_gross_pay_per_paycheck(Decimal("52000"), CONFIG) == Decimal("2000")

    def test_not_rounded(self):
        gross = calculate_gross_pay_per_paycheck(Decimal("75420.99"), CONFIG)
        assert gross == Decimal("75420.99") / 26
        assert cents(gross) == Decimal("2900.81")

    def test_negative_salary_raises(self):
        with pytest.raises(InvalidArgumentError):
            calculate_gross_pay_per_paycheck(Decimal("-0.01"), CONFIG)

    def test_zero_paychecks_raise(self):
        with pytest.raises(ConfigurationError):
            calculate_gross_pay_per_paycheck(Decimal("52000"), CalculationConfig(paychecks_per_year=0))


class TestCalculatePaycheck:
    def test_no_dependents_under_threshold(self):
        result = calculate_paycheck(demo(1), CONFIG, ALL_ON, AS_OF)
        assert result.employee_id == 1
        assert result.employee_name == "LeBron James"
        assert cents(result.gross_pay) == Decimal("2900.81")
        assert cents(result.benefit_deductions) == Decimal("461.54")
        assert cents(result.net_pay) == Decimal("2439.27")

    def test_three_dependents_high_salary(self):
        result = calculate_paycheck(demo(2), CONFIG, ALL_ON, AS_OF)
        assert cents(result.gross_pay) == Decimal("3552.51")
        assert cents(result.benefit_deductions) == Decimal("1363.36")
        assert cents(result.net_pay) == Decimal("2189.15")
        assert len(result.details.dependent_breakdowns) == 3

    def test_senior_domestic_partner_high_salary(self):
        result = calculate_paycheck(demo(3), CONFIG, ALL_ON, AS_OF)
        assert cents(result.gross_pay) == Decimal("5508.12")
        assert cents(result.benefit_deductions) == Decimal("940.93")
        assert cents(result.net_pay) == Decimal("4567.19")
        (row,) = result.details.dependent_breakdowns
        assert row.relationship is Relationship.DOMESTIC_PARTNER
        assert row.age == 51
        assert row.senior_additional_cost == Decimal("200")

    def test_net_is_gross_minus_deductions(self):
        result = calculate_paycheck(demo(2), CONFIG, ALL_ON, AS_OF)
        assert result.net_pay == result.gross_pay - result.benefit_deductions
        assert result.benefit_deductions == result.details.per_paycheck_deduction

    def test_net_pay_can_go_negative(self):
        employee = make_employee(
            salary="10000",
            dependents=tuple(make_dependent(i, age=10) for i in range(1, 6)),
        )
        result = calculate_paycheck(employee, CONFIG, ALL_ON, AS_OF)
        assert result.net_pay < 0

    def test_zero_salary(self):
        result = calculate_paycheck(make_employee(salary="0"), CONFIG, ALL_ON, AS_OF)
        assert result.gross_pay == Decimal("0")
        assert result.net_pay == -result.benefit_deductions

    def test_repeatable(self):
        first = calculate_paycheck(demo(3), CONFIG, ALL_ON, AS_OF)
        second = calculate_paycheck(demo(3), CONFIG, ALL_ON, AS_OF)
        assert first == second

    def test_does_not_mutate_employee(self):
        employee = demo(2)
        before = employee.model_dump()
        calculate_paycheck(employee, CONFIG, ALL_ON, AS_OF)
        assert employee.model_dump() == before

    def test_toggles_off_drop_surcharges(self):
        off = FeatureToggles(
            high_salary_surcharge_enabled=False,
            senior_surcharge_enabled=False,
            detailed_breakdown_enabled=False,
        )
        result = calculate_paycheck(demo(3), CONFIG, off, AS_OF)
        assert result.details.total_monthly_cost == Decimal("1600")
        assert result.details.dependent_breakdowns == ()

    def test_missing_employee_raises(self):
        with pytest.raises(InvalidArgumentError):
            calculate_paycheck(None, CONFIG, ALL_ON, AS_OF)
