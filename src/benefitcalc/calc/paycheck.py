"""Paycheck composition: gross pay, benefit deduction, net pay."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from benefitcalc.calc.details import calculate_benefit_details
from benefitcalc.calc.guards import check_config, check_non_negative, require
from benefitcalc.core.logging import get_logger
from benefitcalc.models.employee import EmployeeSnapshot
from benefitcalc.models.paycheck import CalculationConfig, FeatureToggles, PaycheckResult

logger = get_logger(__name__)


def calculate_gross_pay_per_paycheck(annual_salary: Decimal, config: CalculationConfig) -> Decimal:
    check_non_negative(annual_salary, "annual_salary")
    check_config(config)
    return annual_salary / config.paychecks_per_year


def calculate_paycheck(
    employee: EmployeeSnapshot,
    config: CalculationConfig,
    toggles: FeatureToggles,
    as_of: date | None = None,
) -> PaycheckResult:
    """Compute one paycheck for an employee.

    Net pay is not floored: deductions larger than gross pay produce a
    negative net pay. Nothing is rounded here; presentation layers round.
    """
    require(employee, "employee")
    logger.debug("calculating_paycheck", employee_id=employee.id)

    gross_pay = calculate_gross_pay_per_paycheck(employee.salary, config)
    details = calculate_benefit_details(employee, config, toggles, as_of)
    result = PaycheckResult(
        employee_id=employee.id,
        employee_name=employee.full_name,
        gross_pay=gross_pay,
        benefit_deductions=details.per_paycheck_deduction,
        net_pay=gross_pay - details.per_paycheck_deduction,
        details=details,
    )

    logger.debug(
        "paycheck_calculated",
        employee_id=employee.id,
        gross_pay=str(result.gross_pay),
        deductions=str(result.benefit_deductions),
        net_pay=str(result.net_pay),
    )
    return result
