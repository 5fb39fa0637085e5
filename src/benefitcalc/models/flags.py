"""Named feature flags and their descriptions."""

from __future__ import annotations

from enum import StrEnum


class FeatureFlag(StrEnum):
    ENABLE_PAYCHECK_CALCULATION = "EnablePaycheckCalculation"
    ENABLE_DEPENDENT_OPERATIONS = "EnableDependentOperations"
    ENABLE_HIGH_SALARY_CALCULATION = "EnableHighSalaryCalculation"
    ENABLE_SENIOR_DEPENDENT_SURCHARGE = "EnableSeniorDependentSurcharge"
    ENABLE_DETAILED_PAYCHECK_BREAKDOWN = "EnableDetailedPaycheckBreakdown"
    ENABLE_SWAGGER_UI = "EnableSwaggerUI"
    ENABLE_BULK_OPERATIONS = "EnableBulkOperations"
    ENABLE_ADVANCED_LOGGING = "EnableAdvancedLogging"
    ENABLE_CACHING = "EnableCaching"
    ENABLE_RATE_LIMITING = "EnableRateLimiting"


FLAG_DESCRIPTIONS: dict[FeatureFlag, str] = {
    FeatureFlag.ENABLE_PAYCHECK_CALCULATION: "Controls whether paycheck calculation functionality is enabled",
    FeatureFlag.ENABLE_DEPENDENT_OPERATIONS: "Controls whether dependent operations are enabled",
    FeatureFlag.ENABLE_HIGH_SALARY_CALCULATION: "Controls whether high salary calculation (>$80K) is applied",
    FeatureFlag.ENABLE_SENIOR_DEPENDENT_SURCHARGE: "Controls whether senior dependent surcharge is applied",
    FeatureFlag.ENABLE_DETAILED_PAYCHECK_BREAKDOWN: "Controls whether detailed paycheck breakdown is included in responses",
    FeatureFlag.ENABLE_SWAGGER_UI: "Controls whether Swagger UI is enabled",
    FeatureFlag.ENABLE_BULK_OPERATIONS: "Controls whether bulk operations are enabled",
    FeatureFlag.ENABLE_ADVANCED_LOGGING: "Controls whether advanced logging is enabled",
    FeatureFlag.ENABLE_CACHING: "Controls whether response caching is enabled",
    FeatureFlag.ENABLE_RATE_LIMITING: "Controls whether rate limiting is enabled",
}

# Flags echoed in the X-Enabled-Features header.
HEADER_FLAGS: tuple[FeatureFlag, ...] = (
    FeatureFlag.ENABLE_PAYCHECK_CALCULATION,
    FeatureFlag.ENABLE_DEPENDENT_OPERATIONS,
    FeatureFlag.ENABLE_HIGH_SALARY_CALCULATION,
    FeatureFlag.ENABLE_SENIOR_DEPENDENT_SURCHARGE,
    FeatureFlag.ENABLE_DETAILED_PAYCHECK_BREAKDOWN,
    FeatureFlag.ENABLE_BULK_OPERATIONS,
    FeatureFlag.ENABLE_CACHING,
    FeatureFlag.ENABLE_RATE_LIMITING,
)
