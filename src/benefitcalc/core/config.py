"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from benefitcalc.models.paycheck import CalculationConfig


class CalculationSettings(BaseSettings):
    """Benefit cost rules, overridable per deployment."""

    model_config = {"env_prefix": "BENEFITCALC_CALC_"}

    base_employee_monthly_cost: Decimal = Decimal("1000")
    dependent_monthly_cost: Decimal = Decimal("600")
    high_salary_threshold: Decimal = Decimal("80000")
    high_salary_percentage: Decimal = Decimal("0.02")
    senior_age_threshold: int = 50
    senior_monthly_surcharge: Decimal = Decimal("200")
    paychecks_per_year: int = 26

    def to_config(self) -> CalculationConfig:
        """Freeze the current values into the config passed to the engine."""
        return CalculationConfig(**self.model_dump())


class FeatureFlagSettings(BaseSettings):
    """Local feature flag values, read by SettingsFeatureFlagStore."""

    model_config = {"env_prefix": "BENEFITCALC_FLAG_"}

    enable_paycheck_calculation: bool = True
    enable_dependent_operations: bool = True
    enable_high_salary_calculation: bool = True
    enable_senior_dependent_surcharge: bool = True
    enable_detailed_paycheck_breakdown: bool = True
    enable_swagger_ui: bool = True
    enable_bulk_operations: bool = False
    enable_advanced_logging: bool = False
    enable_caching: bool = False
    enable_rate_limiting: bool = False


class DynamoDBConfig(BaseSettings):
    """DynamoDB configuration."""

    model_config = {"env_prefix": "BENEFITCALC_DYNAMO_"}

    table_suffix: str = ""  # "-dev", "-uat", or "" for prod
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class RedisConfig(BaseSettings):
    """Redis cache configuration."""

    model_config = {"env_prefix": "BENEFITCALC_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "BENEFITCALC_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    storage_backend: Literal["memory", "dynamodb"] = "memory"
    flag_backend: Literal["settings", "dynamodb"] = "settings"
    flag_cache_ttl: int = 60  # seconds; dynamodb flag backend only
    seed_demo_data: bool = True  # memory storage backend only

    calculation: CalculationSettings = Field(default_factory=CalculationSettings)
    flags: FeatureFlagSettings = Field(default_factory=FeatureFlagSettings)
    dynamodb: DynamoDBConfig = Field(default_factory=DynamoDBConfig)
    redis: RedisConfig = Field(default_factory=RedisConfig)
