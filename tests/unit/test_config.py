"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from decimal import Decimal

from benefitcalc.core.config import AppSettings, CalculationSettings, FeatureFlagSettings
from benefitcalc.models.paycheck import CalculationConfig


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.storage_backend == "memory"
    assert settings.flag_backend == "settings"
    assert settings.seed_demo_data is True


def test_calculation_defaults():
    config = CalculationSettings()
    assert config.base_employee_monthly_cost == Decimal("1000")
    assert config.dependent_monthly_cost == Decimal("600")
    assert config.high_salary_threshold == Decimal("80000")
    assert config.high_salary_percentage == Decimal("0.02")
    assert config.senior_age_threshold == 50
    assert config.senior_monthly_surcharge == Decimal("200")
    assert config.paychecks_per_year == 26


def test_calculation_env_override(monkeypatch):
    monkeypatch.setenv("BENEFITCALC_CALC_PAYCHECKS_PER_YEAR", "24")
    monkeypatch.setenv("BENEFITCALC_CALC_HIGH_SALARY_PERCENTAGE", "0.025")
    config = CalculationSettings().to_config()
    assert isinstance(config, CalculationConfig)
    assert config.paychecks_per_year == 24
    assert config.high_salary_percentage == Decimal("0.025")


def test_to_config_matches_engine_defaults():
    assert CalculationSettings().to_config() == CalculationConfig()


def test_flag_defaults():
    flags = FeatureFlagSettings()
    assert flags.enable_paycheck_calculation is True
    assert flags.enable_dependent_operations is True
    assert flags.enable_advanced_logging is False
    assert flags.enable_caching is False


def test_flag_env_override(monkeypatch):
    monkeypatch.setenv("BENEFITCALC_FLAG_ENABLE_PAYCHECK_CALCULATION", "false")
    assert FeatureFlagSettings().enable_paycheck_calculation is False


def test_app_settings_reads_nested_env(monkeypatch):
    monkeypatch.setenv("BENEFITCALC_CALC_PAYCHECKS_PER_YEAR", "52")
    monkeypatch.setenv("BENEFITCALC_STORAGE_BACKEND", "dynamodb")
    settings = AppSettings()
    assert settings.calculation.paychecks_per_year == 52
    assert settings.storage_backend == "dynamodb"
