"""Tests for FeatureFlagService lookups and toggle resolution."""

from __future__ import annotations

import pytest

from benefitcalc.core.exceptions import CacheError, FlagNotFoundError
from benefitcalc.models.flags import FLAG_DESCRIPTIONS, FeatureFlag
from benefitcalc.services.feature_flags import FeatureFlagService
from tests.fakes import MemoryFeatureFlagStore, flag_store


class _BrokenStore:
    def is_enabled(self, name: str) -> bool:
        raise CacheError("redis down")


class TestIsEnabled:
    def test_reads_store(self):
        service = FeatureFlagService(flag_store(EnableCaching=False))
        assert service.is_enabled(FeatureFlag.ENABLE_CACHING) is False
        assert service.is_enabled("EnablePaycheckCalculation") is True

    def test_unknown_flag_counts_as_disabled(self):
        service = FeatureFlagService(MemoryFeatureFlagStore())
        assert service.is_enabled(FeatureFlag.ENABLE_PAYCHECK_CALCULATION) is False

    def test_store_failure_counts_as_disabled(self):
        assert FeatureFlagService(_BrokenStore()).is_enabled(FeatureFlag.ENABLE_CACHING) is False


class TestListing:
    def test_get_all_covers_every_flag(self):
        flags = FeatureFlagService(flag_store()).get_all()
        assert set(flags) == {f.value for f in FeatureFlag}
        assert flags["EnableAdvancedLogging"] is False

    def test_enabled_flags_skips_disabled(self):
        service = FeatureFlagService(flag_store(EnableCaching=False, EnableRateLimiting=False))
        enabled = service.enabled_flags()
        assert "EnableCaching" not in enabled
        assert "EnablePaycheckCalculation" in enabled
        assert "EnableSwaggerUI" not in enabled


class TestDescribe:
    def test_known_flag(self):
        info = FeatureFlagService(flag_store()).describe("EnableHighSalaryCalculation")
        assert info == {
            "flagName": "EnableHighSalaryCalculation",
            "isEnabled": True,
            "description": FLAG_DESCRIPTIONS[FeatureFlag.ENABLE_HIGH_SALARY_CALCULATION],
        }

    def test_unknown_flag_raises(self):
        with pytest.raises(FlagNotFoundError, match="EnableTimeTravel"):
            FeatureFlagService(flag_store()).describe("EnableTimeTravel")


class TestResolveToggles:
    def test_maps_calculation_flags(self):
        service = FeatureFlagService(flag_store(
            EnableHighSalaryCalculation=False,
            EnableSeniorDependentSurcharge=True,
            EnableDetailedPaycheckBreakdown=False,
        ))
        toggles = service.resolve_toggles()
        assert toggles.high_salary_surcharge_enabled is False
        assert toggles.senior_surcharge_enabled is True
        assert toggles.detailed_breakdown_enabled is False

    def test_broken_store_disables_everything(self):
        toggles = FeatureFlagService(_BrokenStore()).resolve_toggles()
        assert not any(toggles.model_dump().values())
