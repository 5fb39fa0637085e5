"""Feature flag lookups and per-request toggle resolution."""

from __future__ import annotations

from benefitcalc.core.exceptions import BenefitCalcError, FlagNotFoundError
from benefitcalc.core.logging import get_logger
from benefitcalc.core.protocols import IFeatureFlagStore
from benefitcalc.models.flags import FLAG_DESCRIPTIONS, HEADER_FLAGS, FeatureFlag
from benefitcalc.models.paycheck import FeatureToggles

logger = get_logger(__name__)


class FeatureFlagService:
    """Reads flags from a store. A flag that cannot be read counts as disabled."""

    def __init__(self, store: IFeatureFlagStore) -> None:
        self._store = store

    def is_enabled(self, flag: FeatureFlag | str) -> bool:
        name = str(flag)
        try:
            enabled = self._store.is_enabled(name)
        except BenefitCalcError as exc:
            logger.error("feature_flag_check_failed", flag=name, error=str(exc))
            return False
        logger.debug("feature_flag_checked", flag=name, enabled=enabled)
        return enabled

    def get_all(self) -> dict[str, bool]:
        return {flag.value: self.is_enabled(flag) for flag in FeatureFlag}

    def enabled_flags(self, flags: tuple[FeatureFlag, ...] = HEADER_FLAGS) -> list[str]:
        return [flag.value for flag in flags if self.is_enabled(flag)]

    def describe(self, name: str) -> dict[str, object]:
        """Status and description of one named flag."""
        try:
            flag = FeatureFlag(name)
        except ValueError:
            raise FlagNotFoundError(f"Feature flag '{name}' not found") from None
        return {
            "flagName": flag.value,
            "isEnabled": self.is_enabled(flag),
            "description": FLAG_DESCRIPTIONS[flag],
        }

    def resolve_toggles(self) -> FeatureToggles:
        """Snapshot the calculation toggles once so the engine never touches the store."""
        return FeatureToggles(
            high_salary_surcharge_enabled=self.is_enabled(FeatureFlag.ENABLE_HIGH_SALARY_CALCULATION),
            senior_surcharge_enabled=self.is_enabled(FeatureFlag.ENABLE_SENIOR_DEPENDENT_SURCHARGE),
            detailed_breakdown_enabled=self.is_enabled(FeatureFlag.ENABLE_DETAILED_PAYCHECK_BREAKDOWN),
        )
