"""Feature flags read from FeatureFlagSettings (env vars or defaults)."""

from __future__ import annotations

from pydantic.alias_generators import to_snake

from benefitcalc.core.config import FeatureFlagSettings
from benefitcalc.core.exceptions import FlagNotFoundError


class SettingsFeatureFlagStore:
    """IFeatureFlagStore over local settings; ``EnableSwaggerUI`` maps to ``enable_swagger_ui``."""

    def __init__(self, settings: FeatureFlagSettings | None = None) -> None:
        self._settings = settings or FeatureFlagSettings()

    def is_enabled(self, name: str) -> bool:
        field = to_snake(name)
        if field not in type(self._settings).model_fields:
            raise FlagNotFoundError(f"Feature flag {name!r} is not defined")
        return bool(getattr(self._settings, field))
