"""Feature flag inspection endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from benefitcalc.api.dependencies import get_flag_service
from benefitcalc.core.exceptions import FlagNotFoundError
from benefitcalc.models.flags import FeatureFlag
from benefitcalc.services.feature_flags import FeatureFlagService

router = APIRouter(tags=["feature-management"])


@router.get("")
def get_all_feature_flags(flags: FeatureFlagService = Depends(get_flag_service)) -> dict[str, bool]:
    """Enabled/disabled status of every known flag."""
    return flags.get_all()


@router.get("/{flag_name}")
def get_feature_flag(flag_name: str, flags: FeatureFlagService = Depends(get_flag_service)):
    try:
        return flags.describe(flag_name)
    except FlagNotFoundError as exc:
        return JSONResponse(
            status_code=404,
            content={"message": str(exc), "availableFlags": [f.value for f in FeatureFlag]},
        )
