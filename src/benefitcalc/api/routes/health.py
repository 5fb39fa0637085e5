"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/ready")
def ready(request: Request) -> dict[str, str]:
    settings = request.app.state.settings
    cache = request.app.state.cache
    cache_status = "disabled" if cache is None else ("ok" if cache.ping() else "unavailable")
    return {
        "status": "ready" if cache_status != "unavailable" else "degraded",
        "storage": settings.storage_backend,
        "flags": settings.flag_backend,
        "cache": cache_status,
    }
