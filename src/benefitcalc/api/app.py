"""FastAPI application with lifespan, error mapping and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from benefitcalc.api.routes import dependents, employees, feature_flags, health
from benefitcalc.core.config import AppSettings
from benefitcalc.core.exceptions import (
    BenefitCalcError,
    ConfigurationError,
    DependentNotFoundError,
    EmployeeNotFoundError,
    FeatureDisabledError,
    InvalidArgumentError,
)
from benefitcalc.core.logging import configure_logging, get_logger
from benefitcalc.core.protocols import ICacheBackend, IEmployeeRepository, IFeatureFlagStore
from benefitcalc.models.api import ApiResponse
from benefitcalc.models.flags import FeatureFlag
from benefitcalc.persistence import create_persistence
from benefitcalc.services.employees import EmployeeService
from benefitcalc.services.feature_flags import FeatureFlagService

API_PREFIX = "/api/v1"

logger = get_logger(__name__)

_STATUS_BY_ERROR: tuple[tuple[type[BenefitCalcError], int], ...] = (
    (EmployeeNotFoundError, 404),
    (DependentNotFoundError, 404),
    (FeatureDisabledError, 400),
    (InvalidArgumentError, 400),
    (ConfigurationError, 500),
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: AppSettings = app.state.settings
    logger.info(
        "startup_complete",
        environment=settings.environment,
        storage=settings.storage_backend,
        flags=settings.flag_backend,
    )
    yield
    logger.info("shutdown_complete")


async def _handle_benefitcalc_error(request: Request, exc: BenefitCalcError) -> JSONResponse:
    status = next((code for err, code in _STATUS_BY_ERROR if isinstance(exc, err)), 500)
    if status >= 500:
        logger.error("request_failed", path=request.url.path, error=str(exc))
    body = ApiResponse(success=False, message=str(exc))
    return JSONResponse(status_code=status, content=body.model_dump(by_alias=True, mode="json"))


def create_app(
    settings: AppSettings | None = None,
    *,
    repository: IEmployeeRepository | None = None,
    flag_store: IFeatureFlagStore | None = None,
    cache: ICacheBackend | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Backends default to those built by ``create_persistence``; tests pass
    in-memory ones instead.
    """
    if settings is None:
        settings = AppSettings()
    configure_logging(settings.log_level)

    if repository is None or flag_store is None:
        default_repo, default_flags, default_cache = create_persistence(settings)
        if repository is None:
            repository = default_repo
        if flag_store is None:
            flag_store = default_flags
        if cache is None:
            cache = default_cache

    flag_service = FeatureFlagService(flag_store)
    swagger = settings.environment == "dev" and flag_service.is_enabled(FeatureFlag.ENABLE_SWAGGER_UI)

    app = FastAPI(
        title="Employee Benefit Cost Calculation API",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if swagger else None,
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.cache = cache
    app.state.flag_service = flag_service
    app.state.employee_service = EmployeeService(
        repository=repository,
        flags=flag_service,
        calculation=settings.calculation.to_config(),
    )

    app.add_exception_handler(BenefitCalcError, _handle_benefitcalc_error)

    @app.middleware("http")
    async def enabled_features_header(request: Request, call_next):
        flags: FeatureFlagService = request.app.state.flag_service
        # Flag stores do blocking I/O.
        if not await run_in_threadpool(flags.is_enabled, FeatureFlag.ENABLE_ADVANCED_LOGGING):
            return await call_next(request)
        enabled = await run_in_threadpool(flags.enabled_flags)
        logger.info("request_received", method=request.method, path=request.url.path, features=enabled)
        response = await call_next(request)
        response.headers["X-Enabled-Features"] = ",".join(enabled)
        return response

    app.include_router(health.router)
    app.include_router(employees.router, prefix=f"{API_PREFIX}/employees")
    app.include_router(dependents.router, prefix=f"{API_PREFIX}/dependents")
    app.include_router(feature_flags.router, prefix=f"{API_PREFIX}/feature-flags")
    return app
