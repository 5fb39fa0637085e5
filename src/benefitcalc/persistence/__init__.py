"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from benefitcalc.core.config import AppSettings
from benefitcalc.core.protocols import ICacheBackend, IEmployeeRepository, IFeatureFlagStore
from benefitcalc.persistence.dynamodb_backend import DynamoDBEmployeeRepository, DynamoDBFeatureFlagStore
from benefitcalc.persistence.memory_backend import MemoryEmployeeRepository
from benefitcalc.persistence.redis_backend import RedisCacheBackend
from benefitcalc.persistence.seed import DEMO_EMPLOYEES
from benefitcalc.persistence.settings_flags import SettingsFeatureFlagStore


def create_persistence(
    settings: AppSettings | None = None,
) -> tuple[IEmployeeRepository, IFeatureFlagStore, ICacheBackend | None]:
    """Create wired-up persistence backends from application settings.

    Returns:
        Tuple of (employee_repository, flag_store, cache). The cache is only
        created for the DynamoDB flag backend and is None otherwise.
    """
    if settings is None:
        settings = AppSettings()

    repository: IEmployeeRepository
    if settings.storage_backend == "dynamodb":
        repository = DynamoDBEmployeeRepository(
            table_suffix=settings.dynamodb.table_suffix,
            region=settings.dynamodb.region,
            endpoint_url=settings.dynamodb.endpoint_url,
        )
    else:
        repository = MemoryEmployeeRepository(
            list(DEMO_EMPLOYEES) if settings.seed_demo_data else None
        )

    cache: ICacheBackend | None = None
    flag_store: IFeatureFlagStore
    if settings.flag_backend == "dynamodb":
        cache = RedisCacheBackend(
            host=settings.redis.host,
            port=settings.redis.port,
            db=settings.redis.db,
        )
        flag_store = DynamoDBFeatureFlagStore(
            table_suffix=settings.dynamodb.table_suffix,
            region=settings.dynamodb.region,
            endpoint_url=settings.dynamodb.endpoint_url,
            cache=cache,
            cache_ttl=settings.flag_cache_ttl,
        )
    else:
        flag_store = SettingsFeatureFlagStore(settings.flags)

    return repository, flag_store, cache
