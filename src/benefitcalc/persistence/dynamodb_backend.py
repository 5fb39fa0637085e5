"""DynamoDB backends: employee repository and feature flag store.

Employees and their dependents share a partition:

    PK=EMPLOYEE#<id>  SK=PROFILE           employee attributes
    PK=EMPLOYEE#<id>  SK=DEPENDENT#<id>    one item per dependent

Flags live in their own table as ``PK=FLAG#<name>, SK=STATE``.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from benefitcalc.core.exceptions import CacheError, FlagNotFoundError, RepositoryError
from benefitcalc.core.logging import get_logger
from benefitcalc.models.api import PagedResult, clamp_paging
from benefitcalc.models.employee import DependentSnapshot, EmployeeSnapshot, Relationship
from benefitcalc.persistence.sorting import (
    DEPENDENT_SORT_KEYS,
    EMPLOYEE_SORT_KEYS,
    page_slice,
    sort_items,
)

EMPLOYEES_TABLE = "benefitcalc-employees"
FLAGS_TABLE = "benefitcalc-feature-flags"

PROFILE_SK = "PROFILE"
DEPENDENT_SK_PREFIX = "DEPENDENT#"

logger = get_logger(__name__)


def _resource(region: str, endpoint_url: str | None):
    kwargs: dict = {"region_name": region}
    if endpoint_url:
        kwargs["endpoint_url"] = endpoint_url
    return boto3.resource("dynamodb", **kwargs)


def _employee_pk(employee_id: int) -> str:
    return f"EMPLOYEE#{employee_id}"


def employee_to_items(employee: EmployeeSnapshot) -> list[dict[str, Any]]:
    """Flatten an employee into its profile item plus one item per dependent."""
    pk = _employee_pk(employee.id)
    items: list[dict[str, Any]] = [{
        "PK": pk,
        "SK": PROFILE_SK,
        "id": employee.id,
        "first_name": employee.first_name,
        "last_name": employee.last_name,
        "salary": Decimal(employee.salary),
        "date_of_birth": employee.date_of_birth.isoformat(),
    }]
    for dependent in employee.dependents:
        items.append({
            "PK": pk,
            "SK": f"{DEPENDENT_SK_PREFIX}{dependent.id:06d}",
            "id": dependent.id,
            "first_name": dependent.first_name,
            "last_name": dependent.last_name,
            "date_of_birth": dependent.date_of_birth.isoformat(),
            "relationship": dependent.relationship.value,
            "employee_id": dependent.employee_id,
        })
    return items


def _dependent_from_item(item: dict[str, Any]) -> DependentSnapshot:
    return DependentSnapshot(
        id=int(item["id"]),
        first_name=item.get("first_name", ""),
        last_name=item.get("last_name", ""),
        date_of_birth=date.fromisoformat(item["date_of_birth"]),
        relationship=Relationship(item["relationship"]),
        employee_id=int(item["employee_id"]),
    )


def _employee_from_items(items: list[dict[str, Any]]) -> EmployeeSnapshot | None:
    profile = next((i for i in items if i["SK"] == PROFILE_SK), None)
    if profile is None:
        return None
    dependents = sorted(
        (_dependent_from_item(i) for i in items if i["SK"].startswith(DEPENDENT_SK_PREFIX)),
        key=lambda d: d.id,
    )
    return EmployeeSnapshot(
        id=int(profile["id"]),
        first_name=profile.get("first_name", ""),
        last_name=profile.get("last_name", ""),
        salary=profile["salary"],
        date_of_birth=date.fromisoformat(profile["date_of_birth"]),
        dependents=tuple(dependents),
    )


class DynamoDBEmployeeRepository:
    """Production IEmployeeRepository backed by a single DynamoDB table."""

    def __init__(self, table_suffix: str = "", region: str = "us-east-1",
                 endpoint_url: str | None = None) -> None:
        self._table = _resource(region, endpoint_url).Table(f"{EMPLOYEES_TABLE}{table_suffix}")

    def _query_partition(self, employee_id: int) -> list[dict[str, Any]]:
        try:
            resp = self._table.query(KeyConditionExpression=Key("PK").eq(_employee_pk(employee_id)))
        except ClientError as exc:
            raise RepositoryError(f"DynamoDB query failed for employee {employee_id}: {exc}") from exc
        return resp.get("Items", [])

    def _scan_all(self) -> list[dict[str, Any]]:
        items: list[dict[str, Any]] = []
        kwargs: dict[str, Any] = {}
        try:
            while True:
                resp = self._table.scan(**kwargs)
                items.extend(resp.get("Items", []))
                if "LastEvaluatedKey" not in resp:
                    return items
                kwargs["ExclusiveStartKey"] = resp["LastEvaluatedKey"]
        except ClientError as exc:
            raise RepositoryError(f"DynamoDB scan failed: {exc}") from exc

    def _all_employees(self) -> list[EmployeeSnapshot]:
        partitions: dict[str, list[dict[str, Any]]] = {}
        for item in self._scan_all():
            partitions.setdefault(item["PK"], []).append(item)
        employees = (_employee_from_items(items) for items in partitions.values())
        return [e for e in employees if e is not None]

    # ---- IEmployeeRepository methods ----

    def get_with_dependents(self, employee_id: int) -> EmployeeSnapshot | None:
        return _employee_from_items(self._query_partition(employee_id))

    def list_paged(
        self, page: int, page_size: int, sort_by: str | None = None, ascending: bool = True
    ) -> PagedResult[EmployeeSnapshot]:
        page, page_size = clamp_paging(page, page_size)
        ordered = sort_items(self._all_employees(), EMPLOYEE_SORT_KEYS, sort_by, ascending)
        return PagedResult[EmployeeSnapshot](
            items=page_slice(ordered, page, page_size),
            current_page=page,
            page_size=page_size,
            total_items=len(ordered),
        )

    # Scan-based max+1; not atomic across concurrent writers.
    def next_employee_id(self) -> int:
        return max((e.id for e in self._all_employees()), default=0) + 1

    def next_dependent_id(self) -> int:
        ids = [int(i["id"]) for i in self._scan_all() if i["SK"].startswith(DEPENDENT_SK_PREFIX)]
        return max(ids, default=0) + 1

    def add(self, employee: EmployeeSnapshot) -> EmployeeSnapshot:
        """Write the profile and dependent items, replacing any with the same keys."""
        try:
            with self._table.batch_writer() as batch:
                for item in employee_to_items(employee):
                    batch.put_item(Item=item)
        except ClientError as exc:
            raise RepositoryError(f"DynamoDB write failed for employee {employee.id}: {exc}") from exc
        logger.info("employee_saved", employee_id=employee.id, dependents=len(employee.dependents))
        return employee

    def delete(self, employee_id: int) -> bool:
        items = self._query_partition(employee_id)
        if not items:
            return False
        try:
            with self._table.batch_writer() as batch:
                for item in items:
                    batch.delete_item(Key={"PK": item["PK"], "SK": item["SK"]})
        except ClientError as exc:
            raise RepositoryError(f"DynamoDB delete failed for employee {employee_id}: {exc}") from exc
        return True

    def get_dependent(self, dependent_id: int) -> DependentSnapshot | None:
        for item in self._scan_all():
            if item["SK"].startswith(DEPENDENT_SK_PREFIX) and int(item["id"]) == dependent_id:
                return _dependent_from_item(item)
        return None

    def list_dependents_paged(
        self,
        page: int,
        page_size: int,
        employee_id: int | None = None,
        relationship: Relationship | None = None,
        sort_by: str | None = None,
        ascending: bool = True,
    ) -> PagedResult[DependentSnapshot]:
        page, page_size = clamp_paging(page, page_size)
        items = self._query_partition(employee_id) if employee_id is not None else self._scan_all()
        dependents = [
            _dependent_from_item(i) for i in items if i["SK"].startswith(DEPENDENT_SK_PREFIX)
        ]
        if relationship is not None:
            dependents = [d for d in dependents if d.relationship == relationship]
        ordered = sort_items(dependents, DEPENDENT_SORT_KEYS, sort_by, ascending)
        return PagedResult[DependentSnapshot](
            items=page_slice(ordered, page, page_size),
            current_page=page,
            page_size=page_size,
            total_items=len(ordered),
        )


class DynamoDBFeatureFlagStore:
    """IFeatureFlagStore backed by DynamoDB with an optional cache in front.

    The table is authoritative. Cache failures are logged and the lookup
    falls through to DynamoDB.
    """

    def __init__(self, table_suffix: str = "", region: str = "us-east-1",
                 endpoint_url: str | None = None, cache: Any = None,
                 cache_ttl: int = 60) -> None:
        self._table = _resource(region, endpoint_url).Table(f"{FLAGS_TABLE}{table_suffix}")
        self._cache = cache
        self._cache_ttl = cache_ttl

    @staticmethod
    def _cache_key(name: str) -> str:
        return f"flag:{name}"

    def _cached(self, name: str) -> str | None:
        if self._cache is None:
            return None
        try:
            return self._cache.get(self._cache_key(name))
        except CacheError as exc:
            logger.warning("flag_cache_unavailable", flag=name, op="get", error=str(exc))
            return None

    def _remember(self, name: str, enabled: bool) -> None:
        if self._cache is None:
            return
        try:
            self._cache.setex(self._cache_key(name), self._cache_ttl, "1" if enabled else "0")
        except CacheError as exc:
            logger.warning("flag_cache_unavailable", flag=name, op="setex", error=str(exc))

    def _forget(self, name: str) -> None:
        if self._cache is None:
            return
        try:
            self._cache.delete(self._cache_key(name))
        except CacheError as exc:
            # Stale value expires after cache_ttl.
            logger.warning("flag_cache_unavailable", flag=name, op="delete", error=str(exc))

    def is_enabled(self, name: str) -> bool:
        cached = self._cached(name)
        if cached is not None:
            return cached == "1"

        try:
            resp = self._table.get_item(Key={"PK": f"FLAG#{name}", "SK": "STATE"})
        except ClientError as exc:
            raise RepositoryError(f"DynamoDB lookup failed for flag {name!r}: {exc}") from exc
        item = resp.get("Item")
        if item is None:
            raise FlagNotFoundError(f"Feature flag {name!r} is not defined")

        enabled = bool(item.get("enabled", False))
        self._remember(name, enabled)
        return enabled

    def set_flag(self, name: str, enabled: bool) -> None:
        try:
            self._table.put_item(Item={"PK": f"FLAG#{name}", "SK": "STATE", "name": name, "enabled": enabled})
        except ClientError as exc:
            raise RepositoryError(f"DynamoDB write failed for flag {name!r}: {exc}") from exc
        logger.info("feature_flag_updated", flag=name, enabled=enabled)
        self._forget(name)
