"""Create the benefitcalc DynamoDB tables and load the demo roster and flags.

Usage:
    python scripts/seed_dynamodb.py --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
from typing import Any

import boto3

from benefitcalc.core.config import FeatureFlagSettings
from benefitcalc.models.flags import FeatureFlag
from benefitcalc.persistence.dynamodb_backend import EMPLOYEES_TABLE, FLAGS_TABLE, employee_to_items
from benefitcalc.persistence.seed import DEMO_EMPLOYEES
from benefitcalc.persistence.settings_flags import SettingsFeatureFlagStore

TABLE_NAMES: tuple[str, ...] = (EMPLOYEES_TABLE, FLAGS_TABLE)


def create_tables(ddb: Any, suffix: str = "") -> None:
    """Create both tables with a PK/SK key schema. Skips tables that already exist."""
    client = ddb.meta.client
    existing = client.list_tables().get("TableNames", [])

    for name in TABLE_NAMES:
        table_name = f"{name}{suffix}"
        if table_name in existing:
            print(f"  Table {table_name} already exists, skipping")
            continue
        client.create_table(
            TableName=table_name,
            KeySchema=[
                {"AttributeName": "PK", "KeyType": "HASH"},
                {"AttributeName": "SK", "KeyType": "RANGE"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "PK", "AttributeType": "S"},
                {"AttributeName": "SK", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        print(f"  Created table {table_name}")


def seed_employees(ddb: Any, suffix: str = "") -> int:
    """Write the demo employees and their dependents. Returns the item count."""
    tbl = ddb.Table(f"{EMPLOYEES_TABLE}{suffix}")
    count = 0
    with tbl.batch_writer() as batch:
        for employee in DEMO_EMPLOYEES:
            for item in employee_to_items(employee):
                batch.put_item(Item=item)
                count += 1
    print(f"  Seeded {len(DEMO_EMPLOYEES)} employees ({count} items)")
    return count


def seed_flags(ddb: Any, suffix: str = "", settings: FeatureFlagSettings | None = None) -> dict[str, bool]:
    """Copy flag values from FeatureFlagSettings (env or defaults) into DynamoDB."""
    store = SettingsFeatureFlagStore(settings)
    values = {flag.value: store.is_enabled(flag.value) for flag in FeatureFlag}
    tbl = ddb.Table(f"{FLAGS_TABLE}{suffix}")
    with tbl.batch_writer() as batch:
        for name, enabled in values.items():
            batch.put_item(Item={"PK": f"FLAG#{name}", "SK": "STATE", "name": name, "enabled": enabled})
    print(f"  Seeded {len(values)} feature flags")
    return values


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed DynamoDB tables for benefitcalc")
    parser.add_argument("--endpoint-url", default=None, help="DynamoDB endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--table-suffix", default="", help="Table name suffix (e.g. -dev)")
    parser.add_argument("--region", default="us-east-1", help="AWS region")
    args = parser.parse_args()

    kwargs: dict[str, Any] = {"region_name": args.region}
    if args.endpoint_url:
        kwargs["endpoint_url"] = args.endpoint_url

    ddb = boto3.resource("dynamodb", **kwargs)

    print("Creating tables...")
    create_tables(ddb, suffix=args.table_suffix)

    print("Seeding data...")
    seed_employees(ddb, suffix=args.table_suffix)
    seed_flags(ddb, suffix=args.table_suffix)

    print("Done!")


if __name__ == "__main__":
    main()
