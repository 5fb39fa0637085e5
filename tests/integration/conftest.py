"""LocalStack fixtures for the DynamoDB backends.

``seeded_tables`` runs the seed script against LocalStack once per session:
the employees table gets the demo roster (profile item plus one item per
dependent under ``EMPLOYEE#<id>``) and the flags table gets one ``FLAG#<name>``
item per feature flag. Tables carry the ``-inttest`` suffix so they never
collide with a developer's local data.
"""

from __future__ import annotations

import os
import sys

import boto3
import pytest
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from benefitcalc.persistence.dynamodb_backend import DynamoDBEmployeeRepository, DynamoDBFeatureFlagStore

LOCALSTACK_URL = os.environ.get("LOCALSTACK_URL", "http://localhost:4566")
REGION = "us-east-1"
TABLE_SUFFIX = "-inttest"


def _localstack_available() -> bool:
    client = boto3.client(
        "dynamodb",
        region_name=REGION,
        endpoint_url=LOCALSTACK_URL,
        config=Config(connect_timeout=1, read_timeout=2, retries={"max_attempts": 1}),
    )
    try:
        client.list_tables()
    except (BotoCoreError, ClientError):
        return False
    return True


skip_no_localstack = pytest.mark.skipif(
    not _localstack_available(),
    reason="LocalStack not available",
)


@pytest.fixture(scope="session")
def localstack_ddb():
    return boto3.resource("dynamodb", region_name=REGION, endpoint_url=LOCALSTACK_URL)


@pytest.fixture(scope="session")
def seeded_tables(localstack_ddb):
    """Create both tables and load the demo employees and default flags."""
    sys.path.insert(0, str(os.path.join(os.path.dirname(__file__), "..", "..", "scripts")))
    from seed_dynamodb import create_tables, seed_employees, seed_flags

    create_tables(localstack_ddb, suffix=TABLE_SUFFIX)
    seed_employees(localstack_ddb, suffix=TABLE_SUFFIX)
    seed_flags(localstack_ddb, suffix=TABLE_SUFFIX)
    return TABLE_SUFFIX


@pytest.fixture
def employee_repo(seeded_tables):
    return DynamoDBEmployeeRepository(table_suffix=seeded_tables, region=REGION, endpoint_url=LOCALSTACK_URL)


@pytest.fixture
def flag_table(seeded_tables):
    return DynamoDBFeatureFlagStore(table_suffix=seeded_tables, region=REGION, endpoint_url=LOCALSTACK_URL)
