"""Shared test fixtures for Carriage."""

import copy
import os
import re
import sys
from datetime import date, time
from pathlib import Path

import pytest
from botocore.exceptions import ClientError
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing (DynamoDB Local doesn't need it)
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from carriage.auth import CarriageTokenProvider, Role  # noqa: E402
from carriage.config import Config, get_config  # noqa: E402
from carriage.db import Store, get_store  # noqa: E402
from carriage.models import (  # noqa: E402
    Admin,
    Availability,
    Driver,
    Location,
    Organization,
    Rider,
    Tag,
    Vehicle,
    Weekday,
)

_KEY_CONDITION = re.compile(r"^attribute_(not_)?exists\((#\w+)\)$")
_UPDATE_ACTION = re.compile(r"(SET|REMOVE)\s+(.*?)(?=\s+(?:SET|REMOVE)\s|$)")


def _conditional_failure(operation: str) -> ClientError:
    return ClientError(
        {"Error": {"Code": "ConditionalCheckFailedException", "Message": "The conditional request failed"}},
        operation,
    )


def _matches(item: dict, condition) -> bool:
    """Evaluate a boto3 ``Attr`` condition against a stored item."""
    if condition is None:
        return True
    expression = condition.get_expression()
    operator, values = expression["operator"], expression["values"]
    if operator == "AND":
        return all(_matches(item, value) for value in values)
    if operator == "OR":
        return any(_matches(item, value) for value in values)
    if operator == "NOT":
        return not _matches(item, values[0])

    attribute, value = values
    actual = item.get(attribute.name)
    if operator == "=":
        return actual == value
    if operator == "<>":
        return actual != value
    raise NotImplementedError(operator)


class FakeTable:
    """In-memory stand-in for a boto3 ``Table`` keyed by ``id``."""

    def __init__(self, name: str):
        self.name = name
        self.items: dict[str, dict] = {}

    def _check(self, operation, key, condition, names):
        if condition is None:
            return
        match = _KEY_CONDITION.match(condition)
        if match is None:
            raise NotImplementedError(condition)
        assert names[match.group(2)] == "id"
        exists = key in self.items
        if exists == bool(match.group(1)):
            raise _conditional_failure(operation)

    def get_item(self, Key):
        item = self.items.get(Key["id"])
        return {"Item": copy.deepcopy(item)} if item is not None else {}

    def put_item(self, Item, ConditionExpression=None, ExpressionAttributeNames=None):
        self._check("PutItem", Item["id"], ConditionExpression, ExpressionAttributeNames or {})
        self.items[Item["id"]] = copy.deepcopy(Item)
        return {}

    def update_item(
        self,
        Key,
        UpdateExpression,
        ConditionExpression=None,
        ExpressionAttributeNames=None,
        ExpressionAttributeValues=None,
        ReturnValues="NONE",
    ):
        names = ExpressionAttributeNames or {}
        values = ExpressionAttributeValues or {}
        self._check("UpdateItem", Key["id"], ConditionExpression, names)

        item = copy.deepcopy(self.items.get(Key["id"], {"id": Key["id"]}))
        for action, body in _UPDATE_ACTION.findall(UpdateExpression):
            for clause in body.split(","):
                clause = clause.strip()
                if action == "SET":
                    name, placeholder = (part.strip() for part in clause.split("="))
                    item[names[name]] = copy.deepcopy(values[placeholder])
                else:
                    item.pop(names[clause], None)
        self.items[Key["id"]] = item
        return {"Attributes": copy.deepcopy(item)} if ReturnValues == "ALL_NEW" else {}

    def delete_item(self, Key, ConditionExpression=None, ExpressionAttributeNames=None):
        self._check("DeleteItem", Key["id"], ConditionExpression, ExpressionAttributeNames or {})
        self.items.pop(Key["id"], None)
        return {}

    def scan(self, FilterExpression=None, ExclusiveStartKey=None):
        return {"Items": [copy.deepcopy(item) for item in self.items.values() if _matches(item, FilterExpression)]}


class FakeDynamoResource:
    def __init__(self):
        self.tables: dict[str, FakeTable] = {}

    def Table(self, name: str) -> FakeTable:
        return self.tables.setdefault(name, FakeTable(name))


# Configuration and storage fixtures
@pytest.fixture
def config():
    return Config(
        aws_region="us-east-1",
        admins_table="Admins",
        drivers_table="Drivers",
        riders_table="Riders",
        vehicles_table="Vehicles",
        locations_table="Locations",
        rides_table="Rides",
        jwt_secret="test-secret",
        token_ttl_seconds=3600,
        default_locality="Ithaca, NY 14850",
        timezone="America/New_York",
        environment="test",
    )


@pytest.fixture
def dynamo():
    return FakeDynamoResource()


@pytest.fixture
def store(config, dynamo):
    return Store(config, dynamo)


@pytest.fixture
def token_provider(config, store):
    return CarriageTokenProvider(config, store)


# Seeded records
@pytest.fixture
def seeded(store):
    """One record of each kind, with stable ids, written straight to the tables."""
    records = {
        "admin": Admin(
            id="admin-1",
            first_name="Ada",
            last_name="Lovelace",
            phone_number="6075550100",
            email="ada@cornell.edu",
        ),
        "dispatcher": Admin(
            id="dispatcher-1",
            first_name="Dana",
            last_name="Scully",
            phone_number="6075550101",
            email="dana@cornell.edu",
            is_dispatcher=True,
        ),
        "driver": Driver(
            id="driver-1",
            first_name="Dee",
            last_name="Walker",
            phone_number="6075550102",
            email="dee@cornell.edu",
            start_date=date(2023, 1, 9),
            availability={
                Weekday.MON: Availability(start_time=time(8), end_time=time(17)),
                Weekday.WED: Availability(start_time=time(12), end_time=time(18)),
            },
        ),
        "rider": Rider(
            id="rider-1",
            first_name="Riley",
            last_name="Chen",
            phone_number="6075550103",
            email="riley@cornell.edu",
            pronouns="they/them",
            accessibility="Wheelchair",
            description="Needs the ramp lowered",
            join_date=date(2023, 1, 1),
            address="101 College Ave, Ithaca, NY 14850",
            organization=Organization.REDRUNNER,
        ),
        "other_rider": Rider(
            id="rider-2",
            first_name="Robin",
            last_name="Park",
            phone_number="6075550104",
            email="robin@cornell.edu",
            join_date=date(2023, 2, 1),
            address="12 Oak Ave, Ithaca, NY 14850",
        ),
        "vehicle": Vehicle(id="vehicle-1", name="Van 1", capacity=8, wheelchair_accessible=True),
        "north": Location(id="loc-north", name="Balch Hall", address="Balch Hall, Ithaca, NY 14853", tag=Tag.NORTH),
        "central": Location(id="loc-central", name="Uris Hall", address="Uris Hall, Ithaca, NY 14853", tag=Tag.CENTRAL),
        "inactive": Location(id="loc-closed", name="Old Gym", address="Old Gym, Ithaca, NY 14853", tag=Tag.INACTIVE),
        "custom": Location(id="loc-custom", name="Home", address="5 Elm St, Ithaca, NY 14850", tag=Tag.CUSTOM),
    }
    repositories = {
        Admin: store.admins,
        Driver: store.drivers,
        Rider: store.riders,
        Vehicle: store.vehicles,
        Location: store.locations,
    }
    for record in records.values():
        repositories[type(record)].create(record)
    return records


@pytest.fixture
def tokens(token_provider, seeded):
    return {
        "admin": token_provider.issue_token("admin-1", Role.ADMIN),
        "dispatcher": token_provider.issue_token("dispatcher-1", Role.DISPATCHER),
        "driver": token_provider.issue_token("driver-1", Role.DRIVER),
        "rider": token_provider.issue_token("rider-1", Role.RIDER),
        "other_rider": token_provider.issue_token("rider-2", Role.RIDER),
    }


@pytest.fixture
def headers(tokens):
    """Authorization headers per seeded account."""
    return {name: {"Authorization": f"Bearer {token}"} for name, token in tokens.items()}


# API fixtures
@pytest.fixture
def client(config, store):
    from fastapi.testclient import TestClient

    from api.app import create_app

    app = create_app()
    app.dependency_overrides[get_config] = lambda: config
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# DynamoDB Local fixtures
@pytest.fixture
def dynamodb_resource():
    """Provide a DynamoDB resource for integration tests."""
    import boto3

    config = get_config()

    resource = boto3.resource(
        "dynamodb",
        endpoint_url=config.dynamodb_endpoint or "http://localhost:8000",
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )

    return resource


@pytest.fixture
def live_store(dynamodb_resource):
    """Store over DynamoDB Local; every table is emptied after the test."""
    live = Store(get_config(), dynamodb_resource)
    yield live

    # Cleanup: scan and delete all items created during test
    for repository in (live.admins, live.drivers, live.riders, live.vehicles, live.locations, live.rides):
        table = dynamodb_resource.Table(repository.table_name)
        response = table.scan()
        with table.batch_writer() as batch:
            for item in response.get("Items", []):
                batch.delete_item(Key={"id": item["id"]})
