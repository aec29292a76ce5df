#!/usr/bin/env python3
"""Create DynamoDB tables for local development.

This script creates the six Carriage tables (Admins, Drivers, Riders,
Vehicles, Locations, Rides) against DynamoDB Local. Every table is keyed by
a single string ``id`` hash key.

Usage:
    python scripts/create_local_tables.py
"""

import sys
from pathlib import Path

import boto3
from botocore.exceptions import ClientError

# Add src to path for config import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from carriage.config import get_config


def table_names(config):
    return [
        config.admins_table,
        config.drivers_table,
        config.riders_table,
        config.vehicles_table,
        config.locations_table,
        config.rides_table,
    ]


def create_table(dynamodb, name):
    """Create one ``id``-keyed table, tolerating an existing one."""
    try:
        dynamodb.create_table(
            TableName=name,
            KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )
        print(f"✓ Created {name} table")
    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceInUseException":
            print(f"✓ {name} table already exists")
        else:
            raise


def main():
    config = get_config()

    endpoint_url = config.dynamodb_endpoint or "http://localhost:8000"

    print(f"Creating DynamoDB tables at {endpoint_url}...")
    print()

    # For DynamoDB Local, use dummy credentials
    dynamodb = boto3.client(
        "dynamodb",
        endpoint_url=endpoint_url,
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )

    for name in table_names(config):
        create_table(dynamodb, name)

    print()
    print("✅ All DynamoDB tables ready")


if __name__ == "__main__":
    main()
