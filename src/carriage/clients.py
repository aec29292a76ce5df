"""Lazy-initialized boto3 resources, reused across requests in a worker."""

from functools import lru_cache
from typing import Any

import boto3

from carriage.config import get_config


@lru_cache(maxsize=1)
def get_dynamo_resource() -> Any:
    config = get_config()
    return boto3.resource(
        "dynamodb",
        endpoint_url=config.dynamodb_endpoint,
        region_name=config.aws_region,
    )
