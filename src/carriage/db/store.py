"""One repository per Carriage table, sharing a DynamoDB resource."""

from functools import lru_cache
from typing import Any

from carriage.clients import get_dynamo_resource
from carriage.config import Config, get_config
from carriage.db.repository import TableRepository
from carriage.models import Admin, Driver, Location, Ride, Rider, Vehicle


class Store:
    def __init__(self, config: Config, dynamo_resource: Any) -> None:
        self.admins = TableRepository(Admin, config.admins_table, dynamo_resource)
        self.drivers = TableRepository(Driver, config.drivers_table, dynamo_resource)
        self.riders = TableRepository(Rider, config.riders_table, dynamo_resource)
        self.vehicles = TableRepository(Vehicle, config.vehicles_table, dynamo_resource)
        self.locations = TableRepository(Location, config.locations_table, dynamo_resource)
        self.rides = TableRepository(Ride, config.rides_table, dynamo_resource)


@lru_cache(maxsize=1)
def get_store() -> Store:
    return Store(get_config(), get_dynamo_resource())
