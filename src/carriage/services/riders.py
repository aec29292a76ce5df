"""Rider lifecycle, favorite locations and usage aggregation."""

import logging
from collections import Counter

from carriage.config import Config
from carriage.db import Condition, Store
from carriage.formatting import format_address
from carriage.models import Location, Ride, RideStatus, RideType, Rider, RiderCreate, RiderUpdate
from carriage.services.records import create_record

logger = logging.getLogger(__name__)


def create_rider(store: Store, config: Config, payload: RiderCreate) -> Rider:
    payload.address = format_address(payload.address, config.default_locality)
    return create_record(store.riders, payload)


def update_rider(store: Store, config: Config, rider_id: str, payload: RiderUpdate) -> Rider:
    patch = payload.to_patch()
    if patch.get("address"):
        patch["address"] = format_address(patch["address"], config.default_locality)
    return store.riders.update(rider_id, patch)


def get_favorites(store: Store, rider_id: str) -> list[Location]:
    rider = store.riders.get_by_id(rider_id)
    return store.locations.get_many(rider.favorite_locations)


def add_favorite(store: Store, rider_id: str, location_id: str) -> Location:
    """Append ``location_id`` to the rider's favorites unless it is already there."""
    rider = store.riders.get_by_id(rider_id)
    location = store.locations.get_by_id(location_id)
    if location_id in rider.favorite_locations:
        return location

    store.riders.update(rider_id, {"favoriteLocations": [*rider.favorite_locations, location_id]})
    logger.info("Rider %s favorited location %s", rider_id, location_id)
    return location


def remove_favorite(store: Store, rider_id: str, location_id: str) -> list[str]:
    rider = store.riders.get_by_id(rider_id)
    if location_id not in rider.favorite_locations:
        return rider.favorite_locations

    remaining = [fav for fav in rider.favorite_locations if fav != location_id]
    store.riders.update(rider_id, {"favoriteLocations": remaining})
    return remaining


def rides_for_rider(store: Store, rider_id: str) -> list[Ride]:
    store.riders.get_by_id(rider_id)
    rides = store.rides.scan(Condition().where("rider").eq(rider_id))
    return sorted(rides, key=lambda ride: ride.start_time)


def usage(store: Store) -> dict[str, dict[str, int]]:
    """Completed rides and no-shows per rider; riders without rides report zeros."""
    total_rides: Counter[str] = Counter()
    no_shows: Counter[str] = Counter()
    for ride in store.rides.scan(Condition().where("type").eq(RideType.PAST)):
        if ride.status == RideStatus.COMPLETED:
            total_rides[ride.rider] += 1
        elif ride.status == RideStatus.NO_SHOW:
            no_shows[ride.rider] += 1

    return {
        rider.id: {"noShows": no_shows[rider.id], "totalRides": total_rides[rider.id]}
        for rider in store.riders.get_all()
    }
