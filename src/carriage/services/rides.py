"""Ride scheduling: filtered listings, booking and the ride type lifecycle."""

import logging
from datetime import date
from zoneinfo import ZoneInfo

import pydantic

from carriage.auth import AuthUser, Role
from carriage.config import Config
from carriage.db import Condition, Store
from carriage.errors import AuthorizationError, ErrorCode, ValidationError
from carriage.formatting import parse_date_range
from carriage.models import Ride, RideCreate, RideType, RideUpdate
from carriage.services.records import create_record

logger = logging.getLogger(__name__)

_DRIVER_FIELDS = frozenset({"status"})


def list_rides(
    store: Store,
    config: Config,
    *,
    ride_type: RideType | None = None,
    rider: str | None = None,
    driver: str | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[Ride]:
    """Rides matching every given filter, earliest first.

    Dates are calendar days in the service's local timezone, inclusive.
    """
    start_date, end_date = parse_date_range(start_date, end_date)

    condition = Condition()
    if ride_type is not None:
        condition.where("type").eq(ride_type)
    if rider is not None:
        condition.where("rider").eq(rider)
    if driver is not None:
        condition.where("driver").eq(driver)
    rides = store.rides.scan(condition)

    if start_date is not None or end_date is not None:
        tz = ZoneInfo(config.timezone)
        rides = [
            ride
            for ride in rides
            if (start_date is None or ride.start_time.astimezone(tz).date() >= start_date)
            and (end_date is None or ride.start_time.astimezone(tz).date() <= end_date)
        ]
    return sorted(rides, key=lambda ride: ride.start_time)


def _ensure_participant(user: AuthUser, ride: Ride) -> None:
    if user.role == Role.RIDER and ride.rider != user.user_id:
        raise AuthorizationError("Riders may only access their own rides")
    if user.role == Role.DRIVER and ride.driver != user.user_id:
        raise AuthorizationError("Drivers may only access rides assigned to them")


def get_ride(store: Store, user: AuthUser, ride_id: str) -> Ride:
    ride = store.rides.get_by_id(ride_id)
    _ensure_participant(user, ride)
    return ride


def _check_references(store: Store, rider: str | None, driver: str | None, locations: list[str]) -> None:
    if rider is not None:
        store.riders.get_by_id(rider)
    if driver is not None:
        store.drivers.get_by_id(driver)
    for location_id in locations:
        store.locations.get_by_id(location_id)


def _check_lifecycle(ride_type: RideType, driver: str | None) -> None:
    if ride_type == RideType.UNSCHEDULED and driver is not None:
        raise ValidationError("Unscheduled rides cannot have a driver")
    if ride_type == RideType.ACTIVE and driver is None:
        raise ValidationError("Active rides need a driver")


def create_ride(store: Store, user: AuthUser, payload: RideCreate) -> Ride:
    if user.role == Role.RIDER:
        # Riders request rides for themselves; staff schedule them.
        payload.rider = user.user_id
        payload.type = RideType.UNSCHEDULED
        payload.driver = None
    elif payload.driver is not None and payload.type == RideType.UNSCHEDULED:
        payload.type = RideType.ACTIVE

    _check_lifecycle(payload.type, payload.driver)
    _check_references(store, payload.rider, payload.driver, [payload.start_location, payload.end_location])
    ride = create_record(store.rides, payload)
    logger.info("Ride %s booked for rider %s by %s", ride.id, ride.rider, user.user_id)
    return ride


def update_ride(store: Store, user: AuthUser, ride_id: str, payload: RideUpdate) -> Ride:
    current = store.rides.get_by_id(ride_id)
    _ensure_participant(user, current)

    patch = payload.to_patch()
    if user.role == Role.DRIVER and set(patch) - _DRIVER_FIELDS:
        raise AuthorizationError("Drivers may only update a ride's status")

    if "type" not in patch:
        if payload.status is not None and payload.status.is_terminal:
            patch["type"] = RideType.PAST.value
        elif "driver" in patch and current.type != RideType.PAST:
            patch["type"] = (RideType.ACTIVE if patch["driver"] else RideType.UNSCHEDULED).value

    try:
        merged = Ride.model_validate({**current.to_item(), **patch})
    except pydantic.ValidationError as e:
        raise ValidationError(e.errors()[0]["msg"], code=ErrorCode.VALIDATION_ERROR) from e
    _check_lifecycle(merged.type, merged.driver)

    locations = [patch[key] for key in ("startLocation", "endLocation") if key in patch]
    _check_references(store, None, patch.get("driver"), locations)
    return store.rides.update(ride_id, patch)


def delete_ride(store: Store, user: AuthUser, ride_id: str) -> dict[str, str]:
    ride = store.rides.get_by_id(ride_id)
    _ensure_participant(user, ride)
    return store.rides.delete_by_id(ride_id)
