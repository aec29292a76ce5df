from datetime import date

from fastapi import APIRouter, Depends, Query

from api.dependencies import require_role
from api.envelope import wrap
from carriage.auth import AuthUser, Role
from carriage.config import Config, get_config
from carriage.db import Store, get_store
from carriage.models import RideCreate, RideType, RideUpdate
from carriage.services import rides as service

router = APIRouter(prefix="/api/rides")


@router.get("")
def list_rides(
    ride_type: RideType | None = Query(default=None, alias="type"),
    rider: str | None = Query(default=None),
    driver: str | None = Query(default=None),
    day: date | None = Query(default=None, alias="date"),
    start_date: date | None = Query(default=None, alias="startDate"),
    end_date: date | None = Query(default=None, alias="endDate"),
    _: AuthUser = Depends(require_role(Role.DISPATCHER)),
    store: Store = Depends(get_store),
    config: Config = Depends(get_config),
) -> dict:
    """
    Rides filtered by type, rider, driver and local calendar dates.

    ``date`` is shorthand for ``startDate == endDate``.
    """
    if day is not None:
        start_date = end_date = day
    rides = service.list_rides(
        store,
        config,
        ride_type=ride_type,
        rider=rider,
        driver=driver,
        start_date=start_date,
        end_date=end_date,
    )
    return wrap(rides)


@router.get("/{ride_id}")
def get_ride(
    ride_id: str,
    user: AuthUser = Depends(require_role(Role.USER)),
    store: Store = Depends(get_store),
) -> dict:
    return wrap(service.get_ride(store, user, ride_id))


@router.post("")
def create_ride(
    body: RideCreate,
    user: AuthUser = Depends(require_role(Role.DISPATCHER, Role.RIDER)),
    store: Store = Depends(get_store),
) -> dict:
    return wrap(service.create_ride(store, user, body))


@router.put("/{ride_id}")
def update_ride(
    ride_id: str,
    body: RideUpdate,
    user: AuthUser = Depends(require_role(Role.DISPATCHER, Role.DRIVER)),
    store: Store = Depends(get_store),
) -> dict:
    return wrap(service.update_ride(store, user, ride_id, body))


@router.delete("/{ride_id}")
def delete_ride(
    ride_id: str,
    user: AuthUser = Depends(require_role(Role.DISPATCHER, Role.RIDER)),
    store: Store = Depends(get_store),
) -> dict:
    return service.delete_ride(store, user, ride_id)
