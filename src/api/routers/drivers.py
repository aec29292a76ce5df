from datetime import date, time

from fastapi import APIRouter, Depends, Query

from api.dependencies import require_role
from api.envelope import wrap
from carriage.auth import AuthUser, Role
from carriage.config import Config, get_config
from carriage.db import Store, get_store
from carriage.models import DriverCreate, DriverUpdate
from carriage.services.drivers import available_drivers
from carriage.services.records import create_record

router = APIRouter(prefix="/api/drivers")


@router.get("")
def list_drivers(
    _: AuthUser = Depends(require_role(Role.ADMIN, Role.DISPATCHER)),
    store: Store = Depends(get_store),
) -> dict:
    return wrap(store.drivers.get_all())


@router.get("/available")
def list_available_drivers(
    day: date = Query(..., alias="date"),
    start_time: time = Query(..., alias="startTime"),
    end_time: time = Query(..., alias="endTime"),
    _: AuthUser = Depends(require_role(Role.DISPATCHER)),
    store: Store = Depends(get_store),
    config: Config = Depends(get_config),
) -> dict:
    return wrap(available_drivers(store, config, day, start_time, end_time))


@router.get("/{driver_id}")
def get_driver(
    driver_id: str,
    user: AuthUser = Depends(require_role(Role.USER)),
    store: Store = Depends(get_store),
) -> dict:
    if user.role == Role.DRIVER:
        user.ensure_self(driver_id)
    return wrap(store.drivers.get_by_id(driver_id))


@router.get("/{driver_id}/profile")
def get_driver_profile(
    driver_id: str,
    _: AuthUser = Depends(require_role(Role.USER)),
    store: Store = Depends(get_store),
) -> dict:
    return store.drivers.get_by_id(driver_id).profile()


@router.post("")
def create_driver(
    body: DriverCreate,
    _: AuthUser = Depends(require_role(Role.ADMIN)),
    store: Store = Depends(get_store),
) -> dict:
    return wrap(create_record(store.drivers, body))


@router.put("/{driver_id}")
def update_driver(
    driver_id: str,
    body: DriverUpdate,
    user: AuthUser = Depends(require_role(Role.ADMIN, Role.DRIVER)),
    store: Store = Depends(get_store),
) -> dict:
    user.ensure_self(driver_id)
    return wrap(store.drivers.update(driver_id, body.to_patch()))


@router.delete("/{driver_id}")
def delete_driver(
    driver_id: str,
    _: AuthUser = Depends(require_role(Role.ADMIN)),
    store: Store = Depends(get_store),
) -> dict:
    return store.drivers.delete_by_id(driver_id)
