from fastapi import APIRouter, Depends, Query

from api.dependencies import require_role
from api.envelope import wrap
from carriage.auth import AuthUser, Role
from carriage.config import Config, get_config
from carriage.db import Store, get_store
from carriage.models import LocationCreate, LocationUpdate
from carriage.services import locations as service

router = APIRouter(prefix="/api/locations")


@router.get("/{location_id}")
def get_location(
    location_id: str,
    _: AuthUser = Depends(require_role(Role.USER)),
    store: Store = Depends(get_store),
) -> dict:
    return wrap(store.locations.get_by_id(location_id))


@router.get("")
def list_locations(
    active: bool | None = Query(default=None),
    _: AuthUser = Depends(require_role(Role.USER)),
    store: Store = Depends(get_store),
) -> dict:
    """
    All locations, or only active (``active=true``) / inactive (``active=false``) ones.
    """
    return wrap(service.list_locations(store, active))


@router.post("")
def create_location(
    body: LocationCreate,
    _: AuthUser = Depends(require_role(Role.DISPATCHER)),
    store: Store = Depends(get_store),
    config: Config = Depends(get_config),
) -> dict:
    return wrap(service.create_location(store, config, body))


@router.put("/{location_id}")
def update_location(
    location_id: str,
    body: LocationUpdate,
    _: AuthUser = Depends(require_role(Role.DISPATCHER)),
    store: Store = Depends(get_store),
    config: Config = Depends(get_config),
) -> dict:
    return wrap(service.update_location(store, config, location_id, body))


@router.delete("/{location_id}")
def delete_location(
    location_id: str,
    _: AuthUser = Depends(require_role(Role.DISPATCHER)),
    store: Store = Depends(get_store),
) -> dict:
    return store.locations.delete_by_id(location_id)
