from fastapi import APIRouter, Depends

from api.dependencies import require_role
from api.envelope import wrap
from carriage.auth import AuthUser, Role
from carriage.db import Store, get_store
from carriage.models import VehicleCreate, VehicleUpdate
from carriage.services.records import create_record

router = APIRouter(prefix="/api/vehicles")


@router.get("")
def list_vehicles(_: AuthUser = Depends(require_role(Role.USER)), store: Store = Depends(get_store)) -> dict:
    return wrap(store.vehicles.get_all())


@router.get("/{vehicle_id}")
def get_vehicle(
    vehicle_id: str,
    _: AuthUser = Depends(require_role(Role.USER)),
    store: Store = Depends(get_store),
) -> dict:
    return wrap(store.vehicles.get_by_id(vehicle_id))


@router.post("")
def create_vehicle(
    body: VehicleCreate,
    _: AuthUser = Depends(require_role(Role.ADMIN)),
    store: Store = Depends(get_store),
) -> dict:
    return wrap(create_record(store.vehicles, body))


@router.put("/{vehicle_id}")
def update_vehicle(
    vehicle_id: str,
    body: VehicleUpdate,
    _: AuthUser = Depends(require_role(Role.ADMIN)),
    store: Store = Depends(get_store),
) -> dict:
    return wrap(store.vehicles.update(vehicle_id, body.to_patch()))


@router.delete("/{vehicle_id}")
def delete_vehicle(
    vehicle_id: str,
    _: AuthUser = Depends(require_role(Role.ADMIN)),
    store: Store = Depends(get_store),
) -> dict:
    return store.vehicles.delete_by_id(vehicle_id)
