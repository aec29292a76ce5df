from fastapi import APIRouter, Depends

from api.dependencies import require_role
from api.envelope import wrap
from carriage.auth import AuthUser, Role
from carriage.config import Config, get_config
from carriage.db import Store, get_store
from carriage.models import FavoriteRequest, RiderCreate, RiderUpdate
from carriage.services import riders as service

router = APIRouter(prefix="/api/riders")


def _readable(user: AuthUser, rider_id: str) -> None:
    # Drivers read rider details for pickups; riders only see their own.
    if user.role == Role.RIDER:
        user.ensure_self(rider_id)


@router.get("")
def list_riders(
    _: AuthUser = Depends(require_role(Role.ADMIN, Role.DISPATCHER)),
    store: Store = Depends(get_store),
) -> dict:
    return wrap(store.riders.get_all())


@router.get("/usage")
def get_usage(
    _: AuthUser = Depends(require_role(Role.ADMIN)),
    store: Store = Depends(get_store),
) -> dict:
    """Per-rider ``{noShows, totalRides}`` counted over past rides."""
    return service.usage(store)


@router.get("/{rider_id}")
def get_rider(
    rider_id: str,
    user: AuthUser = Depends(require_role(Role.USER)),
    store: Store = Depends(get_store),
) -> dict:
    _readable(user, rider_id)
    return wrap(store.riders.get_by_id(rider_id))


@router.get("/{rider_id}/profile")
def get_rider_profile(
    rider_id: str,
    user: AuthUser = Depends(require_role(Role.USER)),
    store: Store = Depends(get_store),
) -> dict:
    _readable(user, rider_id)
    return store.riders.get_by_id(rider_id).profile()


@router.get("/{rider_id}/organization")
def get_rider_organization(
    rider_id: str,
    user: AuthUser = Depends(require_role(Role.USER)),
    store: Store = Depends(get_store),
) -> dict:
    _readable(user, rider_id)
    rider = store.riders.get_by_id(rider_id)
    return {
        "organization": rider.organization.value if rider.organization else None,
        "description": rider.description,
    }


@router.get("/{rider_id}/accessibility")
def get_rider_accessibility(
    rider_id: str,
    user: AuthUser = Depends(require_role(Role.USER)),
    store: Store = Depends(get_store),
) -> dict:
    _readable(user, rider_id)
    rider = store.riders.get_by_id(rider_id)
    return {"accessibility": rider.accessibility, "description": rider.description}


@router.get("/{rider_id}/favorites")
def get_favorites(
    rider_id: str,
    user: AuthUser = Depends(require_role(Role.USER)),
    store: Store = Depends(get_store),
) -> dict:
    _readable(user, rider_id)
    return wrap(service.get_favorites(store, rider_id))


@router.post("/{rider_id}/favorites")
def add_favorite(
    rider_id: str,
    body: FavoriteRequest,
    user: AuthUser = Depends(require_role(Role.ADMIN, Role.RIDER)),
    store: Store = Depends(get_store),
) -> dict:
    user.ensure_self(rider_id)
    return wrap(service.add_favorite(store, rider_id, body.id))


@router.delete("/{rider_id}/favorites/{location_id}")
def remove_favorite(
    rider_id: str,
    location_id: str,
    user: AuthUser = Depends(require_role(Role.ADMIN, Role.RIDER)),
    store: Store = Depends(get_store),
) -> dict:
    user.ensure_self(rider_id)
    return wrap(service.remove_favorite(store, rider_id, location_id))


@router.get("/{rider_id}/rides")
def get_rider_rides(
    rider_id: str,
    user: AuthUser = Depends(require_role(Role.ADMIN, Role.DISPATCHER, Role.RIDER)),
    store: Store = Depends(get_store),
) -> dict:
    user.ensure_self(rider_id)
    return wrap(service.rides_for_rider(store, rider_id))


@router.post("")
def create_rider(
    body: RiderCreate,
    _: AuthUser = Depends(require_role(Role.ADMIN)),
    store: Store = Depends(get_store),
    config: Config = Depends(get_config),
) -> dict:
    return wrap(service.create_rider(store, config, body))


@router.put("/{rider_id}")
def update_rider(
    rider_id: str,
    body: RiderUpdate,
    user: AuthUser = Depends(require_role(Role.ADMIN, Role.RIDER)),
    store: Store = Depends(get_store),
    config: Config = Depends(get_config),
) -> dict:
    user.ensure_self(rider_id)
    return wrap(service.update_rider(store, config, rider_id, body))


@router.delete("/{rider_id}")
def delete_rider(
    rider_id: str,
    _: AuthUser = Depends(require_role(Role.ADMIN)),
    store: Store = Depends(get_store),
) -> dict:
    return store.riders.delete_by_id(rider_id)
