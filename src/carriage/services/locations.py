"""Location queries and address normalization."""

from carriage.config import Config
from carriage.db import Condition, Store
from carriage.formatting import format_address
from carriage.models import Location, LocationCreate, LocationUpdate, Tag
from carriage.services.records import create_record


def active_condition(active: bool) -> Condition:
    """Active locations exclude both inactive and custom tags; inactive means exactly inactive."""
    if active:
        return Condition().where("tag").not_().eq(Tag.INACTIVE).where("tag").not_().eq(Tag.CUSTOM)
    return Condition().where("tag").eq(Tag.INACTIVE)


def list_locations(store: Store, active: bool | None = None) -> list[Location]:
    if active is None:
        return store.locations.get_all()
    return store.locations.scan(active_condition(active))


def create_location(store: Store, config: Config, payload: LocationCreate) -> Location:
    payload.address = format_address(payload.address, config.default_locality)
    return create_record(store.locations, payload)


def update_location(store: Store, config: Config, location_id: str, payload: LocationUpdate) -> Location:
    patch = payload.to_patch()
    if patch.get("address"):
        patch["address"] = format_address(patch["address"], config.default_locality)
    return store.locations.update(location_id, patch)
