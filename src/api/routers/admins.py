from fastapi import APIRouter, Depends

from api.dependencies import require_role
from api.envelope import wrap
from carriage.auth import AuthUser, Role
from carriage.db import Store, get_store
from carriage.models import AdminCreate, AdminUpdate
from carriage.services.records import create_record

router = APIRouter(prefix="/api/admins")

admin_only = require_role(Role.ADMIN)


@router.get("")
def list_admins(_: AuthUser = Depends(admin_only), store: Store = Depends(get_store)) -> dict:
    return wrap(store.admins.get_all())


@router.get("/{admin_id}")
def get_admin(admin_id: str, _: AuthUser = Depends(admin_only), store: Store = Depends(get_store)) -> dict:
    return wrap(store.admins.get_by_id(admin_id))


@router.post("")
def create_admin(
    body: AdminCreate,
    _: AuthUser = Depends(admin_only),
    store: Store = Depends(get_store),
) -> dict:
    return wrap(create_record(store.admins, body))


@router.put("/{admin_id}")
def update_admin(
    admin_id: str,
    body: AdminUpdate,
    _: AuthUser = Depends(admin_only),
    store: Store = Depends(get_store),
) -> dict:
    return wrap(store.admins.update(admin_id, body.to_patch()))


@router.delete("/{admin_id}")
def delete_admin(admin_id: str, _: AuthUser = Depends(admin_only), store: Store = Depends(get_store)) -> dict:
    return store.admins.delete_by_id(admin_id)
