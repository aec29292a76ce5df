"""Exchange an identity-provider session token for a Carriage bearer token."""

import asyncio
import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from carriage.auth import AuthProvider, CarriageTokenProvider, Role
from carriage.db import Condition, Store
from carriage.errors import AuthenticationError, AuthorizationError, ErrorCode

logger = logging.getLogger(__name__)


class UserType(str, Enum):
    ADMIN = "Admin"
    DRIVER = "Driver"
    RIDER = "Rider"


class SignInRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: str = Field(..., min_length=1)
    user_type: UserType = Field(..., alias="userType")


class SignInResponse(BaseModel):
    token: str
    id: str
    user_type: Role = Field(..., serialization_alias="userType")


def _by_email(email: str) -> Condition:
    return Condition().where("email").eq(email)


def _find_account(store: Store, user_type: UserType, email: str) -> tuple[str, Role]:
    if user_type == UserType.RIDER:
        riders = store.riders.scan(_by_email(email))
        if riders:
            if not riders[0].active:
                raise AuthorizationError("Rider account is inactive", code=ErrorCode.INACTIVE_ACCOUNT)
            return riders[0].id, Role.RIDER
    elif user_type == UserType.DRIVER:
        drivers = store.drivers.scan(_by_email(email))
        if drivers:
            return drivers[0].id, Role.DRIVER
    else:
        admins = store.admins.scan(_by_email(email))
        if admins:
            return admins[0].id, Role.DISPATCHER if admins[0].is_dispatcher else Role.ADMIN
        drivers = store.drivers.scan(_by_email(email).where("admin").eq(True))
        if drivers:
            return drivers[0].id, Role.ADMIN

    raise AuthenticationError(f"No {user_type.value.lower()} account for this user")


async def sign_in(
    store: Store,
    identity_provider: AuthProvider,
    token_provider: CarriageTokenProvider,
    request: SignInRequest,
) -> SignInResponse:
    identity = await identity_provider.verify_token(request.token)
    email = identity.email.strip()
    if not email:
        raise AuthenticationError("Identity has no email address")

    user_id, role = await asyncio.to_thread(_find_account, store, request.user_type, email)
    logger.info("Signed in %s as %s", user_id, role.value)
    return SignInResponse(token=token_provider.issue_token(user_id, role), id=user_id, user_type=role)
