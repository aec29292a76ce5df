"""Carriage-issued bearer tokens: HS256 JWTs carrying the user id and role."""

import asyncio
import logging
import time

import jwt

from carriage.auth.interface import AuthProvider, AuthUser
from carriage.auth.roles import TOKEN_ROLES, Role
from carriage.config import Config
from carriage.db import Store
from carriage.errors import AuthenticationError, AuthorizationError, ErrorCode, NotFoundError

logger = logging.getLogger(__name__)


class CarriageTokenProvider(AuthProvider):
    def __init__(self, config: Config, store: Store):
        self._secret = config.jwt_secret
        self._algorithm = config.jwt_algorithm
        self._ttl_seconds = config.token_ttl_seconds
        self._store = store

    def issue_token(self, user_id: str, role: Role) -> str:
        if role not in TOKEN_ROLES:
            raise ValueError(f"cannot issue a token for access level {role.value}")
        issued_at = int(time.time())
        payload = {
            "sub": user_id,
            "role": role.value,
            "iat": issued_at,
            "exp": issued_at + self._ttl_seconds,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    async def decode_claims(self, token: str) -> dict[str, object]:
        try:
            claims: dict[str, object] = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError as e:
            raise AuthenticationError("Token has expired", code=ErrorCode.INVALID_TOKEN) from e
        except jwt.InvalidTokenError as e:
            raise AuthenticationError(f"Invalid token: {e}", code=ErrorCode.INVALID_TOKEN) from e

        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            raise AuthenticationError("Invalid token subject", code=ErrorCode.INVALID_TOKEN)
        try:
            role = Role(claims.get("role"))
        except ValueError as e:
            raise AuthenticationError("Invalid token role", code=ErrorCode.INVALID_TOKEN) from e
        if role not in TOKEN_ROLES:
            raise AuthenticationError("Invalid token role", code=ErrorCode.INVALID_TOKEN)
        return claims

    async def verify_token(self, token: str) -> AuthUser:
        claims = await self.decode_claims(token)
        # Repository calls are blocking boto3 requests.
        return await asyncio.to_thread(self.resolve_user, str(claims["sub"]), Role(claims["role"]))

    def resolve_user(self, user_id: str, role: Role) -> AuthUser:
        """Load the token subject from the table that backs its role."""
        try:
            if role == Role.RIDER:
                rider = self._store.riders.get_by_id(user_id)
                if not rider.active:
                    raise AuthorizationError("Rider account is inactive", code=ErrorCode.INACTIVE_ACCOUNT)
                record = rider
            elif role == Role.DRIVER:
                record = self._store.drivers.get_by_id(user_id)
            elif role == Role.DISPATCHER:
                record = self._store.admins.get_by_id(user_id)
            else:
                record = self._resolve_admin(user_id)
        except NotFoundError as e:
            logger.info("Token subject %s (%s) no longer exists", user_id, role.value)
            raise AuthenticationError("User not found", code=ErrorCode.INVALID_TOKEN) from e

        return AuthUser(
            user_id=record.id,
            email=record.email,
            name=f"{record.first_name} {record.last_name}".strip(),
            role=role,
        )

    def _resolve_admin(self, user_id: str):
        try:
            admin = self._store.admins.get_by_id(user_id)
        except NotFoundError:
            driver = self._store.drivers.get_by_id(user_id)
            if not driver.admin:
                raise AuthenticationError("Driver is not an administrator", code=ErrorCode.INVALID_TOKEN)
            return driver
        if admin.is_dispatcher:
            raise AuthenticationError("Dispatcher accounts cannot hold admin tokens", code=ErrorCode.INVALID_TOKEN)
        return admin
