"""
Auth dependencies for protected FastAPI routes.
"""

import logging
from collections.abc import Awaitable, Callable

from fastapi import Depends, Header, Request

from carriage.auth import AuthProvider, AuthUser, CarriageTokenProvider, Role, allowed, get_identity_provider
from carriage.config import Config, get_config
from carriage.db import Store, get_store
from carriage.errors import AuthenticationError, AuthorizationError, CarriageError, ErrorCode

logger = logging.getLogger(__name__)


def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise AuthenticationError("Missing Authorization header.")

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise AuthenticationError("Invalid Authorization header format.")

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise AuthenticationError("Authorization must be: Bearer <token>.")
    return token


def get_token_provider(
    config: Config = Depends(get_config),
    store: Store = Depends(get_store),
) -> CarriageTokenProvider:
    return CarriageTokenProvider(config, store)


def get_sign_in_provider() -> AuthProvider:
    try:
        return get_identity_provider()
    except ValueError as e:
        raise CarriageError("Sign-in is not configured", code=ErrorCode.INTERNAL_ERROR) from e


def require_role(*levels: Role) -> Callable[..., Awaitable[AuthUser]]:
    """Dependency that admits a request only if its token's role satisfies one of ``levels``.

    The resolved user is attached to ``request.state.user``.
    """
    required = ", ".join(level.value for level in levels)

    async def dependency(
        request: Request,
        authorization: str | None = Header(default=None),
        provider: CarriageTokenProvider = Depends(get_token_provider),
    ) -> AuthUser:
        token = _extract_bearer_token(authorization)
        user = await provider.verify_token(token)
        if not allowed(user.role, *levels):
            logger.info(
                "Denied %s %s to %s %s (requires %s)",
                request.method,
                request.url.path,
                user.role.value,
                user.user_id,
                required,
            )
            raise AuthorizationError(f"This route requires one of: {required}")
        request.state.user = user
        return user

    return dependency
