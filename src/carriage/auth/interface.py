from abc import ABC, abstractmethod

from pydantic import BaseModel

from carriage.auth.roles import Role
from carriage.errors import AuthorizationError

_SELF_SCOPED = frozenset({Role.DRIVER, Role.RIDER})


class AuthUser(BaseModel):
    user_id: str
    email: str
    name: str
    role: Role
    metadata: dict[str, str] = {}

    @property
    def is_self_scoped(self) -> bool:
        return self.role in _SELF_SCOPED

    def ensure_self(self, record_id: str) -> None:
        """Drivers and riders may only act on their own records."""
        if self.is_self_scoped and self.user_id != record_id:
            raise AuthorizationError(f"{self.role.value} may only access their own records")


class AuthProvider(ABC):
    @abstractmethod
    async def verify_token(self, token: str) -> AuthUser: ...

    @abstractmethod
    async def decode_claims(self, token: str) -> dict[str, object]: ...


def get_identity_provider() -> AuthProvider:
    """Provider that verifies sign-in tokens from the external identity service."""
    from carriage.config import get_config

    config = get_config()
    clerk_secret = config.clerk_secret_key
    if not clerk_secret:
        raise ValueError("CLERK_SECRET_KEY not configured")

    from carriage.auth.clerk_provider import ClerkAuthProvider

    return ClerkAuthProvider(secret_key=clerk_secret)
