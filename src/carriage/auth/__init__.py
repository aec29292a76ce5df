"""Authentication and role-based authorization."""

from carriage.auth.clerk_provider import ClerkAuthProvider
from carriage.auth.interface import AuthProvider, AuthUser, get_identity_provider
from carriage.auth.roles import Role, allowed, satisfies
from carriage.auth.tokens import CarriageTokenProvider

__all__ = [
    "AuthProvider",
    "AuthUser",
    "CarriageTokenProvider",
    "ClerkAuthProvider",
    "Role",
    "allowed",
    "get_identity_provider",
    "satisfies",
]
