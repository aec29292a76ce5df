"""Closed set of Carriage roles and the grant table used to gate routes."""

from enum import Enum


class Role(str, Enum):
    ADMIN = "Admin"
    DISPATCHER = "Dispatcher"
    DRIVER = "Driver"
    RIDER = "Rider"
    # Access level only: any signed-in role. Never issued in a token.
    USER = "User"


TOKEN_ROLES = frozenset({Role.ADMIN, Role.DISPATCHER, Role.DRIVER, Role.RIDER})

# role -> every access level that role satisfies
GRANTS: dict[Role, frozenset[Role]] = {
    Role.ADMIN: frozenset(Role),
    Role.DISPATCHER: frozenset({Role.DISPATCHER, Role.USER}),
    Role.DRIVER: frozenset({Role.DRIVER, Role.USER}),
    Role.RIDER: frozenset({Role.RIDER, Role.USER}),
}


def satisfies(role: Role, required: Role) -> bool:
    return required in GRANTS.get(role, frozenset())


def allowed(role: Role, *levels: Role) -> bool:
    """True when ``role`` satisfies any of ``levels``."""
    return any(satisfies(role, level) for level in levels)
