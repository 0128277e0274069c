"""Closed role set and the role -> permission table used for every access check."""

import enum


class Role(enum.StrEnum):
    """User roles for RBAC, from most to least privileged."""

    SUPER_ADMIN = "SuperAdmin"
    ADMIN = "Admin"
    SUPERVISOR = "Supervisor"
    AGENT = "Agent"


DEFAULT_ROLE = Role.AGENT


class Permission(enum.StrEnum):
    """Capabilities checked by handlers and services."""

    VIEW_PROFILE = "view_profile"
    MANAGE_PRODUCTS = "manage_products"
    VIEW_ADMIN_AREA = "view_admin_area"


ROLE_PERMISSIONS: dict[Role, frozenset[Permission]] = {
    Role.SUPER_ADMIN: frozenset(
        {Permission.VIEW_PROFILE, Permission.MANAGE_PRODUCTS, Permission.VIEW_ADMIN_AREA}
    ),
    Role.ADMIN: frozenset({Permission.VIEW_PROFILE, Permission.MANAGE_PRODUCTS}),
    Role.SUPERVISOR: frozenset({Permission.VIEW_PROFILE}),
    Role.AGENT: frozenset({Permission.VIEW_PROFILE}),
}


def parse_role(value: object) -> Role | None:
    """Return the Role for a raw claim/column value, or None if outside the closed set."""
    if isinstance(value, Role):
        return value
    try:
        return Role(str(value))
    except ValueError:
        return None


def has_permission(role: Role | str, permission: Permission) -> bool:
    """True if the role grants the permission. Unknown roles grant nothing."""
    resolved = parse_role(role)
    if resolved is None:
        return False
    return permission in ROLE_PERMISSIONS[resolved]
