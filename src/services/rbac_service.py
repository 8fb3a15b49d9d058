# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""In-memory role and permission registry for the admin dashboard."""

import logging
import threading
import uuid
from collections.abc import Iterable
from datetime import UTC, datetime
from enum import Enum

from src.rbac.permissions import Permission
from src.rbac.roles import PREDEFINED_ROLE_IDS, PREDEFINED_ROLES
from src.schemas.rbac import Role, RoleCreate, RoleUpdate, User, UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class AccessDecision(str, Enum):
    """Outcome of a strict permission check."""

    GRANTED = "granted"
    DENIED = "denied"
    UNKNOWN_USER = "unknown_user"
    INACTIVE_USER = "inactive_user"


def _now() -> datetime:
    return datetime.now(UTC)


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex}"


class AccessControlRegistry:
    """Central authority for roles, users and permission checks.

    The registry owns every Role and User it knows about. Users reference
    roles by id only, so a role id that no longer resolves is skipped during
    checks instead of raising. Lookups for unknown ids never raise either;
    they degrade to None, empty results or False.

    All state lives in memory and is lost when the process exits.
    """

    def __init__(self) -> None:
        """Initialize the registry with the predefined roles."""
        self._lock = threading.RLock()
        self._roles: dict[str, Role] = {}
        self._users: dict[str, User] = {}

        now = _now()
        for definition in PREDEFINED_ROLES.values():
            role = Role(**definition, created_at=now, updated_at=now)
            self._roles[role.id] = role

    # ------------------------------------------------------------------
    # Permission checks
    # ------------------------------------------------------------------

    def check_permission(
        self, user_id: str, permission: Permission | str
    ) -> AccessDecision:
        """Check a permission and report why it was granted or denied.

        Args:
            user_id: User identifier
            permission: Permission token to check

        Returns:
            The access decision for the user
        """
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return AccessDecision.UNKNOWN_USER
            if not user.active:
                return AccessDecision.INACTIVE_USER

            if permission in user.custom_permissions:
                return AccessDecision.GRANTED

            for role_id in user.roles:
                role = self._roles.get(role_id)
                if role is not None and permission in role.permissions:
                    return AccessDecision.GRANTED

            return AccessDecision.DENIED

    def has_permission(self, user_id: str, permission: Permission | str) -> bool:
        """Check if a user has a specific permission."""
        decision = self.check_permission(user_id, permission)
        logger.debug(f"Permission check {user_id} {permission}: {decision.value}")
        return decision is AccessDecision.GRANTED

    def has_any_permission(
        self, user_id: str, permissions: Iterable[Permission | str]
    ) -> bool:
        """Check if a user has at least one of the permissions.

        An empty list of permissions is never satisfied.
        """
        return any(self.has_permission(user_id, p) for p in permissions)

    def has_all_permissions(
        self, user_id: str, permissions: Iterable[Permission | str]
    ) -> bool:
        """Check if a user has every one of the permissions.

        An empty list of permissions is always satisfied.
        """
        return all(self.has_permission(user_id, p) for p in permissions)

    def get_user_permissions(self, user_id: str) -> set[Permission]:
        """Get the union of a user's custom and role permissions.

        Returns an empty set for unknown users. Resolution does not look at
        the active flag; denial of inactive users happens in the checks.
        """
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return set()

            permissions = set(user.custom_permissions)
            for role_id in user.roles:
                role = self._roles.get(role_id)
                if role is not None:
                    permissions.update(role.permissions)
            return permissions

    # ------------------------------------------------------------------
    # User administration
    # ------------------------------------------------------------------

    def create_user(self, data: UserCreate) -> User:
        """Create and store a new user."""
        user = User(**data.model_dump(), id=_new_id("user"), created_at=_now())
        with self._lock:
            self._users[user.id] = user
        logger.info(f"Created user {user.id} ({user.email})")
        return user

    def get_users(self) -> list[User]:
        """Get all users."""
        with self._lock:
            return list(self._users.values())

    def get_user(self, user_id: str) -> User | None:
        """Get a user by ID."""
        with self._lock:
            return self._users.get(user_id)

    def update_user(self, user_id: str, updates: UserUpdate) -> User | None:
        """Apply the explicitly provided fields to a user."""
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            for field, value in updates.model_dump(
                exclude_unset=True, exclude_none=True
            ).items():
                setattr(user, field, value)
        logger.info(f"Updated user {user_id}")
        return user

    def record_login(self, user_id: str) -> User | None:
        """Stamp the user's last login time."""
        with self._lock:
            user = self._users.get(user_id)
            if user is not None:
                user.last_login_at = _now()
            return user

    def add_role_to_user(self, user_id: str, role_id: str) -> None:
        """Add a role reference to a user unless already present."""
        with self._lock:
            user = self._users.get(user_id)
            if user is not None and role_id not in user.roles:
                user.roles.append(role_id)
                logger.info(f"Added role {role_id} to user {user_id}")

    def remove_role_from_user(self, user_id: str, role_id: str) -> None:
        """Remove every reference to a role from a user."""
        with self._lock:
            user = self._users.get(user_id)
            if user is not None:
                user.roles = [r for r in user.roles if r != role_id]

    def add_permission_to_user(
        self, user_id: str, permission: Permission | str
    ) -> None:
        """Grant a permission directly to a user unless already granted.

        The token is validated before the user is looked up, so a token
        outside the vocabulary raises ValueError even for unknown users.

        Raises:
            ValueError: If permission is not a known Permission
        """
        permission = Permission(permission)
        with self._lock:
            user = self._users.get(user_id)
            if user is not None and permission not in user.custom_permissions:
                user.custom_permissions.append(permission)
                logger.info(f"Granted {permission} to user {user_id}")

    def remove_permission_from_user(
        self, user_id: str, permission: Permission | str
    ) -> None:
        """Revoke a direct permission grant from a user.

        Raises:
            ValueError: If permission is not a known Permission
        """
        permission = Permission(permission)
        with self._lock:
            user = self._users.get(user_id)
            if user is not None:
                user.custom_permissions = [
                    p for p in user.custom_permissions if p != permission
                ]

    # ------------------------------------------------------------------
    # Role administration
    # ------------------------------------------------------------------

    def create_role(self, data: RoleCreate) -> Role:
        """Create and store a new custom role."""
        now = _now()
        role = Role(
            **data.model_dump(), id=_new_id("role"), created_at=now, updated_at=now
        )
        with self._lock:
            self._roles[role.id] = role
        logger.info(f"Created role {role.id} ({role.name})")
        return role

    def get_roles(self) -> list[Role]:
        """Get all roles, predefined and custom."""
        with self._lock:
            return list(self._roles.values())

    def get_role(self, role_id: str) -> Role | None:
        """Get a role by ID."""
        with self._lock:
            return self._roles.get(role_id)

    def get_predefined_roles(self) -> list[Role]:
        """Get the current state of the predefined roles."""
        with self._lock:
            return [
                self._roles[definition["id"]]
                for definition in PREDEFINED_ROLES.values()
            ]

    def is_predefined_role(self, role_id: str) -> bool:
        """Check if a role id belongs to a predefined role."""
        return role_id in PREDEFINED_ROLE_IDS

    def update_role(self, role_id: str, updates: RoleUpdate) -> Role | None:
        """Merge the explicitly provided fields into a role.

        Returns:
            The updated role, or None if the role does not exist
        """
        with self._lock:
            role = self._roles.get(role_id)
            if role is None:
                return None
            for field, value in updates.model_dump(
                exclude_unset=True, exclude_none=True
            ).items():
                setattr(role, field, value)
            role.updated_at = _now()
        logger.info(f"Updated role {role_id}")
        return role

    def delete_role(self, role_id: str) -> bool:
        """Delete a custom role.

        Predefined roles are never deleted. Users that still reference the
        deleted role keep the id; it simply stops granting anything.

        Returns:
            True if the role was removed, False otherwise
        """
        if self.is_predefined_role(role_id):
            logger.warning(f"Refusing to delete predefined role {role_id}")
            return False

        with self._lock:
            removed = self._roles.pop(role_id, None)
        if removed is None:
            return False
        logger.info(f"Deleted role {role_id}")
        return True
