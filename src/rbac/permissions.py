# src/rbac/permissions.py
from enum import Enum


class Permission(str, Enum):
    """Permission tokens understood by the admin dashboard."""

    # Frames
    FRAMES_READ = "frames.read"
    FRAMES_WRITE = "frames.write"
    FRAMES_DELETE = "frames.delete"

    # Quests
    QUESTS_READ = "quests.read"
    QUESTS_WRITE = "quests.write"
    QUESTS_DELETE = "quests.delete"

    # Mints
    MINTS_READ = "mints.read"
    MINTS_WRITE = "mints.write"
    MINTS_DELETE = "mints.delete"

    # Workers
    WORKERS_READ = "workers.read"
    WORKERS_CONTROL = "workers.control"

    # Smart Brain
    BRAIN_READ = "brain.read"
    BRAIN_CONTROL = "brain.control"

    # Dashboard
    DASHBOARD_READ = "dashboard.read"
    DASHBOARD_ADMIN = "dashboard.admin"

    # Users & access control
    USERS_READ = "users.read"
    USERS_WRITE = "users.write"
    PERMISSIONS_MANAGE = "permissions.manage"

    # System
    SYSTEM_ADMIN = "system.admin"


_DESCRIPTIONS = {
    Permission.FRAMES_READ: "View frames",
    Permission.FRAMES_WRITE: "Create and edit frames",
    Permission.FRAMES_DELETE: "Delete frames",
    Permission.QUESTS_READ: "View quests",
    Permission.QUESTS_WRITE: "Create and edit quests",
    Permission.QUESTS_DELETE: "Delete quests",
    Permission.MINTS_READ: "View mints",
    Permission.MINTS_WRITE: "Create and edit mints",
    Permission.MINTS_DELETE: "Delete mints",
    Permission.WORKERS_READ: "View worker status",
    Permission.WORKERS_CONTROL: "Start, stop and trigger workers",
    Permission.BRAIN_READ: "View Smart Brain insights",
    Permission.BRAIN_CONTROL: "Run Smart Brain operations",
    Permission.DASHBOARD_READ: "View the admin dashboard",
    Permission.DASHBOARD_ADMIN: "Administer dashboard settings",
    Permission.USERS_READ: "Read user information",
    Permission.USERS_WRITE: "Create and update users",
    Permission.PERMISSIONS_MANAGE: "Manage roles and permission grants",
    Permission.SYSTEM_ADMIN: "Full system administration",
}

CORE_PERMISSIONS = [
    {
        "code": permission.value,
        "module": permission.value.split(".", 1)[0],
        "description": _DESCRIPTIONS[permission],
    }
    for permission in Permission
]
