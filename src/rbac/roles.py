# src/rbac/roles.py
from .permissions import Permission

# Super admin always gets every permission
SUPER_ADMIN_PERMISSIONS = list(Permission)

# Roles seeded into every registry. Their ids are stable and they cannot be
# deleted, but their name, description and permissions may still be edited.
PREDEFINED_ROLES = {
    "SUPER_ADMIN": {
        "id": "super_admin",
        "name": "Super Administrator",
        "description": "Full system access",
        "permissions": SUPER_ADMIN_PERMISSIONS,
    },
    "OPERATOR": {
        "id": "operator",
        "name": "Operator",
        "description": "Operational access to dashboard and workers",
        "permissions": [
            Permission.FRAMES_READ,
            Permission.FRAMES_WRITE,
            Permission.QUESTS_READ,
            Permission.QUESTS_WRITE,
            Permission.MINTS_READ,
            Permission.MINTS_WRITE,
            Permission.WORKERS_READ,
            Permission.WORKERS_CONTROL,
            Permission.BRAIN_READ,
            Permission.DASHBOARD_READ,
        ],
    },
    "DEVELOPER": {
        "id": "developer",
        "name": "Developer",
        "description": "Development and testing access",
        "permissions": [
            Permission.FRAMES_READ,
            Permission.FRAMES_WRITE,
            Permission.QUESTS_READ,
            Permission.QUESTS_WRITE,
            Permission.MINTS_READ,
            Permission.WORKERS_READ,
            Permission.BRAIN_READ,
            Permission.DASHBOARD_READ,
        ],
    },
    "VIEWER": {
        "id": "viewer",
        "name": "Viewer",
        "description": "Read-only access",
        "permissions": [
            Permission.FRAMES_READ,
            Permission.QUESTS_READ,
            Permission.MINTS_READ,
            Permission.WORKERS_READ,
            Permission.BRAIN_READ,
            Permission.DASHBOARD_READ,
        ],
    },
}

PREDEFINED_ROLE_IDS = frozenset(role["id"] for role in PREDEFINED_ROLES.values())
