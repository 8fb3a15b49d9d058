"""Pydantic schemas package."""
from src.schemas.common import (
    CamelModel,
    ErrorResponse,
    HealthResponse,
)
from src.schemas.rbac import (
    PermissionSchema,
    Role,
    RoleCreate,
    RoleUpdate,
    User,
    UserCreate,
    UserUpdate,
)

__all__ = [
    # Common
    "CamelModel",
    "ErrorResponse",
    "HealthResponse",
    # RBAC
    "PermissionSchema",
    "Role",
    "RoleCreate",
    "RoleUpdate",
    "User",
    "UserCreate",
    "UserUpdate",
]
