# src/schemas/rbac.py
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.rbac.permissions import Permission
from src.schemas.common import CamelModel


def _unique(permissions: list[Permission] | None) -> list[Permission] | None:
    """Collapse duplicate permission tokens, keeping first occurrence order."""
    if permissions is None:
        return None
    return list(dict.fromkeys(permissions))


class PermissionSchema(BaseModel):
    """Schema representing a permission catalog entry."""

    code: str
    module: str
    description: str | None


class RoleCreate(CamelModel):
    """Schema for creating a new role."""

    name: str
    description: str = ""
    permissions: list[Permission] = Field(default_factory=list)

    @field_validator("permissions")
    @classmethod
    def dedupe_permissions(cls, value):
        return _unique(value)


class RoleUpdate(CamelModel):
    """Schema for updating a role. Only explicitly provided fields apply."""

    name: str | None = None
    description: str | None = None
    permissions: list[Permission] | None = None

    @field_validator("permissions")
    @classmethod
    def dedupe_permissions(cls, value):
        return _unique(value)


class Role(RoleCreate):
    """A named, reusable set of permissions."""

    id: str
    created_at: datetime
    updated_at: datetime


class UserCreate(CamelModel):
    """Schema for creating a new user."""

    email: str
    name: str
    roles: list[str] = Field(default_factory=list)
    custom_permissions: list[Permission] = Field(default_factory=list)
    active: bool = True
    last_login_at: datetime | None = None


class UserUpdate(CamelModel):
    """Schema for updating a user's display fields and status."""

    email: str | None = None
    name: str | None = None
    active: bool | None = None


class User(UserCreate):
    """A user holding role references and direct permission grants."""

    id: str
    created_at: datetime


class CreateRequest(BaseModel):
    """Body of POST /permissions. A missing type is answered as invalid."""

    type: str | None = None
    data: dict[str, Any] = Field(default_factory=dict)


class UpdateRequest(BaseModel):
    """Body of PUT /permissions."""

    type: str | None = None
    id: str = ""
    action: str | None = None
    value: Any = None


class RoleResponse(CamelModel):
    """Envelope for a single role."""

    role: Role | None


class UserResponse(CamelModel):
    """Envelope for a single user."""

    user: User | None


class UserPermissionsResponse(CamelModel):
    """Effective permissions of one user."""

    user_id: str
    permissions: list[Permission]
    user: User | None


class RegistryOverviewResponse(CamelModel):
    """All roles and users known to the registry."""

    roles: list[Role]
    users: list[User]
    predefined_roles: list[Role]


class PermissionCheckResponse(CamelModel):
    """Outcome of a single permission check."""

    user_id: str
    permission: str
    allowed: bool
    decision: str


class DeleteRoleResponse(BaseModel):
    """Result of a role deletion."""

    success: bool
