# src/api/permissions.py
from typing import Any, TypeVar

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from src.api.deps import get_registry
from src.rbac.permissions import CORE_PERMISSIONS
from src.schemas.rbac import (
    CreateRequest,
    DeleteRoleResponse,
    PermissionCheckResponse,
    PermissionSchema,
    RegistryOverviewResponse,
    RoleCreate,
    RoleResponse,
    RoleUpdate,
    UpdateRequest,
    UserCreate,
    UserPermissionsResponse,
    UserResponse,
    UserUpdate,
)
from src.services.rbac_service import AccessControlRegistry, AccessDecision

router = APIRouter()

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _parse(schema: type[SchemaT], data: Any) -> SchemaT:
    """Validate a nested payload, reporting failures like a bad request body."""
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False)) from e


def _invalid_permission(value: Any) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"Invalid permission: {value}",
    )


def _parse_role_id(value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid role id"
        )
    return value


@router.get(
    "/permissions",
    response_model=UserPermissionsResponse | RegistryOverviewResponse,
    summary="Get a user's permissions or the whole registry",
)
def get_permissions(
    user_id: str | None = Query(default=None, alias="userId"),
    registry: AccessControlRegistry = Depends(get_registry),
):
    """With userId, return that user's effective permissions.

    Without it, return every role and user plus the predefined roles.
    """
    if user_id:
        permissions = sorted(
            registry.get_user_permissions(user_id), key=lambda p: p.value
        )
        return UserPermissionsResponse(
            user_id=user_id,
            permissions=permissions,
            user=registry.get_user(user_id),
        )

    return RegistryOverviewResponse(
        roles=registry.get_roles(),
        users=registry.get_users(),
        predefined_roles=registry.get_predefined_roles(),
    )


@router.get(
    "/permissions/catalog",
    response_model=list[PermissionSchema],
    summary="List all available permissions",
)
def list_permissions():
    """Retrieve the permission vocabulary with descriptions."""
    return CORE_PERMISSIONS


@router.get(
    "/permissions/check",
    response_model=PermissionCheckResponse,
    summary="Check a single permission for a user",
)
def check_permission(
    user_id: str = Query(alias="userId"),
    permission: str = Query(),
    registry: AccessControlRegistry = Depends(get_registry),
):
    """Report whether the user holds the permission and why."""
    decision = registry.check_permission(user_id, permission)
    return PermissionCheckResponse(
        user_id=user_id,
        permission=permission,
        allowed=decision is AccessDecision.GRANTED,
        decision=decision.value,
    )


@router.post(
    "/permissions",
    response_model=RoleResponse | UserResponse,
    summary="Create a role or a user",
)
def create_entity(
    body: CreateRequest,
    registry: AccessControlRegistry = Depends(get_registry),
):
    """Create a role (type "role") or a user (type "user")."""
    if body.type == "role":
        role = registry.create_role(_parse(RoleCreate, body.data))
        return RoleResponse(role=role)

    if body.type == "user":
        user = registry.create_user(_parse(UserCreate, body.data))
        return UserResponse(user=user)

    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid type")


@router.put(
    "/permissions",
    response_model=RoleResponse | UserResponse,
    summary="Update a role or a user's grants",
)
def update_entity(
    body: UpdateRequest,
    registry: AccessControlRegistry = Depends(get_registry),
):
    """Update a role, or add/remove a user's roles and custom permissions.

    Actions other than the known user actions, like unknown types, are
    answered with "Invalid type".

    Unknown ids are not an error; the response then carries null.
    """
    if body.type == "user":
        if body.action == "addRole":
            registry.add_role_to_user(body.id, _parse_role_id(body.value))
        elif body.action == "removeRole":
            registry.remove_role_from_user(body.id, _parse_role_id(body.value))
        elif body.action == "addPermission":
            try:
                registry.add_permission_to_user(body.id, body.value)
            except ValueError:
                raise _invalid_permission(body.value) from None
        elif body.action == "removePermission":
            try:
                registry.remove_permission_from_user(body.id, body.value)
            except ValueError:
                raise _invalid_permission(body.value) from None
        elif body.action == "update":
            registry.update_user(body.id, _parse(UserUpdate, body.value or {}))
        elif body.action == "recordLogin":
            registry.record_login(body.id)
        else:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid type"
            )
        return UserResponse(user=registry.get_user(body.id))

    if body.type == "role":
        role = registry.update_role(body.id, _parse(RoleUpdate, body.value or {}))
        return RoleResponse(role=role)

    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid type")


@router.delete(
    "/permissions",
    response_model=DeleteRoleResponse,
    summary="Delete a custom role",
)
def delete_role(
    role_id: str | None = Query(default=None, alias="roleId"),
    registry: AccessControlRegistry = Depends(get_registry),
):
    """Delete a custom role. Predefined roles are refused with success false."""
    if not role_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="roleId required"
        )
    return DeleteRoleResponse(success=registry.delete_role(role_id))
