# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the permission vocabulary and predefined roles."""

from src.rbac.permissions import CORE_PERMISSIONS, Permission
from src.rbac.roles import PREDEFINED_ROLE_IDS, PREDEFINED_ROLES
from src.schemas.rbac import RoleCreate, UserCreate


class TestPermission:
    """Tests for the Permission enum."""

    def test_tokens_are_namespaced(self):
        """Test that every token is resource.action."""
        for permission in Permission:
            resource, _, action = permission.value.partition(".")
            assert resource
            assert action

    def test_compares_equal_to_plain_string(self):
        assert Permission.FRAMES_READ == "frames.read"
        assert Permission("system.admin") is Permission.SYSTEM_ADMIN

    def test_catalog_covers_vocabulary(self):
        codes = [entry["code"] for entry in CORE_PERMISSIONS]
        assert codes == [p.value for p in Permission]

    def test_catalog_module_is_resource(self):
        entry = next(e for e in CORE_PERMISSIONS if e["code"] == "workers.control")
        assert entry["module"] == "workers"
        assert entry["description"]


class TestPredefinedRoles:
    """Tests for the seeded role definitions."""

    def test_ids(self):
        assert PREDEFINED_ROLE_IDS == {"super_admin", "operator", "developer", "viewer"}

    def test_only_super_admin_has_system_admin(self):
        holders = {
            role["id"]
            for role in PREDEFINED_ROLES.values()
            if Permission.SYSTEM_ADMIN in role["permissions"]
        }
        assert holders == {"super_admin"}

    def test_viewer_is_read_only(self):
        for permission in PREDEFINED_ROLES["VIEWER"]["permissions"]:
            assert permission.value.endswith(".read")

    def test_operator_controls_workers(self):
        assert Permission.WORKERS_CONTROL in PREDEFINED_ROLES["OPERATOR"]["permissions"]
        assert (
            Permission.WORKERS_CONTROL
            not in PREDEFINED_ROLES["DEVELOPER"]["permissions"]
        )


class TestRoleSchema:
    """Tests for role payload validation."""

    def test_duplicate_permissions_collapse(self):
        role = RoleCreate(
            name="Dup",
            permissions=["frames.read", "frames.write", "frames.read"],
        )
        assert role.permissions == [Permission.FRAMES_READ, Permission.FRAMES_WRITE]

    def test_user_camel_case_aliases(self):
        user = UserCreate(
            email="a@example.com", name="A", custom_permissions=["frames.read"]
        )
        dumped = user.model_dump(by_alias=True)
        assert dumped["customPermissions"] == [Permission.FRAMES_READ]
        assert "lastLoginAt" in dumped

    def test_accepts_camel_case_input(self):
        user = UserCreate.model_validate(
            {"email": "b@example.com", "name": "B", "customPermissions": ["mints.read"]}
        )
        assert user.custom_permissions == [Permission.MINTS_READ]
