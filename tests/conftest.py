# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app
ADMIN_TOKEN = "test-admin-token-for-testing-only"  # nosec - test-only secret  # noqa: S105
os.environ["ADMIN_API_TOKEN"] = ADMIN_TOKEN

from src.main import app
from src.schemas.rbac import User, UserCreate
from src.services.rbac_service import AccessControlRegistry


@pytest.fixture
def registry() -> AccessControlRegistry:
    """Create a fresh registry for each test."""
    return AccessControlRegistry()


@pytest.fixture
def make_user(registry):
    """Factory creating users in the test registry."""

    def _make_user(**overrides) -> User:
        data = {
            "email": "test@example.com",
            "name": "Test User",
            "roles": [],
            "custom_permissions": [],
            "active": True,
        }
        data.update(overrides)
        return registry.create_user(UserCreate(**data))

    return _make_user


@pytest.fixture(scope="function")
def client():
    """Create a test client backed by a fresh registry."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_client(client):
    """Create a test client that sends the admin token."""
    client.headers.update({"X-Admin-Token": ADMIN_TOKEN})
    return client
