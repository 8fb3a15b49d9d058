# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

import secrets

from fastapi import Header, HTTPException, Request, status

from src.config import settings
from src.services.rbac_service import AccessControlRegistry


def get_registry(request: Request) -> AccessControlRegistry:
    """Get the access control registry created at application startup."""
    return request.app.state.registry


def require_admin(
    x_admin_token: str | None = Header(default=None),
) -> None:
    """Verify the request carries the configured admin token."""
    expected = settings.admin_api_token
    if (
        expected is None
        or not x_admin_token
        or not secrets.compare_digest(
            x_admin_token.encode(), expected.get_secret_value().encode()
        )
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized: Admin access required",
        )
