# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router."""

from fastapi import APIRouter, Depends

from src.api import permissions
from src.api.deps import require_admin

api_router = APIRouter()

# Access control routes
api_router.include_router(
    permissions.router,
    tags=["permissions"],
    dependencies=[Depends(require_admin)],
)
