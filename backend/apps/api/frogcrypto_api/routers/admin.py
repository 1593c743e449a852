"""
Admin router.

Provides endpoints for managing frog and feed definitions.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from frogcrypto_core.schemas import (
    DeleteFrogsRequest,
    FrogListResponse,
    UpdateFeedsRequest,
    UpdateFeedsResponse,
    UpdateFrogsRequest,
)
from frogcrypto_core.services import AdminService

from ..dependencies import get_admin_service

router = APIRouter()


@router.post("/frogs")
async def update_frogs(
    data: UpdateFrogsRequest,
    admin_service: Annotated[AdminService, Depends(get_admin_service)],
) -> FrogListResponse:
    """
    Upsert frog definitions.

    Args:
        data: Admin credential and frogs.
        admin_service: Admin service.

    Returns:
        All frog definitions.
    """
    frogs = await admin_service.update_frogs(data.pcd, data.frogs)
    return FrogListResponse(frogs=frogs)


@router.post("/delete-frogs")
async def delete_frogs(
    data: DeleteFrogsRequest,
    admin_service: Annotated[AdminService, Depends(get_admin_service)],
) -> FrogListResponse:
    """
    Delete frog definitions.

    Args:
        data: Admin credential and frog ids.
        admin_service: Admin service.

    Returns:
        All remaining frog definitions.
    """
    frogs = await admin_service.delete_frogs(data.pcd, data.frog_ids)
    return FrogListResponse(frogs=frogs)


@router.post("/feeds")
async def update_feeds(
    data: UpdateFeedsRequest,
    admin_service: Annotated[AdminService, Depends(get_admin_service)],
) -> UpdateFeedsResponse:
    """
    Upsert feed definitions and refresh the feed cache.

    Args:
        data: Admin credential and feeds.
        admin_service: Admin service.

    Returns:
        All feed definitions.
    """
    feeds = await admin_service.update_feeds(data.pcd, data.feeds)
    return UpdateFeedsResponse(feeds=feeds)
