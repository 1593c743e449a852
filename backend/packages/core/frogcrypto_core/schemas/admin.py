"""
Admin request and response schemas.
"""

from pydantic import BaseModel

from .frog import FrogResponse, FrogUpsert


class UpdateFrogsRequest(BaseModel):
    """Upsert frog definitions."""

    pcd: str | None = None
    frogs: list[FrogUpsert]


class DeleteFrogsRequest(BaseModel):
    """Delete frog definitions by id."""

    pcd: str | None = None
    frog_ids: list[int]


class FrogListResponse(BaseModel):
    """All stored frog definitions after a mutation."""

    frogs: list[FrogResponse]
