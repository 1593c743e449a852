"""
User state and scoreboard router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from frogcrypto_core.config import frogcrypto_config
from frogcrypto_core.schemas import ScoreResponse, UserStateRequest, UserStateResponse
from frogcrypto_core.services import ReservationService, ScoreService

from ..dependencies import get_reservation_service, get_score_service

router = APIRouter()


@router.post("/user-state")
async def get_user_state(
    data: UserStateRequest,
    reservation_service: Annotated[ReservationService, Depends(get_reservation_service)],
) -> UserStateResponse:
    """
    Get the caller's per-feed state, collectible frog ids and score.

    Args:
        data: Request carrying the feed credential.
        reservation_service: Reservation service.

    Returns:
        User state.
    """
    return await reservation_service.get_user_state(data.pcd, data.feed_ids)


@router.get("/scoreboard")
async def get_scoreboard(
    score_service: Annotated[ScoreService, Depends(get_score_service)],
) -> list[ScoreResponse]:
    """Top scores, highest first."""
    return await score_service.get_scoreboard(frogcrypto_config.scoreboard_limit)
