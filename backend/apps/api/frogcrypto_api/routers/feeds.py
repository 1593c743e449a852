"""
Feeds router.

Provides endpoints for listing feeds and polling them for frogs.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from frogcrypto_core.exceptions import FeedNotFoundError
from frogcrypto_core.feed_cache import FeedCache
from frogcrypto_core.schemas import (
    FeedSummary,
    ListFeedsResponse,
    PollFeedRequest,
    PollFeedResponse,
)
from frogcrypto_core.services import ReservationService

from ..dependencies import get_feed_cache, get_reservation_service

router = APIRouter()


@router.get("")
async def list_feeds(
    feed_cache: Annotated[FeedCache, Depends(get_feed_cache)],
) -> ListFeedsResponse:
    """
    List public feeds.

    Args:
        feed_cache: Feed cache.

    Returns:
        Public feed summaries.
    """
    return ListFeedsResponse(feeds=feed_cache.list_feeds())


@router.get("/{feed_id}")
async def get_feed(
    feed_id: str,
    feed_cache: Annotated[FeedCache, Depends(get_feed_cache)],
) -> ListFeedsResponse:
    """
    Look up a single feed, private or not.

    Args:
        feed_id: Feed identifier.
        feed_cache: Feed cache.

    Returns:
        Listing containing exactly that feed.

    Raises:
        FeedNotFoundError: If the feed does not exist.
    """
    feed = feed_cache.get_feed(feed_id)
    if feed is None:
        raise FeedNotFoundError(feed_id)
    return ListFeedsResponse(feeds=[FeedSummary.from_definition(feed)])


@router.post("/{feed_id}")
async def poll_feed(
    feed_id: str,
    data: PollFeedRequest,
    reservation_service: Annotated[ReservationService, Depends(get_reservation_service)],
) -> PollFeedResponse:
    """
    Poll a feed for a frog.

    Args:
        feed_id: Feed identifier.
        data: Request carrying the feed credential.
        reservation_service: Reservation service.

    Returns:
        Actions adding the granted frog to the user's collection.
    """
    return await reservation_service.poll_feed(feed_id, data.pcd)
