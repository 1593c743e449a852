"""
Pydantic schemas for API requests and responses.
"""

from .admin import DeleteFrogsRequest, FrogListResponse, UpdateFrogsRequest
from .feed import (
    FROGCRYPTO_FOLDER_NAME,
    BiomeConfig,
    FeedAction,
    FeedDefinition,
    FeedSummary,
    ListFeedsResponse,
    PollFeedRequest,
    PollFeedResponse,
    UpdateFeedsRequest,
    UpdateFeedsResponse,
)
from .frog import Biome, FrogResponse, FrogReward, FrogUpsert, Rarity, Temperament
from .user_state import ScoreResponse, UserFeedStateResponse, UserStateRequest, UserStateResponse

__all__ = [
    # Frog
    "Biome",
    "Rarity",
    "Temperament",
    "FrogResponse",
    "FrogUpsert",
    "FrogReward",
    # Feed
    "FROGCRYPTO_FOLDER_NAME",
    "BiomeConfig",
    "FeedDefinition",
    "FeedSummary",
    "ListFeedsResponse",
    "PollFeedRequest",
    "FeedAction",
    "PollFeedResponse",
    "UpdateFeedsRequest",
    "UpdateFeedsResponse",
    # User state
    "ScoreResponse",
    "UserFeedStateResponse",
    "UserStateRequest",
    "UserStateResponse",
    # Admin
    "UpdateFrogsRequest",
    "DeleteFrogsRequest",
    "FrogListResponse",
]
