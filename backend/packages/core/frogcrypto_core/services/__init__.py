"""
Service layer.

Business logic services for the application.
"""

from .admin_service import AdminService
from .feed_definition_service import FeedDefinitionService
from .frog_service import FrogService
from .reservation_service import ReservationService, compute_user_feed_state
from .score_service import ScoreService
from .user_feed_state_service import UserFeedStateService

__all__ = [
    "AdminService",
    "FeedDefinitionService",
    "FrogService",
    "ReservationService",
    "ScoreService",
    "UserFeedStateService",
    "compute_user_feed_state",
]
