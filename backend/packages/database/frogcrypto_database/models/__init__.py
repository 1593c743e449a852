"""
Database models package.

This module exports all SQLAlchemy models for the FrogCrypto service.
"""

from .base import Base, TimestampMixin
from .feed import FrogCryptoFeed
from .frog import Frog
from .user_feed_state import EPOCH, UserFeedState
from .user_score import UserScore

__all__ = [
    "Base",
    "TimestampMixin",
    "Frog",
    "FrogCryptoFeed",
    "UserFeedState",
    "UserScore",
    "EPOCH",
]
