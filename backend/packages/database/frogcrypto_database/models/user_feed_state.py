"""
User feed state model.

One row per (user, feed) pair recording when the user was last granted a frog.
"""

from datetime import UTC, datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base

EPOCH = datetime.fromtimestamp(0, UTC)


class UserFeedState(Base):
    """
    Per-user feed state.

    The row doubles as the mutex for grants: the reservation path takes a
    ``FOR UPDATE NOWAIT`` lock on exactly this row.

    Attributes:
        semaphore_id: Verified user identifier.
        feed_id: Feed identifier.
        last_fetched_at: Time of the last grant, epoch zero if never granted.
    """

    __tablename__ = "frogcrypto_user_feeds"

    semaphore_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    feed_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    last_fetched_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=EPOCH
    )
