"""
User feed state service.

State rows are created idempotently and advanced only while holding a
non-blocking row lock. Lock contention surfaces as ``FeedStateLockedError``
so callers never have to inspect driver error messages.
"""

from datetime import datetime

from asyncpg.exceptions import LockNotAvailableError
from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from frogcrypto_core.exceptions import FeedStateLockedError
from frogcrypto_database.models import EPOCH, UserFeedState

# Postgres SQLSTATE for lock_not_available (raised by NOWAIT)
LOCK_NOT_AVAILABLE = "55P03"


def is_lock_not_available(error: DBAPIError) -> bool:
    """Whether a driver error is Postgres refusing a NOWAIT lock."""
    orig = error.orig
    if getattr(orig, "sqlstate", None) == LOCK_NOT_AVAILABLE:
        return True
    if getattr(orig, "pgcode", None) == LOCK_NOT_AVAILABLE:
        return True
    return isinstance(getattr(orig, "__cause__", None), LockNotAvailableError)


class UserFeedStateService:
    """Per-(user, feed) state access."""

    def __init__(self, session: AsyncSession):
        """
        Initialize user feed state service.

        Args:
            session: Database session.
        """
        self.session = session

    async def initialize(self, semaphore_id: str, feed_id: str) -> None:
        """
        Create the state row at epoch zero if it does not exist yet.

        Existing rows are left untouched. Does not commit.

        Args:
            semaphore_id: User identifier.
            feed_id: Feed identifier.
        """
        stmt = (
            insert(UserFeedState)
            .values(semaphore_id=semaphore_id, feed_id=feed_id, last_fetched_at=EPOCH)
            .on_conflict_do_nothing(index_elements=["semaphore_id", "feed_id"])
        )
        await self.session.execute(stmt)

    async def lock_last_fetched_at(self, semaphore_id: str, feed_id: str) -> datetime | None:
        """
        Lock the state row with FOR UPDATE NOWAIT and read it.

        The lock is held until the surrounding transaction ends.

        Args:
            semaphore_id: User identifier.
            feed_id: Feed identifier.

        Returns:
            Time of the last grant, or None if the row does not exist.

        Raises:
            FeedStateLockedError: If another transaction holds the row lock.
        """
        stmt = (
            select(UserFeedState.last_fetched_at)
            .where(
                UserFeedState.semaphore_id == semaphore_id,
                UserFeedState.feed_id == feed_id,
            )
            .with_for_update(nowait=True)
        )
        try:
            result = await self.session.execute(stmt)
        except DBAPIError as e:
            if is_lock_not_available(e):
                raise FeedStateLockedError() from e
            raise
        return result.scalar_one_or_none()

    async def advance(self, semaphore_id: str, feed_id: str, fetched_at: datetime) -> None:
        """
        Record a grant. Must run inside the transaction holding the row lock.

        Args:
            semaphore_id: User identifier.
            feed_id: Feed identifier.
            fetched_at: Grant time.
        """
        await self.session.execute(
            update(UserFeedState)
            .where(
                UserFeedState.semaphore_id == semaphore_id,
                UserFeedState.feed_id == feed_id,
            )
            .values(last_fetched_at=fetched_at)
        )

    async def get_user_states(self, semaphore_id: str) -> list[UserFeedState]:
        """
        Get every state row of a user, without locking.

        Args:
            semaphore_id: User identifier.

        Returns:
            State rows ordered by feed id.
        """
        result = await self.session.execute(
            select(UserFeedState)
            .where(UserFeedState.semaphore_id == semaphore_id)
            .order_by(UserFeedState.feed_id)
        )
        return list(result.scalars().all())
