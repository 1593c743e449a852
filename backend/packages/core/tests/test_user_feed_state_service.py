"""Tests for lock-contention detection in the user feed state service."""

from unittest.mock import AsyncMock

import pytest
from asyncpg.exceptions import LockNotAvailableError
from sqlalchemy.exc import DBAPIError

from frogcrypto_core.exceptions import FeedStateLockedError
from frogcrypto_core.services.user_feed_state_service import (
    LOCK_NOT_AVAILABLE,
    UserFeedStateService,
    is_lock_not_available,
)


class FakeDriverError(Exception):
    def __init__(self, sqlstate: str | None) -> None:
        super().__init__("driver error")
        self.sqlstate = sqlstate


def _dbapi_error(orig: BaseException) -> DBAPIError:
    return DBAPIError("SELECT ... FOR UPDATE NOWAIT", {}, orig)


def test_lock_not_available_detected_by_sqlstate() -> None:
    assert is_lock_not_available(_dbapi_error(FakeDriverError(LOCK_NOT_AVAILABLE)))


def test_lock_not_available_detected_by_driver_cause() -> None:
    orig = FakeDriverError(None)
    orig.__cause__ = LockNotAvailableError("could not obtain lock on row")
    assert is_lock_not_available(_dbapi_error(orig))


def test_other_errors_are_not_lock_contention() -> None:
    # Message text alone must not count as lock contention.
    assert not is_lock_not_available(_dbapi_error(FakeDriverError("40001")))
    assert not is_lock_not_available(_dbapi_error(Exception("could not obtain lock")))


@pytest.mark.asyncio
async def test_lock_contention_raises_typed_error() -> None:
    session = AsyncMock()
    session.execute.side_effect = _dbapi_error(FakeDriverError(LOCK_NOT_AVAILABLE))
    service = UserFeedStateService(session)

    with pytest.raises(FeedStateLockedError):
        await service.lock_last_fetched_at("user-1", "feed-1")


@pytest.mark.asyncio
async def test_other_database_errors_propagate() -> None:
    session = AsyncMock()
    session.execute.side_effect = _dbapi_error(FakeDriverError("08006"))
    service = UserFeedStateService(session)

    with pytest.raises(DBAPIError):
        await service.lock_last_fetched_at("user-1", "feed-1")
