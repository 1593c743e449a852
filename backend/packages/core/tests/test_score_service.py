"""Tests for score service failure handling."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from frogcrypto_core.exceptions import PersistenceError
from frogcrypto_core.services.score_service import ScoreService


@pytest.mark.asyncio
async def test_scoreboard_read_failure_is_reported() -> None:
    session = AsyncMock()
    failure = OperationalError("SELECT rank()", {}, Exception("connection lost"))
    session.execute.side_effect = failure
    error_reporter = AsyncMock()
    service = ScoreService(session, error_reporter)

    with pytest.raises(PersistenceError):
        await service.get_scoreboard(limit=30)

    error_reporter.report_error.assert_awaited_once()
    reported, context = error_reporter.report_error.await_args.args
    assert reported is failure
    assert context == {"operation": "get_scoreboard"}
