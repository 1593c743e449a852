"""Tests for epoch millisecond conversion."""

from datetime import UTC, datetime, timedelta

from frogcrypto_core.clock import to_epoch_ms
from frogcrypto_core.schemas import FeedDefinition
from frogcrypto_core.services import compute_user_feed_state
from frogcrypto_database.models import EPOCH


def test_epoch_is_zero() -> None:
    assert to_epoch_ms(EPOCH) == 0
    assert to_epoch_ms(EPOCH, round_up=True) == 0


def test_whole_milliseconds_are_exact() -> None:
    # 2026-10-19 12:00:00.123 converts without float drift
    value = datetime(2026, 10, 19, 12, 0, 0, 123_000, tzinfo=UTC)

    assert to_epoch_ms(value) == 1_792_411_200_123
    assert to_epoch_ms(value, round_up=True) == 1_792_411_200_123


def test_sub_millisecond_remainder() -> None:
    value = EPOCH + timedelta(seconds=1, microseconds=500)

    assert to_epoch_ms(value) == 1_000
    assert to_epoch_ms(value, round_up=True) == 1_001


def test_next_fetch_time_is_never_early() -> None:
    feed = FeedDefinition(id="feed-1", name="Feed", active_until=0, cooldown=60)
    last = datetime(2026, 10, 19, 12, 0, 0, 999_999, tzinfo=UTC)

    state = compute_user_feed_state(feed, last, last)

    next_fetch_at = EPOCH + timedelta(milliseconds=state.next_fetch_at)
    assert next_fetch_at >= last + timedelta(seconds=60)
    assert state.last_fetched_at == to_epoch_ms(last)
