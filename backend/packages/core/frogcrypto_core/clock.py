"""
Time helpers.

Timestamps leave the service as integer epoch milliseconds. Conversions use
exact timedelta arithmetic so that no float rounding moves a value.
"""

from datetime import UTC, datetime, timedelta

from frogcrypto_database.models import EPOCH

_MILLISECOND = timedelta(milliseconds=1)


def utc_now() -> datetime:
    return datetime.now(UTC)


def to_epoch_ms(value: datetime, round_up: bool = False) -> int:
    """
    Convert an aware datetime to epoch milliseconds.

    Args:
        value: Time to convert.
        round_up: Round a sub-millisecond remainder up instead of down. Used
            for times a client waits for, so that waiting until the reported
            millisecond is never too early.

    Returns:
        Milliseconds since the Unix epoch.
    """
    elapsed = value - EPOCH
    if round_up:
        return -(-elapsed // _MILLISECOND)
    return elapsed // _MILLISECOND
