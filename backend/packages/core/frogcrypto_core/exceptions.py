"""
FrogCrypto error taxonomy.

Every error raised by the reservation path carries the HTTP status it maps to.
Only ``PersistenceError`` and ``DataIntegrityError`` are unexpected; the rest
are ordinary outcomes of the feed state machine and are reported to the
caller without being logged as errors.
"""

from datetime import datetime

from frogcrypto_core.clock import to_epoch_ms


class FrogCryptoError(Exception):
    """Base class for FrogCrypto errors."""

    status_code: int = 500
    expected: bool = True

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)


class CredentialError(FrogCryptoError):
    """Missing or invalid feed credential."""

    status_code = 400

    def __init__(self, detail: str = "invalid PCD") -> None:
        super().__init__(detail)


class ForbiddenError(FrogCryptoError):
    """Valid credential without the required privilege."""

    status_code = 403

    def __init__(self, detail: str = "not authorized") -> None:
        super().__init__(detail)


class FeedNotFoundError(FrogCryptoError):
    """No feed with the requested id."""

    status_code = 404

    def __init__(self, feed_id: str) -> None:
        self.feed_id = feed_id
        super().__init__(f"Feed {feed_id} not found")


class FeedInactiveError(FrogCryptoError):
    """The feed's active window has elapsed."""

    status_code = 403

    def __init__(self, feed_id: str) -> None:
        self.feed_id = feed_id
        super().__init__("Feed is not active")


class CooldownError(FrogCryptoError):
    """The user's cooldown for this feed has not elapsed yet."""

    status_code = 403

    def __init__(self, next_fetch_at: datetime) -> None:
        self.next_fetch_at = next_fetch_at
        super().__init__(f"Next fetch available at {to_epoch_ms(next_fetch_at, round_up=True)}")


class FeedStateLockedError(FrogCryptoError):
    """Another grant for the same (user, feed) pair is in flight."""

    status_code = 429

    def __init__(self, detail: str = "There is another frog request in flight!") -> None:
        super().__init__(detail)


class ItemPoolExhaustedError(FrogCryptoError):
    """No eligible frog could be sampled for the feed."""

    status_code = 404

    def __init__(self, detail: str = "Frog Not Found") -> None:
        super().__init__(detail)


class PersistenceError(FrogCryptoError):
    """Store unreachable or transaction failure."""

    status_code = 500
    expected = False


class DataIntegrityError(FrogCryptoError):
    """Stored data that cannot be mapped to a public value."""

    status_code = 500
    expected = False
