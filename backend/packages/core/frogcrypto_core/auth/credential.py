"""
Feed credential verification.

A feed credential is a signed token whose subject is the caller's semaphore
id. The verifier is the only place that knows how credentials are built;
everything downstream works with the returned identifier.
"""

import time
from abc import ABC, abstractmethod
from collections.abc import Callable

from jose import JWTError, jwt

from frogcrypto_core import get_logger
from frogcrypto_core.exceptions import CredentialError

logger = get_logger(__name__)

FEED_CREDENTIAL_TYPE = "feed"


class CredentialVerifier(ABC):
    """Turns a serialized credential into a stable user identifier."""

    @abstractmethod
    async def verify(self, credential: str | None) -> str:
        """
        Verify a credential.

        Args:
            credential: Serialized credential from the request.

        Returns:
            The caller's semaphore id.

        Raises:
            CredentialError: If the credential is missing or invalid.
        """


def create_feed_credential(
    semaphore_id: str,
    secret_key: str,
    algorithm: str = "HS256",
    issued_at: int | None = None,
) -> str:
    """
    Create a signed feed credential.

    Args:
        semaphore_id: Identifier the credential vouches for.
        secret_key: Signing key.
        algorithm: JWT algorithm.
        issued_at: Epoch seconds, now when None.

    Returns:
        Encoded credential.
    """
    payload = {
        "sub": semaphore_id,
        "type": FEED_CREDENTIAL_TYPE,
        "iat": int(issued_at if issued_at is not None else time.time()),
    }
    return jwt.encode(payload, secret_key, algorithm=algorithm)


class SignedCredentialVerifier(CredentialVerifier):
    """
    Verify JWT feed credentials.

    Signature checks are cached per credential string; the age check runs on
    every call since a cached credential keeps getting older.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        max_age_seconds: int = 3600,
        clock: Callable[[], float] = time.time,
        cache_size: int = 10_000,
    ) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.max_age_seconds = max_age_seconds
        self._clock = clock
        self._cache_size = cache_size
        self._cache: dict[str, tuple[str, int]] = {}

    async def verify(self, credential: str | None) -> str:
        if not credential:
            raise CredentialError("Missing credential")

        cached = self._cache.get(credential)
        if cached is None:
            cached = self._decode(credential)
            if len(self._cache) >= self._cache_size:
                self._cache.clear()
            self._cache[credential] = cached

        semaphore_id, issued_at = cached
        if self._clock() - issued_at > self.max_age_seconds:
            raise CredentialError("Credential expired")
        return semaphore_id

    def _decode(self, credential: str) -> tuple[str, int]:
        try:
            payload = jwt.decode(credential, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            logger.debug("Feed credential failed signature check")
            raise CredentialError() from None

        semaphore_id = payload.get("sub")
        issued_at = payload.get("iat")
        if (
            payload.get("type") != FEED_CREDENTIAL_TYPE
            or not isinstance(semaphore_id, str)
            or not semaphore_id
            or not isinstance(issued_at, int)
        ):
            raise CredentialError()
        return semaphore_id, issued_at
