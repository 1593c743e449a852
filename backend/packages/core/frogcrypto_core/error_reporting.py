"""
Operational error channel.

Unexpected failures are logged and, when a webhook is configured, posted
to it so that someone gets paged.
"""

from datetime import UTC, datetime
from typing import Any

import httpx

from frogcrypto_core import get_logger

logger = get_logger(__name__)


class ErrorReporter:
    """Report unexpected errors to the log and an optional webhook."""

    def __init__(self, webhook_url: str | None = None, timeout: float = 5.0) -> None:
        """
        Initialize error reporter.

        Args:
            webhook_url: Endpoint receiving JSON error reports. Logging only when None.
            timeout: Webhook request timeout in seconds.
        """
        self.webhook_url = webhook_url
        self.timeout = timeout

    async def report_error(self, error: BaseException, context: dict[str, Any] | None = None) -> bool:
        """
        Report an unexpected error.

        Never raises.

        Args:
            error: The exception being reported.
            context: Extra fields describing where it happened.

        Returns:
            True if the report reached the webhook.
        """
        details = dict(context or {})
        logger.error(
            "Reporting unexpected error",
            exc_info=(type(error), error, error.__traceback__),
            extra={"error_type": type(error).__name__, **details},
        )

        if not self.webhook_url:
            return False

        payload = {
            "level": "error",
            "title": type(error).__name__,
            "message": str(error),
            "timestamp": datetime.now(UTC).isoformat(),
            "context": {key: str(value) for key, value in details.items()},
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.webhook_url, json=payload)
                response.raise_for_status()
        except httpx.HTTPError:
            logger.exception("Failed to deliver error report", extra={"webhook_url": self.webhook_url})
            return False

        return True
