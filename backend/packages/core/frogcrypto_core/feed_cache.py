"""
In-memory feed cache.

Holds an immutable snapshot of all feed definitions. The snapshot is rebuilt
from the database on a timer and after admin mutations, and swapped in as a
whole, so readers always see one complete set of feeds.
"""

import asyncio
import contextlib
from collections.abc import Mapping
from types import MappingProxyType

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from frogcrypto_core import get_logger
from frogcrypto_core.error_reporting import ErrorReporter
from frogcrypto_core.schemas import FeedDefinition, FeedSummary
from frogcrypto_core.services.feed_definition_service import FeedDefinitionService

logger = get_logger(__name__)


class FeedCache:
    """Process-wide cache of feed definitions with an explicit lifecycle."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        error_reporter: ErrorReporter | None = None,
        refresh_interval_seconds: float = 60,
    ) -> None:
        """
        Initialize feed cache.

        Args:
            session_factory: Factory for the sessions used to reload feeds.
            error_reporter: Operational error channel for failed refreshes.
            refresh_interval_seconds: Period of the background refresh loop.
        """
        self._session_factory = session_factory
        self._error_reporter = error_reporter or ErrorReporter()
        self.refresh_interval_seconds = refresh_interval_seconds

        self._feeds: Mapping[str, FeedDefinition] = MappingProxyType({})
        self._started_generation = 0
        self._applied_generation = 0
        self._task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        """Load the feeds once and start the periodic refresh loop."""
        await self.refresh()
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self._refresh_loop(), name="feed-cache-refresh")

    async def stop(self) -> None:
        """Stop the periodic refresh loop."""
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None

    async def _refresh_loop(self) -> None:
        while True:
            await asyncio.sleep(self.refresh_interval_seconds)
            await self.refresh()

    async def refresh(self) -> bool:
        """
        Reload all feeds from the database and swap the snapshot.

        Overlapping calls are safe: a refresh that started earlier never
        replaces a snapshot installed by one that started later. On failure
        the previous snapshot stays in place and the error is reported.

        Returns:
            True if a fresh snapshot was loaded.
        """
        self._started_generation += 1
        generation = self._started_generation

        try:
            async with self._session_factory() as session:
                feeds = await FeedDefinitionService(session).list_feeds()
        except Exception as e:
            await self._error_reporter.report_error(e, {"operation": "feed_cache_refresh"})
            return False

        if generation > self._applied_generation:
            self._feeds = MappingProxyType({feed.id: feed for feed in feeds})
            self._applied_generation = generation
            logger.debug("Feed cache refreshed", extra={"feed_count": len(feeds)})
        return True

    def get_feed(self, feed_id: str) -> FeedDefinition | None:
        """Look up a feed by id, private feeds included."""
        return self._feeds.get(feed_id)

    def has_feed(self, feed_id: str) -> bool:
        return feed_id in self._feeds

    def get_all_feeds(self) -> list[FeedDefinition]:
        """All cached feeds, private ones included."""
        return list(self._feeds.values())

    def list_feeds(self, include_private: bool = False) -> list[FeedSummary]:
        """
        Feed summaries for listing.

        Args:
            include_private: Include private feeds.

        Returns:
            Feed summaries in cache order.
        """
        return [
            FeedSummary.from_definition(feed)
            for feed in self._feeds.values()
            if include_private or not feed.private
        ]
