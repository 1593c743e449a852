"""
Admin service.

Item and feed definition mutations, restricted to an allow-list of
semaphore ids. Feed mutations refresh the feed cache before returning.
"""

from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from frogcrypto_core import get_logger
from frogcrypto_core.auth import CredentialVerifier
from frogcrypto_core.error_reporting import ErrorReporter
from frogcrypto_core.exceptions import ForbiddenError, PersistenceError
from frogcrypto_core.schemas import FeedDefinition, FrogResponse, FrogUpsert

from .feed_definition_service import FeedDefinitionService
from .frog_service import FrogService

if TYPE_CHECKING:
    from frogcrypto_core.feed_cache import FeedCache

logger = get_logger(__name__)


class AdminService:
    """Admin mutations of frogs and feeds."""

    def __init__(
        self,
        session: AsyncSession,
        feed_cache: "FeedCache",
        verifier: CredentialVerifier,
        admin_user_ids: list[str],
        error_reporter: ErrorReporter | None = None,
    ) -> None:
        """
        Initialize admin service.

        Args:
            session: Database session.
            feed_cache: Feed cache to refresh after feed mutations.
            verifier: Credential verifier.
            admin_user_ids: Semaphore ids allowed to mutate.
            error_reporter: Operational error channel.
        """
        self.session = session
        self.feed_cache = feed_cache
        self.verifier = verifier
        self.admin_user_ids = frozenset(admin_user_ids)
        self.error_reporter = error_reporter or ErrorReporter()

        self.frogs = FrogService(session)
        self.feeds = FeedDefinitionService(session)

    async def verify_admin(self, credential: str | None) -> str:
        """
        Verify the caller and check the admin allow-list.

        Returns:
            The admin's semaphore id.

        Raises:
            CredentialError: Missing or invalid credential.
            ForbiddenError: Caller is not an admin.
        """
        semaphore_id = await self.verifier.verify(credential)
        if semaphore_id not in self.admin_user_ids:
            logger.info("Rejected admin request", extra={"semaphore_id": semaphore_id})
            raise ForbiddenError()
        return semaphore_id

    async def update_frogs(self, credential: str | None, frogs: list[FrogUpsert]) -> list[FrogResponse]:
        """
        Upsert frog definitions.

        Returns:
            All frog definitions after the upsert.
        """
        admin_id = await self.verify_admin(credential)

        try:
            await self.frogs.upsert_frogs(frogs)
        except SQLAlchemyError as e:
            raise await self._persistence_failure(e, "Error inserting frog data", admin_id) from e

        logger.info("Upserted frogs", extra={"admin_id": admin_id, "count": len(frogs)})
        return await self.frogs.list_frogs()

    async def delete_frogs(self, credential: str | None, frog_ids: list[int]) -> list[FrogResponse]:
        """
        Delete frog definitions.

        Returns:
            All frog definitions after the delete.
        """
        admin_id = await self.verify_admin(credential)

        try:
            await self.frogs.delete_frogs(frog_ids)
        except SQLAlchemyError as e:
            raise await self._persistence_failure(e, "Error deleting frog data", admin_id) from e

        logger.info("Deleted frogs", extra={"admin_id": admin_id, "frog_ids": frog_ids})
        return await self.frogs.list_frogs()

    async def update_feeds(
        self, credential: str | None, feeds: list[FeedDefinition]
    ) -> list[FeedDefinition]:
        """
        Upsert feed definitions and refresh the feed cache.

        Returns:
            All feed definitions after the upsert.

        Raises:
            PersistenceError: The upsert or the cache refresh failed.
        """
        admin_id = await self.verify_admin(credential)

        try:
            await self.feeds.upsert_feeds(feeds)
        except SQLAlchemyError as e:
            raise await self._persistence_failure(e, "Error inserting feed data", admin_id) from e

        # Refresh in-process only; other instances catch up on their timer.
        if not await self.feed_cache.refresh():
            error = PersistenceError("Feed data saved but the feed cache failed to refresh")
            await self.error_reporter.report_error(
                error, {"admin_id": admin_id, "operation": "update_feeds"}
            )
            raise error

        logger.info("Upserted feeds", extra={"admin_id": admin_id, "count": len(feeds)})
        return await self.feeds.list_feeds()

    async def _persistence_failure(
        self, error: SQLAlchemyError, message: str, admin_id: str
    ) -> PersistenceError:
        await self.session.rollback()
        logger.exception(message, extra={"admin_id": admin_id})
        await self.error_reporter.report_error(error, {"admin_id": admin_id, "operation": message})
        return PersistenceError(f"{message}: {error}")
