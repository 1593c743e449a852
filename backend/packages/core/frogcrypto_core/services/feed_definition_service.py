"""
Feed definition service.

Feed definition store access. Feeds are upserted, never deleted.
"""

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from frogcrypto_core.schemas import FeedDefinition
from frogcrypto_database.models import FrogCryptoFeed


class FeedDefinitionService:
    """Feed definition management service."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_feeds(self) -> list[FeedDefinition]:
        """Get all feed definitions ordered by name."""
        result = await self.session.execute(
            select(FrogCryptoFeed).order_by(FrogCryptoFeed.name, FrogCryptoFeed.id)
        )
        return [FeedDefinition.model_validate(feed) for feed in result.scalars().all()]

    async def upsert_feeds(self, feeds: list[FeedDefinition]) -> None:
        """
        Insert or update feed definitions by id and commit.

        Args:
            feeds: Feed definitions.
        """
        if not feeds:
            return

        rows = [feed.model_dump(mode="json") for feed in feeds]
        stmt = insert(FrogCryptoFeed).values(rows)
        update_columns = {column: stmt.excluded[column] for column in rows[0] if column != "id"}
        update_columns["updated_at"] = func.now()
        stmt = stmt.on_conflict_do_update(index_elements=[FrogCryptoFeed.id], set_=update_columns)

        await self.session.execute(stmt)
        await self.session.commit()
