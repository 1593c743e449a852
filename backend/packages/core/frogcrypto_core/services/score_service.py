"""
Score service.

Per-user grant counters and the ranked scoreboard.
"""

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from frogcrypto_core import get_logger
from frogcrypto_core.error_reporting import ErrorReporter
from frogcrypto_core.exceptions import PersistenceError
from frogcrypto_core.schemas import ScoreResponse
from frogcrypto_database.models import UserScore

logger = get_logger(__name__)


class ScoreService:
    """User score service."""

    def __init__(self, session: AsyncSession, error_reporter: ErrorReporter | None = None):
        self.session = session
        self.error_reporter = error_reporter or ErrorReporter()

    def _ranked(self):
        return select(
            UserScore.semaphore_id,
            UserScore.score,
            func.rank().over(order_by=UserScore.score.desc()).label("rank"),
        ).subquery()

    async def increment(self, semaphore_id: str) -> int:
        """
        Add one to a user's score, creating it on first grant. Does not commit.

        Args:
            semaphore_id: User identifier.

        Returns:
            The new score.
        """
        stmt = insert(UserScore).values(semaphore_id=semaphore_id, score=1)
        stmt = stmt.on_conflict_do_update(
            index_elements=[UserScore.semaphore_id],
            set_={"score": UserScore.score + 1, "updated_at": func.now()},
        ).returning(UserScore.score)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def get_score(self, semaphore_id: str) -> ScoreResponse | None:
        """
        Get a user's score and rank.

        Args:
            semaphore_id: User identifier.

        Returns:
            Score response, or None if the user has never been granted a frog.
        """
        ranked = self._ranked()
        result = await self.session.execute(
            select(ranked).where(ranked.c.semaphore_id == semaphore_id)
        )
        row = result.one_or_none()
        if row is None:
            return None
        return ScoreResponse(semaphore_id=row.semaphore_id, score=row.score, rank=row.rank)

    async def get_scoreboard(self, limit: int = 30) -> list[ScoreResponse]:
        """
        Get the top scores, highest first.

        Args:
            limit: Maximum number of rows.

        Returns:
            Ranked scores.

        Raises:
            PersistenceError: The read failed.
        """
        ranked = self._ranked()
        try:
            result = await self.session.execute(
                select(ranked).order_by(ranked.c.rank, ranked.c.semaphore_id).limit(limit)
            )
        except SQLAlchemyError as e:
            logger.exception("Error encountered while reading scoreboard")
            await self.error_reporter.report_error(e, {"operation": "get_scoreboard"})
            raise PersistenceError("Failed to read scoreboard") from e
        return [
            ScoreResponse(semaphore_id=row.semaphore_id, score=row.score, rank=row.rank)
            for row in result.all()
        ]
