"""
Reservation service.

The grant path for feed polls. A grant verifies the caller, makes sure a
state row exists, then in one transaction locks that row with NOWAIT,
checks the cooldown, samples a frog, bumps the score and advances the row.
A second concurrent poll for the same user and feed is rejected instead of
queued behind the first.
"""

import random
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from frogcrypto_core import get_logger
from frogcrypto_core.auth import CredentialVerifier
from frogcrypto_core.clock import to_epoch_ms, utc_now
from frogcrypto_core.error_reporting import ErrorReporter
from frogcrypto_core.exceptions import (
    CooldownError,
    DataIntegrityError,
    FeedInactiveError,
    FeedNotFoundError,
    FrogCryptoError,
    ItemPoolExhaustedError,
    PersistenceError,
)
from frogcrypto_core.issuance import RewardIssuer
from frogcrypto_core.sampling import synthesize_reward
from frogcrypto_core.schemas import (
    FeedAction,
    FeedDefinition,
    FrogReward,
    PollFeedResponse,
    UserFeedStateResponse,
    UserStateResponse,
)
from frogcrypto_database.models import EPOCH

from .frog_service import FrogService
from .score_service import ScoreService
from .user_feed_state_service import UserFeedStateService

if TYPE_CHECKING:
    from frogcrypto_core.feed_cache import FeedCache

logger = get_logger(__name__)


def compute_user_feed_state(
    feed: FeedDefinition, last_fetched_at: datetime | None, now: datetime
) -> UserFeedStateResponse:
    """
    Compute the client-facing state of a feed for a user.

    Args:
        feed: Feed definition.
        last_fetched_at: Time of the last grant, None if the row does not exist.
        now: Current time.

    Returns:
        Last and next fetch times in epoch milliseconds and whether the feed is active.
    """
    last = last_fetched_at or EPOCH
    next_fetch_at = last + timedelta(seconds=feed.cooldown)
    return UserFeedStateResponse(
        feed_id=feed.id,
        last_fetched_at=to_epoch_ms(last),
        next_fetch_at=to_epoch_ms(next_fetch_at, round_up=True),
        active=feed.is_active(now.timestamp()),
    )


class ReservationService:
    """Serve feed polls and user state."""

    def __init__(
        self,
        session: AsyncSession,
        feed_cache: "FeedCache",
        verifier: CredentialVerifier,
        issuer: RewardIssuer,
        server_url: str,
        error_reporter: ErrorReporter | None = None,
        clock: Callable[[], datetime] = utc_now,
        rng: random.Random | None = None,
    ) -> None:
        """
        Initialize reservation service.

        Args:
            session: Database session.
            feed_cache: Source of feed configuration.
            verifier: Credential verifier.
            issuer: Reward issuer.
            server_url: Base URL for reward image references.
            error_reporter: Operational error channel.
            clock: Returns the current UTC time.
            rng: Random source for sampling.
        """
        self.session = session
        self.feed_cache = feed_cache
        self.verifier = verifier
        self.issuer = issuer
        self.server_url = server_url
        self.error_reporter = error_reporter or ErrorReporter()
        self.clock = clock
        self.rng = rng

        self.frogs = FrogService(session)
        self.scores = ScoreService(session)
        self.states = UserFeedStateService(session)

    async def poll_feed(self, feed_id: str, credential: str | None) -> PollFeedResponse:
        """
        Grant a frog from a feed.

        Args:
            feed_id: Feed identifier.
            credential: Serialized feed credential.

        Returns:
            Actions appending the issued reward to the user's collection.

        Raises:
            FrogCryptoError: See ``reserve_frog`` for the grant outcomes.
        """
        semaphore_id = await self.verifier.verify(credential)

        feed = self.feed_cache.get_feed(feed_id)
        if feed is None:
            raise FeedNotFoundError(feed_id)

        reward = await self.reserve_frog(semaphore_id, feed)
        pcds = await self.issuer.issue(semaphore_id, reward)
        return PollFeedResponse(actions=[FeedAction(pcds=pcds)])

    async def reserve_frog(self, semaphore_id: str, feed: FeedDefinition) -> FrogReward:
        """
        Run the grant transaction for one (user, feed) pair.

        Args:
            semaphore_id: Verified user identifier.
            feed: Feed to grant from.

        Returns:
            The synthesized reward, only once the grant has committed.

        Raises:
            FeedInactiveError: The feed's active window has elapsed.
            FeedStateLockedError: Another grant for this pair is in flight.
            CooldownError: The cooldown has not elapsed yet.
            ItemPoolExhaustedError: No eligible frog to sample.
            DataIntegrityError: A sampled frog has invalid stored codes.
            PersistenceError: Any other database failure.
        """
        now = self.clock()
        if not feed.is_active(now.timestamp()):
            raise FeedInactiveError(feed.id)

        context = {"semaphore_id": semaphore_id, "feed_id": feed.id}
        try:
            await self.states.initialize(semaphore_id, feed.id)
            await self.session.commit()

            reward = await self._grant(semaphore_id, feed, now)
        except FrogCryptoError as e:
            await self.session.rollback()
            if not e.expected:
                logger.exception("Error encountered while serving feed", extra=context)
                await self.error_reporter.report_error(e, context)
            else:
                logger.debug("Feed poll rejected", extra={**context, "reason": e.detail})
            raise
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.exception("Error encountered while serving feed", extra=context)
            await self.error_reporter.report_error(e, context)
            raise PersistenceError("Failed to reserve frog") from e

        logger.info(
            "Granted frog",
            extra={**context, "frog_id": reward.frog_id, "rarity": reward.rarity.value},
        )
        return reward

    async def _grant(self, semaphore_id: str, feed: FeedDefinition, now: datetime) -> FrogReward:
        last_fetched_at = await self.states.lock_last_fetched_at(semaphore_id, feed.id)
        if last_fetched_at is None:
            raise PersistenceError("User feed state unexpectedly not found")

        next_fetch_at = last_fetched_at + timedelta(seconds=feed.cooldown)
        if now < next_fetch_at:
            raise CooldownError(next_fetch_at)

        frog = await self.frogs.sample_frog(feed.biome_scalers(), self.rng)
        if frog is None:
            raise ItemPoolExhaustedError()

        # Rolled before commit so that bad stored data aborts the grant.
        reward = synthesize_reward(frog, semaphore_id, self.server_url, now, self.rng)

        await self.scores.increment(semaphore_id)
        await self.states.advance(semaphore_id, feed.id, now)
        await self.session.commit()
        return reward

    async def get_user_state(
        self, credential: str | None, feed_ids: list[str] | None = None
    ) -> UserStateResponse:
        """
        Get a user's per-feed state, the collectible frog ids and their score.

        State rows of feeds that no longer exist are left out.

        Args:
            credential: Serialized feed credential.
            feed_ids: Restrict the per-feed state to these feeds.

        Returns:
            User state response.
        """
        semaphore_id = await self.verifier.verify(credential)
        now = self.clock()

        try:
            rows = await self.states.get_user_states(semaphore_id)
            possible_frog_ids = await self.frogs.get_possible_frog_ids()
            my_score = await self.scores.get_score(semaphore_id)
        except SQLAlchemyError as e:
            context = {"semaphore_id": semaphore_id}
            logger.exception("Error encountered while reading user state", extra=context)
            await self.error_reporter.report_error(e, context)
            raise PersistenceError("Failed to read user state") from e

        wanted = set(feed_ids) if feed_ids is not None else None
        feeds = []
        for row in rows:
            if wanted is not None and row.feed_id not in wanted:
                continue
            feed = self.feed_cache.get_feed(row.feed_id)
            if feed is None:
                continue
            feeds.append(compute_user_feed_state(feed, row.last_fetched_at, now))

        return UserStateResponse(feeds=feeds, possible_frog_ids=possible_frog_ids, my_score=my_score)
