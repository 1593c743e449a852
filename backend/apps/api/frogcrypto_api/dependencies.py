"""
FastAPI dependencies.

Provides dependency injection for the feed cache, collaborators and services.
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from frogcrypto_core.auth import CredentialVerifier
from frogcrypto_core.config import frogcrypto_config
from frogcrypto_core.error_reporting import ErrorReporter
from frogcrypto_core.feed_cache import FeedCache
from frogcrypto_core.issuance import RewardIssuer
from frogcrypto_core.services import AdminService, ReservationService, ScoreService
from frogcrypto_database.session import get_session


def get_feed_cache(request: Request) -> FeedCache:
    """Get the process-wide feed cache."""
    return request.app.state.feed_cache


def get_credential_verifier(request: Request) -> CredentialVerifier:
    """Get the credential verifier."""
    return request.app.state.credential_verifier


def get_reward_issuer(request: Request) -> RewardIssuer:
    """Get the reward issuer."""
    return request.app.state.reward_issuer


def get_error_reporter(request: Request) -> ErrorReporter:
    """Get the operational error reporter."""
    return request.app.state.error_reporter


# Service dependencies
def get_reservation_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    feed_cache: Annotated[FeedCache, Depends(get_feed_cache)],
    verifier: Annotated[CredentialVerifier, Depends(get_credential_verifier)],
    issuer: Annotated[RewardIssuer, Depends(get_reward_issuer)],
    error_reporter: Annotated[ErrorReporter, Depends(get_error_reporter)],
) -> ReservationService:
    """Get reservation service instance."""
    return ReservationService(
        session,
        feed_cache,
        verifier,
        issuer,
        server_url=frogcrypto_config.server_url,
        error_reporter=error_reporter,
    )


def get_admin_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    feed_cache: Annotated[FeedCache, Depends(get_feed_cache)],
    verifier: Annotated[CredentialVerifier, Depends(get_credential_verifier)],
    error_reporter: Annotated[ErrorReporter, Depends(get_error_reporter)],
) -> AdminService:
    """Get admin service instance."""
    return AdminService(
        session, feed_cache, verifier, frogcrypto_config.admin_user_ids, error_reporter
    )


def get_score_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    error_reporter: Annotated[ErrorReporter, Depends(get_error_reporter)],
) -> ScoreService:
    """Get score service instance."""
    return ScoreService(session, error_reporter)
