"""
User state and scoreboard schemas.
"""

from pydantic import BaseModel, ConfigDict


class ScoreResponse(BaseModel):
    """A user's score with its leaderboard rank."""

    model_config = ConfigDict(from_attributes=True)

    semaphore_id: str
    score: int
    rank: int


class UserFeedStateResponse(BaseModel):
    """Computed state of one feed for one user."""

    feed_id: str
    last_fetched_at: int  # epoch milliseconds, 0 if never granted
    next_fetch_at: int  # epoch milliseconds
    active: bool


class UserStateRequest(BaseModel):
    """User state request carrying the serialized feed credential."""

    pcd: str | None = None
    feed_ids: list[str] | None = None


class UserStateResponse(BaseModel):
    """Everything the client needs to render a user's progress."""

    feeds: list[UserFeedStateResponse]
    possible_frog_ids: list[int]
    my_score: ScoreResponse | None = None
