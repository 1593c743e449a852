"""User score model."""

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class UserScore(Base, TimestampMixin):
    """Number of frogs a user has been granted across all feeds."""

    __tablename__ = "frogcrypto_user_scores"

    semaphore_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    score: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0, index=True)
