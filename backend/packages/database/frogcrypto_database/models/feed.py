"""
Feed definition model.

This module defines the FrogCryptoFeed model for storing feed configuration.
"""

from typing import Any

from sqlalchemy import BigInteger, Boolean, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class FrogCryptoFeed(Base, TimestampMixin):
    """
    Feed definition model.

    Feeds are never hard-deleted; a feed is retired by letting
    ``active_until`` lapse.

    Attributes:
        id: Feed identifier (UUID string).
        name: Display name.
        description: Display description.
        private: Hidden from the public feed listing when True.
        active_until: Epoch seconds after which the feed stops serving.
        cooldown: Seconds a user must wait between grants.
        biomes: Biome code -> {"drop_weight_scaler": float}. Only listed
            biomes are eligible for sampling.
    """

    __tablename__ = "frogcrypto_feeds"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    private: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    active_until: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    cooldown: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    biomes: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False, default=dict)
