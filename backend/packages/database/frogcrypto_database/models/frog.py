"""
Frog model definition.

This module defines the Frog model, the item pool that feeds sample from.
"""

from typing import Any

from sqlalchemy import CheckConstraint, Float, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin, generate_uuid


class Frog(Base, TimestampMixin):
    """
    Frog item definition.

    Each row describes a frog type. Rewards are sampled from these rows and
    get freshly rolled attributes on every grant, so a row is a template,
    not an owned item.

    Attributes:
        id: Frog number (admin assigned, stable across upserts).
        uuid: Content reference used to build the image URL.
        name: Display name.
        description: Display description.
        biome: Biome code (e.g. 'Jungle'), the sampling category.
        rarity: Rarity code (e.g. 'common'). 'object' marks non-collectibles.
        temperament_weights: Temperament code -> relative weight.
        drop_weight: Relative sampling weight, 0 means never dropped.
        jump_min/jump_max .. beauty_min/beauty_max: Inclusive attribute ranges.
    """

    __tablename__ = "frogcrypto_frogs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    uuid: Mapped[str] = mapped_column(String(36), nullable=False, default=generate_uuid)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    biome: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    rarity: Mapped[str] = mapped_column(String(50), nullable=False)
    temperament_weights: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False, default=dict)

    drop_weight: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    jump_min: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    jump_max: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    speed_min: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    speed_max: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    intelligence_min: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    intelligence_max: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    beauty_min: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    beauty_max: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint("drop_weight >= 0", name="ck_frogcrypto_frogs_drop_weight"),
        CheckConstraint("jump_min <= jump_max", name="ck_frogcrypto_frogs_jump"),
        CheckConstraint("speed_min <= speed_max", name="ck_frogcrypto_frogs_speed"),
        CheckConstraint(
            "intelligence_min <= intelligence_max", name="ck_frogcrypto_frogs_intelligence"
        ),
        CheckConstraint("beauty_min <= beauty_max", name="ck_frogcrypto_frogs_beauty"),
    )
