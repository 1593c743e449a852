"""create frogcrypto tables

Revision ID: 7c1d2e3f4a5b
Revises:
Create Date: 2026-10-19 10:00:00.000000
"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "7c1d2e3f4a5b"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "frogcrypto_frogs",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("uuid", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("biome", sa.String(length=50), nullable=False),
        sa.Column("rarity", sa.String(length=50), nullable=False),
        sa.Column("temperament_weights", postgresql.JSONB(), nullable=False),
        sa.Column("drop_weight", sa.Float(), nullable=False),
        sa.Column("jump_min", sa.Integer(), nullable=False),
        sa.Column("jump_max", sa.Integer(), nullable=False),
        sa.Column("speed_min", sa.Integer(), nullable=False),
        sa.Column("speed_max", sa.Integer(), nullable=False),
        sa.Column("intelligence_min", sa.Integer(), nullable=False),
        sa.Column("intelligence_max", sa.Integer(), nullable=False),
        sa.Column("beauty_min", sa.Integer(), nullable=False),
        sa.Column("beauty_max", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("drop_weight >= 0", name="ck_frogcrypto_frogs_drop_weight"),
        sa.CheckConstraint("jump_min <= jump_max", name="ck_frogcrypto_frogs_jump"),
        sa.CheckConstraint("speed_min <= speed_max", name="ck_frogcrypto_frogs_speed"),
        sa.CheckConstraint(
            "intelligence_min <= intelligence_max", name="ck_frogcrypto_frogs_intelligence"
        ),
        sa.CheckConstraint("beauty_min <= beauty_max", name="ck_frogcrypto_frogs_beauty"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_frogcrypto_frogs_biome", "frogcrypto_frogs", ["biome"])

    op.create_table(
        "frogcrypto_feeds",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("private", sa.Boolean(), nullable=False),
        sa.Column("active_until", sa.BigInteger(), nullable=False),
        sa.Column("cooldown", sa.Integer(), nullable=False),
        sa.Column("biomes", postgresql.JSONB(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "frogcrypto_user_feeds",
        sa.Column("semaphore_id", sa.String(length=255), nullable=False),
        sa.Column("feed_id", sa.String(length=36), nullable=False),
        sa.Column(
            "last_fetched_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("to_timestamp(0)"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("semaphore_id", "feed_id"),
    )

    op.create_table(
        "frogcrypto_user_scores",
        sa.Column("semaphore_id", sa.String(length=255), nullable=False),
        sa.Column("score", sa.BigInteger(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("semaphore_id"),
    )
    op.create_index("ix_frogcrypto_user_scores_score", "frogcrypto_user_scores", ["score"])


def downgrade() -> None:
    op.drop_index("ix_frogcrypto_user_scores_score", table_name="frogcrypto_user_scores")
    op.drop_table("frogcrypto_user_scores")
    op.drop_table("frogcrypto_user_feeds")
    op.drop_table("frogcrypto_feeds")
    op.drop_index("ix_frogcrypto_frogs_biome", table_name="frogcrypto_frogs")
    op.drop_table("frogcrypto_frogs")
