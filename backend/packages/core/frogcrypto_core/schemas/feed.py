"""
Feed schemas.

Request and response models for feed definitions and polling.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .frog import Biome

FROGCRYPTO_FOLDER_NAME = "FrogCrypto"


class BiomeConfig(BaseModel):
    """Per-biome sampling configuration of a feed."""

    drop_weight_scaler: float = Field(default=1.0, ge=0)


class FeedDefinition(BaseModel):
    """
    Feed definition.

    Immutable once built so that cached snapshots can be shared between
    concurrent readers.
    """

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str = Field(min_length=1, max_length=36)
    name: str = Field(min_length=1, max_length=255)
    description: str = ""
    private: bool = False
    active_until: int = Field(ge=0)  # epoch seconds
    cooldown: int = Field(ge=0)  # seconds
    biomes: dict[Biome, BiomeConfig] = Field(default_factory=dict)

    def is_active(self, now_seconds: float) -> bool:
        """Whether the feed may serve frogs at the given epoch time."""
        return now_seconds < self.active_until

    def biome_scalers(self) -> dict[str, float]:
        """Eligible biome code -> drop weight scaler."""
        return {biome.value: config.drop_weight_scaler for biome, config in self.biomes.items()}


class FeedSummary(BaseModel):
    """Feed as listed to clients."""

    id: str
    name: str
    description: str
    cooldown: int
    active_until: int
    private: bool
    biomes: dict[Biome, BiomeConfig]

    @classmethod
    def from_definition(cls, feed: FeedDefinition) -> "FeedSummary":
        return cls(
            id=feed.id,
            name=feed.name,
            description=feed.description,
            cooldown=feed.cooldown,
            active_until=feed.active_until,
            private=feed.private,
            biomes=feed.biomes,
        )


class ListFeedsResponse(BaseModel):
    """Feed listing response."""

    feeds: list[FeedSummary]


class PollFeedRequest(BaseModel):
    """Poll request carrying the serialized feed credential."""

    pcd: str | None = None


class FeedAction(BaseModel):
    """Action the client applies to its collection."""

    type: str = "AppendToFolder"
    folder: str = FROGCRYPTO_FOLDER_NAME
    pcds: list[dict[str, Any]]


class PollFeedResponse(BaseModel):
    """Poll response."""

    actions: list[FeedAction]


class UpdateFeedsRequest(BaseModel):
    """Admin feed upsert request."""

    pcd: str | None = None
    feeds: list[FeedDefinition]


class UpdateFeedsResponse(BaseModel):
    """All stored feed definitions after an upsert."""

    feeds: list[FeedDefinition]
