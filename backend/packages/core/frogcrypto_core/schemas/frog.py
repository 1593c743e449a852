"""
Frog schemas.

Enumerations, admin request models and the reward value object.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Biome(str, Enum):
    """Frog biome, the category feeds sample by."""

    UNKNOWN = "Unknown"
    JUNGLE = "Jungle"
    DESERT = "Desert"
    SWAMP = "Swamp"
    THE_CAPITAL = "TheCapital"
    CELESTIAL = "Celestial"
    THE_WRINKLE = "TheWrinkle"


class Rarity(str, Enum):
    """Frog rarity tier."""

    UNKNOWN = "unknown"
    COMMON = "common"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"
    MYTHIC = "mythic"
    OBJECT = "object"  # Non-collectible items, excluded from possible frog ids


class Temperament(str, Enum):
    """Frog temperament, rolled per reward."""

    UNKNOWN = "UNKNOWN"
    N_A = "N/A"
    ANGY = "ANGY"
    BORD = "BORD"
    CALM = "CALM"
    COOL = "COOL"
    DARK = "DARK"
    HMMM = "HMMM"
    HNGY = "HNGY"
    SADG = "SADG"
    SLPY = "SLPY"
    SUS = "SUS"
    WOW = "WOW"


ATTRIBUTE_MIN = 0
ATTRIBUTE_MAX = 15
ATTRIBUTES = ("jump", "speed", "intelligence", "beauty")


class FrogResponse(BaseModel):
    """Stored frog definition as returned to admins."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    uuid: str
    name: str
    description: str
    biome: str
    rarity: str
    temperament_weights: dict[str, float]
    drop_weight: float
    jump_min: int
    jump_max: int
    speed_min: int
    speed_max: int
    intelligence_min: int
    intelligence_max: int
    beauty_min: int
    beauty_max: int


class FrogUpsert(BaseModel):
    """Frog definition submitted by an admin."""

    id: int = Field(ge=0)
    uuid: str = Field(min_length=1, max_length=36)
    name: str = Field(min_length=1, max_length=255)
    description: str = ""
    biome: Biome
    rarity: Rarity
    temperament_weights: dict[Temperament, float] = Field(default_factory=dict)
    drop_weight: float = Field(ge=0)
    jump_min: int = Field(ge=ATTRIBUTE_MIN, le=ATTRIBUTE_MAX)
    jump_max: int = Field(ge=ATTRIBUTE_MIN, le=ATTRIBUTE_MAX)
    speed_min: int = Field(ge=ATTRIBUTE_MIN, le=ATTRIBUTE_MAX)
    speed_max: int = Field(ge=ATTRIBUTE_MIN, le=ATTRIBUTE_MAX)
    intelligence_min: int = Field(ge=ATTRIBUTE_MIN, le=ATTRIBUTE_MAX)
    intelligence_max: int = Field(ge=ATTRIBUTE_MIN, le=ATTRIBUTE_MAX)
    beauty_min: int = Field(ge=ATTRIBUTE_MIN, le=ATTRIBUTE_MAX)
    beauty_max: int = Field(ge=ATTRIBUTE_MIN, le=ATTRIBUTE_MAX)

    @model_validator(mode="after")
    def check_ranges(self) -> "FrogUpsert":
        for attribute in ATTRIBUTES:
            if getattr(self, f"{attribute}_min") > getattr(self, f"{attribute}_max"):
                raise ValueError(f"{attribute}_min must not exceed {attribute}_max")
        if any(weight < 0 for weight in self.temperament_weights.values()):
            raise ValueError("temperament weights must be non-negative")
        return self


class FrogReward(BaseModel):
    """
    A granted frog.

    Built fresh for every grant: two rewards sampled from the same frog
    definition carry independently rolled attributes and temperament.
    """

    frog_id: int
    name: str
    description: str
    image_url: str
    biome: Biome
    rarity: Rarity
    temperament: Temperament
    jump: int
    speed: int
    intelligence: int
    beauty: int
    timestamp_signed: int  # epoch milliseconds
    owner_semaphore_id: str
