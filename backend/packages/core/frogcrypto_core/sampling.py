"""
Weighted sampling and reward synthesis.

Pure functions shared by the reservation path. Randomness is always drawn
from an injectable ``random.Random`` so tests can seed it.
"""

import random
from collections.abc import Iterable, Mapping
from datetime import datetime
from enum import Enum
from typing import Any, TypeVar

from frogcrypto_core.clock import to_epoch_ms
from frogcrypto_core.exceptions import DataIntegrityError
from frogcrypto_core.schemas import Biome, FrogReward, Rarity, Temperament

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

_system_random = random.SystemRandom()


def weighted_choice(
    candidates: Iterable[tuple[T, float]], rng: random.Random | None = None
) -> T | None:
    """
    Pick one candidate with probability proportional to its weight.

    Cumulative weights are built in iteration order, a uniform value is drawn
    from ``[0, total)`` and the first candidate whose cumulative weight
    exceeds it wins. Candidates with a weight of zero or less are never
    picked.

    Args:
        candidates: (value, weight) pairs in a stable order.
        rng: Random source, system randomness when None.

    Returns:
        The chosen value, or None if no candidate has a positive weight.
    """
    rng = rng or _system_random
    pool = [(value, weight) for value, weight in candidates if weight > 0]
    total = sum(weight for _, weight in pool)
    if not pool or total <= 0:
        return None

    target = rng.random() * total
    cumulative = 0.0
    for value, weight in pool:
        cumulative += weight
        if cumulative > target:
            return value

    # Float rounding can leave target a hair above the last cumulative sum.
    return pool[-1][0]


def sample_attribute(minimum: int, maximum: int, rng: random.Random | None = None) -> int:
    """Roll an attribute uniformly from the inclusive range [minimum, maximum]."""
    if minimum > maximum:
        raise DataIntegrityError(f"Invalid attribute range [{minimum}, {maximum}]")
    return (rng or _system_random).randint(minimum, maximum)


def parse_enum(enum_cls: type[E], code: str) -> E:
    """
    Map a stored code to its public enum member.

    Matches the member value first, then the member name, case-insensitively.

    Raises:
        DataIntegrityError: If the code matches no member.
    """
    wanted = str(code).strip().lower()
    for member in enum_cls:
        if str(member.value).lower() == wanted or member.name.lower() == wanted:
            return member
    raise DataIntegrityError(f"Unknown {enum_cls.__name__} code: {code!r}")


def sample_temperament(
    weights: Mapping[str, float], rng: random.Random | None = None
) -> Temperament:
    """
    Roll a temperament from a temperament -> weight mapping.

    A frog without temperament weights has no temperament (``N/A``).
    """
    if not weights:
        return Temperament.N_A

    parsed = [(parse_enum(Temperament, code), float(weight)) for code, weight in sorted(weights.items())]
    choice = weighted_choice(parsed, rng)
    return choice if choice is not None else Temperament.N_A


def build_image_url(server_url: str, frog_uuid: str) -> str:
    """Content-addressed image reference for a frog."""
    return f"{server_url.rstrip('/')}/frogcrypto/images/{frog_uuid}"


def synthesize_reward(
    frog: Any,
    owner_semaphore_id: str,
    server_url: str,
    issued_at: datetime,
    rng: random.Random | None = None,
) -> FrogReward:
    """
    Build a reward from a sampled frog definition.

    Args:
        frog: Frog row (anything with the Frog model's attributes).
        owner_semaphore_id: Recipient identifier.
        server_url: Base URL for the image reference.
        issued_at: Issuance time.
        rng: Random source.

    Returns:
        Freshly rolled reward.

    Raises:
        DataIntegrityError: If the stored biome, rarity, temperament or
            attribute ranges are invalid.
    """
    return FrogReward(
        frog_id=frog.id,
        name=frog.name,
        description=frog.description,
        image_url=build_image_url(server_url, frog.uuid),
        biome=parse_enum(Biome, frog.biome),
        rarity=parse_enum(Rarity, frog.rarity),
        temperament=sample_temperament(frog.temperament_weights or {}, rng),
        jump=sample_attribute(frog.jump_min, frog.jump_max, rng),
        speed=sample_attribute(frog.speed_min, frog.speed_max, rng),
        intelligence=sample_attribute(frog.intelligence_min, frog.intelligence_max, rng),
        beauty=sample_attribute(frog.beauty_min, frog.beauty_max, rng),
        timestamp_signed=to_epoch_ms(issued_at),
        owner_semaphore_id=owner_semaphore_id,
    )
