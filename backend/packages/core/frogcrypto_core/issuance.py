"""
Reward issuance.

Packaging a reward into a portable, signed credential happens outside this
service. ``RewardIssuer`` is the seam; ``UnsignedRewardIssuer`` serializes
rewards as-is for deployments without a signing backend.
"""

from abc import ABC, abstractmethod
from typing import Any

from frogcrypto_core.schemas import FrogReward

REWARD_PCD_TYPE = "frogcrypto-reward"


class RewardIssuer(ABC):
    """Turns synthesized rewards into client-side credentials."""

    @abstractmethod
    async def issue(self, semaphore_id: str, reward: FrogReward) -> list[dict[str, Any]]:
        """
        Issue a reward to a user.

        Args:
            semaphore_id: Recipient identifier.
            reward: Synthesized reward data.

        Returns:
            Serialized credentials to append to the user's collection.
        """


class UnsignedRewardIssuer(RewardIssuer):
    """Return rewards as unsigned JSON envelopes."""

    async def issue(self, semaphore_id: str, reward: FrogReward) -> list[dict[str, Any]]:
        return [
            {
                "type": REWARD_PCD_TYPE,
                "owner": semaphore_id,
                "pcd": reward.model_dump(mode="json"),
            }
        ]
