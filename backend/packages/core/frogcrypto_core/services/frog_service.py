"""
Frog service.

Item store access: admin upsert/delete, listing and weighted sampling.
"""

import random

from sqlalchemy import delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from frogcrypto_core.sampling import weighted_choice
from frogcrypto_core.schemas import FrogResponse, FrogUpsert, Rarity
from frogcrypto_database.models import Frog


class FrogService:
    """Frog definition management and sampling service."""

    def __init__(self, session: AsyncSession):
        """
        Initialize frog service.

        Args:
            session: Database session.
        """
        self.session = session

    async def list_frogs(self) -> list[FrogResponse]:
        """
        Get all frog definitions ordered by id.

        Returns:
            List of frog responses.
        """
        result = await self.session.execute(select(Frog).order_by(Frog.id))
        return [FrogResponse.model_validate(frog) for frog in result.scalars().all()]

    async def upsert_frogs(self, frogs: list[FrogUpsert]) -> None:
        """
        Insert or update frog definitions by id and commit.

        Args:
            frogs: Frog definitions.
        """
        if not frogs:
            return

        rows = [frog.model_dump(mode="json") for frog in frogs]
        stmt = insert(Frog).values(rows)
        update_columns = {
            column: stmt.excluded[column] for column in rows[0] if column != "id"
        }
        update_columns["updated_at"] = func.now()
        stmt = stmt.on_conflict_do_update(index_elements=[Frog.id], set_=update_columns)

        await self.session.execute(stmt)
        await self.session.commit()

    async def delete_frogs(self, frog_ids: list[int]) -> None:
        """
        Delete frog definitions by id and commit. Unknown ids are ignored.

        Args:
            frog_ids: Frog identifiers.
        """
        if not frog_ids:
            return
        await self.session.execute(delete(Frog).where(Frog.id.in_(frog_ids)))
        await self.session.commit()

    async def get_possible_frog_ids(self) -> list[int]:
        """
        Ids of all collectible frogs, for client-side completion tracking.

        Returns:
            Sorted frog ids, excluding non-collectible objects.
        """
        stmt = (
            select(Frog.id)
            .where(func.lower(Frog.rarity) != Rarity.OBJECT.value)
            .order_by(Frog.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def sample_frog(
        self, biome_scalers: dict[str, float], rng: random.Random | None = None
    ) -> Frog | None:
        """
        Draw one frog restricted to the given biomes.

        A frog's weight is its drop weight times the scaler of its biome.
        Runs in the caller's transaction and does not commit.

        Args:
            biome_scalers: Eligible biome code -> drop weight scaler.
            rng: Random source.

        Returns:
            The sampled frog, or None if nothing is eligible.
        """
        if not biome_scalers:
            return None

        stmt = (
            select(Frog.id, Frog.biome, Frog.drop_weight)
            .where(Frog.biome.in_(list(biome_scalers)))
            .where(Frog.drop_weight > 0)
            .order_by(Frog.id)
        )
        result = await self.session.execute(stmt)
        candidates = [
            (row.id, float(row.drop_weight) * float(biome_scalers.get(row.biome, 0.0)))
            for row in result.all()
        ]

        frog_id = weighted_choice(candidates, rng)
        if frog_id is None:
            return None
        return await self.session.get(Frog, frog_id)
