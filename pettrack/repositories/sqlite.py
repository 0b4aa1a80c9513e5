"""Repository adapters backed by aiosqlite."""

from datetime import date
from typing import Optional

import aiosqlite

from pettrack.domain.pet import Pet
from pettrack.domain.repositories import PetRepository, WeightRepository
from pettrack.domain.weight import Weight


def _row_to_pet(row: aiosqlite.Row) -> Pet:
    return Pet(id=row["id"], name=row["name"])


def _row_to_weight(row: aiosqlite.Row) -> Weight:
    return Weight(
        id=row["id"],
        pet_id=row["pet_id"],
        weight=row["weight"],
        date=date.fromisoformat(row["date"]),
    )


class SqlitePetRepository(PetRepository):
    def __init__(self, db: aiosqlite.Connection) -> None:
        self._db = db

    async def find_by_id(self, pet_id: str) -> Optional[Pet]:
        async with self._db.execute("SELECT * FROM pets WHERE id = ?", (pet_id,)) as cur:
            row = await cur.fetchone()
        return _row_to_pet(row) if row else None

    async def save(self, pet: Pet) -> Pet:
        await self._db.execute(
            """INSERT INTO pets (id, name) VALUES (?, ?)
               ON CONFLICT(id) DO UPDATE SET name = excluded.name""",
            (pet.id, pet.name),
        )
        await self._db.commit()
        async with self._db.execute("SELECT * FROM pets WHERE id = ?", (pet.id,)) as cur:
            row = await cur.fetchone()
        return _row_to_pet(row)


class SqliteWeightRepository(WeightRepository):
    def __init__(self, db: aiosqlite.Connection) -> None:
        self._db = db

    async def find_by_pet_id(self, pet_id: str) -> list[Weight]:
        # rowid keeps insertion order among measurements sharing a date
        rows = await self._db.execute_fetchall(
            "SELECT * FROM weights WHERE pet_id = ? ORDER BY date DESC, rowid ASC",
            (pet_id,),
        )
        return [_row_to_weight(r) for r in rows]

    async def save(self, weight: Weight) -> Weight:
        await self._db.execute(
            """INSERT INTO weights (id, pet_id, weight, date) VALUES (?, ?, ?, ?)
               ON CONFLICT(id) DO UPDATE SET weight = excluded.weight, date = excluded.date""",
            (weight.id, weight.pet_id, weight.weight, weight.date.isoformat()),
        )
        await self._db.commit()
        async with self._db.execute("SELECT * FROM weights WHERE id = ?", (weight.id,)) as cur:
            row = await cur.fetchone()
        return _row_to_weight(row)
