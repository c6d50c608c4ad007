"""Monotonic counters backed by the ledger_counters table.

Counter writes only ever happen inside the caller's pending transaction, so a
rolled-back call leaves every counter where it was.
"""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from media_ledger.models.ledger_counter import LedgerCounter, TOTAL_ITEMS


async def read_counter(db: AsyncSession, name: str) -> int:
    """Current value of a counter. A counter that was never seeded reads as 0."""
    result = await db.execute(select(LedgerCounter.value).where(LedgerCounter.name == name))
    value = result.scalar_one_or_none()
    return value or 0


async def advance_counter(db: AsyncSession, name: str) -> int:
    """Increment a counter in the pending transaction and return the new value.

    The row is locked FOR UPDATE (a no-op on SQLite) so concurrent callers
    serialize on it until commit.
    """
    result = await db.execute(
        select(LedgerCounter).where(LedgerCounter.name == name).with_for_update()
    )
    counter = result.scalar_one_or_none()
    if counter is None:
        counter = LedgerCounter(name=name, value=0)
        db.add(counter)
    counter.value = (counter.value or 0) + 1
    await db.flush()
    return counter.value


class SequenceGenerator:
    """Source of record ids: next id is always prior counter value + 1."""

    def __init__(self, db: AsyncSession, counter_name: str = TOTAL_ITEMS):
        self.db = db
        self.counter_name = counter_name

    async def next_id(self) -> int:
        # Only ArchiveStore.create calls this, inside the creation transaction
        return await advance_counter(self.db, self.counter_name)

    async def current(self) -> int:
        return await read_counter(self.db, self.counter_name)
