"""Seed ledger counters on startup.

Idempotent: existing counters are never reset, only missing ones are inserted.
"""
import logging
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from media_ledger.models.ledger_counter import LedgerCounter, TOTAL_ITEMS, BLOCK_HEIGHT

logger = logging.getLogger(__name__)

DEFAULT_COUNTERS = (TOTAL_ITEMS, BLOCK_HEIGHT)


async def _seed_counters(session: AsyncSession) -> None:
    """Insert any missing counter rows at 0."""
    result = await session.execute(
        select(LedgerCounter.name).where(LedgerCounter.name.in_(DEFAULT_COUNTERS))
    )
    existing = set(result.scalars().all())

    missing = [name for name in DEFAULT_COUNTERS if name not in existing]
    if not missing:
        logger.info("Ledger counters already seeded")
        return

    for name in missing:
        session.add(LedgerCounter(name=name, value=0))
    await session.flush()
    logger.info("Seeded %d ledger counter(s): %s", len(missing), ", ".join(missing))


async def seed_all_defaults(session: AsyncSession) -> None:
    """Idempotent entry point: seed all default data."""
    logger.info("Checking seed defaults...")
    await _seed_counters(session)
    await session.commit()
    logger.info("Seed defaults check complete")
