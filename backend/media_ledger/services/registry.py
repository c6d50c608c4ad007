"""Registry operations.

Each public operation is one transaction: validation, the owner check and all
writes commit together, or the session is rolled back and the error kind
propagates to the caller. Nothing here retries.
"""
import logging
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from media_ledger.errors import MissingRecordError, RegistryError
from media_ledger.models.media_record import MediaRecord
from media_ledger.services.access_matrix import AccessMatrix
from media_ledger.services.archive_store import ArchiveStore
from media_ledger.services.host import CallContext, current_height
from media_ledger.services.sequence import SequenceGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _atomic(db: AsyncSession, operation: str, ctx: CallContext, record_id: int | None = None):
    try:
        yield
        await db.commit()
    except Exception as e:
        await db.rollback()
        if isinstance(e, RegistryError):
            logger.warning(
                "%s rejected: kind=%s record=%s caller=%s", operation, e.kind, record_id, ctx.caller
            )
        raise


async def archive_new_media(
    db: AsyncSession,
    ctx: CallContext,
    name: str,
    byte_count: int,
    summary: str,
    labels: list[str],
) -> int:
    """Register a new record owned by the caller. Returns the new record id."""
    async with _atomic(db, "archive_new_media", ctx):
        record_id = await ArchiveStore(db).create(
            name, byte_count, summary, labels, caller=ctx.caller, height=ctx.height
        )
    logger.info("Archived media record %s for %s at height %s", record_id, ctx.caller, ctx.height)
    return record_id


async def modify_media_metadata(
    db: AsyncSession,
    ctx: CallContext,
    record_id: int,
    name: str,
    byte_count: int,
    summary: str,
    labels: list[str],
) -> bool:
    async with _atomic(db, "modify_media_metadata", ctx, record_id):
        await ArchiveStore(db).update(record_id, name, byte_count, summary, labels, caller=ctx.caller)
    logger.info("Updated media record %s", record_id)
    return True


async def transfer_media_ownership(db: AsyncSession, ctx: CallContext, record_id: int, new_owner: str) -> bool:
    async with _atomic(db, "transfer_media_ownership", ctx, record_id):
        await ArchiveStore(db).transfer(record_id, new_owner, caller=ctx.caller)
    logger.info("Transferred media record %s from %s to %s", record_id, ctx.caller, new_owner)
    return True


async def remove_media_record(db: AsyncSession, ctx: CallContext, record_id: int) -> bool:
    async with _atomic(db, "remove_media_record", ctx, record_id):
        await ArchiveStore(db).delete(record_id, caller=ctx.caller)
    logger.info("Removed media record %s", record_id)
    return True


async def grant_media_access(db: AsyncSession, ctx: CallContext, record_id: int, principal: str) -> bool:
    async with _atomic(db, "grant_media_access", ctx, record_id):
        await AccessMatrix(db).grant(record_id, principal, caller=ctx.caller)
    logger.info("Granted %s access to media record %s", principal, record_id)
    return True


async def revoke_media_access(db: AsyncSession, ctx: CallContext, record_id: int, principal: str) -> bool:
    async with _atomic(db, "revoke_media_access", ctx, record_id):
        await AccessMatrix(db).revoke(record_id, principal, caller=ctx.caller)
    logger.info("Revoked %s access to media record %s", principal, record_id)
    return True


async def get_media_record(db: AsyncSession, record_id: int) -> MediaRecord:
    """Unrestricted read. The access matrix is not consulted."""
    record = await ArchiveStore(db).read(record_id)
    if record is None:
        raise MissingRecordError(record_id)
    return record


async def check_media_access(db: AsyncSession, record_id: int, principal: str) -> bool:
    return await AccessMatrix(db).check(record_id, principal)


async def ledger_snapshot(db: AsyncSession) -> dict:
    return {
        "total_items": await SequenceGenerator(db).current(),
        "block_height": await current_height(db),
    }
