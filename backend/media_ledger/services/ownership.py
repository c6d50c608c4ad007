"""Record lookup and the owner capability check shared by the store and the access matrix."""
from sqlalchemy.ext.asyncio import AsyncSession

from media_ledger.errors import MissingRecordError, OwnershipViolationError
from media_ledger.models.media_record import MediaRecord


async def load_record(db: AsyncSession, record_id: int) -> MediaRecord:
    record = await db.get(MediaRecord, record_id)
    if record is None:
        raise MissingRecordError(record_id)
    return record


async def require_owner(db: AsyncSession, record_id: int, caller: str) -> MediaRecord:
    """Load a record and assert caller == owner. Existence is checked first."""
    record = await load_record(db, record_id)
    if record.owner != caller:
        raise OwnershipViolationError(
            record_id,
            current_owner=record.owner,
            requesting_principal=caller,
        )
    return record
