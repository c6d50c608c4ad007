"""ArchiveStore - record id -> media record, and the record lifecycle.

absent -> active (create) -> active (update / transfer) -> absent (delete)

Every check runs before the first write. The store never commits; the
registry wraps each call in one transaction and rolls back on any error.
"""
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from media_ledger.models.media_record import MediaRecord
from media_ledger.services.access_matrix import AccessMatrix
from media_ledger.services.ownership import require_owner
from media_ledger.services.sequence import SequenceGenerator
from media_ledger.services.validator import check_media_fields


@dataclass(frozen=True)
class MediaFields:
    """The mutable subset of a record. owner, created_at and id are not representable here."""
    name: str
    byte_count: int
    summary: str
    labels: tuple

    @classmethod
    def of(cls, name, byte_count, summary, labels) -> "MediaFields":
        check_media_fields(name, byte_count, summary, labels)
        return cls(name=name, byte_count=byte_count, summary=summary, labels=tuple(labels))

    def apply_to(self, record: MediaRecord) -> MediaRecord:
        record.name = self.name
        record.byte_count = self.byte_count
        record.summary = self.summary
        record.labels = list(self.labels)
        return record


class ArchiveStore:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.sequence = SequenceGenerator(db)
        self.access = AccessMatrix(db)

    async def create(self, name, byte_count, summary, labels, caller: str, height: int) -> int:
        fields = MediaFields.of(name, byte_count, summary, labels)
        record_id = await self.sequence.next_id()
        record = fields.apply_to(MediaRecord(id=record_id, owner=caller, created_at=height))
        self.db.add(record)
        await self.db.flush()
        await self.access.insert(record_id, caller)
        return record_id

    async def read(self, record_id: int) -> MediaRecord | None:
        return await self.db.get(MediaRecord, record_id)

    async def update(self, record_id: int, name, byte_count, summary, labels, caller: str) -> MediaRecord:
        record = await require_owner(self.db, record_id, caller)
        fields = MediaFields.of(name, byte_count, summary, labels)
        fields.apply_to(record)
        await self.db.flush()
        return record

    async def transfer(self, record_id: int, new_owner: str, caller: str) -> MediaRecord:
        record = await require_owner(self.db, record_id, caller)
        # Transferring to oneself is allowed and changes nothing
        record.owner = new_owner
        await self.db.flush()
        return record

    async def delete(self, record_id: int, caller: str) -> None:
        record = await require_owner(self.db, record_id, caller)
        await self.db.delete(record)
        await self.access.purge(record_id)
        await self.db.flush()
