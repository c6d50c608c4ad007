"""Per-record access matrix: (record_id, principal) -> can_access.

None of these methods commit. They write into the caller's transaction.
"""
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from media_ledger.models.access_grant import AccessGrant
from media_ledger.services.ownership import require_owner


class AccessMatrix:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(self, record_id: int, principal: str) -> None:
        """Grant the creator access. Only called from ArchiveStore.create."""
        await self._upsert(record_id, principal, True)

    async def grant(self, record_id: int, principal: str, caller: str) -> None:
        await require_owner(self.db, record_id, caller)
        await self._upsert(record_id, principal, True)

    async def revoke(self, record_id: int, principal: str, caller: str) -> None:
        """Store an explicit false. Succeeds even if there was never a grant."""
        await require_owner(self.db, record_id, caller)
        await self._upsert(record_id, principal, False)

    async def check(self, record_id: int, principal: str) -> bool:
        result = await self.db.execute(
            select(AccessGrant.can_access).where(
                AccessGrant.record_id == record_id,
                AccessGrant.principal == principal,
            )
        )
        return bool(result.scalar_one_or_none())

    async def purge(self, record_id: int) -> None:
        await self.db.execute(delete(AccessGrant).where(AccessGrant.record_id == record_id))

    async def _upsert(self, record_id: int, principal: str, can_access: bool) -> None:
        entry = await self.db.get(AccessGrant, (record_id, principal))
        if entry is None:
            self.db.add(AccessGrant(record_id=record_id, principal=principal, can_access=can_access))
        else:
            entry.can_access = can_access
        await self.db.flush()
