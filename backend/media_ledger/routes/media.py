"""Media records API routes.

Mutating routes take a CallContext, which advances the block height in the
same session the operation commits or rolls back.
"""
from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from media_ledger.database import get_db
from media_ledger.schemas.common import OkResponse
from media_ledger.schemas.media import (
    AccessResponse,
    MediaCreate,
    MediaResponse,
    MediaUpdate,
    PRINCIPAL_MAX_LEN,
    TransferRequest,
)
from media_ledger.services import registry
from media_ledger.services.host import CallContext, get_call_context

router = APIRouter(prefix="/api/media", tags=["media"])


@router.post("", response_model=OkResponse, status_code=201)
async def archive_media(
    body: MediaCreate,
    ctx: CallContext = Depends(get_call_context),
    db: AsyncSession = Depends(get_db),
):
    """Register a new media record owned by the caller."""
    record_id = await registry.archive_new_media(
        db, ctx, body.name, body.byte_count, body.summary, body.labels
    )
    return {"ok": record_id}


@router.get("/{record_id}", response_model=MediaResponse)
async def get_media(
    record_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a single media record. Reads are not access-gated."""
    return await registry.get_media_record(db, record_id)


@router.put("/{record_id}", response_model=OkResponse)
async def modify_media(
    record_id: int,
    body: MediaUpdate,
    ctx: CallContext = Depends(get_call_context),
    db: AsyncSession = Depends(get_db),
):
    """Replace name, byte count, summary and labels. Owner only."""
    await registry.modify_media_metadata(
        db, ctx, record_id, body.name, body.byte_count, body.summary, body.labels
    )
    return {"ok": True}


@router.post("/{record_id}/transfer", response_model=OkResponse)
async def transfer_media(
    record_id: int,
    body: TransferRequest,
    ctx: CallContext = Depends(get_call_context),
    db: AsyncSession = Depends(get_db),
):
    await registry.transfer_media_ownership(db, ctx, record_id, body.new_owner)
    return {"ok": True}


@router.delete("/{record_id}", response_model=OkResponse)
async def remove_media(
    record_id: int,
    ctx: CallContext = Depends(get_call_context),
    db: AsyncSession = Depends(get_db),
):
    await registry.remove_media_record(db, ctx, record_id)
    return {"ok": True}


@router.get("/{record_id}/access/{principal}", response_model=AccessResponse)
async def check_access(
    record_id: int,
    principal: str = Path(min_length=1, max_length=PRINCIPAL_MAX_LEN),
    db: AsyncSession = Depends(get_db),
):
    """False when there is no entry, including for deleted or unknown records."""
    can_access = await registry.check_media_access(db, record_id, principal)
    return {"record_id": record_id, "principal": principal, "can_access": can_access}


@router.put("/{record_id}/access/{principal}", response_model=OkResponse)
async def grant_access(
    record_id: int,
    principal: str = Path(min_length=1, max_length=PRINCIPAL_MAX_LEN),
    ctx: CallContext = Depends(get_call_context),
    db: AsyncSession = Depends(get_db),
):
    await registry.grant_media_access(db, ctx, record_id, principal)
    return {"ok": True}


@router.delete("/{record_id}/access/{principal}", response_model=OkResponse)
async def revoke_access(
    record_id: int,
    principal: str = Path(min_length=1, max_length=PRINCIPAL_MAX_LEN),
    ctx: CallContext = Depends(get_call_context),
    db: AsyncSession = Depends(get_db),
):
    await registry.revoke_media_access(db, ctx, record_id, principal)
    return {"ok": True}
