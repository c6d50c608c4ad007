"""Ledger counters API route."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from media_ledger.database import get_db
from media_ledger.schemas.media import LedgerResponse
from media_ledger.services.registry import ledger_snapshot

router = APIRouter(prefix="/api/ledger", tags=["ledger"])


@router.get("", response_model=LedgerResponse)
async def get_ledger(db: AsyncSession = Depends(get_db)):
    """Current record sequence value and block height."""
    return await ledger_snapshot(db)
