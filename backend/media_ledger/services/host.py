"""Execution environment: who is calling, and at what height.

Routes take a CallContext from get_call_context. The core operations only see
the CallContext, never the request.
"""
from dataclasses import dataclass

from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from media_ledger.config import settings
from media_ledger.database import get_db
from media_ledger.models.ledger_counter import BLOCK_HEIGHT
from media_ledger.schemas.media import PRINCIPAL_MAX_LEN
from media_ledger.services.sequence import advance_counter, read_counter


@dataclass(frozen=True)
class CallContext:
    caller: str
    height: int


def read_caller(request: Request) -> str:
    """Caller identity from the configured header. Missing, blank or over-long is rejected."""
    caller = (request.headers.get(settings.CALLER_HEADER) or "").strip()
    if not caller:
        raise HTTPException(status_code=422, detail=f"Missing {settings.CALLER_HEADER} header")
    if len(caller) > PRINCIPAL_MAX_LEN:
        raise HTTPException(
            status_code=422,
            detail=f"{settings.CALLER_HEADER} must be at most {PRINCIPAL_MAX_LEN} characters",
        )
    return caller


async def get_call_context(
    caller: str = Depends(read_caller),
    db: AsyncSession = Depends(get_db),
) -> CallContext:
    """FastAPI dependency for mutating calls.

    Advances the block height in the request's session. The bump commits with
    the operation, or disappears with it on rollback.
    """
    height = await advance_counter(db, BLOCK_HEIGHT)
    return CallContext(caller=caller, height=height)


async def current_height(db: AsyncSession) -> int:
    return await read_counter(db, BLOCK_HEIGHT)
