"""Media record request/response schemas.

Request models only check types. byte_count is strict so a JSON true is
rejected rather than read as 1. Field bounds are enforced by the registry so
each violation reports its own error kind.
"""
from datetime import datetime
from typing import Optional
from pydantic import Field, StrictInt
from media_ledger.schemas.base import CamelModel, CamelORMModel

# Width of the owner and principal columns
PRINCIPAL_MAX_LEN = 100


class MediaCreate(CamelModel):
    name: str
    byte_count: StrictInt
    summary: str
    labels: list[str]


class MediaUpdate(CamelModel):
    """Full replacement of the mutable fields. All four are required."""
    name: str
    byte_count: StrictInt
    summary: str
    labels: list[str]


class TransferRequest(CamelModel):
    new_owner: str = Field(min_length=1, max_length=PRINCIPAL_MAX_LEN)


class MediaResponse(CamelORMModel):
    id: int
    name: str
    owner: str
    byte_count: int
    created_at: int
    summary: str
    labels: list[str]
    recorded_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AccessResponse(CamelModel):
    record_id: int
    principal: str
    can_access: bool


class LedgerResponse(CamelModel):
    total_items: int
    block_height: int
