"""Shared Pydantic schemas."""
from typing import Any, Optional
from pydantic import BaseModel


class OkResponse(BaseModel):
    ok: Any = True


class ErrorResponse(BaseModel):
    error: str
    detail: str
    details: Optional[dict] = None
