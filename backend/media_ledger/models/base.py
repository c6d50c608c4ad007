"""SQLAlchemy declarative base and shared mixins."""
from datetime import datetime
from sqlalchemy import DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class AuditTimestampMixin:
    """Adds wall-clock recorded_at and updated_at columns.

    These are bookkeeping only. Ledger ordering uses the host height, not wall time.
    """
    recorded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
