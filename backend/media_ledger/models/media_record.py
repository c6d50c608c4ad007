"""MediaRecord model - media metadata entry (no bytes are stored)."""
from sqlalchemy import BigInteger, JSON, String
from sqlalchemy.orm import Mapped, mapped_column
from media_ledger.models.base import Base, AuditTimestampMixin


class MediaRecord(Base, AuditTimestampMixin):
    __tablename__ = "media_records"

    # Assigned by SequenceGenerator, never by the database or the caller
    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(63), nullable=False)
    owner: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    byte_count: Mapped[int] = mapped_column(BigInteger, nullable=False)
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    summary: Mapped[str] = mapped_column(String(127), nullable=False)
    labels: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
