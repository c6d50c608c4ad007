"""AccessGrant model - per-record access matrix keyed by (record_id, principal)."""
from sqlalchemy import BigInteger, Boolean, String
from sqlalchemy.orm import Mapped, mapped_column
from media_ledger.models.base import Base


class AccessGrant(Base):
    __tablename__ = "access_grants"

    record_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    principal: Mapped[str] = mapped_column(String(100), primary_key=True)
    can_access: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
