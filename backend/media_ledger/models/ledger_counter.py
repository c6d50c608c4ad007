"""LedgerCounter model - named scalar counters (record sequence, host height)."""
from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column
from media_ledger.models.base import Base

TOTAL_ITEMS = "total_items"
BLOCK_HEIGHT = "block_height"


class LedgerCounter(Base):
    __tablename__ = "ledger_counters"

    name: Mapped[str] = mapped_column(String(50), primary_key=True)
    value: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
