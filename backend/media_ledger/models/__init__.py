"""Import all models so SQLAlchemy metadata knows about them."""
from media_ledger.models.base import Base
from media_ledger.models.media_record import MediaRecord
from media_ledger.models.access_grant import AccessGrant
from media_ledger.models.ledger_counter import LedgerCounter, TOTAL_ITEMS, BLOCK_HEIGHT

__all__ = [
    "Base",
    "MediaRecord", "AccessGrant", "LedgerCounter",
    "TOTAL_ITEMS", "BLOCK_HEIGHT",
]
