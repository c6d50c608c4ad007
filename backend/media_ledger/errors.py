"""
Registry errors - one exception class per error kind.

Error hierarchy:
    RegistryError (base)
    ├── OwnershipViolationError      ownership-violation   403
    ├── AccessRestrictedError        access-restriction    403  (reserved)
    ├── ViewLimitedError             view-limitation       403  (reserved)
    ├── InvalidNameError             invalid-name          400
    ├── InvalidSizeError             invalid-size          400
    ├── MalformedLabelError          malformed-label       400
    ├── MissingRecordError           missing-record        404
    └── DuplicateEntryError          duplicate-entry       409  (reserved)

Reserved kinds are part of the error set but no operation raises them.
"""

from __future__ import annotations

from typing import Any


class RegistryError(Exception):
    """Base error for all registry operations."""

    kind: str = "registry-error"
    status_code: int = 400

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.kind, "detail": self.message}
        if self.details:
            body["details"] = self.details
        return body


class OwnershipViolationError(RegistryError):
    """
    Raised when the caller is not the record's current owner.

    Carries both identities so the rejection can be logged without a re-read.
    """

    kind = "ownership-violation"
    status_code = 403

    def __init__(
        self,
        record_id: int,
        current_owner: str | None = None,
        requesting_principal: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(f"Caller is not the owner of media record {record_id}", details)
        self.record_id = record_id
        self.current_owner = current_owner
        self.requesting_principal = requesting_principal


class AccessRestrictedError(RegistryError):
    """Reserved: principal has no access grant on a record."""

    kind = "access-restriction"
    status_code = 403


class ViewLimitedError(RegistryError):
    """Reserved: principal may not view a record."""

    kind = "view-limitation"
    status_code = 403


class InvalidNameError(RegistryError):
    """Name (or summary) outside its length bounds."""

    kind = "invalid-name"


class InvalidSizeError(RegistryError):
    kind = "invalid-size"


class MalformedLabelError(RegistryError):
    """Label set empty, too long, or containing an out-of-bounds label."""

    kind = "malformed-label"


class MissingRecordError(RegistryError):
    kind = "missing-record"
    status_code = 404

    def __init__(self, record_id: int, details: dict[str, Any] | None = None):
        super().__init__(f"Media record {record_id} not found", details)
        self.record_id = record_id


class DuplicateEntryError(RegistryError):
    """Reserved: ids are generator-assigned so a collision cannot occur."""

    kind = "duplicate-entry"
    status_code = 409
