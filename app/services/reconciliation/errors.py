"""Error taxonomy for reconciliation requests."""

from typing import Optional


class ReconciliationError(Exception):
    """Base class for request-level reconciliation failures."""


class ReconciliationValidationError(ReconciliationError):
    """Malformed request or missing identifiers (400)."""


class ReconciliationAuthorizationError(ReconciliationError):
    """Caller lacks access to the source or a target company (403)."""

    def __init__(self, message: str, company_id: Optional[str] = None):
        super().__init__(message)
        self.company_id = company_id


class DatastoreError(ReconciliationError):
    """A datastore read failed; the message is passed through to the caller (500)."""
