from __future__ import annotations

from typing import Optional

from .enums import ValidationReason


class DomainError(Exception):
    """Base exception for business rule violations."""


class NotFoundError(DomainError):
    """Raised when a referenced entity id does not exist."""

    def __init__(self, entity: str, entity_id: object):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, reason: ValidationReason, message: str, *, field: Optional[str] = None):
        super().__init__(message)
        self.reason = reason
        self.field = field


class InvalidStateError(DomainError):
    """Raised when a lifecycle precondition does not hold."""


class StoreError(DomainError):
    """Raised when the underlying store fails; the transaction was rolled back."""
