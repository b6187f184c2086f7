from __future__ import annotations

from enum import Enum


class AddressType(str, Enum):
    """Who an address belongs to."""

    EMPLOYEE = "EMPLOYEE"
    OFFICE = "OFFICE"


class ValidationReason(str, Enum):
    """Machine-readable reason attached to every ValidationError."""

    START_AFTER_END = "start-after-end"
    FUTURE_PERIOD = "future-period"
    OVERLAP = "overlap"
    TERMINATED_EMPLOYEE = "terminated-employee"
    REQUIRED = "required"
    MAX_LENGTH = "max-length"
    RANGE = "range"
    INVALID_FORMAT = "invalid-format"
