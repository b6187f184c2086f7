from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

from .datetime_utils import parse_iso_date, parse_iso_datetime
from ..core.constants import MONEY_PLACES
from ..core.enums import ValidationReason
from ..core.exceptions import ValidationError


def _require_str(value: object, field_name: str) -> None:
    if value is not None and not isinstance(value, str):
        raise ValidationError(ValidationReason.INVALID_FORMAT, f"{field_name} must be text", field=field_name)


def require_non_empty(value: Optional[str], field_name: str) -> str:
    _require_str(value, field_name)
    if not value or not value.strip():
        raise ValidationError(ValidationReason.REQUIRED, f"{field_name} is required", field=field_name)
    return value.strip()


def require_max_length(value: Optional[str], field_name: str, max_len: int) -> Optional[str]:
    if value is not None and len(value) > max_len:
        raise ValidationError(
            ValidationReason.MAX_LENGTH,
            f"{field_name} must be at most {max_len} characters",
            field=field_name,
        )
    return value


def required_text(value: Optional[str], field_name: str, max_len: int) -> str:
    return require_max_length(require_non_empty(value, field_name), field_name, max_len)


def optional_text(value: Optional[str], field_name: str, max_len: int) -> Optional[str]:
    _require_str(value, field_name)
    value = (value or "").strip() or None
    return require_max_length(value, field_name, max_len)


def require_money(value: object, field_name: str) -> Decimal:
    """Non-negative amount with at most two fractional digits."""
    if value is None or value == "":
        return Decimal("0.00")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(ValidationReason.INVALID_FORMAT, f"{field_name} is not a number", field=field_name)

    if not amount.is_finite():
        raise ValidationError(ValidationReason.INVALID_FORMAT, f"{field_name} is not a number", field=field_name)
    if amount < 0:
        raise ValidationError(ValidationReason.RANGE, f"{field_name} cannot be negative", field=field_name)
    if amount != amount.quantize(MONEY_PLACES):
        raise ValidationError(
            ValidationReason.INVALID_FORMAT,
            f"{field_name} has more than two decimal places",
            field=field_name,
        )
    return amount.quantize(MONEY_PLACES)


def require_id(value: object, field_name: str) -> int:
    try:
        ident = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValidationError(ValidationReason.REQUIRED, f"{field_name} is required", field=field_name)
    if ident <= 0:
        raise ValidationError(ValidationReason.RANGE, f"{field_name} is not valid", field=field_name)
    return ident


def require_date(value: object, field_name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        raise ValidationError(ValidationReason.REQUIRED, f"{field_name} is required", field=field_name)
    try:
        return parse_iso_date(str(value))
    except ValueError:
        raise ValidationError(ValidationReason.INVALID_FORMAT, f"{field_name} must be YYYY-MM-DD", field=field_name)


def optional_datetime(value: object, field_name: str) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    try:
        return parse_iso_datetime(str(value))
    except ValueError:
        raise ValidationError(ValidationReason.INVALID_FORMAT, f"{field_name} is not a valid date/time", field=field_name)


def require_datetime(value: object, field_name: str) -> datetime:
    parsed = optional_datetime(value, field_name)
    if parsed is None:
        raise ValidationError(ValidationReason.REQUIRED, f"{field_name} is required", field=field_name)
    return parsed


_TRUE_WORDS = {"true", "1"}
_FALSE_WORDS = {"false", "0"}


def require_flag(value: object, field_name: str, *, default: bool = False) -> bool:
    """JSON boolean, or one of "true"/"false"/"1"/"0"."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise ValidationError(ValidationReason.INVALID_FORMAT, f"{field_name} must be true or false", field=field_name)
